"""Core streaming extraction logic for tarsift."""
