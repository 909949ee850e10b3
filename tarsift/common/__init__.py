"""Shared constants, errors, configuration and logging for tarsift."""
