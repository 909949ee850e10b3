"""
Custom exception classes for tarsift.

Two families matter to callers: errors that abort the whole run
(configuration, archive open, archive read) and :class:`EntryExtractError`,
which only concerns a single archive member and lets the run continue.
"""


class TarsiftError(Exception):
    """Base exception class for tarsift errors."""
    pass


class ConfigurationError(TarsiftError):
    """Raised when the run configuration is unusable."""
    pass


class InvalidPatternError(ConfigurationError):
    """Raised when the file pattern is not a valid regular expression."""
    pass


class MissingOutputDirError(ConfigurationError):
    """Raised when no output directory is given outside of dry-run mode."""
    pass


class MissingInputError(ConfigurationError):
    """Raised when no input archive is given."""
    pass


class ArchiveOpenError(TarsiftError):
    """Raised when the input archive cannot be opened."""
    pass


class ArchiveReadError(TarsiftError):
    """Raised when the compressed tar stream is corrupt or truncated."""
    pass


class EntryExtractError(TarsiftError):
    """Raised when a single member cannot be written to its output file."""

    def __init__(self, entry_name: str, message: str) -> None:
        super().__init__(f"{entry_name}: {message}")
        self.entry_name = entry_name
