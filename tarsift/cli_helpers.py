"""Shared CLI helpers for tarsift commands."""

import sys
from typing import Optional

from tarsift.common.constants import ExitCodes
from tarsift.common.errors import (
    ArchiveOpenError,
    ArchiveReadError,
    ConfigurationError,
)
from tarsift.common.logging_config import get_logger


def exit_with_error(message: str, exit_code: int) -> None:
    """Log an error message and exit with the specified code."""
    get_logger("tarsift.cli").error(message)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to tarsift exit codes."""
    if isinstance(exc, ConfigurationError):
        return ExitCodes.CONFIGURATION_ERROR
    if isinstance(exc, ArchiveOpenError):
        return ExitCodes.ARCHIVE_OPEN_FAILED
    if isinstance(exc, ArchiveReadError):
        return ExitCodes.ARCHIVE_READ_FAILED
    return None
