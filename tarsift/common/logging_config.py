"""Logging setup for tarsift.

The CLI configures the root logger once, from ``--log-level`` or the
``TARSIFT_LOG_LEVEL`` environment variable. Library callers may configure
logging themselves instead.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, LOG_LEVELS

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger.

    ``level`` (the ``--log-level`` option) wins over ``TARSIFT_LOG_LEVEL``;
    without either the level is INFO. Unknown names fall back to INFO with a
    warning.
    """
    level_name = (level or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    invalid_level = None
    if level_name not in LOG_LEVELS:
        invalid_level = level_name
        level_name = DEFAULT_LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, level_name),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if invalid_level:
        get_logger().warning(
            "Invalid log level %r; falling back to %s. Valid values: %s.",
            invalid_level,
            DEFAULT_LOG_LEVEL,
            ", ".join(LOG_LEVELS),
        )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger."""
    return logging.getLogger(name or "tarsift")


__all__ = ["configure_logging", "get_logger"]
