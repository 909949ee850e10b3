"""Member selection by regular expression."""

from __future__ import annotations

import re
from typing import Optional

from ..common.errors import InvalidPatternError

Pattern = re.Pattern


def compile_pattern(pattern: Optional[str]) -> Optional[Pattern]:
    """Compile the inclusion pattern.

    An empty or missing pattern yields ``None``, which selects every member.
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(f"Invalid file pattern {pattern!r}: {exc}") from exc


def is_selected(name: str, pattern: Optional[Pattern]) -> bool:
    """Return True when ``pattern`` matches anywhere in ``name``.

    The match is unanchored: ``\\.pcap`` selects ``dir/a.pcap.1`` as well.
    """
    if pattern is None:
        return True
    return pattern.search(name) is not None


__all__ = ["Pattern", "compile_pattern", "is_selected"]
