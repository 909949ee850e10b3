"""Archive byte sources."""

from __future__ import annotations

import gzip
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from ..common.constants import STDIN_SOURCE
from ..common.errors import ArchiveOpenError


@contextmanager
def open_archive(path: str) -> Iterator[BinaryIO]:
    """Open ``path`` and yield its gzip-decompressed byte stream.

    ``-`` reads from standard input. The stream is only ever read forward.
    A truncated gzip stream raises ``EOFError`` from ``read``, which callers
    treat as a corrupt archive rather than a normal end of data.
    """
    if path == STDIN_SOURCE:
        raw = sys.stdin.buffer
        owned = False
    else:
        try:
            raw = open(path, "rb")
        except OSError as exc:
            raise ArchiveOpenError(f"Tarball read: {exc}") from exc
        owned = True

    try:
        with gzip.GzipFile(fileobj=raw, mode="rb") as stream:
            yield stream
    finally:
        if owned:
            raw.close()


__all__ = ["open_archive"]
