"""Streaming filter-and-copy over a gzip-compressed tar archive.

The archive is read once, front to back. For every member the extractor
decides whether it is wanted, and if so copies its bytes into a flat output
file before reading the next header. Unwanted members are never read; the
tar stream skips over them on the way to the next header.

Errors fall into two groups:

* :class:`ArchiveReadError` - the compressed stream or the tar framing is
  broken. The run stops immediately; files written so far stay on disk.
* :class:`EntryExtractError` - one output file could not be opened or written.
  It is logged and the run moves on to the next member.
"""

from __future__ import annotations

import enum
import gzip
import logging
import os
import tarfile
import zlib
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator, List, Optional

from ..common.config import ExtractSettings
from ..common.errors import ArchiveReadError, EntryExtractError
from ..common.logging_config import get_logger
from .paths import map_output_path
from .selection import compile_pattern, is_selected
from .source import open_archive

# Everything the decompressor or tar parser may raise on bad input.
_STREAM_ERRORS = (tarfile.TarError, EOFError, zlib.error, OSError)

_PERMISSION_BITS = 0o7777


class EntryOutcome(enum.Enum):
    """What happened to a single archive member."""

    DIRECTORY = "directory"
    NOT_SELECTED = "not_selected"
    LISTED = "listed"
    EXTRACTED = "extracted"
    FAILED = "failed"


@dataclass
class EntryResult:
    name: str
    outcome: EntryOutcome
    target: Optional[str] = None
    bytes_written: int = 0


@dataclass
class ExtractSummary:
    """Counters for one run."""

    entries: int = 0
    matched: int = 0
    extracted: int = 0
    failed: int = 0
    bytes_written: int = 0
    failures: List[str] = field(default_factory=list)

    def record(self, result: EntryResult) -> None:
        self.entries += 1
        if result.outcome in (EntryOutcome.LISTED, EntryOutcome.EXTRACTED, EntryOutcome.FAILED):
            self.matched += 1
        if result.outcome is EntryOutcome.EXTRACTED:
            self.extracted += 1
            self.bytes_written += result.bytes_written
        elif result.outcome is EntryOutcome.FAILED:
            self.failed += 1
            self.failures.append(result.name)


@contextmanager
def open_sink(path: str, mode: int, out_gzip: bool = False, mtime: Optional[int] = None) -> Iterator[BinaryIO]:
    """Open ``path`` for writing, truncating it, optionally through gzip.

    New files are created with ``mode``'s permission bits (minus the umask).
    The compressor and the file are both closed when the block exits.
    """
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode & _PERMISSION_BITS)
    with os.fdopen(fd, "wb") as raw:
        if not out_gzip:
            yield raw
            return
        with gzip.GzipFile(fileobj=raw, mode="wb", mtime=mtime) as compressed:
            yield compressed


def copy_entry(source: BinaryIO, sink: BinaryIO, name: str, chunk_size: int) -> int:
    """Copy ``source`` into ``sink`` until exhausted and return the byte count.

    Read failures come from the archive stream and raise
    :class:`ArchiveReadError`; write failures raise :class:`EntryExtractError`.
    """
    copied = 0
    while True:
        try:
            chunk = source.read(chunk_size)
        except _STREAM_ERRORS as exc:
            raise ArchiveReadError(f"Tarball read error in {name}: {exc}") from exc
        if not chunk:
            return copied
        try:
            sink.write(chunk)
        except OSError as exc:
            raise EntryExtractError(name, f"write failed: {exc}") from exc
        copied += len(chunk)


class TarStreamExtractor:
    """Drives the decode loop for one archive stream."""

    def __init__(self, settings: ExtractSettings, logger: Optional[logging.Logger] = None) -> None:
        self.settings = settings
        self.logger = logger or get_logger(__name__)
        self.pattern = compile_pattern(settings.file_regexp)

    def run(self, stream: BinaryIO) -> ExtractSummary:
        """Process every member of the decompressed tar ``stream``."""
        summary = ExtractSummary()
        try:
            tar = tarfile.open(fileobj=stream, mode="r|")
        except _STREAM_ERRORS as exc:
            raise ArchiveReadError(f"Tarball read error: {exc}") from exc

        with tar:
            # Opening a stream already parses the first header.
            member = tar.firstmember
            tar.firstmember = None
            while member is not None:
                summary.record(self.process_entry(tar, member))
                member = self._next_header(tar)
            self.logger.debug("EOF, stopping reader.")
        return summary

    def _next_header(self, tar: tarfile.TarFile) -> Optional[tarfile.TarInfo]:
        """Read the next member header, or return None at the end of the archive.

        ``TarFile.next`` treats a broken header after the first one as the end
        of the archive. Headers are parsed here instead so that only the
        zero-block marker (or a clean end of data) ends the run.
        """
        fileobj = tar.fileobj
        try:
            if tar.offset != fileobj.tell():
                # Skip the unread content of the previous member.
                fileobj.seek(tar.offset - 1)
                if not fileobj.read(1):
                    raise ArchiveReadError("Tarball read error: unexpected end of data")
            return tar.tarinfo.fromtarfile(tar)
        except (tarfile.EOFHeaderError, tarfile.EmptyHeaderError):
            return None
        except tarfile.HeaderError as exc:
            raise ArchiveReadError(f"Tarball read error at offset {tar.offset}: {exc}") from exc
        except _STREAM_ERRORS as exc:
            raise ArchiveReadError(f"Tarball read error: {exc}") from exc

    def process_entry(self, tar: tarfile.TarFile, member: tarfile.TarInfo) -> EntryResult:
        self.logger.debug("Found %s", member.name)
        if member.isdir():
            self.logger.debug("%s is a folder, skipping", member.name)
            return EntryResult(member.name, EntryOutcome.DIRECTORY)

        if not is_selected(member.name, self.pattern):
            return EntryResult(member.name, EntryOutcome.NOT_SELECTED)

        self.logger.info("%s matches file pattern", member.name)
        if self.settings.dryrun:
            return EntryResult(member.name, EntryOutcome.LISTED)

        target = map_output_path(member.name, self.settings.out_dir, self.settings.out_gzip)
        try:
            written = self.extract_entry(tar, member, target)
        except EntryExtractError as exc:
            self.logger.error("Extraction failed: %s", exc)
            return EntryResult(member.name, EntryOutcome.FAILED, target=target)

        self.logger.debug("Wrote %d bytes of %s to %s", written, member.name, target)
        return EntryResult(member.name, EntryOutcome.EXTRACTED, target=target, bytes_written=written)

    def extract_entry(self, tar: tarfile.TarFile, member: tarfile.TarInfo, target: str) -> int:
        """Write ``member`` to ``target`` and return the number of content bytes.

        Links, devices and FIFOs carry no content and produce an empty file.
        """
        source = tar.extractfile(member) if member.isfile() else None
        try:
            with open_sink(target, member.mode, self.settings.out_gzip, mtime=member.mtime) as sink:
                if source is None:
                    return 0
                return copy_entry(source, sink, member.name, self.settings.chunk_size)
        except OSError as exc:
            raise EntryExtractError(member.name, f"cannot write {target}: {exc}") from exc


def extract_archive(settings: ExtractSettings, logger: Optional[logging.Logger] = None) -> ExtractSummary:
    """Validate ``settings``, open the archive and run the extractor over it."""
    settings.validate()
    extractor = TarStreamExtractor(settings, logger)
    log = extractor.logger

    log.info("Starting reader for %s.", settings.in_tarball)
    with open_archive(settings.in_tarball) as stream:
        summary = extractor.run(stream)

    log.info(
        "Finished %s: %d entries, %d matched, %d extracted, %d failed.",
        settings.in_tarball,
        summary.entries,
        summary.matched,
        summary.extracted,
        summary.failed,
    )
    return summary


__all__ = [
    "EntryOutcome",
    "EntryResult",
    "ExtractSummary",
    "TarStreamExtractor",
    "copy_entry",
    "extract_archive",
    "open_sink",
]
