"""Shared fixtures: small tar.gz archives built per test."""

from __future__ import annotations

import gzip
import io
import os
import sys
import tarfile

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tarsift.common import constants  # noqa: E402

_ENV_KEYS = (
    constants.ENV_IN_TARBALL,
    constants.ENV_FILE_REGEXP,
    constants.ENV_OUT_DIR,
    constants.ENV_DRYRUN,
    constants.ENV_OUT_GZIP,
    constants.ENV_CHUNK_SIZE,
    constants.ENV_LOG_LEVEL,
)


@pytest.fixture(autouse=True)
def _clean_tarsift_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _add_member(tar: tarfile.TarFile, member) -> None:
    if isinstance(member, tarfile.TarInfo):
        tar.addfile(member)
        return
    name, data = member[0], member[1]
    info = tarfile.TarInfo(name)
    info.mtime = 1600000000
    if data is None:
        info.type = tarfile.DIRTYPE
        info.mode = 0o755
        tar.addfile(info)
        return
    info.mode = member[2] if len(member) > 2 else 0o644
    info.size = len(data)
    tar.addfile(info, io.BytesIO(data))


def build_tar_bytes(members) -> bytes:
    """Uncompressed tar bytes for ``(name, data[, mode])`` tuples or ``TarInfo`` objects."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w", format=tarfile.USTAR_FORMAT) as tar:
        for member in members:
            _add_member(tar, member)
    return buffer.getvalue()


@pytest.fixture
def tar_bytes():
    return build_tar_bytes


@pytest.fixture
def make_tarball(tmp_path):
    """Build a .tar.gz; ``data=None`` is a directory, ``TarInfo`` items are added as-is."""

    def _make(members, name: str = "archive.tar.gz") -> str:
        path = tmp_path / name
        path.write_bytes(gzip.compress(build_tar_bytes(members)))
        return str(path)

    return _make


@pytest.fixture
def out_dir(tmp_path):
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def sample_tarball(make_tarball):
    """Archive from the reference scenario: one pcap, one text file, one directory."""
    return make_tarball([
        ("a/x.pcap", b"\xd4\xc3\xb2\xa1pcap-bytes" * 50),
        ("a/y.txt", b"not a capture\n"),
        ("b/", None),
    ])


@pytest.fixture
def umask_zero():
    previous = os.umask(0)
    try:
        yield
    finally:
        os.umask(previous)
