"""Run configuration for tarsift.

Settings are resolved once at startup from command line arguments, then
`TARSIFT_*` environment variables, then defaults, and handed to the extractor
as an explicit object.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .constants import (
    DEFAULT_CHUNK_SIZE,
    ENV_CHUNK_SIZE,
    ENV_DRYRUN,
    ENV_FILE_REGEXP,
    ENV_IN_TARBALL,
    ENV_OUT_DIR,
    ENV_OUT_GZIP,
)
from .errors import MissingInputError, MissingOutputDirError


def env_bool(environ: Mapping[str, str], key: str, default: bool = False) -> bool:
    value = environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    value = environ.get(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ExtractSettings:
    """Typed settings for one tar extraction run."""

    in_tarball: Optional[str] = None
    file_regexp: Optional[str] = None
    out_dir: Optional[str] = None
    dryrun: bool = False
    out_gzip: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @classmethod
    def from_sources(
        cls,
        args: Any = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ExtractSettings":
        """Merge parsed CLI arguments over environment variables.

        Any flag that was given wins, even when empty or false: ``--file-regexp ""``
        selects everything and ``--no-dryrun`` overrides ``TARSIFT_DRYRUN``.
        Arguments left at ``None`` fall back to the environment.
        """
        env = os.environ if environ is None else environ

        def pick(attr: str, env_key: str) -> Optional[str]:
            value = getattr(args, attr, None)
            if value is not None:
                return value
            return env.get(env_key)

        def pick_bool(attr: str, env_key: str) -> bool:
            value = getattr(args, attr, None)
            if value is not None:
                return bool(value)
            return env_bool(env, env_key)

        chunk_size = env_int(env, ENV_CHUNK_SIZE, DEFAULT_CHUNK_SIZE)
        if chunk_size <= 0:
            chunk_size = DEFAULT_CHUNK_SIZE

        return cls(
            in_tarball=pick("in_tarball", ENV_IN_TARBALL),
            file_regexp=pick("file_regexp", ENV_FILE_REGEXP),
            out_dir=pick("out_dir", ENV_OUT_DIR),
            dryrun=pick_bool("dryrun", ENV_DRYRUN),
            out_gzip=pick_bool("out_gzip", ENV_OUT_GZIP),
            chunk_size=chunk_size,
        )

    def validate(self) -> None:
        """Raise a :class:`ConfigurationError` subclass for unusable settings.

        The file pattern is compiled by the extractor, still before the
        archive is opened.
        """
        if not self.in_tarball:
            raise MissingInputError("Missing input tarball.")
        if self.dryrun:
            return
        if not self.out_dir:
            raise MissingOutputDirError("Missing output dir.")
        if not os.path.isdir(self.out_dir):
            raise MissingOutputDirError(f"Output dir {self.out_dir!r} does not exist or is not a directory.")
