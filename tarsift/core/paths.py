"""Output path mapping for extracted members.

Members are never written into nested directories. The archive path is
flattened into one file name by replacing every ``/`` with ``-``, so
``./pcap/2020/a.pcap`` becomes ``pcap-2020-a.pcap``.

Flattening is lossy: ``a/b-c`` and ``a-b/c`` both become ``a-b-c``. When two
members collide the later one overwrites the earlier output. Downstream
tooling relies on the exact names, so collisions are neither detected nor
renamed.
"""

from __future__ import annotations

import os

from ..common.constants import GZIP_SUFFIX

_CURRENT_DIR_PREFIX = "./"


def flatten_name(name: str) -> str:
    """Strip one leading ``./`` and replace path separators with hyphens."""
    if name.startswith(_CURRENT_DIR_PREFIX):
        name = name[len(_CURRENT_DIR_PREFIX):]
    return name.replace("/", "-")


def map_output_path(name: str, out_dir: str, out_gzip: bool = False) -> str:
    """Return the destination file path for member ``name``."""
    target = os.path.join(out_dir, flatten_name(name))
    if out_gzip:
        target = f"{target}{GZIP_SUFFIX}"
    return target


__all__ = ["flatten_name", "map_output_path"]
