"""tarsift - selective extraction from huge gzip-compressed tarballs.

Got a tar.gz too large to unpack? tarsift iterates over the compressed byte
stream once and writes only the members whose names match a regular
expression, optionally gzip-compressing each output file.

* Streaming decode loop (`extract_archive`, `TarStreamExtractor`)
* Flat output naming (`flatten_name`, `map_output_path`)
* Thin CLI wrapper (`tarsift tar-extract`)
"""

from ._version import __version__
from .common.config import ExtractSettings  # noqa: F401
from .common.logging_config import configure_logging  # noqa: F401
from .core.extract import EntryOutcome, ExtractSummary, TarStreamExtractor, extract_archive  # noqa: F401
from .core.paths import flatten_name, map_output_path  # noqa: F401
from .core.selection import compile_pattern, is_selected  # noqa: F401

__all__ = [
	"__version__",
	"ExtractSettings",
	"configure_logging",
	"EntryOutcome",
	"ExtractSummary",
	"TarStreamExtractor",
	"extract_archive",
	"flatten_name",
	"map_output_path",
	"compile_pattern",
	"is_selected",
]
