"""Tar extraction command handling for the tarsift CLI."""

import argparse

from tarsift.cli_helpers import exit_with_error, map_exception_to_exit_code
from tarsift.common.config import ExtractSettings
from tarsift.common.constants import ExitCodes
from tarsift.core.extract import extract_archive

_DESCRIPTION = """\
Got a huge tar.gz file with pcaps with no space to unpack it? Iterate over the
byte stream and unpack only the files you need, directly to gzip if needed.

Example usage:
  tarsift tar-extract --in-tarball /mnt/ext/tarball.tar.gz \\
      --file-regexp "pcap-2020.+\\.pcap" --out-dir /mnt/nfs/ --out-gzip

List but don't extract anything:
  tarsift tar-extract --in-tarball /mnt/ext/tarball.tar.gz \\
      --file-regexp "pcap-2020.+\\.pcap" --dryrun
"""


class TarExtractCommand:
    """Handles selective extraction from a gzipped tarball."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add tar-extract command parser to subparsers."""
        parser = subparsers.add_parser(
            'tar-extract',
            aliases=['tarExtract'],
            help='Extract selected files from a tar.gz',
            description=_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        parser.add_argument('--in-tarball', dest='in_tarball',
                            help="Input gzipped tarball, or '-' for stdin.")
        parser.add_argument('--file-regexp', dest='file_regexp',
                            help='Regular expression matched anywhere in member names.')
        parser.add_argument('--out-dir', dest='out_dir',
                            help='Output directory for extracted files.')
        parser.add_argument('--dryrun', action='store_true', default=None,
                            help='Only list files in tarball for regex validation, do not extract.')
        parser.add_argument('--no-dryrun', dest='dryrun', action='store_false', default=None,
                            help='Extract even if TARSIFT_DRYRUN is set.')
        parser.add_argument('--out-gzip', dest='out_gzip', action='store_true', default=None,
                            help='Compress extracted files with gzip.')
        parser.add_argument('--no-out-gzip', dest='out_gzip', action='store_false', default=None,
                            help='Write raw files even if TARSIFT_OUT_GZIP is set.')
        parser.set_defaults(func=TarExtractCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Run the extraction described by ``args``."""
        try:
            settings = ExtractSettings.from_sources(args)
            extract_archive(settings)

        except Exception as exc:
            exit_code = map_exception_to_exit_code(exc)
            if exit_code is None:
                message = f"Tar extraction failed: {exc}"
                exit_code = ExitCodes.UNEXPECTED_ERROR
            else:
                message = str(exc)

            exit_with_error(message, exit_code)
