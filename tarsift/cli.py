"""
Command Line Interface for tarsift.

Subcommands are registered from :mod:`tarsift.cli_commands`.
"""

import argparse
import sys
from typing import List, Optional

from ._version import __version__
from .cli_commands import COMMANDS
from .common.constants import LOG_LEVELS, PROG_NAME, ExitCodes
from .common.logging_config import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description='Selective streaming extraction from gzipped tarballs'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--log-level', dest='log_level', type=str.upper, choices=LOG_LEVELS,
                        help='Logging verbosity (default: TARSIFT_LOG_LEVEL or INFO)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    if not args:
        parser.print_help()
        sys.exit(ExitCodes.OK)

    parsed_args = parser.parse_args(args)
    configure_logging(parsed_args.log_level)

    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help()
        sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
