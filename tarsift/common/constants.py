"""
Constants and exit codes for tarsift.
"""

PROG_NAME = 'tarsift'

# Environment variables consulted when a flag is not given on the command line.
ENV_IN_TARBALL = 'TARSIFT_IN_TARBALL'
ENV_FILE_REGEXP = 'TARSIFT_FILE_REGEXP'
ENV_OUT_DIR = 'TARSIFT_OUT_DIR'
ENV_DRYRUN = 'TARSIFT_DRYRUN'
ENV_OUT_GZIP = 'TARSIFT_OUT_GZIP'
ENV_CHUNK_SIZE = 'TARSIFT_CHUNK_SIZE'
ENV_LOG_LEVEL = 'TARSIFT_LOG_LEVEL'

STDIN_SOURCE = '-'
GZIP_SUFFIX = '.gz'
DEFAULT_CHUNK_SIZE = 1024 * 1024

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')
DEFAULT_LOG_LEVEL = 'INFO'


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    UNEXPECTED_ERROR = 1
    CONFIGURATION_ERROR = 2
    ARCHIVE_OPEN_FAILED = 3
    ARCHIVE_READ_FAILED = 4
