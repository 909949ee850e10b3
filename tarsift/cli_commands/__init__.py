"""Registry for CLI subcommands."""

from .extract_command import TarExtractCommand

COMMANDS = (
    TarExtractCommand,
)

__all__ = ["COMMANDS", "TarExtractCommand"]
