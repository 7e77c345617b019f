"""Command line interface for webpath."""

import sys
from typing import final

from webpath.platform.logging import logger
from webpath.ui.cli.args import ArgumentParser
from webpath.ui.cli.args.options import CLIArgs, InitConfigArgs
from webpath.ui.cli.commands import CommandExecutor, InitConfigCommand, OperationCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Select the executor for parsed arguments."""

        if isinstance(args, InitConfigArgs):
            return InitConfigCommand(args)
        return OperationCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor.build_command(args).execute()
            if exit_code:
                sys.exit(exit_code)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
