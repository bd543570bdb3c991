"""Command line interface for unreprex."""

import sys
from typing import final

from unreprex.features.undo import UnreprexError
from unreprex.platform.logging import logger
from unreprex.ui.cli.args import ArgumentParser
from unreprex.ui.cli.args.options import CLIArgs, CleanArgs, InvertArgs, RescueArgs
from unreprex.ui.cli.commands import CleanCommand, CommandExecutor, InvertCommand, RescueCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            result = CommandProcessor._build_command(args).execute()
            if result.failed_deliveries:
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except UnreprexError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _build_command(args: CLIArgs) -> CommandExecutor:
        if isinstance(args, InvertArgs):
            return InvertCommand(args)
        if isinstance(args, CleanArgs):
            return CleanCommand(args)
        assert isinstance(args, RescueArgs)
        return RescueCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Underlying command processing
        calls ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
