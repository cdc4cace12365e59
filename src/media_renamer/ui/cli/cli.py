"""Command line interface for media-renamer."""

import sys
from typing import final

from media_renamer.features.renaming import MediaRenamerError
from media_renamer.platform.logging import logger
from media_renamer.ui.cli.args import ArgumentParser
from media_renamer.ui.cli.commands import CommandExecutor, PlanCommand, RenameCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Exit code; 1 when any file was skipped or not renamed.
        """
        try:
            args = ArgumentParser.process_args(args_list)
            command: CommandExecutor = (
                PlanCommand(args) if args.command == "plan" else RenameCommand(args)
            )
            result = command.execute()
            return 0 if result.success else 1

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except MediaRenamerError as e:
            logger.error("%s", e)
            return 1
        except Exception as e:
            logger.error("An unexpected error occurred: %s", e, exc_info=True)
            return 1


def main() -> int:
    """Main entry point."""
    return CommandProcessor.process_command(sys.argv[1:])
