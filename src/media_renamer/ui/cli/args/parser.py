"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from media_renamer import __version__
from media_renamer.config.config import Config
from media_renamer.features.renaming import ILLEGAL_CHARACTERS, is_valid_substitute
from media_renamer.platform.filesystem import list_directory_files
from media_renamer.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from media_renamer.ui.cli.args.options import CLIArgs, RenameArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="media-renamer",
            description="Rename photos and music files from their metadata.",
            epilog=(
                "Schemes mix literal text with {metadata_key} references, e.g. "
                '"Holiday-{date_time}" or "{artist} - {title}".'
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        subparsers = parser.add_subparsers(dest="command", required=True)

        plan_parser = subparsers.add_parser(
            "plan",
            help="Show the new names without renaming anything",
        )
        ArgumentParser._configure_rename_parser(plan_parser, dry_run_default=True)

        rename_parser = subparsers.add_parser(
            "rename",
            help="Rename files according to the naming scheme",
        )
        ArgumentParser._configure_rename_parser(rename_parser, dry_run_default=False)
        _ = rename_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Preview renames without changing files",
        )

        return parser

    @staticmethod
    def _configure_rename_parser(
        parser: argparse.ArgumentParser,
        *,
        dry_run_default: bool,
    ) -> None:
        """Apply shared configuration for plan/rename subparsers."""

        parser.set_defaults(dry_run=dry_run_default)
        _ = parser.add_argument(
            "paths",
            nargs="+",
            type=str,
            help="Files to rename; directories contribute their immediate files",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--scheme",
            type=str,
            help="Naming scheme for this run (defaults to the configured scheme)",
            metavar="SCHEME",
        )
        _ = parser.add_argument(
            "--subchar",
            type=str,
            dest="substitution_character",
            help="Character that replaces \\ : ? * < > | \" / in new names",
            metavar="CHAR",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)
        subchar = parsed_args.substitution_character
        if subchar is not None and not is_valid_substitute(subchar):
            parser.error(
                f"--subchar must be a single character other than {ILLEGAL_CHARACTERS}, got {subchar!r}"
            )

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        return RenameArgs(
            command=parsed_args.command,
            paths=ArgumentParser._expand_paths(parsed_args.paths),
            scheme=parsed_args.scheme,
            substitution_character=parsed_args.substitution_character,
            dry_run=parsed_args.dry_run,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _expand_paths(raw_paths: Sequence[str]) -> list[Path]:
        """Replace each directory with its files; other paths pass through unchanged."""

        expanded: list[Path] = []
        for raw in raw_paths:
            path = Path(raw)
            if path.is_dir():
                files = list_directory_files(path)
                logger.debug("Expanded directory %s to %d file(s)", path, len(files))
                expanded.extend(files)
            else:
                expanded.append(path)
        return expanded
