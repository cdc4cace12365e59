"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class RenameArgs:
    """Command line arguments for the ``plan`` and ``rename`` subcommands."""

    command: Literal["plan", "rename"]
    paths: list[Path]
    scheme: str | None
    substitution_character: str | None
    dry_run: bool
    verbose: bool
    quiet: bool


CLIArgs = RenameArgs

__all__ = ["CLIArgs", "RenameArgs"]
