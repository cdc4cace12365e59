"""src/media_renamer/ui/cli/commands/executor.py
What: Shared setup for CLI commands: build the Renamer from config and arguments.
Why: Keep plan and rename commands focused on their own flow.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from media_renamer.application.services import Renamer
from media_renamer.config.config import Config
from media_renamer.config.settings import naming_scheme_from, substitution_character_from
from media_renamer.features.renaming import RenameOutcome, RenamePlan, parse_scheme_text
from media_renamer.platform.logging import logger
from media_renamer.ui.cli.args.options import RenameArgs
from media_renamer.ui.cli.display import PlanDisplay


@dataclass(slots=True)
class CommandResult:
    """What a command did, for exit status decisions."""

    total: int
    plan: RenamePlan
    outcomes: list[RenameOutcome] | None = None

    @property
    def success(self) -> bool:
        if len(self.plan) != self.total:
            return False
        if self.outcomes is None:
            return True
        return all(outcome.renamed for outcome in self.outcomes)


class CommandExecutor(ABC):
    """Base class for CLI commands."""

    def __init__(self, args: RenameArgs, config: Config | None = None) -> None:
        self.args = args
        self.config = config or Config.load()
        self.display = PlanDisplay()
        self.renamer = self._build_renamer()

    def _build_renamer(self) -> Renamer:
        subchar = self.args.substitution_character or substitution_character_from(self.config)
        return Renamer(
            naming_scheme=naming_scheme_from(self.config),
            substitution_character=subchar,
        )

    @property
    def distinct_path_count(self) -> int:
        """Number of distinct input paths; duplicates share one plan entry."""
        return len(dict.fromkeys(self.args.paths))

    def generate_plan(self) -> RenamePlan:
        """Generate the plan for the command's paths with the effective scheme."""

        scheme = parse_scheme_text(self.args.scheme) if self.args.scheme else None
        if self.args.scheme and not scheme:
            logger.warning("Scheme %r is empty; using the configured scheme", self.args.scheme)
        plan = self.renamer.generate(list(self.args.paths), scheme)
        if not self.args.quiet:
            self.display.show_plan(plan, self.renamer.last_skipped, dry_run=self.args.dry_run)
        return plan

    @abstractmethod
    def execute(self) -> CommandResult:
        """Run the command."""
        ...
