"""src/media_renamer/ui/cli/commands/rename.py
What: Plan and then apply renames via the CLI.
Why: Most users want both steps in one invocation.
"""

from typing import override

from media_renamer.ui.cli.commands.executor import CommandExecutor, CommandResult


class RenameCommand(CommandExecutor):
    """Command that renames files on disk unless ``--dry-run`` is given."""

    @override
    def execute(self) -> CommandResult:
        plan = self.generate_plan()
        outcomes = None if self.args.dry_run else self.renamer.overwrite(plan)
        result = CommandResult(total=self.distinct_path_count, plan=plan, outcomes=outcomes)
        if not self.args.quiet:
            self.display.show_summary(result.total, len(plan), outcomes)
        return result
