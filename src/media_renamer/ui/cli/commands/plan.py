"""src/media_renamer/ui/cli/commands/plan.py
What: Print the rename plan without touching files.
"""

from typing import override

from media_renamer.ui.cli.commands.executor import CommandExecutor, CommandResult


class PlanCommand(CommandExecutor):
    """Command that only previews new names."""

    @override
    def execute(self) -> CommandResult:
        plan = self.generate_plan()
        result = CommandResult(total=self.distinct_path_count, plan=plan)
        if not self.args.quiet:
            self.display.show_summary(result.total, len(plan), None)
        return result
