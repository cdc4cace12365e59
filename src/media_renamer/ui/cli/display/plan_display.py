"""src/media_renamer/ui/cli/display/plan_display.py
Where: CLI adapter layer for plan and result rendering.
What: Build Rich tables for planned names and print run summaries.
Why: Let users review new names before, and failures after, a rename run.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from media_renamer.features.renaming import RenameOutcome, SkippedFile


@final
class PlanDisplay:
    """Handles plan and summary display in the CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_plan(
        self,
        plan: Mapping[object, str],
        skipped: Sequence[SkippedFile],
        *,
        dry_run: bool,
    ) -> None:
        """Render planned renames followed by files that were left out."""

        title = "Planned renames (dry run)" if dry_run else "Planned renames"
        table = Table(title=title, show_lines=False)
        table.add_column("Directory", style="dim")
        table.add_column("Current name", style="white")
        table.add_column("New name", style="bold green")

        for old_path, new_name in plan.items():
            path = Path(str(old_path))
            table.add_row(escape(str(path.parent)), escape(path.name), escape(new_name))

        if plan:
            self.console.print(table)
        else:
            self.console.print("[yellow]No files could be renamed with this scheme.[/yellow]")

        if skipped:
            self.console.print(f"\n[yellow]Skipped {len(skipped)} file(s):[/yellow]")
            for item in skipped:
                token = f" [{item.token}]" if item.token else ""
                self.console.print(
                    "[yellow]  • " + escape(f"{item.path}: {item.reason}{token} ({item.detail})") + "[/yellow]"
                )

    def show_summary(
        self,
        total: int,
        planned: int,
        outcomes: Sequence[RenameOutcome] | None,
    ) -> None:
        """Render counts for the run and list pairs that were not renamed."""

        self.console.print("\n[bold]Summary:[/bold]")
        self.console.print(f"Files given: {total}")
        self.console.print(f"[green]Planned: {planned}[/green]")
        if total - planned:
            self.console.print(f"[yellow]Not plannable: {total - planned}[/yellow]")
        if outcomes is None:
            return

        renamed = [outcome for outcome in outcomes if outcome.renamed]
        failed = [outcome for outcome in outcomes if not outcome.renamed]
        self.console.print(f"[green]Renamed: {len(renamed)}[/green]")
        if not failed:
            return
        self.console.print(f"[red]Not renamed: {len(failed)}[/red]")
        for outcome in failed:
            self.console.print(
                "[red]  • "
                + escape(f"{outcome.old_path} => {outcome.new_name}: {outcome.reason} ({outcome.detail})")
                + "[/red]"
            )
