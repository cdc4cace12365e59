"""Tests for plan and summary rendering."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from media_renamer.features.renaming import RenameOutcome, SkippedFile, SkipReason
from media_renamer.ui.cli.display import PlanDisplay


def _display() -> tuple[PlanDisplay, Console]:
    console = Console(record=True, width=200)
    return PlanDisplay(console=console), console


def test_show_plan_lists_names_and_skips() -> None:
    display, console = _display()

    display.show_plan(
        {Path("/photos/a.jpg"): "Trip-2020.jpg"},
        [SkippedFile(Path("/photos/b.jpg"), SkipReason.MISSING_METADATA, "no value", "artist")],
        dry_run=True,
    )

    output = console.export_text()
    assert "Planned renames (dry run)" in output
    assert "Trip-2020.jpg" in output
    assert "Skipped 1 file(s)" in output
    assert "artist" in output


def test_show_plan_without_entries() -> None:
    display, console = _display()

    display.show_plan({}, [], dry_run=False)

    assert "No files could be renamed" in console.export_text()


def test_show_summary_reports_failures() -> None:
    display, console = _display()
    outcomes = [
        RenameOutcome(Path("a.jpg"), "x.jpg", destination=Path("x.jpg")),
        RenameOutcome(Path("b.jpg"), "x.jpg", reason=SkipReason.DESTINATION_EXISTS, detail="exists"),
    ]

    display.show_summary(3, 2, outcomes)

    output = console.export_text()
    assert "Files given: 3" in output
    assert "Not plannable: 1" in output
    assert "Renamed: 1" in output
    assert "Not renamed: 1" in output
