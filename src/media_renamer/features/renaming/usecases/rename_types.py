"""Where: features/renaming/usecases/rename_types.py
What: Structured log event identifiers and batch bookkeeping for planning and renaming.
Why: Keep the use cases lean by centralising shared type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class RenameEvent(StrEnum):
    """Structured event identifiers attached to log records as ``rename_event``."""

    PLAN_START = "plan.batch.start"
    PLAN_COMPLETE = "plan.batch.complete"
    FILE_RESOLVED = "plan.file.resolved"
    FILE_SKIPPED = "plan.file.skipped"
    RENAME_START = "rename.batch.start"
    RENAME_COMPLETE = "rename.batch.complete"
    PAIR_DONE = "rename.pair.done"
    PAIR_SKIPPED = "rename.pair.skipped"


@dataclass(slots=True)
class BatchLogContext:
    """Mutable counters for one planning or renaming run."""

    total: int
    succeeded: int = 0
    skipped: int = 0
    start_time: float = field(default_factory=time.perf_counter)

    def record_success(self) -> None:
        self.succeeded += 1

    def record_skip(self) -> None:
        self.skipped += 1

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self, event: RenameEvent) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "rename_event": event,
            "total": self.total,
            "succeeded": self.succeeded,
            "skipped": self.skipped,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = ["BatchLogContext", "RenameEvent"]
