"""Summary: Apply a rename plan to disk one pair at a time.
Why: Renames are best effort; a failing pair is logged and skipped, never rolled back.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from os import PathLike
from pathlib import Path

from media_renamer.platform.logging import logger

from ..domain.errors import InvalidArgumentError
from ..domain.results import RenameOutcome, SkipReason
from .ports import FilesystemPort
from .rename_types import BatchLogContext, RenameEvent

_SEPARATORS = frozenset({"/", os.sep, os.altsep or "/"})


class RenameExecutor:
    """Rename each planned file inside its own directory."""

    def __init__(self, filesystem: FilesystemPort) -> None:
        self.filesystem = filesystem

    def execute(self, plan: Mapping[object, object]) -> list[RenameOutcome]:
        """Rename every ``old path -> new filename`` pair independently.

        The destination is always ``directory(old path) / new filename``.
        Nothing checks that the destination exists afterwards.

        Returns:
            list[RenameOutcome]: One outcome per pair, in plan order.

        Raises:
            InvalidArgumentError: If ``plan`` is not a mapping.
        """
        if not isinstance(plan, Mapping):
            raise InvalidArgumentError(
                f"Expected a mapping of old path to new filename, got {type(plan).__name__}"
            )

        context = BatchLogContext(total=len(plan))
        logger.info(
            "Renaming %d file(s)",
            context.total,
            extra=context.summary_extra(RenameEvent.RENAME_START),
        )

        outcomes: list[RenameOutcome] = []
        for old_path, new_name in plan.items():
            outcome = self._rename_pair(old_path, new_name)
            if outcome.renamed:
                context.record_success()
            else:
                context.record_skip()
            outcomes.append(outcome)

        logger.info(
            "Renamed %d of %d file(s), skipped %d",
            context.succeeded,
            context.total,
            context.skipped,
            extra=context.summary_extra(RenameEvent.RENAME_COMPLETE),
        )
        return outcomes

    def _rename_pair(self, old_path: object, new_name: object) -> RenameOutcome:
        if not isinstance(old_path, (str, PathLike)) or not str(old_path):
            return self._skip(old_path, new_name, SkipReason.FILE_NOT_VALID, "source is not a path")
        source = Path(old_path)
        if not self.filesystem.is_file(source):
            return self._skip(
                old_path, new_name, SkipReason.FILE_NOT_VALID, "could not access source file"
            )
        if not isinstance(new_name, str) or not new_name:
            return self._skip(
                old_path, new_name, SkipReason.FILE_NOT_VALID, "new file name is not a non-empty string"
            )
        if any(separator in new_name for separator in _SEPARATORS) or new_name in {".", ".."}:
            return self._skip(
                old_path, new_name, SkipReason.FILE_NOT_VALID, "new file name must not contain a directory"
            )
        if "\x00" in new_name:
            return self._skip(
                old_path, new_name, SkipReason.FILE_NOT_VALID, "new file name contains a null byte"
            )

        absolute_source = self.filesystem.absolute_path(source)
        destination = self.filesystem.directory_of(absolute_source) / new_name

        if destination == absolute_source:
            return self._skip(old_path, new_name, SkipReason.UNCHANGED, "name already matches")
        # Case-only renames on case-insensitive filesystems see the source itself.
        if self.filesystem.exists(destination) and not self.filesystem.same_file(
            absolute_source, destination
        ):
            return self._skip(
                old_path, new_name, SkipReason.DESTINATION_EXISTS, f"{destination} already exists"
            )

        try:
            self.filesystem.rename(absolute_source, destination)
        except (OSError, ValueError) as exc:
            return self._skip(
                old_path, new_name, SkipReason.RENAME_ERROR, f"{type(exc).__name__}: {exc}"
            )

        logger.info(
            "Renamed %s -> %s",
            absolute_source,
            destination,
            extra={
                "rename_event": RenameEvent.PAIR_DONE,
                "source_path": str(absolute_source),
                "target_name": new_name,
            },
        )
        return RenameOutcome(old_path=old_path, new_name=new_name, destination=destination)

    @staticmethod
    def _skip(
        old_path: object,
        new_name: object,
        reason: SkipReason,
        detail: str,
    ) -> RenameOutcome:
        logger.warning(
            "Ignoring rename for %s => %s [%s: %s]",
            old_path,
            new_name,
            reason,
            detail,
            extra={
                "rename_event": RenameEvent.PAIR_SKIPPED,
                "source_path": str(old_path),
                "target_name": str(new_name),
                "error_message": f"{reason}: {detail}",
            },
        )
        return RenameOutcome(old_path=old_path, new_name=new_name, reason=reason, detail=detail)


__all__ = ["RenameExecutor"]
