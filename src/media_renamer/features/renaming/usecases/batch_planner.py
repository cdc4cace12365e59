"""Summary: Build a rename plan by resolving every source path in order.
Why: Collect successes into one mapping while per-file failures are simply left out.
"""

from __future__ import annotations

from types import MappingProxyType

from media_renamer.platform.logging import logger

from ..domain.errors import InvalidArgumentError
from ..domain.results import PathInput, RenamePlan, ResolvedName, SkippedFile
from ..domain.scheme import Scheme
from .filename_generator import FilenameGenerator
from .rename_types import BatchLogContext, RenameEvent


class BatchPlanner:
    """Drive :class:`FilenameGenerator` across a list of paths."""

    def __init__(self, generator: FilenameGenerator) -> None:
        self.generator = generator
        self.skipped: list[SkippedFile] = []

    def plan(self, paths: object, scheme: Scheme) -> RenamePlan:
        """Return a read-only mapping of original path to new bare filename.

        Args:
            paths: List or tuple of source paths.
            scheme: Compiled scheme used for every file in this call.

        Returns:
            RenamePlan: Entries only for files that resolved; skipped files
            are recorded on ``self.skipped`` and logged.

        Raises:
            InvalidArgumentError: If ``paths`` is not a list or tuple.
        """
        if not isinstance(paths, (list, tuple)):
            raise InvalidArgumentError(
                f"Expected a list of paths, got {type(paths).__name__}"
            )

        self.skipped = []
        context = BatchLogContext(total=len(paths))
        logger.info(
            "Planning names for %d file(s)",
            context.total,
            extra=context.summary_extra(RenameEvent.PLAN_START),
        )

        entries: dict[PathInput, str] = {}
        for path in paths:
            result = self.generator.resolve(path, scheme)
            if isinstance(result, ResolvedName):
                entries[result.path] = result.filename
                context.record_success()
            else:
                self.skipped.append(result)
                context.record_skip()

        logger.info(
            "Planned %d of %d file(s), skipped %d",
            context.succeeded,
            context.total,
            context.skipped,
            extra=context.summary_extra(RenameEvent.PLAN_COMPLETE),
        )
        return MappingProxyType(entries)


__all__ = ["BatchPlanner"]
