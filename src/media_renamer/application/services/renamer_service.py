"""Application service exposing the three renaming operations.

Where: application/services/renamer_service.py
What: Hold the default scheme and substitution character; plan and apply renames.
Why: Give library and CLI callers one object whose configuration is explicit instance state.
"""

from __future__ import annotations

from collections.abc import Mapping

from media_renamer.config.settings import DEFAULT_NAMING_SCHEME, SUBSTITUTION_CHARACTER
from media_renamer.features.metadata import MetadataProvider
from media_renamer.features.renaming import (
    BatchPlanner,
    FilenameGenerator,
    RenameExecutor,
    RenameOutcome,
    RenamePlan,
    Sanitizer,
    Scheme,
    SkippedFile,
    compile_scheme,
    format_scheme,
)
from media_renamer.features.renaming.adapters import LocalFilesystemAdapter
from media_renamer.features.renaming.usecases.ports import FilesystemPort, MetadataLookupPort
from media_renamer.platform.logging import logger


class Renamer:
    """Rename files according to a scheme built from literal text and metadata keys.

    Example::

        renamer = Renamer()
        renamer.set_naming_scheme(["Test-", MetadataKey("date_time")])
        plan = renamer.generate(["photos/hs-2003-24-a-full.tif"])
        renamer.overwrite(plan)  # photos/Test-2003-09-03 12_52_43 -0400.tif

    Not safe for concurrent mutation; use one instance per thread.
    """

    def __init__(
        self,
        naming_scheme: object | None = None,
        substitution_character: str | None = None,
        *,
        metadata_provider: MetadataLookupPort | None = None,
        filesystem: FilesystemPort | None = None,
    ) -> None:
        self._naming_scheme: Scheme = (
            compile_scheme(naming_scheme) if naming_scheme is not None else DEFAULT_NAMING_SCHEME
        )
        self._sanitizer = Sanitizer(substitution_character or SUBSTITUTION_CHARACTER)
        self.metadata_provider: MetadataLookupPort = metadata_provider or MetadataProvider()
        self.filesystem: FilesystemPort = filesystem or LocalFilesystemAdapter()
        self.last_skipped: list[SkippedFile] = []

    @property
    def naming_scheme(self) -> Scheme:
        return self._naming_scheme

    @property
    def substitution_character(self) -> str:
        return self._sanitizer.substitute

    @substitution_character.setter
    def substitution_character(self, value: str) -> None:
        self._sanitizer = Sanitizer(value)

    def set_naming_scheme(self, raw_scheme: object = ()) -> Scheme:
        """Compile ``raw_scheme`` and store it as the default scheme.

        Entries that are neither text nor metadata keys are dropped, so
        ``[5, "A-", MetadataKey("key"), None, "B"]`` stores
        ``("A-", key, "B")``.
        """
        self._naming_scheme = compile_scheme(raw_scheme)
        logger.debug("Default naming scheme set to %r", format_scheme(self._naming_scheme))
        return self._naming_scheme

    def generate(self, paths: object, scheme: object | None = None) -> RenamePlan:
        """Map each renameable path to its new bare filename.

        Args:
            paths: List or tuple of file paths.
            scheme: Optional scheme for this call only; ``None`` or an empty
                sequence uses the stored default.

        Returns:
            RenamePlan: Read-only mapping; files that could not be resolved are absent.

        Raises:
            InvalidArgumentError: If ``paths`` is not a list or tuple.
        """
        active = self._naming_scheme
        if scheme is not None and not isinstance(scheme, (str, bytes)):
            override = compile_scheme(scheme)
            if override:
                active = override

        generator = FilenameGenerator(
            metadata_provider=self.metadata_provider,
            sanitizer=self._sanitizer,
            filesystem=self.filesystem,
        )
        planner = BatchPlanner(generator)
        try:
            return planner.plan(paths, active)
        finally:
            self.last_skipped = planner.skipped

    def overwrite(self, plan: Mapping[object, object]) -> list[RenameOutcome]:
        """Rename files on disk according to ``plan``; failing pairs are skipped.

        Not transactional: a failure partway leaves earlier renames in place.
        """
        return RenameExecutor(self.filesystem).execute(plan)


__all__ = ["Renamer"]
