"""src/media_renamer/features/renaming/adapters/filesystem_adapter.py
What: Adapter implementing FilesystemPort on top of platform helpers.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

from pathlib import Path

from media_renamer.features.renaming.usecases.ports import FilesystemPort
from media_renamer.platform.filesystem import (
    absolute_path,
    is_existing_file,
    is_same_file,
    rename_file,
)


class LocalFilesystemAdapter(FilesystemPort):
    """Adapter delegating to the shared platform filesystem module."""

    def is_file(self, path: Path) -> bool:
        return is_existing_file(path)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def absolute_path(self, path: Path) -> Path:
        return absolute_path(path)

    def directory_of(self, path: Path) -> Path:
        return path.parent

    def same_file(self, first: Path, second: Path) -> bool:
        return is_same_file(first, second)

    def rename(self, source: Path, destination: Path) -> None:
        rename_file(source, destination)


__all__ = ["LocalFilesystemAdapter"]
