"""Ports for renaming use cases.

Where: features/renaming/usecases.
What: Protocols describing the filesystem and metadata collaborators.
Why: Keep use cases independent of concrete extractors and OS calls so tests can stub them.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

Metadata = Mapping[str, object]


@runtime_checkable
class FilesystemPort(Protocol):
    """Filesystem operations needed to resolve and rename files."""

    def is_file(self, path: Path) -> bool:
        """Return whether ``path`` is an existing regular file."""
        ...

    def exists(self, path: Path) -> bool:
        """Return whether anything exists at ``path``."""
        ...

    def absolute_path(self, path: Path) -> Path:
        """Return ``path`` as an absolute path."""
        ...

    def directory_of(self, path: Path) -> Path:
        """Return the directory that contains ``path``."""
        ...

    def same_file(self, first: Path, second: Path) -> bool:
        """Return whether both paths name the same file on disk."""
        ...

    def rename(self, source: Path, destination: Path) -> None:
        """Rename ``source`` to ``destination``; raises ``OSError`` on failure."""
        ...


@runtime_checkable
class MetadataLookupPort(Protocol):
    """Per-file metadata source."""

    def lookup(self, path: Path) -> Metadata:
        """Return metadata for ``path``.

        Raises:
            UnsupportedFileTypeError: If no extractor handles the extension.
        """
        ...


__all__ = ["FilesystemPort", "Metadata", "MetadataLookupPort"]
