"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from pathlib import Path


def is_existing_file(path: Path) -> bool:
    """Return whether ``path`` names an existing regular file."""

    try:
        return path.is_file()
    except OSError:
        return False


def absolute_path(path: Path) -> Path:
    """Return ``path`` made absolute without resolving symlinks."""

    return Path(os.path.abspath(path))


def is_same_file(first: Path, second: Path) -> bool:
    """Return whether both paths resolve to the same file; missing paths never match."""

    try:
        return os.path.samefile(first, second)
    except OSError:
        return False


def rename_file(source: Path, destination: Path) -> None:
    """Rename ``source`` to ``destination``; errors propagate as ``OSError``."""

    os.rename(source, destination)


def list_directory_files(directory: Path) -> list[Path]:
    """Return the regular files directly inside ``directory``, sorted by name."""

    return sorted(child for child in directory.iterdir() if child.is_file())


__all__ = [
    "absolute_path",
    "is_existing_file",
    "is_same_file",
    "list_directory_files",
    "rename_file",
]
