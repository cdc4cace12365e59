"""Summary: Per-file outcomes of name resolution and renaming.
Why: Replace swallow-and-log control flow with explicit values the batch can aggregate.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from os import PathLike
from pathlib import Path
from typing import TypeAlias

PathInput: TypeAlias = str | PathLike[str]
RenamePlan: TypeAlias = Mapping[PathInput, str]


class SkipReason(StrEnum):
    """Why a file or rename pair was left out."""

    FILE_NOT_VALID = "file_not_valid"
    UNSUPPORTED_TYPE = "unsupported_type"
    EXTRACTION_FAILED = "extraction_failed"
    MISSING_METADATA = "missing_metadata"
    EMPTY_NAME = "empty_name"
    DESTINATION_EXISTS = "destination_exists"
    UNCHANGED = "unchanged"
    RENAME_ERROR = "rename_error"


@dataclass(frozen=True, slots=True)
class ResolvedName:
    """A file whose scheme resolved to a sanitized bare filename."""

    path: PathInput
    filename: str


@dataclass(frozen=True, slots=True)
class SkippedFile:
    """A file left out of the plan, with enough context to diagnose it."""

    path: object
    reason: SkipReason
    detail: str = ""
    token: str | None = None


FilenameResult: TypeAlias = ResolvedName | SkippedFile


@dataclass(frozen=True, slots=True)
class RenameOutcome:
    """What happened to one ``(old path, new filename)`` pair."""

    old_path: object
    new_name: object
    destination: Path | None = None
    reason: SkipReason | None = None
    detail: str = ""

    @property
    def renamed(self) -> bool:
        return self.reason is None


__all__ = [
    "FilenameResult",
    "PathInput",
    "RenameOutcome",
    "RenamePlan",
    "ResolvedName",
    "SkipReason",
    "SkippedFile",
]
