"""Summary: Error taxonomy for scheme-based renaming.
Why: Give call-level and per-file failures distinct, catchable types.
"""

from __future__ import annotations


class MediaRenamerError(Exception):
    """Base class for all media-renamer errors."""


class InvalidArgumentError(MediaRenamerError, TypeError):
    """Raised when a call receives malformed input, e.g. a path list that is not a list."""


class FileNotValidError(MediaRenamerError):
    """A referenced path does not exist or is not a regular file."""


class UnsupportedFileTypeError(MediaRenamerError):
    """No metadata extractor is registered for the file's extension."""

    def __init__(self, extension: str, path: object | None = None) -> None:
        self.extension = extension
        self.path = path
        shown = extension or "(none)"
        super().__init__(f"Unsupported file type: {shown}")


class RenameFailedError(MediaRenamerError):
    """Reserved for a rename whose destination could not be confirmed.

    Renames are not verified after the fact, so nothing raises this yet.
    """


__all__ = [
    "FileNotValidError",
    "InvalidArgumentError",
    "MediaRenamerError",
    "RenameFailedError",
    "UnsupportedFileTypeError",
]
