"""Summary: Resolve a compiled naming scheme against one file's metadata.
Why: Every failure stays local to the file so a batch never aborts on one bad input.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from media_renamer.platform.logging import logger

from ..domain.errors import UnsupportedFileTypeError
from ..domain.results import FilenameResult, ResolvedName, SkippedFile, SkipReason
from ..domain.sanitizer import Sanitizer
from ..domain.scheme import MetadataKey, Scheme
from .ports import FilesystemPort, Metadata, MetadataLookupPort
from .rename_types import RenameEvent


def metadata_text(value: object) -> str:
    """Convert a metadata value to text; ``None`` becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class FilenameGenerator:
    """Build a sanitized candidate filename for a single file."""

    def __init__(
        self,
        metadata_provider: MetadataLookupPort,
        sanitizer: Sanitizer,
        filesystem: FilesystemPort,
    ) -> None:
        self.metadata_provider = metadata_provider
        self.sanitizer = sanitizer
        self.filesystem = filesystem

    def resolve(self, path: object, scheme: Scheme) -> FilenameResult:
        """Resolve ``scheme`` for ``path``.

        Args:
            path: Source file path as given by the caller.
            scheme: Compiled scheme tokens.

        Returns:
            FilenameResult: ``ResolvedName`` with a bare filename (extension
            included, no directory), or ``SkippedFile`` describing why the
            file was left out.
        """
        if not isinstance(path, (str, PathLike)) or not str(path):
            return self._skip(path, SkipReason.FILE_NOT_VALID, "path is not a file path")

        file_path = Path(path)
        if not self.filesystem.is_file(file_path):
            return self._skip(path, SkipReason.FILE_NOT_VALID, "could not access file")

        absolute = self.filesystem.absolute_path(file_path)
        try:
            metadata: Metadata = self.metadata_provider.lookup(absolute)
        except UnsupportedFileTypeError as exc:
            return self._skip(path, SkipReason.UNSUPPORTED_TYPE, str(exc))
        except Exception as exc:
            logger.debug("Metadata extraction traceback for %s", absolute, exc_info=True)
            return self._skip(
                path,
                SkipReason.EXTRACTION_FAILED,
                f"{type(exc).__name__}: {exc}",
            )

        parts: list[str] = []
        for token in scheme:
            if isinstance(token, MetadataKey):
                text = metadata_text(metadata.get(token.name))
                if not text:
                    return self._skip(
                        path,
                        SkipReason.MISSING_METADATA,
                        "no value for metadata key",
                        token=token.name,
                    )
                parts.append(text)
            else:
                parts.append(token.text)

        new_name = self.sanitizer.sanitize("".join(parts) + file_path.suffix)
        if not new_name:
            return self._skip(path, SkipReason.EMPTY_NAME, "scheme produced an empty name")

        logger.info(
            "Resolved %s -> %s",
            path,
            new_name,
            extra={
                "rename_event": RenameEvent.FILE_RESOLVED,
                "source_path": str(path),
                "target_name": new_name,
            },
        )
        return ResolvedName(path=path, filename=new_name)

    @staticmethod
    def _skip(
        path: object,
        reason: SkipReason,
        detail: str,
        *,
        token: str | None = None,
    ) -> SkippedFile:
        logger.log(
            logging.WARNING,
            "Ignoring file %s [%s: %s%s]",
            path,
            reason,
            detail,
            f", token={token}" if token else "",
            extra={
                "rename_event": RenameEvent.FILE_SKIPPED,
                "source_path": str(path),
                "token": token,
                "error_message": f"{reason}: {detail}",
            },
        )
        return SkippedFile(path=path, reason=reason, detail=detail, token=token)


__all__ = ["FilenameGenerator", "metadata_text"]
