"""Extension-routed metadata lookup.

Where: src/media_renamer/features/metadata/usecases/extraction/metadata_provider.py
What: Provide the MetadataProvider facade that dispatches to format extractors.
Why: Keep the extension-to-extractor registry as the single place new media types are added.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar

from media_renamer.features.renaming.domain.errors import UnsupportedFileTypeError
from media_renamer.platform.logging import logger

from ...domain.media_metadata import to_mapping
from ._base_extractors import MediaFormatExtractor
from .format_extractors import (
    AiffExtractor,
    AsfExtractor,
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggVorbisExtractor,
    WaveExtractor,
)
from .image_extractors import JpegExtractor, TiffExtractor

__all__ = ["MetadataProvider"]


class MetadataProvider:
    """Select an extractor by file extension and return the file's metadata mapping.

    Extensions are compared lower-cased. Each instance copies the default
    registry, so ``register`` on one provider never affects another.
    """

    DEFAULT_EXTRACTORS: ClassVar[dict[str, MediaFormatExtractor]] = {
        ".jpg": JpegExtractor(),
        ".jpeg": JpegExtractor(),
        ".tif": TiffExtractor(),
        ".tiff": TiffExtractor(),
        ".mp3": Mp3Extractor(),
        ".wav": WaveExtractor(),
        ".flac": FlacExtractor(),
        ".aiff": AiffExtractor(),
        ".ogg": OggVorbisExtractor(),
        ".m4a": M4aExtractor(),
        ".asf": AsfExtractor(),
    }

    def __init__(self, extractors: Mapping[str, MediaFormatExtractor] | None = None) -> None:
        self._extractors: dict[str, MediaFormatExtractor] = {}
        registry = self.DEFAULT_EXTRACTORS if extractors is None else extractors
        for extension, extractor in registry.items():
            self.register(extension, extractor)

    @staticmethod
    def _normalize(extension: str) -> str:
        extension = extension.strip().lower()
        if extension and not extension.startswith("."):
            extension = "." + extension
        return extension

    def register(self, extension: str, extractor: MediaFormatExtractor) -> None:
        """Route ``extension`` (with or without the leading dot) to ``extractor``."""
        normalized = self._normalize(extension)
        if not normalized:
            raise ValueError("Extension must not be empty")
        self._extractors[normalized] = extractor

    def supported_extensions(self, capability: str | None = None) -> frozenset[str]:
        """Return registered extensions, optionally only those of one capability."""
        return frozenset(
            ext
            for ext, extractor in self._extractors.items()
            if capability is None or extractor.CAPABILITY == capability
        )

    def extractor_for(self, file_path: Path) -> MediaFormatExtractor:
        """Return the extractor registered for ``file_path``'s extension.

        Raises:
            UnsupportedFileTypeError: If the extension is not registered.
        """
        extension = file_path.suffix.lower()
        extractor = self._extractors.get(extension)
        if extractor is None:
            raise UnsupportedFileTypeError(extension, file_path)
        return extractor

    def lookup(self, path: Path) -> Mapping[str, object]:
        """Extract ``path``'s metadata as a key/value mapping.

        Raises:
            UnsupportedFileTypeError: If the extension is not registered.
            Exception: Whatever the format library raises for unreadable files.
        """
        extractor = self.extractor_for(path)
        logger.debug(
            "Routing %s to %s (%s)",
            path,
            type(extractor).__name__,
            extractor.CAPABILITY,
        )
        return to_mapping(extractor.extract_metadata(path))
