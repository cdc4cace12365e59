"""Shared base classes for metadata extractors.

Where: src/media_renamer/features/metadata/usecases/extraction/_base_extractors.py
What: Define abstract base classes that encapsulate shared tag handling logic.
Why: Concrete per-format extractors only declare their file class and tag keys.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, override

from mutagen import FileType
from mutagen._util import MutagenError

from media_renamer.platform.logging import logger

from ...domain.media_metadata import ImageMetadata, TrackMetadata
from ._tag_utils import first_text, parse_slash_separated, parse_year

__all__ = [
    "AUDIO_CAPABILITY",
    "IMAGE_CAPABILITY",
    "MediaFormatExtractor",
    "BaseAudioExtractor",
]

AUDIO_CAPABILITY = "audio"
IMAGE_CAPABILITY = "image"


class MediaFormatExtractor(abc.ABC):
    """Abstract base class for format-specific metadata extractors."""

    CAPABILITY: ClassVar[str] = ""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> TrackMetadata | ImageMetadata:
        """Extract metadata from a media file."""
        raise NotImplementedError


class BaseAudioExtractor(MediaFormatExtractor, abc.ABC):
    """Base class for audio metadata extractors backed by mutagen."""

    CAPABILITY: ClassVar[str] = AUDIO_CAPABILITY
    FILE_CLASS: ClassVar[type[FileType] | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "artist": "",
        "album_artist": "",
        "album": "",
        "genre": "",
        "track": "",
        "disc": "",
        "date": "",
    }

    def _open_file(self, file_path: Path) -> FileType:
        """Open the audio file with the format's mutagen class."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        try:
            return self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
        except MutagenError as exc:
            logger.error(
                "Failed to read %s tags from %s: %s",
                self.__class__.__name__.replace("Extractor", ""),
                file_path,
                exc,
            )
            if "No such file" in str(exc):
                raise FileNotFoundError(str(exc)) from exc
            raise

    def _get_tag_value(self, tags: FileType, key: str) -> str | None:
        """Get a tag value as text; empty keys are not looked up."""
        if not key:
            return None
        return first_text(tags.get(key))

    @override
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        tags = self._open_file(file_path)
        logger.debug("Opened file %s with tags type: %s", file_path, type(tags.tags))

        track_str = self._get_tag_value(tags, self.TAG_MAPPING["track"]) or ""
        track_number, track_total = parse_slash_separated(value=track_str)

        disc_str = self._get_tag_value(tags, self.TAG_MAPPING["disc"]) or ""
        disc_number, disc_total = parse_slash_separated(value=disc_str)

        date_str = self._get_tag_value(tags, self.TAG_MAPPING["date"])

        metadata = TrackMetadata(
            title=self._get_tag_value(tags, self.TAG_MAPPING["title"]),
            artist=self._get_tag_value(tags, self.TAG_MAPPING["artist"]),
            album_artist=self._get_tag_value(tags, self.TAG_MAPPING["album_artist"]),
            album=self._get_tag_value(tags, self.TAG_MAPPING["album"]),
            genre=self._get_tag_value(tags, self.TAG_MAPPING["genre"]),
            date=date_str,
            year=parse_year(date_str or ""),
            track_number=track_number,
            track_total=track_total,
            disc_number=disc_number,
            disc_total=disc_total,
            file_extension=file_path.suffix.lower(),
        )
        logger.debug("Extracted metadata: %s", metadata)
        return metadata
