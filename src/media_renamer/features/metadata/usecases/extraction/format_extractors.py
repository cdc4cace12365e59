"""Format-specific audio metadata extractors.

Where: src/media_renamer/features/metadata/usecases/extraction/format_extractors.py
What: Define concrete mutagen-backed extractors for the supported audio formats.
Why: Keep per-format tag keys out of the provider so new formats are one class each.
"""

from __future__ import annotations

from typing import Any, ClassVar, cast, override

from mutagen import FileType
from mutagen.aiff import AIFF
from mutagen.asf import ASF
from mutagen.easyid3 import EasyID3
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggvorbis import OggVorbis
from mutagen.wave import WAVE

from ._base_extractors import BaseAudioExtractor
from ._tag_utils import parse_tuple_numbers

__all__ = [
    "Mp3Extractor",
    "WaveExtractor",
    "FlacExtractor",
    "AiffExtractor",
    "OggVorbisExtractor",
    "M4aExtractor",
    "AsfExtractor",
]

_VORBIS_TAGS: dict[str, str] = {
    "title": "title",
    "artist": "artist",
    "album_artist": "albumartist",
    "album": "album",
    "genre": "genre",
    "track": "tracknumber",
    "disc": "discnumber",
    "date": "date",
}

_ID3_FRAMES: dict[str, str] = {
    "title": "TIT2",
    "artist": "TPE1",
    "album_artist": "TPE2",
    "album": "TALB",
    "genre": "TCON",
    "track": "TRCK",
    "disc": "TPOS",
    "date": "TDRC",
}


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files using EasyID3 tags."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"ID3": EasyID3}
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_TAGS


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files."""

    FILE_CLASS: ClassVar[type[FileType] | None] = FLAC
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_TAGS


class OggVorbisExtractor(BaseAudioExtractor):
    """Extractor for Ogg Vorbis files."""

    FILE_CLASS: ClassVar[type[FileType] | None] = OggVorbis
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_TAGS


class WaveExtractor(BaseAudioExtractor):
    """Extractor for WAV files carrying an ID3 chunk."""

    FILE_CLASS: ClassVar[type[FileType] | None] = WAVE
    TAG_MAPPING: ClassVar[dict[str, str]] = _ID3_FRAMES


class AiffExtractor(BaseAudioExtractor):
    """Extractor for AIFF files carrying an ID3 chunk."""

    FILE_CLASS: ClassVar[type[FileType] | None] = AIFF
    TAG_MAPPING: ClassVar[dict[str, str]] = _ID3_FRAMES


class M4aExtractor(BaseAudioExtractor):
    """Extractor for M4A/AAC files using MP4 atoms."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MP4
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album_artist": "aART",
        "album": "\xa9alb",
        "genre": "\xa9gen",
        "track": "trkn",
        "disc": "disk",
        "date": "\xa9day",
    }

    @override
    def _get_tag_value(self, tags: FileType, key: str) -> str | None:
        if key in ("trkn", "disk"):
            value = cast(list[tuple[int, int]] | None, tags.get(key))
            if not value:
                return None
            num, total = parse_tuple_numbers(data=value)
            return f"{num or ''}/{total or ''}"
        return super()._get_tag_value(tags, key)


class AsfExtractor(BaseAudioExtractor):
    """Extractor for ASF/WMA files."""

    FILE_CLASS: ClassVar[type[FileType] | None] = ASF
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "artist": "Author",
        "album_artist": "WM/AlbumArtist",
        "album": "WM/AlbumTitle",
        "genre": "WM/Genre",
        "track": "WM/TrackNumber",
        "disc": "WM/PartOfSet",
        "date": "WM/Year",
    }
