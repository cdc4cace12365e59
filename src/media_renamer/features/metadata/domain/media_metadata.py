# Where: media_renamer.features.metadata.domain.media_metadata
# What: Metadata records produced by the audio and image extractors.
# Why: Extractors fill typed records; the renamer consumes them as a flat key/value mapping.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields


@dataclass
class TrackMetadata:
    """Metadata for a music track."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    album_artist: str | None = None
    genre: str | None = None
    date: str | None = None
    year: int | None = None
    track_number: int | None = None
    track_total: int | None = None
    disc_number: int | None = None
    disc_total: int | None = None
    file_extension: str | None = None


@dataclass
class ImageMetadata:
    """EXIF metadata for a still image."""

    date_time: str | None = None
    date_time_original: str | None = None
    date_time_digitized: str | None = None
    make: str | None = None
    model: str | None = None
    software: str | None = None
    artist: str | None = None
    copyright: str | None = None
    image_description: str | None = None
    width: int | None = None
    height: int | None = None
    file_extension: str | None = None


def to_mapping(metadata: TrackMetadata | ImageMetadata) -> Mapping[str, object]:
    """Flatten a metadata record into a mapping, omitting unset fields."""
    result: dict[str, object] = {}
    for f in fields(metadata):
        value = getattr(metadata, f.name)
        if value is None or value == "":
            continue
        result[f.name] = value
    return result


__all__ = ["ImageMetadata", "TrackMetadata", "to_mapping"]
