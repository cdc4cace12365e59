"""Metadata feature exports."""

from .domain.media_metadata import ImageMetadata, TrackMetadata, to_mapping
from .usecases.extraction import MetadataProvider

__all__ = ["ImageMetadata", "MetadataProvider", "TrackMetadata", "to_mapping"]
