"""
Summary: Public surface for metadata extraction modules.
Why: Provide a stable import path for the renamer service and tests.
"""

from ._base_extractors import (
    AUDIO_CAPABILITY,
    IMAGE_CAPABILITY,
    BaseAudioExtractor,
    MediaFormatExtractor,
)
from .format_extractors import (
    AiffExtractor,
    AsfExtractor,
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggVorbisExtractor,
    WaveExtractor,
)
from .image_extractors import JpegExtractor, PillowImageExtractor, TiffExtractor
from .metadata_provider import MetadataProvider

__all__ = [
    "AUDIO_CAPABILITY",
    "IMAGE_CAPABILITY",
    "AiffExtractor",
    "AsfExtractor",
    "BaseAudioExtractor",
    "FlacExtractor",
    "JpegExtractor",
    "M4aExtractor",
    "MediaFormatExtractor",
    "MetadataProvider",
    "Mp3Extractor",
    "OggVorbisExtractor",
    "PillowImageExtractor",
    "TiffExtractor",
    "WaveExtractor",
]
