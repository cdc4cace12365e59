"""Still-image metadata extractors.

Where: src/media_renamer/features/metadata/usecases/extraction/image_extractors.py
What: Read EXIF fields from JPEG and TIFF files through Pillow.
Why: Give photos the same key/value metadata surface that audio tags provide.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, override

from PIL import Image
from PIL.ExifTags import IFD, Base

from media_renamer.platform.logging import logger

from ...domain.media_metadata import ImageMetadata
from ._base_extractors import IMAGE_CAPABILITY, MediaFormatExtractor
from ._tag_utils import first_text, format_exif_datetime

__all__ = ["PillowImageExtractor", "JpegExtractor", "TiffExtractor"]


class PillowImageExtractor(MediaFormatExtractor):
    """Extract EXIF fields from any image format Pillow can open."""

    CAPABILITY: ClassVar[str] = IMAGE_CAPABILITY
    EXPECTED_FORMAT: ClassVar[str | None] = None

    @override
    def extract_metadata(self, file_path: Path) -> ImageMetadata:
        with Image.open(file_path) as image:
            if self.EXPECTED_FORMAT and image.format != self.EXPECTED_FORMAT:
                logger.debug(
                    "%s has extension %s but contains %s data",
                    file_path,
                    file_path.suffix,
                    image.format,
                )
            width, height = image.size
            exif = image.getexif()
            # TIFF sub-IFDs are read lazily from the open file.
            exif_ifd = exif.get_ifd(IFD.Exif)

        offset = first_text(exif_ifd.get(Base.OffsetTime))
        original_offset = first_text(exif_ifd.get(Base.OffsetTimeOriginal)) or offset
        digitized_offset = first_text(exif_ifd.get(Base.OffsetTimeDigitized)) or offset

        date_time_original = format_exif_datetime(
            first_text(exif_ifd.get(Base.DateTimeOriginal)), original_offset
        )
        date_time = format_exif_datetime(first_text(exif.get(Base.DateTime)), offset)

        metadata = ImageMetadata(
            date_time=date_time or date_time_original,
            date_time_original=date_time_original,
            date_time_digitized=format_exif_datetime(
                first_text(exif_ifd.get(Base.DateTimeDigitized)), digitized_offset
            ),
            make=first_text(exif.get(Base.Make)),
            model=first_text(exif.get(Base.Model)),
            software=first_text(exif.get(Base.Software)),
            artist=first_text(exif.get(Base.Artist)),
            copyright=first_text(exif.get(Base.Copyright)),
            image_description=first_text(exif.get(Base.ImageDescription)),
            width=width,
            height=height,
            file_extension=file_path.suffix.lower(),
        )
        logger.debug("Extracted image metadata: %s", metadata)
        return metadata


class JpegExtractor(PillowImageExtractor):
    """Extractor for JPEG files."""

    EXPECTED_FORMAT: ClassVar[str | None] = "JPEG"


class TiffExtractor(PillowImageExtractor):
    """Extractor for TIFF files."""

    EXPECTED_FORMAT: ClassVar[str | None] = "TIFF"
