"""Tests for the Pillow-backed EXIF extractor."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image, UnidentifiedImageError
from PIL.ExifTags import IFD, Base

from media_renamer.features.metadata.usecases.extraction import JpegExtractor, TiffExtractor


def _write_jpeg(path: Path, *, with_offset: bool) -> Path:
    exif = Image.Exif()
    exif[Base.DateTime] = "2003:09:03 12:52:43"
    exif[Base.Make] = "NASA"
    exif[Base.Model] = "WFPC2"
    exif_ifd: dict[int, str] = {Base.DateTimeOriginal: "2003:09:01 08:00:00"}
    if with_offset:
        exif_ifd[Base.OffsetTime] = "-04:00"
    exif[IFD.Exif] = exif_ifd
    Image.new("RGB", (8, 4), color="navy").save(path, format="JPEG", exif=exif)
    return path


class TestJpegExtractor:
    """Test cases for EXIF extraction from JPEG files."""

    def test_reads_exif_fields(self, tmp_path: Path) -> None:
        source = _write_jpeg(tmp_path / "photo.JPG", with_offset=True)

        metadata = JpegExtractor().extract_metadata(source)

        assert metadata.date_time == "2003-09-03 12:52:43 -0400"
        assert metadata.date_time_original == "2003-09-01 08:00:00 -0400"
        assert metadata.make == "NASA"
        assert metadata.model == "WFPC2"
        assert (metadata.width, metadata.height) == (8, 4)
        assert metadata.file_extension == ".jpg"

    def test_without_offset(self, tmp_path: Path) -> None:
        source = _write_jpeg(tmp_path / "photo.jpg", with_offset=False)

        metadata = JpegExtractor().extract_metadata(source)

        assert metadata.date_time == "2003-09-03 12:52:43"

    def test_image_without_exif(self, tmp_path: Path) -> None:
        source = tmp_path / "plain.jpg"
        Image.new("L", (2, 2)).save(source, format="JPEG")

        metadata = JpegExtractor().extract_metadata(source)

        assert metadata.date_time is None
        assert metadata.make is None
        assert (metadata.width, metadata.height) == (2, 2)


def test_tiff_extractor_reads_size(tmp_path: Path) -> None:
    source = tmp_path / "scan.tif"
    Image.new("RGB", (3, 5)).save(source, format="TIFF")

    metadata = TiffExtractor().extract_metadata(source)

    assert (metadata.width, metadata.height) == (3, 5)


def test_tiff_extractor_reads_exif_sub_ifd(tmp_path: Path) -> None:
    jpeg = _write_jpeg(tmp_path / "source.jpg", with_offset=True)
    source = tmp_path / "hs-2003-24-a-full.tif"
    with Image.open(jpeg) as image:
        image.save(source, format="TIFF", exif=image.getexif())

    metadata = TiffExtractor().extract_metadata(source)

    assert metadata.date_time == "2003-09-03 12:52:43 -0400"
    assert metadata.date_time_original == "2003-09-01 08:00:00 -0400"
    assert metadata.make == "NASA"
    assert metadata.file_extension == ".tif"


def test_not_an_image_raises(tmp_path: Path) -> None:
    source = tmp_path / "fake.jpg"
    _ = source.write_text("definitely text")

    with pytest.raises(UnidentifiedImageError):
        _ = JpegExtractor().extract_metadata(source)
