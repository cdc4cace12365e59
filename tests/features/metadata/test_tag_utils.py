"""Tests for tag parsing helpers."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from media_renamer.features.metadata.usecases.extraction._tag_utils import (
    first_text,
    format_exif_datetime,
    parse_slash_separated,
    parse_tuple_numbers,
    parse_year,
)


@dataclass
class _Frame:
    text: list[str]


@dataclass
class _Attribute:
    value: object


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (["Title", "Other"], "Title"),
        ([], None),
        (None, None),
        ("  padded\x00", "padded"),
        (b"bytes", "bytes"),
        (_Frame(["frame text"]), "frame text"),
        ([_Attribute("wma title")], "wma title"),
        (7, "7"),
        ("", None),
    ],
)
def test_first_text(raw: object, expected: str | None) -> None:
    assert first_text(raw) == expected


def test_parse_slash_separated() -> None:
    assert parse_slash_separated("3/12") == (3, 12)
    assert parse_slash_separated("3") == (3, None)
    assert parse_slash_separated("") == (None, None)
    assert parse_slash_separated("a/b") == (None, None)


def test_parse_tuple_numbers() -> None:
    assert parse_tuple_numbers([(4, 10)]) == (4, 10)
    assert parse_tuple_numbers([(0, 0)]) == (None, None)
    assert parse_tuple_numbers(None) == (None, None)


def test_parse_year() -> None:
    assert parse_year("2023-05-01") == 2023
    assert parse_year("23") is None


class TestFormatExifDatetime:
    """Test cases for EXIF timestamp rendering."""

    def test_without_offset(self) -> None:
        assert format_exif_datetime("2003:09:03 12:52:43") == "2003-09-03 12:52:43"

    def test_with_offset(self) -> None:
        assert format_exif_datetime("2003:09:03 12:52:43", "-04:00") == "2003-09-03 12:52:43 -0400"

    def test_bad_offset_is_ignored(self) -> None:
        assert format_exif_datetime("2003:09:03 12:52:43", "local") == "2003-09-03 12:52:43"

    def test_unparseable_value_is_kept(self) -> None:
        assert format_exif_datetime("sometime in 2003") == "sometime in 2003"

    def test_empty(self) -> None:
        assert format_exif_datetime(None) is None
        assert format_exif_datetime("") is None
