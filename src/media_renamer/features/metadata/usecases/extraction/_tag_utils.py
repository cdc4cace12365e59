"""Tag utility helpers.

Where: src/media_renamer/features/metadata/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for parsing and safe metadata tag access.
Why: Share parsing between the mutagen and EXIF based extractors.
"""

from __future__ import annotations

import re
from datetime import datetime

__all__ = [
    "first_text",
    "parse_slash_separated",
    "parse_tuple_numbers",
    "parse_year",
    "format_exif_datetime",
]

_EXIF_OFFSET = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def first_text(value: object) -> str | None:
    """Return the first entry of a tag value as stripped text, or ``None``."""
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    if value is None:
        return None
    if hasattr(value, "text"):
        # ID3 frames carry their values in ``.text``.
        return first_text(getattr(value, "text"))
    if hasattr(value, "value"):
        # ASF attributes wrap theirs in ``.value``.
        return first_text(getattr(value, "value"))
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip().strip("\x00")
    return text or None


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = value.split(sep="/") if value else []
    num: int | None = int(parts[0]) if parts and parts[0].strip().isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].strip().isdigit() else None
    return num, total


def parse_tuple_numbers(data: list[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Parse a list of numeric tuples and return the first tuple with zeros converted to None."""
    if data:
        first: tuple[int, int] = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if first[1] != 0 else None
        return num, total
    return None, None


def parse_year(date_str: str) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    return int(date_str[:4]) if date_str and len(date_str) >= 4 and date_str[:4].isdigit() else None


def format_exif_datetime(raw: str | None, offset: str | None = None) -> str | None:
    """Render an EXIF ``YYYY:MM:DD HH:MM:SS`` stamp as ``YYYY-MM-DD HH:MM:SS [+HHMM]``.

    Values that do not parse are returned unchanged so they can still be used.
    """
    if not raw:
        return None
    raw = raw.strip().strip("\x00")
    try:
        stamp = datetime.strptime(raw, "%Y:%m:%d %H:%M:%S")
    except ValueError:
        return raw or None

    rendered = stamp.strftime("%Y-%m-%d %H:%M:%S")
    match = _EXIF_OFFSET.match(offset.strip()) if offset else None
    if match:
        sign, hours, minutes = match.groups()
        rendered += f" {sign}{hours}{minutes}"
    return rendered
