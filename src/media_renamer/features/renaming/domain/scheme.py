"""Summary: Naming scheme tokens and their compilation from loose input.
Why: Reduce whatever callers pass as a scheme to literal text and metadata key references.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from media_renamer.platform.logging import logger


@dataclass(frozen=True, slots=True)
class Literal:
    """Text copied verbatim into the generated name."""

    text: str


@dataclass(frozen=True, slots=True)
class MetadataKey:
    """Reference to a metadata field resolved per file."""

    name: str


SchemeToken: TypeAlias = Literal | MetadataKey
Scheme: TypeAlias = tuple[SchemeToken, ...]


def compile_scheme(raw: object) -> Scheme:
    """Keep only literal text and metadata key references, in their original order.

    Plain ``str`` entries become :class:`Literal`. Anything else (numbers,
    ``None``, bytes, nested sequences, nameless keys) is dropped. A
    non-iterable or string input compiles to an empty scheme.

    Args:
        raw: Candidate scheme entries.

    Returns:
        Scheme: Compiled, immutable token sequence.
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        logger.debug("Scheme input %r is not a sequence of tokens; compiled to empty", raw)
        return ()

    tokens: list[SchemeToken] = []
    for entry in raw:
        if isinstance(entry, str):
            tokens.append(Literal(entry))
        elif isinstance(entry, Literal) and isinstance(entry.text, str):
            tokens.append(entry)
        elif isinstance(entry, MetadataKey) and isinstance(entry.name, str) and entry.name:
            tokens.append(entry)
        else:
            logger.debug("Dropping invalid scheme entry %r", entry)
    return tuple(tokens)


def parse_scheme_text(text: str) -> Scheme:
    """Parse the textual scheme form used by configuration files and the CLI.

    ``{name}`` references a metadata key; ``{{`` and ``}}`` produce literal
    braces. An unterminated ``{`` or an empty ``{}`` is kept as literal text.

    Example:
        ``"Test-{date_time}"`` -> ``(Literal("Test-"), MetadataKey("date_time"))``
    """
    tokens: list[SchemeToken] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            tokens.append(Literal("".join(buffer)))
            buffer.clear()

    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char in "{}" and text.startswith(char * 2, index):
            buffer.append(char)
            index += 2
            continue
        if char == "{":
            end = text.find("}", index + 1)
            name = text[index + 1:end].strip() if end != -1 else ""
            if end != -1 and name and "{" not in name:
                flush()
                tokens.append(MetadataKey(name))
                index = end + 1
                continue
        buffer.append(char)
        index += 1

    flush()
    return tuple(tokens)


def format_scheme(scheme: Iterable[SchemeToken]) -> str:
    """Render a compiled scheme back to its textual form."""
    parts: list[str] = []
    for token in scheme:
        if isinstance(token, MetadataKey):
            parts.append("{" + token.name + "}")
        else:
            parts.append(token.text.replace("{", "{{").replace("}", "}}"))
    return "".join(parts)


__all__ = [
    "Literal",
    "MetadataKey",
    "Scheme",
    "SchemeToken",
    "compile_scheme",
    "format_scheme",
    "parse_scheme_text",
]
