"""Summary: Replace characters that file systems reject in generated names.
Why: A name built from metadata can contain separators or reserved punctuation.
"""

from __future__ import annotations

from typing import ClassVar, Final, final

ILLEGAL_CHARACTERS: Final[str] = '\\:?*<>|"/'


def is_valid_substitute(character: str) -> bool:
    """Return whether ``character`` can stand in for an illegal character."""
    return len(character) == 1 and character not in ILLEGAL_CHARACTERS


@final
class Sanitizer:
    """Substitute every illegal character in a name with one configured character."""

    ILLEGAL: ClassVar[frozenset[str]] = frozenset(ILLEGAL_CHARACTERS)

    def __init__(self, substitute: str = "_") -> None:
        if not isinstance(substitute, str) or not is_valid_substitute(substitute):
            raise ValueError(
                f"Substitution character must be one character outside {ILLEGAL_CHARACTERS!r}; "
                + f"got {substitute!r}"
            )
        self._substitute = substitute
        self._table = str.maketrans({char: substitute for char in ILLEGAL_CHARACTERS})

    @property
    def substitute(self) -> str:
        return self._substitute

    def sanitize(self, name: str) -> str:
        """Return ``name`` with each illegal character replaced; nothing else changes."""
        return name.translate(self._table)


__all__ = ["ILLEGAL_CHARACTERS", "Sanitizer", "is_valid_substitute"]
