"""Where: src/media_renamer/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to feature layers without repeating checks.
"""

from __future__ import annotations

from media_renamer.config.config import (
    DEFAULT_NAMING_SCHEME_TEXT,
    DEFAULT_SUBSTITUTION_CHARACTER,
    Config,
)
from media_renamer.features.renaming.domain.sanitizer import is_valid_substitute
from media_renamer.features.renaming.domain.scheme import Scheme, parse_scheme_text
from media_renamer.platform.logging import logger


def naming_scheme_from(config: Config) -> Scheme:
    """Compile the configured scheme; an empty result falls back to the default."""

    scheme = parse_scheme_text(config.naming_scheme or "")
    if not scheme:
        logger.warning(
            "Configured naming scheme %r is empty; using %r",
            config.naming_scheme,
            DEFAULT_NAMING_SCHEME_TEXT,
        )
        scheme = parse_scheme_text(DEFAULT_NAMING_SCHEME_TEXT)
    return scheme


def substitution_character_from(config: Config) -> str:
    """Return the configured substitute, or the default when it is unusable."""

    value = config.substitution_character
    if isinstance(value, str) and is_valid_substitute(value):
        return value
    logger.warning(
        "Invalid substitution character %r in configuration; using %r",
        value,
        DEFAULT_SUBSTITUTION_CHARACTER,
    )
    return DEFAULT_SUBSTITUTION_CHARACTER


DEFAULT_NAMING_SCHEME: Scheme = parse_scheme_text(DEFAULT_NAMING_SCHEME_TEXT)
SUBSTITUTION_CHARACTER: str = DEFAULT_SUBSTITUTION_CHARACTER


__all__ = [
    "DEFAULT_NAMING_SCHEME",
    "SUBSTITUTION_CHARACTER",
    "naming_scheme_from",
    "substitution_character_from",
]
