"""Tests for validated settings derived from configuration."""

from __future__ import annotations

import logging

import pytest

from media_renamer.config.config import Config
from media_renamer.config.settings import (
    DEFAULT_NAMING_SCHEME,
    naming_scheme_from,
    substitution_character_from,
)
from media_renamer.features.renaming import Literal, MetadataKey


def test_default_scheme_matches_original_default() -> None:
    assert DEFAULT_NAMING_SCHEME == (Literal("Renamed-default-"),)


def test_configured_scheme_is_parsed() -> None:
    scheme = naming_scheme_from(Config(naming_scheme="Trip-{date_time}"))

    assert scheme == (Literal("Trip-"), MetadataKey("date_time"))


def test_empty_scheme_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="media_renamer")

    assert naming_scheme_from(Config(naming_scheme="")) == DEFAULT_NAMING_SCHEME
    assert any("is empty" in message for message in caplog.messages)


@pytest.mark.parametrize(("value", "expected"), [("-", "-"), (":", "_"), ("ab", "_"), ("", "_")])
def test_substitution_character_validation(value: str, expected: str) -> None:
    assert substitution_character_from(Config(substitution_character=value)) == expected
