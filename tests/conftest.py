"""Shared pytest fixtures for renaming tests."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path

import pytest

from media_renamer.features.renaming import UnsupportedFileTypeError


class StubMetadataProvider:
    """Metadata source keyed by file name, mimicking extension routing."""

    def __init__(
        self,
        metadata_by_name: Mapping[str, Mapping[str, object]],
        supported: frozenset[str] = frozenset({".jpg", ".tif", ".mp3", ".flac"}),
    ) -> None:
        self.metadata_by_name = dict(metadata_by_name)
        self.supported = supported
        self.calls: list[Path] = []

    def lookup(self, path: Path) -> Mapping[str, object]:
        self.calls.append(path)
        if path.suffix.lower() not in self.supported:
            raise UnsupportedFileTypeError(path.suffix.lower(), path)
        return self.metadata_by_name.get(path.name, {})


@pytest.fixture
def make_file(tmp_path: Path) -> Iterator[object]:
    """Create an empty file under ``tmp_path`` and return its path."""

    def _make(name: str, content: bytes = b"") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(content)
        return path

    yield _make


@pytest.fixture
def stub_provider() -> StubMetadataProvider:
    return StubMetadataProvider(
        {
            "hs-2003-24-a-full.tif": {"date_time": "2003-09-03 12:52:43 -0400"},
            "song.mp3": {"artist": "AC/DC", "title": "T.N.T.", "track_number": 7},
            "blank.jpg": {"date_time": ""},
        }
    )


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Iterator[None]:
    """Keep cached configuration from leaking between tests."""

    from media_renamer.config.config import Config

    Config.reset()
    yield None
    Config.reset()


@pytest.fixture
def provider_factory() -> type[StubMetadataProvider]:
    """Expose the stub provider class for tests that need custom metadata."""

    return StubMetadataProvider
