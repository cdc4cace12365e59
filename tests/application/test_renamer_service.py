"""
Summary: Exercise the Renamer service end to end.
Why: Confirm default/override scheme handling and the plan-then-overwrite flow.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from PIL import Image

from media_renamer.application.services import Renamer
from media_renamer.features.renaming import (
    InvalidArgumentError,
    Literal,
    MetadataKey,
    SkipReason,
)

MakeFile = Callable[..., Path]


def test_documented_example_renames_tiff(make_file: MakeFile, stub_provider: Any, tmp_path: Path) -> None:
    source = make_file("hs-2003-24-a-full.tif")
    renamer = Renamer(metadata_provider=stub_provider)
    renamer.set_naming_scheme(["Test-", MetadataKey("date_time")])

    plan = renamer.generate([str(source)])
    outcomes = renamer.overwrite(plan)

    assert dict(plan) == {str(source): "Test-2003-09-03 12_52_43 -0400.tif"}
    assert outcomes[0].renamed
    assert (tmp_path / "Test-2003-09-03 12_52_43 -0400.tif").exists()
    assert not source.exists()


def test_default_scheme(make_file: MakeFile, stub_provider: Any) -> None:
    source = make_file("a.jpg")

    plan = Renamer(metadata_provider=stub_provider).generate([source])

    assert plan[source] == "Renamed-default-.jpg"


def test_set_naming_scheme_compiles_input(stub_provider: Any) -> None:
    renamer = Renamer(metadata_provider=stub_provider)

    stored = renamer.set_naming_scheme([5, "A-", MetadataKey("key"), None, "B"])

    assert stored == (Literal("A-"), MetadataKey("key"), Literal("B"))
    assert renamer.naming_scheme == stored


def test_override_scheme_does_not_replace_default(make_file: MakeFile, stub_provider: Any) -> None:
    source = make_file("song.mp3")
    renamer = Renamer(naming_scheme=["Default-"], metadata_provider=stub_provider)

    plan = renamer.generate([source], scheme=[MetadataKey("artist"), " - ", MetadataKey("title")])

    assert plan[source] == "AC_DC - T.N.T..mp3"
    assert renamer.naming_scheme == (Literal("Default-"),)
    assert renamer.generate([source])[source] == "Default-.mp3"


@pytest.mark.parametrize("override", [[], [None, 3], "not-a-list"])
def test_empty_or_invalid_override_falls_back_to_default(
    make_file: MakeFile, stub_provider: Any, override: object
) -> None:
    source = make_file("a.jpg")
    renamer = Renamer(naming_scheme=["Default-"], metadata_provider=stub_provider)

    assert renamer.generate([source], scheme=override)[source] == "Default-.jpg"


def test_substitution_character_is_configurable(make_file: MakeFile, stub_provider: Any) -> None:
    source = make_file("song.mp3")
    renamer = Renamer(naming_scheme=[MetadataKey("artist")], metadata_provider=stub_provider)

    renamer.substitution_character = "+"

    assert renamer.generate([source])[source] == "AC+DC.mp3"
    with pytest.raises(ValueError):
        renamer.substitution_character = "/"
    assert renamer.substitution_character == "+"


def test_generate_rejects_non_list(stub_provider: Any) -> None:
    with pytest.raises(InvalidArgumentError):
        _ = Renamer(metadata_provider=stub_provider).generate("a.jpg")


def test_batch_with_failures_reports_skips(make_file: MakeFile, stub_provider: Any, tmp_path: Path) -> None:
    tif = make_file("hs-2003-24-a-full.tif")
    mp3 = make_file("song.mp3")
    renamer = Renamer(naming_scheme=[MetadataKey("date_time")], metadata_provider=stub_provider)

    plan = renamer.generate([mp3, tif, tmp_path / "missing.jpg"])

    assert list(plan) == [tif]
    assert {item.reason for item in renamer.last_skipped} == {
        SkipReason.MISSING_METADATA,
        SkipReason.FILE_NOT_VALID,
    }


def test_mutated_plan_is_executed_as_given(make_file: MakeFile, stub_provider: Any, tmp_path: Path) -> None:
    source = make_file("a.jpg")
    renamer = Renamer(metadata_provider=stub_provider)
    plan = dict(renamer.generate([source]))
    plan[source] = "hand-picked.jpg"

    _ = renamer.overwrite(plan)

    assert (tmp_path / "hand-picked.jpg").exists()


def test_real_metadata_provider_with_jpeg(tmp_path: Path) -> None:
    """Without stubs: Pillow reads EXIF and the file is renamed in place."""

    exif = Image.Exif()
    exif[0x0132] = "2014:05:22 09:30:00"  # DateTime
    source = tmp_path / "DSC0001.JPG"
    Image.new("RGB", (4, 4)).save(source, format="JPEG", exif=exif)
    text_file = tmp_path / "notes.txt"
    _ = text_file.write_text("not media")
    renamer = Renamer(naming_scheme=["Vacation_Photos_", MetadataKey("date_time")])

    plan = renamer.generate([source, text_file])
    _ = renamer.overwrite(plan)

    assert (tmp_path / "Vacation_Photos_2014-05-22 09_30_00.JPG").exists()
    assert text_file.exists()
    assert [item.reason for item in renamer.last_skipped] == [SkipReason.UNSUPPORTED_TYPE]
