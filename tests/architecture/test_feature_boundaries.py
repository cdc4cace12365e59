"""
Summary: Architecture checks keeping the renaming slice independent of concrete adapters.
Why: Prevent regressions where use cases reach for extractors or the real filesystem directly.
"""

from __future__ import annotations

from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
PACKAGE_DIR = REPO_ROOT / "src" / "media_renamer"


def _offenders(directory: Path, needle: str) -> list[str]:
    return [
        str(path.relative_to(REPO_ROOT))
        for path in directory.rglob("*.py")
        if needle in path.read_text(encoding="utf-8")
    ]


def test_renaming_does_not_import_metadata_feature() -> None:
    """Renaming code must obtain metadata through the lookup port."""

    offending = _offenders(PACKAGE_DIR / "features" / "renaming", "media_renamer.features.metadata")
    assert offending == [], f"Renaming imports the metadata feature in: {', '.join(offending)}"


def test_renaming_usecases_do_not_touch_platform_filesystem() -> None:
    """Use cases go through FilesystemPort; only adapters use the platform helpers."""

    offending = _offenders(
        PACKAGE_DIR / "features" / "renaming" / "usecases", "media_renamer.platform.filesystem"
    )
    assert offending == [], f"Use cases import platform filesystem code in: {', '.join(offending)}"
