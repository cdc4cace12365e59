"""Locations of the config file and the log file.

Both live under the project root (the nearest parent holding
``pyproject.toml`` or ``.git``). ``MEDIA_RENAMER_CONFIG`` points the
config file elsewhere.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "MEDIA_RENAMER_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    """Return the TOML config path, honouring ``MEDIA_RENAMER_CONFIG``."""

    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_file() -> Path:
    return (_detect_repo_root() / "logs" / "media_renamer.log").resolve()


__all__ = ["CONFIG_ENV_VAR", "default_config_path", "default_log_file"]
