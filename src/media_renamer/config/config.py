"""Configuration management for media-renamer."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from media_renamer.config.file_ops import write_text_file
from media_renamer.config.paths import default_config_path
from media_renamer.platform.logging import logger

DEFAULT_NAMING_SCHEME_TEXT = "Renamed-default-"
DEFAULT_SUBSTITUTION_CHARACTER = "_"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Naming scheme in text form, e.g. "Holiday-{date_time}"
    naming_scheme: str = DEFAULT_NAMING_SCHEME_TEXT

    # Replacement for characters that file systems reject
    substitution_character: str = DEFAULT_SUBSTITUTION_CHARACTER

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to ``target`` (defaults to the standard location)."""
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []
        lines.append("# media-renamer configuration file")
        lines.append("")

        lines.append("# Default naming scheme. Text in braces names a metadata key,")
        lines.append("# everything else is copied verbatim. Use {{ and }} for literal braces.")
        lines.append('# Example: naming_scheme = "Holiday-{date_time}"')
        lines.append(f"naming_scheme = {self._format_toml_value(config['naming_scheme'])}")
        lines.append("")

        lines.append("# Character substituted for \\ : ? * < > | \" / in generated names")
        lines.append(
            "substitution_character = "
            + self._format_toml_value(config["substitution_character"])
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/media_renamer.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults when absent.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object (cached after the first load).
        """
        if cls._instance is not None and (
            config_file is None or config_file == cls._loaded_from
        ):
            return cls._instance

        source = config_file or default_config_path()

        if not source.exists():
            logger.debug("No configuration file at %s; using defaults", source)
            instance = cls()
        else:
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", source, e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", source)

        cls._instance = instance
        cls._loaded_from = source
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration so the next ``load`` rereads it."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "DEFAULT_NAMING_SCHEME_TEXT", "DEFAULT_SUBSTITUTION_CHARACTER"]
