"""Rich console handler for rename event logs.

Where: platform/logging/handlers.py
What: Render structured plan/rename events with icons and compact paths.
Why: Keep console formatting separate from logger setup.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RenameEventRichHandler(RichHandler):
    """Custom Rich handler that renders rename events on a single styled line."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "plan.batch.start": ("🚀", "cyan"),
        "plan.batch.complete": ("✅", "green"),
        "plan.file.resolved": ("📝", "blue"),
        "plan.file.skipped": ("↪️", "yellow"),
        "rename.batch.start": ("🚀", "cyan"),
        "rename.batch.complete": ("✅", "green"),
        "rename.pair.done": ("📦", "magenta"),
        "rename.pair.skipped": ("⛔", "red"),
    }
    _PREFIXES: ClassVar[dict[str, str]] = {
        "plan.file.resolved": "Planned ",
        "plan.file.skipped": "Skipped ",
        "rename.pair.done": "Renamed ",
        "rename.pair.skipped": "Not renamed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str) -> Text:
        """Shorten ``path`` to its trailing segments with coloured separators."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]

        text = Text()
        if truncated:
            _ = text.append("…" + separator, style=Style(color="magenta"))
        elif pure_path.anchor:
            _ = text.append(pure_path.anchor, style=Style(color="magenta"))
        for index, part in enumerate(parts):
            if index:
                _ = text.append(separator, style=Style(color="magenta"))
            _ = text.append(part, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured events; return ``None`` for plain records."""

        event = getattr(record, "rename_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.endswith(".start") or event.endswith(".complete"):
            _ = body.append(record.getMessage())
            _ = text.append_text(body)
            return text

        prefix = self._PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        target_name = getattr(record, "target_name", None)
        if target_name:
            _ = body.append(" → ")
            _ = body.append(str(target_name), style=Style(color="white", bold=True))

        details: list[str] = []
        token = getattr(record, "token", None)
        if token:
            details.append(f"token={token}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["RenameEventRichHandler"]
