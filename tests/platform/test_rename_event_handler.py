"""Tests for the rename event console handler and logger setup."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.text import Text

from media_renamer.platform.logging import LOGGER_NAME, RenameEventRichHandler, setup_logger


def _record(message: str = "message", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRenameEventRichHandler:
    def test_plain_record_is_not_an_event(self) -> None:
        handler = RenameEventRichHandler()

        assert handler._render_event_message(_record()) is None

    def test_pair_event_shows_short_path_and_target(self) -> None:
        handler = RenameEventRichHandler()
        record = _record(
            rename_event="rename.pair.done",
            source_path="/home/user/pictures/2014/holiday/a.jpg",
            target_name="Holiday-2014.jpg",
        )

        rendered = handler._render_event_message(record)

        assert isinstance(rendered, Text)
        assert "Renamed " in rendered.plain
        assert "…/2014/holiday/a.jpg" in rendered.plain
        assert "→ Holiday-2014.jpg" in rendered.plain
        assert "/home/user" not in rendered.plain

    def test_skip_event_lists_token_and_error(self) -> None:
        handler = RenameEventRichHandler()
        record = _record(
            rename_event="plan.file.skipped",
            source_path="song.mp3",
            token="artist",
            error_message="missing metadata",
        )

        rendered = handler._render_event_message(record)

        assert rendered is not None
        assert rendered.plain.endswith("(token=artist, missing metadata)")

    def test_batch_event_uses_log_message(self) -> None:
        handler = RenameEventRichHandler()

        rendered = handler._render_event_message(
            _record("Planning 3 file(s)", rename_event="plan.batch.start")
        )

        assert rendered is not None
        assert "Planning 3 file(s)" in rendered.plain


class TestSetupLogger:
    def test_console_only_by_default(self) -> None:
        logger = setup_logger(log_file=None, console_level=logging.WARNING)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RenameEventRichHandler)
        assert logger.handlers[0].level == logging.WARNING

    def test_file_handler_writes_log(self, tmp_path: Path) -> None:
        log_file = tmp_path / "nested" / "media_renamer.log"
        logger = setup_logger(log_file=log_file)

        logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")
        _ = setup_logger(log_file=None)
