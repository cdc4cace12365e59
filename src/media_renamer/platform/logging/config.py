"""Package logger bootstrap.

Where: platform/logging/config.py
What: Build the ``media_renamer`` logger from a Rich console handler and an optional rotating file.
Why: The CLI reconfigures levels and the log file once arguments are known.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from media_renamer.config.paths import default_log_file

from .handlers import RenameEventRichHandler

LOGGER_NAME: Final[str] = "media_renamer"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    # stderr keeps stdout free for plan tables.
    handler = RenameEventRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = log_file.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the package logger.

    Existing handlers are closed and replaced, so calling this again only
    changes levels and the log destination.

    Args:
        log_file: Rotating log file; ``None`` logs to the console only.
        console_level: Threshold for console output.
        file_level: Threshold for the log file.

    Returns:
        logging.Logger: The ``media_renamer`` logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        package_logger.addHandler(_file_handler(Path(log_file), file_level))
    return package_logger


logger: Final[logging.Logger] = setup_logger(log_file=None)


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
