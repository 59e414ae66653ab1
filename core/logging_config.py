"""Logging configuration for the application."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from core.config import get_app_dir

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FILE_NAME = "gemini_desk.log"

# httpx logs every request at INFO, including the API key query parameter
_QUIET_LOGGERS = ("httpx", "httpcore")


def _parse_level(value: Optional[str], default: int) -> int:
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def _file_handler(log_file: Path, level: int) -> Optional[logging.Handler]:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=2 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError:
        return None
    handler.setLevel(level)
    return handler


def _install_excepthook() -> None:
    if getattr(_install_excepthook, "_installed", False):
        return

    def handle_exception(exc_type, exc, tb) -> None:
        if not issubclass(exc_type, KeyboardInterrupt):
            logging.getLogger("uncaught").critical(
                "Unhandled exception", exc_info=(exc_type, exc, tb)
            )
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = handle_exception
    _install_excepthook._installed = True


def configure_logging(
    log_dir: Optional[Path] = None,
    file_level: Optional[str] = None,
    console_level: Optional[str] = None,
) -> Path:
    """Configure application logging and return the log file path.

    Levels fall back to GEMINI_DESK_LOG_FILE_LEVEL and
    GEMINI_DESK_LOG_CONSOLE_LEVEL, then INFO. The file handler is skipped
    when the log directory is not writable.
    """
    log_file = (log_dir or get_app_dir() / "logs") / LOG_FILE_NAME
    file_level_value = _parse_level(
        file_level or os.getenv("GEMINI_DESK_LOG_FILE_LEVEL"), logging.INFO
    )
    console_level_value = _parse_level(
        console_level or os.getenv("GEMINI_DESK_LOG_CONSOLE_LEVEL"), logging.INFO
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level_value)
    handlers: list[logging.Handler] = [console_handler]
    file_handler = _file_handler(log_file, file_level_value)
    if file_handler is not None:
        handlers.insert(0, file_handler)

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=min(file_level_value, console_level_value),
        handlers=handlers,
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.captureWarnings(True)
    _install_excepthook()

    logging.getLogger(__name__).debug("Logging initialized at %s", log_file)
    return log_file
