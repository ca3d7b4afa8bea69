"""Logging setup for PlayDeck."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


def _default_log_dir() -> Path:
    local_appdata = os.getenv("LOCALAPPDATA")
    if local_appdata:
        return Path(local_appdata) / "PlayDeck" / "logs"
    return Path.home() / ".playdeck" / "logs"


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv("PLAYDECK_LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _is_console_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and not isinstance(
        handler, logging.FileHandler
    )


def init_logging(app_name: str = "playdeck") -> Path:
    """Initialize logging and return the log file path."""
    log_dir = _default_log_dir()
    log_path = log_dir / "app.log"
    level = _level_from_env()

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=2_000_000,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
    except OSError:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    if not any(_is_console_handler(h) for h in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    logging.getLogger(app_name).info("Logging initialized at %s", log_path)
    return log_path


def set_console_level(level: int) -> None:
    """Adjust console (stderr) handler level."""
    for handler in logging.getLogger().handlers:
        if _is_console_handler(handler):
            handler.setLevel(level)
