"""Logging setup: console always, rotating files when LOG_DIR is set."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from . import config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCESS_LOGGER_NAME = "student_dashboard.access"


def _file_handler(path: Path, level: int | str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging() -> None:
    """Configure the root logger once.

    - console handler at LOG_LEVEL
    - combined.log (all records) and error.log (ERROR and above) under LOG_DIR
    """

    root = logging.getLogger()
    level = config.get_log_level()
    root.setLevel(level)

    # Prevent duplicate handlers
    if root.handlers:
        return

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console)

    log_dir = config.get_log_dir()
    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        root.addHandler(_file_handler(directory / "combined.log", level))
        root.addHandler(_file_handler(directory / "error.log", logging.ERROR))


__all__ = ["ACCESS_LOGGER_NAME", "setup_logging"]
