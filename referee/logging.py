"""Logging setup for referee, including storyboard-aware diagnostic records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

_LOGGER_NAME = "referee"

STORYBOARD_FIELD = "storyboard"

_CONSOLE_FORMAT = "[referee] %(levelname)s %(location)s%(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(location)s%(message)s"


class StoryboardFormatter(logging.Formatter):
    """Prefixes records that carry a storyboard path with that path."""

    def format(self, record: logging.LogRecord) -> str:
        storyboard = getattr(record, STORYBOARD_FIELD, None)
        record.location = f"{storyboard}: " if storyboard else ""
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the referee hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def storyboard_extra(storyboard: str) -> Dict[str, str]:
    """``extra`` mapping that attaches a storyboard path to a log record."""
    return {STORYBOARD_FIELD: storyboard}


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send referee logs to stderr and, when ``log_file`` is given, to that file too."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(StoryboardFormatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(StoryboardFormatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = [
    "STORYBOARD_FIELD",
    "StoryboardFormatter",
    "configure_logging",
    "get_logger",
    "storyboard_extra",
]
