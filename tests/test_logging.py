"""Tests for referee.logging."""

from __future__ import annotations

from pathlib import Path

import logging

from referee.logging import StoryboardFormatter, configure_logging, get_logger, storyboard_extra


def test_get_logger_nests_under_referee() -> None:
    assert get_logger("scanner").name == "referee.scanner"
    assert get_logger().name == "referee"


def test_configure_logging_writes_file_sink(tmp_path: Path) -> None:
    log_file = tmp_path / "referee.log"

    configure_logging(verbose=True, log_file=log_file)
    configure_logging(verbose=True, log_file=log_file)
    get_logger("scanner").debug("indexed storyboards")

    logger = get_logger()
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.flush()
    assert "referee.scanner: indexed storyboards" in log_file.read_text(encoding="utf-8")


def _record(message: str, **extra: str) -> logging.LogRecord:
    record = logging.LogRecord("referee.diagnostics", logging.WARNING, __file__, 1, message, None, None)
    record.__dict__.update(extra)
    return record


def test_formatter_prefixes_storyboard_path() -> None:
    formatter = StoryboardFormatter("%(levelname)s %(location)s%(message)s")

    tagged = _record("Missing IDs", **storyboard_extra("App/Main.storyboard"))
    plain = _record("Scanned 2 storyboard(s)")

    assert formatter.format(tagged) == "WARNING App/Main.storyboard: Missing IDs"
    assert formatter.format(plain) == "WARNING Scanned 2 storyboard(s)"


def test_configure_logging_creates_log_directory(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "nested" / "referee.log"

    configure_logging(log_file=log_file)
    get_logger("diagnostics").warning("soft", extra=storyboard_extra("Main.storyboard"))
    for handler in get_logger().handlers:
        handler.flush()

    assert "referee.diagnostics: Main.storyboard: soft" in log_file.read_text(encoding="utf-8")
