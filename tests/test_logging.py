"""Tests for promptdoc.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from promptdoc.logging import configure_logging, get_logger


def test_get_logger_is_namespaced() -> None:
    assert get_logger("template").name == "promptdoc.template"
    assert get_logger().name == "promptdoc"


def test_configure_logging_resets_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "promptdoc.log"

    configure_logging(verbose=True, log_file=log_file)
    logger = configure_logging(verbose=False)

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_verbose_logging_writes_debug_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "promptdoc.log"
    logger = configure_logging(verbose=True, log_file=log_file)

    get_logger("template").debug("compiled %s", "t.jet")
    for handler in logger.handlers:
        handler.flush()

    assert "compiled t.jet" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
