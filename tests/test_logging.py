"""Tests for sizereport.logging."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sizereport.logging import configure_logging, get_logger


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "sizereport"
    assert get_logger("measure").name == "sizereport.measure"


def test_configure_logging_resets_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(verbose=True, log_file=tmp_path / "run.log")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert logger.propagate is False

    get_logger("measure").debug("measuring %s", "Core")
    for handler in logger.handlers:
        handler.flush()
    assert "measuring Core" in (tmp_path / "run.log").read_text(encoding="utf-8")


def test_console_logs_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging()

    get_logger("measure").info("Measuring %s", "Core")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[sizereport] INFO Measuring Core" in captured.err


def test_log_file_is_created_and_truncated(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    log_file.parent.mkdir()
    log_file.write_text("previous run\n", encoding="utf-8")

    logger = configure_logging(log_file=log_file)
    get_logger("report").info("Collected %d binary size result(s)", 2)
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "previous run" not in text
    assert "sizereport.report: Collected 2 binary size result(s)" in text
