from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest


@pytest.fixture
def tool_dir(tmp_path: Path) -> Path:
    """Provide an empty cocoapods-size checkout under the pytest tmp_path."""
    path = tmp_path / "cocoapods-size"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def _reset_sizereport_logger() -> Iterator[None]:
    """Drop handlers bound to captured streams once a test finishes."""
    yield
    logger = logging.getLogger("sizereport")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
