"""Logging for sizereport runs.

Stdout belongs to cocoapods-size and to the final payload, so every handler
configured here writes to stderr or to a file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "sizereport"
_CONSOLE_FORMAT = "[sizereport] %(levelname)s %(message)s"
_VERBOSE_CONSOLE_FORMAT = "[sizereport] %(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the sizereport hierarchy (``sizereport.<name>``)."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send sizereport logs to stderr and, when given, to ``log_file``.

    ``log_file`` keeps a timestamped record of every measurement so CI jobs
    can archive it next to the payload.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(
        logging.Formatter(_VERBOSE_CONSOLE_FORMAT if verbose else _CONSOLE_FORMAT)
    )
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
