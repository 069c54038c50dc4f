"""Error types raised by the sizereport pipeline."""

from __future__ import annotations


class SizeReportError(RuntimeError):
    """Base class for every fatal sizereport failure."""


class ConfigError(SizeReportError):
    """Raised when .sizereport.yml cannot be parsed."""


class ConfigWriteError(SizeReportError):
    """Raised when the pod source config cannot be serialised or written."""


class ProcessExecutionError(SizeReportError):
    """Raised when the measurement tool cannot be launched or exits non-zero."""

    def __init__(self, sdk: str, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.sdk = sdk
        self.returncode = returncode


class ReportReadError(SizeReportError):
    """Raised when the measurement tool left no readable report behind."""


class ReportParseError(SizeReportError):
    """Raised when a report file is not JSON of the expected shape."""


class PayloadSerializationError(SizeReportError):
    """Raised when the metrics payload cannot be encoded."""


__all__ = [
    "ConfigError",
    "ConfigWriteError",
    "PayloadSerializationError",
    "ProcessExecutionError",
    "ReportParseError",
    "ReportReadError",
    "SizeReportError",
]
