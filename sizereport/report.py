"""Aggregates per-SDK measurements into the metrics service payload."""

from __future__ import annotations

import json
from typing import List, Protocol, Sequence

from .errors import PayloadSerializationError
from .logging import get_logger
from .models import BinaryMetricsReport, Result, SDKBinaryReport

METRIC = "BinarySize"
DEFAULT_MEASUREMENT_TYPE = "firebase-ios-sdk-testing"


class Measurer(Protocol):
    def measure(self, sdk: str) -> SDKBinaryReport: ...


class ReportGenerator:
    """Measures SDKs in order and builds the BinarySize payload."""

    def __init__(self, measurer: Measurer) -> None:
        self.measurer = measurer
        self.logger = get_logger("report")

    def create_metrics_report(
        self,
        sdks: Sequence[str],
        measurement_type: str = DEFAULT_MEASUREMENT_TYPE,
        log: str = "",
    ) -> BinaryMetricsReport:
        """Measure every SDK; the first failure aborts the whole report."""
        results: List[Result] = []
        for sdk in sdks:
            report = self.measurer.measure(sdk)
            results.append(
                Result(sdk=sdk, type=measurement_type, value=report.combined_pods_extra_size)
            )
        self.logger.info("Collected %d binary size result(s)", len(results))
        return BinaryMetricsReport(metric=METRIC, results=tuple(results), log=log)

    def create_metrics_request_data(
        self,
        sdks: Sequence[str],
        measurement_type: str = DEFAULT_MEASUREMENT_TYPE,
        log: str = "",
    ) -> bytes:
        report = self.create_metrics_report(sdks, measurement_type, log)
        return serialize_report(report)


def serialize_report(report: BinaryMetricsReport) -> bytes:
    """Encode the payload as compact UTF-8 JSON."""
    try:
        text = json.dumps(report.to_dict(), separators=(",", ":"), ensure_ascii=False)
        return text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise PayloadSerializationError(f"Failed to encode metrics payload: {exc}") from exc


__all__ = [
    "DEFAULT_MEASUREMENT_TYPE",
    "METRIC",
    "Measurer",
    "ReportGenerator",
    "serialize_report",
]
