"""Tests for the metrics payload aggregation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sizereport.errors import PayloadSerializationError, ProcessExecutionError
from sizereport.measure import SizeMeasurer
from sizereport.models import BinaryMetricsReport, Result
from sizereport.report import METRIC, ReportGenerator, serialize_report
from tests._fixtures.fake_tool import FakeSizeTool


def _generator(tool_dir: Path, tmp_path: Path, tool: FakeSizeTool) -> ReportGenerator:
    return ReportGenerator(SizeMeasurer(tool_dir, tmp_path / "config.json", runner=tool))


def test_end_to_end_payload(tool_dir: Path, tmp_path: Path) -> None:
    tool = FakeSizeTool({"Analytics": 2048, "Crashlytics": 8192})
    generator = _generator(tool_dir, tmp_path, tool)

    data = generator.create_metrics_request_data(
        ["Analytics", "Crashlytics"], "firebase-ios-sdk-testing", "build-123"
    )

    assert data == (
        b'{"metric":"BinarySize","results":['
        b'{"sdk":"Analytics","type":"firebase-ios-sdk-testing","value":2048},'
        b'{"sdk":"Crashlytics","type":"firebase-ios-sdk-testing","value":8192}],'
        b'"log":"build-123"}'
    )


def test_results_follow_input_order(tool_dir: Path, tmp_path: Path) -> None:
    sdks = ["FirebaseStorage", "FirebaseAuth", "FirebaseFirestore", "FirebaseAuth"]
    tool = FakeSizeTool({sdk: index * 100 for index, sdk in enumerate(sdks)})
    generator = _generator(tool_dir, tmp_path, tool)

    report = generator.create_metrics_report(sdks, "nightly", "log")

    assert report.metric == METRIC
    assert [result.sdk for result in report.results] == sdks
    assert {result.type for result in report.results} == {"nightly"}
    assert tool.measured_sdks == sdks


def test_first_failure_aborts_report(tool_dir: Path, tmp_path: Path) -> None:
    tool = FakeSizeTool({"A": 1, "C": 3}, failures={"B": 1})
    generator = _generator(tool_dir, tmp_path, tool)

    with pytest.raises(ProcessExecutionError):
        generator.create_metrics_request_data(["A", "B", "C"], "type", "log")

    assert tool.measured_sdks == ["A", "B"]


def test_empty_sdk_list_measures_nothing(tool_dir: Path, tmp_path: Path) -> None:
    tool = FakeSizeTool()
    generator = _generator(tool_dir, tmp_path, tool)

    data = generator.create_metrics_request_data([], "type", "build-1")

    assert json.loads(data) == {"metric": "BinarySize", "results": [], "log": "build-1"}
    assert tool.calls == []


def test_serialize_single_result() -> None:
    report = BinaryMetricsReport(
        metric=METRIC,
        results=(Result(sdk="Firebase", type="firebase-ios-sdk-testing", value=4096),),
        log="",
    )

    assert b'{"sdk":"Firebase","type":"firebase-ios-sdk-testing","value":4096}' in serialize_report(report)


def test_serialize_rejects_unencodable_payload() -> None:
    report = BinaryMetricsReport(metric=METRIC, results=(), log=object())  # type: ignore[arg-type]

    with pytest.raises(PayloadSerializationError):
        serialize_report(report)
