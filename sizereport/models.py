"""Data models for pod configs, tool reports and the metrics payload."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from .errors import ReportParseError


@dataclass(frozen=True)
class Pod:
    """One SDK entry in the cocoapods-size source config."""

    sdk: str
    path: str

    def to_dict(self) -> Dict[str, str]:
        return {"sdk": self.sdk, "path": self.path}


@dataclass(frozen=True)
class PodConfigs:
    """Source config document consumed by cocoapods-size."""

    pods: Tuple[Pod, ...] = ()

    @classmethod
    def from_sdks(cls, sdks: Iterable[str], source_dir: Path | str) -> "PodConfigs":
        """Point every SDK at the same local source checkout, keeping input order."""
        path = str(source_dir)
        return cls(pods=tuple(Pod(sdk=sdk, path=path) for sdk in sdks))

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {"pods": [pod.to_dict() for pod in self.pods]}


@dataclass(frozen=True)
class SDKBinaryReport:
    """The part of a cocoapods-size JSON report we consume."""

    combined_pods_extra_size: int

    @classmethod
    def from_dict(cls, data: Any) -> "SDKBinaryReport":
        if not isinstance(data, dict):
            raise ReportParseError("Binary size report must contain a JSON object at the root")
        value = data.get("combined_pods_extra_size")
        # bool is an int subclass but never a valid size
        if isinstance(value, bool) or not isinstance(value, int):
            raise ReportParseError(
                "Binary size report is missing an integer 'combined_pods_extra_size' "
                f"(found {value!r})"
            )
        return cls(combined_pods_extra_size=value)


@dataclass(frozen=True)
class Result:
    """Single metrics-service result row."""

    sdk: str
    type: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return {"sdk": self.sdk, "type": self.type, "value": self.value}


@dataclass(frozen=True)
class BinaryMetricsReport:
    """Request body prepared for the metrics service."""

    metric: str
    results: Tuple[Result, ...] = field(default_factory=tuple)
    log: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metric": self.metric,
            "results": [result.to_dict() for result in self.results],
            "log": self.log,
        }


__all__ = ["BinaryMetricsReport", "Pod", "PodConfigs", "Result", "SDKBinaryReport"]
