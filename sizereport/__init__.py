"""Binary size reporting for SDKs measured with cocoapods-size."""

from .models import BinaryMetricsReport, Pod, PodConfigs, Result, SDKBinaryReport
from .measure import MeasureSettings, SizeMeasurer
from .pod_config import write_pod_config
from .report import ReportGenerator, serialize_report

__all__ = [
    "BinaryMetricsReport",
    "MeasureSettings",
    "Pod",
    "PodConfigs",
    "ReportGenerator",
    "Result",
    "SDKBinaryReport",
    "SizeMeasurer",
    "serialize_report",
    "write_pod_config",
]
