"""Configuration loading for sizereport (.sizereport.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .measure import MeasureSettings
from .pod_config import POD_CONFIG_FILE
from .report import DEFAULT_MEASUREMENT_TYPE

CONFIG_FILE_NAME = ".sizereport.yml"


@dataclass
class ToolConfig:
    """How cocoapods-size is launched."""

    python: str = "python3"
    script: str = "measure_cocoapod_size.py"
    report_file: str = "binary_report.json"

    def to_settings(self) -> MeasureSettings:
        return MeasureSettings(
            python=self.python,
            script=self.script,
            report_file=self.report_file,
        )


@dataclass
class SizeReportConfig:
    """Represents the settings defined in .sizereport.yml."""

    root: Path
    measurement_type: str = DEFAULT_MEASUREMENT_TYPE
    tool: ToolConfig = field(default_factory=ToolConfig)
    pod_config_file: str = POD_CONFIG_FILE


def load_config(config_path: Path, *, required: bool = False) -> SizeReportConfig:
    """Load configuration from disk.

    A missing file yields defaults unless ``required`` is set, as it is for a
    path the user named explicitly.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        if required:
            raise ConfigError(f"Config file {config_file} does not exist")
        return SizeReportConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    config = SizeReportConfig(root=root)
    measurement_type = _as_str(data, "measurement_type")
    if measurement_type:
        config.measurement_type = measurement_type
    pod_config_file = _as_str(data, "pod_config_file")
    if pod_config_file:
        config.pod_config_file = pod_config_file

    tool_data = _as_dict(data.get("tool"))
    if tool_data:
        config.tool = ToolConfig(
            python=_as_str(tool_data, "python", section="tool") or ToolConfig.python,
            script=_as_str(tool_data, "script", section="tool") or ToolConfig.script,
            report_file=_as_str(tool_data, "report_file", section="tool") or ToolConfig.report_file,
        )
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(data: Dict[str, Any], key: str, *, section: str | None = None) -> Optional[str]:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    name = f"{section}.{key}" if section else key
    raise ConfigError(f"{CONFIG_FILE_NAME}: '{name}' must be a string, got {value!r}")


__all__ = ["CONFIG_FILE_NAME", "SizeReportConfig", "ToolConfig", "load_config"]
