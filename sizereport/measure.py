"""Runs cocoapods-size for a single SDK and reads back its report."""

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List

from .errors import ProcessExecutionError, ReportParseError, ReportReadError
from .logging import get_logger
from .models import SDKBinaryReport


@dataclass(frozen=True)
class MeasureSettings:
    """How the cocoapods-size script is launched inside the tool directory."""

    python: str = "python3"
    script: str = "measure_cocoapod_size.py"
    report_file: str = "binary_report.json"


class SizeMeasurer:
    """Invokes the measurement tool once per SDK, strictly one run at a time.

    Every run writes the same report file inside the tool directory, so the
    report is read before :meth:`measure` returns and the next run starts.
    """

    def __init__(
        self,
        tool_dir: Path | str,
        config_path: Path | str,
        *,
        settings: MeasureSettings | None = None,
        runner: Callable[..., int] | None = None,
    ) -> None:
        self.tool_dir = Path(tool_dir)
        # Resolved up front; the tool runs with tool_dir as its working directory.
        self.config_path = Path(config_path).resolve()
        self.settings = settings or MeasureSettings()
        self._runner = runner or self._default_runner
        self.logger = get_logger("measure")

    @property
    def report_path(self) -> Path:
        return self.tool_dir / self.settings.report_file

    def command(self, sdk: str) -> List[str]:
        return [
            self.settings.python,
            self.settings.script,
            "--cocoapods",
            sdk,
            "--cocoapods_source_config",
            str(self.config_path),
            "--json",
            self.settings.report_file,
        ]

    def measure(self, sdk: str) -> SDKBinaryReport:
        """Measure ``sdk`` and return the extra size reported by the tool."""
        args = self.command(sdk)
        self.logger.info("Measuring %s", sdk)
        self.logger.debug("Running %s in %s", " ".join(args), self.tool_dir)
        self._discard_previous_report(sdk)
        try:
            returncode = self._run(args, cwd=self.tool_dir)
        except OSError as exc:
            raise ProcessExecutionError(
                sdk, f"Unable to launch measurement tool for {sdk}: {exc}"
            ) from exc
        if returncode != 0:
            raise ProcessExecutionError(
                sdk,
                f"Measurement tool failed for {sdk} with exit code {returncode}",
                returncode=returncode,
            )
        report = self._read_report(sdk)
        self.logger.debug("%s adds %d bytes", sdk, report.combined_pods_extra_size)
        return report

    # ------------------------------------------------------------------
    # Internals

    def _discard_previous_report(self, sdk: str) -> None:
        # The tool may exit 0 without writing a report; a leftover file must not be read as this run's.
        try:
            self.report_path.unlink(missing_ok=True)
        except OSError as exc:
            raise ReportReadError(
                f"Unable to remove previous report at {self.report_path} before measuring {sdk}: {exc}"
            ) from exc

    def _read_report(self, sdk: str) -> SDKBinaryReport:
        path = self.report_path
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ReportReadError(f"No readable report for {sdk} at {path}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ReportParseError(f"Report for {sdk} at {path} is not valid JSON: {exc}") from exc
        return SDKBinaryReport.from_dict(data)

    def _run(self, args: Iterable[str], *, cwd: Path) -> int:
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> int:
        # stdout is inherited rather than piped; cocoapods-size hangs on a shared pipe.
        completed = subprocess.run(list(args), cwd=str(cwd), check=False)
        return completed.returncode


__all__ = ["MeasureSettings", "SizeMeasurer"]
