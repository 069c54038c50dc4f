"""Writes the pod source config consumed by cocoapods-size."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from .errors import ConfigWriteError
from .logging import get_logger
from .models import PodConfigs

POD_CONFIG_FILE = "cocoapods_source_config.json"

_LOGGER = get_logger("pod_config")


def write_pod_config(
    sdks: Sequence[str],
    source_dir: Path | str,
    path: Path | str = POD_CONFIG_FILE,
) -> Path:
    """Write one pod entry per SDK, all pointing at ``source_dir``.

    Any existing file at ``path`` is replaced. SDK names are not validated;
    cocoapods-size decides what it can measure.
    """
    target = Path(path)
    document = PodConfigs.from_sdks(sdks, source_dir)
    try:
        text = json.dumps(document.to_dict(), indent=2)
    except (TypeError, ValueError) as exc:
        raise ConfigWriteError(f"Failed to serialise pod config: {exc}") from exc
    try:
        target.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigWriteError(f"Failed to write pod config to {target}: {exc}") from exc
    _LOGGER.debug("Wrote %d pod(s) to %s", len(document.pods), target)
    return target


__all__ = ["POD_CONFIG_FILE", "write_pod_config"]
