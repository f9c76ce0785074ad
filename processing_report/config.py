from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

try:
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None

from .settings import DEFAULT_EXCEPTION_THRESHOLD, DEFAULT_REPORT_THRESHOLD, LogLevel


@dataclass(frozen=True)
class ReportConfig:
    """
    Thresholds fixed for the lifetime of a report.

    report_threshold: minimum level a message needs to reach the sink (default INFO).
    exception_threshold: minimum level that aborts processing (default FATAL).
    """

    report_threshold: LogLevel = DEFAULT_REPORT_THRESHOLD
    exception_threshold: LogLevel = DEFAULT_EXCEPTION_THRESHOLD

    def with_overrides(
        self,
        report_threshold: LogLevel | None = None,
        exception_threshold: LogLevel | None = None,
    ) -> "ReportConfig":
        return ReportConfig(
            report_threshold=report_threshold or self.report_threshold,
            exception_threshold=exception_threshold or self.exception_threshold,
        )


def config_from_dict(data: Dict[str, Any]) -> ReportConfig:
    """Build a ReportConfig from level names; unknown names raise ValueError."""
    config = ReportConfig()
    report_threshold = data.get("report_threshold")
    exception_threshold = data.get("exception_threshold")
    return config.with_overrides(
        report_threshold=LogLevel.parse(report_threshold) if report_threshold else None,
        exception_threshold=LogLevel.parse(exception_threshold) if exception_threshold else None,
    )


def load_config(path: str | Path) -> ReportConfig:
    """Load report thresholds from a YAML or JSON file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path, "r", encoding="utf-8") as f:
        if config_path.suffix in (".yaml", ".yml"):
            if yaml is None:
                raise RuntimeError("PyYAML required for YAML config files.")
            data = yaml.safe_load(f) or {}
        elif config_path.suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}")

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return config_from_dict(data)
