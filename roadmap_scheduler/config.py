"""Scheduler configuration loaded from YAML or JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from roadmap_scheduler.services.timeplan import HOURS_PER_WEEK


@dataclass
class ChartConfig:
    title: str = "Project Schedule"
    exclude_weekends: bool = True


@dataclass
class SchedulerConfig:
    hours_per_week: int = HOURS_PER_WEEK
    echo_warnings: bool = True
    chart: ChartConfig = field(default_factory=ChartConfig)


def _check_keys(data: Dict[str, Any], cls, where: str) -> None:
    allowed = {f.name for f in fields(cls)}
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(f"Unknown {where} keys: {', '.join(sorted(unknown))}")


def config_from_dict(data: Dict[str, Any] | None) -> SchedulerConfig:
    data = dict(data or {})
    _check_keys(data, SchedulerConfig, "config")

    chart_data = data.pop("chart", None) or {}
    if not isinstance(chart_data, dict):
        raise ValueError("chart must be a mapping")
    _check_keys(chart_data, ChartConfig, "chart")

    cfg = SchedulerConfig(chart=ChartConfig(**chart_data), **data)
    if int(cfg.hours_per_week) <= 0:
        raise ValueError(f"hours_per_week must be positive, got {cfg.hours_per_week}")
    cfg.hours_per_week = int(cfg.hours_per_week)
    return cfg


def load_config(path: str | Path | None = None) -> SchedulerConfig:
    """
    Load configuration from a YAML or JSON file.

    Args:
        path: Config file path; None returns the defaults

    Returns:
        SchedulerConfig

    Raises:
        ValueError: If the file holds unknown keys or invalid values
    """
    if path is None:
        return SchedulerConfig()

    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return config_from_dict(data)
