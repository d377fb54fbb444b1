"""Collector for non-fatal scheduling warnings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


PROJECT_SKIPPED = "project_skipped"
UNKNOWN_ENGINEER = "unknown_engineer"


@dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)


class DiagnosticSink:
    """
    Collects warning records emitted while scheduling.

    Callers inject a sink to inspect or silence diagnostics. With ``echo``
    enabled every record is also printed with a ``[WARN]`` prefix.
    """

    def __init__(self, echo: bool = False):
        self.echo = echo
        self.records: List[Diagnostic] = []

    def warn(self, code: str, message: str, **context: Any) -> Diagnostic:
        record = Diagnostic(code=code, message=message, context=context)
        self.records.append(record)
        if self.echo:
            print(f"[WARN] {message}")
        return record

    def by_code(self, code: str) -> List[Diagnostic]:
        return [r for r in self.records if r.code == code]

    def clear(self) -> None:
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
