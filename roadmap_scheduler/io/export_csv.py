"""Export utilities for schedules and charts."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from roadmap_scheduler.domain.models import Assignment
from roadmap_scheduler.validator import assignments_frame


def export_assignments_csv(assignments: Sequence[Assignment], csv_path: str | Path) -> int:
    """
    Write assignments to CSV.

    Args:
        assignments: Assignments to export
        csv_path: Output path

    Returns:
        Number of assignments written
    """
    df = assignments_frame(assignments)
    df.to_csv(csv_path, index=False)
    print(f"[INFO] Exported {len(df)} assignments to {csv_path}")
    return len(df)


def write_timeline(markup: str, out_path: str | Path) -> None:
    Path(out_path).write_text(markup, encoding="utf-8")
    print(f"[INFO] Timeline written to {out_path}")
