"""CSV import utilities for engineers, projects and assignments."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from roadmap_scheduler.domain.models import Allocation, Engineer, Project
from roadmap_scheduler.validator import ASSIGNMENT_COLUMNS


ENGINEER_ID_SEPARATOR = ";"


def _read(csv_path: str | Path, required: List[str]) -> pd.DataFrame:
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)

    # Normalize column names
    df.columns = df.columns.str.lower().str.strip()

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{csv_path}: missing columns {', '.join(missing)}")
    return df


def read_engineers_csv(csv_path: str | Path) -> List[Engineer]:
    """
    Read engineers from CSV with ``id`` and ``name`` columns.

    Args:
        csv_path: Path to engineers CSV

    Returns:
        Engineers in file order
    """
    df = _read(csv_path, ["id"])
    engineers = []
    for _, row in df.iterrows():
        eng_id = row["id"].strip()
        if not eng_id:
            raise ValueError(f"{csv_path}: engineer row without id")
        engineers.append(Engineer(id=eng_id, name=row.get("name", "").strip()))

    print(f"[INFO] Read {len(engineers)} engineers from {csv_path}")
    return engineers


def read_projects_csv(csv_path: str | Path) -> List[Project]:
    """
    Read projects from CSV.

    Columns: ``name``, ``priority``, ``estimated_hours`` and ``engineer_ids``
    (semicolon-separated). Blank hours or engineer cells are kept as missing
    so the scheduler can report and skip those projects.

    Args:
        csv_path: Path to projects CSV

    Returns:
        Projects in file order
    """
    df = _read(csv_path, ["name", "priority", "estimated_hours", "engineer_ids"])
    projects = []
    for i, row in df.iterrows():
        try:
            priority = int(row["priority"])
        except ValueError:
            raise ValueError(f"{csv_path}: row {i + 1} has non-integer priority {row['priority']!r}") from None

        hours_cell = row["estimated_hours"].strip()
        ids = [x.strip() for x in row["engineer_ids"].split(ENGINEER_ID_SEPARATOR) if x.strip()]

        projects.append(
            Project(
                name=row["name"].strip(),
                priority=priority,
                estimated_hours=float(hours_cell) if hours_cell else None,
                allocations=[Allocation(engineer_id=x) for x in ids] or None,
            )
        )

    print(f"[INFO] Read {len(projects)} projects from {csv_path}")
    return projects


def read_assignments_csv(csv_path: str | Path) -> pd.DataFrame:
    """Read an assignments CSV written by ``export_assignments_csv``."""
    df = _read(csv_path, ASSIGNMENT_COLUMNS)
    df = df[ASSIGNMENT_COLUMNS].copy()
    df["start_week"] = df["start_week"].astype(int)
    df["weeks_needed"] = df["weeks_needed"].astype(int)
    return df
