from __future__ import annotations

from typing import Sequence

import pandas as pd

from roadmap_scheduler.domain.models import Assignment, Engineer


ASSIGNMENT_COLUMNS = ["project_name", "engineer_id", "start_week", "weeks_needed"]


def assignments_frame(assignments: Sequence[Assignment]) -> pd.DataFrame:
    return pd.DataFrame([a.to_dict() for a in assignments], columns=ASSIGNMENT_COLUMNS)


def has_overlap(assignments_df: pd.DataFrame) -> bool:
    # Check overlaps per engineer across week indexes
    if assignments_df.empty:
        return False
    df = assignments_df.copy()
    df["end_week"] = df["start_week"] + df["weeks_needed"]
    df.sort_values(["engineer_id", "start_week"], inplace=True, kind="mergesort")

    def _overlap(group: pd.DataFrame) -> bool:
        prev_end = None
        for _, row in group.iterrows():
            if prev_end is not None and row["start_week"] < prev_end:
                return True
            prev_end = row["end_week"]
        return False

    return any(_overlap(group) for _, group in df.groupby("engineer_id"))


def validate_assignments(
    assignments: Sequence[Assignment] | pd.DataFrame,
    engineers: Sequence[Engineer],
) -> None:
    if isinstance(assignments, pd.DataFrame):
        df = assignments
    else:
        df = assignments_frame(assignments)
    if df.empty:
        return

    # Referential integrity
    known = {eng.id for eng in engineers}
    unknown = sorted(set(str(x) for x in df["engineer_id"]) - known)
    if unknown:
        raise ValueError(f"Assignments reference unknown engineer ids: {', '.join(unknown)}")

    if (df["start_week"] < 0).any():
        raise ValueError("Assignments start before week 0")
    if (df["weeks_needed"] < 1).any():
        raise ValueError("Assignments must last at least one week")

    # No overlaps per engineer
    if has_overlap(df):
        raise ValueError("Overlapping assignments detected for an engineer")


def summarize_assignments(assignments: Sequence[Assignment] | pd.DataFrame) -> str:
    if isinstance(assignments, pd.DataFrame):
        df = assignments.copy()
    else:
        df = assignments_frame(assignments)
    if df.empty:
        return "No assignments."
    df["end_week"] = df["start_week"] + df["weeks_needed"]

    per_engineer = df.groupby("engineer_id").agg(
        projects=("project_name", "count"),
        weeks=("weeks_needed", "sum"),
        finish_week=("end_week", "max"),
    )
    per_project = df.groupby("project_name", sort=False).agg(
        engineers=("engineer_id", lambda s: ",".join(str(x) for x in s)),
        start_week=("start_week", "min"),
        finish_week=("end_week", "max"),
    )

    lines = ["Load per engineer:"]
    lines.append(per_engineer.to_string())
    lines.append("")
    lines.append("Projects:")
    lines.append(per_project.to_string())
    lines.append("")
    lines.append(f"Plan length: {int(df['end_week'].max())} weeks")
    return "\n".join(lines)
