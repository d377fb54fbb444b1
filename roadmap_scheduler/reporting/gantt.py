"""Mermaid Gantt chart rendering for scheduled assignments."""

from __future__ import annotations

from datetime import date
from typing import Callable, List, Optional, Sequence

from roadmap_scheduler.config import ChartConfig
from roadmap_scheduler.domain.models import Assignment, Engineer
from roadmap_scheduler.services.timeplan import week_start_date


DATE_FORMAT = "%Y-%m-%d"


def render_timeline(
    assignments: Sequence[Assignment],
    engineers: Sequence[Engineer],
    clock: Callable[[], date] = date.today,
    chart: Optional[ChartConfig] = None,
) -> str:
    """
    Render assignments as a Mermaid Gantt chart, one section per engineer.

    Args:
        assignments: Assignments to draw, in the order they should appear
        engineers: Engineers in section order; engineers without work still
            get an empty section
        clock: Returns the date week 0 starts on
        chart: Title and weekend marker settings

    Returns:
        Chart markup as a single string
    """
    chart = chart or ChartConfig()
    origin = clock()

    lines: List[str] = [
        "gantt",
        "    dateFormat  YYYY-MM-DD",
        f"    title {chart.title}",
    ]
    if chart.exclude_weekends:
        lines.append("    excludes weekends")
    lines.append("")

    for engineer in engineers:
        lines.append(f"    section {engineer.display_name}")
        for assignment in assignments:
            if assignment.engineer_id != engineer.id:
                continue
            start = week_start_date(origin, assignment.start_week).strftime(DATE_FORMAT)
            lines.append(f"    {assignment.project_name}    :{start}, {assignment.weeks_needed}w")

    return "\n".join(lines) + "\n"
