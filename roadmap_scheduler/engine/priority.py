"""Greedy priority-order scheduler: projects run back to back on each engineer's timeline."""

from __future__ import annotations

from typing import List, Optional, Sequence

from roadmap_scheduler.diagnostics import PROJECT_SKIPPED, UNKNOWN_ENGINEER, DiagnosticSink
from roadmap_scheduler.domain.models import Assignment, Engineer, EngineerScheduleState, Project
from roadmap_scheduler.services.timeplan import (
    HOURS_PER_WEEK,
    distinct_engineer_ids,
    hours_per_engineer,
    weeks_needed,
)
from roadmap_scheduler.services.validation import SkipReason, validate_project

from .base import BaseScheduler


_SKIP_MESSAGES = {
    SkipReason.MISSING_ALLOCATIONS: "missing allocations",
    SkipReason.MISSING_HOURS: "missing hours",
    SkipReason.NON_FINITE_HOURS: "non-finite hours",
    SkipReason.NEGATIVE_HOURS: "negative hours",
}


class PriorityScheduler(BaseScheduler):
    """
    Schedules projects in ascending priority order.

    A project starts once every one of its engineers is free, i.e. at the
    latest ``current_week`` among them, and occupies each of them for the
    same number of weeks. Equal priorities keep their input order.
    """

    name = "priority"

    def __init__(self, hours_per_week: int = HOURS_PER_WEEK):
        if hours_per_week <= 0:
            raise ValueError("hours_per_week must be positive")
        self.hours_per_week = hours_per_week

    def make_schedule(
        self,
        projects: Sequence[Project],
        engineers: Sequence[Engineer],
        sink: Optional[DiagnosticSink] = None,
    ) -> List[Assignment]:
        if sink is None:
            sink = DiagnosticSink(echo=True)

        state = EngineerScheduleState.for_engineers(list(engineers))
        # sorted() is stable, so ties keep input order
        ordered = sorted(projects, key=lambda p: p.priority)

        assignments: List[Assignment] = []
        for project in ordered:
            check = validate_project(project)
            if not check.ok:
                sink.warn(
                    PROJECT_SKIPPED,
                    f"Project {project.name} skipped - {_SKIP_MESSAGES[check.reason]}",
                    project=project.name,
                    reason=check.reason.value,
                )
                continue

            engineer_ids = distinct_engineer_ids(project.allocations)
            per_engineer = hours_per_engineer(project.estimated_hours, len(engineer_ids))
            start_week = max(state.week_of(eng_id) for eng_id in engineer_ids)
            weeks = weeks_needed(per_engineer, self.hours_per_week)

            for eng_id in engineer_ids:
                if eng_id not in state:
                    sink.warn(
                        UNKNOWN_ENGINEER,
                        f"Engineer {eng_id} not found for project {project.name}",
                        project=project.name,
                        engineer_id=eng_id,
                    )
                    continue

                assignments.append(
                    Assignment(
                        project_name=project.name,
                        engineer_id=eng_id,
                        start_week=start_week,
                        weeks_needed=weeks,
                    )
                )
                state.commit(eng_id, start_week + weeks)

        return assignments


def schedule_projects(
    projects: Sequence[Project],
    engineers: Sequence[Engineer],
    sink: Optional[DiagnosticSink] = None,
    hours_per_week: int = HOURS_PER_WEEK,
) -> List[Assignment]:
    """
    Convenience function to schedule projects with the priority scheduler.

    Args:
        projects: Projects to schedule
        engineers: Engineers available for allocation
        sink: Optional diagnostic collector (default: one that prints warnings)
        hours_per_week: Working hours in one week slot

    Returns:
        List of assignments in priority order, then allocation order
    """
    return PriorityScheduler(hours_per_week).make_schedule(projects, engineers, sink)
