"""Pre-scheduling checks on project records."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from roadmap_scheduler.domain.models import Project


class SkipReason(str, Enum):
    """Why a project cannot be scheduled."""
    MISSING_ALLOCATIONS = "missing_allocations"
    MISSING_HOURS = "missing_hours"
    NON_FINITE_HOURS = "non_finite_hours"
    NEGATIVE_HOURS = "negative_hours"


@dataclass(frozen=True)
class ProjectCheck:
    project: Project
    reason: Optional[SkipReason] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def validate_project(project: Project) -> ProjectCheck:
    """
    Check that a project carries what the scheduler needs.

    Args:
        project: Project to check

    Returns:
        ProjectCheck with ``reason`` set when the project must be skipped.
        Allocations are checked first, so a project missing both reports
        MISSING_ALLOCATIONS.
    """
    if not project.allocations:
        return ProjectCheck(project, SkipReason.MISSING_ALLOCATIONS)

    hours = project.estimated_hours
    # 0 and NaN are treated the same as no estimate
    if hours is None or hours == 0 or math.isnan(hours):
        return ProjectCheck(project, SkipReason.MISSING_HOURS)

    if math.isinf(hours):
        return ProjectCheck(project, SkipReason.NON_FINITE_HOURS)

    if hours < 0:
        return ProjectCheck(project, SkipReason.NEGATIVE_HOURS)

    return ProjectCheck(project)
