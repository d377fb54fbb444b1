"""Services for scheduling logic."""

from .timeplan import (
    HOURS_PER_WEEK,
    distinct_engineer_ids,
    hours_per_engineer,
    week_start_date,
    weeks_needed,
)
from .validation import ProjectCheck, SkipReason, validate_project

__all__ = [
    "HOURS_PER_WEEK",
    "distinct_engineer_ids",
    "hours_per_engineer",
    "week_start_date",
    "weeks_needed",
    "ProjectCheck",
    "SkipReason",
    "validate_project",
]
