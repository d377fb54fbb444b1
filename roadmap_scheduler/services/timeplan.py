"""Week arithmetic for project scheduling."""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Iterable, List

from roadmap_scheduler.domain.models import Allocation


HOURS_PER_WEEK = 40
DAYS_PER_WEEK = 7


def distinct_engineer_ids(allocations: Iterable[Allocation]) -> List[str]:
    """Engineer ids referenced by allocations, duplicates collapsed, first appearance kept."""
    seen = set()
    ordered: List[str] = []
    for allocation in allocations:
        if allocation.engineer_id not in seen:
            seen.add(allocation.engineer_id)
            ordered.append(allocation.engineer_id)
    return ordered


def hours_per_engineer(estimated_hours: float, engineer_count: int) -> int:
    """
    Split a project's estimate across its engineers, rounding up.

    Any positive estimate yields at least one hour per engineer.
    """
    if engineer_count <= 0:
        raise ValueError("engineer_count must be positive")
    return math.ceil(estimated_hours / engineer_count)


def weeks_needed(hours: float, hours_per_week: int = HOURS_PER_WEEK) -> int:
    """Whole weeks needed for ``hours`` of work; 0 hours needs 0 weeks."""
    return math.ceil(hours / hours_per_week)


def week_start_date(origin: date, week_index: int) -> date:
    # Calendar days, no weekend exclusion.
    return origin + timedelta(days=week_index * DAYS_PER_WEEK)
