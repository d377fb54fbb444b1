"""Scheduling engine."""

from .base import BaseScheduler
from .priority import PriorityScheduler, schedule_projects

__all__ = [
    "BaseScheduler",
    "PriorityScheduler",
    "schedule_projects",
]
