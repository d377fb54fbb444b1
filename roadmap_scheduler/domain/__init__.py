"""Domain models for project scheduling."""

from .models import Allocation, Assignment, Engineer, EngineerScheduleState, Project

__all__ = [
    "Allocation",
    "Assignment",
    "Engineer",
    "EngineerScheduleState",
    "Project",
]
