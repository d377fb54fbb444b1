"""Base scheduler interface that project schedulers implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from roadmap_scheduler.diagnostics import DiagnosticSink
from roadmap_scheduler.domain.models import Assignment, Engineer, Project


class BaseScheduler(ABC):
    """
    Abstract base class for project schedulers.

    A scheduler turns projects and engineers into a flat list of assignments.
    Problems with individual records are reported to the sink, not raised.
    """

    name: str | None = None  # Override in subclasses

    @abstractmethod
    def make_schedule(
        self,
        projects: Sequence[Project],
        engineers: Sequence[Engineer],
        sink: Optional[DiagnosticSink] = None,
    ) -> List[Assignment]:
        """
        Generate assignments for the given projects.

        Args:
            projects: Projects to schedule
            engineers: Engineers available for allocation
            sink: Collector for skipped-project and unknown-engineer warnings

        Returns:
            List of Assignment objects in creation order
        """
        pass

    def get_name(self) -> str:
        """Get the scheduler's display name."""
        return self.name or self.__class__.__name__
