"""Roadmap scheduler: assign projects to engineers by priority and chart the plan.

Modules:
- config: load and validate configuration (YAML or JSON)
- diagnostics: collector for non-fatal scheduling warnings
- domain: engineer, project and assignment models
- services: week arithmetic and project checks
- engine: priority scheduler
- reporting: Mermaid Gantt rendering
- validator: post-generation validations and summaries
- io: CSV import/export
- cli: command-line interface entrypoints
"""

from .diagnostics import Diagnostic, DiagnosticSink
from .domain.models import Allocation, Assignment, Engineer, Project
from .engine.priority import PriorityScheduler, schedule_projects
from .reporting.gantt import render_timeline

__version__ = "0.1.0"
__all__ = [
    "Allocation",
    "Assignment",
    "Diagnostic",
    "DiagnosticSink",
    "Engineer",
    "PriorityScheduler",
    "Project",
    "render_timeline",
    "schedule_projects",
]
