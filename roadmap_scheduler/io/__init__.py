"""I/O utilities for CSV import/export."""

from .export_csv import export_assignments_csv, write_timeline
from .import_csv import read_assignments_csv, read_engineers_csv, read_projects_csv

__all__ = [
    "read_engineers_csv",
    "read_projects_csv",
    "read_assignments_csv",
    "export_assignments_csv",
    "write_timeline",
]
