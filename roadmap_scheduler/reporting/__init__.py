"""Presentation of scheduled assignments."""

from .gantt import render_timeline

__all__ = ["render_timeline"]
