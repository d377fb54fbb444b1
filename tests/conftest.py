"""Pytest configuration and shared fixtures."""

import datetime as dt

import pytest

from roadmap_scheduler.diagnostics import DiagnosticSink
from roadmap_scheduler.domain.models import Engineer


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def engineers():
    return [
        Engineer(id="e1", name="Ada"),
        Engineer(id="e2", name="Grace"),
    ]


@pytest.fixture
def sink():
    """Silent diagnostic sink."""
    return DiagnosticSink(echo=False)


@pytest.fixture
def fixed_clock():
    return lambda: dt.date(2025, 3, 3)
