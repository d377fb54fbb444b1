"""Tests for Mermaid Gantt rendering."""

import datetime as dt

from roadmap_scheduler.config import ChartConfig
from roadmap_scheduler.domain.models import Assignment, Engineer
from roadmap_scheduler.reporting.gantt import render_timeline


def test_render_timeline_exact_output(engineers, fixed_clock):
    assignments = [
        Assignment("P1", "e1", 0, 2),
        Assignment("P2", "e1", 2, 1),
        Assignment("P2", "e2", 2, 1),
    ]

    text = render_timeline(assignments, engineers, clock=fixed_clock)

    assert text == (
        "gantt\n"
        "    dateFormat  YYYY-MM-DD\n"
        "    title Project Schedule\n"
        "    excludes weekends\n"
        "\n"
        "    section Ada\n"
        "    P1    :2025-03-03, 2w\n"
        "    P2    :2025-03-17, 1w\n"
        "    section Grace\n"
        "    P2    :2025-03-17, 1w\n"
    )


def test_engineer_without_work_gets_empty_section(fixed_clock):
    engineers = [Engineer("e1", "Ada"), Engineer("idle", "Idle"), Engineer("e2", "Grace")]
    assignments = [Assignment("P", "e2", 0, 1)]

    lines = render_timeline(assignments, engineers, clock=fixed_clock).splitlines()

    idx = lines.index("    section Idle")
    assert lines[idx - 1] == "    section Ada"
    assert lines[idx + 1] == "    section Grace"


def test_sections_follow_engineer_order_and_assignment_order(fixed_clock):
    engineers = [Engineer("b", "Bea"), Engineer("a", "Al")]
    assignments = [
        Assignment("Late", "a", 3, 1),
        Assignment("Early", "a", 0, 1),
        Assignment("Only", "b", 1, 4),
    ]

    lines = render_timeline(assignments, engineers, clock=fixed_clock).splitlines()

    assert lines[5:] == [
        "    section Bea",
        "    Only    :2025-03-10, 4w",
        "    section Al",
        "    Late    :2025-03-24, 1w",
        "    Early    :2025-03-03, 1w",
    ]


def test_assignments_for_unlisted_engineers_ignored(engineers, fixed_clock):
    text = render_timeline([Assignment("P", "ghost", 0, 1)], engineers, clock=fixed_clock)
    assert "P    :" not in text


def test_chart_config_and_name_fallback():
    chart = ChartConfig(title="Q3 Roadmap", exclude_weekends=False)
    text = render_timeline(
        [Assignment("P", "e9", 1, 1)],
        [Engineer("e9")],
        clock=lambda: dt.date(2024, 2, 26),
        chart=chart,
    )

    assert "    title Q3 Roadmap\n" in text
    assert "excludes weekends" not in text
    assert "    section e9\n" in text
    # leap day
    assert "    P    :2024-03-04, 1w\n" in text


def test_empty_plan(fixed_clock):
    assert render_timeline([], [], clock=fixed_clock).endswith("    excludes weekends\n\n")


def test_default_clock_is_today(engineers):
    lines = render_timeline([Assignment("P", "e1", 1, 1)], engineers).splitlines()

    expected = (dt.date.today() + dt.timedelta(days=7)).strftime("%Y-%m-%d")
    assert lines[lines.index("    section Ada") + 1] == f"    P    :{expected}, 1w"
