from __future__ import annotations

import argparse
from datetime import date, datetime

from .config import load_config
from .diagnostics import DiagnosticSink
from .engine.priority import schedule_projects
from .io.export_csv import export_assignments_csv, write_timeline
from .io.import_csv import read_assignments_csv, read_engineers_csv, read_projects_csv
from .reporting.gantt import render_timeline
from .validator import summarize_assignments, validate_assignments


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Start date must be YYYY-MM-DD, got {value!r}") from None


def _cmd_generate(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    engineers = read_engineers_csv(args.engineers)
    projects = read_projects_csv(args.projects)
    if not projects:
        raise SystemExit(f"No projects found in {args.projects}")

    sink = DiagnosticSink(echo=cfg.echo_warnings)
    assignments = schedule_projects(projects, engineers, sink=sink, hours_per_week=cfg.hours_per_week)
    if sink.records:
        print(f"[INFO] {len(sink.records)} warnings while scheduling")

    validate_assignments(assignments, engineers)

    start = args.start or date.today()
    markup = render_timeline(assignments, engineers, clock=lambda: start, chart=cfg.chart)
    if args.out:
        write_timeline(markup, args.out)
    else:
        print(markup, end="")

    if args.assignments:
        export_assignments_csv(assignments, args.assignments)

    print(f"[OK] Scheduled {len(assignments)} assignments")


def _cmd_validate(args: argparse.Namespace) -> None:
    engineers = read_engineers_csv(args.engineers)
    assignments = read_assignments_csv(args.assignments)
    try:
        validate_assignments(assignments, engineers)
    except ValueError as e:
        print(f"[ERROR] Validation failed: {e}")
        raise
    print("[OK] Validation passed.")


def _cmd_summarize(args: argparse.Namespace) -> None:
    assignments = read_assignments_csv(args.assignments)
    print(summarize_assignments(assignments))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="roadmap-scheduler",
        description="Assign projects to engineers by priority and chart the plan",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Schedule projects and render a Gantt chart")
    g.add_argument("--engineers", required=True, help="Path to engineers CSV")
    g.add_argument("--projects", required=True, help="Path to projects CSV")
    g.add_argument("--config", help="Path to config YAML/JSON")
    g.add_argument("--out", help="Write chart markup here instead of stdout")
    g.add_argument("--assignments", help="Optional: export assignments to CSV")
    g.add_argument("--start", type=_parse_date, help="Date of week 0 (YYYY-MM-DD, default: today)")
    g.set_defaults(func=_cmd_generate)

    v = sub.add_parser("validate", help="Validate an assignments CSV")
    v.add_argument("--engineers", required=True)
    v.add_argument("--assignments", required=True)
    v.set_defaults(func=_cmd_validate)

    s = sub.add_parser("summarize", help="Summarize an assignments CSV")
    s.add_argument("--assignments", required=True)
    s.set_defaults(func=_cmd_summarize)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
