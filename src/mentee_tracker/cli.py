"""
Command Line Front End.

Usage:
    mentee-tracker [global options] COMMAND [options]

Commands:
    home                       Batch total and check-ins due
    mentees                    Roster (priority ordered), with filters
    summary                    Counts per priority and per status
    notes MENTEE_ID            Check-in notes of one mentee
    add-note MENTEE_ID TEXT    Add a check-in note (--author required)
    report                     Export a weekly summary (csv, pdf, xlsx)
    trend                      Weekly attendance trend

Exit code is 1 when an operation failed or was blocked.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from mentee_tracker.adapters.http_gateway import RestMenteeGateway
from mentee_tracker.adapters.memory_gateway import InMemoryMenteeGateway
from mentee_tracker.adapters.notifier import ConsoleNotifier
from mentee_tracker.config.loader import ConfigLoader
from mentee_tracker.config.models import ApiConfig, TrackerConfig
from mentee_tracker.domain.entities import MenteeStatus, Priority
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.observability.logging_setup import configure_logging
from mentee_tracker.reports.exporters import ReportFormat
from mentee_tracker.resilience.error_handler import NotifierProtocol
from mentee_tracker.views.analytics import AnalyticsView
from mentee_tracker.views.dashboard import MenteeDashboard
from mentee_tracker.views.home import HomeView
from mentee_tracker.views.mentee_detail import MenteeDetailView
from mentee_tracker.views.weekly_summary import WeeklySummaryView

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mentee-tracker",
        description="Mentee attendance and follow-up tracking",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--profile", help="Profile under config/profiles/")
    parser.add_argument("--base-url", help="Override api.base_url")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override logging.level",
    )
    parser.add_argument("--json-logs", action="store_true", help="JSON log lines")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use a built-in sample cohort instead of the REST API",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("home", help="Batch total and check-ins due")

    mentees = sub.add_parser("mentees", help="List mentees")
    mentees.add_argument("--priority", choices=[p.value for p in Priority])
    mentees.add_argument("--status", choices=[s.value for s in MenteeStatus])
    mentees.add_argument("--poc")
    mentees.add_argument("--search", default="")

    sub.add_parser("summary", help="Counts per priority and status")

    notes = sub.add_parser("notes", help="Check-in notes of a mentee")
    notes.add_argument("mentee_id")

    add_note = sub.add_parser("add-note", help="Add a check-in note")
    add_note.add_argument("mentee_id")
    add_note.add_argument("text")
    add_note.add_argument("--author", required=True)

    report = sub.add_parser("report", help="Export a weekly summary")
    report.add_argument("--week", type=int, help="Backend week number (default: latest)")
    report.add_argument("--format", dest="fmt", choices=[f.value for f in ReportFormat])
    report.add_argument("--output", help="Output directory")

    sub.add_parser("trend", help="Weekly attendance trend")

    return parser


def load_settings(args: argparse.Namespace) -> TrackerConfig:
    """Configuration from file/profile/environment plus CLI overrides."""
    config = ConfigLoader().load(args.config, args.profile)
    if args.base_url:
        api = ApiConfig.model_validate({**config.api.model_dump(), "base_url": args.base_url})
        config = config.model_copy(update={"api": api})
    return config


def build_gateway(args: argparse.Namespace, config: TrackerConfig) -> MenteeGatewayProtocol:
    if args.demo:
        return InMemoryMenteeGateway.sample()
    return RestMenteeGateway.from_config(config.api)


# =============================================================================
# Commands
# =============================================================================

def _cmd_home(args, config, gateway, notifier) -> int:
    view = HomeView(gateway, notifier, config.cohort.batch)
    if not view.open() or view.counts is None:
        return 1
    print(f"Total mentees:  {view.counts.total_mentees}")
    print(f"Check-ins due:  {view.counts.checkins_due}")
    return 0


def _cmd_mentees(args, config, gateway, notifier) -> int:
    dashboard = MenteeDashboard(gateway, notifier, config.cohort.batch)
    if not dashboard.open():
        return 1
    dashboard.set_priority(Priority(args.priority) if args.priority else None)
    dashboard.set_status(MenteeStatus(args.status) if args.status else None)
    dashboard.set_poc(args.poc)
    dashboard.set_search(args.search)

    for mentee in dashboard.visible_mentees:
        priority = mentee.priority.value if mentee.priority else "-"
        print(
            f"{mentee.id:<10} {priority:<3} {mentee.status.value:<15} "
            f"{mentee.poc or '-':<20} {mentee.name}"
        )
    return 0


def _cmd_summary(args, config, gateway, notifier) -> int:
    dashboard = MenteeDashboard(gateway, notifier, config.cohort.batch)
    if not dashboard.open():
        return 1
    for key, count in dashboard.priority_counts.as_dict().items():
        print(f"{key:<15} {count}")
    print()
    for status, count in dashboard.status_counts.items():
        print(f"{status.value:<15} {count}")
    return 0


def _open_detail(args, config, gateway, notifier, author=None) -> Optional[MenteeDetailView]:
    dashboard = MenteeDashboard(gateway, notifier, config.cohort.batch)
    if not dashboard.open():
        return None
    mentee = next((m for m in dashboard.mentees if m.id == args.mentee_id), None)
    dashboard.close()
    if mentee is None:
        print(f"Unknown mentee: {args.mentee_id}", file=sys.stderr)
        return None
    view = MenteeDetailView(gateway, notifier, mentee, executive_name=author)
    if not view.open():
        return None
    return view


def _cmd_notes(args, config, gateway, notifier) -> int:
    view = _open_detail(args, config, gateway, notifier)
    if view is None:
        return 1
    for note in view.notes:
        print(f"{note.timestamp.isoformat()}  {note.executive_name or '-'}: {note.note_content}")
    return 0


def _cmd_add_note(args, config, gateway, notifier) -> int:
    view = _open_detail(args, config, gateway, notifier, author=args.author)
    if view is None or not view.add_note(args.text):
        return 1
    print(view.notes[0].id)
    return 0


def _cmd_report(args, config, gateway, notifier) -> int:
    view = WeeklySummaryView(
        gateway,
        notifier,
        config.cohort.batch,
        config.cohort.start_date,
        default_format=config.reports.default_format,
    )
    if not view.open():
        return 1
    if args.week is not None:
        view.select_week(args.week)
    path = view.download(args.fmt, args.output or config.reports.output_dir)
    if path is None:
        return 1
    print(path)
    return 0


def _cmd_trend(args, config, gateway, notifier) -> int:
    view = AnalyticsView(
        gateway, notifier, config.cohort.batch, config.cohort.start_date
    )
    if not view.open():
        return 1
    for point in view.trend:
        print(f"{point.label:<10} present {point.present_pct:5.1f}%  absent {point.absent_pct:5.1f}%")
    return 0


COMMANDS = {
    "home": _cmd_home,
    "mentees": _cmd_mentees,
    "summary": _cmd_summary,
    "notes": _cmd_notes,
    "add-note": _cmd_add_note,
    "report": _cmd_report,
    "trend": _cmd_trend,
}


def main(
    argv: Optional[List[str]] = None,
    notifier: Optional[NotifierProtocol] = None,
) -> int:
    args = build_parser().parse_args(argv)
    config = load_settings(args)

    level = args.log_level or config.logging.level
    configure_logging(
        level=getattr(logging, level),
        use_json=args.json_logs or config.logging.json_output,
    )

    gateway = build_gateway(args, config)
    notifier = notifier or ConsoleNotifier(sys.stderr)
    try:
        return COMMANDS[args.command](args, config, gateway, notifier)
    finally:
        close = getattr(gateway, "close", None)
        if close is not None:
            close()


if __name__ == "__main__":
    sys.exit(main())
