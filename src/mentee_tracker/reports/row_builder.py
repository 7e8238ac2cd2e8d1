"""
Report Row Builder.

Maps a selected weekly attendance report onto the ordered metric/value
rows every exporter consumes. The builder knows nothing about file
formats.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from mentee_tracker.domain.entities import WeeklyAttendanceReport
from mentee_tracker.domain.value_objects import ReportRow
from mentee_tracker.validation.input_validator import require_report

HEADER_ROW = ("Metric", "Value")

FILE_NAME_TEMPLATE = "weekly-summary-week-{week}.{ext}"


def attendance_rate_label(report: WeeklyAttendanceReport) -> str:
    """
    Attendance rate as an integer percentage string, e.g. "70%".

    Rounds half up; a report with no mentees yields "0%".
    """
    if report.total_mentees == 0:
        return "0%"
    pct = Decimal(report.total_present * 100) / Decimal(report.total_mentees)
    return f"{pct.quantize(Decimal('1'), rounding=ROUND_HALF_UP)}%"


def build_report_rows(report: Optional[WeeklyAttendanceReport]) -> List[ReportRow]:
    """
    Build the exported rows of a weekly report.

    Args:
        report: The selected report

    Returns:
        [("Total Mentees", n), ("Total Present", p),
         ("Total Absent", a), ("Attendance Rate", "NN%")]

    Raises:
        NoReportSelectedError: If report is None
    """
    selected = require_report(report)
    return [
        ("Total Mentees", selected.total_mentees),
        ("Total Present", selected.total_present),
        ("Total Absent", selected.total_absent),
        ("Attendance Rate", attendance_rate_label(selected)),
    ]


def report_file_name(week: int, extension: str) -> str:
    """File name of an exported weekly summary."""
    return FILE_NAME_TEMPLATE.format(week=week, ext=extension)
