"""
Aggregation Summaries.

Counts and chart series derived from a mentee collection or from weekly
attendance reports. Every function is pure and O(n); callers recompute on
each change of the source collection.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from mentee_tracker.domain.entities import (
    Mentee,
    MenteeStatus,
    Priority,
    WeeklyAttendanceReport,
)
from mentee_tracker.domain.value_objects import AttendanceTrendPoint, PriorityCounts


def count_by_priority(mentees: Iterable[Mentee]) -> PriorityCounts:
    """
    Count mentees per priority rank.

    Invariant: p0 + p1 + p2 + p3 + p4 + none == total.
    """
    counter: Counter = Counter(m.priority for m in mentees)
    return PriorityCounts(
        p0=counter[Priority.P0],
        p1=counter[Priority.P1],
        p2=counter[Priority.P2],
        p3=counter[Priority.P3],
        p4=counter[Priority.P4],
        none=counter[None],
        total=sum(counter.values()),
    )


def count_by_status(mentees: Iterable[Mentee]) -> Dict[MenteeStatus, int]:
    """Count mentees per status; every status is present, zero-filled."""
    counter = Counter(m.status for m in mentees)
    return {status: counter[status] for status in MenteeStatus}


def count_by_poc(mentees: Iterable[Mentee]) -> Dict[Optional[str], int]:
    """Count mentees per point of contact; None collects the unassigned."""
    return dict(Counter(m.poc for m in mentees))


def poc_options(mentees: Iterable[Mentee]) -> List[str]:
    """Distinct assigned points of contact, sorted, for filter selectors."""
    return sorted({m.poc for m in mentees if m.poc})


# =============================================================================
# Week numbering
# =============================================================================

def _week_start(day: date) -> date:
    """Sunday on or before day."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def cohort_week_of(day: date) -> int:
    """
    Calendar week number with Sunday-start weeks; week 1 contains Jan 1.

    This is the numbering the backend uses for weekly report week numbers.
    """
    next_year_start = _week_start(date(day.year + 1, 1, 1))
    if day >= next_year_start:
        return 1
    year_start = _week_start(date(day.year, 1, 1))
    return (_week_start(day) - year_start).days // 7 + 1


def display_week(week_number: int, cohort_start_week: int) -> int:
    """Backend-absolute week number -> 1-based week of the cohort."""
    return week_number - cohort_start_week + 1


def attendance_trend(
    reports: Sequence[WeeklyAttendanceReport],
    cohort_start_week: int,
) -> List[AttendanceTrendPoint]:
    """
    Present/absent percentages per week for the attendance chart.

    Percentages are shares of present + absent (not of total mentees);
    a week with nobody recorded yields 0 / 0.
    """
    points: List[AttendanceTrendPoint] = []
    for report in reports:
        recorded = report.total_present + report.total_absent
        if recorded > 0:
            present_pct = report.total_present / recorded * 100
            absent_pct = report.total_absent / recorded * 100
        else:
            present_pct = absent_pct = 0.0
        points.append(
            AttendanceTrendPoint(
                label=f"Week {display_week(report.week_number, cohort_start_week)}",
                week_number=report.week_number,
                present_pct=present_pct,
                absent_pct=absent_pct,
            )
        )
    return points
