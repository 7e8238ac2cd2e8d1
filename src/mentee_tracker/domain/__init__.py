"""
Domain Layer - Core Entities and Value Objects.

This package contains the domain model for the Mentee Tracker.
All entities here are pure Python with no infrastructure dependencies
(except Pydantic for validation).

Entities:
    - Mentee: A program participant with status, priority and POC
    - CheckInNote: Timestamped free-text contact record
    - WeeklyAttendanceReport: Per-week attendance aggregate
    - Priority / MenteeStatus: Enumerations with badge style tables

Value Objects:
    - MenteeFilterCriteria: Active filter predicates
    - FilterResult: Passed/rejected ids of a filter run
    - PriorityCounts: Counts per priority rank
    - AttendanceTrendPoint: One week of the attendance chart
"""

from mentee_tracker.domain.entities import (
    NO_PRIORITY_RANK,
    PRIORITY_STYLES,
    STATUS_STYLES,
    BadgeStyle,
    CheckInNote,
    Mentee,
    MenteeField,
    MenteeStatus,
    NoteMentee,
    Priority,
    WeeklyAttendanceReport,
    priority_rank,
)
from mentee_tracker.domain.value_objects import (
    AttendanceTrendPoint,
    FilterResult,
    HomeCounts,
    MenteeFilterCriteria,
    PriorityCounts,
    ReportRow,
)

__all__ = [
    "NO_PRIORITY_RANK",
    "PRIORITY_STYLES",
    "STATUS_STYLES",
    "AttendanceTrendPoint",
    "BadgeStyle",
    "CheckInNote",
    "FilterResult",
    "HomeCounts",
    "Mentee",
    "MenteeField",
    "MenteeFilterCriteria",
    "MenteeStatus",
    "NoteMentee",
    "Priority",
    "PriorityCounts",
    "ReportRow",
    "WeeklyAttendanceReport",
    "priority_rank",
]
