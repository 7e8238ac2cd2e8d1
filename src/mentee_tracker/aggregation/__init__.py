"""
Aggregation Package - Counts and Chart Series.

Functions:
    - count_by_priority / count_by_status / count_by_poc
    - poc_options: distinct POCs for selectors
    - attendance_trend: weekly present/absent split
    - cohort_week_of / display_week: week numbering helpers
"""

from mentee_tracker.aggregation.summaries import (
    attendance_trend,
    cohort_week_of,
    count_by_poc,
    count_by_priority,
    count_by_status,
    display_week,
    poc_options,
)

__all__ = [
    "attendance_trend",
    "cohort_week_of",
    "count_by_poc",
    "count_by_priority",
    "count_by_status",
    "display_week",
    "poc_options",
]
