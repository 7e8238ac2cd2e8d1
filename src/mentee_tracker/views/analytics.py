"""
Analytics View - Weekly Attendance Trend.

Fetches the cohort's weekly reports and turns them into chart points
labelled relative to the cohort start week.
"""

from __future__ import annotations

from datetime import date
from typing import List

from mentee_tracker.aggregation.summaries import attendance_trend, cohort_week_of
from mentee_tracker.domain.entities import WeeklyAttendanceReport
from mentee_tracker.domain.value_objects import AttendanceTrendPoint
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.resilience.error_handler import ErrorHandler, NotifierProtocol
from mentee_tracker.views.scope import ViewScope


class AnalyticsView:
    """Attendance trend chart data."""

    VIEW_NAME = "analytics"

    def __init__(
        self,
        gateway: MenteeGatewayProtocol,
        notifier: NotifierProtocol,
        cohort_batch: str,
        cohort_start: date,
    ) -> None:
        self.gateway = gateway
        self.cohort_batch = cohort_batch
        self.start_week = cohort_week_of(cohort_start)
        self.errors = ErrorHandler(notifier)
        self.scope = ViewScope(self.VIEW_NAME)
        self.reports: List[WeeklyAttendanceReport] = []

    def open(self) -> bool:
        self.scope.open()
        outcome = self.errors.guard(
            lambda: self.scope.run(
                lambda: self.gateway.list_weekly_reports(self.cohort_batch),
                self._set_reports,
            ),
            operation_name="load_weekly_attendance",
            failure_title="Failed to load attendance",
            failure_description="There was an error loading weekly attendance.",
        )
        return bool(outcome.value)

    def close(self) -> None:
        self.scope.close()

    def _set_reports(self, reports: List[WeeklyAttendanceReport]) -> None:
        self.reports = sorted(reports, key=lambda r: r.week_number)

    @property
    def trend(self) -> List[AttendanceTrendPoint]:
        return attendance_trend(self.reports, self.start_week)
