"""
Weekly Summary View - Report Selection, Preview and Download.

Loads the cohort's weekly attendance reports, selects the latest week by
default and exports the selected week through WeeklySummaryReporter.

Notifications:
    - "No report selected" when downloading without a selection
    - "Format not supported" for an unknown format
    - "Failed to generate report" when the file cannot be written
    - "Report generated" after the file is written
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from mentee_tracker.aggregation.summaries import cohort_week_of, display_week
from mentee_tracker.domain.entities import WeeklyAttendanceReport
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.reports.exporters import (
    ReportFormat,
    UnsupportedFormatError,
    WeeklySummaryReporter,
    parse_format,
)
from mentee_tracker.reports.row_builder import attendance_rate_label
from mentee_tracker.resilience.error_handler import (
    ErrorHandler,
    NotificationVariant,
    NotifierProtocol,
)
from mentee_tracker.validation.input_validator import NoReportSelectedError
from mentee_tracker.views.scope import ViewScope

logger = logging.getLogger(__name__)


class ReportPreview(BaseModel):
    """Figures shown above the download button."""

    total_mentees: int = 0
    attendance_rate: str = "0%"
    highlights: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class WeeklySummaryView:
    """Weekly report selection and export."""

    VIEW_NAME = "weekly_summary"

    def __init__(
        self,
        gateway: MenteeGatewayProtocol,
        notifier: NotifierProtocol,
        cohort_batch: str,
        cohort_start: date,
        reporter: Optional[WeeklySummaryReporter] = None,
        default_format: Union[str, ReportFormat] = ReportFormat.PDF,
    ) -> None:
        """
        Initialize weekly summary view.

        Args:
            gateway: Remote data gateway
            notifier: Sink for user-visible messages
            cohort_batch: Cohort whose reports are listed
            cohort_start: First day of the cohort (week 1)
            reporter: Report exporter (defaults to all formats)
            default_format: Format preselected for download
        """
        self.gateway = gateway
        self.cohort_batch = cohort_batch
        self.start_week = cohort_week_of(cohort_start)
        self.reporter = reporter or WeeklySummaryReporter()
        self.format = default_format
        self.errors = ErrorHandler(notifier)
        self.scope = ViewScope(self.VIEW_NAME)
        self.reports: List[WeeklyAttendanceReport] = []
        self.selected_week: Optional[int] = None

    def open(self) -> bool:
        self.scope.open()
        outcome = self.errors.guard(
            lambda: self.scope.run(
                lambda: self.gateway.list_weekly_reports(self.cohort_batch),
                self._set_reports,
            ),
            operation_name="load_weekly_reports",
            failure_title="Failed to load reports",
            failure_description="There was an error loading weekly attendance reports.",
        )
        return bool(outcome.value)

    def close(self) -> None:
        self.scope.close()

    def _set_reports(self, reports: List[WeeklyAttendanceReport]) -> None:
        self.reports = list(reports)
        # Latest week in backend order is preselected
        self.selected_week = self.reports[-1].week_number if self.reports else None

    # =========================================================================
    # Selection
    # =========================================================================

    @property
    def week_options(self) -> List[Tuple[int, str]]:
        """(backend week number, "Week N" label) per loaded report."""
        return [
            (r.week_number, f"Week {display_week(r.week_number, self.start_week)}")
            for r in self.reports
        ]

    def select_week(self, week_number: Optional[int]) -> None:
        self.selected_week = week_number

    @property
    def selected_report(self) -> Optional[WeeklyAttendanceReport]:
        for report in self.reports:
            if report.week_number == self.selected_week:
                return report
        return None

    @property
    def preview(self) -> ReportPreview:
        report = self.selected_report
        if report is None:
            return ReportPreview()
        return ReportPreview(
            total_mentees=report.total_mentees,
            attendance_rate=attendance_rate_label(report),
            highlights=[
                f"{report.total_absent} mentees were absent this week",
                f"{report.total_present} mentees were present this week",
            ],
        )

    # =========================================================================
    # Download
    # =========================================================================

    def download(
        self,
        fmt: Optional[Union[str, ReportFormat]] = None,
        output_dir: Union[str, Path] = ".",
    ) -> Optional[Path]:
        """
        Export the selected week.

        Returns:
            Path of the written file, or None if nothing was written
        """
        requested = fmt if fmt is not None else self.format
        try:
            report_format = parse_format(requested)
            path = self.reporter.export(self.selected_report, report_format, output_dir)
        except NoReportSelectedError:
            logger.warning("Download blocked: no week selected")
            self.errors.report(
                "No report selected",
                "Please select a week to download the report.",
                NotificationVariant.DESTRUCTIVE,
            )
            return None
        except UnsupportedFormatError:
            logger.warning(f"Download blocked: unsupported format {requested!r}")
            label = str(getattr(requested, "value", requested)).upper()
            self.errors.report(
                "Format not supported",
                f"Downloading {label} reports is not yet supported.",
                NotificationVariant.DESTRUCTIVE,
            )
            return None
        except OSError as e:
            logger.error(f"Writing report to {output_dir} failed: {e}")
            self.errors.report(
                "Failed to generate report",
                f"The report could not be written to {output_dir}.",
                NotificationVariant.DESTRUCTIVE,
            )
            return None

        self.errors.report(
            "Report generated",
            f"Weekly summary for Week {self.selected_week} has been downloaded "
            f"as {report_format.value.upper()}.",
        )
        return path
