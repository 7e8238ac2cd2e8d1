"""
Reports Package - Weekly Summary Rows and Exporters.

Components:
    - build_report_rows(): metric/value rows of a selected report
    - CsvReportExporter / PdfReportExporter / XlsxReportExporter
    - WeeklySummaryReporter: render or write weekly-summary-week-{week}.{ext}
"""

from mentee_tracker.reports.exporters import (
    CsvReportExporter,
    PdfReportExporter,
    ReportFormat,
    UnsupportedFormatError,
    WeeklySummaryReporter,
    XlsxReportExporter,
    create_exporters,
    parse_format,
)
from mentee_tracker.reports.row_builder import (
    attendance_rate_label,
    build_report_rows,
    report_file_name,
)

__all__ = [
    "CsvReportExporter",
    "PdfReportExporter",
    "ReportFormat",
    "UnsupportedFormatError",
    "WeeklySummaryReporter",
    "XlsxReportExporter",
    "attendance_rate_label",
    "build_report_rows",
    "create_exporters",
    "parse_format",
    "report_file_name",
]
