"""
Report Exporters.

Serialize metric/value rows into downloadable files:
    - CSV via the csv module (header row, comma-joined, trailing newline)
    - PDF via reportlab (title, week line, grid table with grey header)
    - XLSX via openpyxl (one "Weekly Summary" sheet, array-of-arrays)

Design Notes:
    - Exporters receive finished rows and never compute figures
    - render() returns bytes; WeeklySummaryReporter writes files
"""

from __future__ import annotations

import csv
import io
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Protocol, Sequence, Union

from openpyxl import Workbook
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from mentee_tracker.domain.entities import WeeklyAttendanceReport
from mentee_tracker.domain.value_objects import ReportRow
from mentee_tracker.reports.row_builder import (
    HEADER_ROW,
    build_report_rows,
    report_file_name,
)
from mentee_tracker.validation.input_validator import require_report

logger = logging.getLogger(__name__)


class ReportFormat(str, Enum):
    """Supported export formats; the value is the file extension."""

    CSV = "csv"
    PDF = "pdf"
    XLSX = "xlsx"


class UnsupportedFormatError(ValueError):
    """Raised for an export format without an exporter."""


def parse_format(value: Union[str, ReportFormat]) -> ReportFormat:
    """Resolve a format name ("csv", "PDF", ...) to a ReportFormat."""
    if isinstance(value, ReportFormat):
        return value
    try:
        return ReportFormat(value.strip().lower())
    except ValueError as e:
        supported = ", ".join(f.value for f in ReportFormat)
        raise UnsupportedFormatError(
            f"Format {value!r} not supported. Supported: {supported}"
        ) from e


class ReportExporterProtocol(Protocol):
    """Protocol for report exporters."""

    @property
    def format(self) -> ReportFormat:
        ...

    def render(self, rows: Sequence[ReportRow], week: int) -> bytes:
        ...


class CsvReportExporter:
    """Comma-separated rows under a Metric,Value header."""

    @property
    def format(self) -> ReportFormat:
        return ReportFormat.CSV

    def render(self, rows: Sequence[ReportRow], week: int) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(HEADER_ROW)
        writer.writerows(rows)
        return buffer.getvalue().encode("utf-8")


class PdfReportExporter:
    """Single-page PDF with a title and a grid table."""

    HEADER_FILL = colors.Color(200 / 255, 200 / 255, 200 / 255)

    @property
    def format(self) -> ReportFormat:
        return ReportFormat.PDF

    def render(self, rows: Sequence[ReportRow], week: int) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4, title="Weekly Summary Report")
        styles = getSampleStyleSheet()

        table = Table([list(HEADER_ROW)] + [[label, str(value)] for label, value in rows])
        table.setStyle(
            TableStyle(
                [
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                    ("BACKGROUND", (0, 0), (-1, 0), self.HEADER_FILL),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
                ]
            )
        )

        doc.build(
            [
                Paragraph("Weekly Summary Report", styles["Title"]),
                Paragraph(f"Week: {week}", styles["Normal"]),
                Spacer(1, 12),
                table,
            ]
        )
        return buffer.getvalue()


class XlsxReportExporter:
    """Workbook with one "Weekly Summary" sheet."""

    SHEET_TITLE = "Weekly Summary"

    @property
    def format(self) -> ReportFormat:
        return ReportFormat.XLSX

    def render(self, rows: Sequence[ReportRow], week: int) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = self.SHEET_TITLE
        sheet.append(list(HEADER_ROW))
        for label, value in rows:
            sheet.append([label, value])

        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()


def create_exporters() -> Dict[ReportFormat, ReportExporterProtocol]:
    """One exporter per supported format."""
    return {
        ReportFormat.CSV: CsvReportExporter(),
        ReportFormat.PDF: PdfReportExporter(),
        ReportFormat.XLSX: XlsxReportExporter(),
    }


class WeeklySummaryReporter:
    """Builds rows for a selected report and writes the export file."""

    def __init__(
        self,
        exporters: Optional[Dict[ReportFormat, ReportExporterProtocol]] = None,
    ) -> None:
        self.exporters = exporters or create_exporters()

    def render(
        self,
        report: Optional[WeeklyAttendanceReport],
        fmt: Union[str, ReportFormat],
    ) -> bytes:
        """
        Render a report to bytes.

        Raises:
            NoReportSelectedError: If report is None
            UnsupportedFormatError: If fmt has no exporter
        """
        report_format = parse_format(fmt)
        selected = require_report(report)
        exporter = self.exporters.get(report_format)
        if exporter is None:
            raise UnsupportedFormatError(f"No exporter for {report_format.value}")
        return exporter.render(build_report_rows(selected), selected.week_number)

    def export(
        self,
        report: Optional[WeeklyAttendanceReport],
        fmt: Union[str, ReportFormat],
        output_dir: Union[str, Path] = ".",
    ) -> Path:
        """
        Write weekly-summary-week-{week}.{ext} into output_dir.

        Returns:
            Path of the written file
        """
        content = self.render(report, fmt)
        selected = require_report(report)
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / report_file_name(selected.week_number, parse_format(fmt).value)
        path.write_bytes(content)
        logger.info(f"Wrote {path} ({len(content)} bytes)")
        return path
