"""
Input Validator - Local Checks Before Any Network Call.

Validates user input before a request is issued:
    - Note content is non-empty after trimming
    - A note has an author
    - A weekly report is selected before export
    - Patched mentee fields carry a valid value

Design Notes:
    - Fail-fast principle: a rejected action sends nothing
    - Clear error messages
"""

from __future__ import annotations

import logging
from typing import Optional

from mentee_tracker.domain.entities import (
    MenteeField,
    MenteeStatus,
    WeeklyAttendanceReport,
)

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when user input fails a local check."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class EmptyNoteError(ValidationError):
    """Note content is empty after trimming."""


class MissingAuthorError(ValidationError):
    """No executive name was given for a note."""


class NoReportSelectedError(ValidationError):
    """An export was requested without a selected weekly report."""


def validate_note_content(content: Optional[str]) -> str:
    """
    Trim note content and reject empty notes.

    Args:
        content: Raw text typed by the user

    Returns:
        The trimmed content

    Raises:
        EmptyNoteError: If nothing remains after trimming
    """
    trimmed = (content or "").strip()
    if not trimmed:
        raise EmptyNoteError("Note content must not be empty", field="noteContent")
    return trimmed


def validate_author(executive_name: Optional[str]) -> str:
    """
    Reject notes without an author.

    Raises:
        MissingAuthorError: If the name is missing or blank
    """
    name = (executive_name or "").strip()
    if not name:
        raise MissingAuthorError(
            "A signed-in executive is required to write notes",
            field="executiveName",
        )
    return name


def require_report(
    report: Optional[WeeklyAttendanceReport],
) -> WeeklyAttendanceReport:
    """
    Ensure a weekly report is selected.

    Raises:
        NoReportSelectedError: If report is None
    """
    if report is None:
        logger.debug("Report export blocked: no week selected")
        raise NoReportSelectedError("No report selected", field="week")
    return report


def normalize_field_value(field: MenteeField, value: Optional[str]) -> Optional[str]:
    """
    Normalize a mentee field value before it is sent.

    Phone is trimmed; a blank phone or POC is sent as None (clears the
    field). Status must name a known MenteeStatus.

    Raises:
        ValidationError: If status is missing or unknown
    """
    if field is MenteeField.STATUS:
        try:
            return MenteeStatus((value or "").strip()).value
        except ValueError as e:
            raise ValidationError(f"Unknown status: {value!r}", field="status") from e

    trimmed = (value or "").strip()
    if not trimmed:
        return None
    return trimmed if field is MenteeField.PHONE else value
