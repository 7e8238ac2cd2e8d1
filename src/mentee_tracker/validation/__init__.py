"""
Validation Package - Input Validation.

This package provides local validation that runs before any request:
    - Note content and author checks
    - Report selection guard
    - Mentee field normalization

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
"""

from mentee_tracker.validation.input_validator import (
    EmptyNoteError,
    MissingAuthorError,
    NoReportSelectedError,
    ValidationError,
    normalize_field_value,
    require_report,
    validate_author,
    validate_note_content,
)

__all__ = [
    "EmptyNoteError",
    "MissingAuthorError",
    "NoReportSelectedError",
    "ValidationError",
    "normalize_field_value",
    "require_report",
    "validate_author",
    "validate_note_content",
]
