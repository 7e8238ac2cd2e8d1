"""
Unit Tests for Input Validation.

Test Aspects Covered:
    ✅ Validation: Note content, author, report selection
    ✅ Normalization: Phone trimming, blank values cleared
"""

from __future__ import annotations

import pytest

from mentee_tracker.domain.entities import MenteeField
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


class TestNoteValidation:
    """Test cases for note checks."""

    def test_trims_content(self) -> None:
        """
        SCENARIO: Content with surrounding whitespace
        EXPECTED: Trimmed content
        """
        assert validate_note_content("  hello \n") == "hello"

    @pytest.mark.parametrize("content", ["", "   ", "\n\t", None])
    def test_rejects_blank_content(self, content) -> None:
        """
        SCENARIO: Blank or missing content
        EXPECTED: EmptyNoteError
        """
        with pytest.raises(EmptyNoteError):
            validate_note_content(content)

    def test_rejects_missing_author(self) -> None:
        """
        SCENARIO: No signed-in executive
        EXPECTED: MissingAuthorError, a ValidationError
        """
        with pytest.raises(MissingAuthorError) as exc_info:
            validate_author("  ")
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.field == "executiveName"

    def test_require_report(self, report) -> None:
        """
        SCENARIO: Selected and missing report
        EXPECTED: Report returned; None raises NoReportSelectedError
        """
        assert require_report(report) is report
        with pytest.raises(NoReportSelectedError):
            require_report(None)


class TestNormalizeFieldValue:
    """Test cases for normalize_field_value()."""

    def test_phone_trimmed(self) -> None:
        """
        SCENARIO: Phone with whitespace
        EXPECTED: Trimmed
        """
        assert normalize_field_value(MenteeField.PHONE, " +91 98765 43210 ") == "+91 98765 43210"

    @pytest.mark.parametrize("field", [MenteeField.PHONE, MenteeField.POC])
    def test_blank_clears_field(self, field) -> None:
        """
        SCENARIO: Empty phone or POC
        EXPECTED: None (sent as null)
        """
        assert normalize_field_value(field, "  ") is None
        assert normalize_field_value(field, None) is None

    def test_status_must_be_known(self) -> None:
        """
        SCENARIO: Known and unknown status values
        EXPECTED: Known value kept, unknown raises ValidationError
        """
        assert normalize_field_value(MenteeField.STATUS, "Completed") == "Completed"
        with pytest.raises(ValidationError):
            normalize_field_value(MenteeField.STATUS, "Lost")
