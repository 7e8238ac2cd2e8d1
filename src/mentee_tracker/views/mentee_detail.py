"""
Mentee Detail View - Field Patching and Check-in Notes.

One mentee at a time: patch status / POC / phone and keep the mentee's
check-in notes in a MenteeNotebook. Every remote call is guarded; a
failure is surfaced once and leaves the view state as it was.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from mentee_tracker.domain.entities import CheckInNote, Mentee, MenteeField, MenteeStatus
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.notes.notebook import MenteeNotebook
from mentee_tracker.resilience.error_handler import ErrorHandler, NotifierProtocol
from mentee_tracker.validation.input_validator import (
    ValidationError,
    normalize_field_value,
    validate_author,
    validate_note_content,
)
from mentee_tracker.views.scope import ViewScope

logger = logging.getLogger(__name__)


def patch_mentee_field(
    gateway: MenteeGatewayProtocol,
    errors: ErrorHandler,
    mentee_id: str,
    field: MenteeField,
    value: Optional[str],
) -> Optional[Mentee]:
    """
    Send one field update and surface the result.

    Returns:
        The mentee echoed by the server, or None on a rejected value or
        a failed request
    """
    try:
        normalized = normalize_field_value(field, value)
    except ValidationError as e:
        logger.warning(f"Update of {field.value} blocked: {e.message}")
        return None

    noun = field.label if field is MenteeField.POC else field.value
    outcome = errors.guard(
        lambda: gateway.update_mentee(mentee_id, field, normalized),
        operation_name=f"update_{field.value}",
        failure_title=f"Failed to update {noun}",
        failure_description=f"There was an error updating the mentee's {noun}.",
    )
    if not outcome.ok:
        return None

    errors.report(
        title=f"{field.label} updated",
        description=f"Mentee's {noun} has been updated to {normalized or 'none'}.",
    )
    return outcome.value


class MenteeDetailView:
    """Detail view of a single mentee."""

    VIEW_NAME = "mentee_detail"

    def __init__(
        self,
        gateway: MenteeGatewayProtocol,
        notifier: NotifierProtocol,
        mentee: Mentee,
        executive_name: Optional[str] = None,
    ) -> None:
        """
        Initialize detail view.

        Args:
            gateway: Remote data gateway
            notifier: Sink for user-visible messages
            mentee: The mentee shown
            executive_name: Signed-in author of new notes
        """
        self.gateway = gateway
        self.mentee = mentee
        self.executive_name = executive_name
        self.errors = ErrorHandler(notifier)
        self.scope = ViewScope(self.VIEW_NAME)
        self.notebook = MenteeNotebook(gateway, mentee.id)

    @property
    def notes(self) -> List[CheckInNote]:
        return self.notebook.notes

    def open(self) -> bool:
        self.scope.open()
        return self.load_notes()

    def close(self) -> None:
        self.scope.close()

    def load_notes(self) -> bool:
        outcome = self.errors.guard(
            lambda: self.scope.run(self.notebook.fetch, self.notebook.replace),
            operation_name="load_notes",
            failure_title="Failed to load notes",
            failure_description="There was an error loading this mentee's notes.",
        )
        return bool(outcome.value)

    # =========================================================================
    # Field updates
    # =========================================================================

    def update_field(self, field: MenteeField, value: Optional[str]) -> bool:
        updated = patch_mentee_field(
            self.gateway, self.errors, self.mentee.id, field, value
        )
        if updated is None:
            return False
        self.mentee = updated
        return True

    def change_status(self, status: MenteeStatus) -> bool:
        return self.update_field(MenteeField.STATUS, status.value)

    def change_poc(self, poc: Optional[str]) -> bool:
        return self.update_field(MenteeField.POC, poc)

    def change_phone(self, phone: Optional[str]) -> bool:
        return self.update_field(MenteeField.PHONE, phone)

    # =========================================================================
    # Notes
    # =========================================================================

    def add_note(self, content: str, now: Optional[datetime] = None) -> bool:
        """
        Add a check-in note signed by the current executive.

        Blank content or a missing executive blocks the action silently.
        """
        try:
            validate_note_content(content)
            validate_author(self.executive_name)
        except ValidationError as e:
            logger.warning(f"Note not sent: {e.message}")
            return False

        outcome = self.errors.guard(
            lambda: self.notebook.add(content, self.executive_name or "", now=now),
            operation_name="add_note",
            failure_title="Failed to add note",
            failure_description="There was an error adding your note. Please try again.",
        )
        if not outcome.ok:
            return False
        self.errors.report("Note added", "Your note has been successfully added.")
        return True

    def edit_note(self, note_id: str, content: str) -> bool:
        """Replace a note's content. Unknown ids are ignored."""
        try:
            validate_note_content(content)
        except ValidationError as e:
            logger.warning(f"Edit not sent: {e.message}")
            return False

        outcome = self.errors.guard(
            lambda: self.notebook.edit(note_id, content),
            operation_name="edit_note",
            failure_title="Failed to update note",
            failure_description="There was an error updating your note. Please try again.",
        )
        if outcome.value is None:
            return False
        self.errors.report("Note updated", "Your note has been successfully updated.")
        return True
