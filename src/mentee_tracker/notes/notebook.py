"""
Check-in Note Books.

MenteeNotebook keeps the notes of one mentee in sync with the backend:
    - load(): fetch and order most-recent-first (full timestamp compare)
    - add(): validate, create remotely, prepend the server echo
    - edit(): validate, update remotely, replace in place by id

CohortNotesBoard filters the cohort-wide note listing by week and POC.

Design Notes:
    - Local list changes only after the server accepted the change
    - Edits keep position; ordering is not recomputed
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from mentee_tracker.domain.entities import CheckInNote
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.validation.input_validator import (
    validate_author,
    validate_note_content,
)

logger = logging.getLogger(__name__)


def sort_notes(notes: Iterable[CheckInNote]) -> List[CheckInNote]:
    """Order notes by timestamp, most recent first."""
    return sorted(notes, key=lambda n: n.timestamp, reverse=True)


class MenteeNotebook:
    """Local, server-consistent copy of one mentee's check-in notes."""

    def __init__(self, gateway: MenteeGatewayProtocol, mentee_id: str) -> None:
        """
        Initialize notebook.

        Args:
            gateway: Remote data gateway
            mentee_id: Owner of the notes
        """
        self.gateway = gateway
        self.mentee_id = mentee_id
        self._notes: List[CheckInNote] = []

    @property
    def notes(self) -> List[CheckInNote]:
        return list(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def fetch(self) -> List[CheckInNote]:
        """
        Fetch and order notes without touching the local list.

        Raises:
            GatewayError: If the notes cannot be fetched
        """
        return sort_notes(self.gateway.list_mentee_notes(self.mentee_id))

    def replace(self, notes: List[CheckInNote]) -> None:
        """Swap in a fetched list (as returned by fetch())."""
        self._notes = list(notes)

    def load(self) -> List[CheckInNote]:
        """Fetch, order and keep the notes."""
        self.replace(self.fetch())
        return self.notes

    def add(
        self,
        content: str,
        executive_name: str,
        now: Optional[datetime] = None,
    ) -> CheckInNote:
        """
        Create a note and prepend it locally.

        Args:
            content: Note text; trimmed before sending
            executive_name: Author of the note
            now: Timestamp to send (defaults to current UTC time)

        Returns:
            The created note as echoed by the server

        Raises:
            EmptyNoteError / MissingAuthorError: Before any request
            GatewayError: If the create call fails; local list unchanged
        """
        text = validate_note_content(content)
        author = validate_author(executive_name)
        timestamp = now or datetime.now(timezone.utc)

        created = self.gateway.create_note(self.mentee_id, timestamp, text, author)
        self._notes.insert(0, created)
        logger.info(f"Added note {created.id} for mentee {self.mentee_id}")
        return created

    def edit(self, note_id: str, content: str) -> Optional[CheckInNote]:
        """
        Replace the content of a loaded note.

        Args:
            note_id: Id of a note in the local list
            content: New text; trimmed before sending

        Returns:
            The updated note, or None if note_id is not loaded (no request)

        Raises:
            EmptyNoteError: Before any request
            GatewayError: If the update call fails; local list unchanged
        """
        text = validate_note_content(content)

        index = self._index_of(note_id)
        if index is None:
            logger.warning(f"Edit ignored: note {note_id} is not loaded")
            return None

        current = self._notes[index]
        updated = self.gateway.update_note(
            current.model_copy(update={"note_content": text})
        )
        self._notes[index] = updated
        logger.info(f"Updated note {note_id} for mentee {self.mentee_id}")
        return updated

    def _index_of(self, note_id: str) -> Optional[int]:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return None


class CohortNotesBoard:
    """Cohort-wide note listing with week and POC selection."""

    def __init__(self, notes: Iterable[CheckInNote] = ()) -> None:
        self.notes: List[CheckInNote] = list(notes)

    def filter(
        self,
        week_number: Optional[int] = None,
        poc: Optional[str] = None,
    ) -> List[CheckInNote]:
        """
        Notes matching the selected week and POC (None selects all).

        POC is matched against the embedded mentee; a note without one
        only passes when no POC is selected.
        """
        result = []
        for note in self.notes:
            if week_number is not None and note.week_number != week_number:
                continue
            if poc is not None and (note.mentee is None or note.mentee.poc != poc):
                continue
            result.append(note)
        return result

    def week_numbers(self) -> List[int]:
        """Distinct week numbers, ascending."""
        return sorted({n.week_number for n in self.notes if n.week_number is not None})

    def pocs(self) -> List[str]:
        """Distinct POCs of embedded mentees, in first-seen order."""
        seen: List[str] = []
        for note in self.notes:
            poc = note.mentee.poc if note.mentee else None
            if poc and poc not in seen:
                seen.append(poc)
        return seen
