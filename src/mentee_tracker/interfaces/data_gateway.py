"""
Data Gateway Protocol.

Defines the abstract interface for the remote system of record. All
gateways (REST, in-memory) implement this protocol so that loaders, note
books and view controllers never depend on HTTP details.

The gateway is responsible for:
    - Fetching the mentee roster of a cohort batch
    - Patching single mentee fields
    - Listing, creating and updating check-in notes
    - Fetching weekly attendance reports and headline counts

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Every method raises GatewayError (or a subclass) on failure
    - No retries, no caching: one call, one request
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable

from mentee_tracker.domain.entities import (
    CheckInNote,
    Mentee,
    MenteeField,
    WeeklyAttendanceReport,
)


@runtime_checkable
class MenteeGatewayProtocol(Protocol):
    """Abstract interface for the remote data gateway."""

    def list_mentees(self, cohort_batch: Optional[str] = None) -> List[Mentee]:
        """Fetch the roster, in the order the backend returns it."""
        ...

    def update_mentee(
        self,
        mentee_id: str,
        field: MenteeField,
        value: Optional[str],
    ) -> Mentee:
        """Patch one field and return the server's updated mentee."""
        ...

    def list_mentee_notes(self, mentee_id: str) -> List[CheckInNote]:
        """Fetch the check-in notes of one mentee (unordered)."""
        ...

    def list_cohort_notes(self, cohort_batch: str) -> List[CheckInNote]:
        """Fetch every note of a cohort, each embedding its mentee."""
        ...

    def create_note(
        self,
        mentee_id: str,
        timestamp: datetime,
        note_content: str,
        executive_name: str,
    ) -> CheckInNote:
        """Create a note and return it with its server-assigned id."""
        ...

    def update_note(self, note: CheckInNote) -> CheckInNote:
        """Replace a note's body and return the stored note."""
        ...

    def list_weekly_reports(
        self, cohort_batch: str
    ) -> List[WeeklyAttendanceReport]:
        """Fetch the per-week attendance aggregates of a cohort."""
        ...

    def count_batch_mentees(self) -> int:
        """Number of mentees in the tracked batch."""
        ...

    def count_checkins_due(self, cohort_batch: str) -> int:
        """Number of mentees with a check-in due."""
        ...
