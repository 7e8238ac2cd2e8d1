"""
In-Memory Mentee Gateway.

A fake data gateway for development, demos and testing. Holds its records
in dictionaries, mimics the backend's echo semantics, and can be told to
fail specific operations.
"""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Set

from mentee_tracker.domain.entities import (
    CheckInNote,
    Mentee,
    MenteeField,
    MenteeStatus,
    NoteMentee,
    Priority,
    WeeklyAttendanceReport,
)
from mentee_tracker.resilience.error_handler import GatewayConnectionError


class InMemoryMenteeGateway:
    """Fake data gateway for development and testing."""

    # Sample roster: (id, name, email, poc, status, priority, attendance %)
    SAMPLE_MENTEES = [
        ("m-01", "Aarav Kulkarni", "aarav@example.org", "Omkar Wankhede", "Support Needed", "P0", 42.5),
        ("m-02", "Diya Patil", "diya@example.org", "Omkar Thorat", "Call Later", "P1", 61.0),
        ("m-03", "Kabir Shah", None, "Omkar Wankhede", "In Progress", None, None),
        ("m-04", "Isha Deshmukh", "isha@example.org", "Omkar Thorat", "In Progress", "P2", 78.25),
        ("m-05", "Vihaan Joshi", "vihaan@example.org", None, "Message Sent", "P0", 12.0),
        ("m-06", "Ananya Rao", "ananya@example.org", "Omkar Thorat", "Completed", "P4", 96.0),
        ("m-07", "Reyansh Iyer", "reyansh@example.org", "Omkar Wankhede", "DNR", "P3", 0.0),
        ("m-08", "Saanvi Nair", "saanvi@example.org", None, "In Progress", "P1", 70.0),
    ]

    # (backend week number, total, present, absent)
    SAMPLE_REPORTS = [
        (45, 8, 7, 1),
        (46, 8, 6, 2),
        (47, 8, 5, 3),
    ]

    def __init__(
        self,
        mentees: Optional[Iterable[Mentee]] = None,
        notes: Optional[Iterable[CheckInNote]] = None,
        reports: Optional[Iterable[WeeklyAttendanceReport]] = None,
        checkins_due: int = 0,
        cohort_batch: str = "6",
    ) -> None:
        """
        Initialize in-memory gateway.

        Args:
            mentees: Roster, returned in this order
            notes: Check-in notes of any mentee
            reports: Weekly attendance reports
            checkins_due: Value of the check-ins-due count
            cohort_batch: The only batch this gateway serves
        """
        self.cohort_batch = cohort_batch
        self.checkins_due = checkins_due
        self._mentees: Dict[str, Mentee] = {m.id: m for m in (mentees or [])}
        self._notes: Dict[str, CheckInNote] = {n.id: n for n in (notes or [])}
        self._reports: List[WeeklyAttendanceReport] = list(reports or [])
        self._note_ids = itertools.count(len(self._notes) + 1)
        self.fail_on: Set[str] = set()
        self.calls: List[str] = []

    @classmethod
    def sample(cls) -> "InMemoryMenteeGateway":
        """Gateway preloaded with a small demo cohort."""
        mentees = [
            Mentee(
                id=mid,
                name=name,
                email=email,
                poc=poc,
                status=MenteeStatus(status),
                priority=Priority(priority) if priority else None,
                attendance_percentage=pct,
            )
            for mid, name, email, poc, status, priority, pct in cls.SAMPLE_MENTEES
        ]
        reports = [
            WeeklyAttendanceReport(
                week_number=week,
                total_mentees=total,
                total_present=present,
                total_absent=absent,
            )
            for week, total, present, absent in cls.SAMPLE_REPORTS
        ]
        base = datetime(2025, 11, 10, 9, 0, tzinfo=timezone.utc)
        notes = [
            CheckInNote(
                id=f"n-{i + 1}",
                mentee_id=m.id,
                timestamp=base + timedelta(days=i, hours=i),
                note_content=f"Called {m.name.split()[0]}, follow up next week",
                executive_name=m.poc or "Coordinator",
                week_number=45 + i % 3,
            )
            for i, m in enumerate(mentees[:4])
        ]
        return cls(mentees=mentees, notes=notes, reports=reports, checkins_due=3)

    # =========================================================================
    # MenteeGatewayProtocol
    # =========================================================================

    def list_mentees(self, cohort_batch: Optional[str] = None) -> List[Mentee]:
        self._enter("list_mentees")
        if cohort_batch and cohort_batch != self.cohort_batch:
            return []
        return list(self._mentees.values())

    def update_mentee(
        self,
        mentee_id: str,
        field: MenteeField,
        value: Optional[str],
    ) -> Mentee:
        self._enter("update_mentee")
        current = self._mentees.get(mentee_id)
        if current is None:
            raise GatewayConnectionError(
                f"Mentee {mentee_id} not found", operation="update_mentee"
            )
        updated = current.model_copy(update={field.value: self._coerce(field, value)})
        self._mentees[mentee_id] = updated
        return updated

    def list_mentee_notes(self, mentee_id: str) -> List[CheckInNote]:
        self._enter("list_mentee_notes")
        return [n for n in self._notes.values() if n.mentee_id == mentee_id]

    def list_cohort_notes(self, cohort_batch: str) -> List[CheckInNote]:
        self._enter("list_cohort_notes")
        if cohort_batch != self.cohort_batch:
            return []
        return [self._embed(n) for n in self._notes.values()]

    def create_note(
        self,
        mentee_id: str,
        timestamp: datetime,
        note_content: str,
        executive_name: str,
    ) -> CheckInNote:
        self._enter("create_note")
        note = CheckInNote(
            id=f"n-{next(self._note_ids)}",
            mentee_id=mentee_id,
            timestamp=timestamp,
            note_content=note_content,
            executive_name=executive_name,
        )
        self._notes[note.id] = note
        return note

    def update_note(self, note: CheckInNote) -> CheckInNote:
        self._enter("update_note")
        if note.id not in self._notes:
            raise GatewayConnectionError(
                f"Note {note.id} not found", operation="update_note"
            )
        self._notes[note.id] = note
        return note

    def list_weekly_reports(
        self, cohort_batch: str
    ) -> List[WeeklyAttendanceReport]:
        self._enter("list_weekly_reports")
        if cohort_batch != self.cohort_batch:
            return []
        return list(self._reports)

    def count_batch_mentees(self) -> int:
        self._enter("count_batch_mentees")
        return len(self._mentees)

    def count_checkins_due(self, cohort_batch: str) -> int:
        self._enter("count_checkins_due")
        return self.checkins_due if cohort_batch == self.cohort_batch else 0

    # =========================================================================
    # Internals
    # =========================================================================

    def _enter(self, operation: str) -> None:
        """Record the call and raise if this operation is set to fail."""
        self.calls.append(operation)
        if operation in self.fail_on:
            raise GatewayConnectionError(
                f"Simulated failure in {operation}", operation=operation
            )

    def _coerce(self, field: MenteeField, value: Optional[str]) -> object:
        if field is MenteeField.STATUS and value is not None:
            return MenteeStatus(value)
        return value

    def _embed(self, note: CheckInNote) -> CheckInNote:
        mentee = self._mentees.get(note.mentee_id or "")
        if mentee is None:
            return note
        return note.model_copy(
            update={
                "mentee": NoteMentee(
                    id=mentee.id,
                    name=mentee.name,
                    poc=mentee.poc,
                    status=mentee.status,
                )
            }
        )
