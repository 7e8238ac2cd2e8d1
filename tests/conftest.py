"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

import pytest

from mentee_tracker.adapters.memory_gateway import InMemoryMenteeGateway
from mentee_tracker.adapters.notifier import InMemoryNotifier
from mentee_tracker.domain.entities import (
    CheckInNote,
    Mentee,
    MenteeStatus,
    Priority,
    WeeklyAttendanceReport,
)


@pytest.fixture
def notifier() -> InMemoryNotifier:
    """Collecting notifier for assertions on user-visible messages."""
    return InMemoryNotifier()


@pytest.fixture
def sample_gateway() -> InMemoryMenteeGateway:
    """In-memory gateway preloaded with the demo cohort."""
    return InMemoryMenteeGateway.sample()


@pytest.fixture
def roster() -> List[Mentee]:
    """Unordered roster with ties and a mentee without priority."""
    return [
        Mentee(id="a", name="Asha Menon", email="asha@example.org",
               poc="Ravi", status=MenteeStatus.IN_PROGRESS, priority=Priority.P2),
        Mentee(id="b", name="Bilal Khan", email=None,
               poc="Meera", status=MenteeStatus.CALL_LATER, priority=None),
        Mentee(id="c", name="Chitra Das", email="chitra@example.org",
               poc="Ravi", status=MenteeStatus.SUPPORT_NEEDED, priority=Priority.P0),
        Mentee(id="d", name="Dev Sharma", email="dev.sharma@example.org",
               poc=None, status=MenteeStatus.IN_PROGRESS, priority=Priority.P2),
        Mentee(id="e", name="Esha Gupta", email="ESHA@Example.org",
               poc="Meera", status=MenteeStatus.COMPLETED, priority=Priority.P4),
        Mentee(id="f", name="Farhan Ali", email="farhan@example.org",
               poc="Ravi", status=MenteeStatus.IN_PROGRESS, priority=Priority.P0),
    ]


@pytest.fixture
def notes() -> List[CheckInNote]:
    """Notes of mentee "a", out of order, two on the same day."""
    return [
        CheckInNote(id="n1", mentee_id="a", note_content="First call",
                    executive_name="Ravi",
                    timestamp=datetime(2025, 11, 10, 9, 0, tzinfo=timezone.utc)),
        CheckInNote(id="n2", mentee_id="a", note_content="Evening follow up",
                    executive_name="Ravi",
                    timestamp=datetime(2025, 11, 12, 18, 30, tzinfo=timezone.utc)),
        CheckInNote(id="n3", mentee_id="a", note_content="Morning follow up",
                    executive_name="Meera",
                    timestamp=datetime(2025, 11, 12, 8, 15, tzinfo=timezone.utc)),
    ]


@pytest.fixture
def report() -> WeeklyAttendanceReport:
    """Week 47 report: 10 mentees, 7 present, 3 absent."""
    return WeeklyAttendanceReport(
        week_number=47, total_mentees=10, total_present=7, total_absent=3
    )
