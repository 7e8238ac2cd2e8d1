"""
Core Domain Entities.

This module defines the fundamental entities of the Mentee Tracker domain.
Every entity is owned by the remote system of record; instances held here
are transient, read-mostly copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, Field, field_validator


class Priority(str, Enum):
    """Follow-up urgency, P0 (highest) through P4 (lowest)."""

    P0 = "P0"
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"

    @property
    def rank(self) -> int:
        """Sort rank of this priority (P0 = 0)."""
        return PRIORITY_RANKS[self]


class MenteeStatus(str, Enum):
    """Program state of a mentee. Values are the wire/display strings."""

    IN_PROGRESS = "In Progress"
    CALL_LATER = "Call Later"
    SUPPORT_NEEDED = "Support Needed"
    COMPLETED = "Completed"
    ARCHIVED = "Archived"
    DNR = "DNR"
    MESSAGE_SENT = "Message Sent"


class MenteeField(str, Enum):
    """Mentee fields a coordinator may patch."""

    STATUS = "status"
    POC = "poc"
    PHONE = "phone"

    @property
    def label(self) -> str:
        return "POC" if self is MenteeField.POC else self.value.capitalize()


PRIORITY_RANKS: Dict[Priority, int] = {
    Priority.P0: 0,
    Priority.P1: 1,
    Priority.P2: 2,
    Priority.P3: 3,
    Priority.P4: 4,
}

# Mentees without a priority sort after every ranked priority
NO_PRIORITY_RANK = 5


def priority_rank(priority: Optional[Priority]) -> int:
    """
    Total order over optional priorities.

    Args:
        priority: A priority or None

    Returns:
        0..4 for P0..P4, NO_PRIORITY_RANK for None
    """
    if priority is None:
        return NO_PRIORITY_RANK
    return PRIORITY_RANKS[priority]


@dataclass(frozen=True)
class BadgeStyle:
    """Presentation colors for a priority or status badge."""

    background: str
    text: str
    border: str


PRIORITY_STYLES: Dict[Optional[Priority], BadgeStyle] = {
    Priority.P0: BadgeStyle("red-100", "red-800", "red-200"),
    Priority.P1: BadgeStyle("orange-100", "orange-800", "orange-200"),
    Priority.P2: BadgeStyle("yellow-100", "yellow-800", "yellow-200"),
    Priority.P3: BadgeStyle("blue-100", "blue-800", "blue-200"),
    Priority.P4: BadgeStyle("purple-100", "purple-800", "purple-200"),
    None: BadgeStyle("gray-100", "gray-800", "gray-200"),
}

STATUS_STYLES: Dict[MenteeStatus, BadgeStyle] = {
    MenteeStatus.SUPPORT_NEEDED: BadgeStyle("red-100", "red-800", "red-200"),
    MenteeStatus.CALL_LATER: BadgeStyle("orange-100", "orange-800", "orange-200"),
    MenteeStatus.IN_PROGRESS: BadgeStyle("blue-100", "blue-800", "blue-200"),
    MenteeStatus.COMPLETED: BadgeStyle("green-100", "green-800", "green-200"),
    MenteeStatus.MESSAGE_SENT: BadgeStyle("purple-100", "purple-800", "purple-200"),
    MenteeStatus.ARCHIVED: BadgeStyle("gray-100", "gray-800", "gray-200"),
    MenteeStatus.DNR: BadgeStyle("gray-100", "gray-800", "gray-200"),
}


class Mentee(BaseModel):
    """One program participant."""

    id: str = Field(..., description="Opaque unique identifier")
    name: str = Field(..., description="Display name")
    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    poc: Optional[str] = Field(default=None, description="Point of contact")
    organization_ids: FrozenSet[str] = Field(default_factory=frozenset)
    status: MenteeStatus = Field(default=MenteeStatus.IN_PROGRESS)
    priority: Optional[Priority] = Field(default=None)
    last_attendance: Optional[datetime] = Field(
        default=None, alias="lastAttendance"
    )
    attendance_percentage: Optional[float] = Field(
        default=None, ge=0, le=100, alias="attendancePercentage"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def priority_rank(self) -> int:
        return priority_rank(self.priority)

    @property
    def priority_style(self) -> BadgeStyle:
        return PRIORITY_STYLES[self.priority]

    @property
    def status_style(self) -> BadgeStyle:
        return STATUS_STYLES[self.status]


class NoteMentee(BaseModel):
    """Mentee summary embedded in cohort-wide note listings."""

    id: str
    name: str
    poc: Optional[str] = None
    status: Optional[MenteeStatus] = None

    model_config = {"frozen": True}


class CheckInNote(BaseModel):
    """A timestamped free-text record of contact with a mentee."""

    id: str
    mentee_id: Optional[str] = Field(default=None, alias="menteeId")
    timestamp: datetime
    note_content: str = Field(..., alias="noteContent")
    executive_name: Optional[str] = Field(default=None, alias="executiveName")
    week_number: Optional[int] = Field(default=None, alias="weekNumber")
    mentee: Optional[NoteMentee] = None

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Backend timestamps without an offset are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_payload(self) -> Dict[str, object]:
        """Full JSON body of this note, as sent on update."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class WeeklyAttendanceReport(BaseModel):
    """Precomputed per-week attendance aggregate from the backend."""

    week_number: int = Field(..., alias="weekNumber")
    total_mentees: int = Field(..., ge=0, alias="totalMentees")
    total_present: int = Field(..., ge=0, alias="totalPresent")
    total_absent: int = Field(..., ge=0, alias="totalAbsent")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def attendance_rate(self) -> float:
        """Present share of all mentees (0.0 when there are none)."""
        if self.total_mentees == 0:
            return 0.0
        return self.total_present / self.total_mentees
