"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe selections and derived
figures; they have no identity of their own.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from mentee_tracker.domain.entities import MenteeStatus, Priority


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# One exported report line: (metric label, value)
ReportRow = Tuple[str, Union[int, str]]

# Rejection reasons: mentee id -> predicate name
RejectionReasonsDict = Dict[str, str]


class MenteeFilterCriteria(BaseModel):
    """Active filter predicates; unset fields pass every mentee."""

    priority: Optional[Priority] = None
    status: Optional[MenteeStatus] = None
    poc: Optional[str] = None
    search: str = ""

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return (
            self.priority is None
            and self.status is None
            and self.poc is None
            and not self.search
        )


class FilterResult(BaseModel):
    """Outcome of running the filter pipeline over a collection."""

    passed_ids: List[str] = Field(default_factory=list)
    rejected_ids: List[str] = Field(default_factory=list)
    rejection_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Mentee id -> rejecting predicate"
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.passed_ids)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_ids)


class PriorityCounts(BaseModel):
    """Exact mentee counts per priority rank."""

    p0: int = 0
    p1: int = 0
    p2: int = 0
    p3: int = 0
    p4: int = 0
    none: int = 0
    total: int = 0

    model_config = {"frozen": True}

    def for_priority(self, priority: Optional[Priority]) -> int:
        if priority is None:
            return self.none
        return getattr(self, priority.value.lower())

    def as_dict(self) -> Dict[str, int]:
        return {
            "P0": self.p0,
            "P1": self.p1,
            "P2": self.p2,
            "P3": self.p3,
            "P4": self.p4,
            "None": self.none,
            "total": self.total,
        }


class AttendanceTrendPoint(BaseModel):
    """Present/absent split of one week, for the analytics chart."""

    label: str
    week_number: int
    present_pct: float = Field(ge=0, le=100)
    absent_pct: float = Field(ge=0, le=100)

    model_config = {"frozen": True}


class HomeCounts(BaseModel):
    """Headline numbers shown on the landing screen."""

    total_mentees: int = Field(ge=0)
    checkins_due: int = Field(ge=0)

    model_config = {"frozen": True}
