"""
Mentee Predicates.

Each predicate answers one question about one mentee. An unset predicate
is inactive and passes every mentee; the pipeline combines the active ones
as a conjunction.

Predicates:
    - PriorityFilter: exact priority match
    - StatusFilter: exact status match
    - PocFilter: exact point-of-contact match
    - SearchFilter: case-insensitive substring of name or email
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from mentee_tracker.domain.entities import Mentee, MenteeStatus, Priority
from mentee_tracker.domain.value_objects import MenteeFilterCriteria


class MenteePredicate(Protocol):
    """Protocol for mentee predicates."""

    @property
    def name(self) -> str:
        ...

    @property
    def is_active(self) -> bool:
        ...

    def matches(self, mentee: Mentee) -> bool:
        ...


class PriorityFilter:
    """Keep mentees with one selected priority."""

    def __init__(self, priority: Optional[Priority] = None) -> None:
        self.priority = priority

    @property
    def name(self) -> str:
        return "priority_filter"

    @property
    def is_active(self) -> bool:
        return self.priority is not None

    def matches(self, mentee: Mentee) -> bool:
        if not self.is_active:
            return True
        return mentee.priority == self.priority


class StatusFilter:
    """Keep mentees with one selected status."""

    def __init__(self, status: Optional[MenteeStatus] = None) -> None:
        self.status = status

    @property
    def name(self) -> str:
        return "status_filter"

    @property
    def is_active(self) -> bool:
        return self.status is not None

    def matches(self, mentee: Mentee) -> bool:
        if not self.is_active:
            return True
        return mentee.status == self.status


class PocFilter:
    """Keep mentees followed up by one selected point of contact."""

    def __init__(self, poc: Optional[str] = None) -> None:
        self.poc = poc

    @property
    def name(self) -> str:
        return "poc_filter"

    @property
    def is_active(self) -> bool:
        return self.poc is not None

    def matches(self, mentee: Mentee) -> bool:
        if not self.is_active:
            return True
        return mentee.poc == self.poc


class SearchFilter:
    """
    Free-text search over name and email.

    Case-insensitive substring match. A mentee without an email can still
    match on name.
    """

    def __init__(self, term: str = "") -> None:
        self.term = term
        self._needle = term.lower()

    @property
    def name(self) -> str:
        return "search_filter"

    @property
    def is_active(self) -> bool:
        return bool(self.term)

    def matches(self, mentee: Mentee) -> bool:
        if not self.is_active:
            return True
        if self._needle in mentee.name.lower():
            return True
        return mentee.email is not None and self._needle in mentee.email.lower()


def predicates_for(criteria: MenteeFilterCriteria) -> List[MenteePredicate]:
    """
    Build the predicate list for a set of criteria.

    Order is fixed (priority, status, POC, search) so rejection reasons
    name the same predicate for the same input.
    """
    return [
        PriorityFilter(criteria.priority),
        StatusFilter(criteria.status),
        PocFilter(criteria.poc),
        SearchFilter(criteria.search),
    ]
