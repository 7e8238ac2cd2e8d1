"""
Filters Package - Mentee Predicates.

Each predicate implements the MenteePredicate protocol (name, is_active,
matches) and is combined by the filter pipeline.

Predicates:
    - PriorityFilter: One selected priority
    - StatusFilter: One selected status
    - PocFilter: One selected point of contact
    - SearchFilter: Name or email substring, case-insensitive

Design Principles:
    - Each predicate is independently testable
    - Inactive predicates pass everything
    - Pure: no network, no state mutation
"""

from mentee_tracker.filters.predicates import (
    MenteePredicate,
    PocFilter,
    PriorityFilter,
    SearchFilter,
    StatusFilter,
    predicates_for,
)

__all__ = [
    "MenteePredicate",
    "PocFilter",
    "PriorityFilter",
    "SearchFilter",
    "StatusFilter",
    "predicates_for",
]
