"""
Mentee Filter Pipeline.

Runs the active predicates over a collection as a conjunction. A mentee is
visible iff every active predicate accepts it. Output preserves input
order; the pipeline never touches the network or its input.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from mentee_tracker.domain.entities import Mentee
from mentee_tracker.domain.value_objects import FilterResult, MenteeFilterCriteria
from mentee_tracker.filters.predicates import MenteePredicate, predicates_for

logger = logging.getLogger(__name__)


class MenteeFilterPipeline:
    """Conjunction of mentee predicates with an audit of rejections."""

    def __init__(self, predicates: Sequence[MenteePredicate]) -> None:
        """
        Initialize pipeline.

        Args:
            predicates: Predicates in evaluation order
        """
        self.predicates = list(predicates)

    @classmethod
    def from_criteria(cls, criteria: MenteeFilterCriteria) -> "MenteeFilterPipeline":
        return cls(predicates_for(criteria))

    @property
    def active_predicates(self) -> List[MenteePredicate]:
        return [p for p in self.predicates if p.is_active]

    def apply(self, mentees: Sequence[Mentee]) -> Tuple[List[Mentee], FilterResult]:
        """
        Filter mentees.

        Args:
            mentees: Full collection, already ordered

        Returns:
            Tuple of (visible mentees in input order, FilterResult)
        """
        active = self.active_predicates
        if not active:
            return list(mentees), FilterResult(passed_ids=[m.id for m in mentees])

        visible: List[Mentee] = []
        rejected: List[str] = []
        reasons: Dict[str, str] = {}

        for mentee in mentees:
            failed = self._first_rejection(mentee, active)
            if failed is None:
                visible.append(mentee)
            else:
                rejected.append(mentee.id)
                reasons[mentee.id] = failed
                logger.debug(f"{mentee.id} filtered by {failed}")

        logger.debug(
            f"Filter pipeline: {len(visible)}/{len(mentees)} mentees visible "
            f"({', '.join(p.name for p in active)})"
        )
        return visible, FilterResult(
            passed_ids=[m.id for m in visible],
            rejected_ids=rejected,
            rejection_reasons=reasons,
        )

    def _first_rejection(
        self, mentee: Mentee, predicates: Sequence[MenteePredicate]
    ) -> Optional[str]:
        for predicate in predicates:
            if not predicate.matches(mentee):
                return predicate.name
        return None


def filter_mentees(
    mentees: Sequence[Mentee],
    criteria: MenteeFilterCriteria,
) -> List[Mentee]:
    """
    Visible subset of mentees for the given criteria.

    Args:
        mentees: Full collection
        criteria: Active filter predicates

    Returns:
        Mentees satisfying every active predicate, in input order
    """
    visible, _ = MenteeFilterPipeline.from_criteria(criteria).apply(mentees)
    return visible
