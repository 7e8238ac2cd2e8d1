"""
Mentee Collection Loader.

Fetches the roster of a cohort batch and orders it by priority rank:
P0, P1, P2, P3, P4, then mentees without a priority. Mentees of equal
rank keep the order the gateway returned them in.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, List

from mentee_tracker.domain.entities import Mentee, priority_rank
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol

logger = logging.getLogger(__name__)


def sort_by_priority(mentees: Iterable[Mentee]) -> List[Mentee]:
    """
    Order mentees by ascending priority rank.

    sorted() is stable, so equal ranks keep their input order.

    Args:
        mentees: Mentees in gateway order

    Returns:
        New list ordered P0..P4, then None
    """
    return sorted(mentees, key=lambda m: priority_rank(m.priority))


class MenteeCollectionLoader:
    """Loads and orders the mentee roster of a cohort batch."""

    def __init__(self, gateway: MenteeGatewayProtocol) -> None:
        """
        Initialize loader.

        Args:
            gateway: Remote data gateway
        """
        self.gateway = gateway

    def load(self, cohort_batch: str) -> List[Mentee]:
        """
        Fetch and order the roster.

        Args:
            cohort_batch: Cohort batch identifier, e.g. "6"

        Returns:
            Mentees ordered by priority rank

        Raises:
            GatewayError: If the roster cannot be fetched (no retry)
        """
        start = time.perf_counter()
        mentees = self.gateway.list_mentees(cohort_batch)
        ordered = sort_by_priority(mentees)
        logger.info(
            f"Loaded {len(ordered)} mentees for batch {cohort_batch} "
            f"({time.perf_counter() - start:.3f}s)"
        )
        return ordered
