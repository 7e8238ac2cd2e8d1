"""
Mentee Dashboard - Roster with Filters and Priority Counts.

Loads the cohort roster once per open (priority ordered), keeps the
filter selection, and derives the visible list and summary counts from
the loaded collection on every read.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from mentee_tracker.aggregation.summaries import (
    count_by_priority,
    count_by_status,
    poc_options,
)
from mentee_tracker.domain.entities import Mentee, MenteeField, MenteeStatus, Priority
from mentee_tracker.domain.value_objects import MenteeFilterCriteria, PriorityCounts
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.pipeline.filter_pipeline import filter_mentees
from mentee_tracker.pipeline.loader import MenteeCollectionLoader
from mentee_tracker.resilience.error_handler import ErrorHandler, NotifierProtocol
from mentee_tracker.views.mentee_detail import patch_mentee_field
from mentee_tracker.views.scope import ViewScope

logger = logging.getLogger(__name__)


class MenteeDashboard:
    """Roster view: loading, filtering and per-priority counts."""

    VIEW_NAME = "mentee_dashboard"

    def __init__(
        self,
        gateway: MenteeGatewayProtocol,
        notifier: NotifierProtocol,
        cohort_batch: str = "6",
    ) -> None:
        """
        Initialize dashboard.

        Args:
            gateway: Remote data gateway
            notifier: Sink for user-visible messages
            cohort_batch: Cohort whose roster is shown
        """
        self.gateway = gateway
        self.cohort_batch = cohort_batch
        self.loader = MenteeCollectionLoader(gateway)
        self.errors = ErrorHandler(notifier)
        self.scope = ViewScope(self.VIEW_NAME)
        self.mentees: List[Mentee] = []
        self.criteria = MenteeFilterCriteria()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def open(self) -> bool:
        """Open the view and load the roster. Returns True if loaded."""
        self.scope.open()
        return self.refresh()

    def refresh(self) -> bool:
        outcome = self.errors.guard(
            lambda: self.scope.run(
                lambda: self.loader.load(self.cohort_batch),
                self._set_mentees,
            ),
            operation_name="load_mentees",
            failure_title="Failed to load mentee data",
            failure_description="There was an error loading the mentee list.",
        )
        return bool(outcome.value)

    def close(self) -> None:
        self.scope.close()

    def _set_mentees(self, mentees: List[Mentee]) -> None:
        self.mentees = mentees

    # =========================================================================
    # Filter selection
    # =========================================================================

    def set_search(self, text: str) -> None:
        self.criteria = self.criteria.model_copy(update={"search": text})

    def set_priority(self, priority: Optional[Priority]) -> None:
        self.criteria = self.criteria.model_copy(update={"priority": priority})

    def toggle_priority_filter(self, priority: Priority) -> None:
        """Select priority, or clear it if it is already selected."""
        selected = None if self.criteria.priority is priority else priority
        self.set_priority(selected)

    def set_status(self, status: Optional[MenteeStatus]) -> None:
        self.criteria = self.criteria.model_copy(update={"status": status})

    def set_poc(self, poc: Optional[str]) -> None:
        self.criteria = self.criteria.model_copy(update={"poc": poc})

    def clear_filters(self) -> None:
        self.criteria = MenteeFilterCriteria()

    # =========================================================================
    # Derived state
    # =========================================================================

    @property
    def visible_mentees(self) -> List[Mentee]:
        return filter_mentees(self.mentees, self.criteria)

    @property
    def priority_counts(self) -> PriorityCounts:
        return count_by_priority(self.mentees)

    @property
    def status_counts(self) -> Dict[MenteeStatus, int]:
        return count_by_status(self.mentees)

    @property
    def poc_options(self) -> List[str]:
        return poc_options(self.mentees)

    # =========================================================================
    # Updates
    # =========================================================================

    def apply_mentee_update(self, updated: Mentee) -> None:
        """Replace the local copy of a mentee by id (order kept)."""
        self.mentees = [updated if m.id == updated.id else m for m in self.mentees]
        logger.debug(f"Reconciled mentee {updated.id}")

    def update_mentee_field(
        self,
        mentee_id: str,
        field: MenteeField,
        value: Optional[str],
    ) -> Optional[Mentee]:
        """
        Patch one field and reconcile the roster with the server's echo.

        Returns:
            The updated mentee, or None if the update failed
        """
        updated = patch_mentee_field(self.gateway, self.errors, mentee_id, field, value)
        if updated is not None:
            self.apply_mentee_update(updated)
        return updated
