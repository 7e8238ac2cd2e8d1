"""Home View - Cohort headline counts."""

from __future__ import annotations

from typing import Optional

from mentee_tracker.domain.value_objects import HomeCounts
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.resilience.error_handler import ErrorHandler, NotifierProtocol
from mentee_tracker.views.scope import ViewScope


class HomeView:
    """Total mentees of the batch and check-ins due."""

    VIEW_NAME = "home"

    def __init__(
        self,
        gateway: MenteeGatewayProtocol,
        notifier: NotifierProtocol,
        cohort_batch: str = "6",
    ) -> None:
        self.gateway = gateway
        self.cohort_batch = cohort_batch
        self.errors = ErrorHandler(notifier)
        self.scope = ViewScope(self.VIEW_NAME)
        self.counts: Optional[HomeCounts] = None

    def open(self) -> bool:
        self.scope.open()
        outcome = self.errors.guard(
            lambda: self.scope.run(self._fetch_counts, self._set_counts),
            operation_name="load_counts",
            failure_title="Failed to load mentee counts",
            failure_description="There was an error loading the cohort counts.",
        )
        return bool(outcome.value)

    def close(self) -> None:
        self.scope.close()

    def _fetch_counts(self) -> HomeCounts:
        return HomeCounts(
            total_mentees=self.gateway.count_batch_mentees(),
            checkins_due=self.gateway.count_checkins_due(self.cohort_batch),
        )

    def _set_counts(self, counts: HomeCounts) -> None:
        self.counts = counts
