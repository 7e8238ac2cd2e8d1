"""Quick Notes View - Cohort-wide check-in notes with week/POC selection."""

from __future__ import annotations

from typing import List, Optional

from mentee_tracker.domain.entities import CheckInNote
from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.notes.notebook import CohortNotesBoard, sort_notes
from mentee_tracker.resilience.error_handler import ErrorHandler, NotifierProtocol
from mentee_tracker.views.scope import ViewScope


class QuickNotesView:
    """All notes of a cohort, most recent first."""

    VIEW_NAME = "quick_notes"

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
        self.board = CohortNotesBoard()
        self.selected_week: Optional[int] = None
        self.selected_poc: Optional[str] = None

    def open(self) -> bool:
        self.scope.open()
        outcome = self.errors.guard(
            lambda: self.scope.run(
                lambda: sort_notes(self.gateway.list_cohort_notes(self.cohort_batch)),
                self._set_notes,
            ),
            operation_name="load_cohort_notes",
            failure_title="Failed to load notes",
            failure_description="There was an error loading check-in notes.",
        )
        return bool(outcome.value)

    def close(self) -> None:
        self.scope.close()

    def _set_notes(self, notes: List[CheckInNote]) -> None:
        self.board = CohortNotesBoard(notes)

    @property
    def visible_notes(self) -> List[CheckInNote]:
        return self.board.filter(self.selected_week, self.selected_poc)

    @property
    def week_options(self) -> List[int]:
        return self.board.week_numbers()

    @property
    def poc_options(self) -> List[str]:
        return self.board.pocs()
