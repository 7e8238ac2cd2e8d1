"""
View Scope - Cancellation Guard for View Fetches.

A view issues a ticket for every fetch it starts. A fetched result is
applied only while the view is open and the ticket is still the newest
one; a dismissed view or a superseded fetch discards its result,
including a failure.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from mentee_tracker.observability.logging_setup import (
    bind_view_context,
    clear_view_context,
)
from mentee_tracker.resilience.error_handler import GatewayError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ViewScope:
    """Lifetime and fetch ticketing of one view."""

    def __init__(self, view_name: str) -> None:
        self.view_name = view_name
        self._ticket = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def ticket(self) -> int:
        return self._ticket

    def open(self) -> None:
        """(Re)open the view."""
        self._closed = False

    def close(self) -> None:
        """Dismiss the view; in-flight results will be discarded."""
        self._closed = True
        logger.debug(f"{self.view_name} closed at ticket {self._ticket}")

    def begin(self) -> int:
        """Issue a new ticket, superseding every earlier one."""
        self._ticket += 1
        return self._ticket

    def is_current(self, ticket: int) -> bool:
        return not self._closed and ticket == self._ticket

    def run(self, fetch: Callable[[], T], apply: Callable[[T], None]) -> bool:
        """
        Fetch under a new ticket and apply the result if still wanted.

        Args:
            fetch: Issues the request; a gateway failure propagates only
                while the ticket is current
            apply: Stores the result in view state

        Returns:
            True if the result was applied, False if it was discarded
        """
        ticket = self.begin()
        bind_view_context(self.view_name, ticket)
        try:
            try:
                result = fetch()
            except GatewayError as e:
                if self.is_current(ticket):
                    raise
                logger.info(f"Discarded failure of ticket {ticket}: {e}")
                return False
            if not self.is_current(ticket):
                reason = "view closed" if self._closed else "superseded"
                logger.info(f"Discarded result of ticket {ticket} ({reason})")
                return False
            apply(result)
            return True
        finally:
            clear_view_context()
