"""
Unit Tests for ErrorHandler.

Test Aspects Covered:
    ✅ Error Handling: Gateway failures contained at the call site
    ✅ Notifications: Exactly one destructive notification per failure
    ✅ Propagation: Programming errors are not swallowed
"""

from __future__ import annotations

import pytest

from mentee_tracker.adapters.notifier import InMemoryNotifier
from mentee_tracker.resilience.error_handler import (
    ErrorHandler,
    GatewayConnectionError,
    GatewayHTTPError,
    NotificationVariant,
)


@pytest.fixture
def handler(notifier) -> ErrorHandler:
    return ErrorHandler(notifier)


class TestGuard:
    """Test cases for ErrorHandler.guard()."""

    def test_success_returns_value(self, handler, notifier: InMemoryNotifier) -> None:
        """
        SCENARIO: Operation succeeds
        EXPECTED: Outcome carries the value, nothing notified
        """
        outcome = handler.guard(lambda: 42, "answer", "Failed", "Nope")

        assert outcome.ok
        assert outcome.value == 42
        assert notifier.notifications == []

    def test_failure_notifies_once(self, handler, notifier: InMemoryNotifier) -> None:
        """
        SCENARIO: Operation raises a gateway error
        EXPECTED: One destructive notification, outcome carries the error
        """
        # Arrange
        error = GatewayHTTPError("HTTP 503", status_code=503, operation="load")

        def failing():
            raise error

        # Act
        outcome = handler.guard(failing, "load", "Failed to load", "Try again")

        # Assert
        assert not outcome.ok
        assert outcome.error is error
        assert outcome.value is None
        assert len(notifier.notifications) == 1
        assert notifier.notifications[0].title == "Failed to load"
        assert notifier.notifications[0].variant is NotificationVariant.DESTRUCTIVE

    def test_operation_runs_once(self, handler) -> None:
        """
        SCENARIO: Operation fails
        EXPECTED: No retry
        """
        calls = []

        def failing():
            calls.append(1)
            raise GatewayConnectionError("down")

        handler.guard(failing, "load", "Failed", "Down")

        assert len(calls) == 1

    def test_programming_errors_propagate(self, handler, notifier) -> None:
        """
        SCENARIO: Operation raises a non-gateway exception
        EXPECTED: Exception propagates, nothing notified
        """
        def broken():
            raise KeyError("bug")

        with pytest.raises(KeyError):
            handler.guard(broken, "load", "Failed", "Bug")
        assert notifier.notifications == []


def test_report_sends_plain_notification(handler, notifier) -> None:
    """
    SCENARIO: Report a success message
    EXPECTED: Default-variant notification
    """
    handler.report("Note added", "Your note has been successfully added.")

    assert notifier.titles == ["Note added"]
    assert notifier.failures == []
