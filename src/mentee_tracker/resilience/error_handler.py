"""
Error Handler - Call-Site Failure Containment for View Operations.

Provides:
    - Transport error taxonomy raised by gateways
    - guard(): run one operation, surface a failure exactly once
    - OperationOutcome: value or error, never both

Design Notes:
    - No retries: a failed call terminates its operation
    - One user-visible notification per failed operation
    - Prior view state is never touched on failure
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GatewayError(Exception):
    """Raised when a request to the remote data gateway cannot complete."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation


class GatewayConnectionError(GatewayError):
    """Network-level failure: DNS, refused connection, timeout."""


class GatewayHTTPError(GatewayError):
    """The gateway answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        operation: Optional[str] = None,
    ) -> None:
        super().__init__(message, operation)
        self.status_code = status_code


class GatewayResponseError(GatewayError):
    """The gateway answered with a payload that does not match the model."""


class NotificationVariant(Enum):
    """Visual weight of a notification."""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    """A single user-visible message."""
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT


class NotifierProtocol(Protocol):
    """Protocol for user-facing notification sinks."""

    def notify(self, notification: Notification) -> None:
        ...


@dataclass
class OperationOutcome(Generic[T]):
    """Result of a guarded operation."""
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ErrorHandler:
    """
    Contains gateway failures at the call site.

    A guarded operation either returns its value or, on GatewayError,
    logs the failure, sends one destructive notification and returns an
    outcome carrying the error. Any other exception is a programming error
    and propagates.
    """

    def __init__(self, notifier: NotifierProtocol) -> None:
        """
        Initialize error handler.

        Args:
            notifier: Sink for user-visible failure messages
        """
        self.notifier = notifier

    def guard(
        self,
        func: Callable[[], T],
        operation_name: str,
        failure_title: str,
        failure_description: str,
    ) -> OperationOutcome[T]:
        """
        Execute function once, surfacing a gateway failure as a notification.

        Args:
            func: Operation to execute
            operation_name: Name for logging
            failure_title: Notification title on failure
            failure_description: Notification body on failure

        Returns:
            OperationOutcome with the value, or with the error
        """
        try:
            value = func()
        except GatewayError as e:
            logger.error(f"{operation_name} failed: {e}")
            self.notifier.notify(
                Notification(
                    title=failure_title,
                    description=failure_description,
                    variant=NotificationVariant.DESTRUCTIVE,
                )
            )
            return OperationOutcome(error=e)

        return OperationOutcome(value=value)

    def report(
        self,
        title: str,
        description: str,
        variant: NotificationVariant = NotificationVariant.DEFAULT,
    ) -> None:
        """Send a notification that does not stem from a failure."""
        self.notifier.notify(Notification(title, description, variant))

