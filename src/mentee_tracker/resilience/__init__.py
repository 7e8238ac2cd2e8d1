"""
Resilience Package - Failure Containment for User Operations.

This package keeps a failed request from crashing a view:
    - ErrorHandler: guard an operation, notify once, return an outcome
    - Gateway error taxonomy shared by every gateway implementation

Design Principles:
    - Fail once, visibly; never retry automatically
    - Leave prior state intact
    - Programming errors propagate
"""

from mentee_tracker.resilience.error_handler import (
    ErrorHandler,
    GatewayConnectionError,
    GatewayError,
    GatewayHTTPError,
    GatewayResponseError,
    Notification,
    NotificationVariant,
    NotifierProtocol,
    OperationOutcome,
)

__all__ = [
    "ErrorHandler",
    "GatewayConnectionError",
    "GatewayError",
    "GatewayHTTPError",
    "GatewayResponseError",
    "Notification",
    "NotificationVariant",
    "NotifierProtocol",
    "OperationOutcome",
]
