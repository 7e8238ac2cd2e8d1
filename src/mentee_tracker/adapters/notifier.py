"""
Notifiers.

Sinks for user-visible messages: a console notifier for the command line
and an in-memory notifier for tests.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import List, TextIO

from mentee_tracker.resilience.error_handler import (
    Notification,
    NotificationVariant,
)


class ConsoleNotifier:
    """Prints notifications to a stream (stderr by default)."""

    def __init__(self, stream: TextIO = sys.stderr) -> None:
        self._stream = stream

    def notify(self, notification: Notification) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        level = "ERROR" if notification.variant is NotificationVariant.DESTRUCTIVE else "INFO"
        print(
            f"[{timestamp}] [{level:5}] {notification.title}: {notification.description}",
            file=self._stream,
        )


class InMemoryNotifier:
    """Collects notifications in a list."""

    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def failures(self) -> List[Notification]:
        return [
            n for n in self.notifications
            if n.variant is NotificationVariant.DESTRUCTIVE
        ]

    @property
    def titles(self) -> List[str]:
        return [n.title for n in self.notifications]
