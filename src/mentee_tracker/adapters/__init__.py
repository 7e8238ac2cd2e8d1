"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package. Following the
Hexagonal Architecture (Ports & Adapters) pattern.

Gateways:
    - RestMenteeGateway: JSON over HTTP(S) via requests
    - InMemoryMenteeGateway: Fake data for development/testing

Notifiers:
    - ConsoleNotifier: Messages to stderr
    - InMemoryNotifier: Collected messages for tests

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from mentee_tracker.adapters.http_gateway import RestMenteeGateway
from mentee_tracker.adapters.memory_gateway import InMemoryMenteeGateway
from mentee_tracker.adapters.notifier import ConsoleNotifier, InMemoryNotifier

__all__ = [
    "RestMenteeGateway",
    "InMemoryMenteeGateway",
    "ConsoleNotifier",
    "InMemoryNotifier",
]
