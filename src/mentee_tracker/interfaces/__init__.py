"""
Interfaces Layer - Abstract Protocols for Dependencies.

Following the Dependency Inversion Principle, loaders, note books and
views depend on these abstractions, not on concrete gateways.

Protocols:
    - MenteeGatewayProtocol: Remote data access
    - NotifierProtocol: User-visible messages (see resilience)
"""

from mentee_tracker.interfaces.data_gateway import MenteeGatewayProtocol
from mentee_tracker.resilience.error_handler import NotifierProtocol

__all__ = ["MenteeGatewayProtocol", "NotifierProtocol"]
