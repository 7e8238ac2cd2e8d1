"""
Observability Package - Logging Setup and View Context.

Every module logs through ``logging.getLogger(__name__)``. This package
routes those records through structlog so they render with ISO timestamps
and the bound view context (view name, fetch ticket), either as key-value
console lines or as JSON.
"""

from mentee_tracker.observability.logging_setup import (
    bind_view_context,
    clear_view_context,
    configure_logging,
)

__all__ = ["bind_view_context", "clear_view_context", "configure_logging"]
