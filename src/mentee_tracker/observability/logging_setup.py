"""
Logging Setup - structlog Rendering for Standard Library Loggers.

Provides:
    - configure_logging(): one call at startup
    - View context binding (view name, fetch ticket) via contextvars

Design Notes:
    - Modules keep using logging.getLogger(__name__)
    - structlog.stdlib.ProcessorFormatter renders stdlib records
    - JSON output for machine consumption, key-value output for consoles
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import structlog

PACKAGE_LOGGER = "mentee_tracker"


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(
    level: int = logging.INFO,
    use_json: bool = False,
) -> None:
    """
    Configure logging for Mentee Tracker.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        use_json: Render JSON lines instead of key-value console output

    Example:
        >>> import mentee_tracker
        >>> mentee_tracker.configure_logging(logging.DEBUG)
    """
    renderer: Any
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=_shared_processors()
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False


def bind_view_context(view: str, ticket: Optional[int] = None) -> None:
    """
    Bind the active view (and fetch ticket) to subsequent log entries.

    Args:
        view: View name, e.g. "dashboard"
        ticket: Fetch ticket issued by the view scope
    """
    if ticket is None:
        structlog.contextvars.bind_contextvars(view=view)
    else:
        structlog.contextvars.bind_contextvars(view=view, ticket=ticket)


def clear_view_context() -> None:
    """Remove view context from subsequent log entries."""
    structlog.contextvars.unbind_contextvars("view", "ticket")
