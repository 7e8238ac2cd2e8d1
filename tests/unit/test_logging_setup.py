"""
Unit Tests for Logging Setup.

Test Aspects Covered:
    ✅ Configuration: Package logger handler and level
    ✅ Context: View name and ticket bound to log entries
"""

from __future__ import annotations

import logging

import pytest
import structlog

from mentee_tracker.observability.logging_setup import (
    bind_view_context,
    clear_view_context,
    configure_logging,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("mentee_tracker")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_configure_logging_installs_one_handler(package_logger) -> None:
    """
    SCENARIO: Configure logging twice
    EXPECTED: A single handler at the requested level
    """
    configure_logging(logging.DEBUG)
    configure_logging(logging.INFO, use_json=True)

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO
    assert package_logger.propagate is False


def test_view_context_bind_and_clear() -> None:
    """
    SCENARIO: Bind a view and ticket, then clear them
    EXPECTED: Context holds both, then neither
    """
    bind_view_context("dashboard", ticket=3)
    assert structlog.contextvars.get_contextvars() == {"view": "dashboard", "ticket": 3}

    clear_view_context()
    assert structlog.contextvars.get_contextvars() == {}
