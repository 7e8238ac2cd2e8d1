"""
Test Suite for Mentee Tracker.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: View controllers and CLI against the in-memory gateway

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/mentee_tracker         # With coverage
"""
