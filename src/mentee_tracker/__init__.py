"""
Mentee Tracker - Attendance and Follow-up Toolkit for Mentorship Cohorts.

A client-side toolkit for coordinators who follow up with the mentees of a
cohort batch. The backend owns every record; this package fetches them over
REST, orders and filters the roster, derives counts and attendance trends,
keeps check-in notes in sync and exports weekly summary reports.

Architecture:
    - Ports & Adapters: views depend on a gateway protocol, not on HTTP
    - Dependency Injection for testability (gateway, notifier, config)
    - Pure transforms for ordering, filtering, aggregation and report rows
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Entities (Mentee, CheckInNote, WeeklyAttendanceReport)
    - adapters: REST and in-memory gateways, notifiers
    - pipeline: Roster loader and filter pipeline
    - filters: Individual mentee predicates
    - aggregation: Priority/status/POC counts and attendance trend
    - notes: Check-in note ordering and editing
    - reports: Report rows and CSV/PDF/XLSX exporters
    - views: One controller per dashboard screen
    - config: Configuration models and loaders

Example:
    >>> from mentee_tracker.adapters import RestMenteeGateway
    >>> from mentee_tracker.pipeline import MenteeCollectionLoader
    >>> gateway = RestMenteeGateway(base_url="http://localhost:3000")
    >>> mentees = MenteeCollectionLoader(gateway).load("6")
"""

from mentee_tracker.observability.logging_setup import configure_logging

__version__ = "0.4.0"

__all__ = ["configure_logging", "__version__"]
