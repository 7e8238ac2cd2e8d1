"""
Integration Tests - View Controllers End to End.

These tests verify that views, core components and notifications work
together. They use the InMemoryMenteeGateway to avoid network access.

Test Files:
    - test_views.py: Every view against the sample cohort
    - test_cli.py: Command line front end in --demo mode
"""
