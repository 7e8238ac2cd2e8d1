"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with fake or mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_entities.py: Priority ranks, badge styles, JSON aliases
    - test_loader.py: Priority ordering of the roster
    - test_filter_pipeline.py: Predicates and their conjunction
    - test_summaries.py: Counts, week numbering, attendance trend
    - test_notebook.py: Note ordering, add and edit
    - test_row_builder.py / test_exporters.py: Weekly report export
    - test_http_gateway.py: REST client and error translation
    - test_error_handler.py / test_input_validator.py: Failure handling
    - test_view_scope.py: Stale result discarding
    - test_config_loader.py: Configuration loading/validation
"""
