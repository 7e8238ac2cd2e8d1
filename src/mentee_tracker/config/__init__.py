"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Mentee Tracker:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles and environment overrides

Configuration Structure:
    - TrackerConfig: Root configuration object
    - ApiConfig: Base URL, timeout, endpoint variants
    - CohortConfig: Tracked cohort batch and its start date
    - ReportsConfig: Export directory and default format
    - LoggingConfig: Level and JSON output
"""

from mentee_tracker.config.loader import ConfigLoader, load_config
from mentee_tracker.config.models import (
    ApiConfig,
    CohortConfig,
    LoggingConfig,
    ReportsConfig,
    TrackerConfig,
)

__all__ = [
    "ApiConfig",
    "CohortConfig",
    "ConfigLoader",
    "LoggingConfig",
    "ReportsConfig",
    "TrackerConfig",
    "load_config",
]
