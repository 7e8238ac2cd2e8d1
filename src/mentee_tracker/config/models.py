"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ApiConfig(BaseModel):
    """Remote data gateway settings."""

    base_url: str = Field(default="http://localhost:3000")
    timeout_seconds: float = Field(default=30.0, gt=0, le=300)
    reports_prefix: str = Field(default="/api")
    update_method: Literal["PUT", "PATCH"] = "PUT"
    batch_count_path: str = Field(default="/mentees/count/batch6")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @field_validator("reports_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = "/" + value
        return value


class CohortConfig(BaseModel):
    """Which cohort batch the dashboard tracks."""

    batch: str = Field(default="6", min_length=1)
    start_date: date = Field(default=date(2025, 11, 6))


class ReportsConfig(BaseModel):
    """Weekly summary export settings."""

    output_dir: str = Field(default=".")
    default_format: Literal["csv", "pdf", "xlsx"] = "pdf"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    json_output: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}


class TrackerConfig(BaseModel):
    """Root configuration object."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    cohort: CohortConfig = Field(default_factory=CohortConfig)
    reports: ReportsConfig = Field(default_factory=ReportsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"populate_by_name": True}
