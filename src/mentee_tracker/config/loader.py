"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files, merges optional profiles and
environment overrides, and validates using Pydantic models.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from mentee_tracker.config.models import TrackerConfig

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "MENTEE_TRACKER_API_BASE_URL": ("api", "base_url"),
    "MENTEE_TRACKER_COHORT_BATCH": ("cohort", "batch"),
}


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
            environ: Environment mapping (defaults to os.environ)
        """
        self._base_path = base_path or Path(".")
        self._environ = os.environ if environ is None else environ

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> TrackerConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file (None for defaults only)
            profile: Optional profile name to merge

        Returns:
            Validated TrackerConfig object

        Raises:
            FileNotFoundError: If config or profile file doesn't exist
            ValidationError: If config is invalid
        """
        config_dict: Dict[str, Any] = {}
        if config_path is not None:
            config_dict = self._load_yaml(self._resolve_path(config_path))

        if profile:
            profile_dict = self._load_profile(profile)
            config_dict = self._merge_configs(config_dict, profile_dict)

        config_dict = self._merge_configs(config_dict, self._env_overlay())
        return TrackerConfig.model_validate(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> TrackerConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated TrackerConfig object
        """
        return TrackerConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        """Load profile configuration."""
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._load_yaml(profile_path)

    def _env_overlay(self) -> Dict[str, Any]:
        """Collect overrides from environment variables."""
        overlay: Dict[str, Any] = {}
        for var, (section, key) in ENV_OVERRIDES.items():
            value = self._environ.get(var)
            if value:
                overlay.setdefault(section, {})[key] = value
        return overlay

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> TrackerConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated TrackerConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, profile)
