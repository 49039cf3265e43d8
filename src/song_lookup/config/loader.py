"""
Configuration Loader - Layered YAML Configuration.

Builds an AppConfig from up to three layers, each deep-merged over the
previous one before a single Pydantic validation:

    1. A YAML file, or the built-in defaults when no file is given
    2. An optional profile from <base_path>/config/profiles/<name>.yaml
    3. Explicit overrides (e.g. command-line flags)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from song_lookup.config.models import AppConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates layered configuration."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths and profiles
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> AppConfig:
        """
        Load configuration.

        Args:
            config_path: YAML config file (defaults only if None)
            profile: Optional profile name to merge over the file
            overrides: Nested values merged last, e.g.
                {"latency": {"delay_seconds": 0}}

        Returns:
            Validated AppConfig object

        Raises:
            FileNotFoundError: If config file or profile doesn't exist
            ValidationError: If the merged config is invalid
        """
        config_dict: Dict[str, Any] = {}
        if config_path is not None:
            config_dict = self._load_yaml(self._resolve_path(config_path))

        if profile:
            config_dict = self._merge_configs(config_dict, self._load_profile(profile))
            logger.debug(f"Applied config profile '{profile}'")

        if overrides:
            config_dict = self._merge_configs(config_dict, dict(overrides))

        return AppConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file; an empty file is an empty layer."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        """Load profile configuration."""
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._load_yaml(profile_path)

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
