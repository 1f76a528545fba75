"""
Configuration Loader - YAML/JSON Loading with Validation.

Loads engine configuration from a file, optionally overlays a named
profile (e.g. ``high_authority``), and validates the result with
Pydantic. The config path may also come from the
``PROSPECT_SCREENER_CONFIG`` environment variable.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from prospect_screener.config.models import EngineConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PROSPECT_SCREENER_CONFIG"

_YAML_SUFFIXES = {".yaml", ".yml"}


class ConfigLoader:
    """Loads and validates engine configuration."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        profiles_dir: Union[str, Path] = "profiles",
    ) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory relative paths are resolved against
            profiles_dir: Profile directory, relative to base_path
        """
        self._base_path = Path(base_path) if base_path else Path(".")
        self._profiles_dir = self._resolve_path(profiles_dir)

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> EngineConfig:
        """
        Load configuration from file.

        Args:
            config_path: YAML or JSON file; falls back to the
                         PROSPECT_SCREENER_CONFIG environment variable,
                         then to built-in defaults
            profile: Optional profile name overlaid on the file

        Returns:
            Validated EngineConfig object

        Raises:
            FileNotFoundError: If the config or profile file doesn't exist
            ValidationError: If config is invalid
        """
        config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        config_dict: Dict[str, Any] = {}
        if config_path:
            config_dict = self._read(self._resolve_path(config_path))

        if profile:
            config_dict = merge_configs(config_dict, self._load_profile(profile))

        return self.load_from_dict(config_dict)

    def load_from_dict(self, config_dict: Mapping[str, Any]) -> EngineConfig:
        """Validate an in-memory configuration mapping."""
        return EngineConfig.model_validate(dict(config_dict))

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else {}
        else:
            if path.suffix.lower() not in _YAML_SUFFIXES:
                logger.warning(f"Unrecognised config suffix '{path.suffix}', parsing as YAML")
            data = yaml.safe_load(text)

        logger.debug(f"Loaded configuration from {path}")
        return data or {}

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        for suffix in (".yaml", ".yml", ".json"):
            candidate = self._profiles_dir / f"{profile}{suffix}"
            if candidate.exists():
                return self._read(candidate)
        raise FileNotFoundError(f"Profile not found: {profile}")


def merge_configs(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
) -> Dict[str, Any]:
    """Deep merge ``overlay`` into a copy of ``base``."""
    result = dict(base)
    for key, value in overlay.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge_configs(current, value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> EngineConfig:
    """Convenience wrapper around :class:`ConfigLoader`."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
