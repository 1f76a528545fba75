"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Prospect Screener:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - EngineConfig: Root configuration object
    - default_criteria / default_sort: Initial view state
    - StatsConfig: Dashboard statistics scope
    - ExportConfig: CSV delimiter and header
    - AuditConfig: Audit logger verbosity
"""

from prospect_screener.config.loader import ConfigLoader, load_config, merge_configs
from prospect_screener.config.models import (
    AuditConfig,
    EngineConfig,
    ExportConfig,
    StatsConfig,
)

__all__ = [
    "AuditConfig",
    "ConfigLoader",
    "EngineConfig",
    "ExportConfig",
    "StatsConfig",
    "load_config",
    "merge_configs",
]
