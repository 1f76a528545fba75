"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from prospect_screener.domain.value_objects import FilterCriteria, SortConfig


class StatsConfig(BaseModel):
    """Which record set feeds the dashboard statistics."""

    scope: Literal["filtered", "pool"] = "filtered"


class ExportConfig(BaseModel):
    """CSV export settings."""

    delimiter: str = Field(default=",", min_length=1, max_length=1)
    include_header: bool = True


class AuditConfig(BaseModel):
    """Audit logging settings."""

    enabled: bool = True
    verbose: bool = False


class EngineConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    default_criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    default_sort: SortConfig = Field(default_factory=SortConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    audit: AuditConfig = Field(default_factory=AuditConfig)
