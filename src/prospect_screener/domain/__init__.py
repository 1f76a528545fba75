"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for the Prospect Screener.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - WebsiteRecord: A candidate website for outreach
    - SearchRequest: Niche search sent to the acquisition service
    - ViewResult: Display list plus statistics for a view state

Value Objects:
    - FilterCriteria / SortConfig / ViewState: What the user is looking at
    - FilterResult: Passed and rejected records with reasons
    - AggregateStats: Bucketed dashboard counts

Design Principles:
    - Immutable where possible (frozen models)
    - Closed enums with an exact wire mapping
    - No infrastructure dependencies
"""

from prospect_screener.domain.enums import (
    ALL,
    ContactType,
    GuestPostFilter,
    OutreachStatus,
    SortDirection,
    SortKey,
)
from prospect_screener.domain.value_objects import (
    DA_BUCKETS,
    AggregateStats,
    DaBucket,
    FilterCriteria,
    FilterResult,
    SortConfig,
    ViewState,
)
from prospect_screener.domain.entities import (
    SearchRequest,
    StageResult,
    ViewResult,
    WebsiteRecord,
)

__all__ = [
    "ALL",
    "ContactType",
    "GuestPostFilter",
    "OutreachStatus",
    "SortDirection",
    "SortKey",
    "DA_BUCKETS",
    "AggregateStats",
    "DaBucket",
    "FilterCriteria",
    "FilterResult",
    "SortConfig",
    "ViewState",
    "SearchRequest",
    "StageResult",
    "ViewResult",
    "WebsiteRecord",
]
