"""
Core Domain Entities.

This module defines the fundamental entities of the prospecting domain.
These entities represent the core concepts that the engines operate on.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

from prospect_screener.domain.enums import ContactType, OutreachStatus
from prospect_screener.domain.value_objects import AggregateStats, ViewState


class WebsiteRecord(BaseModel):
    """A candidate website for guest-post outreach."""

    id: Union[str, int] = Field(..., description="Opaque unique identifier")
    domain: str = Field(..., description="Registrable domain, e.g. example.com")
    url: str = Field(..., description="Landing URL")
    domain_authority: int = Field(..., ge=0, le=100, description="DA score 0-100")
    organic_traffic: int = Field(
        default=0, ge=0, description="Monthly organic visits, 0 when unknown"
    )
    contact_type: ContactType = Field(default=ContactType.NONE)
    contact_email: Optional[str] = Field(default=None)
    contact_form_url: Optional[str] = Field(default=None)
    accepts_guest_posts: bool = Field(default=False)
    outreach_status: OutreachStatus = Field(default=OutreachStatus.NOT_CONTACTED)

    model_config = {"frozen": True}

    @field_validator("organic_traffic", mode="before")
    @classmethod
    def _unknown_traffic_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WebsiteRecord):
            return NotImplemented
        return self.id == other.id

    @property
    def contact_link(self) -> Optional[str]:
        """Best outreach link: mailto for an email, else the contact form."""
        if self.contact_email:
            return f"mailto:{self.contact_email}"
        return self.contact_form_url


def _split_csv(value: Any) -> Any:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class SearchRequest(BaseModel):
    """Niche search submitted to the acquisition service."""

    niche: str = Field(..., min_length=1, description="Niche or industry")
    min_da: int = Field(default=0)
    max_da: int = Field(default=80)
    keywords: List[str] = Field(default_factory=list)
    competitor_domains: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("niche", mode="before")
    @classmethod
    def _strip_niche(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("keywords", "competitor_domains", mode="before")
    @classmethod
    def _split_comma_separated(cls, value: Any) -> Any:
        return _split_csv(value)

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "SearchRequest":
        """Build a request from the camelCase niche form."""
        return cls(
            niche=form.get("niche", ""),
            min_da=form.get("minDA", form.get("min_da", 0)),
            max_da=form.get("maxDA", form.get("max_da", 80)),
            keywords=form.get("keywords", ""),
            competitor_domains=form.get(
                "competitorDomains", form.get("competitor_domains", "")
            ),
        )


class StageResult(BaseModel):
    """Result of a single pipeline stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    filtered_records: List[Union[str, int]] = Field(
        default_factory=list, description="Ids of records removed by the stage"
    )
    filter_reasons: Dict[Union[str, int], str] = Field(
        default_factory=dict, description="Record id -> rejection reason"
    )

    @property
    def reduction_ratio(self) -> float:
        """Calculate reduction ratio (0.0 = no reduction, 1.0 = all filtered)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)


class ViewResult(BaseModel):
    """Display list and dashboard figures for one view state."""

    state: ViewState
    pool_size: int
    display_list: List[WebsiteRecord]
    stats: AggregateStats
    audit_trail: List[StageResult] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def total_reduction_ratio(self) -> float:
        """Calculate total reduction ratio."""
        if self.pool_size == 0:
            return 0.0
        return 1.0 - (len(self.display_list) / self.pool_size)
