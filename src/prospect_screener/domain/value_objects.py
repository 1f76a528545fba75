"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe a view over the
record pool (criteria, sort order) or a summary of it (statistics,
stage results) and have no conceptual identity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from prospect_screener.domain.enums import (
    ALL,
    ContactType,
    GuestPostFilter,
    OutreachStatus,
    SortDirection,
    SortKey,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Opaque record identifier supplied by the acquisition service
RecordId = Union[str, int]

# Selector that either names an enum variant or the literal "all"
ContactSelector = Union[Literal["all"], ContactType]
StatusSelector = Union[Literal["all"], OutreachStatus]

# Rejection reasons: record id -> reason string
RejectionReasonsDict = Dict[RecordId, str]


# =============================================================================
# Domain Authority buckets
# =============================================================================


@dataclass(frozen=True)
class DaBucket:
    """Inclusive domain authority range used for dashboard counts."""

    label: str
    low: int
    high: int

    @property
    def chart_label(self) -> str:
        return f"DA {self.label}"

    def contains(self, domain_authority: int) -> bool:
        return self.low <= domain_authority <= self.high


# Contiguous, non-overlapping. Values above 80 fall in no bucket.
DA_BUCKETS: Tuple[DaBucket, ...] = (
    DaBucket("0-20", 0, 20),
    DaBucket("21-40", 21, 40),
    DaBucket("41-60", 41, 60),
    DaBucket("61-80", 61, 80),
)


# =============================================================================
# Criteria and sort configuration
# =============================================================================

# camelCase names submitted by the web form -> model field names
_FORM_ALIASES: Dict[str, str] = {
    "minDA": "min_da",
    "maxDA": "max_da",
    "contactType": "contact_type",
    "outreachStatus": "outreach_status",
    "acceptsGuestPosts": "accepts_guest_posts",
}


class FilterCriteria(BaseModel):
    """
    Criteria a record must satisfy to appear in the display list.

    ``min_da``/``max_da`` are taken as supplied; an inverted range is
    legal and simply matches nothing.
    """

    min_da: int = Field(default=0, description="Inclusive lower DA bound")
    max_da: int = Field(default=80, description="Inclusive upper DA bound")
    contact_type: ContactSelector = Field(default=ALL)
    outreach_status: StatusSelector = Field(default=ALL)
    accepts_guest_posts: GuestPostFilter = Field(default=GuestPostFilter.ALL)

    model_config = {"frozen": True}

    @field_validator("accepts_guest_posts", mode="before")
    @classmethod
    def _coerce_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return GuestPostFilter.YES if value else GuestPostFilter.NO
        return value

    @property
    def has_inverted_range(self) -> bool:
        return self.min_da > self.max_da

    def with_changes(self, **changes: Any) -> "FilterCriteria":
        """Return validated criteria with the given fields replaced."""
        return FilterCriteria.model_validate({**self.model_dump(), **changes})

    @classmethod
    def from_form(
        cls,
        form: Mapping[str, Any],
        base: Optional["FilterCriteria"] = None,
    ) -> "FilterCriteria":
        """
        Build criteria from raw form values.

        Accepts both the camelCase form names and the field names.
        A value that cannot be interpreted (unknown selector string,
        non-integer bound) never raises: the field keeps its value from
        ``base`` and a warning is logged.

        Args:
            form: Submitted field values (strings, ints or enum members)
            base: Criteria to start from (defaults when omitted)

        Returns:
            New FilterCriteria
        """
        current = (base or cls()).model_dump()

        for raw_key, raw_value in form.items():
            key = _FORM_ALIASES.get(raw_key, raw_key)
            if key not in current:
                logger.warning(f"Ignoring unknown filter field '{raw_key}'")
                continue

            value = raw_value.strip().lower() if isinstance(raw_value, str) else raw_value
            candidate = {**current, key: value}
            try:
                cls.model_validate(candidate)
            except ValidationError:
                logger.warning(
                    f"Ignoring invalid value {raw_value!r} for filter field '{key}'"
                )
                continue
            current = candidate

        return cls.model_validate(current)


class SortConfig(BaseModel):
    """Active sort key and direction."""

    key: SortKey = Field(default=SortKey.DOMAIN_AUTHORITY)
    direction: SortDirection = Field(default=SortDirection.DESC)

    model_config = {"frozen": True}


class ViewState(BaseModel):
    """Immutable pairing of filter criteria and sort configuration."""

    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    sort: SortConfig = Field(default_factory=SortConfig)

    model_config = {"frozen": True}

    def with_criteria(self, **changes: Any) -> "ViewState":
        return ViewState(criteria=self.criteria.with_changes(**changes), sort=self.sort)

    def with_sort(self, sort: SortConfig) -> "ViewState":
        return ViewState(criteria=self.criteria, sort=sort)


# =============================================================================
# Stage outputs
# =============================================================================


class FilterResult(BaseModel):
    """Result of applying the criteria filter."""

    passed_ids: List[RecordId] = Field(
        default_factory=list, description="Ids of passed records, input order"
    )
    rejected_ids: List[RecordId] = Field(
        default_factory=list, description="Ids of rejected records"
    )
    rejection_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Record id -> rejection reason"
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.passed_ids)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_ids)


def _zero_statuses() -> Dict[OutreachStatus, int]:
    return {status: 0 for status in OutreachStatus}


def _zero_contacts() -> Dict[ContactType, int]:
    return {contact: 0 for contact in ContactType}


def _zero_buckets() -> Dict[str, int]:
    return {bucket.label: 0 for bucket in DA_BUCKETS}


class AggregateStats(BaseModel):
    """Bucketed counts summarizing a record set."""

    total_websites: int = Field(default=0, ge=0)
    accepts_guest_posts: int = Field(default=0, ge=0)
    da_ranges: Dict[str, int] = Field(default_factory=_zero_buckets)
    outreach_status: Dict[OutreachStatus, int] = Field(default_factory=_zero_statuses)
    contact_types: Dict[ContactType, int] = Field(default_factory=_zero_contacts)

    @property
    def unbucketed(self) -> int:
        """Records counted in the total but in no DA bucket (DA above 80)."""
        return self.total_websites - sum(self.da_ranges.values())

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation consumed by the dashboard."""
        return {
            "total_websites": self.total_websites,
            "accepts_guest_posts": self.accepts_guest_posts,
            "da_ranges": {b.label: self.da_ranges.get(b.label, 0) for b in DA_BUCKETS},
            "outreach_status": {
                s.value: self.outreach_status.get(s, 0) for s in OutreachStatus
            },
            "contact_types": {
                c.value: self.contact_types.get(c, 0) for c in ContactType
            },
        }

    def headline(self) -> Dict[str, int]:
        """The four summary figures shown above the charts."""
        return {
            "total_websites": self.total_websites,
            "accepts_guest_posts": self.accepts_guest_posts,
            "email_contacts": self.contact_types.get(ContactType.EMAIL, 0),
            "not_contacted": self.outreach_status.get(OutreachStatus.NOT_CONTACTED, 0),
        }

    def chart_series(self) -> Dict[str, Dict[str, List[Any]]]:
        """Ordered label/data feeds for the three dashboard charts."""
        return {
            "da_ranges": {
                "labels": [b.chart_label for b in DA_BUCKETS],
                "data": [self.da_ranges.get(b.label, 0) for b in DA_BUCKETS],
            },
            "outreach_status": {
                "labels": [s.label for s in OutreachStatus],
                "data": [self.outreach_status.get(s, 0) for s in OutreachStatus],
            },
            "contact_types": {
                "labels": [c.label for c in ContactType],
                "data": [self.contact_types.get(c, 0) for c in ContactType],
            },
        }
