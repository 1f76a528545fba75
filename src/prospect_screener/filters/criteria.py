"""
Criteria Filter Implementation.

Filters website records against FilterCriteria:
    - Domain authority within [min_da, max_da] (inclusive)
    - Contact type matches (unless "all")
    - Outreach status matches (unless "all")
    - Accepts-guest-posts flag matches the tri-state selector

Filtering is order preserving and never raises. An inverted DA range
matches nothing, and organic traffic plays no part in filtering.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from prospect_screener.domain.entities import WebsiteRecord
from prospect_screener.domain.enums import ALL, GuestPostFilter
from prospect_screener.domain.value_objects import FilterCriteria, FilterResult, RecordId


class OpportunityFilter:
    """Filter website records by user criteria."""

    def __init__(self, criteria: FilterCriteria) -> None:
        """
        Initialize with criteria.

        Args:
            criteria: Criteria every passing record must satisfy
        """
        self.criteria = criteria

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "criteria_filter"

    def apply(self, records: Sequence[WebsiteRecord]) -> FilterResult:
        """
        Apply criteria filtering.

        Checks:
            1. DA inside the inclusive range
            2. Contact type
            3. Outreach status
            4. Guest post acceptance

        Args:
            records: Records to filter

        Returns:
            FilterResult with passed ids in input order
        """
        passed: List[RecordId] = []
        rejected: List[RecordId] = []
        reasons: Dict[RecordId, str] = {}

        for record in records:
            is_match, reason = self.check(record)
            if is_match:
                passed.append(record.id)
            else:
                rejected.append(record.id)
                reasons[record.id] = reason

        return FilterResult(
            passed_ids=passed,
            rejected_ids=rejected,
            rejection_reasons=reasons,
        )

    def select(self, records: Sequence[WebsiteRecord]) -> List[WebsiteRecord]:
        """Return the matching records themselves, in input order."""
        return [record for record in records if self.check(record)[0]]

    def check(self, record: WebsiteRecord) -> Tuple[bool, str]:
        """Check whether a single record satisfies every criterion."""
        criteria = self.criteria

        da = record.domain_authority
        if da < criteria.min_da or da > criteria.max_da:
            return False, f"domain_authority={da} outside [{criteria.min_da}, {criteria.max_da}]"

        if criteria.contact_type != ALL and record.contact_type != criteria.contact_type:
            return False, f"contact_type={record.contact_type.value} != {criteria.contact_type.value}"

        if criteria.outreach_status != ALL and record.outreach_status != criteria.outreach_status:
            return (
                False,
                f"outreach_status={record.outreach_status.value} != {criteria.outreach_status.value}",
            )

        wanted = criteria.accepts_guest_posts
        if wanted is GuestPostFilter.YES and not record.accepts_guest_posts:
            return False, "does not accept guest posts"
        if wanted is GuestPostFilter.NO and record.accepts_guest_posts:
            return False, "accepts guest posts"

        return True, ""


def filter_records(
    records: Sequence[WebsiteRecord],
    criteria: FilterCriteria,
) -> List[WebsiteRecord]:
    """
    Reduce records to those matching criteria.

    Args:
        records: Pool (or any subset) of records
        criteria: Filter criteria

    Returns:
        New list preserving the relative input order
    """
    return OpportunityFilter(criteria).select(records)
