"""
Stats Aggregator - Dashboard Counts.

Single pass over a record set producing AggregateStats. Callers decide
whether to aggregate the whole pool or a filtered view.

Records with domain authority above the last bucket (80) are counted
in ``total_websites`` but in no ``da_ranges`` bucket.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from prospect_screener.domain.entities import WebsiteRecord
from prospect_screener.domain.enums import ContactType, OutreachStatus
from prospect_screener.domain.value_objects import DA_BUCKETS, AggregateStats


def bucket_for(domain_authority: int) -> Optional[str]:
    """Label of the DA bucket containing the value, or None."""
    for bucket in DA_BUCKETS:
        if bucket.contains(domain_authority):
            return bucket.label
    return None


def aggregate(records: Iterable[WebsiteRecord]) -> AggregateStats:
    """
    Count records by DA bucket, outreach status and contact type.

    Args:
        records: Records to summarize (any iterable, consumed once)

    Returns:
        AggregateStats with every bucket, status and contact type present
    """
    total = 0
    guest_posts = 0
    da_ranges: Dict[str, int] = {bucket.label: 0 for bucket in DA_BUCKETS}
    statuses: Dict[OutreachStatus, int] = {status: 0 for status in OutreachStatus}
    contacts: Dict[ContactType, int] = {contact: 0 for contact in ContactType}

    for record in records:
        total += 1
        if record.accepts_guest_posts:
            guest_posts += 1

        label = bucket_for(record.domain_authority)
        if label is not None:
            da_ranges[label] += 1

        statuses[record.outreach_status] += 1
        contacts[record.contact_type] += 1

    return AggregateStats(
        total_websites=total,
        accepts_guest_posts=guest_posts,
        da_ranges=da_ranges,
        outreach_status=statuses,
        contact_types=contacts,
    )
