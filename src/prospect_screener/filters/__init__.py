"""
Filters Package - Criteria Filtering.

Filters:
    - OpportunityFilter: Stage object with rejection reasons for the audit trail
    - filter_records: Plain function returning the matching records

Design Principles:
    - Stateless, order preserving
    - Criteria injected via constructor
    - Clear rejection reasons for audit trail
"""

from prospect_screener.filters.criteria import OpportunityFilter, filter_records

__all__ = [
    "OpportunityFilter",
    "filter_records",
]
