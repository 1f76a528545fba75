"""
Aggregation Package - Dashboard Statistics.

Components:
    - aggregate: Bucketed counts over a record set
    - bucket_for: DA bucket lookup
    - DA_BUCKETS: The fixed bucket table
"""

from prospect_screener.aggregation.stats import aggregate, bucket_for
from prospect_screener.domain.value_objects import DA_BUCKETS

__all__ = [
    "DA_BUCKETS",
    "aggregate",
    "bucket_for",
]
