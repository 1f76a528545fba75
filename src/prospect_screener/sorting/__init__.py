"""
Sorting Package - Display List Ordering.

Components:
    - sort_records: Stable sort by one key and direction
    - toggle_sort: Column selection state transition
    - sort_value: Comparable value of a record field
    - RecordSorter: Pipeline stage wrapper
"""

from prospect_screener.sorting.engine import (
    RecordSorter,
    sort_records,
    sort_value,
    toggle_sort,
)

__all__ = [
    "RecordSorter",
    "sort_records",
    "sort_value",
    "toggle_sort",
]
