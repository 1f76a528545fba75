"""
Sort Engine - Stable Single-Key Ordering.

Orders records by one field in natural order (numbers numerically,
strings lexicographically, enums by wire string, booleans False<True).
Python's sort is stable in both directions, so records with equal keys
keep their input order even when descending.

Missing values sort as 0 for numeric fields and "" for text fields.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Sequence, Union

from prospect_screener.domain.entities import WebsiteRecord
from prospect_screener.domain.enums import SortDirection, SortKey
from prospect_screener.domain.value_objects import SortConfig

logger = logging.getLogger(__name__)

_NUMERIC_KEYS = frozenset({SortKey.DOMAIN_AUTHORITY, SortKey.ORGANIC_TRAFFIC})


def sort_value(record: WebsiteRecord, key: SortKey) -> Any:
    """Comparable value of ``key`` for ``record``."""
    value = getattr(record, key.value, None)
    if value is None:
        return 0 if key in _NUMERIC_KEYS else ""
    if isinstance(value, Enum):
        return value.value
    return value


def sort_records(
    records: Sequence[WebsiteRecord],
    config: SortConfig,
) -> List[WebsiteRecord]:
    """
    Return records ordered by ``config``.

    Args:
        records: Records to order (left untouched)
        config: Key and direction

    Returns:
        New list; ties keep their relative input order
    """
    return sorted(
        records,
        key=lambda record: sort_value(record, config.key),
        reverse=config.direction is SortDirection.DESC,
    )


def toggle_sort(config: SortConfig, key: Union[SortKey, str]) -> SortConfig:
    """
    Sort state transition for a user selecting a column.

    Selecting the active key flips its direction. Selecting any other
    key makes it active in ascending order.

    Raises:
        ValueError: If ``key`` is not a sortable field
    """
    selected = SortKey.parse(key)
    if selected is config.key:
        return SortConfig(key=selected, direction=config.direction.flipped())
    return SortConfig(key=selected, direction=SortDirection.ASC)


class RecordSorter:
    """Pipeline stage wrapping :func:`sort_records`."""

    def __init__(self, config: SortConfig) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return "sort"

    def apply(self, records: Sequence[WebsiteRecord]) -> List[WebsiteRecord]:
        logger.debug(
            f"Sorting {len(records)} records by {self.config.key.value} "
            f"{self.config.direction.value}"
        )
        return sort_records(records, self.config)
