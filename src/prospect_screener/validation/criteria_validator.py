"""
Criteria Validator - Sanity Checks on Filter Criteria.

Unlike request validation elsewhere, questionable criteria are legal:
filtering still runs and deterministically yields whatever matches
(an inverted DA range yields nothing). The validator only reports the
issues so the orchestrator can log them as anomalies.

Checks:
    - min_da <= max_da
    - Both bounds inside the 0-100 DA scale
"""

from __future__ import annotations

import logging
from typing import List, Optional

from prospect_screener.domain.value_objects import FilterCriteria

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class RecordValidationError(ValidationError):
    """Raised at the ingestion boundary for an unusable raw record."""


class CriteriaValidator:
    """Reports suspicious filter criteria without rejecting them."""

    MIN_DA = 0
    MAX_DA = 100

    def check(self, criteria: FilterCriteria) -> List[str]:
        """
        Inspect criteria.

        Args:
            criteria: Criteria about to be applied

        Returns:
            Human readable issues, empty when the criteria look sane
        """
        issues: List[str] = []

        if criteria.has_inverted_range:
            issues.append(
                f"min_da={criteria.min_da} > max_da={criteria.max_da}; no record can match"
            )

        for name in ("min_da", "max_da"):
            value = getattr(criteria, name)
            if not (self.MIN_DA <= value <= self.MAX_DA):
                issues.append(f"{name}={value} outside DA scale {self.MIN_DA}-{self.MAX_DA}")

        if issues:
            logger.debug(f"Criteria issues: {'; '.join(issues)}")
        return issues
