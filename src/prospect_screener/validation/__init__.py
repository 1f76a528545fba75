"""
Validation Package - Input Checks.

This package provides:
    - ValidationError / RecordValidationError: Raised at input boundaries
    - CriteriaValidator: Non-raising sanity checks on filter criteria

Design Principles:
    - Reject malformed records at ingestion, not inside the engines
    - Clear, actionable messages
    - Criteria problems are reported, never raised
"""

from prospect_screener.validation.criteria_validator import (
    CriteriaValidator,
    RecordValidationError,
    ValidationError,
)

__all__ = [
    "CriteriaValidator",
    "RecordValidationError",
    "ValidationError",
]
