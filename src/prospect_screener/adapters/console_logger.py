"""
Console Audit Logger.

Prints the life of a prospecting session to the console: pool
replacements, one summary line per view (criteria, sort and how many
websites survived), stage timings and, in verbose mode, every website
hidden by the filter.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from prospect_screener.domain.entities import WebsiteRecord
from prospect_screener.domain.value_objects import FilterCriteria, ViewState


def describe_criteria(criteria: FilterCriteria) -> str:
    """One-line rendering of the active filters, e.g. ``DA 0-80 | contact=email``."""
    parts = [f"DA {criteria.min_da}-{criteria.max_da}"]
    for name in ("contact_type", "outreach_status", "accepts_guest_posts"):
        value = getattr(criteria, name)
        text = getattr(value, "value", value)
        if text != "all":
            parts.append(f"{name}={text}")
    return " | ".join(parts)


class ConsoleAuditLogger:
    """Console audit trail for the opportunity pipeline."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Also print stage starts and every hidden website
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_pool_loaded(self, size: int, source: str) -> None:
        if size == 0:
            self._log("WARN", f"Empty pool from {source}; every view will be empty")
        else:
            self._log("INFO", f"New pool of {size} websites from {source}")

    def log_view(self, state: ViewState, pool_size: int, shown: int) -> None:
        """Summary of one rendered view."""
        sort = state.sort
        self._log(
            "INFO",
            f"Showing {shown}/{pool_size} websites [{describe_criteria(state.criteria)}] "
            f"sorted by {sort.key.label} {sort.direction.value}",
        )

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            self._log("DEBUG", f"{stage_name} <- {input_count} websites")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._log(
            "INFO",
            f"Completed {stage_name}: {output_count} websites "
            f"({duration_seconds * 1000:.1f}ms)",
        )

    def log_record_filtered(
        self,
        record: WebsiteRecord,
        stage_name: str,
        reason: str,
    ) -> None:
        if self._verbose:
            self._log(
                "DEBUG",
                f"Hidden {record.url} (DA {record.domain_authority}) by {stage_name}: {reason}",
            )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly or warning."""
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
