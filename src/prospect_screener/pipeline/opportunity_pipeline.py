"""
Opportunity Pipeline - Main Orchestrator.

The OpportunityPipeline owns the current record pool and the immutable
view state (criteria + sort). Each run feeds the pool through
filter -> sort to produce the display list and aggregates either the
display list or the whole pool for the dashboard.

The pool is held as a tuple and replaced in a single assignment, and
``run`` reads pool and state once up front, so a concurrent pool
replacement is never observed half way through.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

from prospect_screener.adapters.console_logger import ConsoleAuditLogger
from prospect_screener.adapters.csv_exporter import export_csv
from prospect_screener.aggregation.stats import aggregate
from prospect_screener.config.models import EngineConfig
from prospect_screener.domain.entities import (
    SearchRequest,
    StageResult,
    ViewResult,
    WebsiteRecord,
)
from prospect_screener.domain.enums import SortKey
from prospect_screener.domain.value_objects import (
    AggregateStats,
    FilterCriteria,
    SortConfig,
    ViewState,
)
from prospect_screener.filters.criteria import OpportunityFilter
from prospect_screener.sorting.engine import RecordSorter, toggle_sort
from prospect_screener.validation.criteria_validator import CriteriaValidator

logger = logging.getLogger(__name__)


class OpportunityProviderProtocol(Protocol):
    """Protocol for acquisition services supplying record pools."""

    def search(self, request: SearchRequest) -> List[WebsiteRecord]:
        ...


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_pool_loaded(self, size: int, source: str) -> None:
        ...

    def log_view(self, state: ViewState, pool_size: int, shown: int) -> None:
        ...

    def log_stage_start(
        self, stage_name: str, input_count: int, metadata: Optional[Dict] = None
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        ...

    def log_record_filtered(
        self, record: WebsiteRecord, stage_name: str, reason: str
    ) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class OpportunityPipeline:
    """Orchestrates filtering, sorting and aggregation of the record pool."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        provider: Optional[OpportunityProviderProtocol] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        criteria_validator: Optional[CriteriaValidator] = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            config: Engine configuration (defaults when omitted)
            provider: Acquisition service used by :meth:`search`
            audit_logger: For audit trail (optional)
            criteria_validator: Reports suspicious criteria (optional)
        """
        self.config = config or EngineConfig()
        self.provider = provider
        self.audit_logger = audit_logger if self.config.audit.enabled else None
        self.criteria_validator = criteria_validator or CriteriaValidator()

        self._pool: Tuple[WebsiteRecord, ...] = ()
        self._state = self.default_state()

    @classmethod
    def from_config(
        cls,
        config: EngineConfig,
        provider: Optional[OpportunityProviderProtocol] = None,
    ) -> "OpportunityPipeline":
        """Build a pipeline with a console audit logger as configured."""
        audit_logger = ConsoleAuditLogger(verbose=config.audit.verbose)
        return cls(config=config, provider=provider, audit_logger=audit_logger)

    # ------------------------------------------------------------------
    # Pool
    # ------------------------------------------------------------------

    @property
    def pool(self) -> Tuple[WebsiteRecord, ...]:
        return self._pool

    def load_pool(self, records: Sequence[WebsiteRecord], source: str = "caller") -> int:
        """
        Replace the pool with a fresh set of records.

        Args:
            records: New pool, already parsed at the ingestion boundary
            source: Free-form origin for the audit log

        Returns:
            Size of the new pool
        """
        pool = tuple(records)
        self._pool = pool
        logger.info(f"Loaded pool of {len(pool)} records from {source}")
        if self.audit_logger:
            self.audit_logger.log_pool_loaded(len(pool), source)
        return len(pool)

    def search(self, request: Union[SearchRequest, Mapping[str, Any]]) -> int:
        """
        Fetch a fresh pool from the provider for a niche search.

        Raises:
            RuntimeError: If no provider is configured
        """
        if self.provider is None:
            raise RuntimeError("OpportunityPipeline.search requires a provider")
        if not isinstance(request, SearchRequest):
            request = SearchRequest.from_form(request)

        records = self.provider.search(request)
        return self.load_pool(records, source=f"search '{request.niche}'")

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    def default_state(self) -> ViewState:
        return ViewState(
            criteria=self.config.default_criteria,
            sort=self.config.default_sort,
        )

    def reset_view(self) -> ViewState:
        self._state = self.default_state()
        return self._state

    def set_criteria(self, criteria: FilterCriteria) -> ViewState:
        self._state = ViewState(criteria=criteria, sort=self._state.sort)
        return self._state

    def update_criteria(self, **changes: Any) -> ViewState:
        """Replace individual criteria fields (validated)."""
        self._state = self._state.with_criteria(**changes)
        return self._state

    def apply_form(self, form: Mapping[str, Any]) -> ViewState:
        """Apply raw filter form values; uninterpretable values are ignored."""
        return self.set_criteria(FilterCriteria.from_form(form, base=self._state.criteria))

    def request_sort(self, key: Union[SortKey, str]) -> SortConfig:
        """User selected a sortable column; see :func:`toggle_sort`."""
        sort = toggle_sort(self._state.sort, key)
        self._state = self._state.with_sort(sort)
        return sort

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def run(self) -> ViewResult:
        """
        Execute filter -> sort -> aggregate for the current state.

        Returns:
            ViewResult with display list, statistics and audit trail
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        pool, state = self._pool, self._state

        if self.audit_logger:
            self.audit_logger.set_correlation_id(correlation_id)

        self._report_criteria_issues(state.criteria)

        filter_result, filtered = self._execute_filter(
            OpportunityFilter(state.criteria), pool
        )
        sort_result, display_list = self._execute_sort(RecordSorter(state.sort), filtered)

        scope = self.config.stats.scope
        stats_start = time.perf_counter()
        stats = aggregate(display_list if scope == "filtered" else pool)
        stats_result = StageResult(
            stage_name=f"aggregate_{scope}",
            input_count=stats.total_websites,
            output_count=stats.total_websites,
            duration_seconds=time.perf_counter() - stats_start,
        )

        if self.audit_logger:
            self.audit_logger.log_view(state, len(pool), len(display_list))

        total_duration = time.perf_counter() - start_time
        logger.debug(
            f"View {correlation_id[:8]}: {len(display_list)}/{len(pool)} records "
            f"in {total_duration:.4f}s"
        )

        return ViewResult(
            state=state,
            pool_size=len(pool),
            display_list=display_list,
            stats=stats,
            audit_trail=[filter_result, sort_result, stats_result],
            metadata={
                "correlation_id": correlation_id,
                "timestamp": datetime.now().isoformat(),
                "duration_seconds": total_duration,
                "stats_scope": scope,
            },
        )

    def display_list(self) -> List[WebsiteRecord]:
        """Filtered and sorted view of the current pool."""
        state = self._state
        filtered = OpportunityFilter(state.criteria).select(self._pool)
        return RecordSorter(state.sort).apply(filtered)

    def stats(self, scope: Optional[str] = None) -> AggregateStats:
        """
        Dashboard statistics.

        Args:
            scope: "filtered" or "pool"; defaults to the configured scope
        """
        scope = scope or self.config.stats.scope
        if scope == "pool":
            return aggregate(self._pool)
        if scope == "filtered":
            return aggregate(OpportunityFilter(self._state.criteria).select(self._pool))
        raise ValueError(f"Unknown stats scope '{scope}', expected 'filtered' or 'pool'")

    def export_csv(self) -> str:
        """CSV text for the current display list."""
        export = self.config.export
        return export_csv(
            self.display_list(),
            delimiter=export.delimiter,
            include_header=export.include_header,
        )

    def _report_criteria_issues(self, criteria: FilterCriteria) -> None:
        for issue in self.criteria_validator.check(criteria):
            logger.warning(f"Filter criteria: {issue}")
            if self.audit_logger:
                self.audit_logger.log_anomaly(issue, severity="WARNING")

    def _execute_filter(
        self,
        stage: OpportunityFilter,
        records: Sequence[WebsiteRecord],
    ) -> Tuple[StageResult, List[WebsiteRecord]]:
        """Execute the criteria filter stage."""
        stage_start = time.perf_counter()
        if self.audit_logger:
            self.audit_logger.log_stage_start(stage.name, len(records))

        # Decided per record; ids are not guaranteed unique across a pool
        passed: List[WebsiteRecord] = []
        rejected: List[Tuple[WebsiteRecord, str]] = []
        for record in records:
            is_match, reason = stage.check(record)
            if is_match:
                passed.append(record)
            else:
                rejected.append((record, reason))

        stage_duration = time.perf_counter() - stage_start

        if self.audit_logger:
            for record, reason in rejected:
                self.audit_logger.log_record_filtered(record, stage.name, reason)
            self.audit_logger.log_stage_end(stage.name, len(passed), stage_duration)

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=len(passed),
            duration_seconds=stage_duration,
            filtered_records=[record.id for record, _ in rejected],
            filter_reasons={record.id: reason for record, reason in rejected},
        )
        return stage_result, passed

    def _execute_sort(
        self,
        stage: RecordSorter,
        records: List[WebsiteRecord],
    ) -> Tuple[StageResult, List[WebsiteRecord]]:
        """Execute the sort stage."""
        stage_start = time.perf_counter()
        if self.audit_logger:
            self.audit_logger.log_stage_start(stage.name, len(records))

        ordered = stage.apply(records)

        stage_duration = time.perf_counter() - stage_start
        if self.audit_logger:
            self.audit_logger.log_stage_end(stage.name, len(ordered), stage_duration)

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=len(ordered),
            duration_seconds=stage_duration,
        )
        return stage_result, ordered
