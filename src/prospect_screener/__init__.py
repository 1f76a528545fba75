"""
Prospect Screener - Outreach Opportunity Filtering Engine.

Narrows a pool of candidate websites for guest-post outreach, orders
them for review and summarizes the pool for a dashboard.

Architecture:
    - Pure, stateless engines over immutable records
    - Explicit immutable view state (criteria + sort)
    - Configuration-driven defaults via YAML

Main Components:
    - domain: Records, enums, criteria and result value objects
    - filters: Criteria filtering (order preserving)
    - sorting: Stable single-key sort and the sort toggle protocol
    - aggregation: Bucketed dashboard statistics
    - pipeline: Orchestrator holding pool and view state
    - adapters: Ingestion boundary, mock provider, audit logger, CSV export
    - config: Configuration models and loaders

Example:
    >>> from prospect_screener.adapters import load_records
    >>> from prospect_screener.config import EngineConfig
    >>> from prospect_screener.pipeline import OpportunityPipeline
    >>> pipeline = OpportunityPipeline(config=EngineConfig())
    >>> pipeline.load_pool(load_records(raw_rows))
    >>> result = pipeline.run()
    >>> print(f"{len(result.display_list)} websites found")

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Prospect Screener.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("prospect_screener").setLevel(level)
