"""
Pipeline Package - Orchestration.

Components:
    - OpportunityPipeline: Holds the pool and view state, runs
      filter -> sort -> aggregate

The pipeline is responsible for:
    - Replacing the pool atomically on a new search
    - Applying the sort toggle protocol to column selections
    - Reporting suspicious criteria as anomalies
    - Producing the display list, statistics and audit trail

Design Principles:
    - All collaborators injected via constructor
    - Engines stay pure; state lives only here
"""

from prospect_screener.pipeline.opportunity_pipeline import OpportunityPipeline

__all__ = ["OpportunityPipeline"]
