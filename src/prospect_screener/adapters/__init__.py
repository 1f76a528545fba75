"""
Adapters Package - Infrastructure Implementations.

This package contains the edges of the engine, following the
Hexagonal Architecture (Ports & Adapters) pattern.

Ingestion:
    - parse_record / load_records / load_records_file: Raw dicts -> records

Providers:
    - MockOpportunityProvider: Fake acquisition service for development/testing

Loggers:
    - ConsoleAuditLogger: Simple console output

Export:
    - export_csv / write_csv: Display list as delimited text

Design Principles:
    - Malformed input rejected here, never inside the engines
    - Easily swappable via Dependency Injection
    - No filtering, sorting or counting logic in adapters
"""

from prospect_screener.adapters.record_loader import (
    load_records,
    load_records_file,
    parse_record,
)
from prospect_screener.adapters.mock_provider import MockOpportunityProvider
from prospect_screener.adapters.console_logger import ConsoleAuditLogger
from prospect_screener.adapters.csv_exporter import (
    EXPORT_COLUMNS,
    export_csv,
    write_csv,
)

__all__ = [
    "EXPORT_COLUMNS",
    "ConsoleAuditLogger",
    "MockOpportunityProvider",
    "export_csv",
    "load_records",
    "load_records_file",
    "parse_record",
    "write_csv",
]
