"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List

import pytest

from prospect_screener.adapters.console_logger import ConsoleAuditLogger
from prospect_screener.adapters.mock_provider import MockOpportunityProvider
from prospect_screener.config.models import EngineConfig
from prospect_screener.domain.entities import WebsiteRecord
from prospect_screener.domain.enums import ContactType, OutreachStatus

RecordFactory = Callable[..., WebsiteRecord]


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML/JSON fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def mock_provider() -> MockOpportunityProvider:
    """Create mock provider for testing."""
    return MockOpportunityProvider(seed=42)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def default_config() -> EngineConfig:
    """Create default engine configuration."""
    return EngineConfig()


@pytest.fixture
def make_record() -> RecordFactory:
    """Factory for records with sensible defaults; ids count up."""
    counter = {"next": 1}

    def _make(**overrides: Any) -> WebsiteRecord:
        record_id = overrides.pop("id", counter["next"])
        counter["next"] += 1
        domain = overrides.pop("domain", f"site{record_id}.com")
        fields = {
            "id": record_id,
            "domain": domain,
            "url": f"https://{domain}",
            "domain_authority": 30,
            "organic_traffic": 1000,
            "contact_type": ContactType.EMAIL,
            "contact_email": f"editor@{domain}",
            "accepts_guest_posts": True,
            "outreach_status": OutreachStatus.NOT_CONTACTED,
        }
        fields.update(overrides)
        return WebsiteRecord(**fields)

    return _make


@pytest.fixture
def sample_records(make_record: RecordFactory) -> List[WebsiteRecord]:
    """A small mixed pool covering every enum variant and DA bucket."""
    return [
        make_record(
            domain="alpha.com",
            domain_authority=15,
            organic_traffic=500,
            contact_type=ContactType.NONE,
            contact_email=None,
            accepts_guest_posts=False,
            outreach_status=OutreachStatus.REJECTED,
        ),
        make_record(
            domain="bravo.com",
            domain_authority=35,
            organic_traffic=0,
            contact_type=ContactType.FORM,
            contact_email=None,
            contact_form_url="https://bravo.com/contact",
            outreach_status=OutreachStatus.CONTACTED,
        ),
        make_record(
            domain="charlie.com",
            domain_authority=55,
            organic_traffic=42_000,
            outreach_status=OutreachStatus.PENDING,
        ),
        make_record(
            domain="delta.com",
            domain_authority=75,
            organic_traffic=120_000,
            outreach_status=OutreachStatus.APPROVED,
        ),
        make_record(
            domain="echo.com",
            domain_authority=55,
            organic_traffic=9_000,
            accepts_guest_posts=False,
        ),
        make_record(
            domain="foxtrot.com",
            domain_authority=95,
            organic_traffic=3_000_000,
            contact_type=ContactType.FORM,
            contact_email=None,
        ),
    ]
