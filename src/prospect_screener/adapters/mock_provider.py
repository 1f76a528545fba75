"""
Mock Opportunity Provider.

A fake acquisition service for development and testing. Generates a
deterministic pool of raw website records per niche and passes them
through the regular ingestion boundary.
"""

from __future__ import annotations

import logging
import random
import re
from typing import Any, Dict, List

from prospect_screener.adapters.record_loader import load_records
from prospect_screener.domain.entities import SearchRequest, WebsiteRecord

logger = logging.getLogger(__name__)


class MockOpportunityProvider:
    """Fake acquisition service for development and testing."""

    SITE_PATTERNS = [
        "{slug}daily.com",
        "the{slug}blog.com",
        "{slug}insider.net",
        "{slug}hub.io",
        "my{slug}journal.com",
        "{slug}weekly.org",
        "{slug}guide.co",
        "{slug}tips.com",
        "{slug}-news.com",
        "{slug}lab.dev",
        "{slug}corner.blog",
        "all-about-{slug}.com",
    ]

    CONTACT_WEIGHTS = [("email", 0.5), ("form", 0.3), ("none", 0.2)]

    STATUS_WEIGHTS = [
        ("not_contacted", 0.6),
        ("contacted", 0.15),
        ("pending", 0.1),
        ("approved", 0.1),
        ("rejected", 0.05),
    ]

    def __init__(self, seed: int = 42, pool_size: int = 24) -> None:
        """
        Initialize mock provider.

        Args:
            seed: Random seed for reproducibility
            pool_size: Raw candidates generated per search before DA filtering
        """
        self._seed = seed
        self._pool_size = pool_size

    def search(self, request: SearchRequest) -> List[WebsiteRecord]:
        """Return a deterministic candidate pool for the request's niche."""
        raws = [
            raw
            for raw in self.generate_raw(request.niche)
            if request.min_da <= raw["domain_authority"] <= request.max_da
            and raw["domain"] not in request.competitor_domains
        ]
        logger.debug(f"Mock search '{request.niche}' returned {len(raws)} candidates")
        return load_records(raws)

    def generate_raw(self, niche: str) -> List[Dict[str, Any]]:
        """Raw wire-format records for a niche (0-100 DA, some unknown traffic)."""
        rng = random.Random(f"{self._seed}:{niche.lower()}")
        slug = re.sub(r"[^a-z0-9]+", "", niche.lower()) or "niche"

        raws: List[Dict[str, Any]] = []
        for i in range(self._pool_size):
            pattern = self.SITE_PATTERNS[i % len(self.SITE_PATTERNS)]
            domain = pattern.format(slug=slug)
            if i >= len(self.SITE_PATTERNS):
                domain = f"{i // len(self.SITE_PATTERNS)}{domain}"

            contact_type = self._weighted(rng, self.CONTACT_WEIGHTS)
            # Some sites have no traffic estimate
            traffic = None if rng.random() < 0.15 else rng.randint(100, 500_000)

            raws.append(
                {
                    "id": f"{slug}-{i:03d}",
                    "domain": domain,
                    "url": f"https://{domain}",
                    "domain_authority": rng.randint(0, 100),
                    "organic_traffic": traffic,
                    "contact_type": contact_type,
                    "contact_email": f"editor@{domain}" if contact_type == "email" else None,
                    "contact_form_url": (
                        f"https://{domain}/contact" if contact_type == "form" else None
                    ),
                    "accepts_guest_posts": rng.random() < 0.6,
                    "outreach_status": self._weighted(rng, self.STATUS_WEIGHTS),
                }
            )
        return raws

    @staticmethod
    def _weighted(rng: random.Random, choices: List[tuple]) -> str:
        values = [value for value, _ in choices]
        weights = [weight for _, weight in choices]
        return rng.choices(values, weights=weights, k=1)[0]
