"""
Unit Tests for Domain Entities and Enums.

Test Aspects Covered:
    ✅ Business Logic: Wire mapping, labels, search form parsing
    ✅ Error Handling: Unknown wire strings, blank niche
    ✅ State: Immutable view state transitions
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from prospect_screener.domain.entities import SearchRequest, StageResult, WebsiteRecord
from prospect_screener.domain.enums import (
    ContactType,
    OutreachStatus,
    SortDirection,
    SortKey,
)
from prospect_screener.domain.value_objects import SortConfig, ViewState


class TestWireEnums:
    """Test cases for enum parsing and labels."""

    def test_parse_normalizes(self) -> None:
        assert ContactType.parse(" Email ") is ContactType.EMAIL
        assert OutreachStatus.parse("NOT_CONTACTED") is OutreachStatus.NOT_CONTACTED
        assert SortKey.parse(SortKey.DOMAIN) is SortKey.DOMAIN

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            OutreachStatus.parse("ghosted")

        assert "not_contacted" in str(exc_info.value)

    def test_labels(self) -> None:
        assert OutreachStatus.NOT_CONTACTED.label == "Not Contacted"
        assert ContactType.NONE.label == "None"
        assert SortKey.ORGANIC_TRAFFIC.label == "Traffic"
        assert SortKey.CONTACT_EMAIL.label == "Contact Email"

    def test_values_are_wire_strings(self) -> None:
        assert [c.value for c in ContactType] == ["email", "form", "none"]
        assert [s.value for s in OutreachStatus] == [
            "not_contacted",
            "contacted",
            "pending",
            "approved",
            "rejected",
        ]

    def test_direction_flip(self) -> None:
        assert SortDirection.ASC.flipped() is SortDirection.DESC
        assert SortDirection.DESC.flipped() is SortDirection.ASC


class TestWebsiteRecord:
    """Test cases for WebsiteRecord."""

    def test_equality_by_id(self, make_record) -> None:
        first = make_record(id="same", domain="a.com")
        second = make_record(id="same", domain="b.com")

        assert first == second
        assert len({first, second}) == 1

    def test_domain_authority_scale_enforced(self, make_record) -> None:
        with pytest.raises(ValidationError):
            make_record(domain_authority=101)


class TestSearchRequest:
    """Test cases for SearchRequest."""

    def test_from_form_splits_lists(self) -> None:
        """
        SCENARIO: Comma separated keywords with blanks and padding
        EXPECTED: Trimmed, non-empty entries
        """
        request = SearchRequest.from_form(
            {
                "niche": "  fitness ",
                "minDA": "10",
                "maxDA": "70",
                "keywords": "fitness blog, , health tips ,workout",
                "competitorDomains": "rival.com,",
            }
        )

        assert request.niche == "fitness"
        assert request.min_da == 10
        assert request.max_da == 70
        assert request.keywords == ["fitness blog", "health tips", "workout"]
        assert request.competitor_domains == ["rival.com"]

    def test_blank_niche_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchRequest(niche="   ")


class TestViewState:
    """Test cases for ViewState transitions."""

    def test_with_criteria_returns_new_state(self) -> None:
        state = ViewState()

        updated = state.with_criteria(min_da=30, contact_type="form")

        assert state.criteria.min_da == 0
        assert updated.criteria.min_da == 30
        assert updated.criteria.contact_type is ContactType.FORM
        assert updated.sort == state.sort

    def test_with_criteria_validates(self) -> None:
        with pytest.raises(ValidationError):
            ViewState().with_criteria(contact_type="fax")

    def test_with_sort(self) -> None:
        sort = SortConfig(key=SortKey.DOMAIN, direction=SortDirection.ASC)

        updated = ViewState().with_sort(sort)

        assert updated.sort == sort


class TestStageResult:
    """Test cases for StageResult."""

    def test_reduction_ratio(self) -> None:
        result = StageResult(stage_name="x", input_count=4, output_count=1, duration_seconds=0.0)

        assert result.reduction_ratio == pytest.approx(0.75)

    def test_reduction_ratio_empty(self) -> None:
        result = StageResult(stage_name="x", input_count=0, output_count=0, duration_seconds=0.0)

        assert result.reduction_ratio == 0.0
