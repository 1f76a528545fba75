"""
Unit Tests for the CSV Exporter.

Test Aspects Covered:
    ✅ Business Logic: Column order, row order, value rendering
    ✅ Edge Cases: Delimiters and quotes inside fields, empty export
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List

from prospect_screener.adapters.csv_exporter import EXPORT_COLUMNS, export_csv, write_csv
from prospect_screener.domain.entities import WebsiteRecord


class TestExportCsv:
    """Test cases for export_csv."""

    def test_header_and_column_order(self, sample_records: List[WebsiteRecord]) -> None:
        text = export_csv(sample_records[:1])

        header, row = text.splitlines()
        assert header == (
            "domain,url,domain_authority,organic_traffic,contact_type,"
            "contact_email,accepts_guest_posts,outreach_status"
        )
        assert row == "alpha.com,https://alpha.com,15,500,none,,false,rejected"

    def test_rows_follow_input_order(self, sample_records: List[WebsiteRecord]) -> None:
        reordered = [sample_records[3], sample_records[0]]

        rows = list(csv.reader(io.StringIO(export_csv(reordered))))

        assert [row[0] for row in rows[1:]] == ["delta.com", "alpha.com"]

    def test_quotes_fields_with_delimiter_and_quotes(self, make_record) -> None:
        """
        SCENARIO: Field values containing the delimiter and a quote
        EXPECTED: Field quoted, embedded quote doubled, round-trips via csv
        """
        record = make_record(
            domain="odd.com",
            url='https://odd.com/?a=1,b="2"',
            contact_email="x@odd.com",
        )

        text = export_csv([record])

        assert '"https://odd.com/?a=1,b=""2"""' in text
        parsed = list(csv.reader(io.StringIO(text)))
        assert parsed[1][1] == 'https://odd.com/?a=1,b="2"'

    def test_custom_delimiter(self, make_record) -> None:
        record = make_record(domain="semi.com", url="https://semi.com/a;b")

        text = export_csv([record], delimiter=";", include_header=False)

        assert text.startswith('semi.com;"https://semi.com/a;b";')
        assert len(text.splitlines()) == 1

    def test_empty_export_has_header_only(self) -> None:
        assert export_csv([]) == ",".join(EXPORT_COLUMNS) + "\n"


class TestWriteCsv:
    """Test cases for write_csv."""

    def test_creates_parent_directories(
        self, tmp_path: Path, sample_records: List[WebsiteRecord]
    ) -> None:
        destination = tmp_path / "exports" / "websites.csv"

        written = write_csv(sample_records, destination)

        assert written == destination
        assert destination.read_text(encoding="utf-8") == export_csv(sample_records)
