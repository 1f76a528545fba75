"""
CSV Exporter for the Display List.

Writes one row per record in the order given (the filtered, sorted
display list). Quoting is delegated to the csv module: any field that
contains the delimiter, a quote or a newline is quoted and embedded
quotes are doubled.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List, Sequence, Union

from prospect_screener.domain.entities import WebsiteRecord

EXPORT_COLUMNS: List[str] = [
    "domain",
    "url",
    "domain_authority",
    "organic_traffic",
    "contact_type",
    "contact_email",
    "accepts_guest_posts",
    "outreach_status",
]


def record_to_row(record: WebsiteRecord) -> List[str]:
    """Flatten a record into export column order."""
    return [
        record.domain,
        record.url,
        str(record.domain_authority),
        str(record.organic_traffic),
        record.contact_type.value,
        record.contact_email or "",
        "true" if record.accepts_guest_posts else "false",
        record.outreach_status.value,
    ]


def export_csv(
    records: Sequence[WebsiteRecord],
    delimiter: str = ",",
    include_header: bool = True,
) -> str:
    """
    Render records as delimited text.

    Args:
        records: Ordered records to export
        delimiter: Single-character field separator
        include_header: Emit the column names as the first row

    Returns:
        CSV text with ``\\n`` line endings
    """
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=delimiter,
        quotechar='"',
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    if include_header:
        writer.writerow(EXPORT_COLUMNS)
    for record in records:
        writer.writerow(record_to_row(record))
    return buffer.getvalue()


def write_csv(
    records: Sequence[WebsiteRecord],
    path: Union[str, Path],
    delimiter: str = ",",
    include_header: bool = True,
) -> Path:
    """Persist :func:`export_csv` output, creating parent directories."""
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(
        export_csv(records, delimiter=delimiter, include_header=include_header),
        encoding="utf-8",
        newline="",
    )
    return destination
