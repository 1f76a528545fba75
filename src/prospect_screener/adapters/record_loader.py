"""
Record Loader - Ingestion Boundary for Raw Website Records.

Turns the loosely typed dictionaries produced by the acquisition
service into immutable WebsiteRecord objects:
    - Enum strings mapped through the closed wire tables
    - Unknown/null organic traffic normalized to 0
    - Missing url defaults to https://<domain>, missing id to the url

Everything downstream can assume fully populated records.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from prospect_screener.domain.entities import WebsiteRecord
from prospect_screener.domain.enums import ContactType, OutreachStatus
from prospect_screener.validation.criteria_validator import RecordValidationError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("domain", "domain_authority")

_TRUE_STRINGS = {"true", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "no", "n", "0", ""}


def parse_record(raw: Mapping[str, Any]) -> WebsiteRecord:
    """
    Convert one raw record into a WebsiteRecord.

    Args:
        raw: Mapping with snake_case keys and wire enum strings

    Returns:
        Validated, immutable record

    Raises:
        RecordValidationError: Missing required field, unknown enum
                               string or out-of-range value
    """
    for name in _REQUIRED_FIELDS:
        if _is_blank(raw.get(name)):
            raise RecordValidationError(f"Missing required field '{name}'", field=name)

    domain = str(raw["domain"]).strip()
    url = _optional_text(raw.get("url")) or f"https://{domain}"
    fields: Dict[str, Any] = {
        "id": raw.get("id") if not _is_blank(raw.get("id")) else url,
        "domain": domain,
        "url": url,
        "domain_authority": raw["domain_authority"],
        "organic_traffic": raw.get("organic_traffic"),
        "contact_type": _parse_enum(ContactType, raw, "contact_type", ContactType.NONE),
        "contact_email": _optional_text(raw.get("contact_email")),
        "contact_form_url": _optional_text(raw.get("contact_form_url")),
        "accepts_guest_posts": _parse_bool(raw.get("accepts_guest_posts")),
        "outreach_status": _parse_enum(
            OutreachStatus, raw, "outreach_status", OutreachStatus.NOT_CONTACTED
        ),
    }

    try:
        return WebsiteRecord(**fields)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else None
        raise RecordValidationError(
            f"Invalid record for {domain}: {first['msg']}", field=field
        ) from exc


def load_records(
    raws: Iterable[Mapping[str, Any]],
    skip_invalid: bool = True,
) -> List[WebsiteRecord]:
    """
    Parse a batch of raw records.

    Args:
        raws: Raw records in acquisition order
        skip_invalid: Log and drop bad records instead of raising

    Returns:
        Parsed records, input order preserved

    Raises:
        RecordValidationError: First bad record when skip_invalid is False
    """
    records: List[WebsiteRecord] = []
    skipped = 0

    for index, raw in enumerate(raws):
        try:
            records.append(parse_record(raw))
        except RecordValidationError as exc:
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning(f"Skipping record #{index}: {exc.message}")

    if skipped:
        logger.info(f"Loaded {len(records)} records, skipped {skipped} invalid")
    return records


def load_records_file(
    path: Union[str, Path],
    skip_invalid: bool = True,
) -> List[WebsiteRecord]:
    """
    Load records from a JSON or YAML file.

    The file holds either a list of records or a mapping with a
    ``websites`` list.
    """
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        payload = json.loads(text)
    else:
        payload = yaml.safe_load(text)

    if isinstance(payload, Mapping):
        payload = payload.get("websites", [])
    if not isinstance(payload, list):
        raise RecordValidationError(
            f"Expected a list of records in {file_path}, got {type(payload).__name__}"
        )
    return load_records(payload, skip_invalid=skip_invalid)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _optional_text(value: Any) -> Union[str, None]:
    if _is_blank(value):
        return None
    return str(value).strip()


def _parse_enum(enum_cls: Any, raw: Mapping[str, Any], name: str, default: Any) -> Any:
    value = raw.get(name)
    if _is_blank(value):
        return default
    try:
        return enum_cls.parse(value)
    except ValueError as exc:
        raise RecordValidationError(str(exc), field=name) from exc


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise RecordValidationError(
        f"Cannot interpret accepts_guest_posts={value!r}", field="accepts_guest_posts"
    )
