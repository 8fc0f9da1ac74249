"""Record validation - shape checks run before a record is usable downstream.

Validation is pure: it never mutates its input. On success it returns a
normalised copy (closed-set fields coerced to their enums); on failure it
raises the specific error for the first field that does not conform.
"""

from __future__ import annotations

import dataclasses
import re
from datetime import date, datetime, timezone
from typing import Any, Sequence, TypeVar

from ..errors import InvalidEnum, MalformedPair, MalformedValue, MissingField
from .types import (
    Author, Breadcrumb, ConnectionMethod, ContentRecord, FAQ, FieldMapping,
    IntegrationEntry, Section, Workflow,
)

RecordT = TypeVar("RecordT", ContentRecord, IntegrationEntry)

# Keys become URL paths and output file names
KEY_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

# Sub-fields that must be non-blank for each kind of pair
_PAIR_FIELDS: dict[type, tuple[str, ...]] = {
    FAQ: ("question", "answer"),
    Breadcrumb: ("name", "path"),
    FieldMapping: ("source_field", "target_field", "description"),
    Workflow: ("title", "description"),
    Section: ("title",),
}


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _require_text(record_id: str | None, name: str, value: Any) -> None:
    if _blank(value):
        raise MissingField(name, record_id=record_id)


def _require_list(record_id: str | None, name: str, values: Sequence) -> None:
    if not values:
        raise MissingField(name, record_id=record_id)


def _check_pairs(record_id: str | None, name: str, pairs: Sequence, kind: type) -> None:
    """Every element must be a `kind` with all of its sub-fields set."""
    required = _PAIR_FIELDS[kind]
    for index, pair in enumerate(pairs):
        if not isinstance(pair, kind):
            raise MalformedPair(name, index, required[0], record_id=record_id)
        for sub in required:
            if _blank(getattr(pair, sub)):
                raise MalformedPair(name, index, sub, record_id=record_id)


def _check_strings(record_id: str | None, name: str, values: Sequence) -> None:
    for index, value in enumerate(values):
        if not isinstance(value, str) or not value.strip():
            raise MalformedPair(name, index, "value", record_id=record_id)


def _check_sections(record_id: str | None, sections: Sequence[Section]) -> None:
    _check_pairs(record_id, "sections", sections, Section)
    for index, section in enumerate(sections):
        _check_strings(record_id, f"sections[{section.title}].items", section.items)
        if not isinstance(section.ordered, bool):
            raise MalformedPair("sections", index, "ordered", record_id=record_id)


def _check_key(record_id: str | None, name: str, value: str) -> None:
    if not KEY_PATTERN.match(value):
        raise MalformedValue(
            name, value, "lowercase letters, digits and single hyphens", record_id=record_id
        )


def parse_date(value: str) -> datetime:
    """
    Parse an ISO date ("2026-02-18") or timestamp into an aware UTC datetime.

    Dates without a time are midnight UTC; naive timestamps are taken as UTC.

    Raises:
        ValueError: the value is not an ISO date or timestamp
    """
    if len(value) == 10:
        parsed = datetime.combine(date.fromisoformat(value), datetime.min.time())
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _check_date(record_id: str | None, name: str, value: str | None) -> None:
    if value is None:
        return
    try:
        parse_date(value)
    except (TypeError, ValueError):
        raise MalformedValue(name, value, "an ISO 8601 date", record_id=record_id) from None


def validate_record(record: ContentRecord) -> ContentRecord:
    """Validate a content record (guide, post, landing page)."""
    record_id = record.id or None

    _require_text(record_id, "id", record.id)
    _check_key(record_id, "id", record.id)
    _require_text(record_id, "title", record.title)
    _require_text(record_id, "description", record.description)
    _check_date(record_id, "publish_date", record.publish_date)
    _check_date(record_id, "updated_date", record.updated_date)

    _check_pairs(record_id, "faqs", record.faqs, FAQ)
    _check_pairs(record_id, "breadcrumbs", record.breadcrumbs, Breadcrumb)
    _check_sections(record_id, record.sections)
    _check_strings(record_id, "keywords", record.keywords)
    _check_strings(record_id, "tags", record.tags)
    _check_strings(record_id, "key_facts", record.key_facts)

    if record.author is not None:
        if not isinstance(record.author, Author) or _blank(record.author.name):
            raise MalformedPair("author", 0, "name", record_id=record_id)

    return record


def validate_integration(entry: IntegrationEntry) -> IntegrationEntry:
    """Validate an integration entry and normalise its connection method."""
    record_id = entry.slug or None

    _require_text(record_id, "slug", entry.slug)
    _check_key(record_id, "slug", entry.slug)
    _require_text(record_id, "name", entry.name)
    _require_text(record_id, "category", entry.category)
    _require_text(record_id, "description", entry.description)
    _require_text(record_id, "why_use_it", entry.why_use_it)

    try:
        method = ConnectionMethod(entry.connection_method)
    except ValueError:
        raise InvalidEnum(
            "connection_method",
            entry.connection_method,
            [m.value for m in ConnectionMethod],
            record_id=record_id,
        ) from None

    _check_pairs(record_id, "field_mappings", entry.field_mappings, FieldMapping)
    _check_pairs(record_id, "workflows", entry.workflows, Workflow)

    _require_list(record_id, "setup_steps", entry.setup_steps)
    _check_strings(record_id, "setup_steps", entry.setup_steps)

    _check_pairs(record_id, "faqs", entry.faqs, FAQ)
    _check_strings(record_id, "keywords", entry.keywords)

    if method is entry.connection_method:
        return entry
    return dataclasses.replace(entry, connection_method=method)


def validate(record: RecordT) -> RecordT:
    """
    Validate any record kind.

    Raises:
        MissingField: a required string/list is blank or absent
        MalformedValue: a key is not URL-safe or a date is not ISO 8601
        InvalidEnum: a closed-set field is outside its variants
        MalformedPair: a structured list element is missing a sub-field
        TypeError: the object is not a known record type
    """
    if isinstance(record, IntegrationEntry):
        return validate_integration(record)
    if isinstance(record, ContentRecord):
        return validate_record(record)
    raise TypeError(f"Cannot validate object of type {type(record).__name__}")
