"""Record loader - parses authored data (dicts, YAML, JSON) into records.

Batch file format (integrations):
```yaml
integrations:
  - slug: hubspot
    name: HubSpot
    category: CRM
    connection_method: native
    description: ...
    why_use_it: ...
    field_mappings:
      - {source_field: email, target_field: Contact.email, description: ...}
    workflows:
      - {title: ..., description: ...}
    setup_steps:
      - Go to Settings → Integrations and click Connect HubSpot.
    faqs:
      - {question: ..., answer: ...}
    keywords: [hubspot visitor identification]
```

Post file format:
```yaml
posts:
  - id: what-is-b2b-intent-data
    title: ...
    description: ...
    sections:
      - title: Key Takeaways
        items: [...]
```

The loader only shapes data. It does not fill in defaults for required
fields or coerce closed-set values: missing strings load as "" and an
unknown connection method is kept verbatim, so validation can reject them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, TypeVar

import yaml

from ..errors import MalformedPair, ValidationError
from .types import (
    Author, Breadcrumb, ContentRecord, FAQ, FieldMapping, IntegrationEntry,
    Section, Workflow,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# camelCase keys used by the site's authoring modules -> our field names
_ALIASES = {
    "connectionMethod": "connection_method",
    "whyUseIt": "why_use_it",
    "whyCursive": "why_use_it",
    "fieldMappings": "field_mappings",
    "dataMapping": "field_mappings",
    "setupSteps": "setup_steps",
    "sourceField": "source_field",
    "cursiveField": "source_field",
    "targetField": "target_field",
    "toolField": "target_field",
    "publishDate": "publish_date",
    "publishedAt": "publish_date",
    "updatedDate": "updated_date",
    "updatedAt": "updated_date",
    "heroImage": "hero_image",
    "image": "hero_image",
    "imageAlt": "image_alt",
    "keyFacts": "key_facts",
    "slug": "id",
}


def _normalise_keys(data: dict[str, Any], *, keep_slug: bool = False) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in data.items():
        if key == "slug" and keep_slug:
            result["slug"] = value
            continue
        result[_ALIASES.get(key, key)] = value
    return result


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _as_list(record_id: str, field: str, value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    raise MalformedPair(field, 0, "list", record_id=record_id or None)


def _pairs(
    record_id: str,
    field: str,
    value: Any,
    build: Callable[[dict[str, Any]], T],
    first: str,
) -> tuple[T, ...]:
    """Parse a list of mappings; a non-mapping element is a malformed pair."""
    result = []
    for index, item in enumerate(_as_list(record_id, field, value)):
        if not isinstance(item, dict):
            raise MalformedPair(field, index, first, record_id=record_id or None)
        result.append(build(_normalise_keys(item)))
    return tuple(result)


def _strings(record_id: str, field: str, value: Any) -> tuple[str, ...]:
    return tuple(_text(v) for v in _as_list(record_id, field, value))


def _faq(d: dict[str, Any]) -> FAQ:
    return FAQ(question=_text(d.get("question")), answer=_text(d.get("answer")))


def _breadcrumb(d: dict[str, Any]) -> Breadcrumb:
    return Breadcrumb(name=_text(d.get("name")), path=_text(d.get("path", d.get("href"))))


def _field_mapping(d: dict[str, Any]) -> FieldMapping:
    return FieldMapping(
        source_field=_text(d.get("source_field")),
        target_field=_text(d.get("target_field")),
        description=_text(d.get("description")),
    )


def _workflow(d: dict[str, Any]) -> Workflow:
    return Workflow(title=_text(d.get("title")), description=_text(d.get("description")))


def _author(record_id: str, value: Any) -> Author | None:
    if value is None:
        return None
    if isinstance(value, str):
        return Author(name=value)
    if not isinstance(value, dict):
        raise MalformedPair("author", 0, "name", record_id=record_id or None)
    return Author(
        name=_text(value.get("name")),
        role=_optional_text(value.get("role")),
        url=_optional_text(value.get("url")),
    )


def parse_record(data: dict[str, Any]) -> ContentRecord:
    """Parse a single content record from a dictionary."""
    d = _normalise_keys(data)
    record_id = _text(d.get("id"))

    sections = []
    for index, item in enumerate(_as_list(record_id, "sections", d.get("sections"))):
        if not isinstance(item, dict):
            raise MalformedPair("sections", index, "title", record_id=record_id or None)
        ordered = item.get("ordered", False)
        if not isinstance(ordered, bool):
            raise MalformedPair("sections", index, "ordered", record_id=record_id or None)
        sections.append(Section(
            title=_text(item.get("title")),
            body=_text(item.get("body")),
            items=_strings(record_id, f"sections[{index}].items", item.get("items")),
            ordered=ordered,
        ))

    return ContentRecord(
        id=record_id,
        title=_text(d.get("title")),
        description=_text(d.get("description")),
        faqs=_pairs(record_id, "faqs", d.get("faqs"), _faq, "question"),
        publish_date=_optional_text(d.get("publish_date")),
        updated_date=_optional_text(d.get("updated_date")),
        author=_author(record_id, d.get("author")),
        hero_image=_optional_text(d.get("hero_image")),
        image_alt=_optional_text(d.get("image_alt")),
        breadcrumbs=_pairs(record_id, "breadcrumbs", d.get("breadcrumbs"), _breadcrumb, "name"),
        keywords=_strings(record_id, "keywords", d.get("keywords")),
        category=_text(d.get("category")),
        tags=_strings(record_id, "tags", d.get("tags")),
        sections=tuple(sections),
        key_facts=_strings(record_id, "key_facts", d.get("key_facts")),
        path=_optional_text(d.get("path")),
    )


def parse_integration(data: dict[str, Any]) -> IntegrationEntry:
    """Parse a single integration entry from a dictionary."""
    d = _normalise_keys(data, keep_slug=True)
    slug = _text(d.get("slug"))

    return IntegrationEntry(
        slug=slug,
        name=_text(d.get("name")),
        category=_text(d.get("category")),
        connection_method=_text(d.get("connection_method")),
        description=_text(d.get("description")),
        why_use_it=_text(d.get("why_use_it")),
        field_mappings=_pairs(slug, "field_mappings", d.get("field_mappings"), _field_mapping, "source_field"),
        workflows=_pairs(slug, "workflows", d.get("workflows"), _workflow, "title"),
        setup_steps=_strings(slug, "setup_steps", d.get("setup_steps")),
        faqs=_pairs(slug, "faqs", d.get("faqs"), _faq, "question"),
        keywords=_strings(slug, "keywords", d.get("keywords")),
        logo=_text(d.get("logo")),
    )


def read_data_file(path: str | Path) -> Any:
    """Read a YAML or JSON file."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def _entries(data: Any, key: str, source: str) -> list:
    """Accept either a bare list or a mapping with the list under `key`."""
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get(key, [])
    if not isinstance(data, list):
        raise ValidationError(f"Expected a list of {key} in {source}")
    return data


def _parse_all(data: Any, key: str, source: str, parse: Callable[[dict[str, Any]], T]) -> list[T]:
    result = []
    for index, item in enumerate(_entries(data, key, source)):
        if not isinstance(item, dict):
            raise ValidationError(f"Entry {index} in {source} is not a mapping")
        result.append(parse(item))
    return result


def load_batch(source: str | Path | list | dict) -> list[IntegrationEntry]:
    """Load one batch of integration entries from a file or parsed data."""
    if isinstance(source, (list, dict)):
        entries = _parse_all(source, "integrations", "<data>", parse_integration)
    else:
        entries = _parse_all(read_data_file(source), "integrations", str(source), parse_integration)
        logger.info(f"Loaded {len(entries)} integrations from {source}")
    return entries


def load_posts(source: str | Path | list | dict) -> list[ContentRecord]:
    """Load content records from a file, a directory of files, or parsed data."""
    if isinstance(source, (list, dict)):
        return _parse_all(source, "posts", "<data>", parse_record)

    path = Path(source)
    if not path.is_dir():
        records = _parse_all(read_data_file(path), "posts", str(path), parse_record)
        logger.info(f"Loaded {len(records)} posts from {path}")
        return records

    records: list[ContentRecord] = []
    for file_path in data_files(path):
        records.extend(load_posts(file_path))
    return records


def data_files(directory: Path) -> list[Path]:
    """YAML/JSON files in a directory, in stable (sorted) order."""
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix in (".yaml", ".yml", ".json")
    )
