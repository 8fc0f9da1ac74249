"""Record serializer - converts records to YAML-ready dicts."""

from __future__ import annotations

from typing import Any, Iterable

from .types import (
    Author, Breadcrumb, ConnectionMethod, ContentRecord, FAQ, FieldMapping,
    IntegrationEntry, Section, Workflow,
)


class RecordSerializer:
    """
    Serializes records to dictionaries for YAML/JSON output.

    Inverse of the loader's parse_record() / parse_integration().
    Omits empty/default values to keep output clean; list order is kept.
    """

    def serialize_integration(self, entry: IntegrationEntry) -> dict[str, Any]:
        """Serialize an IntegrationEntry to a dictionary."""
        method = entry.connection_method
        result: dict[str, Any] = {
            "slug": entry.slug,
            "name": entry.name,
            "category": entry.category,
            "connection_method": method.value if isinstance(method, ConnectionMethod) else method,
            "description": entry.description,
            "why_use_it": entry.why_use_it,
        }

        if entry.logo:
            result["logo"] = entry.logo
        if entry.field_mappings:
            result["field_mappings"] = [self.serialize_field_mapping(m) for m in entry.field_mappings]
        if entry.workflows:
            result["workflows"] = [self.serialize_workflow(w) for w in entry.workflows]
        if entry.setup_steps:
            result["setup_steps"] = list(entry.setup_steps)
        if entry.faqs:
            result["faqs"] = [self.serialize_faq(f) for f in entry.faqs]
        if entry.keywords:
            result["keywords"] = list(entry.keywords)

        return result

    def serialize_record(self, record: ContentRecord) -> dict[str, Any]:
        """Serialize a ContentRecord to a dictionary."""
        result: dict[str, Any] = {
            "id": record.id,
            "title": record.title,
            "description": record.description,
        }

        if record.path:
            result["path"] = record.path
        if record.category:
            result["category"] = record.category
        if record.publish_date:
            result["publish_date"] = record.publish_date
        if record.updated_date:
            result["updated_date"] = record.updated_date
        if record.author:
            result["author"] = self.serialize_author(record.author)
        if record.hero_image:
            result["hero_image"] = record.hero_image
        if record.image_alt:
            result["image_alt"] = record.image_alt
        if record.breadcrumbs:
            result["breadcrumbs"] = [self.serialize_breadcrumb(b) for b in record.breadcrumbs]
        if record.key_facts:
            result["key_facts"] = list(record.key_facts)
        if record.sections:
            result["sections"] = [self.serialize_section(s) for s in record.sections]
        if record.faqs:
            result["faqs"] = [self.serialize_faq(f) for f in record.faqs]
        if record.keywords:
            result["keywords"] = list(record.keywords)
        if record.tags:
            result["tags"] = list(record.tags)

        return result

    def serialize_faq(self, faq: FAQ) -> dict[str, Any]:
        return {"question": faq.question, "answer": faq.answer}

    def serialize_breadcrumb(self, crumb: Breadcrumb) -> dict[str, Any]:
        return {"name": crumb.name, "path": crumb.path}

    def serialize_field_mapping(self, mapping: FieldMapping) -> dict[str, Any]:
        return {
            "source_field": mapping.source_field,
            "target_field": mapping.target_field,
            "description": mapping.description,
        }

    def serialize_workflow(self, workflow: Workflow) -> dict[str, Any]:
        return {"title": workflow.title, "description": workflow.description}

    def serialize_author(self, author: Author) -> dict[str, Any]:
        """Serialize Author, omitting empty fields."""
        result: dict[str, Any] = {"name": author.name}
        if author.role:
            result["role"] = author.role
        if author.url:
            result["url"] = author.url
        return result

    def serialize_section(self, section: Section) -> dict[str, Any]:
        """Serialize Section, omitting default fields."""
        result: dict[str, Any] = {"title": section.title}
        if section.body:
            result["body"] = section.body
        if section.items:
            result["items"] = list(section.items)
        if section.ordered:
            result["ordered"] = True
        return result

    def serialize_catalog(self, entries: Iterable[IntegrationEntry]) -> dict[str, Any]:
        """
        Serialize a whole catalog in registration order.

        Returns:
            {"integrations": [...]}, loadable as a single batch
        """
        return {"integrations": [self.serialize_integration(e) for e in entries]}

    def serialize_posts(self, records: Iterable[ContentRecord]) -> dict[str, Any]:
        return {"posts": [self.serialize_record(r) for r in records]}
