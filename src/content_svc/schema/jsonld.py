"""Structured data synthesizer - content records to schema.org JSON-LD.

All functions are pure: the same record always yields the same payload,
and nothing from the record is reordered, renamed or dropped.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..errors import MissingField
from ..records.types import ContentRecord, FAQ, IntegrationEntry
from .models import (
    Answer, ArticleSchema, BreadcrumbListSchema, FAQPageSchema, ImageObject,
    ListItem, OrganizationSchema, Person, Question, SchemaNode, WebPageRef,
    SCHEMA_CONTEXT,
)

if TYPE_CHECKING:
    from ..config import SiteConfig


def to_faq_schema(
    record: ContentRecord | IntegrationEntry,
    page_url: str | None = None,
) -> FAQPageSchema:
    """
    Build an FAQPage with one Question per FAQ, in record order.

    Raises:
        MissingField: the record has no FAQs (no placeholder pairs are made up)
    """
    if not record.faqs:
        raise MissingField("faqs", record_id=record.key)

    return FAQPageSchema(
        url=page_url,
        main_entity=[
            Question(name=faq.question, accepted_answer=Answer(text=faq.answer))
            for faq in record.faqs
        ],
    )


def extract_faqs(schema: FAQPageSchema) -> tuple[FAQ, ...]:
    """Recover the question/answer pairs from an FAQPage."""
    return tuple(
        FAQ(question=q.name, answer=q.accepted_answer.text)
        for q in schema.main_entity
    )


def to_organization_schema(site: SiteConfig, *, standalone: bool = True) -> OrganizationSchema:
    """Organization node for the site publisher."""
    return OrganizationSchema(
        context=SCHEMA_CONTEXT if standalone else None,
        name=site.name,
        url=site.absolute_url("/"),
        logo=ImageObject(url=site.absolute_url(site.logo)) if site.logo else None,
        same_as=list(site.same_as) or None,
    )


def to_article_schema(
    record: ContentRecord,
    site: SiteConfig,
    article_type: str = "Article",
) -> ArticleSchema:
    """
    Build Article (or BlogPosting) metadata.

    Optional fields the record does not carry are left out of the payload.
    """
    author = None
    if record.author is not None:
        author = Person(
            name=record.author.name,
            job_title=record.author.role,
            url=record.author.url,
        )

    return ArticleSchema(
        type_=article_type,
        headline=record.title,
        description=record.description or None,
        author=author,
        date_published=record.publish_date,
        date_modified=record.updated_date,
        image=site.absolute_url(record.hero_image) if record.hero_image else None,
        publisher=to_organization_schema(site, standalone=False),
        main_entity_of_page=WebPageRef(id_=site.absolute_url(record.url_path)),
        keywords=", ".join(record.keywords) or None,
    )


def to_breadcrumb_schema(record: ContentRecord, site: SiteConfig) -> BreadcrumbListSchema:
    """
    Build a BreadcrumbList; positions are 1..n in trail order.

    Raises:
        MissingField: the record has no breadcrumbs
    """
    if not record.breadcrumbs:
        raise MissingField("breadcrumbs", record_id=record.key)

    return BreadcrumbListSchema(
        item_list_element=[
            ListItem(position=index, name=crumb.name, item=site.absolute_url(crumb.path))
            for index, crumb in enumerate(record.breadcrumbs, start=1)
        ],
    )


def to_json_ld(schema: SchemaNode, indent: int | None = None) -> str:
    """Serialize a schema node as a JSON-LD document."""
    return json.dumps(schema.to_dict(), ensure_ascii=False, indent=indent)


def script_tag(schema: SchemaNode) -> str:
    """
    Wrap a schema node in an application/ld+json script element.

    "</" is escaped so prose containing "</script>" cannot close the tag;
    the payload stays valid JSON.
    """
    payload = to_json_ld(schema).replace("</", "<\\/")
    return f'<script type="application/ld+json">{payload}</script>'
