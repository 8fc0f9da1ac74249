"""Structured data - schema.org JSON-LD and page metadata."""

from .models import (
    ArticleSchema, BreadcrumbListSchema, FAQPageSchema, OrganizationSchema,
)
from .jsonld import (
    extract_faqs, script_tag, to_article_schema, to_breadcrumb_schema,
    to_faq_schema, to_json_ld, to_organization_schema,
)
from .metadata import PageMetadata, integration_metadata, record_metadata

__all__ = [
    "ArticleSchema",
    "BreadcrumbListSchema",
    "FAQPageSchema",
    "OrganizationSchema",
    "extract_faqs",
    "script_tag",
    "to_article_schema",
    "to_breadcrumb_schema",
    "to_faq_schema",
    "to_json_ld",
    "to_organization_schema",
    "PageMetadata",
    "integration_metadata",
    "record_metadata",
]
