"""Human view - the page structure readers see, derived from a record."""

from __future__ import annotations

from ..config import Config
from ..records.types import ContentRecord, IntegrationEntry, as_record
from .views import FAQ_HEADING, Byline, HumanSection, HumanView


def render_human(
    record: ContentRecord | IntegrationEntry,
    config: Config | None = None,
) -> HumanView:
    """
    Lay out a record as the human-facing page.

    The FAQ section is rendered whenever the record has FAQs, or always
    when pages are configured to carry one.
    """
    config = config or Config()
    record = as_record(record, config.site)

    byline = None
    if record.author or record.publish_date or record.updated_date:
        byline = Byline(
            author=record.author.name if record.author else None,
            author_role=record.author.role if record.author else None,
            published=record.publish_date,
            updated=record.updated_date,
        )

    show_faqs = bool(record.faqs) or config.projection.require_faqs

    return HumanView(
        record_id=record.id,
        title=record.title,
        description=record.description,
        byline=byline,
        key_facts=record.key_facts,
        sections=tuple(
            HumanSection(title=s.title, body=s.body, items=s.items, ordered=s.ordered)
            for s in record.sections
        ),
        faq_heading=FAQ_HEADING if show_faqs else None,
        faqs=record.faqs,
        breadcrumbs=record.breadcrumbs,
    )
