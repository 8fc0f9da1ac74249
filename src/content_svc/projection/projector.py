"""Dual view projector - derives the machine view from a content record.

The machine view is a lossless compression of the page's facts:

- lists (FAQs, section items, key facts) are carried over whole, in order
- the synopsis is the leading sentences of the description; every
  sentence it cuts off is kept as a highlight
- section prose is split into a summary sentence and the remaining
  sentences, which follow the section's items

Nothing is paraphrased, so the machine view can never state a fact the
human page does not.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..config import Config
from ..errors import IncompleteProjection
from ..records.types import ContentRecord, IntegrationEntry, Section, as_record
from .facts import leading_sentences, split_sentences
from .views import MachineLink, MachineSection, MachineView

logger = logging.getLogger(__name__)


def _project_section(record_id: str, section: Section) -> MachineSection:
    if not section.body.strip() and not section.items:
        raise IncompleteProjection(record_id, f"section '{section.title}' has no content")

    sentences = split_sentences(section.body)
    summary = sentences[0] if sentences else ""

    return MachineSection(
        title=section.title,
        summary=summary,
        items=tuple(section.items) + tuple(sentences[1:]),
        ordered=section.ordered,
    )


def project(
    record: ContentRecord | IntegrationEntry,
    config: Config | None = None,
    links: Iterable[MachineLink] = (),
) -> MachineView:
    """
    Build the machine view of a record.

    Args:
        record: Validated record (integration entries are converted first)
        config: Projection settings; defaults apply when omitted
        links: Related resources to list (navigation only)

    Raises:
        IncompleteProjection: the record lacks what a complete view needs
    """
    config = config or Config()
    record = as_record(record, config.site)
    settings = config.projection

    if not record.title.strip():
        raise IncompleteProjection(record.id, "no title")
    if not record.description.strip():
        raise IncompleteProjection(record.id, "no description to build a synopsis from")
    if settings.require_faqs and not record.faqs:
        raise IncompleteProjection(
            record.id, "the page renders an FAQ section but the record has no FAQs"
        )

    lead, rest = leading_sentences(record.description, settings.synopsis_max_chars)
    highlights = tuple(rest)

    view = MachineView(
        record_id=record.id,
        title=record.title,
        synopsis=" ".join(lead),
        published=record.publish_date,
        updated=record.updated_date,
        author=record.author.name if record.author else None,
        key_facts=record.key_facts,
        highlights=highlights,
        sections=tuple(_project_section(record.id, s) for s in record.sections),
        faqs=record.faqs,
        links=tuple(links),
    )
    logger.debug(f"Projected machine view for {record.id}: {len(view.sections)} sections")
    return view


def related_links(entries: Iterable[IntegrationEntry]) -> tuple[MachineLink, ...]:
    """Machine links for related integration entries."""
    return tuple(
        MachineLink(label=e.name, href=e.url_path, description=e.category)
        for e in entries
    )
