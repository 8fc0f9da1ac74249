"""View types - the human page structure and the condensed machine view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..records.types import Breadcrumb, FAQ

FAQ_HEADING = "Frequently Asked Questions"


@dataclass(frozen=True, slots=True)
class Byline:
    author: str | None = None
    author_role: str | None = None
    published: str | None = None
    updated: str | None = None


@dataclass(frozen=True, slots=True)
class HumanSection:
    title: str
    body: str = ""
    items: tuple[str, ...] = ()
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class HumanView:
    """
    The structure a page renderer lays out for readers.

    It holds every piece of prose shown on the page, in page order.
    Layout chrome (CTAs, navigation, related links) is not part of it.
    """
    record_id: str
    title: str
    description: str
    byline: Byline | None = None
    key_facts: tuple[str, ...] = ()
    sections: tuple[HumanSection, ...] = ()
    faq_heading: str | None = None
    faqs: tuple[FAQ, ...] = ()
    breadcrumbs: tuple[Breadcrumb, ...] = ()

    @property
    def published(self) -> str | None:
        return self.byline.published if self.byline else None

    def text(self) -> str:
        """All prose on the page, one block per line."""
        parts = [self.title, self.description, *self.key_facts]
        for section in self.sections:
            parts.append(section.title)
            if section.body:
                parts.append(section.body)
            parts.extend(section.items)
        for faq in self.faqs:
            parts.extend((faq.question, faq.answer))
        return "\n".join(parts)


@dataclass(frozen=True, slots=True)
class MachineSection:
    title: str
    summary: str = ""
    items: tuple[str, ...] = ()
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class MachineLink:
    label: str
    href: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class MachineView:
    """
    Condensed, fact-preserving view of a record for crawlers and agents.

    Lists are complete (never truncated). Prose is restructured into
    synopsis, highlights, summaries and items, every sentence kept
    verbatim. Links are navigation and carry no facts about the record.
    """
    record_id: str
    title: str
    synopsis: str
    published: str | None = None
    updated: str | None = None
    author: str | None = None
    key_facts: tuple[str, ...] = ()
    highlights: tuple[str, ...] = ()
    sections: tuple[MachineSection, ...] = ()
    faqs: tuple[FAQ, ...] = ()
    links: tuple[MachineLink, ...] = ()

    def text(self) -> str:
        """All fact-bearing text in the view, one block per line."""
        parts = [self.title, self.synopsis, *self.key_facts, *self.highlights]
        for section in self.sections:
            parts.append(section.title)
            if section.summary:
                parts.append(section.summary)
            parts.extend(section.items)
        for faq in self.faqs:
            parts.extend((faq.question, faq.answer))
        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dictionary, omitting empty fields."""
        result: dict[str, Any] = {
            "id": self.record_id,
            "title": self.title,
            "synopsis": self.synopsis,
        }
        if self.published:
            result["published"] = self.published
        if self.updated:
            result["updated"] = self.updated
        if self.author:
            result["author"] = self.author
        if self.key_facts:
            result["key_facts"] = list(self.key_facts)
        if self.highlights:
            result["highlights"] = list(self.highlights)
        if self.sections:
            result["sections"] = [
                {
                    k: v for k, v in (
                        ("title", s.title),
                        ("summary", s.summary),
                        ("items", list(s.items)),
                        ("ordered", s.ordered),
                    ) if v
                }
                for s in self.sections
            ]
        if self.faqs:
            result["faqs"] = [{"question": f.question, "answer": f.answer} for f in self.faqs]
        if self.links:
            result["links"] = [
                {k: v for k, v in (("label", l.label), ("href", l.href), ("description", l.description)) if v}
                for l in self.links
            ]
        return result
