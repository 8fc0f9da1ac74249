"""Record types - content records, integration entries and their parts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import SiteConfig


class ConnectionMethod(str, Enum):
    """How an integration receives data."""
    NATIVE = "native"
    WEBHOOK = "webhook"
    CSV = "csv"
    ZAPIER = "zapier"
    COMING_SOON = "coming-soon"

    @property
    def label(self) -> str:
        """Badge label shown on the integration page."""
        return _CONNECTION_LABELS[self]


_CONNECTION_LABELS = {
    ConnectionMethod.NATIVE: "Native Integration",
    ConnectionMethod.WEBHOOK: "Via Webhook",
    ConnectionMethod.CSV: "Via CSV Export",
    ConnectionMethod.ZAPIER: "Via Zapier",
    ConnectionMethod.COMING_SOON: "Coming Soon",
}


@dataclass(frozen=True, slots=True)
class FAQ:
    """A question/answer pair."""
    question: str
    answer: str


@dataclass(frozen=True, slots=True)
class Breadcrumb:
    """One breadcrumb; its position is implied by its index in the trail."""
    name: str
    path: str


@dataclass(frozen=True, slots=True)
class FieldMapping:
    """How one of our fields lands in the connected tool."""
    source_field: str
    target_field: str
    description: str


@dataclass(frozen=True, slots=True)
class Workflow:
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class Author:
    name: str
    role: str | None = None
    url: str | None = None


@dataclass(frozen=True, slots=True)
class Section:
    """
    A titled block of a page.

    The body is prose; items are list entries rendered under it.
    Ordered sections render their items as numbered steps.
    """
    title: str
    body: str = ""
    items: tuple[str, ...] = ()
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class ContentRecord:
    """
    One publishable unit of content (a guide, a blog post, a landing page).

    This is the single source every derived view is built from:
    the human page, the machine view and the JSON-LD payloads.
    """
    id: str
    title: str
    description: str
    faqs: tuple[FAQ, ...] = ()

    # Article metadata (all optional)
    publish_date: str | None = None   # ISO date, e.g. "2026-01-15"
    updated_date: str | None = None
    author: Author | None = None
    hero_image: str | None = None
    image_alt: str | None = None

    breadcrumbs: tuple[Breadcrumb, ...] = ()
    keywords: tuple[str, ...] = ()
    category: str = ""
    tags: tuple[str, ...] = ()

    # Page body
    sections: tuple[Section, ...] = ()

    # Enumerated facts that appear verbatim on the page (rates, prices, ...)
    key_facts: tuple[str, ...] = ()

    # Site-relative URL path; defaults to the last breadcrumb's path
    path: str | None = None

    @property
    def key(self) -> str:
        return self.id

    @property
    def url_path(self) -> str:
        """Site-relative path of the page."""
        if self.path:
            return self.path
        if self.breadcrumbs:
            return self.breadcrumbs[-1].path
        return f"/{self.id}"


@dataclass(frozen=True, slots=True)
class IntegrationEntry:
    """
    An entry in the integrations catalog.

    Integration pages are a specialisation of ContentRecord: to_record()
    derives the canonical record that the schema and view builders consume.
    """
    slug: str
    name: str
    category: str
    connection_method: ConnectionMethod | str
    description: str
    why_use_it: str
    field_mappings: tuple[FieldMapping, ...] = ()
    workflows: tuple[Workflow, ...] = ()
    setup_steps: tuple[str, ...] = ()
    faqs: tuple[FAQ, ...] = ()
    keywords: tuple[str, ...] = ()
    logo: str = ""

    @property
    def key(self) -> str:
        return self.slug

    @property
    def url_path(self) -> str:
        return f"/integrations/{self.slug}"

    @property
    def method(self) -> ConnectionMethod:
        """The connection method as an enum (raises ValueError if unknown)."""
        return ConnectionMethod(self.connection_method)

    def to_record(self, site: SiteConfig) -> ContentRecord:
        """Derive the content record for this integration's page."""
        sections = [Section(title="Why Connect", body=self.why_use_it)]

        if self.field_mappings:
            sections.append(Section(
                title="How Your Data Flows",
                items=tuple(
                    f"{m.source_field} → {m.target_field}: {m.description}"
                    for m in self.field_mappings
                ),
            ))

        if self.workflows:
            sections.append(Section(
                title="What You Can Do",
                items=tuple(f"{w.title}: {w.description}" for w in self.workflows),
            ))

        sections.append(Section(
            title="How to Connect",
            items=self.setup_steps,
            ordered=True,
        ))

        return ContentRecord(
            id=self.slug,
            title=f"{site.brand} + {self.name} Integration",
            description=self.description,
            faqs=self.faqs,
            breadcrumbs=(
                Breadcrumb(name="Home", path="/"),
                Breadcrumb(name="Integrations", path="/integrations"),
                Breadcrumb(name=self.name, path=self.url_path),
            ),
            keywords=self.keywords,
            category=self.category,
            sections=tuple(sections),
            key_facts=(
                f"Category: {self.category}",
                f"Connection: {self.method.label}",
            ),
            path=self.url_path,
        )


def as_record(record: ContentRecord | IntegrationEntry, site: SiteConfig) -> ContentRecord:
    """The content record behind any record kind."""
    if isinstance(record, IntegrationEntry):
        return record.to_record(site)
    return record
