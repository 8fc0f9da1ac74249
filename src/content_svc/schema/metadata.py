"""Page metadata - title, description, canonical URL and Open Graph tags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..records.types import ContentRecord, IntegrationEntry

if TYPE_CHECKING:
    from ..config import SiteConfig


@dataclass(frozen=True)
class PageMetadata:
    """Head metadata for one page."""
    title: str
    description: str
    canonical: str
    keywords: tuple[str, ...] = ()
    og_title: str = ""
    og_description: str = ""
    og_type: str = "article"
    og_image: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the nested shape page renderers expect."""
        open_graph: dict[str, Any] = {
            "title": self.og_title or self.title,
            "description": self.og_description or self.description,
            "type": self.og_type,
        }
        if self.og_image:
            open_graph["images"] = [self.og_image]

        result: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "alternates": {"canonical": self.canonical},
            "openGraph": open_graph,
        }
        if self.keywords:
            result["keywords"] = list(self.keywords)
        result.update(self.extra)
        return result


def integration_metadata(entry: IntegrationEntry, site: SiteConfig) -> PageMetadata:
    """Metadata for an integration detail page."""
    return PageMetadata(
        title=f"{site.brand} + {entry.name} Integration | Connect Your Data",
        description=f"Connect {site.brand} with {entry.name}. {entry.why_use_it}",
        canonical=site.absolute_url(entry.url_path),
        keywords=entry.keywords,
        og_title=f"{site.brand} + {entry.name} Integration",
        og_description=(
            f"Connect {site.brand} with {entry.name}. "
            "Setup guide, workflows, and data mapping."
        ),
    )


def record_metadata(record: ContentRecord, site: SiteConfig) -> PageMetadata:
    """Metadata for a guide or blog page."""
    return PageMetadata(
        title=record.title,
        description=record.description,
        canonical=site.absolute_url(record.url_path),
        keywords=record.keywords,
        og_image=site.absolute_url(record.hero_image) if record.hero_image else None,
    )
