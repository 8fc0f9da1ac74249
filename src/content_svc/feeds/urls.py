"""Site URL enumeration for sitemaps and search-engine change notification."""

from __future__ import annotations

from typing import Iterable

from ..config import FeedConfig, SiteConfig
from ..records.types import ContentRecord, IntegrationEntry

# Hub pages that exist independently of authored records
HUB_PATHS = ("/", "/integrations", "/blog")


def all_urls(
    site: SiteConfig,
    catalog: Iterable[IntegrationEntry] = (),
    posts: Iterable[ContentRecord] = (),
    extra_paths: Iterable[str] = (),
    feed: FeedConfig | None = None,
) -> list[str]:
    """
    Absolute URLs of every indexable page, without duplicates.

    Order: hub pages, extra paths, integrations (catalog order), posts,
    then the feed when it is enabled.
    """
    paths: list[str] = [*HUB_PATHS, *extra_paths]
    paths.extend(entry.url_path for entry in catalog)
    paths.extend(post.url_path for post in posts)
    if feed is not None and feed.enabled:
        paths.append(feed.path)

    seen: set[str] = set()
    urls = []
    for path in paths:
        url = site.absolute_url(path)
        if url not in seen:
            seen.add(url)
            urls.append(url)
    return urls
