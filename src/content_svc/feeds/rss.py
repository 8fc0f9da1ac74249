"""RSS 2.0 feed of guide and blog posts."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable

from ..config import FeedConfig, SiteConfig
from ..errors import ValidationError
from ..records.types import ContentRecord
from ..records.validator import parse_date

logger = logging.getLogger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"

ET.register_namespace("atom", ATOM_NS)


def rfc822(value: str, record_id: str | None = None) -> str:
    """Format an ISO date ("2026-02-18" or a full timestamp) as an RFC 822 date."""
    return format_datetime(_parse(value, record_id), usegmt=True)


def _parse(value: str, record_id: str | None) -> datetime:
    try:
        return parse_date(value)
    except ValueError:
        raise ValidationError(
            f"Invalid date: {value!r}", record_id=record_id, field="publish_date"
        ) from None


def _text(parent: ET.Element, tag: str, value: str, **attrib: str) -> ET.Element:
    element = ET.SubElement(parent, tag, attrib)
    element.text = value
    return element


def build_feed(
    posts: Iterable[ContentRecord],
    site: SiteConfig,
    feed: FeedConfig | None = None,
    now: datetime | None = None,
) -> str:
    """
    Render posts as an RSS 2.0 document, newest first.

    Posts without a publish date are listed after dated ones and carry no
    pubDate. Text is escaped by the XML serializer.

    Args:
        posts: Post records
        site: Site identity for absolute links
        feed: Channel settings
        now: Build time for lastBuildDate (defaults to the current time)

    Returns:
        The feed as an XML string with declaration
    """
    feed = feed or FeedConfig()
    now = now or datetime.now(timezone.utc)

    # Undated posts sort last; ties keep registration order
    undated = datetime.min.replace(tzinfo=timezone.utc)
    ordered = sorted(
        posts,
        key=lambda p: _parse(p.publish_date, p.id) if p.publish_date else undated,
        reverse=True,
    )

    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _text(channel, "title", feed.title)
    _text(channel, "link", site.absolute_url(feed.blog_path))
    _text(channel, "description", feed.description)
    _text(channel, "language", feed.language)
    if feed.managing_editor:
        _text(channel, "managingEditor", feed.managing_editor)
    _text(channel, "lastBuildDate", format_datetime(now.astimezone(timezone.utc), usegmt=True))
    ET.SubElement(channel, f"{{{ATOM_NS}}}link", {
        "href": site.absolute_url(feed.path),
        "rel": "self",
        "type": "application/rss+xml",
    })

    image = ET.SubElement(channel, "image")
    _text(image, "url", site.absolute_url(site.logo))
    _text(image, "title", site.name)
    _text(image, "link", site.absolute_url(feed.blog_path))

    for post in ordered:
        url = site.absolute_url(post.url_path)
        item = ET.SubElement(channel, "item")
        _text(item, "title", post.title)
        _text(item, "link", url)
        _text(item, "guid", url, isPermaLink="true")
        _text(item, "description", post.description)
        if post.publish_date:
            _text(item, "pubDate", rfc822(post.publish_date, post.id))
        if post.category:
            _text(item, "category", post.category)

    logger.info(f"Built RSS feed with {len(ordered)} items")
    body = ET.tostring(rss, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
