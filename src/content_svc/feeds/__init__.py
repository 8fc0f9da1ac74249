"""Feeds - RSS for posts and the site URL list."""

from .rss import build_feed
from .urls import all_urls

__all__ = ["all_urls", "build_feed"]
