"""Catalog system - merged registry of integration entries."""

from .registry import CatalogRegistry, build_catalog
from .loader import CatalogLoader, load_catalog, load_post_registry

__all__ = [
    "CatalogRegistry",
    "build_catalog",
    "CatalogLoader",
    "load_catalog",
    "load_post_registry",
]
