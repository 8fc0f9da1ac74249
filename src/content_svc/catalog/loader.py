"""Catalog loader - loads integration batches and merges them into a registry."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..records.loader import data_files, load_batch, load_posts
from ..records.types import ContentRecord, IntegrationEntry
from .registry import CatalogRegistry, build_catalog

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Loads the integrations catalog from batch files.

    The catalog is authored as several independent batches (one file each).
    A directory is loaded in alphabetical file order; every batch is merged
    into a single registry with duplicate detection across all of them.
    """

    def load_batches(self, directory: str | Path) -> list[list[IntegrationEntry]]:
        """Load every batch file in a directory, in sorted order."""
        directory = Path(directory)

        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")

        batches = []
        for file_path in data_files(directory):
            logger.info(f"Loading catalog batch: {file_path}")
            batches.append(load_batch(file_path))
        return batches

    def load_directory(self, directory: str | Path) -> CatalogRegistry[IntegrationEntry]:
        return build_catalog(*self.load_batches(directory))

    def load_file(self, path: str | Path) -> CatalogRegistry[IntegrationEntry]:
        return build_catalog(load_batch(path))

    def load_dict(self, data: dict[str, Any] | list) -> CatalogRegistry[IntegrationEntry]:
        return build_catalog(load_batch(data))


def load_catalog(source: str | Path | dict | list) -> CatalogRegistry[IntegrationEntry]:
    """
    Convenience function to load the integrations catalog.

    Args:
        source: Directory of batch files, a single batch file, or parsed data

    Returns:
        Sealed CatalogRegistry
    """
    loader = CatalogLoader()

    if isinstance(source, (dict, list)):
        return loader.load_dict(source)

    path = Path(source)
    if path.is_dir():
        return loader.load_directory(path)
    return loader.load_file(path)


def load_post_registry(source: str | Path | dict | list) -> CatalogRegistry[ContentRecord]:
    """Load guide/blog records into their own registry (unique by id)."""
    return CatalogRegistry().register(load_posts(source))
