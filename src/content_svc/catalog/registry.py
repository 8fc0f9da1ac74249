"""Catalog registry - the merged, duplicate-checked collection of entries."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, TypeVar

from ..errors import DuplicateSlug, RegistrySealed
from ..records.types import ContentRecord, IntegrationEntry
from ..records.validator import validate

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", IntegrationEntry, ContentRecord)


@dataclass
class CatalogRegistry(Generic[EntryT]):
    """
    Thread-safe, build-once registry of catalog entries.

    Entries are keyed by slug (or id for content records). Supports:
    - Validation of every entry before it is indexed
    - Duplicate detection across all registered entries
    - Category index, insertion-ordered within each category
    - Sealing: registration happens exactly once per build
    """
    _entries: dict[str, EntryT] = field(default_factory=dict)
    _by_category: dict[str, list[str]] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock)
    _sealed: bool = False

    def register(self, entries: Iterable[EntryT]) -> CatalogRegistry[EntryT]:
        """
        Validate and index entries in input order, then seal the registry.

        Nothing is committed unless every entry validates and every key is
        unique; the first failure is raised.

        Raises:
            ValidationError: an entry failed validation
            DuplicateSlug: a key appeared more than once
            RegistrySealed: the registry was already built
        """
        with self._lock:
            if self._sealed:
                raise RegistrySealed("Catalog already registered; it is read-only for this build")

            staged: dict[str, EntryT] = {}
            positions: dict[str, int] = {}
            by_category: dict[str, list[str]] = {}

            for index, entry in enumerate(entries):
                valid = validate(entry)
                key = valid.key
                if key in staged:
                    raise DuplicateSlug(key, first_index=positions[key], index=index)
                staged[key] = valid
                positions[key] = index
                by_category.setdefault(valid.category, []).append(key)
                logger.debug(f"Registered catalog entry: {key}")

            self._entries = staged
            self._by_category = by_category
            self._sealed = True

        logger.info(f"Registered {len(staged)} entries in {len(by_category)} categories")
        return self

    @property
    def sealed(self) -> bool:
        with self._lock:
            return self._sealed

    def lookup(self, slug: str) -> EntryT | None:
        """Get an entry by slug."""
        with self._lock:
            return self._entries.get(slug)

    def all(self) -> list[EntryT]:
        """All entries, in registration order."""
        with self._lock:
            return list(self._entries.values())

    def slugs(self) -> list[str]:
        """All keys, in registration order."""
        with self._lock:
            return list(self._entries.keys())

    def by_category(self, category: str) -> list[EntryT]:
        """Entries in a category, in registration order."""
        with self._lock:
            return [self._entries[k] for k in self._by_category.get(category, [])]

    def categories(self) -> set[str]:
        with self._lock:
            return set(self._by_category.keys())

    def related(self, slug: str, limit: int = 4) -> list[EntryT]:
        """Other entries in the same category as `slug`, in registration order."""
        with self._lock:
            entry = self._entries.get(slug)
            if entry is None:
                return []
            keys = [k for k in self._by_category.get(entry.category, []) if k != slug]
            return [self._entries[k] for k in keys[:limit]]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, slug: object) -> bool:
        with self._lock:
            return slug in self._entries

    def __iter__(self) -> Iterator[EntryT]:
        return iter(self.all())


def build_catalog(*batches: Iterable[EntryT]) -> CatalogRegistry[EntryT]:
    """
    Merge partitioned batches into one sealed registry.

    Batches are concatenated in the order given, so duplicate detection and
    registration order span every batch.
    """
    merged: list[EntryT] = []
    for batch in batches:
        merged.extend(batch)
    logger.debug(f"Merging {len(batches)} batches ({len(merged)} entries)")
    return CatalogRegistry().register(merged)
