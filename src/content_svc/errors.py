"""Error taxonomy for the content pipeline.

Every error here is an authoring error: it must surface at build time with
the record key and the offending field so the content can be fixed before
anything is published.
"""

from __future__ import annotations

from typing import Iterable


class ContentError(Exception):
    """Base class for all content pipeline errors."""
    pass


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class ValidationError(ContentError):
    """Raised when a record does not match its declared shape."""

    def __init__(self, message: str, record_id: str | None = None, field: str | None = None):
        prefix = f"[{record_id}] " if record_id else ""
        super().__init__(f"{prefix}{message}")
        self.record_id = record_id
        self.field = field


class MissingField(ValidationError):
    """A required string is blank or a required list is empty."""

    def __init__(self, field: str, record_id: str | None = None):
        super().__init__(f"Missing required field '{field}'", record_id=record_id, field=field)


class InvalidEnum(ValidationError):
    """A closed-set field holds a value outside its declared variants."""

    def __init__(self, field: str, value: object, allowed: Iterable[str], record_id: str | None = None):
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid value {value!r} for '{field}' (allowed: {', '.join(self.allowed)})",
            record_id=record_id,
            field=field,
        )


class MalformedValue(ValidationError):
    """A field is present but its value does not have the required format."""

    def __init__(self, field: str, value: object, expected: str, record_id: str | None = None):
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid value {value!r} for '{field}' (expected {expected})",
            record_id=record_id,
            field=field,
        )


class MalformedPair(ValidationError):
    """An element of a structured list is missing one of its sub-fields."""

    def __init__(self, field: str, index: int, missing: str, record_id: str | None = None):
        self.index = index
        self.missing = missing
        super().__init__(
            f"Malformed entry {field}[{index}]: missing '{missing}'",
            record_id=record_id,
            field=field,
        )


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

class RegistryError(ContentError):
    """Raised when entries cannot be merged into the catalog."""
    pass


class DuplicateSlug(RegistryError):
    """The same key was registered twice (possibly from different batches)."""

    def __init__(self, slug: str, first_index: int | None = None, index: int | None = None):
        self.slug = slug
        self.first_index = first_index
        self.index = index
        where = ""
        if first_index is not None and index is not None:
            where = f" (entries {first_index} and {index})"
        super().__init__(f"Duplicate slug '{slug}'{where}")


class RegistrySealed(RegistryError):
    """The registry was already built; a build registers exactly once."""
    pass


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

class ProjectionError(ContentError):
    """Raised when a derived view cannot be produced faithfully."""
    pass


class IncompleteProjection(ProjectionError):
    """A record lacks what is needed to build a complete machine view."""

    def __init__(self, record_id: str, reason: str):
        self.record_id = record_id
        self.reason = reason
        super().__init__(f"[{record_id}] Incomplete projection: {reason}")


class ParityMismatch(ProjectionError):
    """The human and machine views of a record disagree on facts."""

    def __init__(self, record_id: str, issues: list):
        self.record_id = record_id
        self.issues = list(issues)
        detail = "; ".join(str(i) for i in self.issues[:5])
        more = f" (+{len(self.issues) - 5} more)" if len(self.issues) > 5 else ""
        super().__init__(f"[{record_id}] Human/machine views disagree: {detail}{more}")
