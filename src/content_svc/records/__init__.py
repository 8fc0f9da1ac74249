"""Content records - types, validation, loading and serialization."""

from .types import (
    Author, Breadcrumb, ConnectionMethod, ContentRecord, FAQ, FieldMapping,
    IntegrationEntry, Section, Workflow, as_record,
)
from .validator import parse_date, validate, validate_integration, validate_record
from .loader import load_batch, load_posts, parse_integration, parse_record
from .serializer import RecordSerializer

__all__ = [
    "Author",
    "Breadcrumb",
    "ConnectionMethod",
    "ContentRecord",
    "FAQ",
    "FieldMapping",
    "IntegrationEntry",
    "Section",
    "Workflow",
    "as_record",
    "parse_date",
    "validate",
    "validate_integration",
    "validate_record",
    "load_batch",
    "load_posts",
    "parse_integration",
    "parse_record",
    "RecordSerializer",
]
