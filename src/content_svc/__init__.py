"""
Content Service - single-source content projection

A build-time pipeline providing:
- Validated content records (guide pages and integration entries)
- A merged, duplicate-checked integrations catalog
- Structured data (JSON-LD) for search engines
- Human and machine views of every record, kept in semantic parity
"""

__version__ = "0.1.0"
