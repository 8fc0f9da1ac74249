"""Shared test fixtures for the content pipeline tests."""

from pathlib import Path

import pytest

from content_svc.config import Config, SiteConfig
from content_svc.records.types import (
    Author,
    Breadcrumb,
    ConnectionMethod,
    ContentRecord,
    FAQ,
    FieldMapping,
    IntegrationEntry,
    Section,
    Workflow,
)

REPO_ROOT = Path(__file__).parent.parent


def make_entry(slug: str, category: str = "CRM", **overrides) -> IntegrationEntry:
    """A valid integration entry; override any field."""
    fields = dict(
        slug=slug,
        name=slug.replace("-", " ").title(),
        category=category,
        connection_method=ConnectionMethod.NATIVE,
        description=f"{slug.title()} is a sales platform used by 5,000 teams.",
        why_use_it=f"Send identified visitors to {slug.title()} automatically.",
        field_mappings=(
            FieldMapping("email", "Contact.email", "Creates or updates a contact"),
        ),
        workflows=(
            Workflow("Route hot leads", "Assign visitors with a score above 80 to an owner."),
        ),
        setup_steps=("Click Connect.", "Authorize access.", "Send a test event."),
        faqs=(FAQ("Is it free?", "Yes, on every plan."),),
        keywords=(f"{slug} integration",),
    )
    fields.update(overrides)
    return IntegrationEntry(**fields)


def make_record(record_id: str = "intent-guide", **overrides) -> ContentRecord:
    """A valid guide record; override any field."""
    fields = dict(
        id=record_id,
        title="What Is B2B Intent Data?",
        description=(
            "Intent data shows which accounts are researching a purchase. "
            "Cursive achieves a 70% identification rate on website visitors."
        ),
        faqs=(
            FAQ("What is intent data?", "Signals that an account is researching a purchase."),
            FAQ("How much does it cost?", "Plans start at $500/month."),
        ),
        publish_date="2026-02-04",
        updated_date="2026-02-18",
        author=Author("Adam Wolfe", role="Founder"),
        hero_image="/images/intent.png",
        breadcrumbs=(
            Breadcrumb("Home", "/"),
            Breadcrumb("Blog", "/blog"),
            Breadcrumb("Intent Data", "/blog/intent-guide"),
        ),
        keywords=("intent data", "buyer intent"),
        category="Guide",
        sections=(
            Section(
                "Key Takeaways",
                items=("Act within 24 hours", "Score by recency"),
            ),
            Section(
                "Why It Matters",
                body=(
                    "Most visitors never fill out a form. "
                    "Teams using intent see 2-3x higher reply rates. "
                    "It also shortens sales cycles."
                ),
            ),
        ),
        key_facts=("Identification rate: 70%",),
        path="/blog/intent-guide",
    )
    fields.update(overrides)
    return ContentRecord(**fields)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(base_url="https://example.com", name="Cursive", brand="Cursive")


@pytest.fixture
def config(site) -> Config:
    """Default test configuration."""
    return Config(site=site)


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def entry() -> IntegrationEntry:
    return make_entry("hubspot")


@pytest.fixture
def record() -> ContentRecord:
    return make_record()


@pytest.fixture
def sample_content() -> Path:
    return REPO_ROOT / "sample_content"
