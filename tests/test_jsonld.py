"""Tests for JSON-LD structured data."""

import dataclasses
import json

import pytest

from content_svc.errors import MissingField
from content_svc.records.types import FAQ, Author
from content_svc.schema import (
    extract_faqs,
    script_tag,
    to_article_schema,
    to_breadcrumb_schema,
    to_faq_schema,
    to_json_ld,
    to_organization_schema,
)


class TestFaqSchema:
    def test_two_questions_in_order(self, record):
        record = dataclasses.replace(record, faqs=(FAQ("Q1", "A1"), FAQ("Q2", "A2")))
        data = to_faq_schema(record).to_dict()

        assert data["@context"] == "https://schema.org"
        assert data["@type"] == "FAQPage"
        assert len(data["mainEntity"]) == 2
        assert data["mainEntity"][0] == {
            "@type": "Question",
            "name": "Q1",
            "acceptedAnswer": {"@type": "Answer", "text": "A1"},
        }
        assert data["mainEntity"][1]["name"] == "Q2"

    def test_round_trip(self, record):
        assert extract_faqs(to_faq_schema(record)) == record.faqs

    def test_round_trip_through_json(self, record):
        data = json.loads(to_json_ld(to_faq_schema(record)))
        pairs = [(q["name"], q["acceptedAnswer"]["text"]) for q in data["mainEntity"]]
        assert pairs == [(f.question, f.answer) for f in record.faqs]

    def test_no_faqs_is_an_error(self, record):
        with pytest.raises(MissingField) as exc_info:
            to_faq_schema(dataclasses.replace(record, faqs=()))
        assert exc_info.value.field == "faqs"

    def test_page_url(self, record):
        data = to_faq_schema(record, page_url="https://example.com/blog/x").to_dict()
        assert data["url"] == "https://example.com/blog/x"

    def test_url_omitted_when_absent(self, record):
        assert "url" not in to_faq_schema(record).to_dict()

    def test_integration_entry(self, entry):
        data = to_faq_schema(entry).to_dict()
        assert data["mainEntity"][0]["name"] == "Is it free?"


class TestArticleSchema:
    def test_full_article(self, record, site):
        data = to_article_schema(record, site).to_dict()

        assert data["@type"] == "Article"
        assert data["headline"] == record.title
        assert data["datePublished"] == "2026-02-04"
        assert data["dateModified"] == "2026-02-18"
        assert data["author"] == {"@type": "Person", "name": "Adam Wolfe", "jobTitle": "Founder"}
        assert data["image"] == "https://example.com/images/intent.png"
        assert data["keywords"] == "intent data, buyer intent"
        assert data["mainEntityOfPage"] == {
            "@type": "WebPage",
            "@id": "https://example.com/blog/intent-guide",
        }
        assert data["publisher"]["name"] == "Cursive"
        assert "@context" not in data["publisher"]

    def test_optional_fields_are_omitted(self, record, site):
        bare = dataclasses.replace(
            record, author=None, publish_date=None, updated_date=None,
            hero_image=None, keywords=(),
        )
        data = to_article_schema(bare, site).to_dict()
        for key in ("author", "datePublished", "dateModified", "image", "keywords"):
            assert key not in data
        assert None not in data.values()
        assert "" not in data.values()

    def test_author_without_role(self, record, site):
        data = to_article_schema(
            dataclasses.replace(record, author=Author("Sam")), site
        ).to_dict()
        assert data["author"] == {"@type": "Person", "name": "Sam"}

    def test_blog_posting(self, record, site):
        data = to_article_schema(record, site, article_type="BlogPosting").to_dict()
        assert data["@type"] == "BlogPosting"


class TestBreadcrumbSchema:
    def test_positions_are_one_based(self, record, site):
        data = to_breadcrumb_schema(record, site).to_dict()
        items = data["itemListElement"]
        assert [i["position"] for i in items] == [1, 2, 3]
        assert [i["name"] for i in items] == ["Home", "Blog", "Intent Data"]

    def test_items_are_absolute(self, record, site):
        items = to_breadcrumb_schema(record, site).to_dict()["itemListElement"]
        assert items[0]["item"] == "https://example.com/"
        assert items[2]["item"] == "https://example.com/blog/intent-guide"

    def test_no_breadcrumbs_is_an_error(self, record, site):
        with pytest.raises(MissingField):
            to_breadcrumb_schema(dataclasses.replace(record, breadcrumbs=()), site)

    def test_integration_trail(self, entry, site):
        items = to_breadcrumb_schema(entry.to_record(site), site).to_dict()["itemListElement"]
        assert [i["name"] for i in items] == ["Home", "Integrations", "Hubspot"]
        assert items[-1]["item"] == "https://example.com/integrations/hubspot"


class TestOrganizationSchema:
    def test_standalone(self, site):
        data = to_organization_schema(site).to_dict()
        assert data["@context"] == "https://schema.org"
        assert data["@type"] == "Organization"
        assert data["logo"]["url"] == "https://example.com/cursive-logo.png"
        assert "sameAs" not in data

    def test_same_as(self, site):
        site.same_as = ["https://www.linkedin.com/company/cursive"]
        data = to_organization_schema(site).to_dict()
        assert data["sameAs"] == ["https://www.linkedin.com/company/cursive"]


class TestScriptTag:
    def test_wraps_payload(self, record):
        tag = script_tag(to_faq_schema(record))
        assert tag.startswith('<script type="application/ld+json">')
        assert tag.endswith("</script>")

    def test_escapes_closing_tags(self, record):
        record = dataclasses.replace(record, faqs=(FAQ("Q?", "Use </script> carefully"),))
        tag = script_tag(to_faq_schema(record))
        payload = tag[len('<script type="application/ld+json">'):-len("</script>")]
        assert "</script>" not in payload
        assert json.loads(payload)["mainEntity"][0]["acceptedAnswer"]["text"] == "Use </script> carefully"
