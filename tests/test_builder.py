"""Tests for the site builder and CLI."""

import json

import pytest
import yaml

from content_svc import cli
from content_svc.builder import SiteBuilder
from content_svc.catalog import build_catalog
from content_svc.catalog.registry import CatalogRegistry
from content_svc.config import Config, ContentConfig, ProjectionConfig
from content_svc.errors import DuplicateSlug, IncompleteProjection, MalformedValue

from conftest import make_entry, make_record


@pytest.fixture
def sample_config(sample_content, site, tmp_path) -> Config:
    return Config(
        site=site,
        content=ContentConfig(
            integrations=str(sample_content / "integrations"),
            posts=str(sample_content / "posts"),
        ),
    )


class TestSiteBuilder:
    def test_pages(self, sample_config):
        pages = SiteBuilder(sample_config).pages()
        keys = [p.key for p in pages]
        assert keys[:3] == ["salesforce", "hubspot", "pipedrive"]
        assert "what-is-b2b-intent-data" in keys
        assert all(not p.parity_issues for p in pages)

    def test_integration_page(self, sample_config):
        page = SiteBuilder(sample_config).page("hubspot")
        assert page.kind == "integration"
        assert [type(s).__name__ for s in page.schemas] == ["FAQPageSchema", "BreadcrumbListSchema"]
        assert [link.href for link in page.machine.links] == [
            "/integrations/salesforce", "/integrations/pipedrive",
        ]
        assert page.metadata.title == "Cursive + HubSpot Integration | Connect Your Data"

    def test_post_page(self, sample_config):
        page = SiteBuilder(sample_config).page("what-is-b2b-intent-data")
        assert page.kind == "post"
        assert [type(s).__name__ for s in page.schemas] == [
            "ArticleSchema", "FAQPageSchema", "BreadcrumbListSchema",
        ]
        assert page.machine.highlights

    def test_unknown_page(self, sample_config):
        assert SiteBuilder(sample_config).page("nope") is None

    def test_no_sources(self, config):
        builder = SiteBuilder(config)
        assert builder.pages() == []
        assert builder.urls()[0] == "https://example.com/"

    def test_record_without_faqs_stops_build(self, config):
        posts = CatalogRegistry().register([make_record(faqs=())])
        with pytest.raises(IncompleteProjection):
            SiteBuilder(config, posts=posts).pages()

    def test_duplicate_across_batches_stops_build(self, config):
        with pytest.raises(DuplicateSlug):
            SiteBuilder(config, catalog=build_catalog([make_entry("a")], [make_entry("a")]))

    def test_post_id_clashing_with_slug_stops_build(self, config):
        catalog = CatalogRegistry().register([make_entry("hubspot")])
        posts = CatalogRegistry().register([make_record("hubspot", path="/blog/hubspot")])
        builder = SiteBuilder(config, catalog=catalog, posts=posts)
        with pytest.raises(DuplicateSlug) as exc_info:
            builder.pages()
        assert exc_info.value.slug == "hubspot"
        with pytest.raises(DuplicateSlug):
            builder.page("hubspot")

    def test_unsafe_slug_never_reaches_output(self, config):
        with pytest.raises(MalformedValue):
            SiteBuilder(config, catalog=CatalogRegistry().register([make_entry("../../escaped")]))

    def test_build_writes_outputs(self, sample_config, tmp_path):
        out = tmp_path / "build"
        result = SiteBuilder(sample_config).build(out)

        assert (out / "jsonld" / "hubspot.json").exists()
        assert (out / "machine" / "hubspot.md").exists()
        assert (out / "meta" / "what-is-b2b-intent-data.json").exists()
        assert (out / "feed.xml").exists()
        assert set(result.files) >= {out / "catalog.yaml", out / "urls.txt"}

        nodes = json.loads((out / "jsonld" / "hubspot.json").read_text())
        assert nodes[0]["@type"] == "FAQPage"

        machine = json.loads((out / "machine" / "what-is-b2b-intent-data.json").read_text())
        assert machine["key_facts"][0].startswith("Cursive achieves a 70%")

        catalog = yaml.safe_load((out / "catalog.yaml").read_text())
        assert [e["slug"] for e in catalog["integrations"]][:2] == ["salesforce", "hubspot"]
        assert catalog["integrations"][1]["connection_method"] == "native"

        urls = (out / "urls.txt").read_text().splitlines()
        assert "https://example.com/integrations/google-sheets" in urls

    def test_parity_report_only(self, record, config, monkeypatch):
        from content_svc import builder as builder_module
        from content_svc.projection.parity import ParityIssue

        monkeypatch.setattr(
            builder_module, "check_parity",
            lambda human, machine: [ParityIssue("missing-claim", "70%")],
        )
        config.projection = ProjectionConfig(enforce_parity=False)
        posts = CatalogRegistry().register([record])
        page = SiteBuilder(config, posts=posts).pages()[0]
        assert [str(i) for i in page.parity_issues] == ["missing-claim: 70%"]


class TestCli:
    def test_validate(self, sample_content, capsys):
        code = cli.main([
            "--integrations", str(sample_content / "integrations"),
            "--posts", str(sample_content / "posts"),
            "validate",
        ])
        assert code == 0
        assert "pages valid" in capsys.readouterr().out

    def test_show_json(self, sample_content, capsys):
        code = cli.main([
            "--integrations", str(sample_content / "integrations"),
            "show", "zoominfo", "--format", "json",
        ])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["machine"]["id"] == "zoominfo"
        assert data["jsonld"][0]["@type"] == "FAQPage"

    def test_show_unknown(self, sample_content):
        assert cli.main(["--integrations", str(sample_content / "integrations"), "show", "nope"]) == 1

    def test_invalid_content_exits_non_zero(self, tmp_path, capsys):
        (tmp_path / "batch.yaml").write_text(yaml.safe_dump({"integrations": [{"slug": "x"}]}))
        assert cli.main(["--integrations", str(tmp_path), "validate"]) == 1
        assert "Missing required field 'name'" in capsys.readouterr().err

    def test_build(self, sample_content, tmp_path):
        out = tmp_path / "site"
        code = cli.main([
            "--integrations", str(sample_content / "integrations"),
            "build", "--output", str(out),
        ])
        assert code == 0
        assert (out / "urls.txt").exists()

    def test_invalid_article_type_exits_cleanly(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"schema": {"article_type": "NewsArticle"}}))
        assert cli.main(["--config", str(path), "validate"]) == 2
        assert "article_type" in capsys.readouterr().err

    def test_clashing_keys_exit_non_zero(self, tmp_path, capsys):
        (tmp_path / "integrations").mkdir()
        (tmp_path / "posts").mkdir()
        entry = {
            "slug": "hubspot", "name": "HubSpot", "category": "CRM",
            "connection_method": "native", "description": "A CRM.",
            "why_use_it": "Sync visitors.", "setup_steps": ["Connect."],
            "faqs": [{"question": "Free?", "answer": "Yes."}],
        }
        post = {
            "id": "hubspot", "title": "HubSpot", "description": "A guide.",
            "faqs": [{"question": "Free?", "answer": "Yes."}],
        }
        (tmp_path / "integrations" / "batch.yaml").write_text(yaml.safe_dump({"integrations": [entry]}))
        (tmp_path / "posts" / "posts.yaml").write_text(yaml.safe_dump({"posts": [post]}))
        code = cli.main([
            "--integrations", str(tmp_path / "integrations"),
            "--posts", str(tmp_path / "posts"),
            "validate",
        ])
        assert code == 1
        assert "Duplicate slug 'hubspot'" in capsys.readouterr().err

    def test_no_command(self):
        assert cli.main([]) == 1
