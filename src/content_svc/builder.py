"""Site builder - runs the whole content pipeline for one build.

Flow:
1. Load integration batches and post records from the configured sources
2. Register each set once (validation and duplicate detection happen here)
3. For every record: render the human view, project the machine view,
   check parity, synthesize structured data and page metadata
4. Write the outputs (JSON-LD, machine views, merged catalog, feed, URLs)

Any authoring error stops the build with the offending record key.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .catalog.loader import load_catalog, load_post_registry
from .catalog.registry import CatalogRegistry
from .config import Config
from .errors import DuplicateSlug, ParityMismatch
from .feeds.rss import build_feed
from .feeds.urls import all_urls
from .projection.human import render_human
from .projection.markdown import render_markdown
from .projection.parity import ParityIssue, check_parity
from .projection.projector import project, related_links
from .projection.views import HumanView, MachineView
from .records.serializer import RecordSerializer
from .records.types import ContentRecord, IntegrationEntry
from .schema.jsonld import to_article_schema, to_breadcrumb_schema, to_faq_schema
from .schema.metadata import PageMetadata, integration_metadata, record_metadata
from .schema.models import SchemaNode

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """Every derived representation of one record."""
    key: str
    kind: str  # "integration" | "post"
    record: ContentRecord
    human: HumanView
    machine: MachineView
    schemas: list[SchemaNode]
    metadata: PageMetadata
    parity_issues: list[ParityIssue] = field(default_factory=list)


@dataclass
class BuildResult:
    """Summary of a build."""
    pages: list[Page]
    files: list[Path] = field(default_factory=list)

    @property
    def parity_issues(self) -> dict[str, list[ParityIssue]]:
        return {p.key: p.parity_issues for p in self.pages if p.parity_issues}


class SiteBuilder:
    """
    Builds every page representation from the configured content sources.

    Registries are loaded lazily on first use and are read-only afterwards.
    """

    def __init__(
        self,
        config: Config | None = None,
        catalog: CatalogRegistry[IntegrationEntry] | None = None,
        posts: CatalogRegistry[ContentRecord] | None = None,
    ):
        self.config = config or Config()
        self._catalog = catalog
        self._posts = posts
        self._serializer = RecordSerializer()
        self._loaded = False

    @property
    def catalog(self) -> CatalogRegistry[IntegrationEntry]:
        if self._catalog is None:
            source = self.config.content.integrations
            self._catalog = load_catalog(source) if source else CatalogRegistry().register([])
        return self._catalog

    @property
    def posts(self) -> CatalogRegistry[ContentRecord]:
        if self._posts is None:
            source = self.config.content.posts
            self._posts = load_post_registry(source) if source else CatalogRegistry().register([])
        return self._posts

    def load(self) -> None:
        """
        Load and register both content sets.

        Integration slugs and post ids share one output namespace, so a key
        may appear in only one of them.

        Raises:
            DuplicateSlug: a post id equals an integration slug
        """
        if self._loaded:
            return
        for record in self.posts:
            if record.id in self.catalog:
                raise DuplicateSlug(record.id)
        logger.info(
            f"Loaded {len(self.catalog)} integrations "
            f"({len(self.catalog.categories())} categories) and {len(self.posts)} posts"
        )
        self._loaded = True

    def _check(self, human: HumanView, machine: MachineView) -> list[ParityIssue]:
        issues = check_parity(human, machine)
        if issues:
            if self.config.projection.enforce_parity:
                raise ParityMismatch(machine.record_id, issues)
            for issue in issues:
                logger.warning(f"Parity issue in {machine.record_id}: {issue}")
        return issues

    def integration_page(self, entry: IntegrationEntry) -> Page:
        """Build every representation of an integration detail page."""
        site = self.config.site
        record = entry.to_record(site)
        links = related_links(self.catalog.related(entry.slug))

        human = render_human(record, self.config)
        machine = project(record, self.config, links=links)
        issues = self._check(human, machine)

        schemas: list[SchemaNode] = [
            to_faq_schema(record, page_url=site.absolute_url(record.url_path)),
            to_breadcrumb_schema(record, site),
        ]
        return Page(
            key=entry.slug,
            kind="integration",
            record=record,
            human=human,
            machine=machine,
            schemas=schemas,
            metadata=integration_metadata(entry, site),
            parity_issues=issues,
        )

    def post_page(self, record: ContentRecord) -> Page:
        """Build every representation of a guide or blog post."""
        site = self.config.site
        human = render_human(record, self.config)
        machine = project(record, self.config)
        issues = self._check(human, machine)

        schemas: list[SchemaNode] = [
            to_article_schema(record, site, article_type=self.config.schema.article_type),
        ]
        if record.faqs:
            schemas.append(to_faq_schema(record, page_url=site.absolute_url(record.url_path)))
        if record.breadcrumbs:
            schemas.append(to_breadcrumb_schema(record, site))

        return Page(
            key=record.id,
            kind="post",
            record=record,
            human=human,
            machine=machine,
            schemas=schemas,
            metadata=record_metadata(record, site),
            parity_issues=issues,
        )

    def page(self, key: str) -> Page | None:
        """Build one page by integration slug or post id."""
        self.load()
        entry = self.catalog.lookup(key)
        if entry is not None:
            return self.integration_page(entry)
        record = self.posts.lookup(key)
        if record is not None:
            return self.post_page(record)
        return None

    def pages(self) -> list[Page]:
        """Build every page: integrations in catalog order, then posts."""
        self.load()
        pages = [self.integration_page(e) for e in self.catalog]
        pages.extend(self.post_page(r) for r in self.posts)
        logger.info(f"Built {len(pages)} pages")
        return pages

    def urls(self) -> list[str]:
        self.load()
        return all_urls(
            self.config.site,
            catalog=self.catalog.all(),
            posts=self.posts.all(),
            feed=self.config.feed,
        )

    def write(self, pages: list[Page], directory: str | Path | None = None) -> list[Path]:
        """
        Write build outputs under the output directory.

        Layout:
            jsonld/<key>.json       structured data nodes for the page
            machine/<key>.md        machine view as markdown
            machine/<key>.json      machine view as JSON
            meta/<key>.json         page metadata
            catalog.yaml            merged integrations catalog
            posts.yaml              post records
            feed.xml                RSS feed (when enabled)
            urls.txt                every indexable URL
        """
        out = Path(directory or self.config.output.directory)
        for sub in ("jsonld", "machine", "meta"):
            (out / sub).mkdir(parents=True, exist_ok=True)

        written: list[Path] = []

        def emit(path: Path, text: str) -> None:
            path.write_text(text, encoding="utf-8")
            written.append(path)

        for page in pages:
            nodes = [schema.to_dict() for schema in page.schemas]
            emit(out / "jsonld" / f"{page.key}.json", json.dumps(nodes, indent=2, ensure_ascii=False))
            emit(out / "machine" / f"{page.key}.md", render_markdown(page.machine))
            emit(
                out / "machine" / f"{page.key}.json",
                json.dumps(page.machine.to_dict(), indent=2, ensure_ascii=False),
            )
            emit(
                out / "meta" / f"{page.key}.json",
                json.dumps(page.metadata.to_dict(), indent=2, ensure_ascii=False),
            )

        emit(
            out / "catalog.yaml",
            yaml.safe_dump(
                self._serializer.serialize_catalog(self.catalog),
                sort_keys=False,
                allow_unicode=True,
            ),
        )
        emit(
            out / "posts.yaml",
            yaml.safe_dump(
                self._serializer.serialize_posts(self.posts),
                sort_keys=False,
                allow_unicode=True,
            ),
        )

        if self.config.feed.enabled:
            emit(out / "feed.xml", build_feed(self.posts, self.config.site, self.config.feed))

        emit(out / "urls.txt", "\n".join(self.urls()) + "\n")

        logger.info(f"Wrote {len(written)} files to {out}")
        return written

    def build(self, directory: str | Path | None = None) -> BuildResult:
        """Run the full pipeline and write outputs."""
        self.load()
        pages = self.pages()
        files = self.write(pages, directory)
        return BuildResult(pages=pages, files=files)
