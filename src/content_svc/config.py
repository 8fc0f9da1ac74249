"""Configuration for the content service."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SiteConfig:
    """Site identity used for absolute URLs and publisher metadata."""
    base_url: str = "https://www.meetcursive.com"
    name: str = "Cursive"
    brand: str = "Cursive"   # Used in derived page titles ("<brand> + HubSpot Integration")
    logo: str = "/cursive-logo.png"
    same_as: list[str] = field(default_factory=list)  # Social profile URLs

    def absolute_url(self, path: str) -> str:
        """Join a site-relative path onto the base URL."""
        if path.startswith(("http://", "https://")):
            return path
        base = self.base_url.rstrip("/")
        if not path or path == "/":
            return base + "/"
        return f"{base}/{path.lstrip('/')}"


@dataclass
class ContentConfig:
    """Where authored content lives."""
    # Directory of integration batch files (or a single file)
    integrations: str | None = None

    # Directory or file of guide/blog post records
    posts: str | None = None


@dataclass
class ProjectionConfig:
    """Machine view settings."""
    synopsis_max_chars: int = 300
    require_faqs: bool = True     # Pages always render an FAQ section
    enforce_parity: bool = True   # Fail the build on human/machine disagreement


ARTICLE_TYPES = ("Article", "BlogPosting")


@dataclass
class SchemaConfig:
    """Structured data settings."""
    article_type: str = "Article"  # Article | BlogPosting

    def __post_init__(self):
        if self.article_type not in ARTICLE_TYPES:
            raise ValueError(
                f"schema.article_type must be one of {', '.join(ARTICLE_TYPES)}, "
                f"got {self.article_type!r}"
            )


@dataclass
class FeedConfig:
    """RSS feed settings."""
    enabled: bool = True
    path: str = "/feed.xml"
    blog_path: str = "/blog"
    title: str = "Cursive Blog"
    description: str = "Guides, comparisons, and strategies for B2B lead generation."
    language: str = "en-us"
    managing_editor: str | None = None


@dataclass
class OutputConfig:
    """Build output settings."""
    directory: str = "build"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Config:
    """Main configuration container."""
    site: SiteConfig = field(default_factory=SiteConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    projection: ProjectionConfig = field(default_factory=ProjectionConfig)
    schema: SchemaConfig = field(default_factory=SchemaConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Create config from dictionary."""
        return cls(
            site=SiteConfig(**data.get("site", {})),
            content=ContentConfig(**data.get("content", {})),
            projection=ProjectionConfig(**data.get("projection", {})),
            schema=SchemaConfig(**data.get("schema", {})),
            feed=FeedConfig(**data.get("feed", {})),
            output=OutputConfig(**data.get("output", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )

    @classmethod
    def from_yaml(cls, path: str) -> Config:
        """Load config from YAML file."""
        import yaml
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str) -> Config:
        """Load config from JSON file."""
        import json
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)
