#!/usr/bin/env python3
"""
CLI tool for the content pipeline.

Usage:
    content-svc --config config.yaml validate
    content-svc --config config.yaml build --output build/
    content-svc --config config.yaml show hubspot
    content-svc --config config.yaml urls
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from colorama import Fore, Style, init as colorama_init

from .builder import SiteBuilder
from .config import Config
from .errors import ContentError
from .projection.markdown import render_markdown


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{Style.RESET_ALL}"


def load_config(path: str | None) -> Config:
    """Load config from a YAML or JSON file, or use defaults."""
    if not path:
        return Config()
    if Path(path).suffix == ".json":
        return Config.from_json(path)
    return Config.from_yaml(path)


def setup_logging(config: Config, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format,
    )


def cmd_validate(builder: SiteBuilder, args) -> int:
    """Load, register and project everything without writing outputs."""
    builder.load()
    pages = builder.pages()

    print(colorize("\nCatalog:", Style.BRIGHT), f"{len(builder.catalog)} integrations")
    for category in sorted(builder.catalog.categories()):
        entries = builder.catalog.by_category(category)
        print(f"  {colorize('•', Fore.CYAN)} {category}: {len(entries)}")
    print(colorize("Posts:", Style.BRIGHT), len(builder.posts))

    issues = sum(len(p.parity_issues) for p in pages)
    if issues:
        print(colorize(f"\n{issues} parity issue(s) reported (not enforced)", Fore.YELLOW))
    print(colorize(f"\nOK: {len(pages)} pages valid", Fore.GREEN))
    return 0


def cmd_build(builder: SiteBuilder, args) -> int:
    """Build and write all outputs."""
    result = builder.build(args.output)
    print(colorize("\nBuilt:", Style.BRIGHT), f"{len(result.pages)} pages, {len(result.files)} files")
    out = args.output or builder.config.output.directory
    print(colorize("Output:", Style.BRIGHT), out)
    return 0


def cmd_show(builder: SiteBuilder, args) -> int:
    """Show the derived representations of one page."""
    page = builder.page(args.key)
    if page is None:
        print(colorize(f"Error: no integration or post named '{args.key}'", Fore.RED), file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps({
            "machine": page.machine.to_dict(),
            "jsonld": [s.to_dict() for s in page.schemas],
            "metadata": page.metadata.to_dict(),
        }, indent=2, ensure_ascii=False))
        return 0

    if args.format == "jsonld":
        print(json.dumps([s.to_dict() for s in page.schemas], indent=2, ensure_ascii=False))
        return 0

    print(colorize("\nPage:", Style.BRIGHT), page.record.title)
    print(colorize("Kind:", Style.BRIGHT), page.kind)
    print(colorize("URL:", Style.BRIGHT), builder.config.site.absolute_url(page.record.url_path))
    print(colorize("Schemas:", Style.BRIGHT), ", ".join(type(s).__name__ for s in page.schemas))
    print(colorize("\nMachine view:", Style.BRIGHT))
    print(render_markdown(page.machine))
    return 0


def cmd_urls(builder: SiteBuilder, args) -> int:
    """Print every indexable URL."""
    for url in builder.urls():
        print(url)
    return 0


def main(argv: list[str] | None = None) -> int:
    colorama_init()

    parser = argparse.ArgumentParser(
        description="Content pipeline for integration pages and posts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML or JSON config file",
    )
    parser.add_argument(
        "--integrations",
        help="Integration batch directory or file (overrides config)",
    )
    parser.add_argument(
        "--posts",
        help="Post directory or file (overrides config)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # validate command
    subparsers.add_parser("validate", help="Validate and project all content")

    # build command
    build_parser = subparsers.add_parser("build", help="Build and write all outputs")
    build_parser.add_argument("--output", "-o", help="Output directory (overrides config)")

    # show command
    show_parser = subparsers.add_parser("show", help="Show one page's derived views")
    show_parser.add_argument("key", help="Integration slug or post id")
    show_parser.add_argument(
        "--format",
        choices=("text", "json", "jsonld"),
        default="text",
        help="Output format",
    )

    # urls command
    subparsers.add_parser("urls", help="List every indexable URL")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        print(colorize(f"Error: invalid config: {e}", Fore.RED), file=sys.stderr)
        return 2

    if args.integrations:
        config.content.integrations = args.integrations
    if args.posts:
        config.content.posts = args.posts

    setup_logging(config, args.verbose)
    builder = SiteBuilder(config)

    commands = {
        "validate": cmd_validate,
        "build": cmd_build,
        "show": cmd_show,
        "urls": cmd_urls,
    }

    try:
        return commands[args.command](builder, args)
    except (ContentError, OSError, yaml.YAMLError) as e:
        logging.getLogger(__name__).error(f"Build failed: {e}")
        print(colorize(f"Error: {e}", Fore.RED), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
