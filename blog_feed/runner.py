"""
Build orchestration for the blog feed.

This module coordinates one build:
1. Load the configured collection from the content source
2. Build the feed envelope
3. Serialize and write the feed file

Any failure propagates to the caller; no partial feed is written.
"""

from __future__ import annotations

from pathlib import Path
import time

from rich.console import Console

from .config import AppConfig
from .content.source import ContentSource, FileSystemContentSource
from .core.types import FeedEnvelope
from .feed.builder import FeedBuilder, parse_publish_date
from .feed.serializer import write_feed
from .logging_utils import log_event, setup_logging
from .render.markup import MarkdownRenderer
from .render.sanitize import HtmlSanitizer


def create_builder(cfg: AppConfig) -> FeedBuilder:
    """Wire the feed builder with the Markdown renderer and HTML sanitizer."""
    return FeedBuilder(
        renderer=MarkdownRenderer(footnotes=cfg.feed.footnotes),
        sanitizer=HtmlSanitizer(extra_tags=cfg.sanitize.extra_tags),
        cfg=cfg.feed,
    )


def build_envelope(source: ContentSource, cfg: AppConfig) -> FeedEnvelope:
    documents = source.get_collection(cfg.content.collection)
    return create_builder(cfg).build_feed(documents)


def run_build(
    content_dir: Path,
    output_path: Path,
    cfg: AppConfig,
    console: Console | None = None,
) -> Path:
    """Run a complete feed build and return the written feed path.

    Args:
        content_dir: Root directory holding the content collections
        output_path: File the feed is written to
        cfg: Application configuration
        console: Rich console for status output (creates default if None)
    """
    console = console or Console()
    logger = setup_logging(cfg.logging, output_path.parent)
    started = time.perf_counter()

    source = FileSystemContentSource(content_dir)
    with console.status("Building feed..."):
        envelope = build_envelope(source, cfg)
        write_feed(envelope, output_path, cfg.output.format)

    log_event(
        logger,
        "Feed written",
        path=str(output_path),
        format=cfg.output.format,
        items=len(envelope.items),
        full_render=cfg.feed.full_render,
        elapsed_seconds=round(time.perf_counter() - started, 3),
    )
    return output_path


def validate_content(content_dir: Path, cfg: AppConfig) -> dict[str, int]:
    """Load every collection and check blog ids; return document counts.

    Raises:
        FeedError: On the first schema or id problem found
    """
    logger = setup_logging(cfg.logging, None)
    source = FileSystemContentSource(content_dir)
    posts = source.get_collection(cfg.content.collection)
    for post in posts:
        parse_publish_date(post.id)
    counts = {cfg.content.collection: len(posts)}
    if (Path(content_dir) / "pages").is_dir():
        counts["pages"] = len(source.get_collection("pages"))
    log_event(logger, "Content valid", **{f"{name}_count": n for name, n in counts.items()})
    return counts
