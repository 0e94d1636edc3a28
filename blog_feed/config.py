"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- ContentConfig: Where authored content lives
- FeedConfig: Feed channel metadata and item rendering policy
- SanitizeConfig: Additions to the HTML sanitizer allowlist
- OutputConfig: Output path and feed format
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import yaml


@dataclass
class ContentConfig:
    """Configuration for the content source.

    Attributes:
        root: Directory holding one sub-directory per collection
        collection: Name of the collection syndicated in the feed
    """

    root: str = "src/content"
    collection: str = "blog"


@dataclass
class FeedConfig:
    """Configuration for feed assembly.

    Attributes:
        title: Channel title
        description: Channel description
        site_url: Absolute base URL of the site, used for permalinks
        language: Channel language tag
        permalink_prefix: Path prefix for local post permalinks
        link_marker: Marker appended to link post titles
        full_render: Render the full body (True) or only the preview plus a read-more link (False)
        footnotes: Enable the Markdown footnotes extension
        workers: Number of threads used to build items (1 = sequential)
    """

    title: str = "TJ Writes Software"
    description: str = "The writing and ramblings of a software engineering veteran"
    site_url: str = "https://www.tjdraper.com/"
    language: str = "en-us"
    permalink_prefix: str = "/blog/"
    link_marker: str = "→"
    full_render: bool = True
    footnotes: bool = True
    workers: int = 1


@dataclass
class SanitizeConfig:
    """Configuration for HTML sanitization.

    Attributes:
        extra_tags: Tags allowed in addition to the default allowlist (e.g. ["img"])
    """

    extra_tags: list[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        path: File the serialized feed is written to
        format: "rss" or "atom"
    """

    path: str = "dist/blog/feed.xml"
    format: str = "rss"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file (written next to the feed output)
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    content: ContentConfig = field(default_factory=ContentConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    sanitize: SanitizeConfig = field(default_factory=SanitizeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            known = {k: v for k, v in value.items() if k in data[key]}
            data[key].update(known)
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        content=ContentConfig(**data["content"]),
        feed=FeedConfig(**data["feed"]),
        sanitize=SanitizeConfig(**data["sanitize"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
