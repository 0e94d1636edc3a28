"""
Core data types for the blog feed pipeline.

This module defines the records passed between pipeline stages:
- Document: An authored post or page loaded from a content collection
- FeedItem: A syndication-ready entry derived from one Document
- FeedEnvelope: The complete feed (channel metadata plus ordered items)

All types are frozen; the pipeline never mutates its input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class DocumentMetadata:
    """Frontmatter of an authored document.

    Attributes:
        title: The document headline
        preview: Short summary shown in listings and used as feed description
        link: External URL for link posts, None for regular posts
    """
    title: str
    preview: str = ""
    link: str | None = None


@dataclass(frozen=True)
class Document:
    """A content item as authored on disk.

    Attributes:
        id: Path-like identity, ``<year>/<month>/<day>/<suffix>`` for blog posts
        slug: URL-safe name used to build the permalink
        body: Raw Markdown body (may be empty)
        metadata: Parsed frontmatter
        collection: Name of the collection this document belongs to
    """
    id: str
    slug: str
    body: str
    metadata: DocumentMetadata
    collection: str = "blog"

    @property
    def is_link_post(self) -> bool:
        return bool(self.metadata.link)


@dataclass(frozen=True)
class FeedItem:
    """One syndicated entry.

    Attributes:
        link: External link for link posts, otherwise the local permalink
        title: Item title, with a trailing marker for link posts
        content: Sanitized HTML content
        pub_date: Publish timestamp (always 13:00 UTC on the id's date)
        description: The document preview, passed through unchanged
        guid: Absolute local permalink identifying the item
    """
    link: str
    title: str
    content: str
    pub_date: datetime
    description: str
    guid: str


@dataclass(frozen=True)
class FeedEnvelope:
    """The whole syndication document, items ordered newest first."""
    title: str
    description: str
    site: str
    items: tuple[FeedItem, ...] = field(default_factory=tuple)
    language: str = "en-us"

    @property
    def custom_data(self) -> str:
        return f"<language>{self.language}</language>"
