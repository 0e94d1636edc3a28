"""
Blog Feed - RSS feed generator for a Markdown blog.

This package turns a collection of Markdown/MDX posts with YAML
frontmatter into a sanitized RSS (or Atom) feed of the most recent
posts.

Main entry point is the CLI via `blog-feed build` command.

Example:
    $ blog-feed build -c src/content -o dist/blog/feed.xml
"""

__all__ = [
    "__version__",
    "Document",
    "DocumentMetadata",
    "FeedBuilder",
    "FeedEnvelope",
    "FeedItem",
    "render_feed",
]
__version__ = "0.1.0"

from .core.types import Document, DocumentMetadata, FeedEnvelope, FeedItem
from .feed.builder import FeedBuilder
from .feed.serializer import render_feed
