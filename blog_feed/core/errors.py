"""Exception types raised by the blog feed pipeline."""

from __future__ import annotations

from pathlib import Path


class FeedError(Exception):
    """Base class for all blog feed errors."""


class MalformedDocumentIdError(FeedError, ValueError):
    """A document id does not start with a valid ``year/month/day`` date."""

    def __init__(self, document_id: str, reason: str):
        self.document_id = document_id
        self.reason = reason
        super().__init__(f"Malformed document id {document_id!r}: {reason}")


class FeedBuildError(FeedError):
    """Rendering or sanitizing a document failed during a feed build."""

    def __init__(self, document_id: str, message: str):
        self.document_id = document_id
        super().__init__(f"Failed to build feed item for {document_id!r}: {message}")


class ContentSchemaError(FeedError, ValueError):
    """Document frontmatter does not satisfy its collection schema."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class CollectionNotFoundError(FeedError, LookupError):
    """The requested content collection does not exist."""


class PageNotFoundError(FeedError, LookupError):
    """No page in the ``pages`` collection has the requested slug."""
