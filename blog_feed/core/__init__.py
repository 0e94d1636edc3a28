"""
Core domain models and errors.

This package contains data types and exceptions that are
independent of any specific pipeline stage.
"""

from .errors import (
    CollectionNotFoundError,
    ContentSchemaError,
    FeedBuildError,
    FeedError,
    MalformedDocumentIdError,
    PageNotFoundError,
)
from .types import Document, DocumentMetadata, FeedEnvelope, FeedItem

__all__ = [
    "Document",
    "DocumentMetadata",
    "FeedItem",
    "FeedEnvelope",
    "FeedError",
    "MalformedDocumentIdError",
    "FeedBuildError",
    "ContentSchemaError",
    "CollectionNotFoundError",
    "PageNotFoundError",
]
