"""
Content collections loaded from Markdown files with YAML frontmatter.

Each collection is a directory under the content root:

    src/content/
        blog/2024/01/10/hello.md
        pages/about.mdx

A document's id is its path relative to the collection directory,
without extension. Files and directories whose names start with "_" or
"." are left out of the collection. Collections are returned sorted by
id, which for blog posts is chronological.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import CollectionNotFoundError, ContentSchemaError, PageNotFoundError
from ..core.types import Document, DocumentMetadata

logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = (".md", ".mdx")

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")

# Required and optional string fields per collection.
COLLECTION_SCHEMAS: dict[str, dict[str, tuple[str, ...]]] = {
    "blog": {"required": ("title", "preview"), "optional": ("link",)},
    "pages": {"required": ("title",), "optional": ()},
}


class ContentSource(ABC):
    """Supplies schema-validated documents for a named collection."""

    @abstractmethod
    def get_collection(self, name: str) -> list[Document]:
        """Return every document in ``name``, ascending by id."""
        raise NotImplementedError

    def get_page(self, slug: str) -> Document:
        """Return the page whose slug matches.

        Raises:
            PageNotFoundError: If no page has this slug
        """
        for page in self.get_collection("pages"):
            if page.slug == slug:
                return page
        raise PageNotFoundError(f"Could not find page {slug!r}")


class FileSystemContentSource(ContentSource):
    """Reads collections from a directory tree of Markdown/MDX files."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def get_collection(self, name: str) -> list[Document]:
        schema = COLLECTION_SCHEMAS.get(name)
        if schema is None:
            raise CollectionNotFoundError(f"Unknown collection {name!r}")
        directory = self.root / name
        if not directory.is_dir():
            raise CollectionNotFoundError(f"Collection directory not found: {directory}")

        documents = []
        for path in directory.rglob("*"):
            if not path.is_file() or path.suffix not in CONTENT_SUFFIXES:
                continue
            if _is_excluded(path.relative_to(directory)):
                logger.debug("Skipping excluded content file %s", path)
                continue
            documents.append(self._load_document(path, directory, name, schema))

        documents.sort(key=lambda doc: doc.id)
        logger.debug("Loaded %d documents from %s", len(documents), directory)
        return documents

    def _load_document(
        self,
        path: Path,
        directory: Path,
        collection: str,
        schema: dict[str, tuple[str, ...]],
    ) -> Document:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ContentSchemaError(path, f"file is not valid UTF-8: {exc}") from exc
        frontmatter, body = split_frontmatter(text, path)
        _validate(frontmatter, schema, path)

        doc_id = path.relative_to(directory).with_suffix("").as_posix()
        slug = frontmatter.get("slug") or slugify_id(doc_id)
        return Document(
            id=doc_id,
            slug=str(slug),
            body=body,
            metadata=DocumentMetadata(
                title=frontmatter["title"],
                preview=frontmatter.get("preview", ""),
                link=frontmatter.get("link") or None,
            ),
            collection=collection,
        )


def split_frontmatter(text: str, path: Path) -> tuple[dict[str, Any], str]:
    """Split a document into its YAML frontmatter and Markdown body.

    Args:
        text: Full file contents
        path: Source path, used in error messages

    Returns:
        Tuple of (frontmatter dict, body). Files without frontmatter
        yield an empty dict and the whole text as body.

    Raises:
        ContentSchemaError: If the frontmatter is unterminated or not a mapping
    """
    if not text.startswith("---"):
        return {}, text

    lines = text.splitlines(keepends=True)
    for index in range(1, len(lines)):
        if lines[index].strip() == "---":
            raw = "".join(lines[1:index])
            body = "".join(lines[index + 1:])
            break
    else:
        raise ContentSchemaError(path, "unterminated frontmatter block")

    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ContentSchemaError(path, f"invalid YAML frontmatter: {exc}") from exc
    if not isinstance(data, dict):
        raise ContentSchemaError(path, "frontmatter must be a mapping")
    return data, body.lstrip("\n")


def _validate(frontmatter: dict[str, Any], schema: dict[str, tuple[str, ...]], path: Path) -> None:
    for key in schema["required"]:
        if not isinstance(frontmatter.get(key), str):
            raise ContentSchemaError(path, f"'{key}' is required and must be a string")
    for key in schema["optional"]:
        value = frontmatter.get(key)
        if value is not None and not isinstance(value, str):
            raise ContentSchemaError(path, f"'{key}' must be a string")


def slugify_id(doc_id: str) -> str:
    """Build a URL-safe slug from a document id, one path segment at a time.

    Examples:
        >>> slugify_id("2024/01/10/My First Post")
        "2024/01/10/my-first-post"
    """
    segments = []
    for segment in doc_id.split("/"):
        slug = _NON_SLUG_RE.sub("-", segment.lower()).strip("-")
        if slug:
            segments.append(slug)
    return "/".join(segments) or "untitled"


def _is_excluded(relative: Path) -> bool:
    return any(part.startswith(("_", ".")) for part in relative.parts)
