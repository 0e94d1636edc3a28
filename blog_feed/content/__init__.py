"""Content collection loading."""

from .source import ContentSource, FileSystemContentSource, split_frontmatter

__all__ = ["ContentSource", "FileSystemContentSource", "split_frontmatter"]
