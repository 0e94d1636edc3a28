"""
Markup rendering and HTML sanitization.

Both capabilities are defined as narrow interfaces so the feed
builder can be used with any implementation.
"""

from .markup import MarkdownRenderer, MarkupRenderer
from .sanitize import HtmlSanitizer, Sanitizer

__all__ = ["MarkupRenderer", "MarkdownRenderer", "Sanitizer", "HtmlSanitizer"]
