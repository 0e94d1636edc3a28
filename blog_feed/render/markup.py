"""Markdown to HTML rendering."""

from __future__ import annotations

from abc import ABC, abstractmethod

import markdown


class MarkupRenderer(ABC):
    """Converts raw document bodies into HTML."""

    @abstractmethod
    def render(self, text: str) -> str:
        """Return HTML for the given markup text."""
        raise NotImplementedError


class MarkdownRenderer(MarkupRenderer):
    """Python-Markdown renderer with optional footnote support.

    ``markdown.Markdown`` keeps per-document state (footnotes, references),
    so every call builds its own instance. One renderer can therefore be
    shared by all items of a build, including across worker threads.
    """

    def __init__(self, footnotes: bool = True):
        extensions = ["fenced_code", "tables"]
        if footnotes:
            extensions.append("footnotes")
        self.extensions = extensions

    def render(self, text: str) -> str:
        if not text:
            return ""
        md = markdown.Markdown(extensions=self.extensions, output_format="html")
        return md.convert(text)
