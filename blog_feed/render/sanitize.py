"""
HTML sanitization for syndicated content.

The default allowlist follows the defaults of the ``sanitize-html``
package: structural and inline text tags, tables and links. Script and
style elements are dropped together with their content, and event
handler attributes are never allowed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

import nh3


DEFAULT_TAGS = frozenset(
    {
        "address", "article", "aside", "footer", "header",
        "h1", "h2", "h3", "h4", "h5", "h6", "hgroup", "main", "nav", "section",
        "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure", "hr",
        "li", "ol", "p", "pre", "ul",
        "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "dfn",
        "em", "i", "kbd", "mark", "q", "rp", "rt", "ruby", "s", "samp",
        "small", "span", "strong", "sub", "sup", "time", "u", "var", "wbr",
        "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th",
        "thead", "tr",
    }
)

DEFAULT_ATTRIBUTES = {
    "a": {"href", "name", "target", "title"},
    "abbr": {"title"},
    "img": {"src", "alt", "title", "width", "height"},
    "li": {"id"},
    "sup": {"id"},
    "td": {"colspan", "rowspan"},
    "th": {"colspan", "rowspan"},
}

URL_SCHEMES = frozenset({"http", "https", "ftp", "mailto", "tel"})

# Never allowed, whatever the configuration says.
FORBIDDEN_TAGS = frozenset({"script", "style", "iframe", "object", "embed"})


class Sanitizer(ABC):
    """Removes unsafe markup from HTML."""

    @abstractmethod
    def sanitize(self, html: str) -> str:
        """Return a safe copy of ``html``."""
        raise NotImplementedError


class HtmlSanitizer(Sanitizer):
    """Allowlist sanitizer backed by nh3 (ammonia)."""

    def __init__(self, extra_tags: Iterable[str] = ()):
        extra = {tag.strip().lower() for tag in extra_tags if tag.strip()}
        self.tags = (DEFAULT_TAGS | extra) - FORBIDDEN_TAGS
        self.attributes = {
            tag: set(attrs) for tag, attrs in DEFAULT_ATTRIBUTES.items() if tag in self.tags
        }

    def sanitize(self, html: str) -> str:
        return nh3.clean(
            html,
            tags=set(self.tags),
            attributes=self.attributes,
            url_schemes=set(URL_SCHEMES),
            link_rel=None,
        )
