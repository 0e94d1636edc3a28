"""
Feed assembly from a content collection.

The builder turns an ascending list of documents into a feed envelope:
1. Reverse to newest first and keep at most MAX_FEED_ITEMS documents
2. Map each document to a FeedItem (optionally on a thread pool)
3. Wrap the items with the channel metadata

Every item's content passes through the sanitizer, whatever mode the
builder runs in.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
import logging
import re
from typing import Sequence
from urllib.parse import urljoin

from jinja2 import Environment

from ..config import FeedConfig
from ..core.errors import FeedBuildError, MalformedDocumentIdError
from ..core.types import Document, FeedEnvelope, FeedItem
from ..render.markup import MarkupRenderer
from ..render.sanitize import Sanitizer

logger = logging.getLogger(__name__)

MAX_FEED_ITEMS = 100

# Posts carry no time of day; publish them at a fixed UTC hour.
PUBLISH_HOUR_UTC = 13

_YEAR_RE = re.compile(r"^\d{4}$")
_MONTH_DAY_RE = re.compile(r"^\d{2}$")

_templates = Environment(autoescape=True)
PERMALINK_TEMPLATE = _templates.from_string(
    '<a href="{{ url }}">Permalink</a>\n<br>\n{{ body | safe }}'
)
READ_MORE_TEMPLATE = _templates.from_string(
    '{{ preview | safe }}\n<p><a href="{{ url }}">Read more →</a></p>'
)


def parse_publish_date(document_id: str) -> datetime:
    """Derive the publish timestamp from a ``year/month/day/...`` id.

    Args:
        document_id: The document id, e.g. "2024/03/05/my-post"

    Returns:
        Aware datetime at 13:00:00 UTC on the id's date

    Raises:
        MalformedDocumentIdError: If the id lacks three zero-padded date
            segments or they do not form a valid calendar date

    Examples:
        >>> parse_publish_date("2024/03/05/my-post")
        datetime.datetime(2024, 3, 5, 13, 0, tzinfo=datetime.timezone.utc)
    """
    segments = document_id.split("/")
    if len(segments) < 3:
        raise MalformedDocumentIdError(document_id, "expected <year>/<month>/<day> segments")
    year, month, day = segments[:3]
    if not (_YEAR_RE.match(year) and _MONTH_DAY_RE.match(month) and _MONTH_DAY_RE.match(day)):
        raise MalformedDocumentIdError(document_id, "date segments must be zero-padded numbers")
    try:
        return datetime(int(year), int(month), int(day), PUBLISH_HOUR_UTC, tzinfo=timezone.utc)
    except ValueError as exc:
        raise MalformedDocumentIdError(document_id, str(exc)) from exc


class FeedBuilder:
    """Builds a sanitized, size-bounded feed envelope from documents.

    The builder holds no per-build state, so one instance may serve
    many builds. Items are built independently and joined by position.
    """

    def __init__(self, renderer: MarkupRenderer, sanitizer: Sanitizer, cfg: FeedConfig | None = None):
        self.renderer = renderer
        self.sanitizer = sanitizer
        self.cfg = cfg or FeedConfig()

    def build_feed(self, documents: Sequence[Document]) -> FeedEnvelope:
        """Build the feed envelope for an ascending document sequence."""
        recent = list(reversed(documents))[:MAX_FEED_ITEMS]
        logger.debug(
            "Building feed from %d of %d documents", len(recent), len(documents)
        )
        items = self._map_items(recent)
        return FeedEnvelope(
            title=self.cfg.title,
            description=self.cfg.description,
            site=self.cfg.site_url,
            items=tuple(items),
            language=self.cfg.language,
        )

    def _map_items(self, documents: list[Document]) -> list[FeedItem]:
        if self.cfg.workers <= 1 or len(documents) <= 1:
            return [self.to_feed_item(doc) for doc in documents]
        # map() yields in submission order, so the join is positional
        with ThreadPoolExecutor(max_workers=self.cfg.workers) as executor:
            return list(executor.map(self.to_feed_item, documents))

    def permalink(self, document: Document) -> str:
        """Return the site-relative permalink, e.g. ``/blog/hello/``."""
        prefix = "/" + self.cfg.permalink_prefix.strip("/") + "/"
        return f"{prefix}{document.slug.strip('/')}/"

    def absolute_permalink(self, document: Document) -> str:
        return urljoin(self.cfg.site_url, self.permalink(document))

    def to_feed_item(self, document: Document) -> FeedItem:
        """Map one document to a feed item.

        Raises:
            MalformedDocumentIdError: If the id does not start with a date
            FeedBuildError: If rendering or sanitizing fails
        """
        pub_date = parse_publish_date(document.id)
        meta = document.metadata
        canonical = self.absolute_permalink(document)

        title = meta.title
        link = self.permalink(document)
        if document.is_link_post:
            link = meta.link
            title = f"{title} {self.cfg.link_marker}"

        try:
            if self.cfg.full_render:
                body = self.renderer.render(document.body)
            else:
                body = READ_MORE_TEMPLATE.render(preview=meta.preview, url=canonical)
            if document.is_link_post:
                body = PERMALINK_TEMPLATE.render(url=canonical, body=body)
            content = self.sanitizer.sanitize(body)
        except Exception as exc:  # noqa: BLE001
            raise FeedBuildError(document.id, f"{type(exc).__name__}: {exc}") from exc

        return FeedItem(
            link=link,
            title=title,
            content=content,
            pub_date=pub_date,
            description=meta.preview,
            guid=canonical,
        )
