"""Feed assembly and serialization."""

from .builder import MAX_FEED_ITEMS, FeedBuilder, parse_publish_date
from .serializer import FEED_FORMATS, render_feed, write_feed

__all__ = [
    "FeedBuilder",
    "MAX_FEED_ITEMS",
    "parse_publish_date",
    "render_feed",
    "write_feed",
    "FEED_FORMATS",
]
