"""Feed serialization to RSS 2.0 and Atom via feedgen."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urljoin

from feedgen.feed import FeedGenerator

from ..core.types import FeedEnvelope

FEED_FORMATS = ("rss", "atom")


def render_feed(envelope: FeedEnvelope, fmt: str = "rss") -> bytes:
    """Serialize a feed envelope.

    Args:
        envelope: The assembled feed
        fmt: "rss" or "atom"

    Returns:
        UTF-8 encoded XML document

    Raises:
        ValueError: If the format is not supported
    """
    if fmt not in FEED_FORMATS:
        raise ValueError(f"Unsupported feed format: {fmt}. Supported: {', '.join(FEED_FORMATS)}")

    fg = FeedGenerator()
    fg.id(envelope.site)
    fg.title(envelope.title)
    fg.description(envelope.description)
    fg.link(href=envelope.site, rel="alternate")
    fg.language(envelope.language)

    content_type = "CDATA" if fmt == "rss" else "html"
    for item in envelope.items:
        # feedgen prepends by default; the envelope is already newest first
        fe = fg.add_entry(order="append")
        fe.id(item.guid)
        fe.guid(item.guid, permalink=True)
        fe.title(item.title)
        fe.link(href=urljoin(envelope.site, item.link))
        fe.description(item.description)
        fe.content(item.content, type=content_type)
        fe.published(item.pub_date)
        fe.updated(item.pub_date)

    if fmt == "atom":
        if envelope.items:
            fg.updated(envelope.items[0].pub_date)
        return fg.atom_str(pretty=True)
    return fg.rss_str(pretty=True)


def write_feed(envelope: FeedEnvelope, output_path: Path, fmt: str = "rss") -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(render_feed(envelope, fmt))
    return output_path
