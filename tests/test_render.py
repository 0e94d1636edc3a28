"""Tests for Markdown rendering and HTML sanitization."""

from __future__ import annotations

from bs4 import BeautifulSoup

from blog_feed.render.markup import MarkdownRenderer
from blog_feed.render.sanitize import HtmlSanitizer


def test_markdown_renders_basic_blocks():
    html = MarkdownRenderer().render("# Hi\n\nWorld")

    assert "<h1>Hi</h1>" in html
    assert "<p>World</p>" in html


def test_markdown_empty_body():
    assert MarkdownRenderer().render("") == ""


def test_footnotes_extension_is_optional():
    text = "Claim[^1].\n\n[^1]: Source."

    with_notes = MarkdownRenderer(footnotes=True).render(text)
    without_notes = MarkdownRenderer(footnotes=False).render(text)

    assert 'class="footnote"' in with_notes
    assert "footnote" not in without_notes


def test_renderer_does_not_leak_footnotes_between_calls():
    renderer = MarkdownRenderer()
    renderer.render("One[^a].\n\n[^a]: First note.")

    html = renderer.render("Two.")

    assert "First note" not in html


def test_sanitizer_strips_scripts_and_handlers():
    dirty = (
        '<p onclick="x()">Text</p><script>alert(1)</script>'
        '<a href="javascript:alert(1)" onmouseover="y()">link</a>'
        '<style>body{}</style><iframe src="https://evil.test"></iframe>'
    )
    clean = HtmlSanitizer().sanitize(dirty)
    soup = BeautifulSoup(clean, "html.parser")

    assert soup.find("script") is None
    assert soup.find("style") is None
    assert soup.find("iframe") is None
    assert "alert(1)" not in clean
    for tag in soup.find_all(True):
        assert not any(attr.startswith("on") for attr in tag.attrs)
    assert soup.find("a").get("href") is None
    assert soup.find("p").get_text() == "Text"


def test_sanitizer_keeps_allowed_markup():
    html = '<h2>T</h2><p><a href="https://example.com/" target="_blank">x</a> <code>y</code></p>'

    assert HtmlSanitizer().sanitize(html) == html


def test_sanitizer_keeps_footnote_markup_functional():
    html = MarkdownRenderer().render("Claim[^1].\n\n[^1]: Source.")
    soup = BeautifulSoup(HtmlSanitizer().sanitize(html), "html.parser")

    ref = soup.find("sup")
    assert ref.get("id") == "fnref:1"
    assert ref.find("a").get("href") == "#fn:1"
    assert soup.find("li").get("id") == "fn:1"


def test_extra_tags_extend_allowlist_but_never_allow_scripts():
    sanitizer = HtmlSanitizer(extra_tags=["img", "script"])
    clean = sanitizer.sanitize('<img src="https://example.com/a.png" alt="A" onerror="x()"><script>y()</script>')

    assert '<img src="https://example.com/a.png" alt="A">' in clean
    assert "script" not in clean
    assert "<img" not in HtmlSanitizer().sanitize('<img src="https://example.com/a.png">')
