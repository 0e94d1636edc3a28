"""Tests for the filesystem content source."""

from __future__ import annotations

from pathlib import Path

import pytest

from blog_feed.content.source import FileSystemContentSource, slugify_id, split_frontmatter
from blog_feed.core.errors import CollectionNotFoundError, ContentSchemaError, PageNotFoundError


def _write(root: Path, rel: str, text: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _post(title: str, preview: str = "Preview", extra: str = "", body: str = "Body") -> str:
    return f"---\ntitle: {title}\npreview: {preview}\n{extra}---\n\n{body}\n"


def test_collection_is_sorted_by_id(tmp_path: Path):
    _write(tmp_path, "blog/2024/03/01/third.md", _post("Third"))
    _write(tmp_path, "blog/2023/12/31/first.mdx", _post("First"))
    _write(tmp_path, "blog/2024/01/15/second.md", _post("Second"))
    _write(tmp_path, "blog/2024/01/15/notes.txt", "ignored")

    docs = FileSystemContentSource(tmp_path).get_collection("blog")

    assert [doc.id for doc in docs] == [
        "2023/12/31/first",
        "2024/01/15/second",
        "2024/03/01/third",
    ]
    assert [doc.metadata.title for doc in docs] == ["First", "Second", "Third"]


def test_document_fields(tmp_path: Path):
    _write(
        tmp_path,
        "blog/2024/01/10/hello.md",
        _post("Hello", "Hi there", extra="link: https://example.com/x\n", body="# Hi\n\nWorld"),
    )

    doc = FileSystemContentSource(tmp_path).get_collection("blog")[0]

    assert doc.id == "2024/01/10/hello"
    assert doc.slug == "2024/01/10/hello"
    assert doc.body == "# Hi\n\nWorld\n"
    assert doc.metadata.preview == "Hi there"
    assert doc.metadata.link == "https://example.com/x"
    assert doc.is_link_post
    assert doc.collection == "blog"


def test_frontmatter_slug_overrides_id(tmp_path: Path):
    _write(tmp_path, "blog/2024/01/10/hello.md", _post("Hello", extra="slug: hello\n"))

    doc = FileSystemContentSource(tmp_path).get_collection("blog")[0]

    assert doc.slug == "hello"
    assert not doc.is_link_post


def test_missing_required_field_is_rejected(tmp_path: Path):
    _write(tmp_path, "blog/2024/01/10/hello.md", "---\ntitle: Hello\n---\nBody\n")

    with pytest.raises(ContentSchemaError, match="preview"):
        FileSystemContentSource(tmp_path).get_collection("blog")


def test_non_string_link_is_rejected(tmp_path: Path):
    _write(tmp_path, "blog/2024/01/10/hello.md", _post("Hello", extra="link: [1, 2]\n"))

    with pytest.raises(ContentSchemaError, match="link"):
        FileSystemContentSource(tmp_path).get_collection("blog")


def test_unknown_or_missing_collection(tmp_path: Path):
    source = FileSystemContentSource(tmp_path)

    with pytest.raises(CollectionNotFoundError):
        source.get_collection("drafts")
    with pytest.raises(CollectionNotFoundError):
        source.get_collection("blog")


def test_get_page(tmp_path: Path):
    _write(tmp_path, "pages/about.md", "---\ntitle: About\n---\nAbout me\n")
    _write(tmp_path, "pages/uses.mdx", "---\ntitle: Uses\n---\nGear\n")
    source = FileSystemContentSource(tmp_path)

    page = source.get_page("uses")

    assert page.metadata.title == "Uses"
    assert page.collection == "pages"
    with pytest.raises(PageNotFoundError):
        source.get_page("contact")


def test_split_frontmatter_variants():
    path = Path("post.md")

    assert split_frontmatter("No frontmatter", path) == ({}, "No frontmatter")
    assert split_frontmatter("---\ntitle: A\n---\nText", path) == ({"title": "A"}, "Text")
    with pytest.raises(ContentSchemaError, match="unterminated"):
        split_frontmatter("---\ntitle: A\nText", path)
    with pytest.raises(ContentSchemaError, match="mapping"):
        split_frontmatter("---\n- a\n- b\n---\nText", path)


def test_slug_from_file_name_is_url_safe(tmp_path: Path):
    _write(tmp_path, "blog/2024/01/10/My First Post!.md", _post("First"))

    doc = FileSystemContentSource(tmp_path).get_collection("blog")[0]

    assert doc.id == "2024/01/10/My First Post!"
    assert doc.slug == "2024/01/10/my-first-post"


def test_slugify_id_segments():
    assert slugify_id("2024/01/10/Hello World") == "2024/01/10/hello-world"
    assert slugify_id("Notes/ C++ & Rust /") == "notes/c-rust"
    assert slugify_id("???") == "untitled"


def test_underscore_and_hidden_paths_are_skipped(tmp_path: Path):
    _write(tmp_path, "blog/2024/01/10/ok.md", _post("Ok"))
    _write(tmp_path, "blog/_drafts/wip.md", _post("Draft"))
    _write(tmp_path, "blog/2024/01/11/_unlisted.md", _post("Unlisted"))
    _write(tmp_path, "blog/.cache/2024/01/12/copy.md", _post("Copy"))

    docs = FileSystemContentSource(tmp_path).get_collection("blog")

    assert [doc.id for doc in docs] == ["2024/01/10/ok"]


def test_byte_order_mark_is_ignored(tmp_path: Path):
    path = tmp_path / "blog/2024/01/10/bom.md"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"\xef\xbb\xbf" + _post("With BOM").encode("utf-8"))

    doc = FileSystemContentSource(tmp_path).get_collection("blog")[0]

    assert doc.metadata.title == "With BOM"


def test_invalid_utf8_is_a_schema_error(tmp_path: Path):
    path = tmp_path / "blog/2024/01/10/latin1.md"
    path.parent.mkdir(parents=True)
    path.write_bytes(_post("Caf\xe9").encode("latin-1"))

    with pytest.raises(ContentSchemaError, match="not valid UTF-8"):
        FileSystemContentSource(tmp_path).get_collection("blog")
