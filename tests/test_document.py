"""Tests for the read-only document model."""

from __future__ import annotations

import pytest

from brandprint.scraper.document import Document

_PAGE_URL = "https://example.com/products/widget"

_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>  Widget Co  </title>
  <meta name="description" content=" Widgets for everyone. ">
  <link rel="icon" href="/static/favicon.png">
</head>
<body>
  <header class="site-header top">Header</header>
  <div id="hero" style="color: #123456">
    <p>Inside hero</p>
  </div>
  <p style="margin: 4px">Outside hero</p>
  <footer>Footer</footer>
</body>
</html>
"""


@pytest.fixture()
def doc() -> Document:
    return Document.parse(_HTML, _PAGE_URL)


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class TestMetadata:
    def test_title_is_stripped(self, doc: Document) -> None:
        assert doc.title == "Widget Co"

    def test_description_is_stripped(self, doc: Document) -> None:
        assert doc.description == "Widgets for everyone."

    def test_favicon_is_resolved(self, doc: Document) -> None:
        assert doc.favicon_url == "https://example.com/static/favicon.png"

    def test_missing_metadata_is_empty(self) -> None:
        empty = Document.parse("<html><body></body></html>", _PAGE_URL)
        assert empty.title == ""
        assert empty.description == ""
        assert empty.favicon_url == ""

    def test_shortcut_icon_is_recognised(self) -> None:
        html = '<html><head><link rel="shortcut icon" href="fav.ico"></head></html>'
        assert Document.parse(html, _PAGE_URL).favicon_url == (
            "https://example.com/products/fav.ico"
        )


# ---------------------------------------------------------------------------
# Queries & element reads
# ---------------------------------------------------------------------------

class TestQueries:
    def test_select_in_document_order(self, doc: Document) -> None:
        texts = [Document.text(p) for p in doc.select("p")]
        assert texts == ["Inside hero", "Outside hero"]

    def test_select_within_scope(self, doc: Document) -> None:
        hero = doc.select_one("#hero")
        assert [Document.text(p) for p in doc.select("p", scope=hero)] == ["Inside hero"]

    def test_count(self, doc: Document) -> None:
        assert doc.count("header, footer") == 2
        assert doc.count("aside") == 0

    def test_attr_joins_class_list(self, doc: Document) -> None:
        assert Document.attr(doc.select_one("header"), "class") == "site-header top"

    def test_attr_default_for_missing(self, doc: Document) -> None:
        assert Document.attr(doc.select_one("footer"), "class") == ""
        assert Document.attr(None, "href", default="-") == "-"

    def test_text_of_none_is_empty(self) -> None:
        assert Document.text(None) == ""

    def test_inline_styles_in_order(self, doc: Document) -> None:
        assert doc.inline_styles() == ["color: #123456", "margin: 4px"]

    def test_body_children_limited_to_elements(self, doc: Document) -> None:
        children = doc.body_children(2)
        assert [Document.tag_name(c) for c in children] == ["header", "div"]

    def test_body_children_without_body(self) -> None:
        fragment = Document.parse("", _PAGE_URL)
        assert fragment.body_children(3) == []


# ---------------------------------------------------------------------------
# URL resolution
# ---------------------------------------------------------------------------

class TestResolve:
    @pytest.mark.parametrize(
        "href, expected",
        [
            ("/logo.png", "https://example.com/logo.png"),
            ("img/logo.png", "https://example.com/products/img/logo.png"),
            ("//cdn.example.net/a.css", "https://cdn.example.net/a.css"),
            ("https://other.org/x", "https://other.org/x"),
        ],
    )
    def test_resolves_against_page_url(self, doc: Document, href: str, expected: str) -> None:
        assert doc.resolve(href) == expected

    def test_empty_href_stays_empty(self, doc: Document) -> None:
        assert doc.resolve("") == ""
        assert doc.resolve("   ") == ""
