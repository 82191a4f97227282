"""Read-only document model over BeautifulSoup.

Extractors never touch BeautifulSoup directly; they go through
:class:`Document`, which offers selector queries, attribute and text reads,
and URL resolution against the page's own address.
"""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from brandprint.errors import DocumentParseError


class Document:
    """A parsed HTML page.  Nothing in the pipeline mutates the tree."""

    def __init__(self, soup: BeautifulSoup, base_url: str) -> None:
        self._soup = soup
        self.base_url = base_url

    @classmethod
    def parse(cls, html: str, base_url: str) -> "Document":
        """Parse *html* with the stdlib-backed ``html.parser`` builder.

        Raises:
            DocumentParseError: If the parser itself fails.
        """
        try:
            soup = BeautifulSoup(html, "html.parser")
        except Exception as exc:  # bs4 raises a mix of parser-specific errors
            raise DocumentParseError(f"Could not parse markup from {base_url}: {exc}") from exc
        return cls(soup, base_url)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def select(self, selector: str, scope: Optional[Tag] = None) -> List[Tag]:
        """Return every element matching the CSS *selector*, in document order."""
        root = scope if scope is not None else self._soup
        return root.select(selector)

    def select_one(self, selector: str, scope: Optional[Tag] = None) -> Optional[Tag]:
        root = scope if scope is not None else self._soup
        return root.select_one(selector)

    def count(self, selector: str) -> int:
        return len(self.select(selector))

    # ------------------------------------------------------------------
    # Element reads
    # ------------------------------------------------------------------
    @staticmethod
    def attr(element: Optional[Tag], name: str, default: str = "") -> str:
        """Return attribute *name* as a string.

        Multi-valued attributes such as ``class`` are joined with spaces.
        """
        if element is None:
            return default
        value = element.get(name)
        if value is None:
            return default
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    @staticmethod
    def has_attr(element: Tag, name: str) -> bool:
        return element.has_attr(name)

    @staticmethod
    def text(element: Optional[Tag]) -> str:
        """Concatenated, stripped text content of *element*."""
        if element is None:
            return ""
        return element.get_text().strip()

    @staticmethod
    def tag_name(element: Tag) -> str:
        return element.name.lower()

    def resolve(self, href: str) -> str:
        """Resolve *href* against the page URL; empty input stays empty."""
        href = (href or "").strip()
        if not href:
            return ""
        return urljoin(self.base_url, href)

    def inline_styles(self) -> List[str]:
        """Every ``style`` attribute value in document order."""
        return [self.attr(el, "style") for el in self.select("[style]")]

    def body_children(self, limit: int) -> List[Tag]:
        body = self._soup.body
        if body is None:
            return []
        return [child for child in body.children if isinstance(child, Tag)][:limit]

    # ------------------------------------------------------------------
    # Page metadata
    # ------------------------------------------------------------------
    @property
    def title(self) -> str:
        return self.text(self.select_one("title"))

    @property
    def description(self) -> str:
        return self.attr(self.select_one('meta[name="description"]'), "content").strip()

    @property
    def favicon_url(self) -> str:
        link = self.select_one('link[rel="icon"], link[rel="shortcut icon"]')
        return self.resolve(self.attr(link, "href"))
