"""Style aggregation: collect every CSS source of a page and parse it.

Inline ``<style>`` blocks and up to ``max_stylesheets`` linked stylesheets are
concatenated into one corpus and handed to ``cssutils``.  Parsing is
best-effort: a corpus that cannot be parsed yields ``None`` and extractors fall
back to scanning inline ``style`` attributes.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Iterable, Iterator, List, Optional
from urllib.parse import urlparse

import cssutils
from cssutils.css import CSSRule, CSSStyleSheet, Property

from brandprint.scraper.document import Document
from brandprint.scraper.fetcher import Fetcher

logger = logging.getLogger(__name__)

# Malformed CSS is expected input; parse errors are not logged.
cssutils.log.setLevel(logging.CRITICAL)

_FETCHABLE_SCHEMES = ("http", "https")

# Grouping at-rules cssutils keeps as opaque text.
_BLOCK_AT_RULE = re.compile(
    r"@(?:-[a-z]+-)?(?:supports|layer|container|scope|document|starting-style)\b[^{};]*\{",
    re.IGNORECASE,
)
_BRACE_TOKENS = re.compile(
    r"""/\*.*?(?:\*/|\Z)|"(?:\\.|[^"\\\n])*"?|'(?:\\.|[^'\\\n])*'?|[{}]""",
    re.DOTALL,
)
_MAX_AT_RULE_DEPTH = 8


def inline_style_blocks(doc: Document) -> List[str]:
    """Return the text of every ``<style>`` element that has content."""
    blocks: List[str] = []
    for element in doc.select("style"):
        content = element.string if element.string is not None else element.get_text()
        if content and content.strip():
            blocks.append(str(content))
    return blocks


def stylesheet_urls(doc: Document, limit: int = 5) -> List[str]:
    """Absolute http(s) URLs of the first *limit* fetchable stylesheet links.

    ``data:``, ``javascript:`` and other non-network hrefs are skipped and do
    not count towards *limit*.
    """
    urls: List[str] = []
    for link in doc.select('link[rel="stylesheet"]'):
        if len(urls) >= limit:
            break
        url = doc.resolve(doc.attr(link, "href"))
        if url and urlparse(url).scheme.lower() in _FETCHABLE_SCHEMES:
            urls.append(url)
    return urls


def truncate_css(text: str, max_bytes: Optional[int]) -> str:
    """Cut *text* down to at most *max_bytes* UTF-8 bytes."""
    if max_bytes is None:
        return text
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


async def _fetch_one(fetcher: Fetcher, url: str, timeout: float) -> str:
    response = await fetcher.fetch(url, timeout=timeout)
    if response.is_error:
        raise ValueError(f"status {response.status_code}")
    return response.text


async def fetch_stylesheets(
    fetcher: Fetcher,
    urls: Iterable[str],
    timeout: float,
    max_bytes: Optional[int] = None,
) -> List[str]:
    """Fetch every stylesheet concurrently and return the bodies that arrived.

    A stylesheet that fails for any reason is logged and treated as absent;
    one failure never cancels the other fetches.  Bodies keep the order of
    *urls* and are cut to *max_bytes* each.
    """
    urls = list(urls)
    if not urls:
        return []

    results = await asyncio.gather(
        *(_fetch_one(fetcher, url, timeout) for url in urls),
        return_exceptions=True,
    )

    bodies: List[str] = []
    for url, result in zip(urls, results):
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, BaseException):
            logger.warning("Failed to fetch stylesheet %s: %s", url, result)
            continue
        if not result:
            continue
        body = truncate_css(result, max_bytes)
        if len(body) < len(result):
            logger.warning("Stylesheet %s truncated to %d bytes", url, max_bytes)
        bodies.append(body)
    return bodies


def build_corpus(
    blocks: Iterable[str], bodies: Iterable[str], max_bytes: Optional[int] = None
) -> str:
    """Join inline blocks and fetched stylesheet bodies into one CSS text."""
    corpus = "\n".join([*blocks, *bodies])
    truncated = truncate_css(corpus, max_bytes)
    if len(truncated) < len(corpus):
        logger.warning("CSS corpus truncated to %d bytes", max_bytes)
    return truncated


def _skip_import(url: str) -> tuple[None, None]:
    # @import targets are never followed: no I/O happens while parsing.
    return None, None


def _matching_brace(css: str, start: int) -> int:
    """Index of the ``}`` closing the block opened just before *start*."""
    depth = 1
    for token in _BRACE_TOKENS.finditer(css, start):
        text = token.group(0)
        if text == "{":
            depth += 1
        elif text == "}":
            depth -= 1
            if depth == 0:
                return token.start()
    return len(css)


def unwrap_block_at_rules(css: str, depth: int = 0) -> str:
    """Replace ``@supports``/``@layer``/``@container`` blocks by their bodies.

    The rules inside such blocks then parse as ordinary style rules, in
    source order.  Statement forms such as ``@layer base, utilities;`` are
    left alone.
    """
    parts: List[str] = []
    pos = 0
    while True:
        match = _BLOCK_AT_RULE.search(css, pos)
        if match is None:
            parts.append(css[pos:])
            break
        close = _matching_brace(css, match.end())
        parts.append(css[pos:match.start()])
        body = css[match.end():close]
        if depth < _MAX_AT_RULE_DEPTH:
            body = unwrap_block_at_rules(body, depth + 1)
        parts.append(body)
        pos = close + 1
    return "".join(parts)


def parse_stylesheet(corpus: str) -> Optional[CSSStyleSheet]:
    """Parse *corpus* into a ``cssutils`` stylesheet, or ``None`` on failure.

    CPU-bound; callers on an event loop run it in a worker thread.
    """
    if not corpus.strip():
        return None
    try:
        parser = cssutils.CSSParser(fetcher=_skip_import, validate=False)
        return parser.parseString(unwrap_block_at_rules(corpus))
    except Exception as exc:
        logger.warning("CSS parsing failed, continuing without a style tree: %s", exc)
        return None


# ---------------------------------------------------------------------------
# Tree walkers
# ---------------------------------------------------------------------------

def _iter_rules(rules) -> Iterator:
    for rule in rules:
        yield rule
        if rule.type == CSSRule.MEDIA_RULE:
            yield from _iter_rules(rule.cssRules)


def iter_declarations(sheet: Optional[CSSStyleSheet]) -> Iterator[Property]:
    """Yield every declaration of every style rule, including nested ones."""
    if sheet is None:
        return
    for rule in _iter_rules(sheet.cssRules):
        if rule.type == CSSRule.STYLE_RULE:
            yield from rule.style.getProperties(all=True)


def iter_media_texts(sheet: Optional[CSSStyleSheet]) -> Iterator[str]:
    """Yield the query text of every ``@media`` rule."""
    if sheet is None:
        return
    for rule in _iter_rules(sheet.cssRules):
        if rule.type == CSSRule.MEDIA_RULE:
            yield rule.media.mediaText
