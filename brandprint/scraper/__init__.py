"""Scraper package: resilient fetch, document model and style aggregation."""

from brandprint.scraper.document import Document
from brandprint.scraper.fetcher import Fetcher, build_client
from brandprint.scraper.styles import (
    build_corpus,
    fetch_stylesheets,
    inline_style_blocks,
    parse_stylesheet,
    stylesheet_urls,
)

__all__ = [
    "Document",
    "Fetcher",
    "build_client",
    "build_corpus",
    "fetch_stylesheets",
    "inline_style_blocks",
    "parse_stylesheet",
    "stylesheet_urls",
]
