"""Branding assets: logo, hero messaging, imagery counts and diagnostic excerpts."""

from __future__ import annotations

from typing import List, Optional

from cssutils.css import CSSStyleSheet

from brandprint.models import BrandImagery
from brandprint.scraper.document import Document
from brandprint.scraper.styles import inline_style_blocks

MAX_MESSAGES = 5
MAX_MESSAGE_LENGTH = 200
RAW_STYLE_LIMIT = 10_000
PREVIEW_LIMIT = 1_000
PREVIEW_CHILDREN = 3

LOGO_SELECTOR = 'img[src*="logo"], .logo img, #logo img'


def extract_logo(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> str:
    """Absolute URL of the first logo-like image, or ``""``."""
    return doc.resolve(doc.attr(doc.select_one(LOGO_SELECTOR), "src"))


def extract_messaging(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[str]:
    messages: List[str] = []
    for element in doc.select("h1, .hero, .tagline, .slogan"):
        text = doc.text(element)
        if text and len(text) < MAX_MESSAGE_LENGTH:
            messages.append(text)
            if len(messages) >= MAX_MESSAGES:
                break
    return messages


def analyze_brand_imagery(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> BrandImagery:
    return BrandImagery(
        total_images=doc.count("img"),
        background_images=doc.count('[style*="background-image"]'),
        logos=doc.count('img[src*="logo"], .logo'),
    )


def raw_style_excerpt(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> str:
    """First 10 KB of the page's inline ``<style>`` text; never parsed."""
    text = "".join(block + "\n" for block in inline_style_blocks(doc))
    return text[:RAW_STYLE_LIMIT]


def preview_markup(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> str:
    markup = "".join(str(child) for child in doc.body_children(PREVIEW_CHILDREN))
    return markup[:PREVIEW_LIMIT]
