"""Typography tokens: font stacks, sizes, weights, headings and text samples."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from cssutils.css import CSSStyleSheet

from brandprint.models import HeadingToken
from brandprint.scraper.document import Document
from brandprint.scraper.styles import iter_declarations

MAX_FONTS = 10
MAX_FONT_VALUES = 10
MAX_HEADINGS = 10
MAX_TEXT_SAMPLES = 5
SAMPLE_LENGTH = 200
MIN_SAMPLE_LENGTH = 20

FALLBACK_FONTS = ("system-ui", "Arial")


def _declaration_pattern(prop: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![\w-]){prop}\s*:\s*([^;]+)", re.IGNORECASE)


_FONT_FAMILY = _declaration_pattern("font-family")
_FONT_SIZE = _declaration_pattern("font-size")
_FONT_WEIGHT = _declaration_pattern("font-weight")


def _distinct(values: Iterable[str], limit: int) -> List[str]:
    result: List[str] = []
    for value in values:
        if value and value not in result:
            result.append(value)
            if len(result) >= limit:
                break
    return result


def _declared_values(
    doc: Document,
    sheet: Optional[CSSStyleSheet],
    pattern: re.Pattern[str],
    prop: str,
) -> List[str]:
    values = [
        match.group(1).strip()
        for style in doc.inline_styles()
        for match in pattern.finditer(style)
    ]
    values.extend(p.value.strip() for p in iter_declarations(sheet) if p.name == prop)
    return values


def _clean_family(value: str) -> str:
    return re.sub(r"['\"]", "", value).replace("!important", "").strip()


def extract_font_families(
    doc: Document, sheet: Optional[CSSStyleSheet] = None
) -> List[str]:
    """Distinct ``font-family`` values, or the system fallbacks when none exist."""
    raw = _declared_values(doc, sheet, _FONT_FAMILY, "font-family")
    fonts = _distinct((_clean_family(v) for v in raw), MAX_FONTS)
    return fonts or list(FALLBACK_FONTS)


def extract_font_sizes(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[str]:
    return _distinct(_declared_values(doc, sheet, _FONT_SIZE, "font-size"), MAX_FONT_VALUES)


def extract_font_weights(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[str]:
    return _distinct(
        _declared_values(doc, sheet, _FONT_WEIGHT, "font-weight"), MAX_FONT_VALUES
    )


def extract_headings(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[HeadingToken]:
    headings: List[HeadingToken] = []
    for element in doc.select("h1, h2, h3, h4, h5, h6"):
        text = doc.text(element)
        if not text:
            continue
        tag = doc.tag_name(element)
        headings.append(HeadingToken(tag=tag, text=text, level=int(tag[1])))
        if len(headings) >= MAX_HEADINGS:
            break
    return headings


def extract_text_samples(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[str]:
    """First paragraphs longer than ``MIN_SAMPLE_LENGTH``, truncated to 200 chars."""
    samples: List[str] = []
    for element in doc.select("p"):
        text = doc.text(element)
        if len(text) > MIN_SAMPLE_LENGTH:
            samples.append(text[:SAMPLE_LENGTH])
            if len(samples) >= MAX_TEXT_SAMPLES:
                break
    return samples
