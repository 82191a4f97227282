"""Color tokens: palette, usage counts, primary and brand colors.

Colors come from two places and are unioned in discovery order: regex
matches in inline ``style`` attributes first, then color values found by
walking the parsed style sheet.  Literals are normalised (lower-cased,
whitespace removed) before de-duplication, so ``#FFF`` and ``#fff`` or
``rgb(0, 0, 0)`` and ``rgb(0,0,0)`` count as one color.  Hex colors from the
style tree keep their authored spelling; color functions there carry
cssutils number formatting (``.5`` reads as ``0.5``).
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Optional

from cssutils.css import CSSStyleSheet, Value

from brandprint.scraper.document import Document
from brandprint.scraper.styles import iter_declarations

MAX_PALETTE = 20
MAX_PRIMARY = 5
MAX_BRAND = 3

COLOR_PATTERN = re.compile(
    r"#(?:[0-9a-f]{8}|[0-9a-f]{6}|[0-9a-f]{3,4})(?![0-9a-z])"
    r"|(?:rgba?|hsla?)\([^()]*\)",
    re.IGNORECASE,
)

_COLOR_NODE_TYPES = frozenset({Value.COLOR_VALUE, Value.HASH, Value.FUNCTION})


def normalize_color(literal: str) -> str:
    return re.sub(r"\s+", "", literal).lower()


def _inline_colors(doc: Document) -> Iterator[str]:
    for style in doc.inline_styles():
        for match in COLOR_PATTERN.finditer(style):
            yield match.group(0)


def _color_literal(value) -> str:
    # The serializer shortens #rrggbb; the raw hash token keeps its spelling.
    if getattr(value, "colorType", None) == "HASH":
        return value.seq[0].value
    if value.type == Value.HASH:
        return value.value
    return value.cssText


def _tree_colors(sheet: Optional[CSSStyleSheet]) -> Iterator[str]:
    for prop in iter_declarations(sheet):
        for value in prop.propertyValue:
            if getattr(value, "type", None) not in _COLOR_NODE_TYPES:
                continue
            text = _color_literal(value)
            # FUNCTION nodes also cover url(), calc() and friends
            if COLOR_PATTERN.fullmatch(text):
                yield text


def extract_colors(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[str]:
    """Return up to ``MAX_PALETTE`` distinct normalised colors in discovery order."""
    palette: List[str] = []
    seen: set[str] = set()
    for literal in (*_inline_colors(doc), *_tree_colors(sheet)):
        color = normalize_color(literal)
        if color in seen:
            continue
        seen.add(color)
        palette.append(color)
        if len(palette) >= MAX_PALETTE:
            break
    return palette


def color_usage(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> Dict[str, int]:
    """Count how often each color appears across inline ``style`` attributes."""
    usage: Dict[str, int] = {}
    for literal in _inline_colors(doc):
        color = normalize_color(literal)
        usage[color] = usage.get(color, 0) + 1
    return usage


# Both take the first N palette entries in discovery order.
def primary_colors(palette: List[str]) -> List[str]:
    return palette[:MAX_PRIMARY]


def brand_colors(palette: List[str]) -> List[str]:
    return palette[:MAX_BRAND]
