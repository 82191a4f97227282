"""Spacing tokens: raw margin/padding declarations and a normalised scale."""

from __future__ import annotations

import re
from typing import List, Optional

from cssutils.css import CSSStyleSheet

from brandprint.models import SpacingValue
from brandprint.scraper.document import Document
from brandprint.scraper.styles import iter_declarations

MAX_SPACING_VALUES = 10
MAX_SCALE = 10

_SIDES = r"(?:-(?:top|right|bottom|left|block|inline)(?:-(?:start|end))?)?"

# ``{number}{unit}`` with no sign and no leading dot; anything else is skipped.
_DIMENSION = re.compile(r"(?<![\w.-])(\d+(?:\.\d+)?)(px|rem|em|%)(?![\w%])")


def _inline_pattern(prop: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![\w-]){prop}{_SIDES}\s*:\s*([^;]+)", re.IGNORECASE)


def _name_pattern(prop: str) -> re.Pattern[str]:
    return re.compile(rf"{prop}{_SIDES}")


def _spacing_literals(doc: Document, sheet: Optional[CSSStyleSheet], prop: str) -> List[str]:
    inline = _inline_pattern(prop)
    literals = [
        match.group(1).strip()
        for style in doc.inline_styles()
        for match in inline.finditer(style)
    ]
    names = _name_pattern(prop)
    literals.extend(
        p.value.strip() for p in iter_declarations(sheet) if names.fullmatch(p.name)
    )
    return literals


def _distinct(literals: List[str]) -> List[str]:
    values: List[str] = []
    for literal in literals:
        if literal and literal not in values:
            values.append(literal)
            if len(values) >= MAX_SPACING_VALUES:
                break
    return values


def extract_margins(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[str]:
    return _distinct(_spacing_literals(doc, sheet, "margin"))


def extract_paddings(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[str]:
    return _distinct(_spacing_literals(doc, sheet, "padding"))


def parse_spacing_scale(literals: List[str]) -> List[SpacingValue]:
    """Turn spacing literals into distinct ``SpacingValue``s sorted by value.

    ``"8px 16px"`` contributes two entries; keywords such as ``auto`` and
    negative values contribute none.
    """
    seen: set[tuple[float, str]] = set()
    scale: List[SpacingValue] = []
    for literal in literals:
        for number, unit in _DIMENSION.findall(literal):
            key = (float(number), unit)
            if key in seen:
                continue
            seen.add(key)
            scale.append(SpacingValue(value=key[0], unit=unit))
    scale.sort(key=lambda item: item.value)
    return scale[:MAX_SCALE]


def extract_spacing_scale(
    doc: Document, sheet: Optional[CSSStyleSheet] = None
) -> List[SpacingValue]:
    literals = _spacing_literals(doc, sheet, "margin") + _spacing_literals(
        doc, sheet, "padding"
    )
    return parse_spacing_scale(literals)
