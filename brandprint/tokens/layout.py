"""Layout tokens: page structure flags, grid usage and responsive breakpoints."""

from __future__ import annotations

import re
from typing import List, Optional

from cssutils.css import CSSStyleSheet

from brandprint.models import GridSystem, LayoutStructure
from brandprint.scraper.document import Document
from brandprint.scraper.styles import iter_media_texts

MAX_BREAKPOINTS = 10

_WIDTH_QUERY = re.compile(
    r"(?:min|max)-width\s*:\s*(\d+(?:\.\d+)?)(px|em|rem)", re.IGNORECASE
)
# em/rem breakpoints are compared against px ones at the browser default size.
_ROOT_FONT_PX = 16.0


def analyze_layout_structure(
    doc: Document, sheet: Optional[CSSStyleSheet] = None
) -> LayoutStructure:
    return LayoutStructure(
        has_header=doc.count("header, .header, #header") > 0,
        has_footer=doc.count("footer, .footer, #footer") > 0,
        has_sidebar=doc.count("aside, .sidebar, #sidebar") > 0,
        has_main=doc.count("main, .main, #main") > 0,
        section_count=doc.count("section"),
    )


def analyze_grid_system(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> GridSystem:
    return GridSystem(
        containers=doc.count(".container, .wrapper, .grid"),
        columns=doc.count('[class*="col-"], [class*="column"]'),
        flex_containers=doc.count('[style*="display: flex"], [style*="display:flex"]'),
    )


def extract_breakpoints(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[str]:
    """Width literals used by ``@media`` rules, smallest first.

    Without a style tree there is nothing to infer from, so the result is
    empty rather than a list of guessed defaults.
    """
    found: dict[str, float] = {}
    for media_text in iter_media_texts(sheet):
        for number, unit in _WIDTH_QUERY.findall(media_text):
            literal = f"{number}{unit.lower()}"
            if literal not in found:
                factor = 1.0 if unit.lower() == "px" else _ROOT_FONT_PX
                found[literal] = float(number) * factor
    ordered = sorted(found, key=found.__getitem__)
    return ordered[:MAX_BREAKPOINTS]
