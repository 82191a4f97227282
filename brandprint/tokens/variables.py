"""CSS custom properties (``--name: value``).

Three sources are merged: declarations in the parsed style tree, a regex
scan of the raw CSS corpus (some tokenizers drop ``--`` declarations they
consider invalid), and inline ``style`` attributes.  A name seen in an
earlier source keeps that source's value.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Optional

from cssutils.css import CSSStyleSheet

from brandprint.scraper.document import Document
from brandprint.scraper.styles import iter_declarations

CUSTOM_PROPERTY_PREFIX = "--"
MAX_VARIABLES = 100

_DECLARATION = re.compile(r"(?<![\w-])(--[\w-]+)\s*:\s*([^;{}]+)")


def _regex_variables(texts: Iterable[str]) -> Iterable[tuple[str, str]]:
    for text in texts:
        for name, value in _DECLARATION.findall(text):
            yield name, value.strip()


def extract_css_variables(
    doc: Document, sheet: Optional[CSSStyleSheet] = None, corpus: str = ""
) -> Dict[str, str]:
    variables: Dict[str, str] = {}
    # Later declarations of the same name win inside the tree.
    for prop in iter_declarations(sheet):
        if prop.name.startswith(CUSTOM_PROPERTY_PREFIX):
            variables[prop.name] = prop.value.strip()

    for name, value in _regex_variables([corpus, *doc.inline_styles()]):
        if value and name not in variables:
            variables[name] = value

    return dict(list(variables.items())[:MAX_VARIABLES])
