"""UI component inventories built from structural queries over the document.

Every inventory is capped so that a page with thousands of matching
elements still produces a small, bounded result.
"""

from __future__ import annotations

from typing import List, Optional

from cssutils.css import CSSStyleSheet

from brandprint.models import (
    ButtonToken,
    CardToken,
    FormFieldToken,
    FormSchema,
    IconToken,
    ImageToken,
    NavigationGroup,
    NavLink,
)
from brandprint.scraper.document import Document

MAX_BUTTONS = 10
MAX_FORM_FIELDS = 20
MAX_FORMS = 5
MAX_CARDS = 5
MAX_NAV_GROUPS = 5
MAX_NAV_LINKS = 10
MAX_IMAGES = 5
MAX_ICONS = 10

BUTTON_SELECTOR = 'button, .btn, .button, input[type="submit"], input[type="button"]'
FIELD_SELECTOR = "input, textarea, select"
CARD_SELECTOR = ".card, .post, .item, .product"
NAV_SELECTOR = "nav, .nav, .navigation"
ICON_SELECTOR = "i, .icon, svg"
HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"


def extract_buttons(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[ButtonToken]:
    buttons: List[ButtonToken] = []
    for element in doc.select(BUTTON_SELECTOR)[:MAX_BUTTONS]:
        buttons.append(
            ButtonToken(
                text=doc.text(element) or doc.attr(element, "value").strip(),
                type=doc.tag_name(element),
                classes=doc.attr(element, "class"),
            )
        )
    return buttons


def _form_field(doc: Document, element) -> FormFieldToken:
    placeholder = element.get("placeholder")
    return FormFieldToken(
        type=doc.attr(element, "type") or doc.tag_name(element),
        name=doc.attr(element, "name"),
        placeholder=str(placeholder) if placeholder is not None else None,
        required=doc.has_attr(element, "required"),
    )


def extract_form_fields(
    doc: Document, sheet: Optional[CSSStyleSheet] = None
) -> List[FormFieldToken]:
    return [_form_field(doc, el) for el in doc.select(FIELD_SELECTOR)[:MAX_FORM_FIELDS]]


def extract_form_schema(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[FormSchema]:
    """Group fields by their enclosing ``<form>``; forms without fields are skipped."""
    forms: List[FormSchema] = []
    for form in doc.select("form"):
        fields = [
            _form_field(doc, el)
            for el in doc.select(FIELD_SELECTOR, scope=form)[:MAX_FORM_FIELDS]
        ]
        if fields:
            forms.append(FormSchema(fields=fields))
            if len(forms) >= MAX_FORMS:
                break
    return forms


def extract_cards(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[CardToken]:
    return [
        CardToken(
            has_image=doc.select_one("img", scope=card) is not None,
            has_title=doc.select_one(HEADING_SELECTOR, scope=card) is not None,
            has_description=doc.select_one("p", scope=card) is not None,
        )
        for card in doc.select(CARD_SELECTOR)[:MAX_CARDS]
    ]


def extract_navigation(
    doc: Document, sheet: Optional[CSSStyleSheet] = None
) -> List[NavigationGroup]:
    """One group per ``<nav>``-like container holding at least one labelled link."""
    groups: List[NavigationGroup] = []
    for container in doc.select(NAV_SELECTOR):
        links: List[NavLink] = []
        for anchor in doc.select("a", scope=container):
            text = doc.text(anchor)
            if text:
                links.append(NavLink(text=text, href=doc.attr(anchor, "href")))
                if len(links) >= MAX_NAV_LINKS:
                    break
        if links:
            groups.append(NavigationGroup(links=links))
            if len(groups) >= MAX_NAV_GROUPS:
                break
    return groups


def extract_images(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[ImageToken]:
    images: List[ImageToken] = []
    for element in doc.select("img")[:MAX_IMAGES]:
        width = element.get("width")
        height = element.get("height")
        images.append(
            ImageToken(
                src=doc.attr(element, "src"),
                alt=doc.attr(element, "alt"),
                width=str(width) if width is not None else None,
                height=str(height) if height is not None else None,
            )
        )
    return images


def extract_icons(doc: Document, sheet: Optional[CSSStyleSheet] = None) -> List[IconToken]:
    return [
        IconToken(type=doc.tag_name(el), classes=doc.attr(el, "class"))
        for el in doc.select(ICON_SELECTOR)[:MAX_ICONS]
    ]
