"""Collects the text the voice heuristics run over."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from brandprint.models import HeadingToken
from brandprint.scraper.document import Document

MIN_PARAGRAPH_LENGTH = 20


@dataclass
class VoiceCorpus:
    """Page text grouped by where it came from."""

    headings: List[HeadingToken] = field(default_factory=list)
    paragraphs: List[str] = field(default_factory=list)
    navigation: List[str] = field(default_factory=list)
    buttons: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    metadata: List[str] = field(default_factory=list)

    @property
    def all_text(self) -> str:
        """Every fragment joined with single spaces, headings first."""
        return " ".join(
            [
                *(h.text for h in self.headings),
                *self.paragraphs,
                *self.navigation,
                *self.buttons,
                *self.labels,
                *self.metadata,
            ]
        )

    @classmethod
    def from_text(cls, text: str) -> "VoiceCorpus":
        """Wrap free text as a single paragraph (useful outside the pipeline)."""
        return cls(paragraphs=[text] if text else [])


def _texts(doc: Document, selector: str) -> List[str]:
    return [text for text in (doc.text(el) for el in doc.select(selector)) if text]


def collect_corpus(doc: Document) -> VoiceCorpus:
    headings = []
    for element in doc.select("h1, h2, h3, h4, h5, h6"):
        text = doc.text(element)
        if text:
            tag = doc.tag_name(element)
            headings.append(HeadingToken(tag=tag, text=text, level=int(tag[1])))

    buttons = []
    for element in doc.select('button, .btn, .button, input[type="submit"]'):
        text = doc.text(element) or doc.attr(element, "value").strip()
        if text:
            buttons.append(text)

    metadata = [value for value in (doc.title, doc.description) if value]

    return VoiceCorpus(
        headings=headings,
        paragraphs=[t for t in _texts(doc, "p") if len(t) > MIN_PARAGRAPH_LENGTH],
        navigation=_texts(doc, "nav a, .nav a, .menu a"),
        buttons=buttons,
        labels=_texts(doc, "label, .label"),
        metadata=metadata,
    )
