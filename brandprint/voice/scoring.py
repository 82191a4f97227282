"""Deterministic text statistics shared by the voice heuristics."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, List, Mapping, Sequence

from brandprint.models import CategoryScore

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_NON_WORD = re.compile(r"[^\w]")


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)


def count_keyword(text: str, keyword: str) -> int:
    """Case-insensitive, whole-word occurrences of *keyword* in *text*."""
    return len(_keyword_pattern(keyword).findall(text))


def score_categories(text: str, table: Mapping[str, Sequence[str]]) -> List[CategoryScore]:
    """Score every category of *table*, preserving declaration order."""
    return [
        CategoryScore(category=name, score=sum(count_keyword(text, kw) for kw in keywords))
        for name, keywords in table.items()
    ]


def top_category(scores: Sequence[CategoryScore], default: str) -> str:
    """Highest-scoring category; the first declared wins ties."""
    if not scores:
        return default
    best = scores[0]
    for candidate in scores[1:]:
        if candidate.score > best.score:
            best = candidate
    return best.category


def ranked_nonzero(scores: Sequence[CategoryScore], limit: int) -> List[str]:
    """Up to *limit* categories with a non-zero score, highest first."""
    ranked = sorted((s for s in scores if s.score > 0), key=lambda s: -s.score)
    return [s.category for s in ranked[:limit]]


def split_words(text: str) -> List[str]:
    return text.split()


def clean_word(word: str) -> str:
    return _NON_WORD.sub("", word.lower())


def word_frequency(words: Sequence[str]) -> Dict[str, int]:
    frequency: Dict[str, int] = {}
    for word in words:
        cleaned = clean_word(word)
        if cleaned:
            frequency[cleaned] = frequency.get(cleaned, 0) + 1
    return frequency


def vocabulary_diversity(words: Sequence[str]) -> float:
    """Unique (cleaned) words divided by total words; 0.0 for no words."""
    if not words:
        return 0.0
    return len(word_frequency(words)) / len(words)


def split_sentences(text: str) -> List[str]:
    return [part for part in _SENTENCE_SPLIT.split(text) if part.strip()]


def complexity_label(diversity: float) -> str:
    if diversity > 0.7:
        return "high"
    if diversity > 0.4:
        return "medium"
    return "low"
