"""Voice analysis: tone, personality, audience and richer writing signals.

Everything here is a deterministic function of the corpus (and, for the
brand-voice and content-strategy signals, the document).  The minimal
triad of tone, personality traits and audience is always produced; each
richer signal is computed independently and left as ``None`` when it fails.
"""

from __future__ import annotations

import logging
import statistics
from typing import Callable, List, Optional, TypeVar

from brandprint.models import (
    AudienceAnalysis,
    BrandVoiceSignals,
    ContentStrategySignals,
    ToneAnalysis,
    VocabularyProfile,
    VoiceProfile,
    WordCount,
    WritingStyle,
)
from brandprint.scraper.document import Document
from brandprint.voice.corpus import VoiceCorpus
from brandprint.voice.lexicon import (
    AUDIENCE_KEYWORDS,
    BUSINESS_TERMS,
    CONTENT_TYPE_SELECTORS,
    MESSAGING_STYLES,
    PERSONALITY_KEYWORDS,
    PERSONALITY_PROFILES,
    STOP_WORDS,
    TECHNICAL_TERMS,
    THEME_KEYWORDS,
    TONE_KEYWORDS,
)
from brandprint.voice.scoring import (
    clean_word,
    complexity_label,
    ranked_nonzero,
    score_categories,
    split_sentences,
    split_words,
    top_category,
    vocabulary_diversity,
    word_frequency,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_TRAITS = 3
MAX_THEMES = 3
MAX_TOP_WORDS = 20
MAX_VALUE_PROPOSITIONS = 5
MAX_CALLS_TO_ACTION = 10
MAX_KEY_MESSAGES = 5
MAX_BRAND_VALUES = 10


# ---------------------------------------------------------------------------
# Minimal triad
# ---------------------------------------------------------------------------

def analyze_tone(corpus: VoiceCorpus) -> ToneAnalysis:
    text = corpus.all_text
    scores = score_categories(text, TONE_KEYWORDS)
    return ToneAnalysis(
        primary=top_category(scores, default="neutral"),
        scores=scores,
        exclamation_count=text.count("!"),
        question_count=text.count("?"),
    )


def personality_traits(corpus: VoiceCorpus) -> List[str]:
    """Top three traits with a non-zero score; empty when nothing matched."""
    scores = score_categories(corpus.all_text, PERSONALITY_KEYWORDS)
    return ranked_nonzero(scores, MAX_TRAITS)


def personality_profile(traits: List[str]) -> str:
    """Name the profile for exactly this set of traits, else the strongest trait.

    Profiles are defined for pairs, so three dominant traits always fall
    back to the first one.
    """
    if not traits:
        return "neutral"
    return PERSONALITY_PROFILES.get(tuple(sorted(traits)), traits[0])


def analyze_audience(corpus: VoiceCorpus) -> AudienceAnalysis:
    text = corpus.all_text
    scores = score_categories(text, AUDIENCE_KEYWORDS)
    return AudienceAnalysis(
        primary=top_category(scores, default="general"),
        complexity=complexity_label(vocabulary_diversity(split_words(text))),
        scores=scores,
    )


# ---------------------------------------------------------------------------
# Writing style & vocabulary
# ---------------------------------------------------------------------------

def analyze_writing_style(corpus: VoiceCorpus) -> WritingStyle:
    text = corpus.all_text
    words = split_words(text)
    sentences = split_sentences(text)
    lengths = [len(sentence.split()) for sentence in sentences]
    total_words = len(words)
    total_sentences = len(sentences)

    def per_sentence(count: int) -> float:
        return count / total_sentences if total_sentences else 0.0

    def per_word(count: int) -> float:
        return count / total_words if total_words else 0.0

    return WritingStyle(
        sentence_count=total_sentences,
        average_sentence_length=per_sentence(total_words),
        short_sentence_ratio=per_sentence(sum(1 for n in lengths if n <= 10)),
        long_sentence_ratio=per_sentence(sum(1 for n in lengths if n > 20)),
        sentence_length_stddev=statistics.pstdev(lengths) if lengths else 0.0,
        average_word_length=per_word(sum(len(clean_word(w)) for w in words)),
        complex_word_ratio=per_word(sum(1 for w in words if len(w) > 8)),
        simple_word_ratio=per_word(sum(1 for w in words if len(w) <= 5)),
        comma_frequency=per_word(text.count(",")),
        semicolon_frequency=per_word(text.count(";")),
        dash_frequency=per_word(sum(text.count(d) for d in ("-", "–", "—"))),
    )


def _matching_terms(words: List[str], keywords: tuple[str, ...]) -> List[str]:
    return [w for w in words if any(keyword in w for keyword in keywords)]


def analyze_vocabulary(corpus: VoiceCorpus) -> VocabularyProfile:
    words = split_words(corpus.all_text)
    frequency = word_frequency(words)
    meaningful = sorted(
        (
            (word, count)
            for word, count in frequency.items()
            if word not in STOP_WORDS and len(word) > 3
        ),
        key=lambda item: -item[1],
    )[:MAX_TOP_WORDS]
    top_words = [word for word, _ in meaningful]
    return VocabularyProfile(
        top_words=[WordCount(word=w, count=c) for w, c in meaningful],
        diversity=vocabulary_diversity(words),
        unique_word_count=len(frequency),
        total_word_count=len(words),
        technical_terms=_matching_terms(top_words, TECHNICAL_TERMS),
        business_terms=_matching_terms(top_words, BUSINESS_TERMS),
    )


# ---------------------------------------------------------------------------
# Messaging & brand voice
# ---------------------------------------------------------------------------

def value_propositions(corpus: VoiceCorpus, doc: Optional[Document] = None) -> List[str]:
    props: List[str] = []
    if doc is not None:
        for element in doc.select(".hero h1, .banner h1, .value-prop, .tagline"):
            text = doc.text(element)
            if text:
                props.append(text)
    for heading in corpus.headings:
        if heading.level <= 2 and 10 < len(heading.text) < 100:
            props.append(heading.text)
    return props


def messaging_themes(corpus: VoiceCorpus, doc: Optional[Document] = None) -> List[str]:
    texts = value_propositions(corpus, doc) + corpus.paragraphs[:5]
    scores = score_categories(" ".join(texts), THEME_KEYWORDS)
    return ranked_nonzero(scores, MAX_THEMES)


def key_messages(corpus: VoiceCorpus) -> List[str]:
    messages = [
        h.text for h in corpus.headings if h.level <= 2 and len(h.text) > 10
    ][:3]
    for paragraph in corpus.paragraphs[:3]:
        first_sentence = paragraph.split(".")[0]
        if 20 < len(first_sentence) < 150:
            messages.append(first_sentence)
    return messages[:MAX_KEY_MESSAGES]


def messaging_style(phrases: List[str]) -> str:
    text = " ".join(phrases).lower()
    for style, markers in MESSAGING_STYLES.items():
        if any(marker in text for marker in markers):
            return style
    return "general"


def _last_text(doc: Document, selector: str, min_len: int = 0, max_len: int = 10_000) -> str:
    found = ""
    for element in doc.select(selector):
        text = doc.text(element)
        if min_len <= len(text) < max_len:
            found = text
    return found


def brand_voice_signals(corpus: VoiceCorpus, doc: Document) -> BrandVoiceSignals:
    props = value_propositions(corpus, doc)
    ctas = []
    for element in doc.select('button, .btn, .cta, a[class*="button"]'):
        text = doc.text(element)
        if 2 < len(text) < 50:
            ctas.append(text)
    values = [
        text
        for text in (doc.text(el) for el in doc.select(".values li, .principles li, .why-us li"))
        if text and len(text) < 200
    ]
    return BrandVoiceSignals(
        tagline=_last_text(doc, ".tagline, .slogan, .motto"),
        mission=_last_text(doc, ".mission, .about p, .vision", min_len=51, max_len=500),
        values=values[:MAX_BRAND_VALUES],
        value_propositions=props[:MAX_VALUE_PROPOSITIONS],
        calls_to_action=ctas[:MAX_CALLS_TO_ACTION],
        key_messages=key_messages(corpus),
        messaging_style=messaging_style(props + ctas),
    )


# ---------------------------------------------------------------------------
# Content strategy
# ---------------------------------------------------------------------------

def _content_length(doc: Document) -> str:
    counts = []
    for element in doc.select("p, .content"):
        words = len(doc.text(element).split())
        if words > 5:
            counts.append(words)
    if not counts:
        return "unknown"
    average = sum(counts) / len(counts)
    if average < 20:
        return "short-form"
    if average < 100:
        return "medium-form"
    return "long-form"


def content_strategy_signals(doc: Document) -> ContentStrategySignals:
    return ContentStrategySignals(
        content_types=[
            kind for kind, selector in CONTENT_TYPE_SELECTORS.items() if doc.count(selector)
        ],
        content_length=_content_length(doc),
        media_usage={
            "images": doc.count("img"),
            "videos": doc.count('video, iframe[src*="youtube"], iframe[src*="vimeo"]'),
            "audio": doc.count("audio"),
            "interactive": doc.count("canvas, .interactive, .widget"),
        },
        interactivity={
            "forms": doc.count("form"),
            "buttons": doc.count("button, .btn"),
            "links": doc.count("a"),
            "social_sharing": doc.count('[class*="share"], [class*="social"]'),
        },
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def _optional(label: str, compute: Callable[[], T]) -> Optional[T]:
    try:
        return compute()
    except Exception as exc:
        logger.warning("Voice metric %r failed, leaving it empty: %s", label, exc)
        return None


def analyze_voice(corpus: VoiceCorpus, doc: Optional[Document] = None) -> VoiceProfile:
    """Build the full :class:`VoiceProfile` for *corpus*.

    Brand-voice and content-strategy signals need the document and are
    ``None`` without one.
    """
    traits = personality_traits(corpus)
    return VoiceProfile(
        tone=analyze_tone(corpus),
        personality_traits=traits,
        audience_analysis=analyze_audience(corpus),
        personality_profile=_optional("personality_profile", lambda: personality_profile(traits)),
        writing_style=_optional("writing_style", lambda: analyze_writing_style(corpus)),
        vocabulary=_optional("vocabulary", lambda: analyze_vocabulary(corpus)),
        messaging_themes=_optional("messaging_themes", lambda: messaging_themes(corpus, doc)),
        brand_voice_signals=(
            _optional("brand_voice_signals", lambda: brand_voice_signals(corpus, doc))
            if doc is not None
            else None
        ),
        content_strategy_signals=(
            _optional("content_strategy_signals", lambda: content_strategy_signals(doc))
            if doc is not None
            else None
        ),
    )
