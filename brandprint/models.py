"""Data models for the extraction pipeline.

These are plain dataclasses.  ``to_dict()`` turns any of them into
JSON-serialisable data for the record store and downstream collaborators.
"""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Design tokens
# ---------------------------------------------------------------------------

@dataclass
class HeadingToken:
    tag: str
    text: str
    level: int


@dataclass
class SpacingValue:
    value: float
    unit: str


@dataclass
class LayoutStructure:
    has_header: bool = False
    has_footer: bool = False
    has_sidebar: bool = False
    has_main: bool = False
    section_count: int = 0


@dataclass
class GridSystem:
    containers: int = 0
    columns: int = 0
    flex_containers: int = 0


@dataclass
class ButtonToken:
    text: str
    type: str
    classes: str


@dataclass
class FormFieldToken:
    type: str
    name: str
    placeholder: Optional[str] = None
    required: bool = False


@dataclass
class FormSchema:
    """The fields of one ``<form>`` element."""

    fields: List[FormFieldToken] = field(default_factory=list)


@dataclass
class CardToken:
    has_image: bool
    has_title: bool
    has_description: bool


@dataclass
class NavLink:
    text: str
    href: str


@dataclass
class NavigationGroup:
    """Links found inside one ``<nav>``-like container."""

    links: List[NavLink] = field(default_factory=list)


@dataclass
class ImageToken:
    src: str
    alt: str
    width: Optional[str] = None
    height: Optional[str] = None


@dataclass
class IconToken:
    type: str
    classes: str


@dataclass
class BrandImagery:
    total_images: int = 0
    background_images: int = 0
    logos: int = 0


@dataclass
class DesignTokens:
    """A site's visual language.  Every field defaults to an empty value."""

    color_palette: List[str] = field(default_factory=list)
    primary_colors: List[str] = field(default_factory=list)
    color_usage: Dict[str, int] = field(default_factory=dict)
    font_families: List[str] = field(default_factory=list)
    font_sizes: List[str] = field(default_factory=list)
    font_weights: List[str] = field(default_factory=list)
    headings: List[HeadingToken] = field(default_factory=list)
    text_samples: List[str] = field(default_factory=list)
    margins: List[str] = field(default_factory=list)
    paddings: List[str] = field(default_factory=list)
    spacing_scale: List[SpacingValue] = field(default_factory=list)
    layout_structure: LayoutStructure = field(default_factory=LayoutStructure)
    grid_system: GridSystem = field(default_factory=GridSystem)
    breakpoints: List[str] = field(default_factory=list)
    buttons: List[ButtonToken] = field(default_factory=list)
    form_fields: List[FormFieldToken] = field(default_factory=list)
    form_schema: List[FormSchema] = field(default_factory=list)
    cards: List[CardToken] = field(default_factory=list)
    navigation: List[NavigationGroup] = field(default_factory=list)
    images: List[ImageToken] = field(default_factory=list)
    icons: List[IconToken] = field(default_factory=list)
    css_variables: Dict[str, str] = field(default_factory=dict)
    raw_style_excerpt: str = ""
    logo_url: str = ""
    brand_colors: List[str] = field(default_factory=list)
    brand_imagery: BrandImagery = field(default_factory=BrandImagery)
    messaging: List[str] = field(default_factory=list)
    preview_markup: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Voice profile
# ---------------------------------------------------------------------------

@dataclass
class CategoryScore:
    category: str
    score: int


@dataclass
class ToneAnalysis:
    primary: str
    scores: List[CategoryScore] = field(default_factory=list)
    exclamation_count: int = 0
    question_count: int = 0


@dataclass
class AudienceAnalysis:
    primary: str
    complexity: str
    scores: List[CategoryScore] = field(default_factory=list)


@dataclass
class WritingStyle:
    sentence_count: int = 0
    average_sentence_length: float = 0.0
    short_sentence_ratio: float = 0.0
    long_sentence_ratio: float = 0.0
    sentence_length_stddev: float = 0.0
    average_word_length: float = 0.0
    complex_word_ratio: float = 0.0
    simple_word_ratio: float = 0.0
    comma_frequency: float = 0.0
    semicolon_frequency: float = 0.0
    dash_frequency: float = 0.0


@dataclass
class WordCount:
    word: str
    count: int


@dataclass
class VocabularyProfile:
    top_words: List[WordCount] = field(default_factory=list)
    diversity: float = 0.0
    unique_word_count: int = 0
    total_word_count: int = 0
    technical_terms: List[str] = field(default_factory=list)
    business_terms: List[str] = field(default_factory=list)


@dataclass
class BrandVoiceSignals:
    tagline: str = ""
    mission: str = ""
    values: List[str] = field(default_factory=list)
    value_propositions: List[str] = field(default_factory=list)
    calls_to_action: List[str] = field(default_factory=list)
    key_messages: List[str] = field(default_factory=list)
    messaging_style: str = "general"


@dataclass
class ContentStrategySignals:
    content_types: List[str] = field(default_factory=list)
    content_length: str = "unknown"
    media_usage: Dict[str, int] = field(default_factory=dict)
    interactivity: Dict[str, int] = field(default_factory=dict)


@dataclass
class VoiceProfile:
    """Textual tone, personality and audience of a site.

    ``tone``, ``personality_traits`` and ``audience_analysis`` are always
    present.  The remaining fields are richer signals that stay ``None``
    when they could not be computed.
    """

    tone: ToneAnalysis
    personality_traits: List[str] = field(default_factory=list)
    audience_analysis: AudienceAnalysis = field(
        default_factory=lambda: AudienceAnalysis(primary="general", complexity="low")
    )
    personality_profile: Optional[str] = None
    writing_style: Optional[WritingStyle] = None
    vocabulary: Optional[VocabularyProfile] = None
    messaging_themes: Optional[List[str]] = None
    brand_voice_signals: Optional[BrandVoiceSignals] = None
    content_strategy_signals: Optional[ContentStrategySignals] = None

    def minimal(self) -> "VoiceProfile":
        """Return a copy carrying only tone, personality traits and audience."""
        return VoiceProfile(
            tone=self.tone,
            personality_traits=list(self.personality_traits),
            audience_analysis=self.audience_analysis,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Root artifact
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FormContext:
    """Read-only input handed to the form-generation step."""

    design_tokens: DesignTokens
    voice_profile: VoiceProfile
    messaging: tuple[str, ...]


@dataclass(frozen=True)
class ExtractedProfile:
    source_url: str
    title: str
    description: str
    favicon_url: str
    design_tokens: DesignTokens
    voice_profile: VoiceProfile
    extracted_at: datetime

    def form_context(self) -> FormContext:
        """Copy out the subset consumed by form generation."""
        return FormContext(
            design_tokens=copy.deepcopy(self.design_tokens),
            voice_profile=copy.deepcopy(self.voice_profile),
            messaging=tuple(self.design_tokens.messaging),
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["extracted_at"] = self.extracted_at.isoformat()
        return data
