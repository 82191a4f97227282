"""Keyword tables behind the voice heuristics.

Dict order is significant: when two categories score the same, the one
declared first wins.
"""

from __future__ import annotations

TONE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "professional": ("professional", "business", "enterprise", "solution", "solutions", "services"),
    "friendly": ("welcome", "hello", "thanks", "please", "help", "love", "enjoy", "community"),
    "authoritative": (
        "expert", "proven", "industry", "leader", "leading", "certified", "trusted", "established",
    ),
    "formal": ("furthermore", "therefore", "consequently", "respectively", "hereby", "accordingly"),
    "casual": ("hey", "awesome", "cool", "great", "super", "amazing"),
    "playful": ("fun", "exciting", "adventure", "discover", "explore", "play"),
    "urgent": ("now", "today", "limited", "urgent", "immediate", "act fast", "don't wait", "hurry"),
}

PERSONALITY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "innovative": (
        "innovative", "cutting-edge", "breakthrough", "revolutionary", "advanced", "next-generation",
    ),
    "trustworthy": ("trusted", "reliable", "secure", "proven", "established", "dependable"),
    "approachable": ("friendly", "welcoming", "easy", "simple", "accessible", "open"),
    "expert": ("expert", "professional", "specialist", "authority", "experienced", "skilled"),
    "dynamic": ("dynamic", "energetic", "fast", "quick", "agile", "responsive"),
    "caring": ("care", "support", "help", "service", "customer", "community"),
}

# Keys are sorted trait pairs.
PERSONALITY_PROFILES: dict[tuple[str, ...], str] = {
    ("expert", "innovative"): "thought-leader",
    ("caring", "trustworthy"): "supportive-authority",
    ("dynamic", "innovative"): "disruptor",
    ("approachable", "caring"): "friendly-helper",
    ("expert", "trustworthy"): "reliable-authority",
}

AUDIENCE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "business": ("business", "enterprise", "company", "organization", "corporate", "professional"),
    "consumer": ("you", "your", "personal", "home", "family", "lifestyle"),
    "technical": ("development", "api", "code", "technical", "software", "system"),
    "creative": ("design", "creative", "art", "brand", "visual", "aesthetic"),
    "educational": ("learn", "education", "course", "training", "knowledge", "skill"),
}

THEME_KEYWORDS: dict[str, tuple[str, ...]] = {
    "innovation": ("new", "innovative", "cutting-edge", "advanced", "modern"),
    "quality": ("quality", "premium", "best", "excellent", "superior"),
    "speed": ("fast", "quick", "instant", "rapid", "immediate"),
    "trust": ("trusted", "secure", "reliable", "proven", "safe"),
    "value": ("affordable", "value", "save", "cost-effective", "budget"),
}

# First matching style wins.
MESSAGING_STYLES: dict[str, tuple[str, ...]] = {
    "trial-focused": ("free", "trial", "demo"),
    "sales-focused": ("buy", "purchase", "order"),
    "education-focused": ("learn", "discover", "explore"),
    "consultation-focused": ("contact", "talk", "consultation"),
}

TECHNICAL_TERMS = (
    "api", "software", "platform", "system", "technology", "digital", "data",
    "analytics", "cloud", "integration",
)

BUSINESS_TERMS = (
    "revenue", "growth", "profit", "sales", "customer", "market", "business",
    "enterprise", "solution", "service",
)

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should",
})

CONTENT_TYPE_SELECTORS: dict[str, str] = {
    "blog": ".blog, .post, article",
    "products": ".product, .item, .catalog",
    "services": ".service, .offering",
    "portfolio": ".portfolio, .gallery, .showcase",
    "documentation": ".docs, .documentation, .guide",
    "news": ".news, .press, .announcement",
}
