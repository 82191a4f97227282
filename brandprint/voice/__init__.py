"""Voice package: lexical and statistical analysis of a page's copy."""

from brandprint.voice.analyzer import analyze_voice
from brandprint.voice.corpus import VoiceCorpus, collect_corpus

__all__ = ["analyze_voice", "collect_corpus", "VoiceCorpus"]
