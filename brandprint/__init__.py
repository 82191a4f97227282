"""brandprint: design-token and voice extraction for arbitrary websites."""

from brandprint.errors import (
    BlockedByTarget,
    DocumentParseError,
    ExtractionError,
    FetchError,
    MalformedInput,
    TransientNetworkFailure,
)
from brandprint.models import DesignTokens, ExtractedProfile, VoiceProfile
from brandprint.pipeline import ProfileStore, extract, extract_and_save

__all__ = [
    "BlockedByTarget",
    "DesignTokens",
    "DocumentParseError",
    "ExtractedProfile",
    "ExtractionError",
    "FetchError",
    "MalformedInput",
    "ProfileStore",
    "TransientNetworkFailure",
    "VoiceProfile",
    "extract",
    "extract_and_save",
]
