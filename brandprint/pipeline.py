"""Extraction orchestrator.

``extract`` runs one linear pipeline per URL:

    FETCH_PAGE → PARSE_DOCUMENT → FETCH_STYLES → PARSE_STYLES
    → RUN_TOKEN_EXTRACTORS → RUN_VOICE_ANALYZER → ASSEMBLE_RESULT

Failures while fetching or parsing the page abort the run with a typed
:class:`~brandprint.errors.ExtractionError`.  Everything after that is
best-effort: each token category and the voice analysis run isolated, and a
failure there only empties that one category.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Protocol, TypeVar
from urllib.parse import urlparse

import httpx
from cssutils.css import CSSStyleSheet

from brandprint.config import Settings, settings
from brandprint.errors import FetchError, MalformedInput
from brandprint.models import DesignTokens, ExtractedProfile, ToneAnalysis, VoiceProfile
from brandprint.scraper.document import Document
from brandprint.scraper.fetcher import Fetcher, build_client
from brandprint.scraper.styles import (
    build_corpus,
    fetch_stylesheets,
    inline_style_blocks,
    parse_stylesheet,
    stylesheet_urls,
)
from brandprint import tokens
from brandprint.voice import analyze_voice, collect_corpus

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Stage(str, enum.Enum):
    FETCH_PAGE = "FETCH_PAGE"
    PARSE_DOCUMENT = "PARSE_DOCUMENT"
    FETCH_STYLES = "FETCH_STYLES"
    PARSE_STYLES = "PARSE_STYLES"
    RUN_TOKEN_EXTRACTORS = "RUN_TOKEN_EXTRACTORS"
    RUN_VOICE_ANALYZER = "RUN_VOICE_ANALYZER"
    ASSEMBLE_RESULT = "ASSEMBLE_RESULT"
    DONE = "DONE"


class ProfileStore(Protocol):
    """Record store collaborator; the engine knows nothing about its schema."""

    def save(self, profile: ExtractedProfile) -> str: ...


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def validate_url(url: Any) -> str:
    """Return *url* stripped, or raise :class:`MalformedInput` before any I/O."""
    if not isinstance(url, str) or not url.strip():
        raise MalformedInput(str(url), "URL must be a non-empty string")
    url = url.strip()
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as exc:
        raise MalformedInput(url, str(exc)) from exc
    if parsed.scheme not in ("http", "https"):
        raise MalformedInput(url, "scheme must be http or https")
    if not hostname:
        raise MalformedInput(url, "URL has no host")
    return url


def _isolated(label: str, compute: Callable[[], T], default: T) -> T:
    try:
        return compute()
    except Exception as exc:
        logger.warning("Extraction of %r failed, using an empty value: %s", label, exc)
        return default


def _enter(stage: Stage, url: str) -> None:
    logger.debug("%s %s", stage.value, url)


def build_design_tokens(
    doc: Document, sheet: Optional[CSSStyleSheet] = None, corpus: str = ""
) -> DesignTokens:
    """Run every token extractor in isolation and assemble the result."""
    defaults = DesignTokens()

    def run(field_name: str, compute: Callable[[], Any]) -> Any:
        return _isolated(field_name, compute, getattr(defaults, field_name))

    palette = run("color_palette", lambda: tokens.extract_colors(doc, sheet))
    return DesignTokens(
        color_palette=palette,
        primary_colors=tokens.primary_colors(palette),
        color_usage=run("color_usage", lambda: tokens.color_usage(doc, sheet)),
        font_families=run("font_families", lambda: tokens.extract_font_families(doc, sheet)),
        font_sizes=run("font_sizes", lambda: tokens.extract_font_sizes(doc, sheet)),
        font_weights=run("font_weights", lambda: tokens.extract_font_weights(doc, sheet)),
        headings=run("headings", lambda: tokens.extract_headings(doc, sheet)),
        text_samples=run("text_samples", lambda: tokens.extract_text_samples(doc, sheet)),
        margins=run("margins", lambda: tokens.extract_margins(doc, sheet)),
        paddings=run("paddings", lambda: tokens.extract_paddings(doc, sheet)),
        spacing_scale=run("spacing_scale", lambda: tokens.extract_spacing_scale(doc, sheet)),
        layout_structure=run(
            "layout_structure", lambda: tokens.analyze_layout_structure(doc, sheet)
        ),
        grid_system=run("grid_system", lambda: tokens.analyze_grid_system(doc, sheet)),
        breakpoints=run("breakpoints", lambda: tokens.extract_breakpoints(doc, sheet)),
        buttons=run("buttons", lambda: tokens.extract_buttons(doc, sheet)),
        form_fields=run("form_fields", lambda: tokens.extract_form_fields(doc, sheet)),
        form_schema=run("form_schema", lambda: tokens.extract_form_schema(doc, sheet)),
        cards=run("cards", lambda: tokens.extract_cards(doc, sheet)),
        navigation=run("navigation", lambda: tokens.extract_navigation(doc, sheet)),
        images=run("images", lambda: tokens.extract_images(doc, sheet)),
        icons=run("icons", lambda: tokens.extract_icons(doc, sheet)),
        css_variables=run(
            "css_variables", lambda: tokens.extract_css_variables(doc, sheet, corpus)
        ),
        raw_style_excerpt=run("raw_style_excerpt", lambda: tokens.raw_style_excerpt(doc, sheet)),
        logo_url=run("logo_url", lambda: tokens.extract_logo(doc, sheet)),
        brand_colors=tokens.brand_colors(palette),
        brand_imagery=run("brand_imagery", lambda: tokens.analyze_brand_imagery(doc, sheet)),
        messaging=run("messaging", lambda: tokens.extract_messaging(doc, sheet)),
        preview_markup=run("preview_markup", lambda: tokens.preview_markup(doc, sheet)),
    )


def _empty_voice() -> VoiceProfile:
    return VoiceProfile(tone=ToneAnalysis(primary="neutral"))


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

async def _run(url: str, fetcher: Fetcher, config: Settings) -> ExtractedProfile:
    _enter(Stage.FETCH_PAGE, url)
    response = await fetcher.fetch(url, timeout=config.page_timeout)
    if response.is_error:
        raise FetchError(
            url,
            response.status_code,
            f"Failed to extract website data: {url} returned {response.status_code}",
        )

    _enter(Stage.PARSE_DOCUMENT, url)
    doc = Document.parse(response.text, str(response.url))

    _enter(Stage.FETCH_STYLES, url)
    blocks = inline_style_blocks(doc)
    bodies = await fetch_stylesheets(
        fetcher,
        stylesheet_urls(doc, limit=config.max_stylesheets),
        timeout=config.stylesheet_timeout,
        max_bytes=config.max_css_bytes,
    )

    _enter(Stage.PARSE_STYLES, url)
    corpus = build_corpus(blocks, bodies, max_bytes=config.max_css_bytes)
    sheet = await asyncio.to_thread(parse_stylesheet, corpus)

    _enter(Stage.RUN_TOKEN_EXTRACTORS, url)
    design_tokens = build_design_tokens(doc, sheet, corpus)

    _enter(Stage.RUN_VOICE_ANALYZER, url)
    voice_profile = _isolated(
        "voice_profile", lambda: analyze_voice(collect_corpus(doc), doc), _empty_voice()
    )

    _enter(Stage.ASSEMBLE_RESULT, url)
    profile = ExtractedProfile(
        source_url=url,
        title=doc.title,
        description=doc.description,
        favicon_url=doc.favicon_url,
        design_tokens=design_tokens,
        voice_profile=voice_profile,
        extracted_at=datetime.now(timezone.utc),
    )
    _enter(Stage.DONE, url)
    return profile


async def extract(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[Settings] = None,
    fetcher: Optional[Fetcher] = None,
) -> ExtractedProfile:
    """Extract the design-token and voice profile of the page at *url*.

    Args:
        url: Absolute http(s) URL of the page.
        client: HTTP client to use.  When omitted a client is opened for this
            call and closed afterwards.
        config: Timeouts and retry budget; defaults to ``settings``.
        fetcher: Fully configured fetcher; takes precedence over *client*.

    Raises:
        MalformedInput: *url* is not a valid absolute http(s) URL.
        BlockedByTarget: The site answered 401/403.
        TransientNetworkFailure: The page stayed unreachable after retries.
        FetchError: Any other non-2xx page response.
        DocumentParseError: The markup could not be parsed.
    """
    url = validate_url(url)
    config = config or settings

    if fetcher is not None:
        return await _run(url, fetcher, config)
    if client is not None:
        return await _run(url, Fetcher.from_settings(client, config), config)
    async with build_client(config) as own_client:
        return await _run(url, Fetcher.from_settings(own_client, config), config)


async def extract_and_save(url: str, store: ProfileStore, **kwargs: Any) -> str:
    """Extract *url* and hand the profile to *store*; returns the record id."""
    profile = await extract(url, **kwargs)
    record_id = store.save(profile)
    logger.info("Saved profile for %s as %s", url, record_id)
    return record_id
