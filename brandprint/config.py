"""Centralised settings for the brandprint extraction engine.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The module-level ``settings`` object is only a default: every component that
needs configuration accepts an explicit :class:`Settings` instance, so tests
and concurrent callers never have to mutate shared state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_BROWSER_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get("BRANDPRINT_USER_AGENT", _BROWSER_UA)
    )
    page_timeout: float = field(
        default_factory=lambda: float(os.environ.get("BRANDPRINT_PAGE_TIMEOUT", "10.0"))
    )
    stylesheet_timeout: float = field(
        default_factory=lambda: float(
            os.environ.get("BRANDPRINT_STYLESHEET_TIMEOUT", "5.0")
        )
    )
    max_retries: int = field(
        default_factory=lambda: int(os.environ.get("BRANDPRINT_MAX_RETRIES", "3"))
    )
    initial_retry_delay: float = field(
        default_factory=lambda: float(
            os.environ.get("BRANDPRINT_INITIAL_RETRY_DELAY", "1.0")
        )
    )

    # ------------------------------------------------------------------
    # Style aggregation
    # ------------------------------------------------------------------
    max_stylesheets: int = field(
        default_factory=lambda: int(os.environ.get("BRANDPRINT_MAX_STYLESHEETS", "5"))
    )
    # Applies to each stylesheet body and to the joined corpus
    max_css_bytes: int = field(
        default_factory=lambda: int(os.environ.get("BRANDPRINT_MAX_CSS_BYTES", "300000"))
    )


# Module-level default; components take an explicit ``config`` argument:
#   from brandprint.config import settings
settings = Settings()
