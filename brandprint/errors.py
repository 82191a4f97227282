"""Exception taxonomy for the extraction engine.

Fatal failures abort the pipeline and reach the caller as one of these
types.  Failures inside a single token category or voice metric are never
raised; the pipeline logs them and falls back to that category's default.
"""

from __future__ import annotations

from typing import Optional


class ExtractionError(Exception):
    """Base class for every failure surfaced by :func:`brandprint.extract`."""


class MalformedInput(ExtractionError, ValueError):
    """The requested URL is not a syntactically valid absolute http(s) URL."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class DocumentParseError(ExtractionError):
    """The fetched markup could not be turned into a document tree."""


class FetchError(ExtractionError):
    """A network fetch did not produce a usable response."""

    def __init__(self, url: str, status: Optional[int], message: str) -> None:
        self.url = url
        self.status = status
        super().__init__(message)


class BlockedByTarget(FetchError):
    """The target site denied access (401/403).  Never retried."""

    def __init__(self, url: str, status: int) -> None:
        super().__init__(
            url,
            status,
            f"The website ({url}) blocked the request ({status}). "
            "Please try a different URL.",
        )


class TransientNetworkFailure(FetchError):
    """Timeout, 429 or 5xx that persisted after every retry was spent."""

    def __init__(self, url: str, status: Optional[int], attempts: int) -> None:
        self.attempts = attempts
        reason = f"status {status}" if status is not None else "network error"
        super().__init__(
            url,
            status,
            f"Extraction failed for {url} after {attempts} attempt(s) ({reason}); "
            "try again later.",
        )
