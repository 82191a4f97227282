"""Async HTTP fetcher with bounded retries and exponential backoff."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx

from brandprint.config import Settings, settings
from brandprint.errors import BlockedByTarget, FetchError, TransientNetworkFailure

logger = logging.getLogger(__name__)

# Access denied: fail on the first attempt.
_BLOCKED_STATUSES = frozenset({401, 403})


def is_retryable_status(status: Optional[int]) -> bool:
    """Return ``True`` for 429, any 5xx, or a missing status (network error)."""
    if status is None:
        return True
    return status == 429 or 500 <= status < 600


def build_client(config: Optional[Settings] = None) -> httpx.AsyncClient:
    """Return an ``httpx.AsyncClient`` configured the way page fetches expect."""
    config = config or settings
    return httpx.AsyncClient(
        headers={"User-Agent": config.user_agent},
        timeout=config.page_timeout,
        follow_redirects=True,
    )


class Fetcher:
    """Wrap an ``httpx.AsyncClient`` with the retry policy used by the pipeline.

    * 401/403 raise :class:`~brandprint.errors.BlockedByTarget` on the first
      attempt.
    * 429, 5xx and transport errors (timeouts, refused connections) are
      retried after ``delay`` seconds, doubling the delay each time, until
      ``retries_left`` is spent; then
      :class:`~brandprint.errors.TransientNetworkFailure` is raised.
    * A URL httpx cannot request at all (unsupported scheme, invalid URL)
      raises :class:`~brandprint.errors.FetchError` without retrying.
    * Every other response is returned unmodified.

    Args:
        client: The HTTP client to issue requests with.  The fetcher never
            closes it.
        max_retries: Default retry budget for :meth:`fetch`.
        initial_delay: Default first backoff delay in seconds.
        sleep: Awaitable used to wait between attempts (injectable for tests).
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        max_retries: int = 3,
        initial_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._client = client
        self._max_retries = max_retries
        self._initial_delay = initial_delay
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls,
        client: httpx.AsyncClient,
        config: Optional[Settings] = None,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> "Fetcher":
        config = config or settings
        return cls(
            client,
            max_retries=config.max_retries,
            initial_delay=config.initial_retry_delay,
            sleep=sleep,
        )

    async def fetch(
        self,
        url: str,
        *,
        timeout: Optional[float] = None,
        retries_left: Optional[int] = None,
        delay: Optional[float] = None,
    ) -> httpx.Response:
        """GET *url*, retrying transient failures.

        Raises:
            BlockedByTarget: On a 401 or 403 response.
            FetchError: When *url* is not requestable.
            TransientNetworkFailure: When a retryable failure outlives the
                retry budget.
        """
        retries_left = self._max_retries if retries_left is None else retries_left
        delay = self._initial_delay if delay is None else delay
        attempts = 0

        while True:
            attempts += 1
            status: Optional[int]
            try:
                if timeout is None:
                    response = await self._client.get(url)
                else:
                    response = await self._client.get(url, timeout=timeout)
            except (httpx.UnsupportedProtocol, httpx.InvalidURL) as exc:
                raise FetchError(url, None, f"Cannot fetch {url}: {exc}") from exc
            except httpx.TransportError as exc:
                status = None
                reason = f"{type(exc).__name__}: {exc}"
            else:
                status = response.status_code
                if status in _BLOCKED_STATUSES:
                    raise BlockedByTarget(url, status)
                if not is_retryable_status(status):
                    return response
                reason = f"status {status}"

            if retries_left <= 0:
                raise TransientNetworkFailure(url, status, attempts)

            logger.warning(
                "Request to %s failed (%s); retrying in %.1fs (%d retries left)",
                url,
                reason,
                delay,
                retries_left,
            )
            await self._sleep(delay)
            retries_left -= 1
            delay *= 2
