"""Tests for the resilient fetcher (retry policy & status classification).

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made.
- The fetcher's ``sleep`` is replaced by a recorder so backoff delays are
  asserted without actually waiting.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from brandprint.errors import BlockedByTarget, FetchError, TransientNetworkFailure
from brandprint.scraper.fetcher import Fetcher, build_client, is_retryable_status
from brandprint.config import Settings

_URL = "https://example.com/page"


class _SleepRecorder:
    """Drop-in for ``asyncio.sleep`` that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


# ---------------------------------------------------------------------------
# Status classification
# ---------------------------------------------------------------------------

class TestIsRetryableStatus:
    @pytest.mark.parametrize("status", [None, 429, 500, 502, 503, 504, 599])
    def test_retryable(self, status) -> None:
        assert is_retryable_status(status) is True

    @pytest.mark.parametrize("status", [200, 301, 400, 401, 403, 404, 418])
    def test_not_retryable(self, status) -> None:
        assert is_retryable_status(status) is False


# ---------------------------------------------------------------------------
# Fetcher.fetch
# ---------------------------------------------------------------------------

class TestFetch:
    @pytest.mark.asyncio
    async def test_success_returns_response(self) -> None:
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200, text="<html></html>"))
            async with httpx.AsyncClient() as client:
                response = await Fetcher(client, sleep=sleep).fetch(_URL)

        assert response.status_code == 200
        assert response.text == "<html></html>"
        assert route.call_count == 1
        assert sleep.delays == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_access_denied_is_not_retried(self, status: int) -> None:
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(status))
            async with httpx.AsyncClient() as client:
                with pytest.raises(BlockedByTarget) as exc_info:
                    await Fetcher(client, sleep=sleep).fetch(_URL)

        assert route.call_count == 1
        assert sleep.delays == []
        assert exc_info.value.status == status
        assert exc_info.value.url == _URL
        assert _URL in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_503_three_times_then_success(self) -> None:
        """Three 503s then a 200: four attempts with 1s, 2s, 4s backoff."""
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(
                side_effect=[
                    httpx.Response(503),
                    httpx.Response(503),
                    httpx.Response(503),
                    httpx.Response(200, text="ok"),
                ]
            )
            async with httpx.AsyncClient() as client:
                response = await Fetcher(client, sleep=sleep).fetch(_URL)

        assert response.status_code == 200
        assert route.call_count == 4
        assert sleep.delays == [1.0, 2.0, 4.0]

    @pytest.mark.asyncio
    async def test_retries_exhausted_raises_transient_failure(self) -> None:
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(503))
            async with httpx.AsyncClient() as client:
                with pytest.raises(TransientNetworkFailure) as exc_info:
                    await Fetcher(client, sleep=sleep).fetch(_URL)

        assert route.call_count == 4
        assert sleep.delays == [1.0, 2.0, 4.0]
        assert exc_info.value.status == 503
        assert exc_info.value.attempts == 4

    @pytest.mark.asyncio
    async def test_429_is_retried(self) -> None:
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(
                side_effect=[httpx.Response(429), httpx.Response(200, text="ok")]
            )
            async with httpx.AsyncClient() as client:
                response = await Fetcher(client, sleep=sleep).fetch(_URL)

        assert response.status_code == 200
        assert route.call_count == 2
        assert sleep.delays == [1.0]

    @pytest.mark.asyncio
    async def test_network_error_is_retried(self) -> None:
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(
                side_effect=[
                    httpx.ConnectError("connection refused"),
                    httpx.ReadTimeout("too slow"),
                    httpx.Response(200, text="ok"),
                ]
            )
            async with httpx.AsyncClient() as client:
                response = await Fetcher(client, sleep=sleep).fetch(_URL)

        assert response.status_code == 200
        assert route.call_count == 3
        assert sleep.delays == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_network_error_exhausted_has_no_status(self) -> None:
        sleep = _SleepRecorder()
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ConnectError("connection refused"))
            async with httpx.AsyncClient() as client:
                with pytest.raises(TransientNetworkFailure) as exc_info:
                    await Fetcher(client, sleep=sleep).fetch(_URL)

        assert exc_info.value.status is None
        assert "network error" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_unclassified_4xx_passes_through(self) -> None:
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(404, text="Not Found"))
            async with httpx.AsyncClient() as client:
                response = await Fetcher(client, sleep=sleep).fetch(_URL)

        assert response.status_code == 404
        assert route.call_count == 1
        assert sleep.delays == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "url", ["data:text/css,a{color:red}", "javascript:void(0)", "blob:https://example.com/x"]
    )
    async def test_unrequestable_url_is_not_retried(self, url: str) -> None:
        sleep = _SleepRecorder()
        async with httpx.AsyncClient() as client:
            with pytest.raises(FetchError) as exc_info:
                await Fetcher(client, sleep=sleep).fetch(url)

        assert exc_info.type is FetchError
        assert exc_info.value.status is None
        assert sleep.delays == []

    @pytest.mark.asyncio
    async def test_explicit_budget_overrides_defaults(self) -> None:
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(500))
            async with httpx.AsyncClient() as client:
                with pytest.raises(TransientNetworkFailure):
                    await Fetcher(client, sleep=sleep).fetch(_URL, retries_left=1, delay=0.5)

        assert route.call_count == 2
        assert sleep.delays == [0.5]


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------

class TestConstruction:
    @pytest.mark.asyncio
    async def test_from_settings_uses_config_budget(self) -> None:
        config = Settings(max_retries=1, initial_retry_delay=0.25)
        sleep = _SleepRecorder()
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(502))
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher.from_settings(client, config, sleep=sleep)
                with pytest.raises(TransientNetworkFailure):
                    await fetcher.fetch(_URL)

        assert route.call_count == 2
        assert sleep.delays == [0.25]

    @pytest.mark.asyncio
    async def test_build_client_sends_configured_user_agent(self) -> None:
        config = Settings(user_agent="brandprint-test/1.0")
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200))
            async with build_client(config) as client:
                await client.get(_URL)

        assert route.calls.last.request.headers["User-Agent"] == "brandprint-test/1.0"
