from __future__ import annotations

import asyncio
import logging

import aiohttp
import pytest
from aioresponses import aioresponses
from yarl import URL

from url_search.core.config import DEFAULT_USER_AGENT, FetchSettings
from url_search.core.fetcher import PageFetcher
from url_search.core.models import Content, Unavailable


@pytest.mark.asyncio
async def test_fetch_returns_body_and_sends_browser_user_agent() -> None:
    url = "https://example.com/page"
    with aioresponses() as m:
        m.get(url, status=200, body="<html><body>hi</body></html>", headers={"Content-Type": "text/html"})
        async with aiohttp.ClientSession() as s:
            result = await PageFetcher(session=s, settings=FetchSettings()).fetch(url)

        call = m.requests[("GET", URL(url))][0]
        assert call.kwargs["headers"]["User-Agent"] == DEFAULT_USER_AGENT
        assert call.kwargs["timeout"].total == 10.0

    assert result == Content(raw_markup="<html><body>hi</body></html>")


@pytest.mark.asyncio
async def test_empty_body_is_still_content() -> None:
    url = "https://example.com/empty"
    with aioresponses() as m:
        m.get(url, status=200, body="")
        async with aiohttp.ClientSession() as s:
            result = await PageFetcher(session=s, settings=FetchSettings()).fetch(url)
    assert result == Content(raw_markup="")


@pytest.mark.asyncio
async def test_http_error_status_is_unavailable(caplog: pytest.LogCaptureFixture) -> None:
    url = "https://example.com/missing"
    with aioresponses() as m:
        m.get(url, status=404, body="not found")
        async with aiohttp.ClientSession() as s:
            with caplog.at_level(logging.WARNING):
                result = await PageFetcher(session=s, settings=FetchSettings()).fetch(url)

    assert isinstance(result, Unavailable)
    assert any(url in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_connection_error_is_unavailable() -> None:
    url = "https://down.example/"
    with aioresponses() as m:
        m.get(url, exception=aiohttp.ClientConnectionError("connection refused"))
        async with aiohttp.ClientSession() as s:
            result = await PageFetcher(session=s, settings=FetchSettings()).fetch(url)

    assert result == Unavailable(reason="connection refused")


@pytest.mark.asyncio
async def test_timeout_is_unavailable_with_named_reason() -> None:
    url = "https://slow.example/"
    with aioresponses() as m:
        m.get(url, exception=asyncio.TimeoutError())
        async with aiohttp.ClientSession() as s:
            result = await PageFetcher(session=s, settings=FetchSettings()).fetch(url)

    assert isinstance(result, Unavailable)
    assert result.reason == "TimeoutError"
