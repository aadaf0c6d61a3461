"""Tests for article download and failure classification (mocked transport)."""

from unittest.mock import patch

import httpx
import pytest

from curabot.errors import FetchError, FetchErrorKind, InvalidURLError
from curabot.extraction.article import (
    MAX_REDIRECTS,
    USER_AGENT,
    _build_client,
    fetch_article,
    validate_url,
)

ARTICLE_HTML = (
    "<html><head><title>Paywalled</title></head>"
    "<body><article>Teaser paragraph that is still useful.</article></body></html>"
)


def _patched_client(handler):
    """Patch the client factory so requests hit ``handler`` instead of the network."""
    return patch(
        "curabot.extraction.article._build_client",
        side_effect=lambda timeout: httpx.AsyncClient(
            transport=httpx.MockTransport(handler), follow_redirects=True
        ),
    )


@pytest.mark.asyncio
async def test_success_returns_title_and_content():
    with _patched_client(lambda request: httpx.Response(200, text=ARTICLE_HTML)):
        article = await fetch_article("https://example.com/a")

    assert article.title == "Paywalled"
    assert article.content == "Teaser paragraph that is still useful."


@pytest.mark.asyncio
async def test_403_with_body_is_parsed_not_escalated():
    with _patched_client(lambda request: httpx.Response(403, text=ARTICLE_HTML)):
        article = await fetch_article("https://example.com/paywall")

    assert article.title
    assert article.content


@pytest.mark.asyncio
async def test_404_without_text_is_escalated():
    with _patched_client(lambda request: httpx.Response(404, text="")):
        with pytest.raises(FetchError) as exc_info:
            await fetch_article("https://example.com/missing")

    assert exc_info.value.kind == FetchErrorKind.HTTP_STATUS
    assert exc_info.value.status == 404


@pytest.mark.asyncio
async def test_500_is_escalated():
    with _patched_client(lambda request: httpx.Response(500, text=ARTICLE_HTML)):
        with pytest.raises(FetchError) as exc_info:
            await fetch_article("https://example.com/broken")

    assert exc_info.value.kind == FetchErrorKind.HTTP_STATUS
    assert exc_info.value.status == 500
    assert "HTTP 500" in exc_info.value.user_message


@pytest.mark.asyncio
async def test_timeout_is_classified():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with _patched_client(handler):
        with pytest.raises(FetchError) as exc_info:
            await fetch_article("https://example.com/slow")

    assert exc_info.value.kind == FetchErrorKind.TIMEOUT
    assert "Timeout" in exc_info.value.user_message


@pytest.mark.asyncio
async def test_connection_refused_is_classified():
    def handler(request):
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    with _patched_client(handler):
        with pytest.raises(FetchError) as exc_info:
            await fetch_article("https://example.com/down")

    assert exc_info.value.kind == FetchErrorKind.REFUSED


@pytest.mark.asyncio
async def test_unresolvable_host_is_network_error():
    def handler(request):
        raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

    with _patched_client(handler):
        with pytest.raises(FetchError) as exc_info:
            await fetch_article("https://nowhere.invalid/a")

    assert exc_info.value.kind == FetchErrorKind.NETWORK


@pytest.mark.asyncio
async def test_too_many_redirects_is_generic():
    def handler(request):
        raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=request)

    with _patched_client(handler):
        with pytest.raises(FetchError) as exc_info:
            await fetch_article("https://example.com/loop")

    assert exc_info.value.kind == FetchErrorKind.GENERIC


@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["not-a-url", "ftp://example.com/file", "https://", ""])
async def test_invalid_url_makes_no_request(url: str):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, text=ARTICLE_HTML)

    with _patched_client(handler):
        with pytest.raises(InvalidURLError):
            await fetch_article(url)

    assert calls == []


def test_validate_url_accepts_http_and_https():
    assert validate_url("http://example.com") == "http://example.com"
    assert validate_url("https://example.com/a?b=c") == "https://example.com/a?b=c"


@pytest.mark.asyncio
async def test_client_identifies_as_bot_and_bounds_redirects():
    async with _build_client(10.0) as client:
        assert client.headers["User-Agent"] == USER_AGENT
        assert client.follow_redirects is True
        assert client.max_redirects == MAX_REDIRECTS
        assert client.timeout.read == 10.0
