"""Article download and text extraction using httpx and BeautifulSoup."""

import logging
import re
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from curabot.errors import FetchError, FetchErrorKind, InvalidURLError
from curabot.models.content import ArticleContent

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; DiscordBot/1.0)"
MAX_REDIRECTS = 5
CONTENT_CAP = 12_000
TRUNCATION_MARKER = "..."
FALLBACK_TITLE = "Article"

# Removed before title/content lookup
_NOISE_TAGS = ["script", "style", "nav", "header", "footer", "aside"]

# Content containers in preference order; first non-empty match wins
_CONTENT_SELECTORS = ["article", "main", ".post-content", ".entry-content", "body"]

_WHITESPACE = re.compile(r"\s+")


def validate_url(url: str) -> str:
    """Return ``url`` unchanged if it is an absolute http(s) URL.

    Raises InvalidURLError otherwise. Never touches the network.
    """
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InvalidURLError() from exc
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLError()
    return url


def truncate_content(text: str, cap: int = CONTENT_CAP) -> str:
    """Cut ``text`` to ``cap`` characters and append the marker; shorter text is untouched."""
    if len(text) <= cap:
        return text
    return text[:cap] + TRUNCATION_MARKER


def _normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def extract_title(soup: BeautifulSoup) -> str:
    """Pick the page title: first h1, then <title>, then og:title, then a fixed fallback.

    Whitespace inside the chosen title is collapsed to single spaces.
    """
    candidates = []
    h1 = soup.find("h1")
    if h1 is not None:
        candidates.append(h1.get_text(" "))
    if soup.title is not None:
        candidates.append(soup.title.get_text(" "))
    og_title = soup.find("meta", attrs={"property": "og:title"})
    if og_title is not None:
        candidates.append(og_title.get("content", ""))

    for candidate in candidates:
        title = _normalize(candidate)
        if title:
            return title
    return FALLBACK_TITLE


def extract_text(soup: BeautifulSoup) -> str:
    """Return whitespace-normalized text of the first non-empty content container."""
    for selector in _CONTENT_SELECTORS:
        text = " ".join(el.get_text(" ") for el in soup.select(selector))
        text = _normalize(text)
        if text:
            return text
    # Fragments without a <body> element
    return _normalize(soup.get_text(" "))


def parse_article(html: str) -> ArticleContent:
    """Parse raw HTML into a title and capped body text."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all(_NOISE_TAGS):
        element.decompose()

    title = extract_title(soup)
    raw = extract_text(soup)
    content = truncate_content(raw)
    if len(content) != len(raw):
        logger.info("Content truncated from %d to %d characters", len(raw), CONTENT_CAP)
    return ArticleContent(title=title, content=content)


def _build_client(timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        max_redirects=MAX_REDIRECTS,
        headers={"User-Agent": USER_AGENT},
    )


def _classify(exc: httpx.HTTPError, timeout: float) -> FetchError:
    """Map an httpx exception onto the fetch error taxonomy."""
    if isinstance(exc, httpx.TimeoutException):
        return FetchError(
            FetchErrorKind.TIMEOUT,
            f"Timeout: Article took too long to load (>{timeout:g}s)",
        )
    if isinstance(exc, httpx.ConnectError):
        cause = exc.__cause__ or exc.__context__
        if isinstance(cause, ConnectionRefusedError) or "refused" in str(exc).lower():
            return FetchError(
                FetchErrorKind.REFUSED,
                "Connection refused: The server is not responding.",
            )
        return FetchError(
            FetchErrorKind.NETWORK,
            "Network error: Cannot reach the URL. Check if the URL is accessible.",
        )
    if isinstance(exc, httpx.NetworkError):
        return FetchError(
            FetchErrorKind.NETWORK,
            "Network error: Cannot reach the URL. Check if the URL is accessible.",
        )
    if isinstance(exc, httpx.TooManyRedirects):
        return FetchError(FetchErrorKind.GENERIC, "Too many redirects while loading the article.")
    return FetchError(FetchErrorKind.GENERIC, f"Failed to fetch article: {exc}")


async def fetch_article(url: str, timeout: float = 10.0) -> ArticleContent:
    """Download ``url`` and extract its title and body text.

    Responses below 500 are parsed, because many sites serve paywall or
    not-found pages with usable text. A 4xx page that yields no text, or any
    5xx response, raises FetchError(HTTP_STATUS).

    Raises:
        InvalidURLError: ``url`` is not an absolute http(s) URL (no request made).
        FetchError: classified download failure.
    """
    validate_url(url)
    logger.info("Fetching article: %s", url)

    try:
        async with _build_client(timeout) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        error = _classify(exc, timeout)
        logger.warning("Fetch failed for %s (%s): %s", url, error.kind.value, exc)
        raise error from exc

    status = response.status_code
    logger.info(
        "Fetched %s: status=%d bytes=%d content-type=%s",
        url,
        status,
        len(response.content),
        response.headers.get("content-type", ""),
    )
    http_error = FetchError(
        FetchErrorKind.HTTP_STATUS,
        f"HTTP {status}: {response.reason_phrase or 'Failed to fetch article'}",
        status=status,
    )
    if status >= 500:
        raise http_error

    article = parse_article(response.text)
    if status >= 400 and not article.content:
        raise http_error
    return article
