"""Article retrieval: URL validation, download, and text extraction.

Public API:
    fetch_article(url, timeout) -> ArticleContent
        Downloads a page and returns its title and capped body text, raising
        InvalidURLError or a classified FetchError.
"""

from curabot.extraction.article import (
    CONTENT_CAP,
    TRUNCATION_MARKER,
    fetch_article,
    parse_article,
    truncate_content,
    validate_url,
)

__all__ = [
    "CONTENT_CAP",
    "TRUNCATION_MARKER",
    "fetch_article",
    "parse_article",
    "truncate_content",
    "validate_url",
]
