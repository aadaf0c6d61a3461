"""Summarization pipeline: fetch -> analyze -> store -> render.

Each entry point returns a ready-to-send Discord message payload. Failures are
raised as CurabotError subclasses; ``describe_error`` turns any exception into
the text shown to the user.
"""

import logging
from datetime import datetime, timezone

from curabot.config import get_settings
from curabot.rendering import (
    EDITED_TITLE,
    INTEREST_FIELD,
    SUMMARY_FIELD,
    TAG_FIELD,
    RenderMode,
    render_summary,
)
from curabot.errors import CurabotError, InsufficientContentError, InvalidURLError
from curabot.extraction import fetch_article, validate_url
from curabot.llm import DEBUG_TITLE, analyze_article, get_gemini_client, mock_analysis
from curabot.models.reference import StoredReference
from curabot.store.base import ReferenceStore

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 100


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


async def summarize_article(url: str, store: ReferenceStore) -> dict:
    """Run the full pipeline for ``url`` and return the rendered summary message.

    Raises:
        InvalidURLError, FetchError, InsufficientContentError, AnalysisError,
        StoreError: each stage's classified failure.
    """
    settings = get_settings()
    validate_url(url)

    article = await fetch_article(url, timeout=settings.fetch_timeout_seconds)
    logger.info("Fetched '%s' (%d chars) from %s", article.title, len(article.content), url)
    if len(article.content) < MIN_CONTENT_LENGTH:
        logger.warning("Insufficient content from %s (%d chars)", url, len(article.content))
        raise InsufficientContentError()

    analysis = await analyze_article(get_gemini_client(), article)

    # Stored only after a successful analysis so failed runs leave no entry
    reference_id = await store.put(url, analysis.tags)
    logger.info("Stored reference %s for %s", reference_id, url)

    return render_summary(
        title=article.title,
        url=url,
        tags=analysis.tags,
        summary=analysis.summary,
        interest=analysis.interest,
        reference_id=reference_id,
        mode=RenderMode.NORMAL,
        timestamp=_now(),
    )


async def summarize_debug(url: str, store: ReferenceStore) -> dict:
    """Render a mock summary for ``url`` without fetching or calling the model."""
    validate_url(url)
    analysis = mock_analysis()
    reference_id = await store.put(url, analysis.tags)
    logger.info("Stored debug reference %s for %s", reference_id, url)
    return render_summary(
        title=DEBUG_TITLE,
        url=url,
        tags=analysis.tags,
        summary=analysis.summary,
        interest=analysis.interest,
        reference_id=reference_id,
        mode=RenderMode.DEBUG,
        timestamp=_now(),
    )


def render_edited(reference: StoredReference, fields: dict[str, str]) -> dict:
    """Render a summary from user-edited modal values, keeping the reference id."""
    return render_summary(
        title=EDITED_TITLE,
        url=reference.url,
        tags=fields.get(TAG_FIELD) or reference.tags,
        summary=fields.get(SUMMARY_FIELD, ""),
        interest=fields.get(INTEREST_FIELD, ""),
        reference_id=reference.id,
        mode=RenderMode.EDITED,
        timestamp=_now(),
    )


def describe_error(exc: BaseException) -> str:
    """User-facing text for a pipeline failure.

    Input problems are shown as-is; everything else is prefixed as a failed
    summarization. Unexpected exceptions do not leak their details.
    """
    if isinstance(exc, (InvalidURLError, InsufficientContentError)):
        return f"❌ {exc.user_message}"
    if isinstance(exc, CurabotError):
        return f"❌ Failed to summarize the article: {exc.user_message}"
    return "❌ Failed to summarize the article: Unknown error"
