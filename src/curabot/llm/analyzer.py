"""Content analyzer: ArticleContent -> AnalysisResult via three Gemini calls.

The tags, summary, and interest calls run concurrently. They succeed or fail
together: if any call fails the whole analysis raises AnalysisError and no
partial result is returned.
"""

import asyncio
import logging

import httpx
from google import genai
from google.genai import types
from google.genai.errors import APIError

from curabot.errors import AnalysisError
from curabot.llm.prompts import (
    DEFAULT_INTEREST,
    DEFAULT_SUMMARY,
    DEFAULT_TAGS,
    GEMINI_MODEL,
    INTEREST_MAX_TOKENS,
    INTEREST_SYSTEM_PROMPT,
    SUMMARY_MAX_TOKENS,
    SUMMARY_SYSTEM_PROMPT,
    TAGS_MAX_TOKENS,
    TAGS_SYSTEM_PROMPT,
    build_interest_content,
    build_summary_content,
    build_tags_content,
)
from curabot.models.content import AnalysisResult, ArticleContent

logger = logging.getLogger(__name__)

DEBUG_TITLE = "Debug Mode - Mock Article"


def mock_analysis() -> AnalysisResult:
    """Fixed analysis used by debug runs. Makes no external calls."""
    return AnalysisResult(
        tags="Debug / Mock Data",
        summary=(
            "This is a DEBUG summary. Neither article fetching nor the language "
            "model was called. This response confirms that Discord communication "
            "(receiving commands and sending responses) is working correctly."
        ),
        interest=(
            "DEBUG mode separates problems with external dependencies (article "
            "fetching, the language model) from problems with Discord "
            "communication. If you see this message, the bot's Discord "
            "integration is working."
        ),
    )


async def _generate(
    client: genai.Client,
    system_prompt: str,
    user_content: str,
    max_tokens: int,
    temperature: float,
    fallback: str,
) -> str:
    """Run one completion and return its stripped text, or ``fallback`` if empty."""
    response = await client.aio.models.generate_content(
        model=GEMINI_MODEL,
        contents=user_content,
        config=types.GenerateContentConfig(
            system_instruction=system_prompt,
            max_output_tokens=max_tokens,
            temperature=temperature,
        ),
    )
    text = (response.text or "").strip()
    return text or fallback


async def analyze_article(client: genai.Client, article: ArticleContent) -> AnalysisResult:
    """Generate tags, summary, and interest for an article.

    Raises:
        AnalysisError: if any of the three calls fails.
    """
    logger.info("Analyzing article '%s' (%d chars)", article.title, len(article.content))
    try:
        tags, summary, interest = await asyncio.gather(
            _generate(
                client,
                TAGS_SYSTEM_PROMPT,
                build_tags_content(article),
                TAGS_MAX_TOKENS,
                0.5,
                DEFAULT_TAGS,
            ),
            _generate(
                client,
                SUMMARY_SYSTEM_PROMPT,
                build_summary_content(article),
                SUMMARY_MAX_TOKENS,
                0.7,
                DEFAULT_SUMMARY,
            ),
            _generate(
                client,
                INTEREST_SYSTEM_PROMPT,
                build_interest_content(article),
                INTEREST_MAX_TOKENS,
                0.7,
                DEFAULT_INTEREST,
            ),
        )
    except (APIError, httpx.HTTPError) as exc:
        logger.warning("Analysis failed for '%s': %s", article.title, exc)
        raise AnalysisError() from exc

    logger.info(
        "Analysis complete: tags=%r summary=%d chars interest=%d chars",
        tags,
        len(summary),
        len(interest),
    )
    return AnalysisResult(tags=tags, summary=summary, interest=interest)
