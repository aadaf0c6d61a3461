"""Gemini client singleton with async support.

Creates a cached genai.Client configured with the API key from application
settings. The 30-second HTTP timeout bounds each of the three analysis calls;
no retry options are configured, failed calls surface immediately.
"""

from google import genai
from google.genai import types

from curabot.config import get_settings

_client: genai.Client | None = None


def get_gemini_client() -> genai.Client:
    """Return a cached Gemini client instance, created on first use."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=30_000),
        )
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
