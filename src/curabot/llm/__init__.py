"""LLM processing: tag, summary, and interest generation via Gemini.

Public API:
    analyze_article(client, article) -> AnalysisResult
    mock_analysis() -> AnalysisResult
"""

from curabot.llm.analyzer import DEBUG_TITLE, analyze_article, mock_analysis
from curabot.llm.client import get_gemini_client, reset_client

__all__ = [
    "DEBUG_TITLE",
    "analyze_article",
    "get_gemini_client",
    "mock_analysis",
    "reset_client",
]
