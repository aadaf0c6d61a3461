"""Article content and analysis result models."""

from pydantic import BaseModel


class ArticleContent(BaseModel):
    """Title and normalized body text fetched from a URL."""

    title: str
    content: str  # Whitespace-normalized, capped at CONTENT_CAP (+ marker)


class AnalysisResult(BaseModel):
    """Language-model output for one article. All three fields come from independent calls."""

    tags: str
    summary: str
    interest: str
