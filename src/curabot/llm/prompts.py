"""System prompts and user-content builders for the three analysis calls.

The tags call sees a shorter content slice than the interest call, and the
summary call sees the whole capped article: classification needs less context
than synthesis.
"""

from curabot.models.content import ArticleContent

# Gemini model constant -- update here when a newer stable model ships
GEMINI_MODEL = "gemini-2.5-flash"

TAGS_CONTENT_LIMIT = 2_000
INTEREST_CONTENT_LIMIT = 3_000

TAGS_MAX_TOKENS = 50
SUMMARY_MAX_TOKENS = 300
INTEREST_MAX_TOKENS = 200

DEFAULT_TAGS = "Technology"
DEFAULT_SUMMARY = "Unable to generate summary."
DEFAULT_INTEREST = "This article provides valuable insights."

TAGS_SYSTEM_PROMPT = (
    "You are a technical content classifier. Generate 1-3 relevant tags for "
    "technical articles. Format: 'Tag1 / Tag2' or just 'Tag1'. Keep tags concise "
    "and technical."
)

SUMMARY_SYSTEM_PROMPT = (
    "You are a technical content summarizer for developers. Write direct, "
    "technical summaries without meta-commentary. Never start with phrases like "
    "'The article discusses', 'This article', 'The author explains', etc. Start "
    "immediately with the technical content."
)

INTEREST_SYSTEM_PROMPT = (
    "You are a technical content analyst for developers. Explain the practical "
    "value and relevance directly. Never start with 'This article', 'The content', "
    "'It is interesting', etc. Be direct and specific about technical benefits, "
    "use cases, or learning opportunities."
)


def build_tags_content(article: ArticleContent) -> str:
    return (
        "Based on this title and content, generate relevant technical tags:\n\n"
        f"Title: {article.title}\n\n"
        f"Content: {article.content[:TAGS_CONTENT_LIMIT]}"
    )


def build_summary_content(article: ArticleContent) -> str:
    return (
        "Write a concise 3-4 sentence summary focusing on the core technical "
        "concepts, implementations, or solutions. Start directly with the "
        f"technical information:\n\n{article.content}"
    )


def build_interest_content(article: ArticleContent) -> str:
    return (
        "Explain in 2-3 sentences why this is technically valuable for developers. "
        "Focus on practical applications, skills gained, or problems solved:\n\n"
        f"{article.content[:INTEREST_CONTENT_LIMIT]}"
    )
