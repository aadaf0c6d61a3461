"""Data models for interactions, article content, and stored references."""

from curabot.models.content import AnalysisResult, ArticleContent
from curabot.models.interaction import (
    EPHEMERAL_FLAG,
    CommandInteraction,
    ComponentInteraction,
    Interaction,
    InteractionResponseType,
    InteractionType,
    ModalSubmitInteraction,
    PingInteraction,
    parse_interaction,
)
from curabot.models.reference import StoredReference

__all__ = [
    "AnalysisResult",
    "ArticleContent",
    "CommandInteraction",
    "ComponentInteraction",
    "EPHEMERAL_FLAG",
    "Interaction",
    "InteractionResponseType",
    "InteractionType",
    "ModalSubmitInteraction",
    "PingInteraction",
    "StoredReference",
    "parse_interaction",
]
