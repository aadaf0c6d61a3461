"""Discord ingress: webhook verification, interaction dispatch, and outbound API calls."""

from curabot.discord.client import DiscordClient, get_discord_client, reset_client
from curabot.discord.router import get_reference_store, router

__all__ = [
    "DiscordClient",
    "get_discord_client",
    "get_reference_store",
    "reset_client",
    "router",
]
