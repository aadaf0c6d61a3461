"""Slash command schema and the one-shot registration script.

Run ``curabot-register`` after changing the schema. With DISCORD_GUILD_ID set
the commands are registered to that guild (available immediately); otherwise
they are registered globally (propagation can take up to an hour).
"""

import asyncio
import logging
import sys

import httpx

from curabot.config import get_settings
from curabot.discord.client import DiscordClient
from curabot.errors import ConfigurationError
from curabot.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Application command option types
OPTION_STRING = 3
OPTION_BOOLEAN = 5

SUMMARIZE_COMMAND = {
    "name": "summarize",
    "description": "Summarize an IT article or blog post from a URL using AI",
    "type": 1,
    "integration_types": [0, 1],
    "contexts": [0, 1, 2],
    "options": [
        {
            "type": OPTION_STRING,
            "name": "url",
            "description": "The URL of the article to summarize",
            "required": True,
        },
        {
            "type": OPTION_BOOLEAN,
            "name": "debug",
            "description": "Debug mode - skip article fetching and AI calls, use mock data",
            "required": False,
        },
    ],
}

COMMANDS = [SUMMARIZE_COMMAND]


async def register_commands(client: DiscordClient, application_id: str, guild_id: str = "") -> None:
    """Install COMMANDS for the application, guild-scoped when ``guild_id`` is set."""
    scope = f"guild {guild_id}" if guild_id else "global"
    logger.info("Installing %d %s command(s)", len(COMMANDS), scope)
    await client.bulk_overwrite_commands(application_id, COMMANDS, guild_id=guild_id)
    logger.info("Installed %d %s command(s)", len(COMMANDS), scope)


def main() -> None:
    """Console entry point: register commands and exit non-zero on failure."""
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        settings.require("discord_application_id", "discord_bot_token")
        client = DiscordClient(bot_token=settings.discord_bot_token)
        asyncio.run(
            register_commands(
                client, settings.discord_application_id, settings.discord_guild_id
            )
        )
    except (ConfigurationError, httpx.HTTPError) as exc:
        logger.error("Failed to register commands: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
