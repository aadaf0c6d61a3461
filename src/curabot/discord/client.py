"""Outbound Discord API calls.

Follow-up and edit calls are addressed by the interaction's application id
and token, need no bot token, and are best-effort: failures are logged and
reported as ``False`` because there is no further channel to surface them on.
Command registration uses the bot token and raises on failure.
"""

import logging

import httpx

from curabot.config import get_settings

logger = logging.getLogger(__name__)

DISCORD_API_BASE = "https://discord.com/api/v10"
USER_AGENT = "DiscordBot (https://github.com/curabot/curabot, 0.1.0)"


class DiscordClient:
    """Thin httpx wrapper over the interaction webhook and command endpoints."""

    def __init__(
        self,
        bot_token: str = "",
        api_base: str = DISCORD_API_BASE,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._bot_token = bot_token
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._api_base,
            timeout=httpx.Timeout(self._timeout),
            headers={"User-Agent": USER_AGENT},
            transport=self._transport,
        )

    async def create_followup(self, application_id: str, token: str, message: dict) -> bool:
        """Send a follow-up message for a deferred interaction."""
        return await self._send_webhook(
            "POST", f"/webhooks/{application_id}/{token}", message, "follow-up"
        )

    async def edit_original(self, application_id: str, token: str, message: dict) -> bool:
        """Replace the message the interaction originated from."""
        return await self._send_webhook(
            "PATCH",
            f"/webhooks/{application_id}/{token}/messages/@original",
            message,
            "edit",
        )

    async def _send_webhook(self, method: str, path: str, message: dict, action: str) -> bool:
        try:
            async with self._client() as client:
                response = await client.request(method, path, json=message)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Discord %s failed: HTTP %d %s",
                action,
                exc.response.status_code,
                exc.response.text,
            )
            return False
        except httpx.HTTPError as exc:
            logger.warning("Discord %s failed: %s", action, exc)
            return False
        logger.info("Discord %s sent (HTTP %d)", action, response.status_code)
        return True

    async def bulk_overwrite_commands(
        self, application_id: str, commands: list[dict], guild_id: str = ""
    ) -> list[dict]:
        """Replace the registered command set, guild-scoped when ``guild_id`` is set.

        The PUT is idempotent. Raises httpx.HTTPError on failure.
        """
        if guild_id:
            path = f"/applications/{application_id}/guilds/{guild_id}/commands"
        else:
            path = f"/applications/{application_id}/commands"

        async with self._client() as client:
            response = await client.put(
                path,
                json=commands,
                headers={"Authorization": f"Bot {self._bot_token}"},
            )
            logger.info("Discord PUT %s - status %d", path, response.status_code)
            response.raise_for_status()
            return response.json()


_client: DiscordClient | None = None


def get_discord_client() -> DiscordClient:
    """Return a cached DiscordClient configured from settings."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = DiscordClient(bot_token=settings.discord_bot_token)
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
