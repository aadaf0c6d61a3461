"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from curabot.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Discord
    discord_application_id: str = ""
    discord_public_key: str = ""
    discord_bot_token: str = ""
    discord_guild_id: str = ""

    # Gemini
    gemini_api_key: str = ""

    # Reference store (empty URL -> in-memory backing)
    store_url: str = ""
    store_token: str = ""
    store_ttl_seconds: int = 86_400

    # Article fetching
    fetch_timeout_seconds: float = 10.0

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080

    def require(self, *fields: str) -> None:
        """Raise ConfigurationError naming every empty field in ``fields``.

        Field names are reported as their environment variable spelling so the
        message can be acted on directly.
        """
        missing = [name.upper() for name in fields if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}. "
                "Set them in the environment or in a .env file."
            )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
