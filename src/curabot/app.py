"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from curabot.config import get_settings
from curabot.discord.router import router as discord_router
from curabot.logging_config import configure_logging
from curabot.store import create_reference_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging, fail fast on missing configuration, build the reference store."""
    settings = get_settings()
    configure_logging(settings.log_level)

    required = ["discord_public_key", "gemini_api_key"]
    if settings.store_url:
        required.append("store_token")
    settings.require(*required)

    app.state.settings = settings
    app.state.reference_store = create_reference_store(settings)
    logger.info("CuraBot started (environment=%s)", settings.environment)
    yield


app = FastAPI(
    title="CuraBot",
    lifespan=lifespan,
)
app.include_router(discord_router)


@app.get("/")
@app.get("/health")
async def health():
    """Liveness check for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "curabot",
        "version": "0.1.0",
    }
