"""Discord interactions webhook router with signature verification."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from curabot.discord.handlers import handle_interaction
from curabot.discord.verification import verify_discord_request
from curabot.store.base import ReferenceStore

router = APIRouter(prefix="", tags=["discord"])


def get_reference_store(request: Request) -> ReferenceStore:
    """Return the reference store created during application startup."""
    return request.app.state.reference_store


@router.post("/interactions")
async def discord_interactions(
    background_tasks: BackgroundTasks,
    payload: dict = Depends(verify_discord_request),
    store: ReferenceStore = Depends(get_reference_store),
) -> JSONResponse:
    """Receive Discord interaction webhooks.

    The initial response is returned immediately; deferred work runs as a
    background task after the response has been sent.
    """
    return await handle_interaction(payload, background_tasks, store)
