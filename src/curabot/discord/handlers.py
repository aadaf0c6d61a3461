"""Interaction dispatch: one initial response per webhook, plus optional background work.

Every interaction gets exactly one initial response. Slow work (article fetch
and model calls) is deferred: the handler schedules a background task that
runs after the initial response is sent and talks back to Discord through the
interaction's application id and token. Background failures are terminal:
they are logged, and reported to the user only where a follow-up channel
exists (new summaries). Regenerate failures leave the message unchanged.
"""

import logging

from fastapi import BackgroundTasks
from fastapi.responses import JSONResponse

from curabot.discord.client import get_discord_client
from curabot.rendering import (
    EDIT_MODAL_PREFIX,
    EDIT_PREFIX,
    NOT_FOUND_MESSAGE,
    REGENERATE_PREFIX,
    render_edit_modal,
    render_error,
)
from curabot.errors import CurabotError, InvalidURLError, StoreError, UnknownInteractionError
from curabot.extraction import validate_url
from curabot.models.interaction import (
    CommandInteraction,
    ComponentInteraction,
    InteractionResponseType,
    ModalSubmitInteraction,
    PingInteraction,
    parse_interaction,
)
from curabot.models.reference import StoredReference
from curabot.pipeline import describe_error, render_edited, summarize_article, summarize_debug
from curabot.store.base import ReferenceStore

logger = logging.getLogger(__name__)

SUMMARIZE_COMMAND_NAME = "summarize"
MISSING_URL_MESSAGE = "❌ URL is required"


def _respond(response_type: InteractionResponseType, data: dict | None = None) -> JSONResponse:
    body: dict = {"type": int(response_type)}
    if data is not None:
        body["data"] = data
    return JSONResponse(body)


def _ephemeral(message: str) -> JSONResponse:
    return _respond(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE, render_error(message))


async def handle_interaction(
    payload: dict, background_tasks: BackgroundTasks, store: ReferenceStore
) -> JSONResponse:
    """Dispatch an interaction payload by type.

    - PING: PONG
    - APPLICATION_COMMAND: /summarize
    - MESSAGE_COMPONENT: regenerate and edit buttons
    - MODAL_SUBMIT: edit form
    - anything else: HTTP 400 with an ``error`` marker
    """
    try:
        interaction = parse_interaction(payload)

        if isinstance(interaction, PingInteraction):
            return _respond(InteractionResponseType.PONG)
        if isinstance(interaction, CommandInteraction):
            return await handle_command(interaction, background_tasks, store)
        if isinstance(interaction, ComponentInteraction):
            return await handle_component(interaction, background_tasks, store)
        return await handle_modal_submit(interaction, background_tasks, store)

    except UnknownInteractionError as exc:
        interaction_type = payload.get("type") if isinstance(payload, dict) else None
        logger.error("Rejected interaction (type=%s): %s", interaction_type, exc.marker)
        return JSONResponse({"error": exc.marker}, status_code=400)
    except StoreError as exc:
        return _ephemeral(describe_error(exc))


async def handle_command(
    interaction: CommandInteraction, background_tasks: BackgroundTasks, store: ReferenceStore
) -> JSONResponse:
    """Handle /summarize.

    Input is validated synchronously. Debug runs render inline with mock data;
    normal runs are deferred and finished by ``process_summarize``.
    """
    if interaction.data.name != SUMMARIZE_COMMAND_NAME:
        raise UnknownInteractionError("unknown command")

    raw_url = interaction.option("url")
    if not raw_url:
        return _ephemeral(MISSING_URL_MESSAGE)
    url = str(raw_url).strip()
    debug = interaction.option("debug") is True

    try:
        validate_url(url)
    except InvalidURLError as exc:
        logger.info("Rejected invalid URL %r", url)
        return _ephemeral(describe_error(exc))

    if debug:
        logger.info("Debug summarize for %s", url)
        message = await summarize_debug(url, store)
        return _respond(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE, message)

    logger.info("Deferring summarize for %s", url)
    background_tasks.add_task(
        process_summarize,
        application_id=interaction.application_id,
        token=interaction.token,
        url=url,
        store=store,
    )
    return _respond(InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE)


async def handle_component(
    interaction: ComponentInteraction, background_tasks: BackgroundTasks, store: ReferenceStore
) -> JSONResponse:
    """Handle the regenerate and edit buttons on a summary message."""
    custom_id = interaction.data.custom_id

    if custom_id.startswith(REGENERATE_PREFIX):
        reference = await store.get(custom_id.removeprefix(REGENERATE_PREFIX))
        if reference is None:
            return _ephemeral(NOT_FOUND_MESSAGE)
        background_tasks.add_task(
            process_regenerate,
            application_id=interaction.application_id,
            token=interaction.token,
            reference=reference,
            store=store,
        )
        return _respond(InteractionResponseType.DEFERRED_UPDATE_MESSAGE)

    if custom_id.startswith(EDIT_PREFIX):
        reference = await store.get(custom_id.removeprefix(EDIT_PREFIX))
        if reference is None:
            return _ephemeral(NOT_FOUND_MESSAGE)
        return _respond(
            InteractionResponseType.MODAL,
            render_edit_modal(reference.id, reference.tags),
        )

    raise UnknownInteractionError("unknown component")


async def handle_modal_submit(
    interaction: ModalSubmitInteraction, background_tasks: BackgroundTasks, store: ReferenceStore
) -> JSONResponse:
    """Handle the edit modal: defer, then replace the message with the submitted text."""
    custom_id = interaction.data.custom_id
    if not custom_id.startswith(EDIT_MODAL_PREFIX):
        raise UnknownInteractionError("unknown modal")

    reference = await store.get(custom_id.removeprefix(EDIT_MODAL_PREFIX))
    if reference is None:
        return _ephemeral(NOT_FOUND_MESSAGE)

    background_tasks.add_task(
        process_modal_edit,
        application_id=interaction.application_id,
        token=interaction.token,
        reference=reference,
        fields=interaction.field_values(),
    )
    return _respond(InteractionResponseType.DEFERRED_UPDATE_MESSAGE)


def _log_failure(action: str, url: str, exc: Exception) -> None:
    if isinstance(exc, CurabotError):
        logger.warning("%s failed for %s: %s", action, url, exc)
    else:
        logger.error("%s failed for %s: %s", action, url, exc, exc_info=True)


async def process_summarize(
    application_id: str, token: str, url: str, store: ReferenceStore
) -> None:
    """Background phase of /summarize: run the pipeline and send one follow-up.

    On failure the follow-up carries an ephemeral error instead, so the
    deferred interaction never times out silently.
    """
    client = get_discord_client()
    try:
        message = await summarize_article(url, store)
    except Exception as exc:
        _log_failure("Summarize", url, exc)
        await client.create_followup(application_id, token, render_error(describe_error(exc)))
        return

    if await client.create_followup(application_id, token, message):
        logger.info("Summary delivered for %s", url)


async def process_regenerate(
    application_id: str, token: str, reference: StoredReference, store: ReferenceStore
) -> None:
    """Background phase of the regenerate button: rerun the pipeline and edit in place.

    Failures are logged only; the message keeps its last rendered state.
    """
    logger.info("Regenerating summary %s for %s", reference.id, reference.url)
    try:
        message = await summarize_article(reference.url, store)
    except Exception as exc:
        _log_failure("Regenerate", reference.url, exc)
        return

    if await get_discord_client().edit_original(application_id, token, message):
        logger.info("Summary regenerated for %s", reference.url)


async def process_modal_edit(
    application_id: str, token: str, reference: StoredReference, fields: dict[str, str]
) -> None:
    """Background phase of the edit modal: render the submitted values and edit in place."""
    logger.info("Applying user edits to summary %s for %s", reference.id, reference.url)
    message = render_edited(reference, fields)
    if await get_discord_client().edit_original(application_id, token, message):
        logger.info("Summary updated with user edits for %s", reference.url)
