"""Discord message payload builders.

All functions here are pure: the same input always produces the same payload,
and the timestamp is passed in rather than read from the clock.
"""

from enum import Enum

from curabot.models.interaction import EPHEMERAL_FLAG

EMBED_TITLE_LIMIT = 256
EMBED_DESCRIPTION_LIMIT = 4096

TAG_MAX_LENGTH = 100
SUMMARY_MAX_LENGTH = 2000
INTEREST_MAX_LENGTH = 500

# Discord component types
ACTION_ROW = 1
BUTTON = 2
TEXT_INPUT = 4

# Button and text input styles
BUTTON_PRIMARY = 1
BUTTON_SECONDARY = 2
INPUT_SHORT = 1
INPUT_PARAGRAPH = 2

REGENERATE_PREFIX = "regenerate_"
EDIT_PREFIX = "edit_"
EDIT_MODAL_PREFIX = "edit_modal_"

TAG_FIELD = "tag_text"
SUMMARY_FIELD = "summary_text"
INTEREST_FIELD = "conclusion_text"

EDITED_TITLE = "Edited Summary"
NOT_FOUND_MESSAGE = "❌ Data not found. The bot may have restarted."


class RenderMode(str, Enum):
    """Cosmetic variant of a summary message."""

    NORMAL = "normal"
    DEBUG = "debug"
    EDITED = "edited"


_COLORS = {
    RenderMode.NORMAL: 0x5865F2,
    RenderMode.DEBUG: 0xFF9900,
    RenderMode.EDITED: 0x5865F2,
}

_FOOTERS = {
    RenderMode.NORMAL: "CuraBot - AI-Powered Summarization",
    RenderMode.DEBUG: "CuraBot - DEBUG MODE (No External Calls)",
    RenderMode.EDITED: "CuraBot - Manually Edited",
}


def _clip(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 1] + "…"


def build_description(url: str, tags: str, summary: str, interest: str) -> str:
    return (
        f"🏷️ **Tag:** {tags}\n\n"
        f"🔗 **Link:** {url}\n\n"
        f"📖 **Summary:**\n{summary}\n\n"
        f"💡 **Why it's interesting:**\n{interest}"
    )


def build_action_row(reference_id: str) -> dict:
    """Regenerate and edit buttons, both keyed to the same reference id."""
    return {
        "type": ACTION_ROW,
        "components": [
            {
                "type": BUTTON,
                "style": BUTTON_PRIMARY,
                "label": "🔄 Regenerate",
                "custom_id": f"{REGENERATE_PREFIX}{reference_id}",
            },
            {
                "type": BUTTON,
                "style": BUTTON_SECONDARY,
                "label": "✏️ Edit",
                "custom_id": f"{EDIT_PREFIX}{reference_id}",
            },
        ],
    }


def render_summary(
    *,
    title: str,
    url: str,
    tags: str,
    summary: str,
    interest: str,
    reference_id: str,
    mode: RenderMode,
    timestamp: str,
) -> dict:
    """Build a summary message: one embed plus one action row.

    ``mode`` changes only the embed colour and footer.
    """
    return {
        "embeds": [
            {
                "title": _clip(title, EMBED_TITLE_LIMIT),
                "color": _COLORS[mode],
                "description": _clip(
                    build_description(url, tags, summary, interest),
                    EMBED_DESCRIPTION_LIMIT,
                ),
                "timestamp": timestamp,
                "footer": {"text": _FOOTERS[mode]},
            }
        ],
        "components": [build_action_row(reference_id)],
    }


def render_error(message: str) -> dict:
    """Plain-text message visible only to the invoking user."""
    return {"content": message, "flags": EPHEMERAL_FLAG}


def _text_input(
    custom_id: str,
    label: str,
    style: int,
    placeholder: str,
    max_length: int,
    value: str = "",
) -> dict:
    field = {
        "type": TEXT_INPUT,
        "custom_id": custom_id,
        "label": label,
        "style": style,
        "placeholder": placeholder,
        "required": True,
        "max_length": max_length,
    }
    if value:
        field["value"] = value[:max_length]
    return {"type": ACTION_ROW, "components": [field]}


def render_edit_modal(reference_id: str, tags: str = "") -> dict:
    """Modal with tag, summary, and interest fields. The tag field is pre-filled."""
    return {
        "custom_id": f"{EDIT_MODAL_PREFIX}{reference_id}",
        "title": "Edit Summary",
        "components": [
            _text_input(
                TAG_FIELD,
                "Tag",
                INPUT_SHORT,
                "e.g., AI / React / TypeScript",
                TAG_MAX_LENGTH,
                value=tags,
            ),
            _text_input(
                SUMMARY_FIELD,
                "Summary",
                INPUT_PARAGRAPH,
                "Enter your edited summary...",
                SUMMARY_MAX_LENGTH,
            ),
            _text_input(
                INTEREST_FIELD,
                "Why it's interesting",
                INPUT_PARAGRAPH,
                "Enter your edited conclusion...",
                INTEREST_MAX_LENGTH,
            ),
        ],
    }
