"""Discord interaction payload models and protocol constants."""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, ValidationError

from curabot.errors import UnknownInteractionError

EPHEMERAL_FLAG = 64


class InteractionType(IntEnum):
    """Inbound interaction types handled by the bot."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    MODAL_SUBMIT = 5


class InteractionResponseType(IntEnum):
    """Initial response types the webhook may return."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    MODAL = 9


class _Interaction(BaseModel):
    """Fields shared by every interaction.

    ``application_id`` and ``token`` form the correlation pair used to address
    follow-up and edit calls.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    application_id: str = ""
    token: str = ""


class PingInteraction(_Interaction):
    type: InteractionType = InteractionType.PING


class CommandOption(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    type: int | None = None
    value: bool | int | float | str | None = None


class CommandData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    options: list[CommandOption] = []


class CommandInteraction(_Interaction):
    type: InteractionType = InteractionType.APPLICATION_COMMAND
    data: CommandData

    def option(self, name: str) -> bool | int | float | str | None:
        """Return the value of the named option, or None if it was not supplied."""
        for opt in self.data.options:
            if opt.name == name:
                return opt.value
        return None


class ComponentData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    custom_id: str
    component_type: int | None = None


class ComponentInteraction(_Interaction):
    type: InteractionType = InteractionType.MESSAGE_COMPONENT
    data: ComponentData


class ModalField(BaseModel):
    model_config = ConfigDict(extra="ignore")

    custom_id: str = ""
    value: str = ""


class ModalRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    components: list[ModalField] = []


class ModalSubmitData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    custom_id: str
    components: list[ModalRow] = []


class ModalSubmitInteraction(_Interaction):
    type: InteractionType = InteractionType.MODAL_SUBMIT
    data: ModalSubmitData

    def field_values(self) -> dict[str, str]:
        """Flatten submitted text inputs into ``{custom_id: value}``."""
        return {
            field.custom_id: field.value
            for row in self.data.components
            for field in row.components
        }


Interaction = (
    PingInteraction | CommandInteraction | ComponentInteraction | ModalSubmitInteraction
)

_MODELS: dict[int, type[_Interaction]] = {
    InteractionType.PING: PingInteraction,
    InteractionType.APPLICATION_COMMAND: CommandInteraction,
    InteractionType.MESSAGE_COMPONENT: ComponentInteraction,
    InteractionType.MODAL_SUBMIT: ModalSubmitInteraction,
}


def parse_interaction(payload: dict) -> Interaction:
    """Validate a raw webhook payload into its interaction variant.

    Raises UnknownInteractionError for unsupported interaction types and for
    payloads missing the fields their type requires.
    """
    if not isinstance(payload, dict):
        raise UnknownInteractionError("unknown interaction type")
    model = _MODELS.get(payload.get("type"))
    if model is None:
        raise UnknownInteractionError("unknown interaction type")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise UnknownInteractionError("malformed interaction") from exc
