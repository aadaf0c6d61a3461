"""Exception taxonomy shared across the bot.

Each error carries the text shown to the Discord user. Errors are reported
once, on whichever channel is still open (initial response, follow-up, or log).
"""

from enum import Enum


class CurabotError(Exception):
    """Base class for all bot errors."""

    user_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)
        if message:
            self.user_message = message


class ConfigurationError(CurabotError):
    """Required configuration is missing or inconsistent."""


class InvalidURLError(CurabotError):
    """The supplied URL is not an absolute http(s) URL."""

    user_message = "Invalid URL format. Please provide a valid URL."


class FetchErrorKind(str, Enum):
    """Classified article fetch failures."""

    TIMEOUT = "timeout"
    NETWORK = "network"
    REFUSED = "refused"
    HTTP_STATUS = "http_status"
    GENERIC = "generic"


class FetchError(CurabotError):
    """The article could not be downloaded."""

    def __init__(
        self, kind: FetchErrorKind, message: str, status: int | None = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status = status


class InsufficientContentError(CurabotError):
    """The page was fetched but yielded too little text to summarize."""

    user_message = "Unable to extract sufficient content from this URL."


class AnalysisError(CurabotError):
    """A language-model call failed."""

    user_message = "The language model could not analyze this article."


class StoreError(CurabotError):
    """The reference store backing could not be reached."""

    user_message = "The summary store is unavailable. Please try again later."


class UnknownInteractionError(CurabotError):
    """An interaction outside the supported contract was received."""

    def __init__(self, marker: str) -> None:
        super().__init__(marker)
        self.marker = marker
