"""
Errors raised by the chat flow and mapped to HTTP responses in routes.chat.
"""


class ChatError(Exception):
    """Base class for chat flow errors."""


class ChatInputError(ChatError):
    """The client sent an incomplete request (missing model or message)."""


class ConfigurationError(ChatError):
    """The server is missing the LLM provider credential."""


class ProviderError(ChatError):
    """The LLM provider answered with a non-success status."""

    def __init__(self, message: str, details: str = "", status_code: int | None = None):
        super().__init__(message)
        self.details = details
        self.status_code = status_code
