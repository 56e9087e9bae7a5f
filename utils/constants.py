"""
Constants and system prompts for the DINX relay.
"""

DEFAULT_SYSTEM_PROMPT = (
    "You are DINX, a precise, helpful design assistant. "
    "Use web context if provided, and say when information may be out of date."
)

# Prefix for the system message carrying search results
WEB_CONTEXT_PROMPT = "Here is information from a live web search. Use it carefully in your answer:\n\n"

NO_REPLY_PLACEHOLDER = "No reply from model."


class SearchTriggers:
    """Lower-case substrings that suggest the user needs live web data."""

    KEYWORDS = (
        "latest",
        "today",
        "current",
        "news",
        "right now",
        "price of",
        "stock",
        "weather",
        "live",
        "update",
        "who is",
        "what is",
        "search",
        "on the internet",
    )


class ErrorMessages:
    """Client-facing error strings for /api/chat."""

    MISSING_FIELDS = "model and message are required."
    LLM_KEY_MISSING = "GROQ_API_KEY not set on server."
    PROVIDER_ERROR = "Groq API error"
    SERVER_ERROR = "Server error talking to LLM."
