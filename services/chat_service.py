"""
Chat service containing core chat processing logic.
Handles request validation, prompt assembly and the LLM provider call.
"""
import httpx

from config import Config
from models.api_models import ChatRequest, Message
from services.search import SearchService
from utils.constants import (
    DEFAULT_SYSTEM_PROMPT,
    WEB_CONTEXT_PROMPT,
    NO_REPLY_PLACEHOLDER,
    ErrorMessages
)
from utils.exceptions import ChatInputError, ConfigurationError, ProviderError
from utils.logger import app_logger


class ChatService:
    """Service for handling chat logic."""

    def __init__(self, config: Config, client: httpx.AsyncClient, search_service: SearchService | None = None):
        self.config = config
        self.client = client
        self.search_service = search_service or SearchService(config, client)

    def validate_request(self, request: ChatRequest) -> None:
        """Reject the request before any outbound call is made."""
        if not self.config.groq_api_key:
            raise ConfigurationError(ErrorMessages.LLM_KEY_MISSING)

        if not request.model or not request.message:
            raise ChatInputError(ErrorMessages.MISSING_FIELDS)

    @staticmethod
    def get_system_prompt(request: ChatRequest) -> str:
        """Get system prompt from request or use default."""
        return request.system or DEFAULT_SYSTEM_PROMPT

    @staticmethod
    def build_messages(system_prompt: str, message: str, web_context: str = "") -> list[Message]:
        """
        Build the ordered message list: system prompt, optional web context, user message.
        """
        messages = [Message(role="system", content=system_prompt)]

        if web_context:
            messages.append(Message(role="system", content=WEB_CONTEXT_PROMPT + web_context))

        messages.append(Message(role="user", content=message))
        return messages

    @staticmethod
    def extract_reply(data) -> str:
        """Extract the first choice's text, falling back to a placeholder."""
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            return NO_REPLY_PLACEHOLDER

        choice = choices[0]
        message = choice.get("message") if isinstance(choice, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str) or not content:
            return NO_REPLY_PLACEHOLDER
        return content

    async def complete(self, model: str, system_prompt: str, message: str, web_context: str = "") -> str:
        """
        Send one completion request to the LLM provider.

        Args:
            model: Provider model identifier
            system_prompt: Leading system instructions
            message: User message
            web_context: Formatted search context, empty when no search ran

        Returns:
            Reply text from the first completion choice

        Raises:
            ProviderError: If the provider answers with a non-success status
        """
        messages = self.build_messages(system_prompt, message, web_context)
        app_logger.info(f"LLM call: model={model}, messages={len(messages)}")

        response = await self.client.post(
            self.config.groq_chat_url,
            headers={"Authorization": f"Bearer {self.config.groq_api_key}"},
            json={
                "model": model,
                "messages": [m.model_dump() for m in messages],
            },
        )

        if not response.is_success:
            error_text = response.text
            app_logger.error(f"Groq API error (status {response.status_code}): {error_text}")
            raise ProviderError(ErrorMessages.PROVIDER_ERROR, details=error_text, status_code=response.status_code)

        reply = self.extract_reply(response.json())
        app_logger.info(f"LLM call completed: Generated {len(reply)} characters")
        return reply

    async def chat(self, request: ChatRequest) -> str:
        """
        Run the full flow for one request: validate, maybe search, complete.
        """
        self.validate_request(request)

        web_context = ""
        if SearchService.should_search(request.message):
            web_context = await self.search_service.search(request.message)

        return await self.complete(
            model=request.model,
            system_prompt=self.get_system_prompt(request),
            message=request.message,
            web_context=web_context,
        )
