"""
Route handlers for chat operations.
Handles the /api/chat endpoint (non-streaming).
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from models.api_models import ChatRequest, ChatReply, ErrorResponse
from services.chat_service import ChatService
from services.search import SearchService
from utils.constants import ErrorMessages
from utils.exceptions import ChatInputError, ConfigurationError, ProviderError
from utils.logger import app_logger

router = APIRouter(prefix="/api")


def get_chat_service(request: Request) -> ChatService:
    """Build the per-request ChatService from app-wide config and HTTP client."""
    config = request.app.state.config
    client = request.app.state.http_client
    return ChatService(config, client, SearchService(config, client))


def send_error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    """Send an ErrorResponse payload, omitting empty details."""
    payload = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(request: ChatRequest, service: ChatService = Depends(get_chat_service)):
    """
    Chat endpoint with optional web search context.
    """
    try:
        reply = await service.chat(request)
        return ChatReply(reply=reply)

    except ChatInputError as e:
        app_logger.warning(f"Rejected chat request: {str(e)}")
        return send_error(status.HTTP_400_BAD_REQUEST, str(e))
    except ConfigurationError as e:
        app_logger.error(f"Configuration error: {str(e)}")
        return send_error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except ProviderError as e:
        app_logger.error(f"LLM provider failed with status {e.status_code}")
        return send_error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e), e.details)
    except Exception as e:
        app_logger.exception(f"Server error talking to LLM: {str(e)}")
        return send_error(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.SERVER_ERROR)
