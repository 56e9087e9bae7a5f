"""
Route handlers for health checks.
"""
from fastapi import APIRouter, Request
from models.api_models import HealthResponse

router = APIRouter(prefix="/api")


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """Health check reporting which providers are configured."""
    config = request.app.state.config
    return HealthResponse(
        llm_configured=bool(config.groq_api_key),
        search_enabled=config.search_enabled
    )
