"""
DINX - FastAPI relay that forwards chat requests to a hosted LLM.
Adds live web-search context when a message looks like it needs current information,
and serves the static frontend.
"""
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from config import Config
from routes import chat, health
from utils.http_client import HTTPClientManager
from utils.logger import app_logger, set_log_level


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed bodies with the same error shape as the chat endpoint."""
    errors = exc.errors()
    app_logger.error(f"Validation error for {request.url}: {errors}")

    message = "Invalid request body."
    if errors:
        first_error = errors[0]
        field = first_error.get('loc', [])[-1] if first_error.get('loc') else 'body'
        message = f"{field}: {first_error.get('msg', 'Validation error')}"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


def create_app(config: Config | None = None, http_client: httpx.AsyncClient | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings to use; read from the environment when omitted
        http_client: Client for provider calls; the shared pooled client when omitted

    Returns:
        Configured FastAPI application
    """
    config = config or Config.from_env()
    set_log_level(config.log_level)
    config.validate()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown events."""
        if app.state.http_client is None:
            app.state.http_client = HTTPClientManager.get_client(config.http_timeout)
        yield
        await HTTPClientManager.close_all()

    app = FastAPI(title=config.app_title, lifespan=lifespan)
    app.state.config = config
    app.state.http_client = http_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(chat.router, tags=["chat"])
    app.include_router(health.router, tags=["health"])

    # Mounted last so /api routes take precedence
    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")
    else:
        app_logger.warning(f"Static directory {config.static_dir} not found, frontend will not be served")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = app.state.config
    app_logger.info(f"DINX server listening on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
