"""
Configuration module for the DINX relay.
Handles environment variables and application settings.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv

from utils.logger import app_logger

BASE_DIR = Path(__file__).resolve().parent


def _split_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@dataclass(frozen=True)
class Config:
    """Application configuration, built once at startup and passed to the services."""

    # API Keys
    groq_api_key: str = ""
    tavily_api_key: str = ""

    # API Configuration
    groq_chat_url: str = "https://api.groq.com/openai/v1/chat/completions"
    tavily_search_url: str = "https://api.tavily.com/search"

    # Search Settings
    search_depth: str = "basic"
    search_max_results: int = 5
    search_display_results: int = 3

    # Server Settings
    app_title: str = "DINX"
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: Path = BASE_DIR / "public"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    # Timeouts (in seconds)
    http_timeout: float = 60.0

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Config":
        """
        Build a Config from environment variables, loading a .env file first.

        Args:
            env_file: Optional explicit path to a .env file

        Returns:
            Populated Config instance
        """
        load_dotenv(env_file)

        return cls(
            groq_api_key=os.getenv("GROQ_API_KEY", ""),
            tavily_api_key=os.getenv("TAVILY_API_KEY", ""),
            host=os.getenv("HOST") or cls.host,
            port=int(os.getenv("PORT") or cls.port),
            static_dir=Path(os.getenv("STATIC_DIR") or cls.static_dir),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS") or "*"),
            log_level=(os.getenv("LOG_LEVEL") or cls.log_level).upper(),
            http_timeout=float(os.getenv("HTTP_TIMEOUT") or cls.http_timeout),
        )

    @property
    def search_enabled(self) -> bool:
        """Web augmentation is silently disabled without a Tavily key."""
        return bool(self.tavily_api_key)

    def validate(self) -> None:
        """Log warnings for missing API keys. Missing keys never stop startup."""
        if not self.groq_api_key:
            app_logger.warning("GROQ_API_KEY is not set. LLM calls will fail.")

        if not self.tavily_api_key:
            app_logger.warning("TAVILY_API_KEY is not set. Web search will be disabled.")
