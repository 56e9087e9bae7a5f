"""
Pydantic data models for API requests and responses.
"""
from typing import Literal, Optional
from pydantic import BaseModel, Field


class Message(BaseModel):
    """Prompt message sent to the LLM provider."""
    role: Literal["system", "user"]
    content: str


class ChatRequest(BaseModel):
    """Chat request model. Required fields are checked by ChatService to answer with 400."""
    model: Optional[str] = Field(None, description="Provider model identifier")
    system: Optional[str] = Field(None, description="Override for the default system prompt")
    message: Optional[str] = Field(None, description="User input")


class ChatReply(BaseModel):
    """Successful chat response."""
    reply: str


class ErrorResponse(BaseModel):
    """Error payload for 4xx/5xx responses."""
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    """Liveness payload."""
    status: str = "ok"
    llm_configured: bool
    search_enabled: bool
