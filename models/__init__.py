"""
Models package exports.
"""
from models.api_models import Message, ChatRequest, ChatReply, ErrorResponse, HealthResponse
from models.chat_models import SearchHit, SearchResult

__all__ = [
    'Message',
    'ChatRequest',
    'ChatReply',
    'ErrorResponse',
    'HealthResponse',
    'SearchHit',
    'SearchResult'
]
