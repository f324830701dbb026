from .base import LLMProvider
from .completion import CompletionClient
from .errors import (
    CompletionError,
    ConfigurationError,
    ConnectionFailedError,
    ResponseShapeError,
    UpstreamError,
    XGPTError,
)
from .models import ChatMessage, EventKind, LLMResponse, Role, StreamEvent, StreamingResponse
from .providers import OpenAIProvider
from .stream import SSEDecoder, decode_stream, parse_line

__all__ = [
    "LLMProvider",
    "CompletionClient",
    "CompletionError",
    "ConfigurationError",
    "ConnectionFailedError",
    "ResponseShapeError",
    "UpstreamError",
    "XGPTError",
    "ChatMessage",
    "EventKind",
    "LLMResponse",
    "Role",
    "StreamEvent",
    "StreamingResponse",
    "OpenAIProvider",
    "SSEDecoder",
    "decode_stream",
    "parse_line",
]
