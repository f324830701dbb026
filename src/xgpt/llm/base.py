from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse, StreamingResponse


class LLMProvider(ABC):
    """Abstract base class for chat completion providers.

    This module hides the design decision of how completions are fetched.
    Implementations must handle provider-specific details like:
    - HTTP client setup and authentication
    - Request/response format conversion
    - Mapping transport and status failures onto CompletionError

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.chat_completion(messages)
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Model identifier sent with every request."""

    @abstractmethod
    async def chat_completion(self, messages: list[ChatMessage]) -> LLMResponse:
        """Generate a buffered chat completion.

        Args:
            messages: Full conversation history, sent verbatim

        Returns:
            LLMResponse containing the complete reply

        Raises:
            UpstreamError: Non-2xx response
            ResponseShapeError: 2xx body without the expected fields
            ConnectionFailedError: No response could be obtained
        """

    @abstractmethod
    async def chat_completion_stream(self, messages: list[ChatMessage]) -> StreamingResponse:
        """Generate a streaming chat completion.

        Args:
            messages: Full conversation history, sent verbatim

        Returns:
            StreamingResponse that yields text tokens as they arrive.
            Errors surface while iterating it.
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
