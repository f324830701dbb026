import logging
from collections.abc import AsyncIterator
from typing import Any

import httpx
from pydantic import ValidationError

from ..base import LLMProvider
from ..errors import ConnectionFailedError, ResponseShapeError, UpstreamError
from ..models import ChatMessage, LLMResponse, StreamingResponse
from ..stream import decode_stream

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4"


class OpenAIProvider(LLMProvider):
    """Chat Completions provider speaking the OpenAI wire format over httpx.

    Hidden design decisions:
    - HTTP client initialization and bearer authentication
    - Request body layout ({model, messages, stream})
    - Event-stream decoding of streaming bodies
    - Mapping of status codes and transport failures onto CompletionError
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the provider.

        Args:
            api_key: Bearer credential
            model: Model to request
            base_url: API root; requests go to ``{base_url}/chat/completions``
            timeout: Request timeout in seconds (None waits indefinitely)
            client: Pre-built httpx client, mainly for tests. Its lifecycle
                stays with the caller.
        """
        self._model = model
        self._url = f"{base_url.rstrip('/')}/chat/completions"
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def model(self) -> str:
        return self._model

    def _payload(self, messages: list[ChatMessage], stream: bool) -> dict[str, Any]:
        return {
            "model": self._model,
            "messages": [msg.to_payload() for msg in messages],
            "stream": stream,
        }

    async def chat_completion(self, messages: list[ChatMessage]) -> LLMResponse:
        """Request a complete reply and parse it from a single JSON body."""
        logger.debug(
            "POST %s model=%s messages=%d stream=false", self._url, self._model, len(messages)
        )
        try:
            response = await self._client.post(
                self._url, json=self._payload(messages, stream=False), headers=self._headers
            )
        except httpx.RequestError as e:
            raise ConnectionFailedError(f"Could not reach {self._url}: {e}") from e

        logger.debug("Completion answered with status %d", response.status_code)
        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ResponseShapeError(f"Unexpected completion response: {response.text[:200]}") from e
        if not isinstance(content, str):
            raise ResponseShapeError("Completion response has no text content")

        try:
            return LLMResponse(
                content=content,
                model=data.get("model") or self._model,
                usage=data.get("usage"),
            )
        except ValidationError as e:
            raise ResponseShapeError(f"Unexpected completion metadata: {e}") from e

    async def chat_completion_stream(self, messages: list[ChatMessage]) -> StreamingResponse:
        """Request a streamed reply; tokens are produced as the body arrives."""
        return StreamingResponse(self._stream_generator(messages))

    async def _stream_generator(self, messages: list[ChatMessage]) -> AsyncIterator[str]:
        """Internal generator yielding tokens until [DONE] or end of body."""
        logger.debug(
            "POST %s model=%s messages=%d stream=true", self._url, self._model, len(messages)
        )
        try:
            async with self._client.stream(
                "POST", self._url, json=self._payload(messages, stream=True), headers=self._headers
            ) as response:
                logger.debug("Stream opened with status %d", response.status_code)
                if not response.is_success:
                    await response.aread()
                    raise UpstreamError(response.status_code, response.text)

                async for event in decode_stream(response.aiter_bytes()):
                    if event.is_terminal:
                        break
                    yield event.token
        except httpx.RequestError as e:
            raise ConnectionFailedError(f"Could not reach {self._url}: {e}") from e

    async def close(self) -> None:
        """Close the underlying httpx client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()
