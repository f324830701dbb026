from collections.abc import AsyncIterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class EventKind(str, Enum):
    TOKEN = "token"
    DONE = "done"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class StreamEvent:
    """A decoded unit of a streaming completion.

    Attributes:
        kind: What the event carries
        token: Incremental assistant text (only for TOKEN events)
    """

    kind: EventKind
    token: str | None = None

    @classmethod
    def text(cls, token: str) -> "StreamEvent":
        return cls(EventKind.TOKEN, token)

    @classmethod
    def terminal(cls) -> "StreamEvent":
        return cls(EventKind.DONE)

    @classmethod
    def noise(cls) -> "StreamEvent":
        return cls(EventKind.MALFORMED)

    @property
    def is_terminal(self) -> bool:
        return self.kind is EventKind.DONE


class StreamingResponse:
    """Wrapper for streaming LLM responses that accumulates the full text.

    Acts as an async iterator over text tokens while keeping everything
    yielded so far, so the caller can echo tokens and still get the
    complete reply once the stream ends.

    Usage:
        stream = await provider.chat_completion_stream(messages)
        async for token in stream:
            print(token, end="")
        print(stream.text)
    """

    def __init__(self, async_iter: AsyncIterator[str]):
        """Initialize with an async iterator of text tokens.

        Args:
            async_iter: Async iterator yielding text tokens
        """
        self._iter = async_iter
        self._parts: list[str] = []

    @property
    def text(self) -> str:
        """Text received so far (complete once iteration finishes)."""
        return "".join(self._parts)

    def __aiter__(self) -> "StreamingResponse":
        return self

    async def __anext__(self) -> str:
        token = await self._iter.__anext__()
        self._parts.append(token)
        return token


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender: 'user' or 'assistant'")
    content: str = Field(description="Content of the message")

    def to_payload(self) -> dict[str, str]:
        """Wire form used in the request's message list."""
        return {"role": self.role.value, "content": self.content}


class LLMResponse(BaseModel):
    """Buffered response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, Any] | None = Field(
        default=None,
        description="Token usage information"
    )
