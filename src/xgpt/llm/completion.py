"""Turn-level completion client.

Drives an LLMProvider in either streaming or buffered fashion and reports
progress to the presentation layer. It never touches the conversation;
the session controller appends both sides of a turn.
"""

import logging
from typing import TYPE_CHECKING

from .base import LLMProvider
from .models import ChatMessage

if TYPE_CHECKING:
    from ..session.models import Mode
    from ..ui.console import ChatConsole

logger = logging.getLogger(__name__)


class CompletionClient:
    """Fetches the assistant reply for a conversation snapshot."""

    def __init__(self, provider: LLMProvider, console: "ChatConsole"):
        self._provider = provider
        self._console = console

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    async def streaming_complete(self, messages: list[ChatMessage]) -> str:
        """Echo tokens as they arrive and return the accumulated reply."""
        stream = await self._provider.chat_completion_stream(messages)
        # No label until the response has produced its first token.
        first = await anext(stream, None)
        self._console.begin_stream()
        try:
            if first is not None:
                self._console.write_token(first)
            async for token in stream:
                self._console.write_token(token)
        finally:
            self._console.end_stream()
        logger.debug("Streamed reply of %d characters", len(stream.text))
        return stream.text

    async def buffered_complete(self, messages: list[ChatMessage]) -> str:
        """Show the progress indicator until the full reply arrives, then render it."""
        async with self._console.progress():
            response = await self._provider.chat_completion(messages)
        if response.usage:
            logger.debug("Token usage: %s", response.usage)
        self._console.show_rendered(response.content)
        return response.content

    async def complete(self, messages: list[ChatMessage], mode: "Mode") -> str:
        """Dispatch on the session mode."""
        from ..session.models import Mode

        if mode is Mode.RENDERED:
            return await self.buffered_complete(messages)
        return await self.streaming_complete(messages)
