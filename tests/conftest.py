"""Pytest configuration and shared fixtures."""
import asyncio
import io
import json
import os

import httpx
import pytest
from rich.console import Console

from xgpt.llm import LLMProvider, LLMResponse, StreamingResponse, UpstreamError
from xgpt.ui import ChatConsole


class FakeProvider(LLMProvider):
    """In-process provider that records every request it receives."""

    def __init__(self, reply: str = "Hi there", error: Exception | None = None, delay: float = 0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str, list]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(self, messages):
        self.calls.append(("buffered", list(messages)))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return LLMResponse(content=self.reply, model=self.model)

    async def chat_completion_stream(self, messages):
        self.calls.append(("stream", list(messages)))

        async def tokens():
            if self.error:
                raise self.error
            for word in self.reply.split(" "):
                yield word + " "

        return StreamingResponse(tokens())

    async def close(self) -> None:
        self.closed = True


def sse_body(*payloads: str) -> bytes:
    """Encode JSON delta payloads (or raw sentinels) as an event-stream body."""
    lines = []
    for payload in payloads:
        if payload == "[DONE]":
            lines.append("data: [DONE]\n\n")
        else:
            delta = {"choices": [{"delta": {"content": payload}}]}
            lines.append(f"data: {json.dumps(delta)}\n\n")
    return "".join(lines).encode("utf-8")


def streaming_response(*chunks: bytes, status_code: int = 200) -> httpx.Response:
    """Build a response whose body arrives as the given chunks."""
    async def body():
        for chunk in chunks:
            yield chunk

    return httpx.Response(
        status_code,
        headers={"content-type": "text/event-stream"},
        content=body(),
    )


@pytest.fixture(scope="session")
def api_key():
    """Return the real API key from the environment, if any."""
    return os.getenv("API_KEY")


@pytest.fixture
def output():
    """Buffer receiving everything the console writes."""
    return io.StringIO()


@pytest.fixture
def chat_console(output):
    """Presentation layer writing plain text into the output buffer."""
    console = Console(file=output, width=100, force_terminal=False, color_system=None)
    return ChatConsole(console, spinner_interval=0.01)


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider(error=UpstreamError(401, '{"error":"bad key"}'))
