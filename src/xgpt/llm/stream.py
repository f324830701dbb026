"""Server-sent event decoding for streaming chat completions.

This module hides the wire framing of a streaming completion body: byte
chunks go in, StreamEvent values come out. Chunk boundaries may fall
anywhere, including inside a line or inside a multi-byte character.
"""

import codecs
import json
from collections.abc import AsyncIterator

from .models import EventKind, StreamEvent

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


def parse_line(line: str) -> StreamEvent | None:
    """Decode a single line of the event stream.

    Args:
        line: One line without its line terminator

    Returns:
        None for lines that are not data lines (blank lines, comments,
        ``event:``/``id:`` framing), otherwise a token, terminal or
        malformed event.
    """
    stripped = line.strip()
    if not stripped.startswith(DATA_PREFIX):
        return None

    payload = stripped[len(DATA_PREFIX):].strip()
    if payload == DONE_SENTINEL:
        return StreamEvent.terminal()

    try:
        token = json.loads(payload)["choices"][0]["delta"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        return StreamEvent.noise()

    if not isinstance(token, str) or not token:
        return StreamEvent.noise()
    return StreamEvent.text(token)


class SSEDecoder:
    """Incremental decoder for one streaming response.

    Create a fresh instance per request; it keeps the undecoded byte tail
    and the unterminated line between calls to feed().
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self._done = False

    @property
    def done(self) -> bool:
        """Whether the terminal sentinel has been seen."""
        return self._done

    def feed(self, chunk: bytes) -> list[StreamEvent]:
        """Consume a chunk of the body and return the events it completes."""
        if self._done:
            return []
        self._buffer += self._decoder.decode(chunk)
        *lines, self._buffer = self._buffer.split("\n")
        return self._drain(lines)

    def close(self) -> list[StreamEvent]:
        """Flush at end of body, treating any unterminated tail as a line."""
        if self._done:
            return []
        tail = self._buffer + self._decoder.decode(b"", final=True)
        self._buffer = ""
        return self._drain(tail.split("\n"))

    def _drain(self, lines: list[str]) -> list[StreamEvent]:
        events: list[StreamEvent] = []
        for line in lines:
            event = parse_line(line)
            if event is None or event.kind is EventKind.MALFORMED:
                continue
            events.append(event)
            if event.is_terminal:
                self._done = True
                self._buffer = ""
                break
        return events


async def decode_stream(chunks: AsyncIterator[bytes]) -> AsyncIterator[StreamEvent]:
    """Lazily decode an async stream of body chunks into events.

    Yields token events as they complete and stops right after the
    terminal event, or when the chunk stream is exhausted.
    """
    decoder = SSEDecoder()
    async for chunk in chunks:
        for event in decoder.feed(chunk):
            yield event
        if decoder.done:
            return
    for event in decoder.close():
        yield event
