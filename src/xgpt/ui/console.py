"""Console presentation for chat sessions.

Streaming replies are written token by token with no wrapping; buffered
replies get a one-line progress indicator and are then rendered as
markdown.
"""

import asyncio
import itertools
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from rich.console import Console

from ..session.models import Mode
from .config import (
    COMMAND_HELP,
    INPUT_PROMPT,
    RENDERED_LABEL,
    SPINNER_GLYPHS,
    SPINNER_INTERVAL,
    SPINNER_TEXT,
    STREAM_LABEL,
)
from .formatting import render_markdown


class ChatConsole:
    """Presentation layer over a Rich console."""

    def __init__(self, console: Console | None = None, spinner_interval: float = SPINNER_INTERVAL):
        self._console = console or Console()
        self._spinner_interval = spinner_interval
        self._spinner_task: asyncio.Task[None] | None = None

    @property
    def console(self) -> Console:
        return self._console

    @property
    def spinning(self) -> bool:
        """Whether the progress indicator is currently running."""
        return self._spinner_task is not None and not self._spinner_task.done()

    def banner(self, model: str, mode: Mode) -> None:
        self._console.print(f"=== xgpt ({model}) ===", style="bold", highlight=False)
        self._console.print(f"Current mode: {mode.label}\n", highlight=False)
        self._console.print(COMMAND_HELP, markup=False, highlight=False)
        self._console.print("Press Enter (empty) or Ctrl+C to exit.\n", style="dim")

    def read_line(self) -> str:
        """Blocking read of one input line."""
        return self._console.input(INPUT_PROMPT)

    def announce_session(self, mode: Mode) -> None:
        self._console.print(
            f"\n--- Started a new session in {mode.label} mode ---\n", highlight=False
        )

    def begin_stream(self) -> None:
        self._console.out(f"\n{STREAM_LABEL}", end="", highlight=False)

    def write_token(self, token: str) -> None:
        """Write a token verbatim, without markup, wrapping or highlighting."""
        self._write_raw(token)

    def end_stream(self) -> None:
        self._console.out("\n", highlight=False)

    def show_rendered(self, text: str) -> None:
        self._console.print(f"{RENDERED_LABEL}\n", style="bold", highlight=False)
        self._console.print(render_markdown(text))
        self._console.print()

    def error(self, message: str) -> None:
        self._console.print(f"Error: {message}", style="red", markup=False, highlight=False)

    def farewell(self, message: str) -> None:
        self._console.print(message, style="dim", highlight=False)

    @asynccontextmanager
    async def progress(self) -> AsyncIterator[None]:
        """Show a rotating indicator for the duration of the block.

        The indicator task is cancelled and the line cleared on every exit
        path, including errors raised inside the block.
        """
        self._spinner_task = asyncio.create_task(self._spin())
        try:
            yield
        finally:
            self._spinner_task.cancel()
            try:
                await self._spinner_task
            except asyncio.CancelledError:
                pass
            self._spinner_task = None
            self._clear_line()

    async def _spin(self) -> None:
        for glyph in itertools.cycle(SPINNER_GLYPHS):
            self._write_raw(f"\r{glyph} {SPINNER_TEXT}")
            await asyncio.sleep(self._spinner_interval)

    def _clear_line(self) -> None:
        width = len(SPINNER_TEXT) + 2
        self._write_raw("\r" + " " * width + "\r")

    def _write_raw(self, text: str) -> None:
        # Rich expands tabs and strips control characters from rendered text.
        self._console.file.write(text)
        self._console.file.flush()
