"""Session controller: the interactive read-classify-act loop."""

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from ..llm import CompletionClient, CompletionError, Role
from .commands import parse_input
from .models import CommandKind, Mode, Session

if TYPE_CHECKING:
    from ..ui.console import ChatConsole

logger = logging.getLogger(__name__)

LineReader = Callable[[], Awaitable[str]]


class SessionController:
    """Interprets user input as commands or chat turns.

    Owns the session (conversation and mode) and serializes turns: the
    next line is only read once the previous turn, output included, has
    finished.

    Example:
        controller = SessionController(Session(), client, chat_console)
        exit_code = await controller.run(initial_prompt="Hello")
    """

    def __init__(
        self,
        session: Session,
        client: CompletionClient,
        console: "ChatConsole",
        read_line: LineReader | None = None,
    ):
        """Initialize the controller.

        Args:
            session: Conversation state to drive
            client: Completion client used for chat turns
            console: Presentation layer
            read_line: Coroutine returning the next input line. Defaults to
                reading from the console.
        """
        self._session = session
        self._client = client
        self._console = console
        self._read_line = read_line or self._read_from_console

    @property
    def session(self) -> Session:
        return self._session

    async def _read_from_console(self) -> str:
        # Blocks the loop; no task is pending between turns.
        return self._console.read_line()

    async def run(self, initial_prompt: str | None = None) -> int:
        """Run the interactive loop until the user quits.

        Returns:
            Process exit code (0 for every user-initiated exit)
        """
        self._console.banner(self._client.provider.model, self._session.mode)

        if initial_prompt:
            await self.chat_turn(initial_prompt)

        while True:
            try:
                line = await self._read_line()
            except (EOFError, KeyboardInterrupt):
                self._console.farewell("\nExiting...")
                return 0

            if not await self.handle(line):
                return 0

    async def handle(self, line: str) -> bool:
        """Apply one line of input.

        Returns:
            False when the line ends the session, True otherwise
        """
        command = parse_input(line)
        logger.debug("Input classified as %s", command.kind.value)

        if command.kind is CommandKind.QUIT:
            self._console.farewell(command.farewell)
            return False

        if command.kind is CommandKind.NEW_SESSION:
            self._new_session(command.mode)
            if command.text:
                await self.chat_turn(command.text)
            return True

        await self.chat_turn(command.text)
        return True

    def _new_session(self, mode: Mode) -> None:
        self._session.restart(mode)
        self._console.announce_session(mode)

    async def chat_turn(self, text: str) -> None:
        """Send one user message and record the reply.

        A failed completion is reported and the turn abandoned; the user
        message stays in the conversation without a reply.
        """
        store = self._session.store
        store.append(Role.USER, text)

        try:
            reply = await self._client.complete(store.snapshot(), self._session.mode)
        except CompletionError as e:
            logger.info("Turn failed: %s", e)
            self._console.error(str(e))
            return

        store.append(Role.ASSISTANT, reply)
