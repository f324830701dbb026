"""Session state and classified user input."""

from dataclasses import dataclass, field
from enum import Enum

from ..memory import ConversationStore


class Mode(str, Enum):
    """How assistant replies are displayed."""

    STREAMING = "streaming"
    RENDERED = "rendered"

    @property
    def label(self) -> str:
        return "Markdown" if self is Mode.RENDERED else "Normal"


class CommandKind(str, Enum):
    QUIT = "quit"
    NEW_SESSION = "new_session"
    CHAT = "chat"


@dataclass(frozen=True)
class Command:
    """A classified line of user input.

    Attributes:
        kind: What the line asks for
        text: Message to send (CHAT, or NEW_SESSION with trailing text)
        mode: Mode of the new session (NEW_SESSION only)
        farewell: Message printed on exit (QUIT only)
    """

    kind: CommandKind
    text: str = ""
    mode: Mode = Mode.STREAMING
    farewell: str = ""


@dataclass
class Session:
    """Mutable state of the active conversation.

    Only the session controller writes to it, one turn at a time.
    """

    mode: Mode = Mode.STREAMING
    store: ConversationStore = field(default_factory=ConversationStore)

    def restart(self, mode: Mode) -> None:
        """Start a new conversation in the given mode."""
        self.store.reset()
        self.mode = mode
