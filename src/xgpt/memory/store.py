"""In-memory conversation store.

Holds the ordered message log of the active conversation. Data is lost
when the application exits. The log grows without bound; every message
is sent upstream on every turn.
"""

from ..llm.models import ChatMessage, Role


class ConversationStore:
    """Ordered log of role-tagged messages for a single conversation.

    Alternation of user and assistant messages is not enforced.
    """

    def __init__(self) -> None:
        self._messages: list[ChatMessage] = []

    def append(self, role: Role | str, content: str) -> ChatMessage:
        """Append a message and return it."""
        message = ChatMessage(role=Role(role), content=content)
        self._messages.append(message)
        return message

    def reset(self) -> None:
        """Discard every message."""
        self._messages = []

    def snapshot(self) -> list[ChatMessage]:
        """Return the messages in conversation order.

        The returned list is a copy; messages themselves are immutable.
        """
        return list(self._messages)

    @property
    def last(self) -> ChatMessage | None:
        """Most recent message, if any."""
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)
