"""
xgpt: an interactive terminal chat client for OpenAI-compatible endpoints.

Replies are shown token by token as they stream in, or rendered as
markdown once complete. Each sub-package hides one design decision:
wire format (llm), conversation storage (memory), command handling
(session) and presentation (ui).
"""

__version__ = "0.1.0"

from .llm import ChatMessage, CompletionClient, OpenAIProvider, Role
from .memory import ConversationStore
from .session import Mode, Session, SessionController

__all__ = [
    "ChatMessage",
    "CompletionClient",
    "OpenAIProvider",
    "Role",
    "ConversationStore",
    "Mode",
    "Session",
    "SessionController",
]
