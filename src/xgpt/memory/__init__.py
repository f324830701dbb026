"""Conversation memory for xgpt.

Session-only storage of the running conversation.
"""

from .store import ConversationStore

__all__ = ["ConversationStore"]
