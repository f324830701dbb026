"""Unit tests for the conversation store."""
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from xgpt.llm import ChatMessage, Role
from xgpt.memory import ConversationStore


class TestConversationStore:
    """Tests for ConversationStore."""

    def test_starts_empty(self):
        store = ConversationStore()
        assert store.snapshot() == []
        assert len(store) == 0
        assert store.last is None

    def test_append_keeps_order(self):
        store = ConversationStore()
        store.append(Role.USER, "hello")
        store.append(Role.ASSISTANT, "hi")
        store.append("user", "again")

        assert [(m.role, m.content) for m in store.snapshot()] == [
            (Role.USER, "hello"),
            (Role.ASSISTANT, "hi"),
            (Role.USER, "again"),
        ]
        assert store.last == ChatMessage(role=Role.USER, content="again")

    def test_alternation_is_not_enforced(self):
        store = ConversationStore()
        store.append(Role.USER, "one")
        store.append(Role.USER, "two")
        assert len(store) == 2

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValueError):
            ConversationStore().append("system", "nope")

    def test_snapshot_is_a_copy(self):
        store = ConversationStore()
        store.append(Role.USER, "hello")
        snapshot = store.snapshot()
        snapshot.clear()
        assert len(store) == 1

    def test_messages_are_immutable(self):
        message = ConversationStore().append(Role.USER, "hello")
        with pytest.raises(ValidationError):
            message.content = "changed"  # type: ignore

    def test_reset_is_idempotent(self):
        store = ConversationStore()
        store.append(Role.USER, "hello")
        store.reset()
        once = store.snapshot()
        store.reset()
        assert store.snapshot() == once == []

    @given(st.lists(st.tuples(st.sampled_from(list(Role)), st.text())))
    def test_snapshot_matches_appends(self, entries):
        """Property test: the snapshot is exactly the appended sequence."""
        store = ConversationStore()
        for role, content in entries:
            store.append(role, content)
        assert [(m.role, m.content) for m in store.snapshot()] == entries

    def test_payload_form(self):
        message = ChatMessage(role=Role.ASSISTANT, content="hi")
        assert message.to_payload() == {"role": "assistant", "content": "hi"}
