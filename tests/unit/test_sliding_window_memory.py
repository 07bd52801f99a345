"""
Tests for the fixed-size FIFO sliding window strategy.
"""

import pytest

from convmem.models import Message
from convmem.strategies.sliding_window import DEFAULT_WINDOW_SIZE, SlidingWindowMemory


def _make_message(role: str, content: str) -> Message:
    """Helper to create messages for testing."""
    return Message.create(role, content)


class TestSlidingWindowMemory:
    def test_keeps_last_window_messages(self):
        """
        With window_size=2, inserting three messages keeps the last two in
        chronological order.
        """
        memory = SlidingWindowMemory(window_size=2)
        for content in ["Message 1", "Message 2", "Message 3"]:
            memory.add_message(_make_message("user", content))

        context = memory.get_context()

        assert [m.content for m in context] == ["Message 2", "Message 3"]

    @pytest.mark.parametrize("inserts,window", [(0, 3), (2, 3), (3, 3), (7, 3), (25, 10)])
    def test_window_invariant(self, inserts, window):
        """
        For N inserts, exactly min(N, window) messages remain and they are the
        last ones inserted.
        """
        memory = SlidingWindowMemory(window_size=window)
        contents = [f"Message {i}" for i in range(inserts)]
        for content in contents:
            memory.add_message(_make_message("user", content))

        context = memory.get_context()

        assert len(context) == min(inserts, window)
        assert [m.content for m in context] == contents[-window:]

    @pytest.mark.parametrize("size", [0, -5])
    def test_non_positive_window_uses_default(self, size):
        memory = SlidingWindowMemory(window_size=size)

        assert memory.get_window_size() == DEFAULT_WINDOW_SIZE

    def test_set_window_size_trims_immediately(self):
        """
        Shrinking the window should drop the oldest messages right away, not
        on the next add.
        """
        memory = SlidingWindowMemory(window_size=5)
        for i in range(5):
            memory.add_message(_make_message("user", f"Message {i}"))

        memory.set_window_size(2)

        assert [m.content for m in memory.get_context()] == ["Message 3", "Message 4"]
        assert memory.get_window_size() == 2

    def test_set_window_size_non_positive_resets_default(self):
        memory = SlidingWindowMemory(window_size=3)

        memory.set_window_size(0)

        assert memory.get_window_size() == DEFAULT_WINDOW_SIZE

    def test_token_accounting_matches_stored_messages(self):
        """
        TotalTokens must always equal the sum of token counts over the
        messages currently in the window, including after evictions.
        """
        memory = SlidingWindowMemory(window_size=3)
        for i in range(10):
            memory.add_message(_make_message("user", "x" * (i * 8)))
            stats = memory.get_stats()
            context = memory.get_context()

            assert stats.total_tokens == sum(m.token_count for m in context)
            assert stats.total_messages == len(context)
            assert stats.compression_rate == 1.0
