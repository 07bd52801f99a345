"""
Contract tests shared by every memory strategy.
"""

import threading

import pytest

from convmem.models import Message
from convmem.strategies import (
    BufferMemory,
    HierarchicalMemory,
    MemoryStrategy,
    RetrievalMemory,
    SequentialMemory,
    SlidingWindowMemory,
    SummarizationMemory,
)
from convmem.utils.config import BufferConfig, SummarizationConfig

STRATEGY_FACTORIES = {
    "sequential": SequentialMemory,
    "sliding_window": lambda: SlidingWindowMemory(window_size=4),
    "buffer": lambda: BufferMemory(BufferConfig(max_messages=4, auto_summarize=True)),
    "summarization": lambda: SummarizationMemory(
        SummarizationConfig(recent_window_size=2, summarize_after=3)
    ),
    "retrieval": RetrievalMemory,
    "hierarchical": HierarchicalMemory,
}


@pytest.fixture(params=list(STRATEGY_FACTORIES), ids=list(STRATEGY_FACTORIES))
def strategy(request) -> MemoryStrategy:
    return STRATEGY_FACTORIES[request.param]()


def _populate(memory: MemoryStrategy, count: int = 6) -> None:
    for i in range(count):
        role = "user" if i % 2 == 0 else "assistant"
        memory.add_message(Message.create(role, f"Message number {i} with some content"))


class TestStrategyContract:
    def test_clear_resets_stats(self, strategy):
        """
        Clear followed by GetStats yields zero messages and tokens, and a
        second Clear changes nothing.
        """
        _populate(strategy)

        strategy.clear()
        first = strategy.get_stats()
        strategy.clear()
        second = strategy.get_stats()

        assert first.total_messages == 0
        assert first.total_tokens == 0
        assert first == second
        assert strategy.get_context("query") == []

    def test_strategy_usable_after_clear(self, strategy):
        _populate(strategy)
        strategy.clear()

        strategy.add_message(Message.create("user", "fresh start"))

        assert [m.content for m in strategy.get_context("fresh start")] == ["fresh start"]

    def test_get_context_returns_copy(self, strategy):
        """
        Mutating the returned list must not affect the strategy's state.
        """
        _populate(strategy)
        before = [m.id for m in strategy.get_context("Message")]

        context = strategy.get_context("Message")
        context.clear()

        assert [m.id for m in strategy.get_context("Message")] == before

    def test_concurrent_adds_and_reads(self, strategy):
        """
        Parallel writers and readers on one instance must not corrupt state or
        raise.
        """
        errors = []

        def writer(offset: int):
            try:
                for i in range(25):
                    strategy.add_message(Message.create("user", f"writer {offset} message {i}"))
            except Exception as e:  # pragma: no cover - surfaced via errors
                errors.append(e)

        def reader():
            try:
                for _ in range(25):
                    strategy.get_context("message")
                    strategy.get_stats()
            except Exception as e:  # pragma: no cover - surfaced via errors
                errors.append(e)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert errors == []
        assert strategy.get_stats().total_messages > 0


def test_sequential_concurrent_adds_are_all_kept():
    memory = SequentialMemory()

    def writer():
        for i in range(100):
            memory.add_message(Message.create("user", f"m{i}"))

    threads = [threading.Thread(target=writer) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert memory.get_stats().total_messages == 800
