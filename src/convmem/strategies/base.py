"""
Strategy contract implemented by every retention policy.
"""

from abc import ABC, abstractmethod
from typing import List

from convmem.models import Message, Stats
from convmem.utils.locking import ReadWriteLock


class MemoryStrategy(ABC):
    """
    Abstract base class for conversation memory strategies.

    An orchestrator calls add_message() once per produced message and
    get_context() before each model invocation. Every instance owns its
    message storage and a ReadWriteLock: mutators take the write side,
    get_context() and get_stats() the shared side. One instance serves
    exactly one conversation session.
    """

    def __init__(self):
        self._lock = ReadWriteLock()

    @abstractmethod
    def add_message(self, message: Message) -> None:
        """Add a new message to memory."""

    @abstractmethod
    def get_context(self, query: str = "") -> List[Message]:
        """
        Return the messages to include in the next LLM prompt.

        The returned list is always a fresh copy; mutating it does not affect
        the strategy's internal state.
        """

    @abstractmethod
    def clear(self) -> None:
        """Reset to the empty state. Never fails."""

    @abstractmethod
    def get_stats(self) -> Stats:
        """Return statistics derived from the current state. Never fails."""
