"""
Sliding Window - fixed-size FIFO over the most recent messages.

Older messages are dropped outright, never summarized.
"""

from typing import List

from convmem.models import Message, Stats
from convmem.strategies.base import MemoryStrategy
from convmem.utils.logger import get_logger
from convmem.utils.token_count import get_token_count

logger = get_logger("SlidingWindowMemory")

DEFAULT_WINDOW_SIZE = 10


def _normalize_window_size(window_size: int) -> int:
    return window_size if window_size > 0 else DEFAULT_WINDOW_SIZE


class SlidingWindowMemory(MemoryStrategy):
    """
    Keeps only the last ``window_size`` messages.

    Invariant: after every add, len(messages) <= window_size.
    """

    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE):
        super().__init__()
        self._window_size = _normalize_window_size(window_size)
        self._messages: List[Message] = []

    def _trim(self) -> None:
        overflow = len(self._messages) - self._window_size
        if overflow > 0:
            self._messages = self._messages[overflow:]
            logger.debug(f"Dropped {overflow} message(s) outside the window")

    def add_message(self, message: Message) -> None:
        with self._lock.write_locked():
            self._messages.append(message)
            self._trim()

    def get_context(self, query: str = "") -> List[Message]:
        with self._lock.read_locked():
            return list(self._messages)

    def clear(self) -> None:
        with self._lock.write_locked():
            self._messages = []

    def get_stats(self) -> Stats:
        with self._lock.read_locked():
            total_tokens = get_token_count(self._messages)
            return Stats(
                total_messages=len(self._messages),
                total_tokens=total_tokens,
                active_messages=len(self._messages),
                active_tokens=total_tokens,
                compression_rate=1.0,
            )

    def set_window_size(self, window_size: int) -> None:
        """Resize the window; a smaller size drops the oldest messages immediately."""
        with self._lock.write_locked():
            self._window_size = _normalize_window_size(window_size)
            self._trim()

    def get_window_size(self) -> int:
        with self._lock.read_locked():
            return self._window_size
