from typing import List

from convmem.models import Message, Stats
from convmem.strategies.base import MemoryStrategy
from convmem.utils.token_count import get_token_count


class SequentialMemory(MemoryStrategy):
    """
    Keep-it-all strategy: the complete history in chronological order.

    Perfect recall at unbounded token cost; callers must cap growth upstream.
    """

    def __init__(self):
        super().__init__()
        self._messages: List[Message] = []

    def add_message(self, message: Message) -> None:
        with self._lock.write_locked():
            self._messages.append(message)

    def get_context(self, query: str = "") -> List[Message]:
        # query is ignored, everything is returned
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
