"""
Buffer Memory - message- and token-bounded buffer with optional summarization.

Overflowing prefixes are either dropped or folded into one system-role
summary message. A failing summarizer never fails add_message(): the buffer
falls back to a plain trim so the conversation stays available.
"""

from typing import List, Optional

from convmem.models import ROLE_SYSTEM, Message, Stats
from convmem.strategies.base import MemoryStrategy
from convmem.strategies.summarization.summarizers import Summarizer, default_summarizer
from convmem.utils.config import BufferConfig
from convmem.utils.logger import get_logger
from convmem.utils.token_count import get_token_count

logger = get_logger("BufferMemory")


class BufferMemory(MemoryStrategy):
    """
    Bounded conversation buffer.

    Usage:
        memory = BufferMemory(BufferConfig(max_messages=8, max_tokens=500))
        memory.add_message(Message.create("user", "Hello"))
        context = memory.get_context()
    """

    def __init__(
        self,
        config: Optional[BufferConfig] = None,
        summarizer: Optional[Summarizer] = None,
    ):
        super().__init__()
        self.config = config or BufferConfig()
        self.summarizer = summarizer or default_summarizer
        self._messages: List[Message] = []

    def add_message(self, message: Message) -> None:
        with self._lock.write_locked():
            self._messages.append(message)

            max_messages = self.config.max_messages
            if max_messages > 0 and len(self._messages) > max_messages:
                self._compact(len(self._messages) - max_messages)

            if self.config.max_tokens > 0:
                self._enforce_token_limit()

    def _enforce_token_limit(self) -> None:
        total_tokens = 0
        for i in range(len(self._messages) - 1, -1, -1):
            total_tokens += self._messages[i].token_count
            if total_tokens > self.config.max_tokens:
                # Message i is kept; everything older goes
                if i > 0:
                    self._compact(i)
                break

    def _compact(self, cut: int) -> None:
        """Replace messages[:cut] with a summary message, or drop them."""
        evicted = self._messages[:cut]
        retained = self._messages[cut:]

        if self.config.auto_summarize:
            try:
                summary = self.summarizer(evicted)
            except Exception as e:
                logger.warning(
                    f"⚠️ Summarizer failed ({e}); trimming {len(evicted)} messages without summary"
                )
            else:
                self._messages = [Message.create(ROLE_SYSTEM, summary)] + retained
                logger.debug(f"🧠 Summarized {len(evicted)} messages into buffer head")
                return

        self._messages = retained
        logger.debug(f"Trimmed {len(evicted)} messages from buffer")

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

    def get_messages(self) -> List[Message]:
        """Return a copy of the buffered messages."""
        with self._lock.read_locked():
            return list(self._messages)

    def load_messages(self, messages: List[Message]) -> None:
        """Replace the buffer contents, e.g. to warm-start a session. Limits are not re-applied."""
        with self._lock.write_locked():
            self._messages = list(messages)
