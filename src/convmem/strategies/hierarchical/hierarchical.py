"""
Hierarchical Memory - recent and important layers over a cold archive.

Layers:
    recent:    last ``recent_limit`` messages, always included
    important: up to ``important_limit`` high-importance messages
    archived:  everything evicted from the layers above, never surfaced by default

The recent and important layers overlap: a message scored above the
threshold lives in both until it ages out of the recent layer.
"""

from typing import List, Optional

from convmem.models import Message, Stats
from convmem.strategies.base import MemoryStrategy
from convmem.strategies.hierarchical.scoring import (
    IMPORTANCE_THRESHOLD,
    ImportanceScorer,
    default_importance_scorer,
)
from convmem.utils.config import HierarchicalConfig
from convmem.utils.logger import get_logger
from convmem.utils.token_count import get_token_count

logger = get_logger("HierarchicalMemory")


class HierarchicalMemory(MemoryStrategy):
    """Balances recent context with important older messages."""

    def __init__(
        self,
        config: Optional[HierarchicalConfig] = None,
        importance_scorer: Optional[ImportanceScorer] = None,
    ):
        super().__init__()
        self.config = config or HierarchicalConfig()
        self.importance_scorer = importance_scorer or default_importance_scorer
        self._recent_messages: List[Message] = []
        self._important_messages: List[Message] = []
        self._archived_messages: List[Message] = []

    def _is_important(self, message: Message) -> bool:
        # Explicit importance short-circuits the scorer
        if message.importance is not None and message.importance > IMPORTANCE_THRESHOLD:
            return True
        return self.importance_scorer(message) > IMPORTANCE_THRESHOLD

    def _in_important(self, message: Message) -> bool:
        return any(m.id == message.id for m in self._important_messages)

    def add_message(self, message: Message) -> None:
        with self._lock.write_locked():
            self._recent_messages.append(message)

            if self._is_important(message):
                self._important_messages.append(message)
                logger.debug(f"⭐ Message {message.id} promoted to important layer")

            if len(self._recent_messages) > self.config.recent_limit:
                oldest = self._recent_messages.pop(0)
                # Still live through the important layer, nothing to archive
                if not self._in_important(oldest):
                    self._archived_messages.append(oldest)

            if len(self._important_messages) > self.config.important_limit:
                lowest_idx = self._find_lowest_importance()
                archived = self._important_messages.pop(lowest_idx)
                self._archived_messages.append(archived)
                logger.debug(f"Archived important message {archived.id}")

    def _find_lowest_importance(self) -> int:
        """Index of the least important message; the first one wins on ties."""
        scores = [self.importance_scorer(msg) for msg in self._important_messages]
        return scores.index(min(scores))

    def get_context(self, query: str = "") -> List[Message]:
        with self._lock.read_locked():
            result = list(self._important_messages)
            seen = {msg.id for msg in result}
            for msg in self._recent_messages:
                if msg.id not in seen:
                    result.append(msg)
                    seen.add(msg.id)
            return result

    def clear(self) -> None:
        with self._lock.write_locked():
            self._recent_messages = []
            self._important_messages = []
            self._archived_messages = []

    def get_stats(self) -> Stats:
        with self._lock.read_locked():
            recent_tokens = get_token_count(self._recent_messages)
            important_tokens = get_token_count(self._important_messages)
            archived_tokens = get_token_count(self._archived_messages)

            # Layers overlap; messages in both recent and important count twice
            active_messages = len(self._recent_messages) + len(self._important_messages)
            active_tokens = recent_tokens + important_tokens
            total_tokens = active_tokens + archived_tokens

            compression_rate = 1.0
            if total_tokens > 0:
                compression_rate = active_tokens / total_tokens

            return Stats(
                total_messages=active_messages + len(self._archived_messages),
                total_tokens=total_tokens,
                active_messages=active_messages,
                active_tokens=active_tokens,
                compression_rate=compression_rate,
            )

    def get_archived_messages(self) -> List[Message]:
        """Return a copy of the archive layer, oldest eviction first."""
        with self._lock.read_locked():
            return list(self._archived_messages)
