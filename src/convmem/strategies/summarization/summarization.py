"""
Summarization Memory - rolling verbatim window plus accumulated summaries.

When the recent window grows past ``summarize_after``, everything older than
the newest ``recent_window_size`` messages is compressed into one summary
string. Summaries accumulate; they are never merged or re-summarized.
"""

import time
from typing import List, Optional

from convmem.exceptions import SummarizationError
from convmem.models import ROLE_SYSTEM, Message, Stats, estimate_tokens
from convmem.strategies.base import MemoryStrategy
from convmem.strategies.summarization.summarizers import Summarizer, default_summarizer
from convmem.utils.config import SummarizationConfig
from convmem.utils.logger import get_logger
from convmem.utils.token_count import get_token_count

logger = get_logger("SummarizationMemory")

SUMMARY_PREFIX = "[Summary of earlier conversation]: "

# Assumed token size of one original message when estimating compression
ESTIMATED_TOKENS_PER_MESSAGE = 100


class SummarizationMemory(MemoryStrategy):
    """
    Keeps recent messages verbatim and older ones as summaries.

    A failing summarizer fails add_message() with SummarizationError; no
    silent fallback, since a dropped slice would leave a gap in the history.
    """

    def __init__(
        self,
        config: Optional[SummarizationConfig] = None,
        summarizer: Optional[Summarizer] = None,
    ):
        super().__init__()
        self.config = config or SummarizationConfig()
        self.summarizer = summarizer or default_summarizer
        self._recent_messages: List[Message] = []
        self._summaries: List[str] = []

    def add_message(self, message: Message) -> None:
        with self._lock.write_locked():
            self._recent_messages.append(message)

            if len(self._recent_messages) > self.config.summarize_after:
                self._summarize_oldest()

    def _summarize_oldest(self) -> None:
        # Caller holds the write lock
        to_summarize = len(self._recent_messages) - self.config.recent_window_size
        if to_summarize <= 0:
            return

        try:
            summary = self.summarizer(self._recent_messages[:to_summarize])
        except Exception as e:
            logger.error(f"💥 Summarization of {to_summarize} messages failed: {e}")
            raise SummarizationError(f"summarization failed: {e}") from e

        self._summaries.append(summary)
        self._recent_messages = self._recent_messages[to_summarize:]
        logger.debug(
            f"🧠 Summarized {to_summarize} messages, {len(self._summaries)} summaries stored"
        )

    def get_context(self, query: str = "") -> List[Message]:
        with self._lock.read_locked():
            if self._recent_messages:
                timestamp = self._recent_messages[0].timestamp
            else:
                timestamp = time.time()

            result = [
                Message(
                    id=f"summary_{i}",
                    role=ROLE_SYSTEM,
                    content=f"{SUMMARY_PREFIX}{summary}",
                    timestamp=timestamp,
                    token_count=estimate_tokens(summary),
                )
                for i, summary in enumerate(self._summaries)
            ]
            result.extend(self._recent_messages)
            return result

    def clear(self) -> None:
        with self._lock.write_locked():
            self._recent_messages = []
            self._summaries = []

    def get_stats(self) -> Stats:
        with self._lock.read_locked():
            recent_tokens = get_token_count(self._recent_messages)
            summary_tokens = sum(estimate_tokens(s) for s in self._summaries)
            total_tokens = recent_tokens + summary_tokens

            # Heuristic: each summary stands for summarize_after messages
            estimated_original_tokens = (
                len(self._summaries)
                * self.config.summarize_after
                * ESTIMATED_TOKENS_PER_MESSAGE
                + recent_tokens
            )
            compression_rate = 1.0
            if estimated_original_tokens > 0:
                compression_rate = total_tokens / estimated_original_tokens

            return Stats(
                total_messages=len(self._summaries) + len(self._recent_messages),
                total_tokens=total_tokens,
                active_messages=len(self._recent_messages),
                active_tokens=total_tokens,
                compression_rate=compression_rate,
            )

    def get_summaries(self) -> List[str]:
        """Return a copy of the stored summaries, oldest first."""
        with self._lock.read_locked():
            return list(self._summaries)
