"""
Retrieval Memory - top-K similarity search over the full history.

Each message is embedded once, at add time, and cached by message id.
get_context() embeds the query and ranks every stored message by cosine
similarity; ties keep insertion order so results are reproducible.
"""

from typing import Dict, List, Optional

import numpy as np

from convmem.exceptions import EmbeddingError
from convmem.models import Message, Stats
from convmem.strategies.base import MemoryStrategy
from convmem.strategies.retrieval.embeddings import (
    EmbeddingFunc,
    cosine_similarity,
    hash_embedding,
)
from convmem.utils.config import RetrievalConfig
from convmem.utils.logger import get_logger
from convmem.utils.token_count import get_token_count

logger = get_logger("RetrievalMemory")


class RetrievalMemory(MemoryStrategy):
    """
    Returns the ``top_k`` stored messages most similar to the query.

    A failing embedding function raises EmbeddingError from add_message()
    (the message is not stored) or from get_context().
    """

    def __init__(
        self,
        config: Optional[RetrievalConfig] = None,
        embedding_func: Optional[EmbeddingFunc] = None,
    ):
        super().__init__()
        self._top_k = (config or RetrievalConfig()).top_k
        self.embedding_func = embedding_func or hash_embedding
        self._messages: List[Message] = []
        self._embeddings: Dict[str, np.ndarray] = {}

    def _embed(self, text: str) -> np.ndarray:
        return np.asarray(self.embedding_func(text), dtype=np.float64)

    def add_message(self, message: Message) -> None:
        with self._lock.write_locked():
            try:
                embedding = self._embed(message.content)
            except Exception as e:
                logger.error(f"💥 Embedding failed for message {message.id}: {e}")
                raise EmbeddingError(f"failed to generate embedding: {e}") from e

            self._messages.append(message)
            self._embeddings[message.id] = embedding

    def get_context(self, query: str = "") -> List[Message]:
        with self._lock.read_locked():
            if not self._messages:
                return []

            try:
                query_embedding = self._embed(query)
            except Exception as e:
                logger.error(f"💥 Query embedding failed: {e}")
                raise EmbeddingError(f"failed to generate query embedding: {e}") from e

            scored = [
                (msg, cosine_similarity(query_embedding, self._embeddings[msg.id]))
                for msg in self._messages
            ]
            # sorted() is stable, equal scores keep insertion order
            ranked = sorted(scored, key=lambda item: item[1], reverse=True)

            k = min(self._top_k, len(ranked))
            logger.debug(f"Retrieved {k} of {len(ranked)} messages")
            return [msg for msg, _ in ranked[:k]]

    def clear(self) -> None:
        with self._lock.write_locked():
            self._messages = []
            self._embeddings = {}

    def get_stats(self) -> Stats:
        with self._lock.read_locked():
            total_tokens = get_token_count(self._messages)

            # Approximation: first top_k by insertion order, not the last query's selection
            k = min(self._top_k, len(self._messages))
            active_tokens = get_token_count(self._messages[:k])

            compression_rate = 1.0
            if total_tokens > 0:
                compression_rate = active_tokens / total_tokens

            return Stats(
                total_messages=len(self._messages),
                total_tokens=total_tokens,
                active_messages=k,
                active_tokens=active_tokens,
                compression_rate=compression_rate,
            )

    def set_top_k(self, k: int) -> None:
        """Update the number of messages to retrieve. Non-positive values are ignored."""
        with self._lock.write_locked():
            if k > 0:
                self._top_k = k

    def get_top_k(self) -> int:
        with self._lock.read_locked():
            return self._top_k
