"""
Conversation memory strategies for LLM context management.

Decides, for every turn, which prior messages stay verbatim, which are
summarized, which are evicted and which are retrieved by relevance.
"""

from convmem.exceptions import EmbeddingError, MemoryStrategyError, SummarizationError
from convmem.factory import create_strategy
from convmem.models import Message, Stats
from convmem.strategies import (
    BufferMemory,
    HierarchicalMemory,
    MemoryStrategy,
    RetrievalMemory,
    SequentialMemory,
    SlidingWindowMemory,
    SummarizationMemory,
)

__all__ = [
    "Message",
    "Stats",
    "MemoryStrategy",
    "SequentialMemory",
    "SlidingWindowMemory",
    "BufferMemory",
    "SummarizationMemory",
    "RetrievalMemory",
    "HierarchicalMemory",
    "create_strategy",
    "MemoryStrategyError",
    "SummarizationError",
    "EmbeddingError",
]
