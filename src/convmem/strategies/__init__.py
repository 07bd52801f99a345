"""
Memory strategies for context management in LLM interactions.

Available strategies:
- Sequential: keep the complete history
- Sliding Window: keep the last N messages
- Buffer: message/token-bounded buffer with optional summarization
- Summarization: rolling window plus accumulated summaries
- Retrieval: top-K embedding similarity search
- Hierarchical: recent and important layers over an archive
"""

from convmem.strategies.base import MemoryStrategy
from convmem.strategies.buffer import BufferMemory
from convmem.strategies.hierarchical import HierarchicalMemory
from convmem.strategies.retrieval import RetrievalMemory
from convmem.strategies.sequential import SequentialMemory
from convmem.strategies.sliding_window import SlidingWindowMemory
from convmem.strategies.summarization import SummarizationMemory

__all__ = [
    "MemoryStrategy",
    "SequentialMemory",
    "SlidingWindowMemory",
    "BufferMemory",
    "SummarizationMemory",
    "RetrievalMemory",
    "HierarchicalMemory",
]
