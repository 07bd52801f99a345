"""
Build a memory strategy from a config entry.

A session picks one strategy at construction time and keeps it for its
lifetime; there is no switching mid-session.
"""

from typing import Any, Optional

from convmem.strategies.base import MemoryStrategy
from convmem.strategies.buffer import BufferMemory
from convmem.strategies.hierarchical import HierarchicalMemory, ImportanceScorer
from convmem.strategies.retrieval import EmbeddingFunc, RetrievalMemory
from convmem.strategies.sequential import SequentialMemory
from convmem.strategies.sliding_window import SlidingWindowMemory
from convmem.strategies.summarization import LLMSummarizer, SummarizationMemory, Summarizer
from convmem.utils.config import MemoryDef
from convmem.utils.logger import get_logger

logger = get_logger("Factory")


def _resolve_summarizer(
    settings: MemoryDef,
    summarizer: Optional[Summarizer],
    llm_client: Optional[Any],
) -> Optional[Summarizer]:
    if summarizer is not None:
        return summarizer
    if settings.summarizer_model:
        if llm_client is None:
            raise ValueError(
                f"summarizer_model '{settings.summarizer_model}' requires an llm_client"
            )
        return LLMSummarizer(
            llm_client,
            model=settings.summarizer_model,
            prompt_path=settings.summary_prompt,
        )
    return None


def _resolve_embedding_func(
    settings: MemoryDef,
    embedding_func: Optional[EmbeddingFunc],
) -> Optional[EmbeddingFunc]:
    if embedding_func is not None:
        return embedding_func
    if settings.embedding_model:
        # Deferred: importing FlagEmbedding loads torch
        from convmem.strategies.retrieval.flag_embedder import FlagModelEmbedder

        return FlagModelEmbedder(settings.embedding_model)
    return None


def create_strategy(
    settings: MemoryDef,
    summarizer: Optional[Summarizer] = None,
    embedding_func: Optional[EmbeddingFunc] = None,
    importance_scorer: Optional[ImportanceScorer] = None,
    llm_client: Optional[Any] = None,
) -> MemoryStrategy:
    """
    Instantiate the strategy described by ``settings``.

    Explicitly injected callables win over the ones derived from settings.

    Raises:
        ValueError: If the settings need an llm_client that was not given
    """
    logger.debug(f"🧠 Creating memory strategy: {settings.type}")

    if settings.type == "sequential":
        return SequentialMemory()
    if settings.type == "sliding_window":
        return SlidingWindowMemory(settings.sliding_window_config().window_size)
    if settings.type == "buffer":
        return BufferMemory(
            settings.buffer_config(),
            summarizer=_resolve_summarizer(settings, summarizer, llm_client),
        )
    if settings.type == "summarization":
        return SummarizationMemory(
            settings.summarization_config(),
            summarizer=_resolve_summarizer(settings, summarizer, llm_client),
        )
    if settings.type == "retrieval":
        return RetrievalMemory(
            settings.retrieval_config(),
            embedding_func=_resolve_embedding_func(settings, embedding_func),
        )
    if settings.type == "hierarchical":
        return HierarchicalMemory(
            settings.hierarchical_config(),
            importance_scorer=importance_scorer,
        )

    raise ValueError(f"Unknown memory strategy type: {settings.type}")
