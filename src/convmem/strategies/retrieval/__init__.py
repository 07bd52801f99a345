"""
Retrieval Strategy - embedding-indexed similarity search over the history.

The FlagEmbedding-backed embedder lives in
``convmem.strategies.retrieval.flag_embedder`` and is imported on demand,
since loading it pulls in torch.
"""

from convmem.strategies.retrieval.embeddings import (
    EmbeddingFunc,
    cosine_similarity,
    hash_embedding,
)
from convmem.strategies.retrieval.retrieval import RetrievalMemory

__all__ = ["RetrievalMemory", "EmbeddingFunc", "cosine_similarity", "hash_embedding"]
