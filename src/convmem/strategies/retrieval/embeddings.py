"""
Embedding helpers for retrieval memory.

An embedding function is any callable ``(text) -> vector``. The default
hash embedding is a deterministic placeholder with no semantic meaning;
inject a real model (see FlagModelEmbedder) for meaningful retrieval.
"""

from collections import Counter
from typing import Callable, Sequence

import numpy as np

EmbeddingFunc = Callable[[str], Sequence[float]]

EMBEDDING_DIM = 128


def hash_embedding(text: str) -> np.ndarray:
    """Character-frequency hash into a 128-dim L2-normalized vector."""
    embedding = np.zeros(EMBEDDING_DIM, dtype=np.float64)
    for char, count in Counter(text).items():
        embedding[ord(char) % EMBEDDING_DIM] += count

    norm = np.linalg.norm(embedding)
    if norm > 0:
        embedding /= norm
    return embedding


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """
    Cosine similarity of two vectors.

    Returns 0.0 when the lengths differ or either vector has zero norm.
    """
    if a.shape != b.shape:
        return 0.0

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    return float(np.dot(a, b) / (norm_a * norm_b))
