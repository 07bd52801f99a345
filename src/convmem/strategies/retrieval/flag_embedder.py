"""
FlagEmbedding-backed embedding function for RetrievalMemory.
"""

from typing import Any, Optional

import numpy as np
from FlagEmbedding import FlagModel

from convmem.utils.locking import model_load_lock
from convmem.utils.logger import get_logger

logger = get_logger("FlagModelEmbedder")

DEFAULT_EMBEDDING_MODEL = "BAAI/bge-small-en-v1.5"


class FlagModelEmbedder:
    """
    Callable embedding function wrapping a FlagModel.

    The model is loaded lazily on first use so constructing a strategy stays
    cheap. Loading is serialized through model_load_lock.

    Args:
        model_name: HuggingFace model identifier
        model: Optional pre-initialized model exposing encode(texts)
    """

    def __init__(
        self,
        model_name: str = DEFAULT_EMBEDDING_MODEL,
        model: Optional[Any] = None,
    ):
        self.model_name = model_name
        self._model = model

    def _ensure_model(self) -> Any:
        if self._model is None:
            with model_load_lock:
                if self._model is None:
                    logger.info(f"Loading embedding model: {self.model_name}")
                    self._model = FlagModel(
                        self.model_name,
                        query_instruction_for_retrieval="Represent this sentence for searching relevant passages:",
                        use_fp16=True,
                    )
        return self._model

    def __call__(self, text: str) -> np.ndarray:
        model = self._ensure_model()
        embeddings = model.encode([text])
        return np.asarray(embeddings[0], dtype=np.float64)
