"""
Configuration models for memory strategies.

Strategy configs are immutable once a strategy is built. Non-positive limits
fall back to each strategy's default instead of failing validation, so
configs written for the loosest settings keep working.
"""

import tomllib
from pathlib import Path
from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

StrategyType = Literal[
    "sequential",
    "sliding_window",
    "buffer",
    "summarization",
    "retrieval",
    "hierarchical",
]


def _positive_or(value: Optional[Union[int, str]], default: int) -> int:
    if value is None:
        return default
    # Runs before type validation, so raw TOML/env strings arrive here too
    value = int(value)
    if value <= 0:
        return default
    return value


class _StrategyConfig(BaseModel):
    model_config = ConfigDict(frozen=True)


class SlidingWindowConfig(_StrategyConfig):
    window_size: int = 10

    @field_validator("window_size", mode="before")
    @classmethod
    def _normalize_window(cls, value: Optional[int]) -> int:
        return _positive_or(value, 10)


class BufferConfig(_StrategyConfig):
    """
    Limits for BufferMemory.

    Attributes:
        max_messages: Maximum number of messages (0 = unlimited)
        max_tokens: Maximum total tokens (0 = unlimited)
        auto_summarize: Summarize the evicted prefix instead of dropping it
    """

    max_messages: int = 0
    max_tokens: int = 0
    auto_summarize: bool = False

    @field_validator("max_messages", "max_tokens")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        # Negative limits mean the same as "unlimited"
        return max(value, 0)


class SummarizationConfig(_StrategyConfig):
    """
    Attributes:
        recent_window_size: Number of recent messages kept verbatim
        summarize_after: Summarize once recent messages exceed this count
    """

    recent_window_size: int = 10
    summarize_after: int = 20

    @field_validator("recent_window_size", mode="before")
    @classmethod
    def _normalize_window(cls, value: Optional[int]) -> int:
        return _positive_or(value, 10)

    @field_validator("summarize_after", mode="before")
    @classmethod
    def _normalize_after(cls, value: Optional[int]) -> int:
        return _positive_or(value, 20)


class RetrievalConfig(_StrategyConfig):
    top_k: int = 5

    @field_validator("top_k", mode="before")
    @classmethod
    def _normalize_top_k(cls, value: Optional[int]) -> int:
        return _positive_or(value, 5)


class HierarchicalConfig(_StrategyConfig):
    recent_limit: int = 10
    important_limit: int = 20

    @field_validator("recent_limit", mode="before")
    @classmethod
    def _normalize_recent(cls, value: Optional[int]) -> int:
        return _positive_or(value, 10)

    @field_validator("important_limit", mode="before")
    @classmethod
    def _normalize_important(cls, value: Optional[int]) -> int:
        return _positive_or(value, 20)


class MemoryDef(BaseModel):
    """
    One named strategy entry from the config file.

    Only the knobs relevant to ``type`` are read; the rest are ignored.
    """

    model_config = ConfigDict(extra="forbid")

    type: StrategyType
    window_size: Optional[int] = None
    max_messages: Optional[int] = None
    max_tokens: Optional[int] = None
    auto_summarize: bool = False
    recent_window_size: Optional[int] = None
    summarize_after: Optional[int] = None
    top_k: Optional[int] = None
    recent_limit: Optional[int] = None
    important_limit: Optional[int] = None
    # LLM summarizer (buffer / summarization)
    summarizer_model: Optional[str] = None
    summary_prompt: Optional[str] = None
    # Real embedding model (retrieval)
    embedding_model: Optional[str] = None

    def _pick(self, *names: str) -> Dict[str, int]:
        return {name: getattr(self, name) for name in names if getattr(self, name) is not None}

    def sliding_window_config(self) -> SlidingWindowConfig:
        return SlidingWindowConfig(**self._pick("window_size"))

    def buffer_config(self) -> BufferConfig:
        return BufferConfig(
            auto_summarize=self.auto_summarize,
            **self._pick("max_messages", "max_tokens"),
        )

    def summarization_config(self) -> SummarizationConfig:
        return SummarizationConfig(**self._pick("recent_window_size", "summarize_after"))

    def retrieval_config(self) -> RetrievalConfig:
        return RetrievalConfig(**self._pick("top_k"))

    def hierarchical_config(self) -> HierarchicalConfig:
        return HierarchicalConfig(**self._pick("recent_limit", "important_limit"))


class MemoryConfig(BaseModel):
    """Top-level configuration: named strategy definitions plus logging level."""

    logging_level: str = "INFO"
    default_memory: str
    memory_strategies: Dict[str, MemoryDef]

    @model_validator(mode="after")
    def _default_must_exist(self) -> "MemoryConfig":
        if self.default_memory not in self.memory_strategies:
            raise ValueError(
                f"default_memory '{self.default_memory}' is not defined in memory_strategies"
            )
        return self

    def get(self, memory_key: Optional[str] = None) -> MemoryDef:
        """Return the strategy definition for ``memory_key`` (default entry when None)."""
        key = memory_key or self.default_memory
        if key not in self.memory_strategies:
            raise ValueError(f"Memory strategy '{key}' not defined.")
        return self.memory_strategies[key]


def load_config(path: Union[str, Path]) -> MemoryConfig:
    """Load and validate a TOML memory configuration file."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return MemoryConfig.model_validate(data)
