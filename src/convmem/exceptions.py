"""Custom exceptions for conversation memory strategies."""


class MemoryStrategyError(Exception):
    """Base class for failures raised by a memory strategy.

    Capacity limits are never reported through this hierarchy; strategies
    enforce them by trimming or evicting.
    """

    pass


class SummarizationError(MemoryStrategyError):
    """Raised when an injected summarizer fails and the strategy cannot fall back.

    The original exception is available as ``__cause__``.
    """

    pass


class EmbeddingError(MemoryStrategyError):
    """Raised when an injected embedding function fails for a message or a query."""

    pass
