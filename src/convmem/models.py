"""
Data models shared by all memory strategies.

Message is the atomic unit of conversational state; Stats is the read-only
occupancy report every strategy derives on demand.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import time
import uuid

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
ROLE_SYSTEM = "system"

# Rough approximation: ~4 characters per token
CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """
    Heuristic token estimate over UTF-8 bytes. Not tied to any real tokenizer.

    Non-ASCII text counts its encoded size, so "é" weighs two bytes.
    """
    return len(text.encode("utf-8")) // CHARS_PER_TOKEN


def generate_id() -> str:
    """Return a random 128-bit identifier for a new message."""
    return str(uuid.uuid4())


@dataclass
class Message:
    """
    A single conversation message.

    Attributes:
        role: "user", "assistant" or "system"
        content: Message text
        id: Unique identifier (UUID), generated when omitted
        timestamp: Unix timestamp of creation
        metadata: Free-form additional data
        token_count: Estimated token count, derived from content when omitted
        importance: Explicit importance in [0, 1], consumed by hierarchical memory
    """

    role: str
    content: str
    id: str = field(default_factory=generate_id)
    timestamp: float = field(default_factory=time.time)
    metadata: Dict[str, Any] = field(default_factory=dict)
    token_count: Optional[int] = None
    importance: Optional[float] = None

    def __post_init__(self):
        if self.token_count is None:
            self.token_count = estimate_tokens(self.content)

        # Accept the untyped metadata form as a fallback for the typed field
        if self.importance is None:
            candidate = self.metadata.get("importance")
            if isinstance(candidate, float):
                self.importance = candidate

        if self.importance is not None:
            self.importance = min(max(self.importance, 0.0), 1.0)

    @classmethod
    def create(
        cls,
        role: str,
        content: str,
        importance: Optional[float] = None,
        **metadata: Any,
    ) -> "Message":
        """Factory method that auto-generates id, timestamp and token count."""
        return cls(
            role=role,
            content=content,
            metadata=dict(metadata),
            importance=importance,
        )


@dataclass(frozen=True)
class Stats:
    """Snapshot of a strategy's occupancy, recomputed on every get_stats() call."""

    total_messages: int
    total_tokens: int
    active_messages: int
    active_tokens: int
    compression_rate: float = 1.0
