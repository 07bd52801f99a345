"""
Importance scoring for hierarchical memory.
"""

import time
from typing import Callable

from convmem.models import ROLE_SYSTEM, Message

ImportanceScorer = Callable[[Message], float]

# Scores above this promote a message to the important layer
IMPORTANCE_THRESHOLD = 0.7

RECENCY_WINDOW_SECONDS = 5 * 60
LONG_MESSAGE_TOKENS = 100


def default_importance_scorer(message: Message) -> float:
    """
    Heuristic importance in [0, 1].

    Base 0.5, +0.2 for system messages, +0.2 for long messages, +0.1 for
    messages younger than five minutes. An explicit ``message.importance``
    replaces the heuristic entirely.
    """
    if message.importance is not None:
        score = message.importance
    else:
        score = 0.5
        if message.role == ROLE_SYSTEM:
            score += 0.2
        if message.token_count > LONG_MESSAGE_TOKENS:
            score += 0.2
        if time.time() - message.timestamp < RECENCY_WINDOW_SECONDS:
            score += 0.1

    return min(max(score, 0.0), 1.0)
