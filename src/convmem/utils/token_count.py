from typing import Iterable

from convmem.models import Message


def get_token_count(messages: Iterable[Message]) -> int:
    """Sum the estimated token counts of a sequence of messages."""
    return sum(msg.token_count for msg in messages)
