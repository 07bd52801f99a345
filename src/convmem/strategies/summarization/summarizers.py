"""
Summarizers - turn a slice of conversation into a single summary string.

A summarizer is any callable ``(messages) -> str``. Raising signals failure;
each strategy decides whether that is fatal.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import weave

from convmem.models import Message
from convmem.utils.logger import get_logger

logger = get_logger("Summarizer")

Summarizer = Callable[[List[Message]], str]

# Maximum characters kept per message by the default summarizer
MAX_CONTENT_CHARS = 200

DEFAULT_PROMPT_PATH = Path(__file__).parent / "summarize.prompt.md"


def default_summarizer(messages: List[Message]) -> str:
    """
    Deterministic placeholder summarizer: role-prefixed, truncated concatenation.

    No external calls are made. Use LLMSummarizer for real compression.
    Truncation counts characters, so multi-byte text is never split mid-character.
    """
    if not messages:
        return ""

    parts = []
    for msg in messages:
        content = msg.content
        if len(content) > MAX_CONTENT_CHARS:
            content = content[:MAX_CONTENT_CHARS] + "..."
        parts.append(f"{msg.role}: {content}")

    return f"Conversation with {len(messages)} exchanges covering: {'; '.join(parts)}"


def _resolve_prompt_path(prompt_path: Optional[str]) -> Path:
    if prompt_path:
        candidate = Path(prompt_path)
        if candidate.is_file():
            return candidate
        logger.warning(f"Summary prompt '{prompt_path}' not found, using default prompt")
    return DEFAULT_PROMPT_PATH


def format_transcript(messages: List[Message]) -> str:
    """Render messages as a plain ``role: content`` transcript, one per line."""
    return "\n".join(f"{msg.role}: {msg.content}" for msg in messages)


class LLMSummarizer:
    """
    Summarizer backed by an LLM client exposing ``generate_text()``, such as LiteLLMClient.

    Args:
        llm_client: Client with generate_text(input_messages=..., model=...) -> str
        model: Model identifier for the summarization call
        prompt_path: Optional path to a custom system prompt
    """

    def __init__(
        self,
        llm_client: Any,
        model: str = "gpt-4-1-mini",
        prompt_path: Optional[str] = None,
    ):
        if llm_client is None:
            raise ValueError("llm_client is required for LLM summarization")
        self.llm_client = llm_client
        self.model = model
        self.prompt = _resolve_prompt_path(prompt_path).read_text(encoding="utf-8")

    def build_prompt(self, messages: List[Message]) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.prompt},
            {
                "role": "user",
                "content": f"Conversation history to compress:\n{format_transcript(messages)}",
            },
        ]

    @weave.op(enable_code_capture=False)
    def summarize(self, messages: List[Message]) -> str:
        logger.debug(f"🧠 Summarizing {len(messages)} messages with {self.model}")
        summary_text = self.llm_client.generate_text(
            input_messages=self.build_prompt(messages),
            model=self.model,
        )

        if not summary_text:
            raise ValueError("Summarization returned empty content")

        return summary_text

    def __call__(self, messages: List[Message]) -> str:
        return self.summarize(messages)
