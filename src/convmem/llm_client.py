import litellm
import weave

from typing import Any, Dict, Iterable, Optional

from convmem.utils.logger import get_logger

logger = get_logger("LLMClient")


class LiteLLMClient:
    """
    Thin LiteLLM wrapper used for summaries and demo replies.

    Usage:
        client = LiteLLMClient("openai/gpt-4.1-mini")
        summarizer = LLMSummarizer(client, model="openai/gpt-4.1-mini")
    """

    def __init__(
        self,
        model: str,
        api_base: Optional[str] = None,
        api_key: Optional[str] = None,
        **default_kwargs: Any,
    ):
        self.model = model
        self.api_base = api_base
        self.api_key = api_key
        self.default_kwargs = default_kwargs

    @weave.op()
    def generate_plain(
        self,
        input_messages: Iterable[Dict[str, str]],
        model: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """
        Execute a plain chat completion. Errors are logged and re-raised.

        Args:
            input_messages: OpenAI-style message dicts
            model: Override for the configured model
            **kwargs: Extra completion parameters (override defaults)
        """
        request_params = {
            "model": model or self.model,
            "messages": list(input_messages),
            "api_base": self.api_base,
            "api_key": self.api_key,
            "drop_params": True,
            **self.default_kwargs,
            **kwargs,
        }

        try:
            return litellm.completion(**request_params)
        except Exception as e:
            logger.error(f"💥 Generation Failed: {str(e)}")
            raise e

    def generate_text(
        self,
        input_messages: Iterable[Dict[str, str]],
        model: Optional[str] = None,
        **kwargs: Any,
    ) -> str:
        """Like generate_plain(), but return the stripped reply text ("" when absent)."""
        response = self.generate_plain(input_messages=input_messages, model=model, **kwargs)
        return reply_text(response)


def reply_text(response: Any) -> str:
    """
    Pull the first choice's text out of a completion response.

    Providers routed through LiteLLM return the message either as an object
    or as a plain dict; a missing or null content reads as "".
    """
    message = response.choices[0].message
    if isinstance(message, dict):
        content = message.get("content")
    else:
        content = getattr(message, "content", None)
    return (content or "").strip()
