"""
Command-line chat driver for trying out memory strategies.

Reads user turns from stdin (one per line), records each turn and an
assistant reply in the selected strategy and reports memory stats.
"""

from typing import Optional

import click

from convmem.factory import create_strategy
from convmem.llm_client import LiteLLMClient
from convmem.models import ROLE_ASSISTANT, ROLE_USER, Message, Stats
from convmem.strategies.base import MemoryStrategy
from convmem.utils.config import MemoryDef, load_config
from convmem.utils.logger import get_logger, set_global_log_level

logger = get_logger("CLI")

STRATEGY_TYPES = [
    "sequential",
    "sliding_window",
    "buffer",
    "summarization",
    "retrieval",
    "hierarchical",
]


def format_stats(stats: Stats) -> str:
    return (
        f"messages {stats.active_messages}/{stats.total_messages} | "
        f"tokens {stats.active_tokens}/{stats.total_tokens} | "
        f"compression {stats.compression_rate:.2f}"
    )


def _reply(memory: MemoryStrategy, user_input: str, client: Optional[LiteLLMClient]) -> str:
    if client is None:
        return f"Acknowledged: {user_input}"

    context = memory.get_context(user_input)
    return client.generate_text(
        input_messages=[{"role": m.role, "content": m.content} for m in context]
    )


def _chat_turn(
    memory: MemoryStrategy,
    user_input: str,
    client: Optional[LiteLLMClient],
    show_context: bool,
) -> None:
    if not user_input:
        return

    memory.add_message(Message.create(ROLE_USER, user_input))
    reply = _reply(memory, user_input, client)
    memory.add_message(Message.create(ROLE_ASSISTANT, reply))

    click.echo(f"assistant> {reply}")
    if show_context:
        for msg in memory.get_context(user_input):
            click.echo(f"  [{msg.role}] {msg.content}")
    click.echo(f"  ({format_stats(memory.get_stats())})")


@click.command()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a TOML memory configuration file",
)
@click.option(
    "--memory",
    "memory_key",
    default=None,
    help="Strategy key from the config file (defaults to default_memory)",
)
@click.option(
    "--strategy",
    "strategy_type",
    default="buffer",
    type=click.Choice(STRATEGY_TYPES),
    help="Strategy type to use when no config file is given",
)
@click.option(
    "--model",
    default=None,
    help="LiteLLM model for replies and summaries (canned replies when omitted)",
)
@click.option(
    "--show-context",
    is_flag=True,
    default=False,
    help="Print the context that would be sent to the model after each turn",
)
@click.option(
    "--log-level",
    default=None,
    help="Override the logging level",
)
def main(
    config_path: str | None,
    memory_key: str | None,
    strategy_type: str,
    model: str | None,
    show_context: bool,
    log_level: str | None,
):
    """
    Chat against a memory strategy, one user turn per input line.

    Example usage:
        printf 'hi\\nhow are you\\n' | convmem --strategy sliding_window
        convmem --config memory.toml --memory summarize --model openai/gpt-4.1-mini
    """
    if config_path:
        config = load_config(config_path)
        settings = config.get(memory_key)
        set_global_log_level(log_level or config.logging_level)
    else:
        settings = MemoryDef(type=strategy_type)
        set_global_log_level(log_level or "WARNING")

    client = None
    if model:
        client = LiteLLMClient(model)
        # --model also drives summaries unless the entry names its own summarizer
        if not settings.summarizer_model:
            settings = settings.model_copy(update={"summarizer_model": model})

    memory = create_strategy(settings, llm_client=client)
    logger.info(f"🚀 Session started with {settings.type} memory")
    click.echo(f"Using {settings.type} memory")

    with click.open_file("-") as stdin:
        for line in stdin:
            _chat_turn(memory, line.strip(), client, show_context)


if __name__ == "__main__":
    main()
