"""Tests for memory configuration models and TOML loading."""

import pytest
from pydantic import ValidationError

from convmem.utils.config import (
    BufferConfig,
    MemoryConfig,
    MemoryDef,
    RetrievalConfig,
    SlidingWindowConfig,
    load_config,
)


def _base_config(**overrides) -> dict:
    """Return a minimal valid MemoryConfig dict with optional overrides."""
    base = {
        "default_memory": "buffer",
        "memory_strategies": {
            "buffer": {"type": "buffer", "max_messages": 8},
            "window": {"type": "sliding_window", "window_size": 5},
        },
    }
    base.update(overrides)
    return base


class TestStrategyConfigs:
    def test_buffer_defaults_are_unlimited(self):
        config = BufferConfig()

        assert config.max_messages == 0
        assert config.max_tokens == 0
        assert config.auto_summarize is False

    def test_buffer_negative_limits_mean_unlimited(self):
        config = BufferConfig(max_messages=-1, max_tokens=-10)

        assert config.max_messages == 0
        assert config.max_tokens == 0

    def test_numeric_strings_are_coerced(self):
        assert SlidingWindowConfig(window_size="5").window_size == 5
        assert RetrievalConfig(top_k="0").top_k == 5

    def test_non_numeric_limit_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            RetrievalConfig(top_k="many")

    def test_configs_are_immutable(self):
        config = SlidingWindowConfig(window_size=3)

        with pytest.raises(ValidationError):
            config.window_size = 5


class TestMemoryDef:
    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            MemoryDef(type="graph")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            MemoryDef(type="buffer", max_mesages=3)

    def test_builds_strategy_configs(self):
        settings = MemoryDef(type="summarization", recent_window_size=3, summarize_after=0)

        config = settings.summarization_config()

        assert config.recent_window_size == 3
        assert config.summarize_after == 20

    def test_unset_knobs_fall_back_to_defaults(self):
        settings = MemoryDef(type="hierarchical")

        config = settings.hierarchical_config()

        assert config.recent_limit == 10
        assert config.important_limit == 20


class TestMemoryConfig:
    def test_default_memory_must_be_defined(self):
        """
        default_memory must name an entry of memory_strategies, otherwise
        validation fails at load time rather than at session start.
        """
        with pytest.raises(ValidationError, match="default_memory"):
            MemoryConfig.model_validate(_base_config(default_memory="missing"))

    def test_get_returns_default_and_named_entries(self):
        cfg = MemoryConfig.model_validate(_base_config())

        assert cfg.get().type == "buffer"
        assert cfg.get("window").window_size == 5
        assert cfg.logging_level == "INFO"

    def test_get_unknown_key_raises(self):
        cfg = MemoryConfig.model_validate(_base_config())

        with pytest.raises(ValueError, match="not defined"):
            cfg.get("nope")

    def test_load_config_from_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            'logging_level = "DEBUG"\n'
            'default_memory = "retrieval"\n'
            "\n"
            "[memory_strategies.retrieval]\n"
            'type = "retrieval"\n'
            "top_k = 3\n"
        )

        cfg = load_config(path)

        assert cfg.logging_level == "DEBUG"
        assert cfg.get().retrieval_config().top_k == 3
