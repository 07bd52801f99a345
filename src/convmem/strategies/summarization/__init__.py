"""
Summarization Strategy - rolling window with periodic batch compaction.
"""

from convmem.strategies.summarization.summarization import SummarizationMemory
from convmem.strategies.summarization.summarizers import (
    LLMSummarizer,
    Summarizer,
    default_summarizer,
)

__all__ = ["SummarizationMemory", "LLMSummarizer", "Summarizer", "default_summarizer"]
