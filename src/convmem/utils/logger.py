"""
Logging helpers shared by every strategy.

All loggers live under the ``convmem`` namespace so applications can tune the
whole package with a single call to ``set_global_log_level``.
"""

import logging
import sys
from typing import Union

_ROOT_NAME = "convmem"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logging.getLogger(_ROOT_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``convmem``, e.g. ``convmem.BufferMemory``."""
    return logging.getLogger(f"{_ROOT_NAME}.{name}")


def set_global_log_level(level: Union[str, int]) -> None:
    """
    Set the level for all convmem loggers and attach a stderr handler once.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric logging level
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger(_ROOT_NAME)
    root.setLevel(level)

    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
