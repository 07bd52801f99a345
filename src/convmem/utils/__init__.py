# Utils module for convmem

from .locking import ReadWriteLock, model_load_lock
from .logger import get_logger, set_global_log_level
from .token_count import get_token_count

__all__ = [
    "get_logger",
    "set_global_log_level",
    "get_token_count",
    "ReadWriteLock",
    "model_load_lock",
]
