"""
Hierarchical Strategy - importance-layered retention with a cold archive.
"""

from convmem.strategies.hierarchical.hierarchical import HierarchicalMemory
from convmem.strategies.hierarchical.scoring import (
    IMPORTANCE_THRESHOLD,
    ImportanceScorer,
    default_importance_scorer,
)

__all__ = [
    "HierarchicalMemory",
    "ImportanceScorer",
    "IMPORTANCE_THRESHOLD",
    "default_importance_scorer",
]
