"""
Dynamic variable discovery and path enumeration for boolean predicates.
"""

from .session import ExplorationSession, canonical_key
from .inputs import Inputs
from .explorer import Row, explore

__all__ = [
    "ExplorationSession",
    "canonical_key",
    "Inputs",
    "Row",
    "explore",
]
