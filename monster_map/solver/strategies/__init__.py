"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .corners import CornerProductStrategy
from .roughness import RoughnessStrategy

__all__ = [
    "CornerProductStrategy",
    "RoughnessStrategy",
]
