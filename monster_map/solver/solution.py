"""
Solution Module - Result of strategy computation.
"""

from dataclasses import dataclass, field
from typing import Optional

from .placement import Placement
from .scanner import ScanResult


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        tiles_placed: Number of tiles placed by the assembler
        pattern_matches: Number of pattern occurrences found
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    tiles_placed: int = 0
    pattern_matches: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        answer: The puzzle answer
        placement: Assembled layout (None for strategies that skip assembly)
        scan: Pattern scan outcome (None if no scan was run)
        metrics: Performance statistics
    """
    answer: int
    placement: Optional[Placement] = None
    scan: Optional[ScanResult] = None
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def has_scan(self) -> bool:
        return self.scan is not None
