"""
Solution Context Module - Shared context for strategy execution.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from ..tiles import Tile
from .pattern import Pattern, sea_monster


@dataclass
class SolutionContext:
    """
    Inputs and progress reporting passed to strategies.

    Attributes:
        tiles: Dict of tile id to Tile
        pattern: Pattern searched for in the composite image
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    tiles: Mapping[int, Tile]
    pattern: Pattern = field(default_factory=sea_monster)
    start_time: float = field(default_factory=time.perf_counter)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time
