"""
Base Strategy Module - Abstract base class for puzzle strategies.
"""

from abc import ABC, abstractmethod

from .context import SolutionContext
from .solution import Solution, SolutionMetrics


class SolverStrategy(ABC):
    """
    Abstract base class for all puzzle strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute the answer for the tiles in `context`.

        Args:
            context: Solution context with tiles, pattern, progress

        Returns:
            Solution with answer and metrics

        Raises:
            PuzzleError: If the tiles do not form a valid jigsaw
        """
        pass

    def _metrics(self, context: SolutionContext, **counts) -> SolutionMetrics:
        """Build metrics timed from the context start and optional counts."""
        return SolutionMetrics(
            computation_time_ms=context.elapsed_time() * 1000,
            strategy_name=self.name,
            **counts
        )
