"""
Corner Product Strategy - Multiplies the ids of the four corner tiles.

Only the adjacency graph is needed; no tile is placed.
"""

import logging
from math import prod

from ..adjacency import AdjacencyGraph
from ..base import SolverStrategy
from ..context import SolutionContext
from ..factory import register_strategy
from ..solution import Solution

logger = logging.getLogger(__name__)


@register_strategy
class CornerProductStrategy(SolverStrategy):
    """Product of the ids of the tiles with exactly two neighbours."""
    name = "corners"
    description = "Corner product - Multiply the ids of the four corner tiles"

    def solve(self, context: SolutionContext) -> Solution:
        adjacency = AdjacencyGraph.build(context.tiles)
        context.report_progress(0.5, f"{adjacency.edge_count} shared edges")

        corners = adjacency.corners()
        answer = prod(corners)
        logger.info(f"Corner product of {corners}: {answer}")
        context.report_progress(1.0, "done")

        return Solution(answer=answer, metrics=self._metrics(context))
