"""
Roughness Strategy - Full assemble, stitch and scan pipeline.
"""

import logging

from ..adjacency import AdjacencyGraph
from ..assembler import TileAssembler
from ..base import SolverStrategy
from ..composite import build_composite
from ..context import SolutionContext
from ..factory import register_strategy
from ..scanner import CompositeScanner
from ..solution import Solution

logger = logging.getLogger(__name__)


@register_strategy
class RoughnessStrategy(SolverStrategy):
    """
    Counts '#' cells of the assembled image not covered by the pattern.

    Stages:
    1. Adjacency graph from shared edge strings
    2. Assembly of every tile into a rectangle
    3. Stitching of tile interiors into the composite image
    4. Pattern scan in all 8 orientations
    """
    name = "roughness"
    description = "Water roughness - Assemble the image and count cells outside the pattern"

    def solve(self, context: SolutionContext) -> Solution:
        """
        Run every stage and return the roughness.

        Args:
            context: Solution context with tiles and pattern

        Returns:
            Solution carrying placement and scan result
        """
        adjacency = AdjacencyGraph.build(context.tiles)
        context.report_progress(0.25, f"{adjacency.edge_count} shared edges")

        placement = TileAssembler(context.tiles, adjacency).assemble()
        context.report_progress(0.5, f"{placement.width}x{placement.height} tiles placed")

        composite = build_composite(placement)
        context.report_progress(0.75, f"{composite.width}x{composite.height} image")

        scan = CompositeScanner(context.pattern).scan(composite)
        context.report_progress(1.0, f"{scan.match_count} matches")

        best = scan.best_orientation
        if best is None:
            logger.warning("Pattern not found in any orientation")
        else:
            logger.info(f"Most matches in orientation {best}")

        return Solution(
            answer=scan.roughness,
            placement=placement,
            scan=scan,
            metrics=self._metrics(
                context,
                tiles_placed=len(placement.positions),
                pattern_matches=scan.match_count,
            ),
        )
