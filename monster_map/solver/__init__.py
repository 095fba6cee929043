"""
Solver Package - Jigsaw tile assembly and pattern search.

Tiles are matched by shared border strings, assembled into a rectangle,
stitched into one image with tile borders removed, and scanned for a
fixed pattern in every orientation.

Public API:
    - AdjacencyGraph: Which tiles share a border
    - TileAssembler: Position and orientation of every tile
    - Placement: Assembled layout
    - build_composite(): Stitch tile interiors into one Grid
    - Pattern, SEA_MONSTER: Search pattern
    - CompositeScanner, ScanResult: Pattern search in 8 orientations
    - Solution, SolutionMetrics, SolutionContext: Strategy I/O
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(), get_strategy_info(): Strategy metadata
    - solve_puzzle(): Parse text and run a strategy in one call

Usage:
    from monster_map.solver import create_strategy, SolutionContext
    from monster_map.tiles import parse_tiles

    context = SolutionContext(tiles=parse_tiles(text))
    solution = create_strategy("roughness").solve(context)
    print(solution.answer)
"""

from typing import Optional

# Core data structures
from .adjacency import AdjacencyGraph
from .placement import Placement
from .assembler import TileAssembler
from .composite import build_composite
from .pattern import SEA_MONSTER, Pattern, sea_monster
from .scanner import CompositeScanner, PatternMatch, ScanResult, count_roughness
from .solution import Solution, SolutionMetrics
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from ..tiles import parse_tiles


def solve_puzzle(text: str, strategy_name: Optional[str] = None,
                 pattern: Optional[Pattern] = None) -> Solution:
    """
    Parse tile text and run a strategy on it.

    Args:
        text: Tile definitions
        strategy_name: Registered strategy (defaults to "roughness")
        pattern: Search pattern (defaults to the sea monster)

    Returns:
        Solution from the strategy
    """
    strategy = create_strategy(strategy_name)
    context = SolutionContext(tiles=parse_tiles(text), pattern=pattern or sea_monster())
    return strategy.solve(context)


__all__ = [
    # Data structures
    "AdjacencyGraph",
    "Placement",
    "TileAssembler",
    "build_composite",
    "SEA_MONSTER",
    "Pattern",
    "sea_monster",
    "CompositeScanner",
    "PatternMatch",
    "ScanResult",
    "count_roughness",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve_puzzle",
]
