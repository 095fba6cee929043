"""
Composite Scanner Module - Finds pattern occurrences in every orientation.

Each of the 8 orientations of the composite image is scored with
OpenCV template matching over a 0/1 mask: a window matches when the
correlation equals the number of marked pattern cells, i.e. every
marked offset lands on a '#'.

Matched cells are recorded in the reference (as assembled) frame. The
same orientation is applied to an array of cell indices, so a hit in
any orientation maps straight back to the cell it came from.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

import cv2
import numpy as np

from ..tiles import MARK, Grid, Orientation
from .pattern import Pattern, sea_monster

logger = logging.getLogger(__name__)

CONSUMED = "O"


@dataclass(frozen=True)
class PatternMatch:
    """
    One pattern occurrence.

    Attributes:
        orientation: Orientation of the composite the match was found in
        x: Left column of the window in that orientation
        y: Top row of the window in that orientation
    """
    orientation: Orientation
    x: int
    y: int


@dataclass
class ScanResult:
    """
    Outcome of scanning the composite image.

    Attributes:
        grid: Composite grid in its reference orientation
        pattern: Pattern that was searched for
        matches: Every occurrence found, across all orientations
        consumed: (x, y) cells in the reference frame covered by a match
    """
    grid: Grid
    pattern: Pattern
    matches: List[PatternMatch] = field(default_factory=list)
    consumed: FrozenSet[Tuple[int, int]] = frozenset()

    @property
    def total_marks(self) -> int:
        """Number of '#' cells in the composite."""
        return self.grid.count(MARK)

    @property
    def roughness(self) -> int:
        """Marked cells not covered by any pattern occurrence."""
        return self.total_marks - len(self.consumed)

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def matches_by_orientation(self) -> Dict[Orientation, int]:
        """Match count for each of the 8 orientations (zero counts included)."""
        counts = {orientation: 0 for orientation in Orientation.all()}
        for match in self.matches:
            counts[match.orientation] += 1
        return counts

    @property
    def best_orientation(self) -> Optional[Orientation]:
        """Orientation with the most matches, or None if nothing matched."""
        if not self.matches:
            return None
        counts = self.matches_by_orientation()
        return max(counts, key=counts.get)

    def render(self) -> str:
        """Composite as text with consumed cells drawn as 'O'."""
        lines = []
        for y, row in enumerate(self.grid.rows):
            lines.append("".join(
                CONSUMED if (x, y) in self.consumed else char
                for x, char in enumerate(row)
            ))
        return "\n".join(lines)


class CompositeScanner:
    """
    Searches a composite grid for a pattern in all 8 orientations.

    Example:
        scanner = CompositeScanner()
        result = scanner.scan(composite)
        print(result.roughness)
    """

    def __init__(self, pattern: Optional[Pattern] = None):
        """
        Initialize the scanner.

        Args:
            pattern: Pattern to search for (defaults to the sea monster)
        """
        self.pattern = pattern if pattern is not None else sea_monster()
        self._template = self.pattern.to_template()

    def scan(self, grid: Grid) -> ScanResult:
        """
        Scan every orientation of `grid` and collect covered cells.

        Overlapping matches are allowed; covered cells are a set so a
        cell shared by two matches is counted once.

        Args:
            grid: Composite grid (reference orientation)

        Returns:
            ScanResult with matches and consumed cells
        """
        mask = (grid.to_array() == MARK).astype(np.float32)
        index = np.arange(grid.height * grid.width).reshape(grid.height, grid.width)

        matches: List[PatternMatch] = []
        consumed = set()

        for orientation in Orientation.all():
            oriented_mask = orientation.apply_array(mask)
            oriented_index = orientation.apply_array(index)

            hits = self._find_windows(oriented_mask)
            logger.debug(f"Orientation {orientation}: {len(hits)} matches")

            for y, x in hits:
                matches.append(PatternMatch(orientation=orientation, x=int(x), y=int(y)))
                for dx, dy in self.pattern.offsets:
                    cell = int(oriented_index[y + dy, x + dx])
                    consumed.add((cell % grid.width, cell // grid.width))

        result = ScanResult(grid=grid, pattern=self.pattern, matches=matches, consumed=frozenset(consumed))
        logger.info(
            f"Found {result.match_count} pattern matches covering {len(result.consumed)} cells, "
            f"roughness {result.roughness}"
        )
        return result

    def _find_windows(self, mask: np.ndarray) -> np.ndarray:
        """
        Top-left (y, x) of every window where all pattern cells are marked.

        Args:
            mask: float32 0/1 array of marked cells

        Returns:
            Array of shape (n, 2) with (y, x) rows
        """
        height, width = mask.shape
        if height < self.pattern.height or width < self.pattern.width:
            return np.empty((0, 2), dtype=np.int64)

        scores = cv2.matchTemplate(np.ascontiguousarray(mask), self._template, cv2.TM_CCORR)
        return np.argwhere(scores > self.pattern.mark_count - 0.5)


def count_roughness(grid: Grid, pattern: Optional[Pattern] = None) -> int:
    """
    Marked cells of `grid` not covered by `pattern` in any orientation.

    Args:
        grid: Composite grid
        pattern: Pattern to search for (defaults to the sea monster)

    Returns:
        Roughness count
    """
    return CompositeScanner(pattern).scan(grid).roughness
