"""
Grid Module - Immutable character grid with rotate/flip/edge operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, List, Tuple

import numpy as np


MARK = "#"
EMPTY = "."


class Direction(Enum):
    """
    Cardinal directions in clockwise order. Up is -y.

    The value is the (dx, dy) step towards the neighbouring cell.
    """
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @classmethod
    def clockwise(cls) -> List["Direction"]:
        """Directions in clockwise order starting from UP."""
        return [cls.UP, cls.RIGHT, cls.DOWN, cls.LEFT]

    def rotate_cw(self, times: int = 1) -> "Direction":
        """Direction faced after `times` clockwise quarter turns."""
        order = Direction.clockwise()
        return order[(order.index(self) + times) % 4]

    def turns_to(self, target: "Direction") -> int:
        """Number of clockwise quarter turns needed to face `target`."""
        order = Direction.clockwise()
        return (order.index(target) - order.index(self)) % 4

    @property
    def opposite(self) -> "Direction":
        return self.rotate_cw(2)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Edge:
    """
    One border string of a grid.

    Attributes:
        side: Edge characters
        direction: Direction the edge currently faces
        flipped: False if `side` is read clockwise around the grid,
                 True if it is the reversed (counterclockwise) reading
    """
    side: str
    direction: Direction
    flipped: bool = False


@dataclass(frozen=True)
class Grid:
    """
    Immutable rectangular grid of characters.

    Uses a tuple of row strings for hashability. Every transform
    returns a new Grid; the receiver is never modified.

    Attributes:
        rows: Tuple of equal-length row strings, top to bottom
    """
    rows: Tuple[str, ...]

    @classmethod
    def from_rows(cls, rows) -> "Grid":
        """
        Create Grid from any iterable of row strings.

        Args:
            rows: Iterable of strings

        Returns:
            Grid instance
        """
        return cls(rows=tuple(rows))

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Create Grid from newline separated text, ignoring blank lines."""
        return cls.from_rows(line.strip() for line in text.splitlines() if line.strip())

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        """Create Grid from a 2D numpy array of single characters."""
        return cls.from_rows("".join(row) for row in array.tolist())

    @property
    def height(self) -> int:
        """Get number of rows."""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Get number of columns."""
        return len(self.rows[0]) if self.rows else 0

    def cell(self, x: int, y: int) -> str:
        return self.rows[y][x]

    def column(self, x: int) -> str:
        """Column `x` read top to bottom."""
        return "".join(row[x] for row in self.rows)

    def count(self, char: str = MARK) -> int:
        """Count cells holding `char`."""
        return sum(row.count(char) for row in self.rows)

    def rotate_cw(self) -> "Grid":
        """
        Rotate 90 degrees clockwise.

        The former left column, read bottom to top, becomes the new top row.
        Non-square grids swap width and height.

        Returns:
            New rotated Grid
        """
        return Grid.from_rows(
            "".join(self.rows[y][x] for y in reversed(range(self.height)))
            for x in range(self.width)
        )

    def flip_vertical(self) -> "Grid":
        """Reverse row order."""
        return Grid(rows=self.rows[::-1])

    def flip_horizontal(self) -> "Grid":
        """Reverse each row's character order."""
        return Grid.from_rows(row[::-1] for row in self.rows)

    def orientations(self) -> Iterator["Grid"]:
        """
        Yield all 8 orientations: 4 rotations, then the mirror of each.

        The first grid yielded is this grid itself.
        """
        rotations = []
        current = self
        for _ in range(4):
            rotations.append(current)
            current = current.rotate_cw()
        yield from rotations
        for rotated in rotations:
            yield rotated.flip_horizontal()

    def basic_edges(self) -> List[Edge]:
        """
        Get the four border strings read clockwise around the grid.

        Top is read left-to-right, bottom right-to-left, left
        bottom-to-top and right top-to-bottom. With this convention two
        grids sharing a border present it as mirror images, so an edge
        facing another edge matches its reversed reading.

        Returns:
            Edges in the order up, down, left, right
        """
        return [
            Edge(self.rows[0], Direction.UP),
            Edge(self.rows[-1][::-1], Direction.DOWN),
            Edge(self.column(0)[::-1], Direction.LEFT),
            Edge(self.column(self.width - 1), Direction.RIGHT),
        ]

    def permuted_edges(self) -> List[Edge]:
        """
        Get every basic edge in both reading directions.

        Returns:
            8 edges; each basic edge followed by its reversed form
            tagged flipped=True
        """
        edges = []
        for edge in self.basic_edges():
            edges.append(edge)
            edges.append(Edge(edge.side[::-1], edge.direction, flipped=True))
        return edges

    def edge(self, direction: Direction) -> Edge:
        """Get the basic edge currently facing `direction`."""
        for edge in self.basic_edges():
            if edge.direction == direction:
                return edge
        raise ValueError(f"Unknown direction: {direction}")

    def interior(self) -> "Grid":
        """Grid with the outermost row and column on every side removed."""
        return Grid.from_rows(row[1:-1] for row in self.rows[1:-1])

    def to_array(self) -> np.ndarray:
        """Convert to a 2D numpy array of single characters."""
        return np.array([list(row) for row in self.rows], dtype="<U1")

    def to_text(self) -> str:
        return "\n".join(self.rows)

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class Tile:
    """
    Puzzle tile: an identifier and its grid as given in the input.

    Attributes:
        tile_id: Integer identifier from the tile header
        grid: Original, never reoriented grid
    """
    tile_id: int
    grid: Grid

    @property
    def size(self) -> int:
        """Side length of the (square) tile."""
        return self.grid.height

    def edge_strings(self) -> FrozenSet[str]:
        """All 8 permuted edge strings of the original grid."""
        return frozenset(edge.side for edge in self.grid.permuted_edges())
