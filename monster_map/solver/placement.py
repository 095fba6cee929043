"""
Placement Module - Grid position and orientation of every assembled tile.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Tuple

from ..errors import StructureError
from ..tiles import Direction, Grid, Orientation, Tile


Position = Tuple[int, int]


@dataclass
class Placement:
    """
    Result of tile assembly.

    Position (0, 0) is the top-left tile; x grows to the right and y
    grows downward. Orientations are applied to each tile's original
    grid only when an oriented grid is requested.

    Attributes:
        tiles: Dict of tile id to Tile (original grids)
        positions: Dict of (x, y) to tile id
        orientations: Dict of tile id to its Orientation
    """
    tiles: Mapping[int, Tile]
    positions: Dict[Position, int] = field(default_factory=dict)
    orientations: Dict[int, Orientation] = field(default_factory=dict)

    def place(self, position: Position, tile_id: int, orientation: Orientation) -> None:
        """
        Record a tile at a position.

        Args:
            position: (x, y) grid coordinate
            tile_id: Tile to place
            orientation: Orientation of the tile at that position

        Raises:
            StructureError: If the position or tile is already used
        """
        if position in self.positions:
            raise StructureError(f"Position {position} already holds tile {self.positions[position]}")
        if tile_id in self.position_of:
            raise StructureError(f"Tile {tile_id} already placed at {self.position_of[tile_id]}")
        self.positions[position] = tile_id
        self.orientations[tile_id] = orientation

    def reorient(self, tile_id: int, orientation: Orientation) -> None:
        """Replace the orientation of an already placed tile."""
        if tile_id not in self.orientations:
            raise StructureError(f"Tile {tile_id} is not placed")
        self.orientations[tile_id] = orientation

    @property
    def position_of(self) -> Dict[int, Position]:
        """Reverse lookup of tile id to (x, y)."""
        return {tile_id: position for position, tile_id in self.positions.items()}

    def neighbor_position(self, tile_id: int, direction: Direction) -> Position:
        """(x, y) one step from a placed tile towards `direction`."""
        x, y = self.position_of[tile_id]
        return x + direction.dx, y + direction.dy

    def is_placed(self, tile_id: int) -> bool:
        return tile_id in self.orientations

    def tile_at(self, x: int, y: int) -> int:
        return self.positions[(x, y)]

    def oriented_grid(self, tile_id: int) -> Grid:
        """Tile grid with its recorded orientation applied."""
        return self.orientations[tile_id].apply(self.tiles[tile_id].grid)

    @property
    def width(self) -> int:
        """Number of tile columns."""
        return max(x for x, _ in self.positions) + 1 if self.positions else 0

    @property
    def height(self) -> int:
        """Number of tile rows."""
        return max(y for _, y in self.positions) + 1 if self.positions else 0

    @property
    def tile_size(self) -> int:
        return next(iter(self.tiles.values())).size

    def rows(self) -> List[List[int]]:
        """Tile ids in raster order, one list per row."""
        return [[self.tile_at(x, y) for x in range(self.width)] for y in range(self.height)]

    def corner_ids(self) -> List[int]:
        """Ids at the four corners: top-left, top-right, bottom-left, bottom-right."""
        right, bottom = self.width - 1, self.height - 1
        return [self.tile_at(0, 0), self.tile_at(right, 0),
                self.tile_at(0, bottom), self.tile_at(right, bottom)]

    def validate(self) -> None:
        """
        Check that placement covers every tile in a full rectangle.

        Raises:
            StructureError: If a tile is missing or the rectangle has gaps
        """
        missing = set(self.tiles) - set(self.positions.values())
        if missing:
            raise StructureError(f"{len(missing)} tiles were not placed: {sorted(missing)}")

        expected = {(x, y) for x in range(self.width) for y in range(self.height)}
        if set(self.positions) != expected:
            gaps = sorted(expected - set(self.positions))
            raise StructureError(
                f"Placement is not a complete {self.width}x{self.height} rectangle, gaps at {gaps}"
            )
