"""
Tile Assembler Module - Reconstructs the global tile layout.

Starting from an arbitrary corner, tiles are walked row by row: each
next tile is the unplaced neighbour whose border matches the facing
border of the last placed tile, turned and mirrored so that the two
borders line up.

Edges follow the clockwise convention of Grid.basic_edges(), so two
correctly placed neighbours present the same border as mirror
readings. When the matching candidate edge was found unflipped, the
candidate must be mirrored across the shared edge's axis to make the
readings line up.
"""

import logging
from typing import Mapping, Optional, Tuple

from ..errors import StructureError
from ..tiles import Direction, Edge, Orientation, Tile
from .adjacency import AdjacencyGraph
from .placement import Placement

logger = logging.getLogger(__name__)


class TileAssembler:
    """
    Determines position and orientation of every tile.

    The adjacency graph is computed once and reused for every placement
    step. The result is unique only up to the 8 symmetries of the whole
    image, since the starting corner and its right-hand neighbour are
    picked arbitrarily (first corner in input order, lower neighbour id).

    Example:
        assembler = TileAssembler(tiles)
        placement = assembler.assemble()
        print(placement.rows())
    """

    def __init__(self, tiles: Mapping[int, Tile], adjacency: Optional[AdjacencyGraph] = None):
        """
        Initialize the assembler.

        Args:
            tiles: Dict of tile id to Tile
            adjacency: Precomputed adjacency graph (built if omitted)
        """
        self.tiles = tiles
        self.adjacency = adjacency if adjacency is not None else AdjacencyGraph.build(tiles)

    def assemble(self) -> Placement:
        """
        Place every tile.

        Returns:
            Validated Placement covering a full rectangle

        Raises:
            StructureError: If corners are not exactly four, a border
                cannot be matched, or tiles are left over
        """
        corners = self.adjacency.corners()
        placement = Placement(tiles=self.tiles)

        origin_id = corners[0]
        right_id, below_id = sorted(self.adjacency[origin_id])
        self._place_origin(placement, origin_id, right_id)
        self._check_origin_vertical(placement, origin_id, right_id, below_id)

        self._walk_row(placement, right_id)

        row_start = origin_id
        while True:
            next_start = self._place_next_row_start(placement, row_start)
            if next_start is None:
                break
            row_start = next_start
            self._walk_row(placement, row_start)

        placement.validate()
        logger.info(
            f"Assembled {len(placement.positions)} tiles into "
            f"{placement.width}x{placement.height} grid"
        )
        return placement

    def _place_origin(self, placement: Placement, origin_id: int, right_id: int) -> None:
        """Orient the origin corner and its right-hand neighbour against each other."""
        shared = self._first_shared_edge(origin_id, right_id)
        if shared is None:
            raise StructureError(f"Corner {origin_id} shares no edge with neighbour {right_id}")
        origin_edge, right_edge = shared

        origin_orientation = self._facing(origin_edge, Direction.RIGHT)
        if origin_edge.flipped:
            origin_orientation = origin_orientation.flip_vertical()

        right_orientation = self._facing(right_edge, Direction.LEFT)
        if not right_edge.flipped:
            right_orientation = right_orientation.flip_vertical()

        placement.place((0, 0), origin_id, origin_orientation)
        placement.place((1, 0), right_id, right_orientation)
        logger.debug(f"Origin tile {origin_id} {origin_orientation}, right neighbour {right_id} {right_orientation}")

    def _check_origin_vertical(
        self, placement: Placement, origin_id: int, right_id: int, below_id: int
    ) -> None:
        """
        Make sure the origin's second neighbour lies below it.

        If it lies above, both placed tiles are flipped vertically so
        that y grows downward.
        """
        other_sides = {edge.side for edge in self.tiles[below_id].grid.permuted_edges()}
        origin_grid = placement.oriented_grid(origin_id)

        match = next(
            (edge for edge in origin_grid.basic_edges() if edge.side in other_sides),
            None
        )
        if match is None:
            raise StructureError(f"Corner {origin_id} shares no edge with neighbour {below_id}")

        if match.direction == Direction.DOWN:
            return
        if match.direction != Direction.UP:
            raise StructureError(
                f"Neighbour {below_id} of corner {origin_id} matches unexpected side {match.direction.name}"
            )

        logger.debug(f"Neighbour {below_id} lies above corner {origin_id}, flipping first pair")
        for tile_id in (origin_id, right_id):
            placement.reorient(tile_id, placement.orientations[tile_id].flip_vertical())

    def _walk_row(self, placement: Placement, start_id: int) -> None:
        """Extend a row to the right of a placed tile until no unplaced neighbour matches."""
        current_id = start_id
        while True:
            right_side = placement.oriented_grid(current_id).edge(Direction.RIGHT).side
            found = self._find_unplaced_neighbor(placement, current_id, right_side)
            if found is None:
                return

            neighbor_id, edge = found
            orientation = self._facing(edge, Direction.LEFT)
            if not edge.flipped:
                orientation = orientation.flip_vertical()

            position = placement.neighbor_position(current_id, Direction.RIGHT)
            placement.place(position, neighbor_id, orientation)
            logger.debug(f"Placed tile {neighbor_id} at {position} {orientation}")
            current_id = neighbor_id

    def _place_next_row_start(self, placement: Placement, row_start_id: int) -> Optional[int]:
        """
        Place the tile below a row's leftmost tile.

        Returns:
            Id of the new row start, or None if the last row was reached
        """
        bottom_side = placement.oriented_grid(row_start_id).edge(Direction.DOWN).side
        found = self._find_unplaced_neighbor(placement, row_start_id, bottom_side)
        if found is None:
            return None

        neighbor_id, edge = found
        orientation = self._facing(edge, Direction.UP)
        if not edge.flipped:
            orientation = orientation.flip_horizontal()

        position = placement.neighbor_position(row_start_id, Direction.DOWN)
        placement.place(position, neighbor_id, orientation)
        logger.debug(f"Placed row start {neighbor_id} at {position} {orientation}")
        return neighbor_id

    def _find_unplaced_neighbor(
        self, placement: Placement, tile_id: int, side: str
    ) -> Optional[Tuple[int, Edge]]:
        """
        Find the first unplaced neighbour with an edge reading equal to `side`.

        Candidates are checked in id order against their original grids.

        Returns:
            (neighbour id, matching edge) or None
        """
        for neighbor_id in sorted(self.adjacency[tile_id]):
            if placement.is_placed(neighbor_id):
                continue
            for edge in self.tiles[neighbor_id].grid.permuted_edges():
                if edge.side == side:
                    return neighbor_id, edge
        return None

    def _first_shared_edge(self, id1: int, id2: int) -> Optional[Tuple[Edge, Edge]]:
        """First pair of equal edge readings between two unplaced tiles."""
        for edge1 in self.tiles[id1].grid.permuted_edges():
            for edge2 in self.tiles[id2].grid.permuted_edges():
                if edge1.side == edge2.side:
                    return edge1, edge2
        return None

    @staticmethod
    def _facing(edge: Edge, target: Direction) -> Orientation:
        """Orientation of an unplaced tile that turns `edge` to face `target`."""
        return Orientation.identity().rotate_cw(edge.direction.turns_to(target))
