"""
Adjacency Module - Which tiles share a border string.
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, FrozenSet, List, Mapping, Set

from ..errors import StructureError
from ..tiles import Tile

logger = logging.getLogger(__name__)

CORNER_COUNT = 4


@dataclass(frozen=True)
class AdjacencyGraph:
    """
    Tile id to the ids of every tile sharing at least one edge string.

    Edges are compared in all 8 readings (4 sides x 2 directions), so
    neighbours are found regardless of their relative orientation.
    Every tile id is a key, even if it has no neighbours.

    Attributes:
        neighbors: Mapping of tile id to frozenset of neighbouring ids
    """
    neighbors: Mapping[int, FrozenSet[int]]

    @classmethod
    def build(cls, tiles: Mapping[int, Tile]) -> "AdjacencyGraph":
        """
        Compare every unordered pair of tiles once.

        Args:
            tiles: Dict of tile id to Tile

        Returns:
            AdjacencyGraph keyed in the same order as `tiles`
        """
        edge_sets = {tile_id: tile.edge_strings() for tile_id, tile in tiles.items()}
        found: Dict[int, Set[int]] = {tile_id: set() for tile_id in tiles}

        for id1, id2 in combinations(tiles, 2):
            # isdisjoint stops at the first shared string
            if not edge_sets[id1].isdisjoint(edge_sets[id2]):
                found[id1].add(id2)
                found[id2].add(id1)

        graph = cls(neighbors={tile_id: frozenset(ids) for tile_id, ids in found.items()})
        logger.debug(f"Adjacency built: {graph.edge_count} shared edges across {len(tiles)} tiles")
        return graph

    def __getitem__(self, tile_id: int) -> FrozenSet[int]:
        return self.neighbors[tile_id]

    def __len__(self) -> int:
        return len(self.neighbors)

    @property
    def edge_count(self) -> int:
        """Number of distinct neighbouring pairs."""
        return sum(len(ids) for ids in self.neighbors.values()) // 2

    def degree(self, tile_id: int) -> int:
        return len(self.neighbors[tile_id])

    def corners(self) -> List[int]:
        """
        Find the corner tiles of the assembled rectangle.

        A corner touches exactly two other tiles.

        Returns:
            The four corner ids, in input order

        Raises:
            StructureError: If there are not exactly four corners
        """
        corner_ids = [tile_id for tile_id, ids in self.neighbors.items() if len(ids) == 2]
        if len(corner_ids) != CORNER_COUNT:
            raise StructureError(
                f"Expected {CORNER_COUNT} corner tiles, found {len(corner_ids)}: {corner_ids}"
            )
        logger.info(f"Corner tiles: {corner_ids}")
        return corner_ids
