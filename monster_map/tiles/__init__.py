"""
Tiles Package - Grid model for jigsaw tiles.

Public API:
    - Grid: Immutable character grid with rotate/flip/edge operations
    - Tile: Tile id plus its original grid
    - Direction: Cardinal directions in clockwise order
    - Edge: Border string tagged with direction and reading order
    - Orientation: Composable rotate/mirror transform
    - parse_tiles(), load_tiles(): Read tiles from text or file

Usage:
    from monster_map.tiles import parse_tiles, Orientation

    tiles = parse_tiles(text)
    grid = Orientation(rotations=1, flipped=True).apply(tiles[2311].grid)
"""

from .grid import MARK, EMPTY, Direction, Edge, Grid, Tile
from .orientation import Orientation
from .parser import TILE_HEADER, parse_tiles, load_tiles

__all__ = [
    "MARK",
    "EMPTY",
    "Direction",
    "Edge",
    "Grid",
    "Tile",
    "Orientation",
    "TILE_HEADER",
    "parse_tiles",
    "load_tiles",
]
