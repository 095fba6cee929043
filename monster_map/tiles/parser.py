"""
Tile Parser Module - Reads tile definitions from puzzle text.

Input format:

    Tile 2311:
    ..##.#..#.
    ##..#.....
    ...

    Tile 1951:
    ...

Whitespace around each line is ignored, so indented text works too.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import MalformedInputError
from .grid import EMPTY, MARK, Grid, Tile

logger = logging.getLogger(__name__)

TILE_HEADER = re.compile(r"^Tile (?P<id>\d+):$")
TILE_CHARS = frozenset(MARK + EMPTY)


def parse_tiles(text: str) -> Dict[int, Tile]:
    """
    Parse tile text into tiles keyed by id.

    Args:
        text: Tile definitions separated by blank lines

    Returns:
        Dict of tile id to Tile, in input order

    Raises:
        MalformedInputError: If a header is invalid, a tile id repeats,
            a tile is empty, not square, contains unexpected characters,
            or tiles differ in size
    """
    tiles: Dict[int, Tile] = {}
    current_id: Optional[int] = None
    current_rows: List[str] = []

    def finish_tile() -> None:
        if current_id is None:
            return
        tiles[current_id] = _build_tile(current_id, current_rows)

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith("Tile"):
            match = TILE_HEADER.match(line)
            if match is None:
                raise MalformedInputError(f"Line {line_number}: invalid tile header: {line!r}")
            finish_tile()
            current_id = int(match.group("id"))
            if current_id in tiles:
                raise MalformedInputError(f"Line {line_number}: duplicate tile id {current_id}")
            current_rows = []
        elif current_id is None:
            raise MalformedInputError(f"Line {line_number}: grid row before any tile header")
        else:
            current_rows.append(line)

    finish_tile()

    if not tiles:
        raise MalformedInputError("No tiles found in input")

    sizes = {tile.size for tile in tiles.values()}
    if len(sizes) > 1:
        raise MalformedInputError(f"Tiles have differing sizes: {sorted(sizes)}")

    logger.info(f"Parsed {len(tiles)} tiles of size {sizes.pop()}")
    return tiles


def load_tiles(path) -> Dict[int, Tile]:
    """
    Read and parse a tile file.

    Args:
        path: Path to a UTF-8 text file

    Returns:
        Dict of tile id to Tile
    """
    path = Path(path)
    logger.debug(f"Loading tiles from {path}")
    return parse_tiles(path.read_text(encoding="utf-8"))


def _build_tile(tile_id: int, rows: List[str]) -> Tile:
    """Validate collected rows and wrap them in a Tile."""
    if not rows:
        raise MalformedInputError(f"Tile {tile_id} has no rows")

    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise MalformedInputError(f"Tile {tile_id} has rows of differing lengths: {sorted(widths)}")

    width = widths.pop()
    if width != len(rows):
        raise MalformedInputError(f"Tile {tile_id} is not square: {len(rows)}x{width}")

    unexpected = set("".join(rows)) - TILE_CHARS
    if unexpected:
        raise MalformedInputError(f"Tile {tile_id} contains unexpected characters: {sorted(unexpected)}")

    return Tile(tile_id=tile_id, grid=Grid.from_rows(rows))
