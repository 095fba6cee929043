"""
Composite Module - Stitches placed tile interiors into one image.
"""

import logging

from ..errors import StructureError
from ..tiles import Grid
from .placement import Placement

logger = logging.getLogger(__name__)


def build_composite(placement: Placement) -> Grid:
    """
    Copy every oriented tile, border removed, into its block of the image.

    Block size is the tile side length minus 2; blocks are laid out in
    raster order following the placement coordinates.

    Args:
        placement: Validated Placement

    Returns:
        Composite Grid of size (width * block) x (height * block)

    Raises:
        StructureError: If tiles are too small to have an interior
    """
    block = placement.tile_size - 2
    if block < 1:
        raise StructureError(f"Tiles of size {placement.tile_size} have no interior")

    rows = []
    for tile_row in placement.rows():
        interiors = [placement.oriented_grid(tile_id).interior() for tile_id in tile_row]
        for sub_y in range(block):
            rows.append("".join(interior.rows[sub_y] for interior in interiors))

    composite = Grid.from_rows(rows)
    logger.info(f"Composite image: {composite.width}x{composite.height}, {composite.count()} marked cells")
    return composite
