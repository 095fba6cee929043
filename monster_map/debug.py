"""
Debug Utilities

Functions for saving rendered composite images and managing debug output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw

from .solver.scanner import ScanResult
from .tiles import MARK

logger = logging.getLogger(__name__)

# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10
CELL_PIXELS = 8
HEADER_PIXELS = 16

# Cell colors (RGB)
WATER_COLOR = (16, 52, 96)
MARK_COLOR = (120, 180, 230)
PATTERN_COLOR = (60, 200, 90)


def render_scan(scan: ScanResult, cell_pixels: int = CELL_PIXELS) -> Image.Image:
    """
    Render the composite image with pattern cells highlighted.

    Args:
        scan: Scan result holding the composite grid and consumed cells
        cell_pixels: Side length of one cell in pixels

    Returns:
        RGB PIL Image with a summary header line
    """
    grid = scan.grid
    marks = grid.to_array() == MARK

    pixels = np.empty((grid.height, grid.width, 3), dtype=np.uint8)
    pixels[:] = WATER_COLOR
    pixels[marks] = MARK_COLOR
    for x, y in scan.consumed:
        pixels[y, x] = PATTERN_COLOR

    body = Image.fromarray(pixels).resize(
        (grid.width * cell_pixels, grid.height * cell_pixels),
        Image.Resampling.NEAREST
    )

    image = Image.new("RGB", (body.width, body.height + HEADER_PIXELS), "black")
    image.paste(body, (0, HEADER_PIXELS))

    draw = ImageDraw.Draw(image)
    summary = f"Matches: {scan.match_count}, Marks: {scan.total_marks}, Roughness: {scan.roughness}"
    draw.text((2, 2), summary, fill="white")
    return image


def save_debug_image(scan: ScanResult, path: Optional[Path] = None) -> Path:
    """
    Save a rendered composite image into the debug directory.

    Args:
        scan: Scan result to render
        path: Output file path (timestamped name in DEBUG_DIR if omitted)

    Returns:
        Path the image was written to
    """
    # Ensure debug directory exists
    DEBUG_DIR.mkdir(parents=True, exist_ok=True)

    if path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        path = DEBUG_DIR / f"debug_{timestamp}.png"

    render_scan(scan).save(path, "PNG")
    logger.info(f"Debug image saved: {path}")

    # Cleanup old debug images
    _cleanup_debug_images()
    return Path(path)


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    # Remove old files
    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Failed to remove old debug image {old_file}: {e}")
