"""
Orientation Module - Composable rotate/mirror transforms.

An orientation is one of the 8 symmetries of a square: 0-3 clockwise
quarter turns, optionally followed by mirroring each row. Applying a
chain of rotations and flips to a grid always reduces to one of these,
so the assembler records an Orientation per tile instead of mutating
tile grids in place.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .grid import Grid


@dataclass(frozen=True)
class Orientation:
    """
    Rotate clockwise `rotations` times, then mirror rows if `flipped`.

    Attributes:
        rotations: Clockwise quarter turns (0-3)
        flipped: Mirror each row after rotating
    """
    rotations: int = 0
    flipped: bool = False

    def __post_init__(self):
        if not 0 <= self.rotations < 4:
            object.__setattr__(self, "rotations", self.rotations % 4)

    @classmethod
    def identity(cls) -> "Orientation":
        return cls()

    @classmethod
    def all(cls) -> List["Orientation"]:
        """
        All 8 orientations, unmirrored first.

        Matches the order of Grid.orientations().
        """
        return [cls(rotations, flipped) for flipped in (False, True) for rotations in range(4)]

    def rotate_cw(self, times: int = 1) -> "Orientation":
        """
        Orientation equal to this one followed by `times` clockwise turns.

        Turning a mirrored grid clockwise is the mirror of turning the
        unmirrored grid counterclockwise.
        """
        if self.flipped:
            return Orientation(self.rotations - times, True)
        return Orientation(self.rotations + times, False)

    def flip_horizontal(self) -> "Orientation":
        """Orientation equal to this one followed by reversing each row."""
        return Orientation(self.rotations, not self.flipped)

    def flip_vertical(self) -> "Orientation":
        """
        Orientation equal to this one followed by reversing row order.

        A vertical flip is a half turn followed by a horizontal flip.
        """
        return self.rotate_cw(2).flip_horizontal()

    def apply(self, grid: Grid) -> Grid:
        """
        Apply this orientation to a grid.

        Args:
            grid: Grid to transform

        Returns:
            New transformed Grid
        """
        for _ in range(self.rotations):
            grid = grid.rotate_cw()
        if self.flipped:
            grid = grid.flip_horizontal()
        return grid

    def apply_array(self, array: np.ndarray) -> np.ndarray:
        """Apply this orientation to a 2D numpy array (same result as apply())."""
        result = np.rot90(array, k=-self.rotations)
        if self.flipped:
            result = np.fliplr(result)
        return result

    def __str__(self) -> str:
        label = f"rot{self.rotations * 90}"
        return f"{label}+mirror" if self.flipped else label
