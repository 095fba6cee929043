"""
Pattern Module - Fixed multi-row shape searched for in the composite image.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np

from ..errors import MalformedInputError


SEA_MONSTER = (
    "                  # \n"
    "#    ##    ##    ###\n"
    " #  #  #  #  #  #   \n"
)


@dataclass(frozen=True)
class Pattern:
    """
    Set of marked offsets relative to the pattern's top-left corner.

    Attributes:
        offsets: Tuple of (dx, dy) for every marked position
        width: Columns spanned by the marks
        height: Rows spanned by the marks
    """
    offsets: Tuple[Tuple[int, int], ...]
    width: int
    height: int

    @classmethod
    def from_text(cls, text: str) -> "Pattern":
        """
        Parse a pattern where every non-space character is marked.

        Leading and trailing newlines are ignored; spaces inside lines
        are significant.

        Args:
            text: Pattern drawing

        Returns:
            Pattern instance

        Raises:
            MalformedInputError: If the text has no marked cells
        """
        lines = text.strip("\r\n").splitlines()
        offsets = tuple(
            (x, y)
            for y, line in enumerate(lines)
            for x, char in enumerate(line)
            if not char.isspace()
        )
        if not offsets:
            raise MalformedInputError("Pattern has no marked cells")

        width = max(dx for dx, _ in offsets) + 1
        height = max(dy for _, dy in offsets) + 1
        return cls(offsets=offsets, width=width, height=height)

    @classmethod
    def load(cls, path) -> "Pattern":
        """Read a pattern drawing from a UTF-8 text file."""
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    @property
    def mark_count(self) -> int:
        return len(self.offsets)

    def to_template(self) -> np.ndarray:
        """
        Pattern as a float32 0/1 mask of shape (height, width).

        Suitable as a cv2.matchTemplate template.
        """
        template = np.zeros((self.height, self.width), dtype=np.float32)
        for dx, dy in self.offsets:
            template[dy, dx] = 1.0
        return template


def sea_monster() -> Pattern:
    """The default search pattern."""
    return Pattern.from_text(SEA_MONSTER)
