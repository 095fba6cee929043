"""
Errors Module - Exception types raised while solving a tile puzzle.

All puzzle errors are terminal: the input either describes a valid
rectangular jigsaw or it does not.
"""


class PuzzleError(ValueError):
    """Base class for errors caused by the puzzle input."""


class MalformedInputError(PuzzleError):
    """Tile or pattern text could not be parsed."""


class StructureError(PuzzleError):
    """
    Tiles parsed correctly but do not assemble into a rectangle.

    Raised when the corner count is not exactly four, when no shared
    edge can be found during a placement step, or when the finished
    placement has gaps.
    """
