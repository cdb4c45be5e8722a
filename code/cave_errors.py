"""Exception hierarchy raised by the cave map generator."""

from __future__ import annotations


class CaveGenerationError(Exception):
    """Base class for every error raised while generating a cave map."""


class InvalidConfig(CaveGenerationError, ValueError):
    """A generation parameter is outside its accepted range."""


class InvalidDimensions(InvalidConfig):
    """Width or height is not positive."""


class InvalidFillPercent(InvalidConfig):
    """Fill percentage lies outside [0, 100]."""


class EmptyRoomSet(CaveGenerationError):
    """No floor region survived pruning, so no connected level can be produced."""


class RoomConnectionError(CaveGenerationError):
    """The connector could not find any pair of edge tiles to join."""


class OutOfBoundsAccess(CaveGenerationError, IndexError):
    """A grid cell outside the grid extents was read or written."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Cell {(x, y)} lies outside a {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height
