"""Geometry helpers for working with tile coordinates, lines, and brushes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from cave_constants import WORLD_MARKER_HEIGHT


class Direction(Enum):
    """Cardinal directions with unit vectors on the tile grid."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    def opposite(self) -> Direction:
        return Direction.from_tuple((-self.dx, -self.dy))

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> Direction:
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unsupported direction {value}") from exc


# Offsets of the eight surrounding cells, scanned column by column.
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass(frozen=True, order=True)
class Coord:
    """Integer tile coordinate."""

    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> int:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Coord only supports two coordinates")

    def step(self, direction: Direction) -> Coord:
        return Coord(self.x + direction.dx, self.y + direction.dy)

    def cardinal_neighbors(self) -> Iterator[Coord]:
        """Yield the four orthogonal neighbours, which may lie off the grid."""
        for direction in Direction:
            yield self.step(direction)

    def squared_distance(self, other: Coord) -> int:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> Coord:
        return cls(*value)


def _sign(value: int) -> int:
    return -1 if value < 0 else 1


def line_coords(start: Coord, end: Coord) -> List[Coord]:
    """Rasterize the segment from ``start`` to ``end`` with an integer accumulator.

    Steps one tile along the major axis per point and moves along the minor axis
    whenever the accumulated gradient reaches the major-axis length. Axes are
    swapped when the vertical delta is larger, so every octant is handled the
    same way. Both endpoints are included.
    """
    x, y = start.x, start.y
    dx = end.x - start.x
    dy = end.y - start.y

    inverted = False
    step = _sign(dx)
    gradient_step = _sign(dy)
    longest = abs(dx)
    shortest = abs(dy)

    if longest < shortest:
        inverted = True
        longest = abs(dy)
        shortest = abs(dx)
        step = _sign(dy)
        gradient_step = _sign(dx)

    line: List[Coord] = []
    gradient_accumulation = longest // 2
    for _ in range(longest):
        line.append(Coord(x, y))
        if inverted:
            y += step
        else:
            x += step

        gradient_accumulation += shortest
        if gradient_accumulation >= longest:
            if inverted:
                x += gradient_step
            else:
                y += gradient_step
            gradient_accumulation -= longest
    line.append(Coord(x, y))
    return line


def disk_offsets(radius: int) -> List[Tuple[int, int]]:
    """Offsets of a filled circle brush; the centre is always included."""
    if radius < 0:
        raise ValueError("Brush radius cannot be negative")
    limit = radius * radius
    return [
        (dx, dy)
        for dx in range(-radius, radius + 1)
        for dy in range(-radius, radius + 1)
        if dx * dx + dy * dy <= limit
    ]


def coord_to_world(
    coord: Coord,
    width: int,
    height: int,
    z: float = WORLD_MARKER_HEIGHT,
) -> Tuple[float, float, float]:
    """Map a tile to the world-space point a renderer centres it on."""
    return (-width / 2 + 0.5 + coord.x, z, -height / 2 + 0.5 + coord.y)
