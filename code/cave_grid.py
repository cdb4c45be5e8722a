"""Tile grid storage with bounds checking and border padding."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from cave_constants import FLOOR, WALL
from cave_errors import InvalidDimensions, OutOfBoundsAccess
from cave_geometry import Coord


class Grid:
    """Rectangular array of wall/floor cells.

    Cells are stored row-major, so ``cells[y][x]`` addresses column ``x`` of
    row ``y``. Dimensions are fixed at creation.
    """

    def __init__(self, width: int, height: int, fill: int = WALL) -> None:
        if width <= 0 or height <= 0:
            raise InvalidDimensions(
                f"Grid width and height must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.cells: List[List[int]] = [[fill] * width for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """Build a grid from row-major cell values."""
        if not rows:
            raise InvalidDimensions("Grid requires at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidDimensions("All grid rows must have the same length")
        grid = cls(width, len(rows))
        grid.cells = [[int(value) for value in row] for row in rows]
        return grid

    @classmethod
    def from_strings(cls, lines: Iterable[str], wall_char: str = "#") -> Grid:
        """Build a grid from text where ``wall_char`` marks walls and anything else floor."""
        return cls.from_rows(
            [[WALL if char == wall_char else FLOOR for char in line] for line in lines]
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_edge(self, x: int, y: int) -> bool:
        """Return True for cells on the outermost ring of the grid."""
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def in_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsAccess(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> int:
        self._check(x, y)
        return self.cells[y][x]

    def set(self, x: int, y: int, value: int) -> None:
        self._check(x, y)
        self.cells[y][x] = value

    def __getitem__(self, coord: Coord) -> int:
        return self.get(coord.x, coord.y)

    def __setitem__(self, coord: Coord, value: int) -> None:
        self.set(coord.x, coord.y, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def coords(self) -> Iterator[Coord]:
        """Yield every coordinate in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)

    def count(self, tile_type: int) -> int:
        return sum(row.count(tile_type) for row in self.cells)

    def copy(self) -> Grid:
        clone = Grid(self.width, self.height)
        clone.cells = [list(row) for row in self.cells]
        return clone

    def with_border(self, border_size: int) -> Grid:
        """Return a new grid padded on every side by ``border_size`` wall cells."""
        if border_size < 0:
            raise ValueError("Border size cannot be negative")
        padded = Grid(self.width + 2 * border_size, self.height + 2 * border_size, fill=WALL)
        for y, row in enumerate(self.cells):
            padded.cells[y + border_size][border_size:border_size + self.width] = row
        return padded

    def to_lists(self) -> List[List[int]]:
        """Return a row-major copy of the cells, ``result[y][x]``."""
        return [list(row) for row in self.cells]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
