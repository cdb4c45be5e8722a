from __future__ import annotations

from cave_constants import FLOOR, WALL
from cave_errors import InvalidFillPercent
from cave_grid import Grid
from random_source import RandomSource


def fill_noise(width: int, height: int, rng: RandomSource, fill_percent: int) -> Grid:
    """Create a grid with solid edges and a random interior.

    Each interior cell becomes wall when a draw from ``[0, 100)`` falls below
    ``fill_percent``. Cells are visited column by column so a given random
    source always produces the same grid.
    """
    if not 0 <= fill_percent <= 100:
        raise InvalidFillPercent(f"fill_percent must lie within [0, 100], got {fill_percent}")
    grid = Grid(width, height, fill=WALL)
    for x in range(width):
        for y in range(height):
            if grid.is_edge(x, y):
                continue
            grid.cells[y][x] = WALL if rng.next_in_range(0, 100) < fill_percent else FLOOR
    return grid
