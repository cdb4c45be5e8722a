from __future__ import annotations

from cave_constants import FLOOR, WALL
from cave_geometry import MOORE_OFFSETS
from cave_grid import Grid

# Neighbour wall count at which a cell keeps its current value.
MAJORITY_PIVOT = 4


def count_wall_neighbors(grid: Grid, x: int, y: int) -> int:
    """Count walls among the eight surrounding cells; off-grid cells count as wall."""
    walls = 0
    for dx, dy in MOORE_OFFSETS:
        nx, ny = x + dx, y + dy
        if not grid.in_bounds(nx, ny):
            walls += 1
        elif grid.cells[ny][nx] == WALL:
            walls += 1
    return walls


def smooth(grid: Grid) -> Grid:
    """Apply one cellular-automaton pass and return the resulting grid.

    Every new value is computed from the unmodified input grid.
    """
    smoothed = grid.copy()
    for y in range(grid.height):
        for x in range(grid.width):
            walls = count_wall_neighbors(grid, x, y)
            if walls > MAJORITY_PIVOT:
                smoothed.cells[y][x] = WALL
            elif walls < MAJORITY_PIVOT:
                smoothed.cells[y][x] = FLOOR
    return smoothed


def run_smoothing(grid: Grid, iterations: int) -> Grid:
    if iterations < 0:
        raise ValueError("Smoothing iterations cannot be negative")
    for _ in range(iterations):
        grid = smooth(grid)
    return grid
