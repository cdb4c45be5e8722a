from __future__ import annotations

from typing import List

from cave_constants import FLOOR
from cave_geometry import Coord, disk_offsets, line_coords
from cave_grid import Grid


def carve_brush(grid: Grid, center: Coord, radius: int) -> int:
    """Set every interior cell within ``radius`` of ``center`` to floor.

    Cells on the grid's outer ring are left untouched. Returns the number of
    cells that changed.
    """
    changed = 0
    for dx, dy in disk_offsets(radius):
        x, y = center.x + dx, center.y + dy
        if not grid.in_interior(x, y):
            continue
        if grid.cells[y][x] != FLOOR:
            grid.cells[y][x] = FLOOR
            changed += 1
    return changed


def carve_corridor(grid: Grid, tile_a: Coord, tile_b: Coord, radius: int) -> List[Coord]:
    """Open a straight passage between two tiles and return the rasterized line."""
    line = line_coords(tile_a, tile_b)
    for point in line:
        carve_brush(grid, point, radius)
    return line
