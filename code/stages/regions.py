"""Flood-fill extraction of 4-connected same-type regions."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from cave_geometry import Coord
from cave_grid import Grid

Region = List[Coord]


def get_region_tiles(
    grid: Grid,
    start: Coord,
    visited: Optional[List[List[bool]]] = None,
) -> Region:
    """Breadth-first flood fill from ``start`` over orthogonal neighbours of the same type.

    ``visited`` is updated in place when provided so callers can share one marker
    grid across several fills.
    """
    if visited is None:
        visited = [[False] * grid.width for _ in range(grid.height)]
    tile_type = grid[start]
    tiles: Region = []
    queue: Deque[Coord] = deque([start])
    visited[start.y][start.x] = True
    while queue:
        tile = queue.popleft()
        tiles.append(tile)
        for neighbor in tile.cardinal_neighbors():
            if not grid.in_bounds(neighbor.x, neighbor.y):
                continue
            if visited[neighbor.y][neighbor.x]:
                continue
            if grid.cells[neighbor.y][neighbor.x] != tile_type:
                continue
            visited[neighbor.y][neighbor.x] = True
            queue.append(neighbor)
    return tiles


def get_regions(grid: Grid, tile_type: int) -> List[Region]:
    """Partition every cell equal to ``tile_type`` into maximal connected regions.

    Seeds are taken in row-major order, which fixes the order of the result.
    """
    visited = [[False] * grid.width for _ in range(grid.height)]
    regions: List[Region] = []
    for y in range(grid.height):
        for x in range(grid.width):
            if visited[y][x] or grid.cells[y][x] != tile_type:
                continue
            regions.append(get_region_tiles(grid, Coord(x, y), visited))
    return regions
