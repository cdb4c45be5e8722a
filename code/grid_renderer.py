"""Render cave grids to ASCII text."""

from __future__ import annotations

from typing import Iterable, List, Optional

from cave_constants import WALL
from cave_geometry import Coord
from cave_grid import Grid
from room_graph import RoomGraph


def render_rows(grid: Grid, wall_char: str = "#", floor_char: str = ".") -> List[List[str]]:
    return [[wall_char if value == WALL else floor_char for value in row] for row in grid.cells]


def _mark(rows: List[List[str]], tiles: Iterable[Coord], char: str, offset: int) -> None:
    for tile in tiles:
        rows[tile.y + offset][tile.x + offset] = char


def render_ascii(
    grid: Grid,
    rooms: Optional[RoomGraph] = None,
    border_size: int = 0,
    wall_char: str = "#",
    floor_char: str = ".",
    horizontal_sep: str = "",
) -> str:
    """Render ``grid`` as text, optionally overlaying room edges and corridor endpoints.

    Room coordinates refer to the unbordered grid, so ``border_size`` shifts them
    onto a padded one.
    """
    rows = render_rows(grid, wall_char, floor_char)
    if rooms is not None:
        for room in rooms:
            _mark(rows, room.edge_tiles, "M" if room.is_main_room else "+", border_size)
        for connection in rooms.connections:
            _mark(rows, (connection.tile_a, connection.tile_b), "@", border_size)
    return "\n".join(horizontal_sep.join(row) for row in rows)


def print_grid(grid: Grid, horizontal_sep: str = "", **kwargs) -> None:
    """Prints the ASCII grid to the console."""
    print(render_ascii(grid, horizontal_sep=horizontal_sep, **kwargs))
