import pytest

from cave_constants import FLOOR, WALL
from cave_geometry import Coord, line_coords
from cave_grid import Grid
from stages.corridor_carver import carve_brush, carve_corridor
from stages.regions import get_regions


@pytest.mark.parametrize("radius", [1, 2, 3])
@pytest.mark.parametrize(
    "tile_a,tile_b",
    [
        (Coord(5, 5), Coord(30, 12)),
        (Coord(10, 25), Coord(14, 4)),
        (Coord(28, 20), Coord(6, 20)),
    ],
)
def test_every_cell_near_the_line_is_floor(tile_a, tile_b, radius):
    grid = Grid(36, 30)

    line = carve_corridor(grid, tile_a, tile_b, radius)

    assert line == line_coords(tile_a, tile_b)
    for point in line:
        for y in range(grid.height):
            for x in range(grid.width):
                if (x - point.x) ** 2 + (y - point.y) ** 2 < radius * radius:
                    assert grid.get(x, y) == FLOOR


def test_radius_zero_still_opens_the_line():
    grid = Grid(12, 12)

    line = carve_corridor(grid, Coord(2, 2), Coord(9, 6), 0)

    assert grid.count(FLOOR) == len(line)
    assert all(grid[point] == FLOOR for point in line)


def test_radius_one_corridor_is_orthogonally_walkable():
    grid = Grid(20, 20)

    carve_corridor(grid, Coord(3, 3), Coord(16, 12), 1)

    assert len(get_regions(grid, FLOOR)) == 1


def test_brush_is_clipped_to_the_interior():
    grid = Grid(6, 6)

    changed = carve_brush(grid, Coord(1, 1), 3)

    for x in range(grid.width):
        assert grid.get(x, 0) == WALL
        assert grid.get(x, grid.height - 1) == WALL
    for y in range(grid.height):
        assert grid.get(0, y) == WALL
        assert grid.get(grid.width - 1, y) == WALL
    assert grid.get(1, 1) == FLOOR
    assert changed == grid.count(FLOOR)


def test_carving_existing_floor_reports_no_change():
    grid = Grid(5, 5, fill=FLOOR)

    assert carve_brush(grid, Coord(2, 2), 1) == 0
