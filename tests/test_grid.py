import pytest

from cave_constants import FLOOR, WALL
from cave_errors import InvalidDimensions, OutOfBoundsAccess
from cave_geometry import Coord
from cave_grid import Grid


def test_grid_starts_filled_and_is_row_major():
    grid = Grid(4, 2, fill=FLOOR)
    grid.set(3, 1, WALL)

    assert grid.to_lists() == [[0, 0, 0, 0], [0, 0, 0, 1]]
    assert grid[Coord(3, 1)] == WALL
    assert grid.count(WALL) == 1


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_grid_rejects_non_positive_dimensions(width, height):
    with pytest.raises(InvalidDimensions):
        Grid(width, height)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_access_raises(x, y):
    grid = Grid(4, 3)

    with pytest.raises(OutOfBoundsAccess):
        grid.get(x, y)
    with pytest.raises(OutOfBoundsAccess):
        grid.set(x, y, FLOOR)
    # Out-of-bounds errors are still IndexErrors for generic callers.
    with pytest.raises(IndexError):
        grid[Coord(x, y)]


def test_edge_and_interior_checks():
    grid = Grid(5, 4)

    assert grid.is_edge(0, 2)
    assert grid.is_edge(4, 0)
    assert grid.is_edge(2, 3)
    assert not grid.is_edge(2, 2)
    assert grid.in_interior(1, 1)
    assert not grid.in_interior(4, 1)


def test_with_border_pads_with_walls():
    grid = Grid(3, 2, fill=FLOOR)

    padded = grid.with_border(2)

    assert (padded.width, padded.height) == (7, 6)
    for y in range(padded.height):
        for x in range(padded.width):
            inside = 2 <= x < 5 and 2 <= y < 4
            assert padded.get(x, y) == (FLOOR if inside else WALL)
    # Source grid is untouched.
    assert grid.count(WALL) == 0


def test_with_zero_border_copies():
    grid = Grid.from_strings(["###", "#.#", "###"])

    padded = grid.with_border(0)

    assert padded == grid
    assert padded is not grid


def test_from_strings_and_copy_are_independent():
    grid = Grid.from_strings(["#.", ".#"])
    clone = grid.copy()
    clone.set(0, 0, FLOOR)

    assert grid.to_lists() == [[1, 0], [0, 1]]
    assert clone.get(0, 0) == FLOOR


def test_from_rows_rejects_ragged_input():
    with pytest.raises(InvalidDimensions):
        Grid.from_rows([[0, 1], [0]])
