import pytest

from cave_constants import FLOOR, WALL
from cave_errors import InvalidFillPercent
from random_source import SeededRandomSource, SequenceRandomSource
from stages.noise_fill import fill_noise


def _edges(grid):
    for x in range(grid.width):
        yield grid.get(x, 0)
        yield grid.get(x, grid.height - 1)
    for y in range(grid.height):
        yield grid.get(0, y)
        yield grid.get(grid.width - 1, y)


@pytest.mark.parametrize("fill_percent", [0, 45, 100])
def test_edges_are_always_wall(fill_percent):
    grid = fill_noise(25, 15, SeededRandomSource("edges"), fill_percent)

    assert all(value == WALL for value in _edges(grid))


def test_zero_fill_leaves_interior_open():
    grid = fill_noise(10, 8, SeededRandomSource(3), 0)

    assert grid.count(FLOOR) == 8 * 6


def test_full_fill_leaves_no_floor():
    grid = fill_noise(10, 8, SeededRandomSource(3), 100)

    assert grid.count(FLOOR) == 0


def test_injected_sequence_decides_cells_column_by_column():
    # Interior of a 4x4 grid is (1,1), (1,2), (2,1), (2,2), drawn in that order.
    source = SequenceRandomSource([10, 90, 90, 10])

    grid = fill_noise(4, 4, source, 50)

    assert source.draws == 4
    assert grid.get(1, 1) == WALL
    assert grid.get(1, 2) == FLOOR
    assert grid.get(2, 1) == FLOOR
    assert grid.get(2, 2) == WALL


def test_same_seed_fills_identically():
    first = fill_noise(30, 20, SeededRandomSource("test"), 45)
    second = fill_noise(30, 20, SeededRandomSource("test"), 45)

    assert first == second


@pytest.mark.parametrize("fill_percent", [-1, 101])
def test_rejects_fill_percent_outside_range(fill_percent):
    with pytest.raises(InvalidFillPercent):
        fill_noise(10, 10, SeededRandomSource(0), fill_percent)
