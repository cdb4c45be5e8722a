import sys
from pathlib import Path
from typing import Callable, List

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from cave_config import CaveConfig
from cave_grid import Grid


@pytest.fixture
def make_config() -> Callable[..., CaveConfig]:
    def _make_config(**overrides) -> CaveConfig:
        kwargs = dict(
            width=40,
            height=30,
            seed="fixture",
            fill_percent=45,
            smoothing_iterations=5,
            border_size=2,
            room_region_threshold=10,
            wall_region_threshold=10,
        )
        kwargs.update(overrides)
        return CaveConfig(**kwargs)

    return _make_config


@pytest.fixture
def grid_from_art() -> Callable[[str], Grid]:
    """Build a grid from a block of text where '#' is wall and anything else floor."""

    def _grid_from_art(art: str) -> Grid:
        lines: List[str] = [line.strip() for line in art.strip().splitlines()]
        return Grid.from_strings(lines)

    return _grid_from_art


@pytest.fixture
def two_room_grid() -> Grid:
    """30x12 grid holding a 60-tile room and a 70-tile room separated by five wall columns."""
    grid = Grid(30, 12)
    for x in range(2, 12):
        for y in range(2, 8):
            grid.set(x, y, 0)
    for x in range(17, 27):
        for y in range(2, 9):
            grid.set(x, y, 0)
    return grid
