"""Removal of undersized wall and floor regions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from cave_constants import FLOOR, WALL
from cave_grid import Grid
from stages.regions import Region, get_regions


@dataclass
class PruneResult:
    """Outcome of pruning both tile types on a grid."""

    wall_regions_removed: int = 0
    floor_regions_removed: int = 0
    room_regions: List[Region] = field(default_factory=list)


def touches_edge(grid: Grid, region: Region) -> bool:
    return any(grid.is_edge(tile.x, tile.y) for tile in region)


def prune_regions(
    grid: Grid,
    regions: Iterable[Region],
    threshold: int,
    replacement: int,
    keep_edge_regions: bool = False,
) -> List[Region]:
    """Overwrite every region smaller than ``threshold`` with ``replacement``.

    Returns the regions that were kept. With ``keep_edge_regions`` set, regions
    containing a cell on the grid's outer ring are always kept.
    """
    kept: List[Region] = []
    for region in regions:
        if len(region) >= threshold or (keep_edge_regions and touches_edge(grid, region)):
            kept.append(region)
            continue
        for tile in region:
            grid[tile] = replacement
    return kept


def run_pruning(grid: Grid, wall_threshold: int, room_threshold: int) -> PruneResult:
    """Prune small wall regions, then small floor regions, mutating ``grid``.

    Floor regions are extracted only after wall pruning has been applied, since
    opening wall pockets can merge neighbouring floor regions.
    """
    result = PruneResult()

    wall_regions = get_regions(grid, WALL)
    kept_walls = prune_regions(grid, wall_regions, wall_threshold, FLOOR, keep_edge_regions=True)
    result.wall_regions_removed = len(wall_regions) - len(kept_walls)

    floor_regions = get_regions(grid, FLOOR)
    result.room_regions = prune_regions(grid, floor_regions, room_threshold, WALL)
    result.floor_regions_removed = len(floor_regions) - len(result.room_regions)
    return result
