"""CaveGenerator runs the fill, smooth, prune, connect, and pad pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, List, Optional, Union

from cave_config import CaveConfig
from cave_constants import FLOOR
from cave_geometry import Coord, coord_to_world
from cave_grid import Grid
from metrics import GenerationMetrics
from random_source import RandomSource, SeededRandomSource
from room_graph import RoomConnection, RoomGraph
from stages import RoomConnector, fill_noise, run_pruning, run_smoothing


@dataclass
class CaveMap:
    """Finished map handed to renderers."""

    grid: Grid
    inner_grid: Grid
    rooms: RoomGraph
    seed: Union[str, int]
    border_size: int
    metrics: Optional[Dict[str, Dict[str, float | int]]] = None

    @property
    def tiles(self) -> List[List[int]]:
        """Row-major cell values of the bordered map, ``tiles[y][x]``."""
        return self.grid.to_lists()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def connections(self) -> List[RoomConnection]:
        return self.rooms.connections

    def coord_to_world(self, coord: Coord) -> tuple[float, float, float]:
        """World position of an inner-grid tile, centred on the unbordered map."""
        return coord_to_world(coord, self.inner_grid.width, self.inner_grid.height)


class CaveGenerator:
    """Manages the overall process of generating a cave map."""

    def __init__(
        self,
        config: CaveConfig,
        random_source_factory: Callable[[Union[str, int]], RandomSource] = SeededRandomSource,
    ) -> None:
        self.config = config
        self.random_source_factory = random_source_factory
        self.metrics = GenerationMetrics() if config.collect_metrics else None
        self.grid: Optional[Grid] = None
        self.rooms: Optional[RoomGraph] = None

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message)

    def _floor_count(self) -> int:
        return self.grid.count(FLOOR) if self.grid is not None else 0

    def _run_stage(self, name: str, func: Callable[..., object], *args, **kwargs) -> object:
        if self.metrics is None:
            return func(*args, **kwargs)

        floor_before = self._floor_count()
        start = perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = perf_counter() - start
            self.metrics.record_stage_run(name, duration, self._floor_count() - floor_before)

    def _fill(self, rng: RandomSource) -> None:
        config = self.config
        self.grid = fill_noise(config.width, config.height, rng, config.fill_percent)

    def _smooth(self) -> None:
        self.grid = run_smoothing(self.grid, self.config.smoothing_iterations)

    def _prune(self) -> RoomGraph:
        config = self.config
        result = run_pruning(self.grid, config.wall_region_threshold, config.room_region_threshold)
        self._log(
            f"Pruned {result.wall_regions_removed} wall regions and "
            f"{result.floor_regions_removed} floor regions; "
            f"{len(result.room_regions)} rooms survive."
        )
        if self.metrics is not None:
            self.metrics.increment("wall_regions_removed", result.wall_regions_removed)
            self.metrics.increment("floor_regions_removed", result.floor_regions_removed)
        return RoomGraph.from_regions(self.grid, result.room_regions)

    def _connect(self) -> int:
        connector = RoomConnector(
            self.rooms,
            self.grid,
            self.config.corridor_radius,
            on_connect=self._on_connect,
        )
        return connector.run()

    def _on_connect(self, connection: RoomConnection) -> None:
        self._log(
            f"Connected room {connection.room_a_index} to room {connection.room_b_index} "
            f"via {connection.tile_a.to_tuple()} -> {connection.tile_b.to_tuple()}"
        )
        if self.metrics is not None:
            self.metrics.increment("connections")

    def generate(self) -> CaveMap:
        """Generates the map, running every stage to completion in order."""
        config = self.config
        seed = config.resolve_seed()
        if config.use_random_seed or config.seed is None:
            self._log(f"Using random seed {seed}")
        rng = self.random_source_factory(seed)

        self._run_stage("noise_fill", self._fill, rng)
        self._run_stage("smoothing", self._smooth)
        self.rooms = self._run_stage("pruning", self._prune)
        self._log(f"Main room has {self.rooms.main_room.size} tiles.")
        created = self._run_stage("room_connection", self._connect)
        self._log(f"Created {created} connections between {len(self.rooms)} rooms.")

        bordered = self.grid.with_border(config.border_size)
        return CaveMap(
            grid=bordered,
            inner_grid=self.grid,
            rooms=self.rooms,
            seed=seed,
            border_size=config.border_size,
            metrics=self.metrics.snapshot() if self.metrics is not None else None,
        )


def generate(config: CaveConfig) -> CaveMap:
    """Generate a cave map from ``config``."""
    return CaveGenerator(config).generate()
