"""Configuration container for the cave map generator."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Union

from cave_constants import (
    DEFAULT_BORDER_SIZE,
    DEFAULT_CORRIDOR_RADIUS,
    DEFAULT_FILL_PERCENT,
    DEFAULT_HEIGHT,
    DEFAULT_ROOM_REGION_THRESHOLD,
    DEFAULT_SMOOTHING_ITERATIONS,
    DEFAULT_WALL_REGION_THRESHOLD,
    DEFAULT_WIDTH,
    MAX_RANDOM_SEED,
)
from cave_errors import InvalidConfig, InvalidDimensions, InvalidFillPercent


@dataclass
class CaveConfig:
    """Aggregates all tunable parameters for cave generation."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[Union[str, int]] = None
    # Ignore ``seed`` and draw a fresh one on every run.
    use_random_seed: bool = False
    # Chance, in percent, that an interior cell starts as wall.
    fill_percent: int = DEFAULT_FILL_PERCENT
    smoothing_iterations: int = DEFAULT_SMOOTHING_ITERATIONS
    # Wall margin added around the finished map.
    border_size: int = DEFAULT_BORDER_SIZE
    wall_region_threshold: int = DEFAULT_WALL_REGION_THRESHOLD
    room_region_threshold: int = DEFAULT_ROOM_REGION_THRESHOLD
    corridor_radius: int = DEFAULT_CORRIDOR_RADIUS
    collect_metrics: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(
                f"CaveConfig width and height must be positive, got {self.width}x{self.height}"
            )
        if not 0 <= self.fill_percent <= 100:
            raise InvalidFillPercent(
                f"CaveConfig fill_percent must lie within [0, 100], got {self.fill_percent}"
            )
        if self.smoothing_iterations < 0:
            raise InvalidConfig("CaveConfig smoothing_iterations cannot be negative")
        if self.border_size < 0:
            raise InvalidConfig("CaveConfig border_size cannot be negative")
        if self.wall_region_threshold < 0:
            raise InvalidConfig("CaveConfig wall_region_threshold cannot be negative")
        if self.room_region_threshold < 0:
            raise InvalidConfig("CaveConfig room_region_threshold cannot be negative")
        if self.corridor_radius < 0:
            raise InvalidConfig("CaveConfig corridor_radius cannot be negative")
        if self.seed is not None and not isinstance(self.seed, (str, int)):
            raise InvalidConfig(
                f"CaveConfig seed must be a string or integer, got {type(self.seed).__name__}"
            )

    def resolve_seed(self) -> Union[str, int]:
        """Return the seed to generate with, drawing a new one when none is fixed."""
        if self.use_random_seed or self.seed is None:
            return random.randint(0, MAX_RANDOM_SEED)
        return self.seed
