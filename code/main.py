#!/usr/bin/env python3

from __future__ import annotations

import argparse
from typing import List, Optional

from cave_config import CaveConfig
from cave_constants import (
    DEFAULT_BORDER_SIZE,
    DEFAULT_CORRIDOR_RADIUS,
    DEFAULT_FILL_PERCENT,
    DEFAULT_HEIGHT,
    DEFAULT_ROOM_REGION_THRESHOLD,
    DEFAULT_SMOOTHING_ITERATIONS,
    DEFAULT_WALL_REGION_THRESHOLD,
    DEFAULT_WIDTH,
)
from cave_errors import CaveGenerationError
from cave_generator import CaveGenerator
from grid_renderer import print_grid


def _parse_seed(value: str) -> str | int:
    # Numeric seeds are kept as integers so "42" and 42 produce the same map.
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a connected cave map and print it as ASCII.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--seed", type=_parse_seed, default=None, help="String or integer seed")
    parser.add_argument(
        "--random-seed",
        action="store_true",
        help="Ignore --seed and draw a fresh seed (printed so the map can be reproduced)",
    )
    parser.add_argument("--fill-percent", type=int, default=DEFAULT_FILL_PERCENT)
    parser.add_argument("--smoothing-iterations", type=int, default=DEFAULT_SMOOTHING_ITERATIONS)
    parser.add_argument("--border-size", type=int, default=DEFAULT_BORDER_SIZE)
    parser.add_argument("--wall-threshold", type=int, default=DEFAULT_WALL_REGION_THRESHOLD)
    parser.add_argument("--room-threshold", type=int, default=DEFAULT_ROOM_REGION_THRESHOLD)
    parser.add_argument("--corridor-radius", type=int, default=DEFAULT_CORRIDOR_RADIUS)
    parser.add_argument("--show-rooms", action="store_true", help="Overlay room edges and corridor endpoints")
    parser.add_argument("--metrics", action="store_true", help="Print per-stage timings")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print the map")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = CaveConfig(
            width=args.width,
            height=args.height,
            seed=args.seed,
            use_random_seed=args.random_seed,
            fill_percent=args.fill_percent,
            smoothing_iterations=args.smoothing_iterations,
            border_size=args.border_size,
            wall_region_threshold=args.wall_threshold,
            room_region_threshold=args.room_threshold,
            corridor_radius=args.corridor_radius,
            collect_metrics=args.metrics,
            verbose=not args.quiet,
        )
        cave = CaveGenerator(config).generate()
    except CaveGenerationError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    print_grid(
        cave.grid,
        rooms=cave.rooms if args.show_rooms else None,
        border_size=cave.border_size,
    )
    if cave.metrics:
        print()
        print("Stage timings:")
        for name, stats in cave.metrics.items():
            if name == "counters":
                continue
            print(f"  {name}: {stats['total_time'] * 1000:.2f} ms, floor delta {stats['total_floor_delta']}")
        for key, value in cave.metrics.get("counters", {}).items():
            print(f"  {key}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
