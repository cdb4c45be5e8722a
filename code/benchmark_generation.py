#!/usr/bin/env python3

# This file performs multiple runs of cave generation, collecting and reporting metrics.
# Used for testing both performance of the algorithm and quality of resulting maps.

from __future__ import annotations

import argparse
import json
import math
import random
import statistics
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List

import networkx as nx

from cave_config import CaveConfig
from cave_constants import FLOOR
from cave_generator import CaveGenerator
from cave_grid import Grid
from room_graph import RoomGraph

# Default configuration mirrors the CLI defaults from main.py.
DEFAULT_CONFIG_KWARGS = dict(
    width=60,
    height=80,
    fill_percent=45,
    smoothing_iterations=5,
    border_size=5,
    collect_metrics=True,
)

PERCENTILES = [5.0, 25.0, 50.0, 75.0, 95.0, 99.0]


def build_config(seed: int, **overrides: Any) -> CaveConfig:
    kwargs = dict(DEFAULT_CONFIG_KWARGS)
    kwargs.update(overrides)
    return CaveConfig(seed=seed, **kwargs)


@dataclass
class GenerationRunResult:
    seed: int
    duration: float
    total_rooms: int
    total_connections: int
    floor_fraction: float
    main_room_fraction: float
    room_components: int
    floor_components: int
    cycle_count: int
    graph_diameter: int
    stage_metrics: Dict[str, Dict[str, float | int]] = field(default_factory=dict)


def build_room_graph(rooms: RoomGraph) -> nx.Graph:
    graph = nx.Graph()
    for room in rooms:
        graph.add_node(room.index, size=room.size)
    for connection in rooms.connections:
        graph.add_edge(connection.room_a_index, connection.room_b_index)
    return graph


def build_floor_graph(grid: Grid) -> nx.Graph:
    """Graph of floor tiles joined to their orthogonal floor neighbours."""
    graph = nx.Graph()
    for y, row in enumerate(grid.cells):
        for x, value in enumerate(row):
            if value != FLOOR:
                continue
            graph.add_node((x, y))
            if x > 0 and row[x - 1] == FLOOR:
                graph.add_edge((x - 1, y), (x, y))
            if y > 0 and grid.cells[y - 1][x] == FLOOR:
                graph.add_edge((x, y - 1), (x, y))
    return graph


def percentile(values: List[float], pct: float) -> float:
    if not values:
        return float("nan")
    if pct <= 0:
        return min(values)
    if pct >= 100:
        return max(values)
    ordered = sorted(values)
    rank = (len(ordered) - 1) * (pct / 100.0)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    if lower == upper:
        return ordered[int(rank)]
    fraction = rank - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * fraction


def compute_basic_stats(values: List[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "min": min(values),
        "max": max(values),
        "stdev": statistics.stdev(values) if len(values) > 1 else float("nan"),
    }


def format_seconds(value: float) -> str:
    if value >= 1.0:
        return f"{value:.3f}s"
    return f"{value * 1000:.1f}ms"


def report_metric(name: str, values: List[float], formatter: Callable[[float], str]) -> None:
    print(name + ":")
    if not values:
        print("  (no data)")
        return
    stats = compute_basic_stats(values)
    print(
        "  Count {count}, mean {mean}, median {median}, min {min}, max {max}".format(
            count=len(values),
            mean=formatter(stats["mean"]),
            median=formatter(stats["median"]),
            min=formatter(stats["min"]),
            max=formatter(stats["max"]),
        )
    )
    parts = [f"p{int(pct)}={formatter(percentile(values, pct))}" for pct in PERCENTILES]
    print("  Percentiles: " + ", ".join(parts))


def run_single_generation(seed: int, **overrides: Any) -> GenerationRunResult:
    """Run one generation with the provided seed and collect metrics."""
    config = build_config(seed, **overrides)
    generator = CaveGenerator(config)

    start = time.perf_counter()
    cave = generator.generate()
    end = time.perf_counter()

    inner = cave.inner_grid
    total_cells = inner.width * inner.height
    floor_cells = inner.count(FLOOR)

    room_graph = build_room_graph(cave.rooms)
    cycle_count = len(nx.cycle_basis(room_graph))
    graph_diameter = 0
    if room_graph.number_of_nodes() >= 2 and nx.is_connected(room_graph):
        graph_diameter = int(nx.diameter(room_graph))

    floor_graph = build_floor_graph(inner)

    return GenerationRunResult(
        seed=seed,
        duration=end - start,
        total_rooms=len(cave.rooms),
        total_connections=len(cave.connections),
        floor_fraction=floor_cells / total_cells,
        main_room_fraction=cave.rooms.main_room.size / floor_cells if floor_cells else 0.0,
        room_components=nx.number_connected_components(room_graph),
        floor_components=nx.number_connected_components(floor_graph),
        cycle_count=cycle_count,
        graph_diameter=graph_diameter,
        stage_metrics=cave.metrics or {},
    )


def run_benchmark(num_runs: int, seed: int | None, **overrides: Any) -> List[GenerationRunResult]:
    """Run the generator multiple times and collect run-level metrics."""
    rng = random.Random(seed)
    return [
        run_single_generation(rng.randint(0, 1_000_000), **overrides)
        for _ in range(num_runs)
    ]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run the cave generator multiple times and report timing and quality statistics."
    )
    parser.add_argument("-n", "--runs", type=int, default=20, help="Number of generations (default: 20)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional seed for the benchmark harness RNG; keeps run seeds reproducible",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_CONFIG_KWARGS["width"])
    parser.add_argument("--height", type=int, default=DEFAULT_CONFIG_KWARGS["height"])
    parser.add_argument("--fill-percent", type=int, default=DEFAULT_CONFIG_KWARGS["fill_percent"])
    parser.add_argument("--output", type=Path, default=None, help="Optional JSON file for run results")
    args = parser.parse_args()

    if args.runs <= 0:
        raise SystemExit("Number of runs must be a positive integer")

    results = run_benchmark(
        args.runs,
        args.seed,
        width=args.width,
        height=args.height,
        fill_percent=args.fill_percent,
    )

    for idx, result in enumerate(results, start=1):
        status = "ok" if result.floor_components == 1 and result.room_components == 1 else "SPLIT"
        print(
            f"Run {idx:02d}: {format_seconds(result.duration)} (seed {result.seed}) | "
            f"rooms {result.total_rooms}, connections {result.total_connections}, "
            f"cycles {result.cycle_count}, diameter {result.graph_diameter} | {status}"
        )

    durations = [result.duration for result in results]
    worst_index = durations.index(max(durations))
    print()
    print(f"Config runs: {args.runs}")
    print(
        f"Worst-case generation time: {format_seconds(durations[worst_index])}"
        f" (seed {results[worst_index].seed})"
    )
    report_metric("Generation time", durations, format_seconds)
    report_metric("Rooms", [float(r.total_rooms) for r in results], lambda v: f"{v:.1f}")
    report_metric("Floor fraction", [r.floor_fraction for r in results], lambda v: f"{v:.1%}")
    report_metric("Main room share of floor", [r.main_room_fraction for r in results], lambda v: f"{v:.1%}")
    split_runs = sum(1 for r in results if r.floor_components != 1)
    print(f"Runs with disconnected floor: {split_runs}/{len(results)}")

    if args.output is not None:
        args.output.write_text(json.dumps([asdict(r) for r in results], indent=2))
        print(f"\nSaved benchmark results to {args.output}")


if __name__ == "__main__":
    main()
