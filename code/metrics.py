"""Helpers for collecting instrumentation data during cave generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class StageMetrics:
    """Aggregated metrics for a single pipeline stage across invocations."""

    name: str
    invocations: int = 0
    total_time: float = 0.0
    total_floor_delta: int = 0

    def record(self, duration: float, floor_delta: int) -> None:
        self.invocations += 1
        self.total_time += duration
        self.total_floor_delta += floor_delta

    def to_dict(self) -> Dict[str, float | int]:
        average_time = self.total_time / self.invocations if self.invocations else 0.0
        return {
            "invocations": self.invocations,
            "total_time": self.total_time,
            "average_time": average_time,
            "total_floor_delta": self.total_floor_delta,
        }


@dataclass
class GenerationMetrics:
    """Container for stage metrics recorded during a generation run."""

    stages: Dict[str, StageMetrics] = field(default_factory=dict)
    counters: Dict[str, int] = field(default_factory=dict)

    def record_stage_run(self, name: str, duration: float, floor_delta: int) -> None:
        metrics = self.stages.get(name)
        if metrics is None:
            metrics = StageMetrics(name=name)
            self.stages[name] = metrics
        metrics.record(duration, floor_delta)

    def increment(self, key: str, amount: int = 1) -> None:
        self.counters[key] = self.counters.get(key, 0) + amount

    def snapshot(self) -> Dict[str, Dict[str, float | int]]:
        result = {name: metrics.to_dict() for name, metrics in self.stages.items()}
        if self.counters:
            result["counters"] = dict(self.counters)
        return result
