"""Seeded random sources used by the noise fill stage."""

from __future__ import annotations

import random
from typing import Iterable, List, Protocol, Union

SeedValue = Union[str, int]


class RandomSource(Protocol):
    """Minimal interface the generator needs from a random number generator."""

    def next_in_range(self, lo: int, hi: int) -> int:
        """Return an integer ``n`` with ``lo <= n < hi``."""
        ...


class SeededRandomSource:
    """Deterministic source backed by a private ``random.Random`` instance.

    String seeds are hashed by ``random.Random`` itself, which does not depend
    on ``PYTHONHASHSEED``, so the same seed yields the same sequence in every
    process.
    """

    def __init__(self, seed: SeedValue) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def next_in_range(self, lo: int, hi: int) -> int:
        if hi <= lo:
            raise ValueError(f"Empty range [{lo}, {hi})")
        return self._rng.randrange(lo, hi)


class SequenceRandomSource:
    """Replays a fixed list of values, wrapping around when exhausted."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        if not self._values:
            raise ValueError("SequenceRandomSource requires at least one value")
        self._position = 0

    def next_in_range(self, lo: int, hi: int) -> int:
        value = self._values[self._position % len(self._values)]
        self._position += 1
        if not lo <= value < hi:
            raise ValueError(f"Scripted value {value} outside [{lo}, {hi})")
        return value

    @property
    def draws(self) -> int:
        return self._position
