# tests/utils.py
"""
Small, reusable helpers used across the test suite.

Functions:
- as_tuples(group): turn a cluster's vectors into sorted float tuples.
- partition_of(clusters): set of frozen clusters, order-independent.
- flatten(clusters): all vectors of a clustering as float tuples.
- ScriptedSampler: sampler callable replaying a fixed sequence of draws.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, List, Sequence, Tuple

import numpy as np


def _as_tuple(vector: Any) -> Tuple[float, ...]:
    return tuple(float(x) for x in np.asarray(vector, dtype=np.float64))


def as_tuples(group: Iterable[Any]) -> List[Tuple[float, ...]]:
    return sorted(_as_tuple(v) for v in group)


def partition_of(clusters: Sequence[Sequence[Any]]) -> FrozenSet[Tuple[Tuple[float, ...], ...]]:
    return frozenset(tuple(as_tuples(group)) for group in clusters)


def flatten(clusters: Sequence[Sequence[Any]]) -> List[Tuple[float, ...]]:
    return sorted(_as_tuple(v) for group in clusters for v in group)


class ScriptedSampler:
    """
    Sampler callable returning dataset vectors at scripted indices.

    Each call consumes the next `count` entries of `draws`, repeating the last
    entry once the script is exhausted. Every drawn index is recorded in `calls`.
    """

    def __init__(self, draws: Sequence[int]):
        self.draws = list(draws)
        self.calls: List[int] = []

    def __call__(self, count: int, data: Sequence[Any]) -> List[Any]:
        drawn = []
        for _ in range(count):
            index = self.draws[min(len(self.calls), len(self.draws) - 1)]
            self.calls.append(index)
            drawn.append(data[index])
        return drawn
