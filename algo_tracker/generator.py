"""Synthetic benchmark inputs.

All generators draw from one ``random.Random`` owned by the instance, so a
fixed seed reproduces the same sequence of arrays and graphs.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import List

from algo_tracker.models import Graph


class InputKind(Enum):
    RANDOM = "random"
    NEARLY_SORTED = "nearly_sorted"
    SORTED = "sorted"
    REVERSED = "reversed"
    DUPLICATES = "duplicates"


class TestDataGenerator:
    """Seeded factory for arrays and graphs."""

    # Not a test class, keep pytest from collecting it.
    __test__ = False

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def random_array(self, size: int, low: int = 0, high: int = 1000) -> List[int]:
        """``size`` integers drawn uniformly from ``[low, high)``."""
        _check_size(size)
        if high <= low:
            raise ValueError(f"empty value range [{low}, {high})")
        return [self.rng.randrange(low, high) for _ in range(size)]

    def sorted_array(self, size: int, low: int = 0, high: int = 1000) -> List[int]:
        return sorted(self.random_array(size, low, high))

    def reversed_array(self, size: int, low: int = 0, high: int = 1000) -> List[int]:
        return sorted(self.random_array(size, low, high), reverse=True)

    def nearly_sorted_array(
        self,
        size: int,
        low: int = 0,
        high: int = 1000,
        swap_factor: float = 0.1,
    ) -> List[int]:
        """Sorted array disturbed by ``int(size * swap_factor)`` random swaps."""
        if not 0.0 <= swap_factor <= 1.0:
            raise ValueError(f"swap_factor must be within [0, 1], got {swap_factor}")
        arr = self.sorted_array(size, low, high)
        for _ in range(int(size * swap_factor)):
            i = self.rng.randrange(size)
            j = self.rng.randrange(size)
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    def duplicates_array(self, size: int, unique_values: int = 10) -> List[int]:
        """Values drawn from ``[0, unique_values)``; small ranges force repeats."""
        _check_size(size)
        if unique_values < 1:
            raise ValueError(f"unique_values must be >= 1, got {unique_values}")
        return [self.rng.randrange(unique_values) for _ in range(size)]

    def array(
        self,
        kind: InputKind | str,
        size: int,
        low: int = 0,
        high: int = 1000,
        unique_values: int = 10,
        swap_factor: float = 0.1,
    ) -> List[int]:
        """Dispatch to the generator matching ``kind``."""
        kind = InputKind(kind)
        if kind is InputKind.RANDOM:
            return self.random_array(size, low, high)
        if kind is InputKind.NEARLY_SORTED:
            return self.nearly_sorted_array(size, low, high, swap_factor)
        if kind is InputKind.SORTED:
            return self.sorted_array(size, low, high)
        if kind is InputKind.REVERSED:
            return self.reversed_array(size, low, high)
        return self.duplicates_array(size, unique_values)

    def random_graph(self, vertices: int, edges: int, max_weight: int = 10) -> Graph:
        """Directed graph where every vertex is reachable from vertex 0.

        A chain ``0 -> 1 -> ... -> n-1`` is laid first; the remaining
        ``edges - (vertices - 1)`` edges get random endpoints. Draws that
        would create a self-loop are skipped, so the final edge count may be
        lower than requested. Weights are uniform in ``[1, max_weight]``.
        """
        if vertices < 1:
            raise ValueError(f"vertices must be >= 1, got {vertices}")
        if max_weight < 1:
            raise ValueError(f"max_weight must be >= 1, got {max_weight}")
        graph = Graph(vertices)
        for v in range(vertices - 1):
            graph.add_edge(v, v + 1, self.rng.randint(1, max_weight))
        for _ in range(edges - (vertices - 1)):
            src = self.rng.randrange(vertices)
            dst = self.rng.randrange(vertices)
            if src != dst:
                graph.add_edge(src, dst, self.rng.randint(1, max_weight))
        return graph


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
