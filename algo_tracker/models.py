"""Core data structures for algorithm benchmarking.

This module defines:
    Category             -- closed set of algorithm families.
    AlgorithmDescriptor  -- immutable metadata of one algorithm variant.
    Edge, Graph          -- directed weighted graph as an adjacency list.
    PerformanceResult    -- one timed run of one algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Category(Enum):
    """Algorithm family; value is the human readable name."""

    SORTING = "Sorting"
    SEARCHING = "Searching"
    GRAPH = "Graph"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """Immutable identity of an algorithm variant.

    Attributes:
        name: Display name, e.g. ``"Quick Sort"``.
        description: One sentence explanation.
        time_complexity: Big-O label for time.
        space_complexity: Big-O label for auxiliary space.
        category: Family the algorithm belongs to.
    """

    name: str
    description: str
    time_complexity: str
    space_complexity: str
    category: Category


@dataclass(frozen=True)
class Edge:
    source: int
    destination: int
    weight: int


@dataclass
class Graph:
    """Directed weighted graph stored as ``adjacency_list[v] -> [Edge, ...]``.

    Vertices are ``0..vertices-1``. Edges are only ever appended, so the
    per-vertex order is the insertion order. Self-loops and parallel edges
    are accepted.
    """

    vertices: int
    adjacency_list: List[List[Edge]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.vertices < 0:
            raise ValueError(f"vertices must be >= 0, got {self.vertices}")
        self.adjacency_list = [[] for _ in range(self.vertices)]

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        self.check_vertex(source)
        self.check_vertex(destination)
        self.adjacency_list[source].append(Edge(source, destination, weight))

    def neighbors(self, vertex: int) -> List[Edge]:
        self.check_vertex(vertex)
        return self.adjacency_list[vertex]

    def check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} out of range [0, {self.vertices})")

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.adjacency_list)


@dataclass(frozen=True)
class PerformanceResult:
    """Single timed execution.

    Fields:
        algorithm: Descriptor of one of the registered algorithms.
        execution_time_ms: Elapsed wall time, whole milliseconds.
        input_size: Number of elements (or vertices) in the input.
    """

    algorithm: AlgorithmDescriptor
    execution_time_ms: int
    input_size: int

    def __post_init__(self) -> None:
        # Imported lazily: the registry itself depends on this module.
        from algo_tracker.algorithms import KNOWN_DESCRIPTORS

        # identity, not equality: a field-for-field copy is still ad hoc
        if not any(self.algorithm is d for d in KNOWN_DESCRIPTORS):
            raise ValueError(f"Unknown algorithm descriptor: {self.algorithm.name!r}")
        if self.execution_time_ms < 0:
            raise ValueError(f"execution_time_ms must be >= 0, got {self.execution_time_ms}")
        if self.input_size < 0:
            raise ValueError(f"input_size must be >= 0, got {self.input_size}")

    @property
    def category(self) -> Category:
        return self.algorithm.category
