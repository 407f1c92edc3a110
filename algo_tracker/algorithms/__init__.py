"""Algorithm registry.

Every benchmarkable algorithm is a member of the closed :class:`Algorithm`
enum. A member's value is its :class:`AlgorithmDescriptor`; calling the
member runs the implementation:

    Algorithm.QUICK_SORT([3, 1, 2])            -> [1, 2, 3]
    Algorithm.BINARY_SEARCH([1, 2, 3], 3)      -> 2
    Algorithm.DIJKSTRA(graph, 0)               -> [0, ...]
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, List

from algo_tracker.algorithms.graph import (
    INFINITY,
    breadth_first_search,
    depth_first_search,
    dijkstra,
)
from algo_tracker.algorithms.searching import (
    NOT_FOUND,
    binary_search,
    binary_search_recursive,
    linear_search,
)
from algo_tracker.algorithms.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from algo_tracker.models import AlgorithmDescriptor, Category

_GRAPH_TIME = "O(V + E) where V is the number of vertices and E is the number of edges"


class Algorithm(Enum):
    BUBBLE_SORT = AlgorithmDescriptor(
        name="Bubble Sort",
        description=(
            "A simple sorting algorithm that repeatedly steps through the list, compares "
            "adjacent elements, and swaps them if they are in the wrong order."
        ),
        time_complexity="O(n²)",
        space_complexity="O(1)",
        category=Category.SORTING,
    )
    INSERTION_SORT = AlgorithmDescriptor(
        name="Insertion Sort",
        description=(
            "Builds the sorted array one item at a time by comparing each item with the "
            "items before it and inserting it into its correct position."
        ),
        time_complexity="O(n²)",
        space_complexity="O(1)",
        category=Category.SORTING,
    )
    SELECTION_SORT = AlgorithmDescriptor(
        name="Selection Sort",
        description=(
            "Repeatedly selects the smallest element from the unsorted part and moves it "
            "to the end of the sorted part."
        ),
        time_complexity="O(n²)",
        space_complexity="O(1)",
        category=Category.SORTING,
    )
    MERGE_SORT = AlgorithmDescriptor(
        name="Merge Sort",
        description=(
            "A divide and conquer algorithm that divides the input array into two halves, "
            "recursively sorts them, and then merges the sorted halves."
        ),
        time_complexity="O(n log n)",
        space_complexity="O(n)",
        category=Category.SORTING,
    )
    QUICK_SORT = AlgorithmDescriptor(
        name="Quick Sort",
        description=(
            "A divide and conquer algorithm that picks the last element as pivot and "
            "partitions the array around it."
        ),
        time_complexity="O(n log n) average, O(n²) worst case",
        space_complexity="O(log n)",
        category=Category.SORTING,
    )
    LINEAR_SEARCH = AlgorithmDescriptor(
        name="Linear Search",
        description=(
            "Checks each element of the list until the target element is found or the "
            "list ends."
        ),
        time_complexity="O(n)",
        space_complexity="O(1)",
        category=Category.SEARCHING,
    )
    BINARY_SEARCH = AlgorithmDescriptor(
        name="Binary Search",
        description=(
            "Finds the position of a target value within a sorted array by repeatedly "
            "dividing the search interval in half."
        ),
        time_complexity="O(log n)",
        space_complexity="O(1) iterative, O(log n) recursive",
        category=Category.SEARCHING,
    )
    DEPTH_FIRST_SEARCH = AlgorithmDescriptor(
        name="Depth-First Search",
        description=(
            "Explores as far as possible along each branch before backtracking."
        ),
        time_complexity=_GRAPH_TIME,
        space_complexity="O(V)",
        category=Category.GRAPH,
    )
    BREADTH_FIRST_SEARCH = AlgorithmDescriptor(
        name="Breadth-First Search",
        description=(
            "Explores all vertices at the present depth before moving on to vertices at "
            "the next depth level."
        ),
        time_complexity=_GRAPH_TIME,
        space_complexity="O(V)",
        category=Category.GRAPH,
    )
    DIJKSTRA = AlgorithmDescriptor(
        name="Dijkstra's Algorithm",
        description=(
            "Finds the shortest paths from a source vertex to every other vertex of a "
            "graph with non-negative edge weights."
        ),
        time_complexity="O(V²) with linear minimum selection",
        space_complexity="O(V)",
        category=Category.GRAPH,
    )

    @property
    def descriptor(self) -> AlgorithmDescriptor:
        return self.value

    @property
    def category(self) -> Category:
        return self.value.category

    @property
    def display_name(self) -> str:
        return self.value.name

    @property
    def implementation(self) -> Callable[..., Any]:
        return _IMPLEMENTATIONS[self]

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return _IMPLEMENTATIONS[self](*args, **kwargs)

    @classmethod
    def by_category(cls, category: Category) -> List["Algorithm"]:
        """Members of ``category`` in declaration order."""
        return [algo for algo in cls if algo.category is category]

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Resolve an enum key (``"quick_sort"``) or display name (``"Quick Sort"``).

        Raises:
            ValueError: If no member matches.
        """
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        if key in cls.__members__:
            return cls[key]
        for algo in cls:
            if algo.display_name.lower() == name.strip().lower():
                return algo
        raise ValueError(f"Unknown algorithm: {name}")

    @classmethod
    def from_descriptor(cls, descriptor: AlgorithmDescriptor) -> "Algorithm":
        return cls(descriptor)


_IMPLEMENTATIONS: Dict[Algorithm, Callable[..., Any]] = {
    Algorithm.BUBBLE_SORT: bubble_sort,
    Algorithm.INSERTION_SORT: insertion_sort,
    Algorithm.SELECTION_SORT: selection_sort,
    Algorithm.MERGE_SORT: merge_sort,
    Algorithm.QUICK_SORT: quick_sort,
    Algorithm.LINEAR_SEARCH: linear_search,
    Algorithm.BINARY_SEARCH: binary_search,
    Algorithm.DEPTH_FIRST_SEARCH: depth_first_search,
    Algorithm.BREADTH_FIRST_SEARCH: breadth_first_search,
    Algorithm.DIJKSTRA: dijkstra,
}

KNOWN_DESCRIPTORS: FrozenSet[AlgorithmDescriptor] = frozenset(a.descriptor for a in Algorithm)

__all__ = [
    "Algorithm",
    "INFINITY",
    "KNOWN_DESCRIPTORS",
    "NOT_FOUND",
    "binary_search",
    "binary_search_recursive",
    "breadth_first_search",
    "bubble_sort",
    "depth_first_search",
    "dijkstra",
    "insertion_sort",
    "linear_search",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]
