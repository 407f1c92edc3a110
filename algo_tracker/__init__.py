"""Core package for classical algorithm benchmarking.

Exports the algorithm registry, base data structures and the timing /
result-keeping entry points.
"""

from algo_tracker.algorithms import Algorithm  # noqa: F401
from algo_tracker.generator import InputKind, TestDataGenerator  # noqa: F401
from algo_tracker.models import (  # noqa: F401
    AlgorithmDescriptor,
    Category,
    Edge,
    Graph,
    PerformanceResult,
)
from algo_tracker.performance import (  # noqa: F401
    ArgumentMismatchError,
    PerformanceTracker,
    compare,
    measure,
)
from algo_tracker.results import ResultManager  # noqa: F401

__all__ = [
    "Algorithm",
    "AlgorithmDescriptor",
    "ArgumentMismatchError",
    "Category",
    "Edge",
    "Graph",
    "InputKind",
    "PerformanceResult",
    "PerformanceTracker",
    "ResultManager",
    "TestDataGenerator",
    "compare",
    "measure",
]
