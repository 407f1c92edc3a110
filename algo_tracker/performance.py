"""Execution timing and side-by-side comparison.

``measure`` runs an operation twice: the first call is a discarded warm-up,
only the second one is timed. Times are whole milliseconds, floored.
"""

from __future__ import annotations

import copy
import logging
import time
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from algo_tracker.algorithms import Algorithm
from algo_tracker.models import AlgorithmDescriptor, PerformanceResult

logger = logging.getLogger("algo_tracker.performance")

T = TypeVar("T")

_NS_PER_MS = 1_000_000


class ArgumentMismatchError(ValueError):
    """Raised when algorithms and operations passed to ``compare`` differ in length."""


def measure(data: T, operation: Callable[[T], Any]) -> int:
    """Time one call of ``operation(data)`` after an untimed warm-up call.

    Returns:
        Elapsed milliseconds of the second call, truncated (never negative).
    """
    operation(data)
    t0 = time.perf_counter_ns()
    operation(data)
    elapsed_ns = time.perf_counter_ns() - t0
    return max(0, elapsed_ns // _NS_PER_MS)


def compare(
    algorithms: Sequence[Algorithm | AlgorithmDescriptor],
    shared_input: T,
    operations: Sequence[Callable[[T], Any]],
) -> Dict[str, int]:
    """Measure each ``(algorithm, operation)`` pair on its own copy of the input.

    Args:
        algorithms: Algorithms being compared, used for naming only.
        shared_input: Input handed (deep-copied) to every operation.
        operations: Callables aligned index-by-index with ``algorithms``.

    Returns:
        ``{algorithm name: elapsed ms}`` in the order of ``algorithms``.

    Raises:
        ArgumentMismatchError: If the two sequences have different lengths.
    """
    if len(algorithms) != len(operations):
        raise ArgumentMismatchError(
            f"Number of algorithms ({len(algorithms)}) must match "
            f"number of operations ({len(operations)})"
        )
    times: Dict[str, int] = {}
    for algo, op in zip(algorithms, operations):
        name = _descriptor(algo).name
        times[name] = measure(copy.deepcopy(shared_input), op)
        logger.debug("compare %s: %d ms", name, times[name])
    return times


def format_comparison(times: Dict[str, int]) -> str:
    """Render comparison times fastest first, with speedup over the slowest."""
    if not times:
        return "No comparison results."
    ranked = sorted(times.items(), key=lambda kv: kv[1])
    width = max(len(name) for name, _ in ranked)
    lines = ["Comparison Results:", "-" * (width + 16)]
    for rank, (name, ms) in enumerate(ranked, start=1):
        lines.append(f"{rank}. {name:<{width}} {ms:>8} ms")
    fastest_name, fastest = ranked[0]
    slowest_name, slowest = ranked[-1]
    if len(ranked) > 1:
        lines.append("")
        lines.append(f"Fastest: {fastest_name}")
        if fastest > 0:
            lines.append(f"Speedup compared to slowest ({slowest_name}): {slowest / fastest:.2f}x")
        else:
            lines.append("Speedup compared to slowest: n/a (fastest run below 1 ms)")
    return "\n".join(lines)


class PerformanceTracker:
    """Stateful wrapper over :func:`measure`/:func:`compare` with its own result log."""

    def __init__(self) -> None:
        self._results: List[PerformanceResult] = []

    def measure(self, data: T, operation: Callable[[T], Any]) -> int:
        return measure(data, operation)

    def compare(
        self,
        algorithms: Sequence[Algorithm | AlgorithmDescriptor],
        shared_input: T,
        operations: Sequence[Callable[[T], Any]],
    ) -> Dict[str, int]:
        return compare(algorithms, shared_input, operations)

    def time_algorithm(
        self,
        algorithm: Algorithm,
        args: tuple,
        input_size: int,
    ) -> PerformanceResult:
        """Measure ``algorithm(*args)`` and wrap it as a result (not stored)."""
        ms = measure(args, lambda a: algorithm(*a))
        return PerformanceResult(algorithm.descriptor, ms, input_size)

    def add_result(self, result: PerformanceResult) -> None:
        self._results.append(result)

    @property
    def results(self) -> List[PerformanceResult]:
        return list(self._results)

    def clear(self) -> None:
        self._results.clear()

    def average_execution_time(self, algorithm_name: str) -> float:
        """Mean time of ``algorithm_name`` over stored results; -1.0 if none."""
        times = [r.execution_time_ms for r in self._results if r.algorithm.name == algorithm_name]
        if not times:
            return -1.0
        return sum(times) / len(times)

    def fastest_algorithm(self, input_size: int) -> Optional[str]:
        """Name of the quickest stored result at ``input_size``; None if none."""
        sized = [r for r in self._results if r.input_size == input_size]
        if not sized:
            return None
        return min(sized, key=lambda r: r.execution_time_ms).algorithm.name


def _descriptor(algo: Algorithm | AlgorithmDescriptor) -> AlgorithmDescriptor:
    if isinstance(algo, Algorithm):
        return algo.descriptor
    return algo
