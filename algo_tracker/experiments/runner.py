from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence

from algo_tracker.algorithms import Algorithm
from algo_tracker.generator import InputKind, TestDataGenerator
from algo_tracker.models import Category, Graph, PerformanceResult
from algo_tracker.performance import PerformanceTracker
from algo_tracker.results import ResultManager

logger = logging.getLogger("algo_tracker.experiments")

# Canonical sets used when a plan does not restrict them.
ALGORITHMS_ALL = tuple(Algorithm)
INPUT_KINDS_ALL = tuple(InputKind)


@dataclass(frozen=True)
class GraphParams:
    """Shape of generated graphs. Vertex count is the run's input size and the
    requested edge count is ``vertices * edges_per_vertex``."""

    edges_per_vertex: int = 2
    max_weight: int = 10
    start: int = 0


@dataclass(frozen=True)
class RunConfig:
    """Single benchmark run.

    For array algorithms ``input_size`` is the array length, for graph
    algorithms it is the number of vertices. ``input_kind`` is ignored for
    graph algorithms.
    """

    algorithm: Algorithm
    input_kind: InputKind
    input_size: int
    seed: int


class ExperimentRunner:
    """Builds inputs, times algorithms and records results into a session."""

    def __init__(
        self,
        result_manager: ResultManager,
        tracker: PerformanceTracker | None = None,
        generator: TestDataGenerator | None = None,
        value_range: tuple[int, int] = (0, 1000),
        unique_values: int = 10,
        swap_factor: float = 0.1,
        graph_params: GraphParams | None = None,
        search_target: int | None = None,
    ):
        self.result_manager = result_manager
        self.tracker = tracker or PerformanceTracker()
        self.generator = generator or TestDataGenerator()
        self.value_range = value_range
        self.unique_values = unique_values
        self.swap_factor = swap_factor
        self.graph_params = graph_params or GraphParams()
        self.search_target = search_target

    def run(self, configs: Sequence[RunConfig]) -> List[PerformanceResult]:
        results: List[PerformanceResult] = []
        for idx, cfg in enumerate(configs, start=1):
            logger.info(
                "(%d/%d) %s kind=%s size=%d seed=%d",
                idx,
                len(configs),
                cfg.algorithm.display_name,
                cfg.input_kind.value,
                cfg.input_size,
                cfg.seed,
            )
            result = self._run_single(cfg)
            results.append(result)
            self.result_manager.add_result(result)
        return results

    def _run_single(self, cfg: RunConfig) -> PerformanceResult:
        self.generator.rng.seed(cfg.seed)
        args = self.build_args(cfg.algorithm, cfg.input_kind, cfg.input_size)
        result = self.tracker.time_algorithm(cfg.algorithm, args, cfg.input_size)
        logger.debug("%s -> %d ms", cfg.algorithm.display_name, result.execution_time_ms)
        return result

    def run_comparison(
        self,
        category: Category,
        input_kind: InputKind | str,
        input_size: int,
        algorithms: Iterable[Algorithm] | None = None,
    ) -> Dict[str, int]:
        """Time every algorithm of ``category`` on one shared input and record them."""
        kind = InputKind(input_kind)
        algos = list(algorithms) if algorithms is not None else Algorithm.by_category(category)
        for algo in algos:
            if algo.category is not category:
                raise ValueError(f"{algo.display_name} is not a {category.display_name} algorithm")
        if not algos:
            return {}
        # Binary search needs sorted input, so searching compares on sorted data.
        if category is Category.SEARCHING:
            kind = InputKind.SORTED
        args = self.build_args(algos[0], kind, input_size)
        times = self.tracker.compare(
            algos,
            args,
            [_bind(algo) for algo in algos],
        )
        for algo in algos:
            self.result_manager.add_result(
                PerformanceResult(algo.descriptor, times[algo.display_name], input_size)
            )
        return times

    def build_args(self, algorithm: Algorithm, kind: InputKind, size: int) -> tuple:
        """Positional arguments for ``algorithm`` on a freshly generated input."""
        if algorithm.category is Category.GRAPH:
            graph = self.make_graph(size)
            return (graph, self.graph_params.start)
        if algorithm is Algorithm.BINARY_SEARCH:
            kind = InputKind.SORTED
        low, high = self.value_range
        arr = self.generator.array(
            kind,
            size,
            low=low,
            high=high,
            unique_values=self.unique_values,
            swap_factor=self.swap_factor,
        )
        if algorithm.category is Category.SEARCHING:
            return (arr, self._pick_target(arr))
        return (arr,)

    def make_graph(self, vertices: int) -> Graph:
        p = self.graph_params
        if not 0 <= p.start < max(vertices, 1):
            raise ValueError(f"graph start vertex {p.start} out of range for {vertices} vertices")
        return self.generator.random_graph(
            max(vertices, 1), max(vertices, 1) * p.edges_per_vertex, p.max_weight
        )

    def _pick_target(self, arr: List[int]) -> int:
        if self.search_target is not None:
            return self.search_target
        if not arr:
            return 0
        return arr[self.generator.rng.randrange(len(arr))]


def _bind(algo: Algorithm):
    def op(args: tuple) -> Any:
        return algo(*args)

    return op


def generate_plan(
    sizes: Iterable[int],
    repeats: int = 1,
    algorithms: Iterable[Algorithm | str] | None = None,
    input_kinds: Iterable[InputKind | str] | None = None,
    seed: int = 0,
) -> List[RunConfig]:
    """Cartesian product algorithms x kinds x sizes x repeats.

    Graph algorithms ignore the input kind, so they get one run per
    (size, repeat) instead of one per kind. Seeds are ``seed + repeat``
    so each repeat sees a different but reproducible input.
    """
    algos = ALGORITHMS_ALL if algorithms is None else tuple(_as_algorithm(a) for a in algorithms)
    kinds = INPUT_KINDS_ALL if input_kinds is None else tuple(InputKind(k) for k in input_kinds)
    sizes = list(sizes)
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")
    for size in sizes:
        if size < 0:
            raise ValueError(f"input size must be >= 0, got {size}")
    configs: List[RunConfig] = []
    for algo in algos:
        algo_kinds = kinds[:1] if algo.category is Category.GRAPH else kinds
        for kind in algo_kinds:
            for size in sizes:
                for rep in range(repeats):
                    configs.append(
                        RunConfig(algorithm=algo, input_kind=kind, input_size=size, seed=seed + rep)
                    )
    return configs


def _as_algorithm(a: Algorithm | str) -> Algorithm:
    return a if isinstance(a, Algorithm) else Algorithm.from_name(a)
