"""Tests for batch execution (plan generation, ExperimentRunner, CLI main).

File artefacts are written under pytest tmp_path.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from algo_tracker.algorithms import Algorithm
from algo_tracker.experiments.runner import (
    ExperimentRunner,
    GraphParams,
    RunConfig,
    generate_plan,
)
from algo_tracker.generator import InputKind, TestDataGenerator
from algo_tracker.main import load_config, main
from algo_tracker.models import Category
from algo_tracker.results import ResultManager
from algo_tracker.visualization import mean_time_by_size, save_scaling_plot


def test_generate_plan_counts() -> None:
    plan = generate_plan(
        sizes=[10, 20],
        repeats=2,
        algorithms=["quick_sort", "breadth_first_search"],
        input_kinds=["random", "reversed"],
        seed=5,
    )
    sorts = [c for c in plan if c.algorithm is Algorithm.QUICK_SORT]
    graphs = [c for c in plan if c.algorithm is Algorithm.BREADTH_FIRST_SEARCH]
    # 2 kinds x 2 sizes x 2 repeats; graph runs ignore kinds
    assert len(sorts) == 8
    assert len(graphs) == 4
    assert {c.seed for c in plan} == {5, 6}


def test_generate_plan_accepts_one_shot_sizes() -> None:
    plan = generate_plan(
        sizes=(s for s in [10, 20]),
        algorithms=["quick_sort", "merge_sort"],
        input_kinds=["random"],
    )
    assert len(plan) == 4
    assert [c.algorithm for c in plan].count(Algorithm.MERGE_SORT) == 2
    with pytest.raises(ValueError):
        generate_plan(sizes=iter([5, -1]), algorithms=["quick_sort"])


def test_generate_plan_defaults_cover_registry() -> None:
    plan = generate_plan(sizes=[5])
    assert {c.algorithm for c in plan} == set(Algorithm)


def test_generate_plan_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        generate_plan(sizes=[5], repeats=0)
    with pytest.raises(ValueError):
        generate_plan(sizes=[-1])
    with pytest.raises(ValueError):
        generate_plan(sizes=[5], algorithms=["bogo_sort"])


def test_runner_records_into_current_session() -> None:
    rm = ResultManager()
    runner = ExperimentRunner(rm, generator=TestDataGenerator(0))
    plan = [
        RunConfig(Algorithm.MERGE_SORT, InputKind.RANDOM, 50, seed=1),
        RunConfig(Algorithm.BINARY_SEARCH, InputKind.REVERSED, 50, seed=1),
        RunConfig(Algorithm.DIJKSTRA, InputKind.RANDOM, 20, seed=1),
    ]
    results = runner.run(plan)
    assert [r.algorithm.name for r in results] == [
        "Merge Sort",
        "Binary Search",
        "Dijkstra's Algorithm",
    ]
    assert rm.current_session_results == results
    assert all(r.execution_time_ms >= 0 for r in results)


def test_build_args_shapes() -> None:
    runner = ExperimentRunner(ResultManager(), generator=TestDataGenerator(3), search_target=7)
    (arr,) = runner.build_args(Algorithm.BUBBLE_SORT, InputKind.REVERSED, 10)
    assert arr == sorted(arr, reverse=True)
    arr, target = runner.build_args(Algorithm.BINARY_SEARCH, InputKind.RANDOM, 10)
    assert arr == sorted(arr)
    assert target == 7
    graph, start = runner.build_args(Algorithm.DEPTH_FIRST_SEARCH, InputKind.RANDOM, 6)
    assert graph.vertices == 6 and start == 0


def test_bad_graph_start_vertex() -> None:
    runner = ExperimentRunner(ResultManager(), graph_params=GraphParams(start=10))
    with pytest.raises(ValueError):
        runner.make_graph(5)


def test_run_comparison_records_each_algorithm() -> None:
    rm = ResultManager()
    runner = ExperimentRunner(rm, generator=TestDataGenerator(2))
    times = runner.run_comparison(Category.SORTING, "random", 200)
    assert set(times) == {a.display_name for a in Algorithm.by_category(Category.SORTING)}
    assert len(rm.current_session_results) == 5
    assert {r.input_size for r in rm.current_session_results} == {200}


def test_run_comparison_rejects_foreign_algorithm() -> None:
    runner = ExperimentRunner(ResultManager())
    with pytest.raises(ValueError):
        runner.run_comparison(Category.GRAPH, "random", 10, algorithms=[Algorithm.QUICK_SORT])


def test_mean_time_by_size() -> None:
    from algo_tracker.models import PerformanceResult

    d = Algorithm.QUICK_SORT.descriptor
    series = mean_time_by_size(
        [PerformanceResult(d, 2, 100), PerformanceResult(d, 4, 100), PerformanceResult(d, 9, 50)]
    )
    assert series == {"Quick Sort": [(50, 9.0), (100, 3.0)]}


def test_save_scaling_plot(tmp_path: Path) -> None:
    rm = ResultManager()
    runner = ExperimentRunner(rm, generator=TestDataGenerator(1))
    plan = generate_plan(sizes=[10, 20], algorithms=["merge_sort", "dijkstra"], input_kinds=["random"])
    runner.run(plan)
    path = save_scaling_plot(rm.current_session_results, filepath=str(tmp_path / "plot.png"))
    assert path is not None and Path(path).exists()
    assert save_scaling_plot([], filepath=str(tmp_path / "empty.png")) is None


def test_save_scaling_plot_bare_filename(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    from algo_tracker.models import PerformanceResult

    monkeypatch.chdir(tmp_path)
    results = [PerformanceResult(Algorithm.MERGE_SORT.descriptor, 1, 10)]
    path = save_scaling_plot(results, filepath="plot.png")
    assert path == "plot.png"
    assert (tmp_path / "plot.png").exists()
    # no default folder is created for a bare filename
    assert not (tmp_path / "charts").exists()


def test_load_config_yaml_and_json(tmp_path: Path) -> None:
    y = tmp_path / "cfg.yaml"
    y.write_text("seed: 3\nsizes: [10, 20]\ngraph:\n  max_weight: 4\n", encoding="utf-8")
    assert load_config(str(y)) == {"seed": 3, "sizes": [10, 20], "graph": {"max_weight": 4}}
    j = tmp_path / "cfg.json"
    j.write_text(json.dumps({"runs": 2}), encoding="utf-8")
    assert load_config(str(j)) == {"runs": 2}
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))
    bad = tmp_path / "list.yaml"
    bad.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(bad))


def test_main_end_to_end(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = {
        "seed": 1,
        "runs": 1,
        "sizes": [20, 40],
        "algorithms": ["insertion_sort", "linear_search", "breadth_first_search"],
        "input_kinds": ["random", "duplicates"],
        "compare": [{"category": "searching", "size": 100}],
        "export": {"dir": str(tmp_path / "results")},
        "charts": {"enabled": True, "dir": str(tmp_path / "charts")},
    }
    rm = main(cfg)
    session = rm.current_session
    # 2x2 insertion + 2x2 linear + 2 bfs + 2 comparison results
    assert len(rm.current_session_results) == 12
    assert (tmp_path / "results" / f"{session}.csv").exists()
    assert (tmp_path / "results" / "all_results.csv").exists()
    assert (tmp_path / "charts" / f"{session}.png").exists()
    out = capsys.readouterr().out
    assert "Comparison Results:" in out
    assert f"Summary for session: {session}" in out


def test_main_reuses_given_manager_with_new_session(tmp_path: Path) -> None:
    rm = ResultManager()
    before = rm.current_session
    main(
        {
            "sizes": [5],
            "algorithms": ["selection_sort"],
            "input_kinds": ["sorted"],
            "export": {"enabled": False},
        },
        manager=rm,
    )
    assert rm.current_session != before
    assert rm.session_results(before) == []
    assert len(rm.current_session_results) == 1
