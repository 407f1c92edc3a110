"""Config-driven benchmark batch.

Usage::

    python -m algo_tracker.main --config config.yaml

The config (YAML or JSON) selects algorithms, input shapes and sizes. Every
run is recorded in a fresh session, a summary is printed, and the session is
exported to CSV (and optionally plotted).
"""

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from algo_tracker.experiments.runner import ExperimentRunner, GraphParams, generate_plan
from algo_tracker.generator import TestDataGenerator
from algo_tracker.models import Category
from algo_tracker.performance import PerformanceTracker, format_comparison
from algo_tracker.results import ResultManager
from algo_tracker.visualization import save_scaling_plot

logger = logging.getLogger("algo_tracker")

DEFAULT_SIZES = [100, 500, 1000]


def load_config(config_file: str) -> Dict[str, Any]:
    """Read a YAML (``.yml``/``.yaml``) or JSON config into a dict."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    if config_file.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text) or {}
    else:
        cfg = json.loads(text)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping, got {type(cfg).__name__}")
    return cfg


def _section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = cfg.get(key)
    return value if isinstance(value, dict) else {}


def build_runner(cfg: Dict[str, Any], manager: ResultManager) -> ExperimentRunner:
    graph_cfg = _section(cfg, "graph")
    search_cfg = _section(cfg, "search")
    low, high = cfg.get("value_range", [0, 1000])
    return ExperimentRunner(
        manager,
        tracker=PerformanceTracker(),
        generator=TestDataGenerator(cfg.get("seed")),
        value_range=(int(low), int(high)),
        unique_values=int(cfg.get("unique_values", 10)),
        swap_factor=float(cfg.get("swap_factor", 0.1)),
        graph_params=GraphParams(
            edges_per_vertex=int(graph_cfg.get("edges_per_vertex", 2)),
            max_weight=int(graph_cfg.get("max_weight", 10)),
            start=int(graph_cfg.get("start", 0)),
        ),
        search_target=search_cfg.get("target"),
    )


def main(cfg: Dict[str, Any], manager: Optional[ResultManager] = None) -> ResultManager:
    """Run the batch described by ``cfg`` and return the manager holding the results."""
    if manager is None:
        manager = ResultManager()
    else:
        manager.start_new_session()
    session = manager.current_session
    runner = build_runner(cfg, manager)

    plan = generate_plan(
        sizes=[int(s) for s in cfg.get("sizes", DEFAULT_SIZES)],
        repeats=int(cfg.get("runs", 1)),
        algorithms=cfg.get("algorithms"),
        input_kinds=cfg.get("input_kinds"),
        seed=int(cfg.get("seed") or 0),
    )
    logger.info("Session %s: %d planned runs", session, len(plan))
    runner.run(plan)

    comparisons: List[Dict[str, Any]] = cfg.get("compare") or []
    for comp in comparisons:
        category = Category(str(comp.get("category", "Sorting")).capitalize())
        times = runner.run_comparison(
            category,
            comp.get("input_kind", "random"),
            int(comp.get("size", DEFAULT_SIZES[0])),
        )
        print(format_comparison(times))
        print()

    print(manager.summarize(session))

    export_cfg = _section(cfg, "export")
    if export_cfg.get("enabled", True):
        out_dir = Path(export_cfg.get("dir", "results"))
        try:
            manager.export_session(out_dir / f"{session}.csv", session)
            manager.export_all(out_dir / "all_results.csv")
        except OSError as e:
            logger.error("Error exporting results to %s: %s", out_dir, e)

    charts_cfg = _section(cfg, "charts")
    if charts_cfg.get("enabled", False):
        charts_dir = charts_cfg.get("dir", "charts")
        save_scaling_plot(
            manager.session_results(session) or [],
            filepath=os.path.join(charts_dir, f"{session}.png"),
            results_folder=charts_dir,
            title=session,
        )
    return manager


def cli(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Classical algorithm benchmark (config only)")
    parser.add_argument(
        "--config",
        required=True,
        help="Path to a YAML/JSON configuration file",
    )
    args = parser.parse_args(argv)
    cfg = load_config(args.config)

    log_level = cfg.get("log_level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(cli())
