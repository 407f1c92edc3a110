import logging
import os
from collections import defaultdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from algo_tracker.models import Category, PerformanceResult  # noqa: E402

logger = logging.getLogger("algo_tracker.visualization")


def mean_time_by_size(
    results: Sequence[PerformanceResult],
) -> Dict[str, List[tuple[int, float]]]:
    """Group results per algorithm name into sorted ``(input_size, mean_ms)`` points."""
    buckets: Dict[str, Dict[int, List[int]]] = defaultdict(lambda: defaultdict(list))
    for r in results:
        buckets[r.algorithm.name][r.input_size].append(r.execution_time_ms)
    return {
        name: [(size, sum(ts) / len(ts)) for size, ts in sorted(by_size.items())]
        for name, by_size in buckets.items()
    }


def save_scaling_plot(
    results: Sequence[PerformanceResult],
    filepath: Optional[str] = None,
    results_folder: str = "charts",
    title: Optional[str] = None,
) -> Optional[str]:
    """Draw mean execution time against input size, one subplot per category.

    Returns the saved path, or None when there is nothing to plot.
    """
    if not results:
        logger.warning("No results to plot.")
        return None
    categories = [c for c in Category if any(r.category is c for r in results)]
    fig, axes = plt.subplots(
        len(categories),
        1,
        figsize=(10, 4 * len(categories)),
        constrained_layout=True,
        squeeze=False,
    )
    for ax, category in zip(axes[:, 0], categories):
        series = mean_time_by_size([r for r in results if r.category is category])
        for name, points in series.items():
            sizes = [p[0] for p in points]
            times = [p[1] for p in points]
            ax.plot(sizes, times, marker="o", linewidth=1.5, markersize=4, label=name)
        ax.set_xlabel("Input size", fontsize=11)
        ax.set_ylabel("Mean time [ms]", fontsize=11)
        ax.set_title(f"{category.display_name} algorithms", fontsize=12, fontweight="bold")
        ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
        # Legend outside on the right
        ax.legend(
            loc="center left",
            bbox_to_anchor=(1.02, 0.5),
            frameon=False,
            fontsize=9,
            borderaxespad=0.0,
        )
    if title:
        fig.suptitle(title, fontsize=14, fontweight="bold")
    if filepath is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(results_folder, f"scaling_plot_{timestamp}.png")
    _ensure_dir(os.path.dirname(filepath))
    filepath = next_unique_path(filepath)
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    logger.info("Scaling plot saved as: %s", filepath)
    return filepath


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def next_unique_path(path: str | Path) -> str:
    """If the file exists, append _1, _2 ... until a free name is found."""
    p = Path(path)
    if not p.exists():
        return str(p)
    counter = 1
    while True:
        candidate = p.parent / f"{p.stem}_{counter}{p.suffix}"
        if not candidate.exists():
            return str(candidate)
        counter += 1
