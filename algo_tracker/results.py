"""Session-scoped storage, summaries and CSV export of performance results.

A :class:`ResultManager` owns a global result log plus one ordered log per
session. Exactly one session is current at any time; results are appended to
the global log and to the current session together.
"""

from __future__ import annotations

import csv
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from algo_tracker.models import Category, PerformanceResult

logger = logging.getLogger("algo_tracker.results")

SESSION_COLUMNS = [
    "Algorithm",
    "Category",
    "Input Size",
    "Execution Time (ms)",
    "Time Complexity",
    "Space Complexity",
]
ALL_COLUMNS = ["Session", *SESSION_COLUMNS]


class ResultManager:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._results: List[PerformanceResult] = []
        self._sessions: Dict[str, List[PerformanceResult]] = {}
        self._current = ""
        self.start_new_session()

    def start_new_session(self) -> str:
        """Open an empty session named after the current time and make it current.

        Earlier sessions are kept. Two sessions opened within the same second
        get a numeric suffix instead of sharing a log.
        """
        base = "session_" + datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        with self._lock:
            name = base
            n = 2
            while name in self._sessions:
                name = f"{base}_{n}"
                n += 1
            self._sessions[name] = []
            self._current = name
        logger.info("Started session %s", name)
        return name

    @property
    def current_session(self) -> str:
        return self._current

    def add_result(self, result: PerformanceResult) -> None:
        with self._lock:
            self._results.append(result)
            self._sessions[self._current].append(result)

    @property
    def all_results(self) -> List[PerformanceResult]:
        with self._lock:
            return list(self._results)

    @property
    def current_session_results(self) -> List[PerformanceResult]:
        with self._lock:
            return list(self._sessions[self._current])

    def session_results(self, session: str) -> Optional[List[PerformanceResult]]:
        """Copy of the results of ``session``; None if the session is unknown."""
        with self._lock:
            data = self._sessions.get(session)
            return None if data is None else list(data)

    @property
    def session_names(self) -> List[str]:
        with self._lock:
            return list(self._sessions)

    def summarize(self, session: str | None = None) -> str:
        """Human readable report grouped by category, then algorithm name.

        For each algorithm: number of runs, average/min/max time and the
        complexity labels. Unknown or empty sessions give a one-line notice.
        """
        name = session or self._current
        data = self.session_results(name)
        if not data:
            if data is None:
                logger.error("Session not found: %s", name)
            return f"No data available for session: {name}"

        grouped: Dict[Category, Dict[str, List[PerformanceResult]]] = {}
        for r in data:
            grouped.setdefault(r.category, {}).setdefault(r.algorithm.name, []).append(r)

        lines = [f"Summary for session: {name}", ""]
        for category, by_name in grouped.items():
            lines.append(f"{category.display_name} Algorithms:")
            lines.append("-" * 50)
            for algo_name, runs in by_name.items():
                times = [r.execution_time_ms for r in runs]
                descriptor = runs[0].algorithm
                lines.extend(
                    [
                        f"{algo_name}:",
                        f"  Runs: {len(times)}",
                        f"  Average Execution Time: {sum(times) / len(times):.2f} ms",
                        f"  Min Execution Time: {min(times)} ms",
                        f"  Max Execution Time: {max(times)} ms",
                        f"  Time Complexity: {descriptor.time_complexity}",
                        f"  Space Complexity: {descriptor.space_complexity}",
                        "",
                    ]
                )
            lines.append("")
        return "\n".join(lines)

    def export_session(self, path: str | Path, session: str | None = None) -> Path | None:
        """Write one session as CSV.

        Returns:
            The written path, or None when ``session`` does not exist.

        Raises:
            OSError: If the file or its parent directories cannot be written.
        """
        name = session or self._current
        data = self.session_results(name)
        if data is None:
            logger.error("Session not found: %s", name)
            return None
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(SESSION_COLUMNS)
            for r in data:
                writer.writerow(_row(r))
        logger.info("Exported %d results of %s to %s", len(data), name, out_path)
        return out_path

    def export_all(self, path: str | Path) -> Path:
        """Write every session's results as CSV with a leading ``Session`` column."""
        with self._lock:
            snapshot = [(name, list(data)) for name, data in self._sessions.items()]
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        count = 0
        with open(out_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(ALL_COLUMNS)
            for name, data in snapshot:
                for r in data:
                    writer.writerow([name, *_row(r)])
                    count += 1
        logger.info("Exported %d results from %d sessions to %s", count, len(snapshot), out_path)
        return out_path


def _row(r: PerformanceResult) -> list:
    return [
        r.algorithm.name,
        r.category.display_name,
        r.input_size,
        r.execution_time_ms,
        r.algorithm.time_complexity,
        r.algorithm.space_complexity,
    ]
