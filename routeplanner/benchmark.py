"""Wall-clock comparison of the shortest-path algorithms.

Dijkstra and A* are timed over every ordered vertex pair, Floyd-Warshall
once per run. Averages are reported in whole microseconds.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from routeplanner.algorithms.astar import astar
from routeplanner.algorithms.floyd_warshall import floyd_warshall
from routeplanner.algorithms.heuristics import Heuristic
from routeplanner.algorithms.spf import dijkstra
from routeplanner.graph import AdjacencyGraph
from routeplanner.logging import get_logger

logger = get_logger(__name__)

ALGORITHMS = ("dijkstra", "floyd_warshall", "astar")

_LABELS = {
    "dijkstra": "Dijkstra (all pairs)",
    "floyd_warshall": "Floyd-Warshall",
    "astar": "A* (all pairs)",
}


@dataclass
class BenchmarkResult:
    """Timings for one algorithm.

    Attributes:
        name: Algorithm key, one of ``ALGORITHMS``.
        timings_ns: Wall-clock nanoseconds for each run.
    """

    name: str
    timings_ns: List[int] = field(default_factory=list)

    @property
    def label(self) -> str:
        return _LABELS.get(self.name, self.name)

    @property
    def runs(self) -> int:
        return len(self.timings_ns)

    @property
    def avg_us(self) -> int:
        """Mean run time in microseconds, truncated."""
        if not self.timings_ns:
            return 0
        per_run_us = [t // 1000 for t in self.timings_ns]
        return sum(per_run_us) // len(per_run_us)

    @property
    def min_us(self) -> int:
        return min(self.timings_ns) // 1000 if self.timings_ns else 0

    @property
    def max_us(self) -> int:
        return max(self.timings_ns) // 1000 if self.timings_ns else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "runs": self.runs,
            "avg_us": self.avg_us,
            "min_us": self.min_us,
            "max_us": self.max_us,
        }


@dataclass
class BenchmarkReport:
    """Results for every benchmarked algorithm on one graph."""

    num_vertices: int
    runs: int
    results: List[BenchmarkResult] = field(default_factory=list)

    def get(self, name: str) -> BenchmarkResult:
        for result in self.results:
            if result.name == name:
                return result
        raise KeyError(f"No benchmark result for '{name}'")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num_vertices": self.num_vertices,
            "runs": self.runs,
            "results": [r.to_dict() for r in self.results],
        }

    def format(self) -> str:
        """Render the comparison table."""
        rule = "-" * 36
        lines = [
            "=== Algorithm Comparison Report ===",
            f"{'Algorithm':<23}{'Avg Time (us)'}",
            rule,
        ]
        for result in self.results:
            lines.append(f"{result.label:<21}: {result.avg_us}")
        lines.append(rule)
        return "\n".join(lines)


def _all_pairs(
    search: Callable[[int, int], Any], num_vertices: int
) -> Callable[[], None]:
    def run() -> None:
        for i in range(num_vertices):
            for j in range(num_vertices):
                search(i, j)

    return run


def benchmark(
    graph: AdjacencyGraph,
    runs: int = 5,
    algorithms: Optional[Sequence[str]] = None,
    heuristic: Optional[Heuristic] = None,
    timer: Callable[[], int] = time.perf_counter_ns,
) -> BenchmarkReport:
    """Time the algorithms on a graph.

    Args:
        graph: Graph to search. It must not change while the benchmark runs.
        runs: Repetitions per algorithm.
        algorithms: Subset of ``ALGORITHMS`` in the order to run them.
            Defaults to all three.
        heuristic: Heuristic passed to A*.
        timer: Clock returning integer nanoseconds.

    Returns:
        BenchmarkReport with one result per algorithm.

    Raises:
        ValueError: If runs < 1 or an algorithm name is unknown.
    """
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")
    selected = list(algorithms) if algorithms is not None else list(ALGORITHMS)
    unknown = [name for name in selected if name not in ALGORITHMS]
    if unknown:
        raise ValueError(
            f"Unknown algorithm(s) {unknown}. Available: {', '.join(ALGORITHMS)}"
        )

    n = graph.num_vertices
    workloads: Dict[str, Callable[[], Any]] = {
        "dijkstra": _all_pairs(lambda s, t: dijkstra(graph, s, t), n),
        "floyd_warshall": lambda: floyd_warshall(graph),
        "astar": _all_pairs(lambda s, t: astar(graph, s, t, heuristic), n),
    }

    logger.info(f"Running benchmark: V={n}, runs={runs}, algorithms={selected}")
    report = BenchmarkReport(num_vertices=n, runs=runs)
    for name in selected:
        result = BenchmarkResult(name=name)
        workload = workloads[name]
        for _ in range(runs):
            start = timer()
            workload()
            result.timings_ns.append(timer() - start)
        logger.debug(f"{result.label}: avg {result.avg_us} us over {runs} run(s)")
        report.results.append(result)

    return report
