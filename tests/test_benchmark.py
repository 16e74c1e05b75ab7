import itertools

import pytest

from routeplanner.benchmark import (
    ALGORITHMS,
    BenchmarkReport,
    BenchmarkResult,
    benchmark,
)


def fake_timer(step: int = 1_000_000):
    """Clock advancing by `step` nanoseconds on every call."""
    counter = itertools.count()
    return lambda: next(counter) * step


def test_runs_every_algorithm(diamond):
    report = benchmark(diamond, runs=3, timer=fake_timer())
    assert [r.name for r in report.results] == list(ALGORITHMS)
    assert report.runs == 3
    assert report.num_vertices == 4
    for result in report.results:
        assert result.runs == 3
        # each run reads the clock twice, one step apart
        assert result.avg_us == 1000


def test_subset_and_order(diamond):
    report = benchmark(
        diamond, runs=1, algorithms=["astar", "dijkstra"], timer=fake_timer()
    )
    assert [r.name for r in report.results] == ["astar", "dijkstra"]


def test_real_timer_non_negative(diamond):
    report = benchmark(diamond, runs=2)
    for result in report.results:
        assert result.avg_us >= 0
        assert result.min_us <= result.max_us


def test_invalid_runs(diamond):
    with pytest.raises(ValueError, match="runs"):
        benchmark(diamond, runs=0)


def test_unknown_algorithm(diamond):
    with pytest.raises(ValueError, match="Unknown algorithm"):
        benchmark(diamond, algorithms=["bellman_ford"])


def test_graph_unchanged(diamond):
    before = diamond.copy()
    benchmark(diamond, runs=1)
    assert diamond == before


class TestResult:
    def test_average_truncates(self):
        result = BenchmarkResult("dijkstra", [1_500, 2_500])
        # 1 us and 2 us per run -> 3 // 2
        assert result.avg_us == 1
        assert result.min_us == 1
        assert result.max_us == 2

    def test_empty(self):
        result = BenchmarkResult("astar")
        assert result.avg_us == 0 and result.runs == 0

    def test_to_dict(self):
        result = BenchmarkResult("floyd_warshall", [2_000_000, 4_000_000])
        assert result.to_dict() == {
            "name": "floyd_warshall",
            "runs": 2,
            "avg_us": 3000,
            "min_us": 2000,
            "max_us": 4000,
        }


class TestReport:
    def make(self):
        return BenchmarkReport(
            num_vertices=4,
            runs=1,
            results=[
                BenchmarkResult("dijkstra", [120_400]),
                BenchmarkResult("floyd_warshall", [45_999]),
                BenchmarkResult("astar", [101_000]),
            ],
        )

    def test_format(self):
        text = self.make().format()
        lines = text.splitlines()
        assert lines[0] == "=== Algorithm Comparison Report ==="
        assert lines[1].startswith("Algorithm")
        assert "Dijkstra (all pairs) : 120" in lines
        assert "Floyd-Warshall       : 45" in lines
        assert "A* (all pairs)       : 101" in lines

    def test_get(self):
        report = self.make()
        assert report.get("astar").name == "astar"
        with pytest.raises(KeyError):
            report.get("missing")

    def test_to_dict(self):
        data = self.make().to_dict()
        assert data["num_vertices"] == 4
        assert [r["name"] for r in data["results"]] == list(ALGORITHMS)
