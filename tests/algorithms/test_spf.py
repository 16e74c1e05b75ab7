import pytest

from routeplanner.algorithms.paths import path_cost
from routeplanner.algorithms.spf import dijkstra, dijkstra_costs
from routeplanner.graph import AdjacencyGraph


class TestDijkstra:
    def test_diamond(self, diamond):
        """Unique optimum goes through the cheap 0-2 and 2-1 edges."""
        path = dijkstra(diamond, 0, 3)
        assert path == [0, 2, 1, 3]
        assert path_cost(diamond, path) == 4

    def test_reverse_direction_on_undirected(self, diamond):
        assert dijkstra(diamond, 3, 0) == [3, 1, 2, 0]

    def test_same_vertex(self, diamond):
        for s in range(4):
            assert dijkstra(diamond, s, s) == [s]

    def test_same_vertex_isolated(self):
        g = AdjacencyGraph(3)
        assert dijkstra(g, 1, 1) == [1]

    def test_unreachable(self, two_islands):
        assert dijkstra(two_islands, 0, 3) == []
        assert dijkstra(two_islands, 3, 1) == []

    def test_directed_respects_direction(self, line3):
        assert dijkstra(line3, 0, 2) == [0, 1, 2]
        assert dijkstra(line3, 2, 0) == []

    def test_parallel_edges_use_cheapest(self, parallel):
        path = dijkstra(parallel, 0, 2)
        assert path == [0, 1, 2]
        assert path_cost(parallel, path) == 4

    @pytest.mark.parametrize("src,dst", [(-1, 0), (0, 4), (4, 4), (0, -2)])
    def test_out_of_range_returns_empty(self, diamond, src, dst):
        assert dijkstra(diamond, src, dst) == []

    def test_empty_graph(self):
        assert dijkstra(AdjacencyGraph(), 0, 0) == []

    def test_zero_weight_edges(self):
        g = AdjacencyGraph(3)
        g.add_edge(0, 1, 0)
        g.add_edge(1, 2, 0)
        g.add_edge(0, 2, 1)
        assert dijkstra(g, 0, 2) == [0, 1, 2]

    def test_edit_then_rerun(self, diamond):
        diamond.update_weight(2, 1, 10)
        assert dijkstra(diamond, 0, 3) == [0, 1, 3]

    def test_graph_not_mutated(self, diamond):
        before = diamond.copy()
        dijkstra(diamond, 0, 3)
        assert diamond == before


class TestDijkstraCosts:
    def test_costs_from_source(self, diamond):
        dist, parent = dijkstra_costs(diamond, 0)
        assert dist == {0: 0, 1: 3, 2: 1, 3: 4}
        assert parent == {1: 2, 2: 0, 3: 1}

    def test_only_reachable_vertices(self, two_islands):
        dist, parent = dijkstra_costs(two_islands, 2)
        assert dist == {2: 0, 3: 2}
        assert parent == {3: 2}

    def test_missing_source(self, diamond):
        with pytest.raises(KeyError):
            dijkstra_costs(diamond, 7)
