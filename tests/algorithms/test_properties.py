"""Cross-checks between the three searches and NetworkX on random graphs."""

import networkx as nx
import pytest

from routeplanner.algorithms.astar import astar
from routeplanner.algorithms.floyd_warshall import floyd_warshall
from routeplanner.algorithms.heuristics import zero_heuristic
from routeplanner.algorithms.paths import path_cost
from routeplanner.algorithms.spf import dijkstra
from routeplanner.algorithms.types import INF
from routeplanner.generator import generate_random_graph
from routeplanner.nx import to_networkx

CASES = [
    # (V, E, directed, seed)
    (6, 8, False, 1),
    (8, 10, True, 2),
    (10, 30, False, 3),
    (12, 20, True, 4),
    (15, 12, False, 5),
]


@pytest.mark.parametrize("num_vertices,num_edges,directed,seed", CASES)
def test_dijkstra_cost_matches_floyd_warshall(
    num_vertices, num_edges, directed, seed
):
    g = generate_random_graph(num_vertices, num_edges, directed=directed, seed=seed)
    dist = floyd_warshall(g)
    for s in range(num_vertices):
        for t in range(num_vertices):
            path = dijkstra(g, s, t)
            if dist[s][t] >= INF:
                assert path == []
            else:
                assert path[0] == s and path[-1] == t
                assert path_cost(g, path) == dist[s][t]


@pytest.mark.parametrize("num_vertices,num_edges,directed,seed", CASES)
def test_floyd_warshall_matches_networkx(
    num_vertices, num_edges, directed, seed
):
    g = generate_random_graph(num_vertices, num_edges, directed=directed, seed=seed)
    dist = floyd_warshall(g)
    expected = dict(nx.all_pairs_dijkstra_path_length(to_networkx(g)))
    for s in range(num_vertices):
        for t in range(num_vertices):
            if t in expected[s]:
                assert dist[s][t] == expected[s][t]
            else:
                assert dist[s][t] == INF


@pytest.mark.parametrize("num_vertices,num_edges,directed,seed", CASES)
def test_astar_zero_heuristic_is_optimal(
    num_vertices, num_edges, directed, seed
):
    g = generate_random_graph(num_vertices, num_edges, directed=directed, seed=seed)
    dist = floyd_warshall(g)
    for s in range(num_vertices):
        for t in range(num_vertices):
            path = astar(g, s, t, heuristic=zero_heuristic)
            if dist[s][t] >= INF:
                assert path == []
            else:
                assert path_cost(g, path) == dist[s][t]


@pytest.mark.parametrize("num_vertices,num_edges,directed,seed", CASES)
def test_index_heuristic_finds_a_path_whenever_one_exists(
    num_vertices, num_edges, directed, seed
):
    g = generate_random_graph(num_vertices, num_edges, directed=directed, seed=seed)
    dist = floyd_warshall(g)
    for s in range(num_vertices):
        for t in range(num_vertices):
            path = astar(g, s, t)
            assert (path == []) == (dist[s][t] >= INF)
            if path:
                assert path_cost(g, path) >= dist[s][t]


@pytest.mark.parametrize("num_vertices,num_edges,directed,seed", CASES)
def test_huge_weights_dijkstra_matches_floyd_warshall(
    num_vertices, num_edges, directed, seed
):
    g = generate_random_graph(
        num_vertices, num_edges, max_weight=10**12, directed=directed, seed=seed
    )
    dist = floyd_warshall(g)
    expected = dict(nx.all_pairs_dijkstra_path_length(to_networkx(g)))
    for s in range(num_vertices):
        for t in range(num_vertices):
            path = dijkstra(g, s, t)
            if t in expected[s]:
                assert dist[s][t] == expected[s][t]
                assert path_cost(g, path) == dist[s][t]
            else:
                assert dist[s][t] == INF
                assert path == []
