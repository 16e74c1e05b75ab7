"""routeplanner: shortest paths on weighted graphs.

A mutable adjacency-list graph store plus three searches over it: Dijkstra
and A* between two vertices, and Floyd-Warshall for all pairs. Graphs come
from TXT or CSV edge lists, from a seeded random generator, or from
NetworkX, and can be exported to Graphviz DOT with a highlighted path.

Example:
    from routeplanner import AdjacencyGraph, dijkstra, floyd_warshall

    g = AdjacencyGraph(4)
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 1)
    g.add_edge(2, 1, 2)
    g.add_edge(1, 3, 1)
    g.add_edge(2, 3, 5)

    dijkstra(g, 0, 3)          # [0, 2, 1, 3]
    floyd_warshall(g)[0][3]    # 4

    # Edit then rerun
    g.update_weight(2, 1, 10)
    dijkstra(g, 0, 3)          # [0, 1, 3]
"""

from __future__ import annotations

from routeplanner import cli, logging
from routeplanner._version import __version__
from routeplanner.algorithms import (
    INF,
    astar,
    dijkstra,
    dijkstra_costs,
    floyd_warshall,
    index_distance,
    path_cost,
    zero_heuristic,
)
from routeplanner.benchmark import BenchmarkReport, BenchmarkResult, benchmark
from routeplanner.config import DEFAULT_CONFIG, PlannerConfig, load_config
from routeplanner.export import to_dot, write_dot
from routeplanner.generator import generate_random_graph
from routeplanner.graph import AdjacencyGraph
from routeplanner.io import (
    graph_to_csv,
    graph_to_txt,
    load_csv,
    load_dot,
    load_graph,
    load_txt,
    parse_csv,
    parse_dot,
    parse_txt,
    save_graph,
)
from routeplanner.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Graph store
    "AdjacencyGraph",
    "generate_random_graph",
    # Algorithms
    "INF",
    "dijkstra",
    "dijkstra_costs",
    "astar",
    "floyd_warshall",
    "index_distance",
    "zero_heuristic",
    "path_cost",
    # I/O
    "parse_txt",
    "parse_csv",
    "parse_dot",
    "load_txt",
    "load_csv",
    "load_dot",
    "load_graph",
    "graph_to_txt",
    "graph_to_csv",
    "save_graph",
    "to_dot",
    "write_dot",
    # Benchmark
    "benchmark",
    "BenchmarkReport",
    "BenchmarkResult",
    # Configuration
    "PlannerConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
