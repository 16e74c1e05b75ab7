"""Shortest-path algorithms over ``AdjacencyGraph``.

All searches take the graph read-only and keep no reference to it after
returning.
"""

from routeplanner.algorithms.astar import astar
from routeplanner.algorithms.floyd_warshall import (
    floyd_warshall,
    format_matrix,
    is_reachable,
)
from routeplanner.algorithms.heuristics import (
    HEURISTICS,
    get_heuristic,
    index_distance,
    zero_heuristic,
)
from routeplanner.algorithms.paths import path_cost, path_edges, reconstruct_path
from routeplanner.algorithms.spf import dijkstra, dijkstra_costs
from routeplanner.algorithms.types import INF, DistanceMatrix, Path

__all__ = [
    "INF",
    "DistanceMatrix",
    "Path",
    "astar",
    "dijkstra",
    "dijkstra_costs",
    "floyd_warshall",
    "format_matrix",
    "is_reachable",
    "HEURISTICS",
    "get_heuristic",
    "index_distance",
    "zero_heuristic",
    "path_cost",
    "path_edges",
    "reconstruct_path",
]
