"""Floyd-Warshall all-pairs shortest distances.

Cubic in the vertex count. Only distances are produced; use ``dijkstra``
to recover an actual path between a pair.
"""

from __future__ import annotations

from typing import List, Union

from routeplanner.algorithms.types import INF, DistanceMatrix, Weight
from routeplanner.graph import AdjacencyGraph
from routeplanner.logging import get_logger

logger = get_logger(__name__)


def floyd_warshall(graph: AdjacencyGraph) -> DistanceMatrix:
    """All-pairs shortest distances.

    Args:
        graph: Graph with non-negative weights.

    Returns:
        V x V matrix where ``dist[i][j]`` is the shortest distance from i to
        j, 0 on the diagonal, and ``INF`` for unreachable pairs. Parallel
        edges contribute their minimum weight.
    """
    n = graph.num_vertices
    dist: DistanceMatrix = [[INF] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0

    for u, v, w in graph.edges():
        if w < dist[u][v]:
            dist[u][v] = w

    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            row_i = dist[i]
            d_ik = row_i[k]
            if d_ik >= INF:
                continue
            for j in range(n):
                d_kj = row_k[j]
                if d_kj < INF and d_ik + d_kj < row_i[j]:
                    row_i[j] = d_ik + d_kj

    logger.debug(f"Floyd-Warshall completed for {n} vertices")
    return dist


def is_reachable(distance: Union[Weight, float]) -> bool:
    """True when a matrix cell holds a real distance rather than INF."""
    return distance < INF


def format_matrix(matrix: DistanceMatrix) -> str:
    """Render the matrix one row per line, INF cells shown as ``INF``."""
    lines: List[str] = []
    for row in matrix:
        lines.append(" ".join("INF" if d == INF else str(d) for d in row))
    return "\n".join(lines)
