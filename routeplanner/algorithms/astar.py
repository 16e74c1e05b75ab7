"""A* point-to-point search.

The frontier is ordered by ``f(v) = g(v) + h(v, dst)`` and the search stops
as soon as dst is popped. The returned path is optimal only when the
heuristic never overestimates the remaining cost. The default heuristic,
``index_distance``, gives no such guarantee; pass ``zero_heuristic`` when an
optimal answer is required.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from routeplanner.algorithms.heuristics import Heuristic, index_distance
from routeplanner.algorithms.paths import reconstruct_path
from routeplanner.algorithms.types import Path, Weight
from routeplanner.graph import AdjacencyGraph
from routeplanner.logging import get_logger

logger = get_logger(__name__)


def astar(
    graph: AdjacencyGraph,
    src: int,
    dst: int,
    heuristic: Optional[Heuristic] = None,
) -> Path:
    """Heuristic-guided path between two vertices.

    Args:
        graph: Graph with non-negative weights.
        src: Source vertex.
        dst: Destination vertex.
        heuristic: Callable ``h(v, dst)``. Defaults to ``index_distance``.

    Returns:
        Vertices from src to dst inclusive; ``[src]`` when src == dst; an
        empty list when dst is unreachable or either index is out of range.
    """
    if src not in graph or dst not in graph:
        logger.debug(f"A*: ({src}, {dst}) out of range, returning no path")
        return []

    h = heuristic if heuristic is not None else index_distance
    adjacency = graph.adjacency()

    g_score: Dict[int, Weight] = {src: 0}
    parent: Dict[int, int] = {}
    min_pq: List[Tuple[Weight, int]] = [(h(src, dst), src)]

    while min_pq:
        f_score, u = heappop(min_pq)
        if u == dst:
            break
        # Outdated entry: u was pushed again with a lower g since
        if f_score > g_score[u] + h(u, dst):
            continue

        for v, weight in adjacency[u]:
            tentative = g_score[u] + weight
            if v not in g_score or tentative < g_score[v]:
                g_score[v] = tentative
                parent[v] = u
                heappush(min_pq, (tentative + h(v, dst), v))

    return reconstruct_path(parent, src, dst)
