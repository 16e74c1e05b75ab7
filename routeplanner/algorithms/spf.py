"""Dijkstra shortest-path-first (SPF) search.

Notes:
    The frontier is a binary heap of ``(distance, vertex)`` with lazy
    deletion: improved vertices are pushed again and outdated heap entries
    are skipped when popped. Ties are resolved by the heap's tuple order,
    i.e. the smaller vertex id among equal distances pops first.

    Weights must be non-negative; the result is unspecified otherwise.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from routeplanner.algorithms.paths import reconstruct_path
from routeplanner.algorithms.types import Path, Weight
from routeplanner.graph import AdjacencyGraph
from routeplanner.logging import get_logger

logger = get_logger(__name__)


def _dijkstra(
    graph: AdjacencyGraph,
    src: int,
    dst: Optional[int] = None,
) -> Tuple[Dict[int, Weight], Dict[int, int]]:
    """Run Dijkstra from src, stopping once dst is popped if given.

    Returns:
        A tuple of (dist, parent) over the vertices reached so far.
    """
    adjacency = graph.adjacency()

    dist: Dict[int, Weight] = {src: 0}
    parent: Dict[int, int] = {}
    min_pq: List[Tuple[Weight, int]] = [(0, src)]

    while min_pq:
        current_dist, u = heappop(min_pq)
        if current_dist > dist[u]:
            continue
        if u == dst:
            break

        for v, weight in adjacency[u]:
            new_dist = current_dist + weight
            if v not in dist or new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heappush(min_pq, (new_dist, v))

    return dist, parent


def dijkstra(graph: AdjacencyGraph, src: int, dst: int) -> Path:
    """Shortest path between two vertices.

    Args:
        graph: Graph with non-negative weights.
        src: Source vertex.
        dst: Destination vertex.

    Returns:
        Vertices from src to dst inclusive; ``[src]`` when src == dst; an
        empty list when dst is unreachable or either index is out of range.
    """
    if src not in graph or dst not in graph:
        logger.debug(f"Dijkstra: ({src}, {dst}) out of range, returning no path")
        return []

    _, parent = _dijkstra(graph, src, dst)
    return reconstruct_path(parent, src, dst)


def dijkstra_costs(
    graph: AdjacencyGraph, src: int
) -> Tuple[Dict[int, Weight], Dict[int, int]]:
    """Single-source Dijkstra over the whole graph.

    Args:
        graph: Graph with non-negative weights.
        src: Source vertex.

    Returns:
        A tuple of (dist, parent):
          - dist: Maps each reachable vertex to its minimal distance from src.
          - parent: Maps each reachable vertex other than src to its
            predecessor on one shortest path.

    Raises:
        KeyError: If src is not a vertex of the graph.
    """
    if src not in graph:
        raise KeyError(f"Source vertex '{src}' is not in the graph.")
    return _dijkstra(graph, src)
