"""Path reconstruction and path cost helpers."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from routeplanner.algorithms.types import Path, Weight
from routeplanner.graph import AdjacencyGraph


def reconstruct_path(parent: Dict[int, int], src: int, dst: int) -> Path:
    """Walk parent pointers from dst back to src.

    Args:
        parent: Maps each reached vertex (other than src) to its predecessor.
        src: Source vertex.
        dst: Destination vertex.

    Returns:
        Vertices from src to dst inclusive, ``[src]`` when src == dst, or an
        empty list when dst was never reached.
    """
    if src == dst:
        return [src]
    if dst not in parent:
        return []

    path: List[int] = [dst]
    at = dst
    while at != src:
        at = parent[at]
        path.append(at)
    path.reverse()
    return path


def path_edges(path: Sequence[int]) -> List[Tuple[int, int]]:
    """Return consecutive (a, b) pairs along a path."""
    return [(path[i - 1], path[i]) for i in range(1, len(path))]


def path_cost(graph: AdjacencyGraph, path: Sequence[int]) -> Optional[Weight]:
    """Sum the cheapest stored entry between each pair of consecutive vertices.

    Args:
        graph: Graph the path was computed on.
        path: Vertex sequence.

    Returns:
        Total weight, 0 for a single-vertex path, or None for the empty path.

    Raises:
        ValueError: If two consecutive vertices are not joined by an entry.
    """
    if not path:
        return None

    total = 0
    for a, b in path_edges(path):
        weights = [w for v, w in graph.neighbors(a) if v == b]
        if not weights:
            raise ValueError(f"No edge {a} -> {b} in graph")
        total += min(weights)
    return total
