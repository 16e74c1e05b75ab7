"""A* heuristics.

A heuristic takes ``(vertex, destination)`` and returns an estimate of the
remaining cost. Vertex ids carry no metric meaning, so ``index_distance`` is
not admissible in general and A* driven by it may return a costlier path
than Dijkstra. ``zero_heuristic`` is admissible and makes A* expand vertices
in Dijkstra order.
"""

from __future__ import annotations

from typing import Callable, Dict

Heuristic = Callable[[int, int], int]


def index_distance(u: int, v: int) -> int:
    """Absolute difference of vertex ids."""
    return abs(u - v)


def zero_heuristic(u: int, v: int) -> int:
    return 0


HEURISTICS: Dict[str, Heuristic] = {
    "index": index_distance,
    "zero": zero_heuristic,
}


def get_heuristic(name: str) -> Heuristic:
    """Look up a heuristic by name.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic '{name}'. Available: {', '.join(sorted(HEURISTICS))}"
        ) from None
