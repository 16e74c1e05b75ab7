"""Random graph generation for tests and benchmarks.

Randomness comes from an explicit ``random.Random`` instance (or one built
from a seed), never from the global ``random`` module state, so generation
is reproducible regardless of what else consumed random numbers.
"""

from __future__ import annotations

import random
from typing import Optional

from routeplanner.graph import AdjacencyGraph
from routeplanner.logging import get_logger

logger = get_logger(__name__)


def generate_random_graph(
    num_vertices: int,
    num_edges: int,
    max_weight: int = 20,
    directed: bool = False,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> AdjacencyGraph:
    """Build a graph with ``num_edges`` random edges.

    Each edge picks u uniformly, redraws v until it differs from u, and takes
    a weight uniformly from ``[1, max_weight]``. Repeated pairs become
    parallel edges.

    Args:
        num_vertices: Vertex count.
        num_edges: Number of add_edge calls.
        max_weight: Largest weight drawn.
        directed: If False, each edge is stored in both directions.
        seed: Seed for a fresh ``random.Random`` when rng is not given.
        rng: Random source to draw from. Takes precedence over seed.

    Returns:
        The generated graph.

    Raises:
        ValueError: On negative counts, max_weight < 1, or edges requested
            with fewer than two vertices.
    """
    if num_vertices < 0 or num_edges < 0:
        raise ValueError(
            f"Vertex and edge counts must be non-negative, got "
            f"V={num_vertices}, E={num_edges}"
        )
    if max_weight < 1:
        raise ValueError(f"max_weight must be >= 1, got {max_weight}")
    if num_edges > 0 and num_vertices < 2:
        raise ValueError(
            f"Cannot place {num_edges} edges without self-loops on "
            f"{num_vertices} vertex(es)"
        )

    if rng is None:
        rng = random.Random(seed)

    graph = AdjacencyGraph(num_vertices)
    for _ in range(num_edges):
        u = rng.randrange(num_vertices)
        v = rng.randrange(num_vertices)
        while v == u:
            v = rng.randrange(num_vertices)
        weight = rng.randint(1, max_weight)
        graph.add_edge(u, v, weight, directed)

    logger.debug(
        f"Generated random graph: V={num_vertices}, E={num_edges}, "
        f"directed={directed}, seed={seed}"
    )
    return graph
