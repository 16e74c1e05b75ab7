"""Adjacency-list graph store with integer vertex ids.

Vertices are the integers ``0 .. V-1``. Each vertex owns an ordered list of
``(neighbor, weight)`` entries. An undirected edge is stored as two entries,
one on each endpoint, and parallel edges are kept as separate entries.

Mutations that reference a vertex outside ``[0, V)`` are ignored rather than
raised, so callers that need strict reporting must validate indices first.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Iterator, List, Tuple

from routeplanner.logging import get_logger

VertexID = int
Weight = int
AdjEntry = Tuple[VertexID, Weight]
EdgeTuple = Tuple[VertexID, VertexID, Weight]

logger = get_logger(__name__)


class AdjacencyGraph:
    """
    Mutable weighted graph stored as adjacency lists.

    The store exclusively owns its adjacency data. Readers get tuples
    (``neighbors()``, ``adjacency()``) and never a reference to the internal
    lists, so a search cannot observe or cause a mutation mid-call.

    Attributes:
        _num_vertices: Current vertex count V.
        _adj: One list of [neighbor, weight] entries per vertex. Entries are
            lists so weights can be rewritten in place.
    """

    def __init__(self, num_vertices: int = 0) -> None:
        if num_vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {num_vertices}")
        self._num_vertices: int = num_vertices
        self._adj: List[List[List[int]]] = [[] for _ in range(num_vertices)]

    def __contains__(self, vertex: object) -> bool:
        """
        Enables expressions like ``3 in graph``.
        """
        return (
            isinstance(vertex, int)
            and not isinstance(vertex, bool)
            and 0 <= vertex < self._num_vertices
        )

    def __len__(self) -> int:
        """Return the number of vertices."""
        return self._num_vertices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyGraph):
            return NotImplemented
        return self._num_vertices == other._num_vertices and self._adj == other._adj

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(num_vertices={self._num_vertices}, "
            f"entries={self.num_entries()})"
        )

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    def has_vertex(self, vertex: VertexID) -> bool:
        return vertex in self

    def copy(self) -> AdjacencyGraph:
        """Return an independent copy of this graph."""
        clone = AdjacencyGraph()
        clone._num_vertices = self._num_vertices
        clone._adj = deepcopy(self._adj)
        return clone

    #
    # Mutation
    #
    def resize(self, num_vertices: int) -> None:
        """
        Reset the vertex count and drop every edge.

        Args:
            num_vertices: New vertex count.

        Raises:
            ValueError: If num_vertices is negative.
        """
        if num_vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {num_vertices}")
        self._num_vertices = num_vertices
        self._adj = [[] for _ in range(num_vertices)]

    def add_edge(
        self, u: VertexID, v: VertexID, weight: Weight, directed: bool = False
    ) -> None:
        """
        Append an edge u -> v, plus v -> u when undirected.

        Duplicate edges are stored as parallel entries. Out-of-range endpoints
        make the call a no-op.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight.
            directed: If False, also append the reverse entry.
        """
        if u not in self or v not in self:
            logger.debug(f"Ignoring edge ({u}, {v}): vertex out of range")
            return
        self._adj[u].append([v, weight])
        if not directed:
            self._adj[v].append([u, weight])

    def update_weight(self, u: VertexID, v: VertexID, new_weight: Weight) -> int:
        """
        Set the weight of every entry between u and v, in both directions.

        This is the undirected-pair update: all parallel entries u -> v and
        all entries v -> u take ``new_weight``. Use ``update_arc_weight`` to
        change one direction only.

        Args:
            u: First endpoint.
            v: Second endpoint.
            new_weight: Weight to store.

        Returns:
            Number of entries changed (0 when an index is out of range).
        """
        if u not in self or v not in self:
            logger.debug(f"Ignoring weight update ({u}, {v}): vertex out of range")
            return 0
        changed = self._set_weight(u, v, new_weight)
        if u != v:
            changed += self._set_weight(v, u, new_weight)
        return changed

    def update_arc_weight(self, u: VertexID, v: VertexID, new_weight: Weight) -> int:
        """
        Set the weight of every entry u -> v, leaving v -> u untouched.

        Returns:
            Number of entries changed (0 when an index is out of range).
        """
        if u not in self or v not in self:
            logger.debug(f"Ignoring arc update ({u}, {v}): vertex out of range")
            return 0
        return self._set_weight(u, v, new_weight)

    def _set_weight(self, u: VertexID, v: VertexID, new_weight: Weight) -> int:
        changed = 0
        for entry in self._adj[u]:
            if entry[0] == v:
                entry[1] = new_weight
                changed += 1
        return changed

    #
    # Read access
    #
    def neighbors(self, u: VertexID) -> Tuple[AdjEntry, ...]:
        """
        Return the adjacency entries of u as (neighbor, weight) tuples.

        Raises:
            IndexError: If u is out of range.
        """
        if u not in self:
            raise IndexError(f"Vertex {u} is out of range [0, {self._num_vertices})")
        return tuple((v, w) for v, w in self._adj[u])

    def adjacency(self) -> Tuple[Tuple[AdjEntry, ...], ...]:
        """Snapshot of the whole adjacency, indexed by vertex."""
        return tuple(tuple((v, w) for v, w in entries) for entries in self._adj)

    def edges(self) -> Iterator[EdgeTuple]:
        """Yield every stored entry as (u, v, weight)."""
        for u, entries in enumerate(self._adj):
            for v, w in entries:
                yield u, v, w

    def undirected_edges(self) -> Iterator[EdgeTuple]:
        """
        Yield each undirected edge once, as (u, v, weight) with u <= v.

        Assumes the graph was built with undirected edges only. Entries with
        u > v are the mirrors of u < v entries and are skipped. An undirected
        self-loop is stored as two identical entries, so every second one is
        yielded.
        """
        for u, entries in enumerate(self._adj):
            loops_seen = 0
            for v, w in entries:
                if v == u:
                    loops_seen += 1
                    if loops_seen % 2 == 0:
                        continue
                elif u > v:
                    continue
                yield u, v, w

    def num_entries(self) -> int:
        """Number of stored adjacency entries (undirected edges count twice)."""
        return sum(len(entries) for entries in self._adj)

    def format_adjacency(self) -> str:
        """Render one line per vertex: ``i -> (v, w) (v, w) ``."""
        lines = []
        for u, entries in enumerate(self._adj):
            items = "".join(f"({v}, {w}) " for v, w in entries)
            lines.append(f"{u} -> {items}")
        return "\n".join(lines)
