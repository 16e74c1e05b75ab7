"""NetworkX graph conversion utilities.

Converts between NetworkX graphs and ``AdjacencyGraph``. NetworkX node names
can be any hashable; they are mapped to contiguous integer indices in node
iteration order and the mapping is returned for interpreting results.

Example:
    >>> import networkx as nx
    >>> from routeplanner.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=4)
    >>> G.add_edge("B", "C", weight=1)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["C"]
    2
    >>>
    >>> G_out = to_networkx(graph, directed=False)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Tuple, Union

import networkx as nx

from routeplanner.graph import AdjacencyGraph

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, path: List[int]) -> List[Hashable]:
        """Translate a path of indices back to node names."""
        return [self.to_name[i] for i in path]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Tuple[AdjacencyGraph, NodeMap]:
    """Convert a NetworkX graph to an AdjacencyGraph.

    Undirected NetworkX graphs produce undirected edges (two entries each);
    directed ones produce one entry per edge. Multigraph parallel edges are
    kept.

    Args:
        G: Any NetworkX graph.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges missing ``weight_attr``.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        ValueError: If a weight is not integral.
    """
    node_map = NodeMap.from_names(list(G.nodes()))
    graph = AdjacencyGraph(len(node_map))
    directed = G.is_directed()

    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        if isinstance(weight, bool) or int(weight) != weight:
            raise ValueError(
                f"Edge ({u!r}, {v!r}) has non-integer {weight_attr} {weight!r}"
            )
        graph.add_edge(
            node_map.to_index[u], node_map.to_index[v], int(weight), directed
        )

    return graph, node_map


def to_networkx(
    graph: AdjacencyGraph,
    *,
    directed: bool = True,
    weight_attr: str = "weight",
) -> Union[nx.MultiDiGraph, nx.MultiGraph]:
    """Convert an AdjacencyGraph to a NetworkX multigraph.

    Args:
        graph: Graph to convert.
        directed: If True, return a MultiDiGraph with one edge per stored
            entry. If False, return a MultiGraph with each undirected edge
            once (see ``AdjacencyGraph.undirected_edges``).
        weight_attr: Attribute name for weights.

    Returns:
        NetworkX multigraph with nodes ``0 .. V-1``.
    """
    if directed:
        nx_graph: Union[nx.MultiDiGraph, nx.MultiGraph] = nx.MultiDiGraph()
        edges = graph.edges()
    else:
        nx_graph = nx.MultiGraph()
        edges = graph.undirected_edges()

    nx_graph.add_nodes_from(range(graph.num_vertices))
    for u, v, w in edges:
        nx_graph.add_edge(u, v, **{weight_attr: w})
    return nx_graph
