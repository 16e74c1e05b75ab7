"""Graphviz DOT export with optional path highlighting.

Render the output with ``dot -Tpng graph.dot -o graph.png``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple, Union

from routeplanner.algorithms.paths import path_edges
from routeplanner.graph import AdjacencyGraph
from routeplanner.logging import get_logger

logger = get_logger(__name__)

HIGHLIGHT_ATTRS = "color=red, penwidth=2.2"


def _highlighted_pairs(
    path: Optional[Sequence[int]], directed: bool
) -> Set[Tuple[int, int]]:
    pairs: Set[Tuple[int, int]] = set()
    if not path:
        return pairs
    for a, b in path_edges(path):
        pairs.add((a, b))
        if not directed:
            pairs.add((b, a))
    return pairs


def to_dot(
    graph: AdjacencyGraph,
    directed: bool = False,
    path: Optional[Sequence[int]] = None,
) -> str:
    """Serialize a graph to DOT text.

    Every vertex is declared on its own line, followed by its edges. For an
    undirected graph, entries with u > v are skipped so each edge appears
    once. Edges along ``path`` get ``HIGHLIGHT_ATTRS``.

    Args:
        graph: Graph to export.
        directed: Emit a ``digraph`` with ``->`` instead of ``graph`` with ``--``.
        path: Optional vertex sequence to highlight.

    Returns:
        DOT document ending with a newline.
    """
    on_path = _highlighted_pairs(path, directed)
    connector = "->" if directed else "--"

    lines: List[str] = [f"{'digraph' if directed else 'graph'} G {{"]
    for u in range(graph.num_vertices):
        lines.append(f"  {u};")
        for v, w in graph.neighbors(u):
            if not directed and u > v:
                continue
            if (u, v) in on_path:
                lines.append(f'  {u} {connector} {v} [label="{w}", {HIGHLIGHT_ATTRS}];')
            else:
                lines.append(f'  {u} {connector} {v} [label="{w}"];')
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(
    graph: AdjacencyGraph,
    filename: Union[str, Path],
    directed: bool = False,
    path: Optional[Sequence[int]] = None,
) -> None:
    """Write ``to_dot`` output to a file.

    Raises:
        OSError: If the file cannot be written.
    """
    Path(filename).write_text(to_dot(graph, directed, path))
    logger.info(
        f"Exported DOT to: {filename}"
        + (f" (highlighted path of {len(path)} vertices)" if path else "")
    )
