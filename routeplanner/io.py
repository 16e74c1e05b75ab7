"""Reading and writing graphs as text.

Three formats are understood:

- TXT: a header ``V E`` followed by whitespace-separated ``u v w`` triples.
- CSV: one ``u,v,w`` per line (``;`` also accepted); the vertex count is
  ``max(u, v) + 1`` over all lines.
- DOT: the subset produced by ``routeplanner.export.to_dot``.

Loaders build a fresh ``AdjacencyGraph`` and never touch an existing one, so
a failed load leaves the caller's graph as it was.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from routeplanner.graph import AdjacencyGraph, EdgeTuple
from routeplanner.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

FORMATS = ("txt", "csv", "dot")

# First character of a CSV edge line; anything else is a header or comment
_CSV_LEAD_CHARS = frozenset("0123456789-")

_DOT_HEADER_RE = re.compile(r"^\s*(strict\s+)?(digraph|graph)\b", re.IGNORECASE)
_DOT_NODE_RE = re.compile(r"^\s*(-?\d+)\s*;?\s*$")
_DOT_EDGE_RE = re.compile(
    r"^\s*(-?\d+)\s*(--|->)\s*(-?\d+)\s*(?:\[(?P<attrs>[^\]]*)\])?\s*;?\s*$"
)
_DOT_LABEL_RE = re.compile(r"""\blabel\s*=\s*"?\s*(-?\d+)\s*"?""")


def _to_int(token: str, context: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Expected an integer in {context}, got '{token}'") from None


#
# TXT
#
def parse_txt(lines: Iterable[str], directed: bool = False) -> AdjacencyGraph:
    """
    Build a graph from the ``V E`` + ``u v w`` format.

    Tokens are read as one whitespace-separated stream, so line breaks are
    not significant. Triples are read until the input ends; ``E`` is only
    compared against the number read. A trailing incomplete triple is
    ignored. Edges referencing vertices outside ``[0, V)`` are skipped by
    ``add_edge``.

    Args:
        lines: Input lines.
        directed: Whether each triple is a directed edge.

    Returns:
        The parsed graph.

    Raises:
        ValueError: If the header is missing or a token is not an integer.
    """
    tokens: List[str] = []
    for line in lines:
        tokens.extend(line.split())

    if len(tokens) < 2:
        raise ValueError("TXT graph must start with a 'V E' header")

    num_vertices = _to_int(tokens[0], "TXT header")
    declared_edges = _to_int(tokens[1], "TXT header")
    graph = AdjacencyGraph(num_vertices)

    body = tokens[2:]
    usable = len(body) - len(body) % 3
    if usable != len(body):
        logger.warning(f"Ignoring {len(body) - usable} trailing token(s) in TXT input")

    read_edges = 0
    for i in range(0, usable, 3):
        u = _to_int(body[i], f"TXT edge {read_edges + 1}")
        v = _to_int(body[i + 1], f"TXT edge {read_edges + 1}")
        w = _to_int(body[i + 2], f"TXT edge {read_edges + 1}")
        graph.add_edge(u, v, w, directed)
        read_edges += 1

    if read_edges != declared_edges:
        logger.warning(
            f"TXT header declares {declared_edges} edge(s) but {read_edges} were read"
        )
    logger.info(f"Parsed TXT graph: V={num_vertices}, edges={read_edges}")
    return graph


def load_txt(path: PathLike, directed: bool = False) -> AdjacencyGraph:
    """
    Load a TXT graph file.

    Raises:
        OSError: If the file cannot be opened (FileNotFoundError if missing).
        ValueError: If the content is malformed.
    """
    text = Path(path).read_text()
    logger.debug(f"Read {len(text)} characters from {path}")
    return parse_txt(text.splitlines(), directed)


#
# CSV
#
def _iter_csv_triples(lines: Iterable[str]) -> Iterator[Tuple[int, int, int]]:
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        # Header and comment lines do not start with a number
        if line[0] not in _CSV_LEAD_CHARS:
            continue

        fields = line.replace(";", ",").split(",")
        if len(fields) < 3:
            continue

        context = f"CSV line {lineno}"
        yield (
            _to_int(fields[0], context),
            _to_int(fields[1], context),
            _to_int(fields[2], context),
        )


def parse_csv(lines: Iterable[str], directed: bool = False) -> AdjacencyGraph:
    """
    Build a graph from ``u,v,w`` lines.

    Blank lines, lines not starting with an ASCII digit or ``-``, and lines with
    fewer than three fields are skipped. Fields past the third are ignored.
    The vertex count is inferred as ``max(u, v) + 1``.

    Raises:
        ValueError: If one of the first three fields is not an integer.
    """
    edges = list(_iter_csv_triples(lines))
    max_vertex = -1
    for u, v, _ in edges:
        max_vertex = max(max_vertex, u, v)

    graph = AdjacencyGraph(max_vertex + 1)
    for u, v, w in edges:
        graph.add_edge(u, v, w, directed)

    logger.info(f"Parsed CSV graph: V={max_vertex + 1}, edges={len(edges)}")
    return graph


def load_csv(path: PathLike, directed: bool = False) -> AdjacencyGraph:
    """
    Load a CSV graph file.

    Raises:
        OSError: If the file cannot be opened (FileNotFoundError if missing).
        ValueError: If the content is malformed.
    """
    text = Path(path).read_text()
    return parse_csv(text.splitlines(), directed)


#
# DOT
#
def parse_dot(text: str) -> Tuple[AdjacencyGraph, bool]:
    """
    Read a graph written by ``to_dot``.

    Understands node statements (``3;``) and edge statements
    (``0 -- 1 [label="4"]``) one per line. Attributes other than ``label``
    are ignored. The vertex count is the largest index seen plus one.

    Undirected edges are stored as two entries, except self-loops: ``to_dot``
    already prints both stored entries of an undirected self-loop, so each
    printed loop becomes a single entry.

    Returns:
        A tuple of (graph, directed).

    Raises:
        ValueError: If the header is missing, an edge has no integer label,
            or a line is not understood.
    """
    lines = text.splitlines()
    directed: Optional[bool] = None
    nodes: List[int] = []
    edges: List[EdgeTuple] = []

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("//") or line.startswith("#"):
            continue
        if directed is None:
            header = _DOT_HEADER_RE.match(line)
            if header is None:
                raise ValueError(f"DOT line {lineno}: expected 'graph' or 'digraph'")
            directed = header.group(2).lower() == "digraph"
            continue
        if line == "}":
            break

        edge = _DOT_EDGE_RE.match(line)
        if edge is not None:
            connector = edge.group(2)
            if (connector == "->") != directed:
                raise ValueError(
                    f"DOT line {lineno}: '{connector}' does not match graph type"
                )
            label = _DOT_LABEL_RE.search(edge.group("attrs") or "")
            if label is None:
                raise ValueError(f"DOT line {lineno}: edge without integer label")
            edges.append((int(edge.group(1)), int(edge.group(3)), int(label.group(1))))
            continue

        node = _DOT_NODE_RE.match(line)
        if node is not None:
            nodes.append(int(node.group(1)))
            continue

        raise ValueError(f"DOT line {lineno}: cannot parse '{line}'")

    if directed is None:
        raise ValueError("DOT input is empty")

    indices = nodes + [u for u, _, _ in edges] + [v for _, v, _ in edges]
    if any(i < 0 for i in indices):
        raise ValueError("DOT vertex ids must be non-negative")
    graph = AdjacencyGraph(max(indices) + 1 if indices else 0)
    for u, v, w in edges:
        graph.add_edge(u, v, w, directed or u == v)

    logger.info(
        f"Parsed DOT {'digraph' if directed else 'graph'}: "
        f"V={graph.num_vertices}, edges={len(edges)}"
    )
    return graph, directed


def load_dot(path: PathLike) -> Tuple[AdjacencyGraph, bool]:
    """Load a DOT file written by ``write_dot``."""
    return parse_dot(Path(path).read_text())


#
# Format dispatch
#
def detect_format(path: PathLike) -> str:
    """Guess the format from the file suffix; anything unknown is TXT."""
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return "csv"
    if suffix in (".dot", ".gv"):
        return "dot"
    return "txt"


def load_graph(
    path: PathLike, fmt: Optional[str] = None, directed: bool = False
) -> AdjacencyGraph:
    """
    Load a graph file in any supported format.

    Args:
        path: File to read.
        fmt: One of "txt", "csv", "dot". Detected from the suffix when None.
        directed: Edge direction for TXT and CSV. DOT files carry their own.

    Raises:
        OSError: If the file cannot be opened.
        ValueError: If the format is unknown or the content is malformed.
    """
    fmt = fmt or detect_format(path)
    logger.info(f"Loading {fmt.upper()} graph from: {path}")
    if fmt == "txt":
        return load_txt(path, directed)
    if fmt == "csv":
        return load_csv(path, directed)
    if fmt == "dot":
        graph, _ = load_dot(path)
        return graph
    raise ValueError(f"Unknown graph format '{fmt}'. Expected one of {FORMATS}")


#
# Writers
#
def _edge_rows(graph: AdjacencyGraph, directed: bool) -> List[EdgeTuple]:
    return list(graph.edges() if directed else graph.undirected_edges())


def graph_to_txt(graph: AdjacencyGraph, directed: bool = False) -> List[str]:
    """
    Convert a graph to TXT lines: ``V E`` header then ``u v w`` rows.

    With ``directed=False`` each undirected edge is written once, so
    ``parse_txt(graph_to_txt(g), directed=False)`` rebuilds the same entries.
    """
    rows = _edge_rows(graph, directed)
    lines = [f"{graph.num_vertices} {len(rows)}"]
    lines.extend(f"{u} {v} {w}" for u, v, w in rows)
    return lines


def graph_to_csv(graph: AdjacencyGraph, directed: bool = False) -> List[str]:
    """
    Convert a graph to ``u,v,w`` lines.

    CSV has no header, so trailing vertices without edges are not preserved.
    """
    return [f"{u},{v},{w}" for u, v, w in _edge_rows(graph, directed)]


def save_graph(
    graph: AdjacencyGraph,
    path: PathLike,
    fmt: Optional[str] = None,
    directed: bool = False,
) -> None:
    """
    Write a graph as a TXT or CSV edge list.

    Raises:
        OSError: If the file cannot be written.
        ValueError: If the format is not txt or csv.
    """
    fmt = fmt or detect_format(path)
    if fmt == "txt":
        lines = graph_to_txt(graph, directed)
    elif fmt == "csv":
        lines = graph_to_csv(graph, directed)
    else:
        raise ValueError(f"Cannot save edge list as '{fmt}'. Use 'txt' or 'csv'")

    Path(path).write_text("\n".join(lines) + "\n")
    logger.info(f"Wrote {fmt.upper()} graph to: {path}")
