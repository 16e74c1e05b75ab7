"""Command-line interface for routeplanner."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from routeplanner.algorithms import (
    astar,
    dijkstra,
    floyd_warshall,
    format_matrix,
    get_heuristic,
    path_cost,
)
from routeplanner.algorithms.heuristics import HEURISTICS
from routeplanner.algorithms.types import Path as VertexPath
from routeplanner.benchmark import benchmark
from routeplanner.config import DEFAULT_CONFIG, PlannerConfig, load_config
from routeplanner.export import write_dot
from routeplanner.generator import generate_random_graph
from routeplanner.graph import AdjacencyGraph
from routeplanner.io import load_csv, load_dot, load_txt, save_graph
from routeplanner.logging import get_logger, set_global_log_level

logger = get_logger(__name__)

ALGORITHM_CHOICES = ("dijkstra", "astar")

_ALGORITHM_LABELS = {"dijkstra": "Dijkstra", "astar": "A*"}


class CommandError(Exception):
    """A user-facing error that ends the current command."""


def _format_path(path: Sequence[int]) -> str:
    """Return ``a -> b -> c`` or ``(no path)`` for the empty path."""
    if not path:
        return "(no path)"
    return " -> ".join(str(v) for v in path)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _find_path(
    graph: AdjacencyGraph,
    src: int,
    dst: int,
    algorithm: str,
    heuristic_name: str,
) -> VertexPath:
    if algorithm == "astar":
        return astar(graph, src, dst, get_heuristic(heuristic_name))
    return dijkstra(graph, src, dst)


def _print_path_result(
    graph: AdjacencyGraph, path: VertexPath, algorithm: str
) -> None:
    print(f"{_ALGORITHM_LABELS[algorithm]} path: {_format_path(path)}")
    if path:
        print(f"Cost: {path_cost(graph, path)}")


def _print_matrix(graph: AdjacencyGraph) -> None:
    matrix = floyd_warshall(graph)
    print("All-Pairs distances (INF = unreachable):")
    if matrix:
        print(format_matrix(matrix))


#
# Graph source resolution for the one-shot commands
#
def _build_graph(
    args: argparse.Namespace, config: PlannerConfig
) -> Tuple[AdjacencyGraph, bool]:
    """Create the graph named by the source options and apply edits.

    Returns:
        A tuple of (graph, directed).
    """
    directed = config.directed if args.directed is None else args.directed

    if args.txt is not None:
        graph = load_txt(args.txt, directed)
    elif args.csv is not None:
        graph = load_csv(args.csv, directed)
    elif args.dot is not None:
        graph, directed = load_dot(args.dot)
    elif args.random is not None:
        num_vertices, num_edges = args.random
        max_weight = (
            config.max_weight if args.max_weight is None else args.max_weight
        )
        graph = generate_random_graph(
            num_vertices, num_edges, max_weight, directed, seed=args.seed
        )
        logger.info(
            f"Generated random graph: V={num_vertices}, E={num_edges}, seed={args.seed}"
        )
    else:
        raise CommandError(
            "No graph given. Use --txt, --csv, --dot or --random V E."
        )

    for u, v, w in args.update or []:
        changed = graph.update_weight(u, v, w)
        logger.info(f"Updated pair ({u}, {v}) to {w}: {changed} entries changed")
    for u, v, w in args.update_arc or []:
        changed = graph.update_arc_weight(u, v, w)
        logger.info(f"Updated arc {u} -> {v} to {w}: {changed} entries changed")

    return graph, directed


def _cmd_print(args: argparse.Namespace, config: PlannerConfig) -> None:
    graph, _ = _build_graph(args, config)
    print(graph.format_adjacency())


def _cmd_path(args: argparse.Namespace, config: PlannerConfig) -> None:
    graph, _ = _build_graph(args, config)
    heuristic = args.heuristic or config.heuristic
    path = _find_path(graph, args.src, args.dst, args.algorithm, heuristic)
    _print_path_result(graph, path, args.algorithm)


def _cmd_apsp(args: argparse.Namespace, config: PlannerConfig) -> None:
    graph, _ = _build_graph(args, config)
    _print_matrix(graph)


def _cmd_benchmark(args: argparse.Namespace, config: PlannerConfig) -> None:
    graph, _ = _build_graph(args, config)
    runs = args.runs if args.runs is not None else config.benchmark_runs
    report = benchmark(graph, runs, heuristic=get_heuristic(config.heuristic))
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.format())


def _cmd_export(args: argparse.Namespace, config: PlannerConfig) -> None:
    graph, directed = _build_graph(args, config)
    path: Optional[VertexPath] = None
    if (args.src is None) != (args.dst is None):
        raise CommandError("--src and --dst must be given together")
    if args.src is not None:
        heuristic = args.heuristic or config.heuristic
        path = _find_path(graph, args.src, args.dst, args.algorithm, heuristic)
        print(f"Path: {_format_path(path)}")
    write_dot(graph, args.output_file, directed, path)
    print(f"DOT exported. (Use: dot -Tpng {args.output_file} -o graph.png)")


def _cmd_save(args: argparse.Namespace, config: PlannerConfig) -> None:
    graph, directed = _build_graph(args, config)
    save_graph(graph, args.output_file, args.format, directed)
    print(f"Graph saved to: {args.output_file}")


#
# Interactive menu
#
MENU = """
==== Dynamic Route Planner ====
1. Load Graph from TXT (V E + edges)
2. Load Graph from CSV (u,v,w)
3. Generate Random Graph
4. Print Graph
5. Run Dijkstra
6. Run Floyd-Warshall
7. Run A*
8. Update Edge Weight
9. Benchmark Algorithms
10. Export Graph to DOT
11. Export Shortest Path to DOT
12. Exit"""

_NEEDS_GRAPH = {4, 5, 6, 7, 8, 9, 10, 11}


@dataclass
class Session:
    """State of one interactive session."""

    config: PlannerConfig
    graph: Optional[AdjacencyGraph] = None
    directed: bool = False


class _Prompter:
    """Line-oriented prompts over an input stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def line(self, prompt: str) -> str:
        print(prompt, end="")
        raw = self._stream.readline()
        if not raw:
            raise EOFError
        return raw.strip()

    def ints(self, prompt: str, count: int) -> List[int]:
        tokens = self.line(prompt).split()
        if len(tokens) != count:
            raise CommandError(f"Expected {count} integer(s), got {len(tokens)}")
        try:
            return [int(t) for t in tokens]
        except ValueError:
            joined = " ".join(tokens)
            raise CommandError(f"Expected integers, got '{joined}'") from None

    def yes(self, prompt: str) -> bool:
        return self.line(prompt).lower() in ("y", "yes")


def _menu_load(session: Session, ask: _Prompter, loader: Callable, label: str) -> None:
    default = session.config.default_txt if label == "TXT" else None
    suffix = f" (default {default})" if default else ""
    filename = ask.line(f"{label} filename{suffix}: ") or default
    if not filename:
        raise CommandError("A filename is required")
    directed = ask.yes("Directed? (y/n): ")
    # A failed load raises before the session graph is replaced
    session.graph = loader(filename, directed)
    session.directed = directed
    print(f"Graph loaded from {label}!")


def _menu_generate(session: Session, ask: _Prompter) -> None:
    num_vertices, num_edges = ask.ints("Enter V and E: ", 2)
    directed = ask.yes("Directed? (y/n): ")
    seed_text = ask.line("Seed (blank for random): ")
    try:
        seed = int(seed_text) if seed_text else None
    except ValueError:
        raise CommandError(f"Seed must be an integer, got '{seed_text}'") from None
    session.graph = generate_random_graph(
        num_vertices, num_edges, session.config.max_weight, directed, seed=seed
    )
    session.directed = directed
    print("Random graph generated!")


def _menu_update(session: Session, ask: _Prompter) -> None:
    u, v, w = ask.ints("u v newWeight: ", 3)
    # Directed sessions change one direction only
    if session.directed:
        changed = session.graph.update_arc_weight(u, v, w)
    else:
        changed = session.graph.update_weight(u, v, w)
    logger.debug(f"Weight update ({u}, {v}, {w}) changed {changed} entries")
    print("Edge updated.")


def _menu_export(session: Session, ask: _Prompter, with_path: bool) -> None:
    path: Optional[VertexPath] = None
    if with_path:
        src, dst = ask.ints("source dest: ", 2)
        choice = ask.line("Algorithm (1=Dijkstra, 2=A*): ")
        algorithm = "astar" if choice == "2" else "dijkstra"
        path = _find_path(
            session.graph, src, dst, algorithm, session.config.heuristic
        )
        print(f"Path: {_format_path(path)}")
        out = ask.line("Output DOT filename (e.g., sp.dot): ") or "sp.dot"
    else:
        out = ask.line("Output DOT filename (e.g., graph.dot): ") or "graph.dot"
    write_dot(session.graph, out, session.directed, path)
    png = "sp.png" if with_path else "graph.png"
    print(f"DOT exported. (Use: dot -Tpng {out} -o {png})")


def _dispatch(choice: int, session: Session, ask: _Prompter) -> None:
    graph = session.graph
    if choice == 1:
        _menu_load(session, ask, load_txt, "TXT")
    elif choice == 2:
        _menu_load(session, ask, load_csv, "CSV")
    elif choice == 3:
        _menu_generate(session, ask)
    elif choice == 4:
        print(graph.format_adjacency())
    elif choice in (5, 7):
        src, dst = ask.ints("source dest: ", 2)
        algorithm = "dijkstra" if choice == 5 else "astar"
        path = _find_path(graph, src, dst, algorithm, session.config.heuristic)
        _print_path_result(graph, path, algorithm)
    elif choice == 6:
        _print_matrix(graph)
    elif choice == 8:
        _menu_update(session, ask)
    elif choice == 9:
        print("\nRunning performance benchmark...\n")
        report = benchmark(
            graph,
            session.config.benchmark_runs,
            heuristic=get_heuristic(session.config.heuristic),
        )
        print(report.format())
    elif choice in (10, 11):
        _menu_export(session, ask, with_path=choice == 11)


def run_interactive(
    session: Session, stream: Optional[TextIO] = None
) -> None:
    """Run the numbered menu until Exit is chosen or input ends.

    Args:
        session: Session state; may already hold a graph.
        stream: Input stream, ``sys.stdin`` by default.
    """
    ask = _Prompter(stream if stream is not None else sys.stdin)
    logger.info("Starting interactive session")

    while True:
        print(MENU)
        try:
            raw_choice = ask.line("Choice: ")
        except EOFError:
            print()
            break

        try:
            choice = int(raw_choice)
        except ValueError:
            print("Invalid choice.")
            continue

        if choice == 12:
            print("Exiting...")
            break
        if not 1 <= choice <= 11:
            print("Invalid choice.")
            continue
        if choice in _NEEDS_GRAPH and session.graph is None:
            print("Load or generate graph first!")
            continue

        try:
            _dispatch(choice, session, ask)
        except EOFError:
            print()
            break
        except FileNotFoundError as e:
            logger.error(f"File not found: {e.filename}")
            print(f"ERROR: Could not open file: {e.filename}")
        except (CommandError, OSError, ValueError) as e:
            logger.error(f"Menu action {choice} failed: {type(e).__name__}: {e}")
            print(f"ERROR: {e}")

    logger.info("Interactive session ended")


def _cmd_interactive(args: argparse.Namespace, config: PlannerConfig) -> None:
    session = Session(config=config, directed=config.directed)
    if any(
        source is not None for source in (args.txt, args.csv, args.dot, args.random)
    ):
        session.graph, session.directed = _build_graph(args, config)
    run_interactive(session)


#
# Argument parsing
#
def _graph_source_parser() -> argparse.ArgumentParser:
    """Options shared by every command that needs a graph."""
    parent = argparse.ArgumentParser(add_help=False)
    source = parent.add_argument_group("graph source")
    exclusive = source.add_mutually_exclusive_group()
    exclusive.add_argument(
        "--txt", type=Path, help="Load a 'V E' + 'u v w' edge list"
    )
    exclusive.add_argument("--csv", type=Path, help="Load a 'u,v,w' edge list")
    exclusive.add_argument(
        "--dot", type=Path, help="Load a DOT file written by the export command"
    )
    exclusive.add_argument(
        "--random",
        nargs=2,
        type=int,
        metavar=("V", "E"),
        help="Generate a random graph with V vertices and E edges",
    )
    source.add_argument(
        "--seed", type=int, default=None, help="Seed for --random (reproducible)"
    )
    source.add_argument(
        "--max-weight",
        type=int,
        default=None,
        help="Largest random edge weight (default from config: 20)",
    )
    source.add_argument(
        "--directed",
        action="store_true",
        default=None,
        help="Treat loaded or generated edges as directed",
    )
    source.add_argument(
        "--update",
        nargs=3,
        type=int,
        action="append",
        metavar=("U", "V", "W"),
        help="Set the weight of every U-V edge in both directions (repeatable)",
    )
    source.add_argument(
        "--update-arc",
        nargs=3,
        type=int,
        action="append",
        metavar=("U", "V", "W"),
        help="Set the weight of every U->V edge only (repeatable)",
    )
    return parent


def _add_algorithm_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--algorithm",
        "-a",
        choices=ALGORITHM_CHOICES,
        default="dijkstra",
        help="Point-to-point search to use (default: dijkstra)",
    )
    parser.add_argument(
        "--heuristic",
        choices=sorted(HEURISTICS),
        default=None,
        help=(
            "A* heuristic. 'index' (default) uses |u - v| and may miss the"
            " optimum; 'zero' is exact"
        ),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="routeplanner",
        description="Shortest paths on weighted graphs: Dijkstra, A*, Floyd-Warshall.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )
    parser.add_argument(
        "--config", "-c", type=Path, default=None, help="YAML file with defaults"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{print,path,apsp,benchmark,export,save,interactive}",
        help="Available commands",
    )
    source = _graph_source_parser()

    subparsers.add_parser("print", parents=[source], help="Print adjacency lists")

    path_parser = subparsers.add_parser(
        "path", parents=[source], help="Shortest path between two vertices"
    )
    path_parser.add_argument("src", type=int, help="Source vertex")
    path_parser.add_argument("dst", type=int, help="Destination vertex")
    _add_algorithm_options(path_parser)

    subparsers.add_parser(
        "apsp", parents=[source], help="All-pairs distances (Floyd-Warshall)"
    )

    bench_parser = subparsers.add_parser(
        "benchmark", parents=[source], help="Compare algorithm run times"
    )
    bench_parser.add_argument(
        "--runs", "-n", type=int, default=None, help="Runs per algorithm (default 5)"
    )
    bench_parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON"
    )

    export_parser = subparsers.add_parser(
        "export", parents=[source], help="Write the graph as Graphviz DOT"
    )
    export_parser.add_argument("output_file", type=Path, help="DOT file to write")
    export_parser.add_argument(
        "--src", type=int, default=None, help="Highlight the path from this vertex"
    )
    export_parser.add_argument(
        "--dst", type=int, default=None, help="Highlight the path to this vertex"
    )
    _add_algorithm_options(export_parser)

    save_parser = subparsers.add_parser(
        "save", parents=[source], help="Write the graph as a TXT or CSV edge list"
    )
    save_parser.add_argument("output_file", type=Path, help="File to write")
    save_parser.add_argument(
        "--format",
        "-f",
        choices=("txt", "csv"),
        default=None,
        help="Output format (default: from the file suffix, else txt)",
    )

    subparsers.add_parser(
        "interactive",
        parents=[source],
        help="Menu-driven session (optionally starting from a graph source)",
    )
    return parser


_COMMANDS = {
    "print": _cmd_print,
    "path": _cmd_path,
    "apsp": _cmd_apsp,
    "benchmark": _cmd_benchmark,
    "export": _cmd_export,
    "save": _cmd_save,
    "interactive": _cmd_interactive,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routeplanner`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = _build_parser()

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    _start_time = perf_counter()
    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        _COMMANDS[args.command](args, config)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"ERROR: File not found: {e.filename}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command '{args.command}' failed: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.info(
        f"Command '{args.command}' completed in "
        f"{_format_duration(perf_counter() - _start_time)}"
    )


if __name__ == "__main__":
    main()
