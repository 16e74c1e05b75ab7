"""Shared graph fixtures.

Each fixture documents its layout as an ASCII sketch; numbers in brackets
are weights.
"""

from __future__ import annotations

import pytest

from routeplanner.graph import AdjacencyGraph


@pytest.fixture
def diamond():
    # Undirected:
    #
    #        [4]
    #    0 ──────── 1
    #    │        ╱ │
    #  [1]    [2]   [1]
    #    │  ╱       │
    #    2 ──────── 3
    #        [5]
    #
    # Unique shortest 0 -> 3: 0-2-1-3, cost 4.
    g = AdjacencyGraph(4)
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 1)
    g.add_edge(2, 1, 2)
    g.add_edge(1, 3, 1)
    g.add_edge(2, 3, 5)
    return g


@pytest.fixture
def line3():
    # Directed:
    #     [2]     [3]
    #  0 ────► 1 ────► 2
    g = AdjacencyGraph(3)
    g.add_edge(0, 1, 2, directed=True)
    g.add_edge(1, 2, 3, directed=True)
    return g


@pytest.fixture
def parallel():
    # Undirected with parallel edges between 0 and 1:
    #      [7]
    #    ┌─────┐
    #  0 ┼─[3]─┼ 1 ──[1]── 2
    #    └─[5]─┘
    g = AdjacencyGraph(3)
    g.add_edge(0, 1, 7)
    g.add_edge(0, 1, 3)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 2, 1)
    return g


@pytest.fixture
def two_islands():
    # Undirected, two components:
    #     [1]          [2]
    #  0 ───── 1    2 ───── 3
    g = AdjacencyGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(2, 3, 2)
    return g


@pytest.fixture
def asymmetric():
    # Directed, opposite arcs with different weights:
    #      [2]
    #    ────►
    #  0        1
    #    ◄────
    #      [9]
    g = AdjacencyGraph(2)
    g.add_edge(0, 1, 2, directed=True)
    g.add_edge(1, 0, 9, directed=True)
    return g


@pytest.fixture
def misleading_index():
    # Directed, 10 vertices (2..7 isolated). Searching 1 -> 9, the index
    # heuristic |v - 9| scores vertex 0 at 9 and vertex 8 at 1, so A* settles
    # 9 through 8 (cost 6) before trying the cheaper route through 0 (cost 2):
    #
    #   1 ──[1]──► 8 ──[5]──► 9
    #   │                     ▲
    #   └──[1]──► 0 ──[1]─────┘
    g = AdjacencyGraph(10)
    g.add_edge(1, 8, 1, directed=True)
    g.add_edge(8, 9, 5, directed=True)
    g.add_edge(1, 0, 1, directed=True)
    g.add_edge(0, 9, 1, directed=True)
    return g


@pytest.fixture
def diamond_txt(tmp_path):
    """The ``diamond`` graph written as a TXT edge list."""
    path = tmp_path / "diamond.txt"
    path.write_text("4 5\n0 1 4\n0 2 1\n2 1 2\n1 3 1\n2 3 5\n")
    return path


@pytest.fixture
def misleading_txt(tmp_path):
    """The ``misleading_index`` graph as a directed TXT edge list."""
    path = tmp_path / "misleading.txt"
    path.write_text("10 4\n1 8 1\n8 9 5\n1 0 1\n0 9 1\n")
    return path
