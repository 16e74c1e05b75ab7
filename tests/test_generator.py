import random

import pytest

from routeplanner.generator import generate_random_graph


def test_counts_undirected():
    g = generate_random_graph(10, 25, seed=7)
    assert g.num_vertices == 10
    assert g.num_entries() == 50


def test_counts_directed():
    g = generate_random_graph(10, 25, directed=True, seed=7)
    assert g.num_entries() == 25


def test_weights_in_range_and_no_self_loops():
    g = generate_random_graph(8, 200, max_weight=3, directed=True, seed=11)
    for u, v, w in g.edges():
        assert u != v
        assert 1 <= w <= 3


def test_seed_is_reproducible():
    a = generate_random_graph(12, 30, seed=42)
    b = generate_random_graph(12, 30, seed=42)
    assert a == b


def test_different_seeds_differ():
    a = generate_random_graph(12, 30, seed=1)
    b = generate_random_graph(12, 30, seed=2)
    assert a != b


def test_explicit_rng_takes_precedence():
    a = generate_random_graph(12, 30, seed=999, rng=random.Random(5))
    b = generate_random_graph(12, 30, rng=random.Random(5))
    assert a == b


def test_global_random_state_untouched():
    random.seed(123)
    expected = random.random()
    random.seed(123)
    generate_random_graph(6, 10, seed=1)
    assert random.random() == expected


def test_undirected_entries_symmetric():
    g = generate_random_graph(6, 15, seed=3)
    forward = sorted((u, v, w) for u, v, w in g.edges())
    backward = sorted((v, u, w) for u, v, w in g.edges())
    assert forward == backward


def test_parallel_edges_allowed():
    # 2 vertices, many edges: every edge joins 0 and 1
    g = generate_random_graph(2, 5, directed=True, seed=0)
    assert g.num_entries() == 5
    assert {(u, v) for u, v, _ in g.edges()} <= {(0, 1), (1, 0)}


def test_no_edges():
    g = generate_random_graph(1, 0)
    assert g.num_vertices == 1
    assert g.num_entries() == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_vertices": -1, "num_edges": 0},
        {"num_vertices": 3, "num_edges": -2},
        {"num_vertices": 1, "num_edges": 1},
        {"num_vertices": 0, "num_edges": 3},
        {"num_vertices": 4, "num_edges": 2, "max_weight": 0},
    ],
)
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        generate_random_graph(**kwargs)
