import networkx as nx
import numpy as np
import pytest

from pyheldkarp import CapacityExceeded, InvalidInput, NearestNeighborSolver, PathResult, is_valid_tour, tour_length, tsp_nearest_neighbor

from conftest import random_matrix


def test_example_6(example_6):
    result = tsp_nearest_neighbor(example_6)

    assert isinstance(result, PathResult)
    assert result.path == (0, 1, 4, 5, 2, 3)
    assert result.cost == 155


def test_example_5(example_5):
    path, cost = tsp_nearest_neighbor(example_5)

    assert path == (0, 1, 3, 4, 2)
    assert cost == 205


def test_solver_class(example_6):
    assert NearestNeighborSolver().solve(example_6, 0) == tsp_nearest_neighbor(example_6, 0)


def test_ties_go_to_lowest_index():
    G_m = np.array([
        [0, 5, 5, 5],
        [5, 0, 5, 5],
        [5, 5, 0, 5],
        [5, 5, 5, 0],
    ])
    assert tsp_nearest_neighbor(G_m, 2).path == (2, 0, 1, 3)


def test_weights_above_small_sentinel():
    # Every edge costs more than a fixed "no bound yet" of 999 would allow
    G_m = np.array([
        [0, 5000, 2000],
        [1000, 0, 3000],
        [4000, 6000, 0],
    ])
    result = tsp_nearest_neighbor(G_m)

    assert result.path == (0, 2, 1)
    assert result.cost == 2000 + 6000 + 1000


def test_single_node():
    assert tsp_nearest_neighbor([[7]]) == PathResult((0,), 0)


def test_two_nodes():
    G_m = [[0, 3], [8, 0]]
    assert tsp_nearest_neighbor(G_m, 0) == PathResult((0, 1), 11)
    assert tsp_nearest_neighbor(G_m, 1) == PathResult((1, 0), 11)


@pytest.mark.parametrize("n_nodes", [1, 2, 3, 5, 8, 13])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_permutation_from_start(n_nodes, seed):
    G_m = random_matrix(n_nodes, seed)
    for start in range(n_nodes):
        result = tsp_nearest_neighbor(G_m, start)

        assert result.path[0] == start
        assert sorted(result.path) == list(range(n_nodes))
        assert result.cost == tour_length(np.array(result.path), G_m)
        assert is_valid_tour(result, G_m, start)


def test_asymmetric_direction():
    n_nodes = 5
    G_m = np.full((n_nodes, n_nodes), 100)
    for i in range(n_nodes):
        G_m[i, (i + 1) % n_nodes] = 1

    assert tsp_nearest_neighbor(G_m, 3) == PathResult((3, 4, 0, 1, 2), 5)


def test_graph_labels(example_6):
    G = nx.relabel_nodes(nx.from_numpy_array(example_6, create_using=nx.DiGraph), dict(enumerate("ABCDEF")))
    result = tsp_nearest_neighbor(G, "A")

    assert result == PathResult(("A", "B", "E", "F", "C", "D"), 155)


def test_invalid_start(example_6):
    with pytest.raises(InvalidInput):
        tsp_nearest_neighbor(example_6, 6)


def test_weights_overflowing_the_tour_cost():
    G_m = np.full((4, 4), 1 << 61, dtype=np.int64)
    with pytest.raises(CapacityExceeded, match="overflow"):
        tsp_nearest_neighbor(G_m)
    with pytest.raises(CapacityExceeded):
        NearestNeighborSolver().solve(G_m)
