import numpy as np
import pytest


@pytest.fixture
def example_5():
    return np.array([
        [0, 35, 50, 75, 60],
        [35, 0, 85, 40, 90],
        [50, 85, 0, 30, 55],
        [75, 40, 30, 0, 25],
        [60, 90, 55, 25, 0],
    ])


@pytest.fixture
def example_6():
    # A..F
    return np.array([
        [0, 10, 15, 30, 40, 50],
        [10, 0, 35, 25, 20, 60],
        [15, 35, 0, 10, 50, 70],
        [30, 25, 10, 0, 30, 80],
        [40, 20, 50, 30, 0, 15],
        [50, 60, 70, 80, 15, 0],
    ])


def random_matrix(n_nodes, seed, max_weight=100):
    rng = np.random.default_rng(seed)
    G_m = rng.integers(0, max_weight, size=(n_nodes, n_nodes))
    np.fill_diagonal(G_m, 0)
    return G_m
