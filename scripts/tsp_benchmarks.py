import numpy as np
import sys
import time
import warnings
import pandas as pd

from pyheldkarp import is_valid_tour, tsp_held_karp, tsp_nearest_neighbor


# Random asymmetric integer costs in [1, max_weight]
def generate_atsp_matrix(n_nodes, max_weight=100, seed=42):
    rng = np.random.default_rng(seed)
    G_m = rng.integers(1, max_weight + 1, size=(n_nodes, n_nodes))
    np.fill_diagonal(G_m, 0)
    return G_m


def benchmark_tsp(n_nodes, is_parallel=False):
    results = {}
    G_m = generate_atsp_matrix(n_nodes)

    # Exclude numba JIT overhead with warmup:
    tsp_nearest_neighbor(G_m[:2, :2])
    tsp_held_karp(G_m[:2, :2], is_parallel=is_parallel)

    start = time.time()
    result = tsp_nearest_neighbor(G_m)
    results["Nearest Neighbor"] = (time.time() - start, result.cost)
    if not is_valid_tour(result, G_m, 0):
        warnings.warn("Invalid nearest neighbor solution!")

    start = time.time()
    result = tsp_held_karp(G_m, is_parallel=is_parallel)
    results["Held-Karp"] = (time.time() - start, result.cost)
    if not is_valid_tour(result, G_m, 0):
        warnings.warn("Invalid Held-Karp solution!")

    return results


if __name__ == "__main__":
    max_nodes = int(sys.argv[1]) if len(sys.argv) > 1 else 18
    is_parallel = (len(sys.argv) > 2) and (sys.argv[2] == "parallel")

    columns = {}
    for n_nodes in range(4, max_nodes + 1, 2):
        results_dict = benchmark_tsp(n_nodes, is_parallel)
        for key, (seconds, cost) in results_dict.items():
            columns[f"{key} ({n_nodes})"] = {"seconds": seconds, "cost": cost}

    df = pd.DataFrame(columns)
    print(df)
