from .tsp_util import CapacityExceeded, as_distance_matrix, unreachable
import itertools
from numba import njit
import numpy as np


brute_force_max_nodes = 10


@njit
def tsp_bruteforce_cyclic(G_m, start, perms):
    """
    Exhaustive search over tours that begin at start.
    perms : 2-D array, one ordering of the remaining nodes per row

    Returns:
        (best_path, best_weight)
    """
    n_perms, max_i = perms.shape
    best_weight = unreachable
    best_row = 0

    for r in range(n_perms):
        weight = G_m[start, perms[r, 0]]
        for i in range(max_i - 1):
            weight += G_m[perms[r, i], perms[r, i + 1]]
        weight += G_m[perms[r, max_i - 1], start]

        if weight < best_weight:
            best_weight = weight
            best_row = r

    best_path = np.empty(max_i + 1, dtype=np.int64)
    best_path[0] = start
    best_path[1:] = perms[best_row]

    return best_path, best_weight


def tsp_brute_force(G, start_node=0):
    """
    Reference solver: enumerate all (N - 1)! tours from start_node.

    Only meant for checking exact solvers on small inputs; raises
    CapacityExceeded above brute_force_max_nodes.
    """
    matrix = as_distance_matrix(G)
    start = matrix.index_of(start_node)
    n_nodes = matrix.n_nodes

    if n_nodes > brute_force_max_nodes:
        raise CapacityExceeded(f"Brute force supports at most {brute_force_max_nodes} nodes, got {n_nodes}.")

    if n_nodes == 1:
        return matrix.to_result([start], 0)

    rest = [x for x in range(n_nodes) if x != start]
    perms = np.array(list(itertools.permutations(rest)), dtype=np.int64)
    best_path, best_weight = tsp_bruteforce_cyclic(matrix.G_m, start, perms)

    return matrix.to_result(best_path, best_weight)
