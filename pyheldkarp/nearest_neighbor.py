from .tsp_util import as_distance_matrix, unreachable
from numba import njit
import numpy as np


@njit
def nearest_neighbor_tour(G_m, start):
    n = G_m.shape[0]
    visited = np.zeros(n, dtype=np.bool_)
    path = np.empty(n, dtype=np.int64)
    visited[start] = True
    path[0] = start
    cur = start
    cost = 0

    for i in range(1, n):
        best_cost = unreachable
        best_node = -1
        # Strict < keeps the lowest index on ties
        for j in range(n):
            if visited[j]:
                continue
            if G_m[cur, j] < best_cost:
                best_cost = G_m[cur, j]
                best_node = j
        path[i] = best_node
        visited[best_node] = True
        cost += best_cost
        cur = best_node

    if n > 1:
        cost += G_m[cur, start]

    return path, cost


def tsp_nearest_neighbor(G, start_node=0):
    """
    Greedy nearest-neighbor tour from start_node.

    G may be a 2-D integer array-like, a complete networkx graph, or a
    DistanceMatrix. Returns a PathResult (path, cost); for a graph, the path
    holds node labels.
    """
    matrix = as_distance_matrix(G)
    start = matrix.index_of(start_node)
    path, cost = nearest_neighbor_tour(matrix.G_m, start)

    return matrix.to_result(path, cost)


class NearestNeighborSolver:
    def solve(self, matrix, start=0):
        return tsp_nearest_neighbor(matrix, start_node=start)
