import networkx as nx
import numpy as np
import os
from numba import njit
from typing import NamedTuple


class SolverContext:
    def __init__(self, b, n, a, w, s):
        self.mask_bits = b
        self.max_nodes = n
        self.max_alloc = a
        self.warn_alloc = w
        self.cancel_stride = s


# Signed mask: 1 << n must stay below 2 ** (bits - 1)
mask_bits = min(64, max(8, int(os.getenv('PYHELDKARP_MASK_BITS', '32'))))
mask_max_nodes = mask_bits - 2
max_nodes = min(mask_max_nodes, int(os.getenv('PYHELDKARP_MAX_NODES', str(mask_max_nodes))))
max_alloc = int(os.getenv('PYHELDKARP_MAX_ALLOC', str(0xFFFFFFFFFFFFFFFF)))
warn_alloc = int(os.getenv('PYHELDKARP_WARN_ALLOC', str(1 << 30)))
cancel_stride = max(1, int(os.getenv('PYHELDKARP_CANCEL_STRIDE', '4096')))

solver_context = SolverContext(mask_bits, max_nodes, max_alloc, warn_alloc, cancel_stride)

cost_dtype = np.int64
unreachable = np.iinfo(cost_dtype).max


class TSPError(Exception):
    pass


class InvalidInput(TSPError, ValueError):
    pass


class CapacityExceeded(TSPError, ValueError):
    pass


class AllocationFailure(TSPError, MemoryError):
    pass


class SolveCancelled(TSPError, RuntimeError):
    def __init__(self, reason, subsets_done=0):
        super().__init__(f"Solve {reason} after {subsets_done} subsets.")
        self.reason = reason
        self.subsets_done = subsets_done


class PathResult(NamedTuple):
    path: tuple
    cost: int


def graph_to_matrix(G):
    """
    Convert a complete networkx.Graph or networkx.DiGraph to an integer
    cost matrix, ordered by G.nodes().

    An undirected edge supplies both directions. Any missing ordered pair of
    distinct nodes is an error, since the solvers assume a complete graph.
    Weights are copied as Python objects so large integers stay exact.
    """
    if G.is_multigraph():
        raise InvalidInput("Multigraphs are not supported: parallel edges have no single cost.")

    nodes = list(G.nodes())
    index = {node: i for i, node in enumerate(nodes)}
    n = len(nodes)
    G_o = np.full((n, n), None, dtype=object)
    for u, v, w in G.edges(data='weight', default=1):
        G_o[index[u], index[v]] = w
        if not G.is_directed():
            G_o[index[v], index[u]] = w
    for i in range(n):
        G_o[i, i] = 0

    for i in range(n):
        for j in range(n):
            if G_o[i, j] is None:
                raise InvalidInput(f"Graph is not complete: no edge from {nodes[i]!r} to {nodes[j]!r}.")

    return nodes, to_cost_array(G_o)


def to_exact_ints(G_o):
    G_i = np.empty(G_o.shape, dtype=object)
    for (i, j), w in np.ndenumerate(G_o):
        if isinstance(w, (bool, np.bool_)):
            raise InvalidInput(f"Edge weight from {i} to {j} must be an integer, got {w!r}.")
        if isinstance(w, (int, np.integer)):
            G_i[i, j] = int(w)
        elif isinstance(w, (float, np.floating)) and np.isfinite(w) and w == np.floor(w):
            G_i[i, j] = int(w)
        else:
            raise InvalidInput(f"Edge weight from {i} to {j} must be an integer, got {w!r}.")

    return G_i


def to_cost_array(G):
    try:
        G_m = np.asarray(G)
    except ValueError as e:
        raise InvalidInput(f"Distance matrix is ragged: {e}") from e

    if G_m.ndim != 2 or G_m.shape[0] != G_m.shape[1]:
        raise InvalidInput(f"Distance matrix must be square, got shape {G_m.shape}.")
    if G_m.shape[0] == 0:
        raise InvalidInput("Distance matrix must have at least one node.")

    kind = G_m.dtype.kind
    if kind == 'f':
        if not np.all(np.isfinite(G_m)) or not np.all(G_m == np.floor(G_m)):
            raise InvalidInput("Distance matrix entries must be finite integers.")
    elif kind == 'O':
        G_m = to_exact_ints(G_m)
    elif kind not in 'iu':
        raise InvalidInput(f"Distance matrix entries must be integers, got dtype {G_m.dtype}.")

    if (G_m < 0).any():
        i, j = np.argwhere(G_m < 0)[0]
        raise InvalidInput(f"Negative edge weight {G_m[i, j]} from {i} to {j}.")

    # Every tour sums n edges, so n * max weight must fit the accumulator.
    # This bounds every solver, not only Held-Karp.
    n = G_m.shape[0]
    if int(G_m.max()) * n > unreachable - 1:
        raise CapacityExceeded(f"Edge weights up to {G_m.max()} over {n} nodes overflow the {np.dtype(cost_dtype).name} cost accumulator.")

    G_m = np.array(G_m, dtype=cost_dtype)
    G_m.setflags(write=False)

    return G_m


class DistanceMatrix:
    """
    Immutable N x N matrix of non-negative integer edge costs.

    G may be a 2-D array-like, a networkx.Graph/DiGraph, or another
    DistanceMatrix. dist[i][j] is the cost of travelling i -> j and need not
    equal dist[j][i]. The diagonal is never read by the solvers.
    """

    def __init__(self, G):
        if isinstance(G, DistanceMatrix):
            self.nodes = G.nodes
            self.G_m = G.G_m
        elif isinstance(G, nx.Graph):
            self.nodes, self.G_m = graph_to_matrix(G)
        else:
            self.G_m = to_cost_array(G)
            self.nodes = list(range(self.G_m.shape[0]))
        self.n_nodes = len(self.nodes)
        self.is_labeled = self.nodes != list(range(self.n_nodes))
        self._index = None

    def __len__(self):
        return self.n_nodes

    def __getitem__(self, key):
        return self.G_m[key]

    def __repr__(self):
        return f"DistanceMatrix(n_nodes={self.n_nodes})"

    def index_of(self, label):
        if not self.is_labeled:
            if isinstance(label, (bool, np.bool_)) or not isinstance(label, (int, np.integer)):
                raise InvalidInput(f"Start node must be an integer index, got {label!r}.")
            if not (0 <= label < self.n_nodes):
                raise InvalidInput(f"Start node {label} is out of range for {self.n_nodes} nodes.")
            return int(label)

        if self._index is None:
            self._index = {node: i for i, node in enumerate(self.nodes)}
        try:
            return self._index[label]
        except (KeyError, TypeError):
            raise InvalidInput(f"Start node {label!r} is not in the graph.") from None

    def label_of(self, index):
        return self.nodes[index]

    def to_result(self, path, cost):
        return PathResult(tuple(self.nodes[x] for x in path), int(cost))


def as_distance_matrix(G):
    return G if isinstance(G, DistanceMatrix) else DistanceMatrix(G)


@njit
def tour_length(path, G_m):
    n = len(path)
    tot_len = 0
    for i in range(n - 1):
        tot_len += G_m[path[i], path[i + 1]]
    if n > 1:
        tot_len += G_m[path[n - 1], path[0]]

    return tot_len


def is_valid_tour(result, G, start_node=None):
    matrix = as_distance_matrix(G)
    path, cost = result
    if len(path) != matrix.n_nodes:
        return False
    try:
        index_path = np.array([matrix.index_of(x) for x in path], dtype=np.int64)
    except InvalidInput:
        return False
    if len(set(index_path.tolist())) != matrix.n_nodes:
        return False
    if (start_node is not None) and (path[0] != start_node):
        return False

    return int(tour_length(index_path, matrix.G_m)) == cost
