from .tsp_util import AllocationFailure, CapacityExceeded, SolveCancelled, as_distance_matrix, cost_dtype, solver_context, unreachable
from numba import njit, prange
import numpy as np
import time
import warnings


prev_dtype = np.int8


# Held-Karp over flat tables: state (subset, last) lives at subset * n + last.
@njit
def relax_state(G_m, dp, prev, n_nodes, subset, last):
    if not (subset >> last) & 1:
        return

    reduced = subset ^ (1 << last)
    state = subset * n_nodes + last
    best_cost = dp[state]
    for p in range(n_nodes):
        if p == last or not (reduced >> p) & 1:
            continue
        cost = dp[reduced * n_nodes + p]
        if cost == unreachable:
            continue
        cost += G_m[p, last]
        if cost < best_cost:
            best_cost = cost
            prev[state] = p

    dp[state] = best_cost


@njit
def held_karp_fill(G_m, dp, prev, n_nodes, start, lo, hi):
    # Clearing a bit always yields a smaller subset, so one ascending sweep
    # only ever reads finished states.
    for subset in range(lo, hi):
        if not (subset >> start) & 1:
            continue
        for last in range(n_nodes):
            relax_state(G_m, dp, prev, n_nodes, subset, last)


@njit(parallel=True)
def held_karp_fill_parallel(G_m, dp, prev, n_nodes, start, lo, hi):
    for subset in range(lo, hi):
        if not (subset >> start) & 1:
            continue
        # Each thread writes only its own (subset, last) state.
        for last in prange(n_nodes):
            relax_state(G_m, dp, prev, n_nodes, subset, last)


@njit
def held_karp_tour(G_m, dp, prev, n_nodes, start):
    full = (1 << n_nodes) - 1
    best_cost = unreachable
    end = -1
    for last in range(n_nodes):
        if last == start:
            continue
        cost = dp[full * n_nodes + last]
        if cost == unreachable:
            continue
        cost += G_m[last, start]
        if cost < best_cost:
            best_cost = cost
            end = last

    path = np.empty(n_nodes, dtype=np.int64)
    subset = full
    last = end
    for i in range(n_nodes - 1, 0, -1):
        path[i] = last
        reduced = subset ^ (1 << last)
        last = prev[subset * n_nodes + last]
        subset = reduced
    path[0] = start

    return path, best_cost


def table_nbytes(n_nodes):
    n_states = (1 << n_nodes) * n_nodes

    return n_states * (np.dtype(cost_dtype).itemsize + np.dtype(prev_dtype).itemsize)


def check_capacity(n_nodes, max_nodes=None):
    ceiling = solver_context.max_nodes
    if max_nodes is not None:
        ceiling = min(ceiling, max_nodes)
    if n_nodes > ceiling:
        raise CapacityExceeded(
            f"Held-Karp supports at most {ceiling} nodes ({solver_context.mask_bits}-bit subset mask), got {n_nodes}."
        )


def allocate_tables(n_nodes, max_alloc=None):
    budget = solver_context.max_alloc if max_alloc is None else max_alloc
    n_bytes = table_nbytes(n_nodes)
    if n_bytes > budget:
        raise AllocationFailure(f"Held-Karp tables for {n_nodes} nodes need {n_bytes} bytes, budget is {budget}.")
    if n_bytes > solver_context.warn_alloc:
        warnings.warn(f"Held-Karp tables for {n_nodes} nodes will use {n_bytes / (1 << 30):.1f} GiB.")

    n_states = (1 << n_nodes) * n_nodes
    try:
        dp = np.full(n_states, unreachable, dtype=cost_dtype)
        prev = np.full(n_states, -1, dtype=prev_dtype)
    except (MemoryError, ValueError) as e:
        # numpy raises ValueError for sizes it cannot even describe
        raise AllocationFailure(f"Could not allocate Held-Karp tables for {n_nodes} nodes ({n_bytes} bytes).") from e

    return dp, prev


def held_karp_sweep(G_m, dp, prev, n_nodes, start, timeout, should_cancel, is_parallel):
    fill = held_karp_fill_parallel if is_parallel else held_karp_fill
    n_subsets = 1 << n_nodes

    if (timeout is None) and (should_cancel is None):
        fill(G_m, dp, prev, n_nodes, start, 0, n_subsets)
        return

    deadline = None if timeout is None else time.perf_counter() + timeout
    stride = solver_context.cancel_stride
    for lo in range(0, n_subsets, stride):
        if (deadline is not None) and (time.perf_counter() >= deadline):
            raise SolveCancelled("timeout", lo)
        if (should_cancel is not None) and should_cancel():
            raise SolveCancelled("cancelled", lo)
        fill(G_m, dp, prev, n_nodes, start, lo, min(lo + stride, n_subsets))


def tsp_held_karp(
    G,
    start_node=0,
    max_nodes=None,
    max_alloc=None,
    timeout=None,
    should_cancel=None,
    is_parallel=False
):
    """
    Exact minimum-cost tour from start_node by Held-Karp dynamic programming.

    G may be a 2-D integer array-like, a complete networkx graph, or a
    DistanceMatrix. Returns a PathResult (path, cost).

    max_nodes and max_alloc may only tighten the configured limits.
    timeout (seconds) and should_cancel (callable returning True to stop)
    are checked between chunks of the subset sweep, and raise SolveCancelled.
    Raises InvalidInput, CapacityExceeded or AllocationFailure before any
    table work when the request cannot be served.
    """
    matrix = as_distance_matrix(G)
    start = matrix.index_of(start_node)
    n_nodes = matrix.n_nodes

    if n_nodes == 1:
        return matrix.to_result([start], 0)

    check_capacity(n_nodes, max_nodes)
    dp, prev = allocate_tables(n_nodes, max_alloc)

    G_m = matrix.G_m
    dp[(1 << start) * n_nodes + start] = 0
    held_karp_sweep(G_m, dp, prev, n_nodes, start, timeout, should_cancel, is_parallel)
    path, cost = held_karp_tour(G_m, dp, prev, n_nodes, start)

    return matrix.to_result(path, cost)


class HeldKarpSolver:
    def __init__(self, max_nodes=None, max_alloc=None, timeout=None, should_cancel=None, is_parallel=False):
        self.max_nodes = max_nodes
        self.max_alloc = max_alloc
        self.timeout = timeout
        self.should_cancel = should_cancel
        self.is_parallel = is_parallel

    def solve(self, matrix, start=0):
        return tsp_held_karp(
            matrix,
            start_node=start,
            max_nodes=self.max_nodes,
            max_alloc=self.max_alloc,
            timeout=self.timeout,
            should_cancel=self.should_cancel,
            is_parallel=self.is_parallel
        )
