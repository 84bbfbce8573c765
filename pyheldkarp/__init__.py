from .tsp_util import (
    AllocationFailure,
    CapacityExceeded,
    DistanceMatrix,
    InvalidInput,
    PathResult,
    SolveCancelled,
    TSPError,
    is_valid_tour,
    solver_context,
    tour_length,
)
from .nearest_neighbor import NearestNeighborSolver, tsp_nearest_neighbor
from .held_karp import HeldKarpSolver, tsp_held_karp
from .brute_force import tsp_brute_force
