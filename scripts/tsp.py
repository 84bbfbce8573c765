# Traveling Salesman Problem (considered NP-complete)
# Nearest neighbor vs. exact Held-Karp on fixed example tables

from pyheldkarp import tsp_held_karp, tsp_nearest_neighbor, tour_length
import numpy as np
import sys


EXAMPLES = {
    5: [
        [0, 35, 50, 75, 60],
        [35, 0, 85, 40, 90],
        [50, 85, 0, 30, 55],
        [75, 40, 30, 0, 25],
        [60, 90, 55, 25, 0],
    ],
    6: [
        [0, 10, 15, 30, 40, 50],
        [10, 0, 35, 25, 20, 60],
        [15, 35, 0, 10, 50, 70],
        [30, 25, 10, 0, 30, 80],
        [40, 20, 50, 30, 0, 15],
        [50, 60, 70, 80, 15, 0],
    ],
    15: [
        [0, 10, 15, 30, 100, 200, 90, 120, 80, 110, 150, 70, 130, 160, 180],
        [10, 0, 35, 25, 90, 180, 55, 70, 30, 50, 100, 90, 40, 60, 80],
        [15, 35, 0, 10, 85, 175, 45, 65, 55, 60, 90, 75, 20, 50, 70],
        [30, 25, 10, 0, 60, 150, 20, 40, 30, 45, 60, 55, 30, 35, 50],
        [100, 90, 85, 60, 0, 70, 80, 75, 60, 80, 90, 100, 55, 50, 40],
        [200, 180, 175, 150, 70, 0, 60, 90, 120, 50, 40, 30, 20, 10, 15],
        [90, 55, 45, 20, 80, 60, 0, 20, 30, 40, 50, 70, 30, 20, 25],
        [120, 70, 65, 40, 75, 90, 20, 0, 50, 10, 15, 30, 45, 60, 80],
        [80, 30, 55, 30, 60, 120, 30, 50, 0, 15, 25, 35, 45, 60, 70],
        [110, 50, 60, 45, 80, 50, 40, 10, 15, 0, 30, 60, 70, 80, 90],
        [150, 100, 90, 60, 90, 40, 50, 15, 25, 30, 0, 10, 20, 30, 40],
        [70, 90, 75, 55, 100, 30, 70, 30, 35, 60, 10, 0, 30, 25, 35],
        [130, 40, 20, 30, 55, 20, 30, 45, 45, 70, 20, 30, 0, 15, 25],
        [160, 60, 50, 35, 50, 10, 20, 60, 60, 80, 30, 25, 15, 0, 10],
        [180, 80, 70, 50, 40, 15, 25, 80, 70, 90, 40, 35, 25, 10, 0],
    ],
    # Held-Karp pulls well ahead of nearest neighbor here
    20: [
        [0, 54, 72, 38, 81, 25, 97, 66, 89, 42, 32, 75, 48, 60, 13, 84, 91, 53, 74, 18],
        [54, 0, 64, 12, 95, 45, 23, 76, 85, 19, 71, 14, 37, 80, 61, 27, 39, 56, 92, 59],
        [72, 64, 0, 58, 13, 92, 41, 70, 28, 49, 77, 33, 82, 93, 24, 35, 90, 17, 98, 51],
        [38, 12, 58, 0, 65, 69, 55, 43, 18, 20, 63, 11, 97, 71, 31, 96, 50, 22, 86, 34],
        [81, 95, 13, 65, 0, 88, 75, 54, 29, 64, 21, 99, 38, 67, 91, 62, 26, 73, 45, 93],
        [25, 45, 92, 69, 88, 0, 27, 95, 14, 31, 58, 42, 90, 52, 68, 47, 44, 86, 61, 72],
        [97, 23, 41, 55, 75, 27, 0, 15, 91, 89, 73, 59, 66, 81, 24, 92, 37, 48, 80, 99],
        [66, 76, 70, 43, 54, 95, 15, 0, 85, 67, 94, 39, 32, 28, 50, 31, 82, 74, 53, 40],
        [89, 85, 28, 18, 29, 14, 91, 85, 0, 59, 56, 96, 41, 84, 13, 38, 67, 48, 70, 79],
        [42, 19, 49, 20, 64, 31, 89, 67, 59, 0, 78, 62, 57, 43, 72, 94, 25, 34, 33, 65],
        [32, 71, 77, 63, 21, 58, 73, 94, 56, 78, 0, 91, 29, 85, 15, 62, 71, 47, 81, 20],
        [75, 14, 33, 11, 99, 42, 59, 39, 96, 62, 91, 0, 82, 26, 87, 49, 58, 55, 40, 81],
        [48, 37, 82, 97, 38, 90, 66, 32, 41, 57, 29, 82, 0, 15, 93, 44, 85, 28, 47, 74],
        [60, 80, 93, 71, 67, 52, 81, 28, 84, 43, 85, 26, 15, 0, 24, 61, 75, 87, 62, 49],
        [13, 61, 24, 31, 91, 68, 24, 50, 13, 72, 15, 87, 93, 24, 0, 32, 29, 36, 91, 17],
        [84, 27, 35, 96, 62, 47, 92, 31, 38, 94, 62, 49, 44, 61, 32, 0, 54, 73, 28, 45],
        [91, 39, 90, 50, 26, 44, 37, 82, 67, 25, 71, 58, 85, 75, 29, 54, 0, 80, 95, 61],
        [53, 56, 17, 22, 73, 86, 48, 74, 48, 34, 47, 55, 28, 87, 36, 73, 80, 0, 21, 60],
        [74, 92, 98, 86, 45, 61, 80, 53, 70, 33, 81, 40, 47, 62, 91, 28, 95, 21, 0, 69],
        [18, 59, 51, 34, 93, 72, 99, 40, 79, 65, 20, 81, 74, 49, 17, 45, 61, 60, 69, 0],
    ],
}


def node_name(i):
    return chr(ord('A') + i)


def main(argv):
    n_nodes = int(argv[1]) if len(argv) > 1 else 6
    start_node = int(argv[2]) if len(argv) > 2 else 0
    if n_nodes not in EXAMPLES:
        print(f"No example table with {n_nodes} nodes.")
        print(f"Available sizes: {', '.join(str(x) for x in sorted(EXAMPLES))}")
        return 1
    G_m = np.array(EXAMPLES[n_nodes])

    for name, solver in (("Nearest neighbor", tsp_nearest_neighbor), ("Held-Karp", tsp_held_karp)):
        path, cost = solver(G_m, start_node=start_node)
        verified = tour_length(np.array(path), G_m)
        print(f"{name}:")
        print(f"  Path: {' -> '.join(node_name(x) for x in path + (path[0],))}")
        print(f"  Claimed cost: {cost}")
        print(f"  Verified cost: {verified}")

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
