import random
from typing import Tuple

class Terrain:
    DEFAULT = 0
    GRASS   = 1
    MUD     = 2
    WATER   = 3

    ALL = (DEFAULT, GRASS, MUD, WATER)
    NAMES = {DEFAULT: "default", GRASS: "grass", MUD: "mud", WATER: "water"}

# Traversal cost of entering a cell, by terrain
WEIGHTS = {
    Terrain.DEFAULT: 1,
    Terrain.GRASS: 1,
    Terrain.MUD: 5,
    Terrain.WATER: 10,
}

# Cumulative thresholds: 70% default, 15% grass, 9% mud, 6% water
DISTRIBUTION = (
    (0.70, Terrain.DEFAULT),
    (0.85, Terrain.GRASS),
    (0.94, Terrain.MUD),
)

def weight(terrain: int) -> int:
    return WEIGHTS.get(terrain, 1)

def min_positive_weight() -> int:
    """Smallest edge cost in the maze. Scales the A* heuristic."""
    return min(w for w in WEIGHTS.values() if w > 0)

def random_terrain(rng: random.Random) -> int:
    v = rng.random()
    for threshold, terrain in DISTRIBUTION:
        if v < threshold:
            return terrain
    return Terrain.WATER

def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

def heuristic(cell: Tuple[int, int], goal: Tuple[int, int]) -> int:
    """
    Admissible and consistent estimate of the remaining cost:
    every move costs at least min_positive_weight() and changes the
    Manhattan distance by at most one.
    """
    return manhattan(cell, goal) * min_positive_weight()
