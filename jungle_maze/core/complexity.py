import logging
import random
from collections import deque
from typing import List, Tuple

from jungle_maze.core.grid import Grid
from jungle_maze.core.terrain import manhattan, random_terrain

logger = logging.getLogger(__name__)

class MazePostProcessor:
    @staticmethod
    def _touches_endpoint(grid: Grid, r: int, c: int) -> bool:
        # Opening a cell right next to Start/Exit would give the entrance a second mouth
        for endpoint in (grid.start, grid.exit):
            if endpoint is not None and manhattan((r, c), endpoint) == 1:
                return True
        return False

    @staticmethod
    def create_extra_ways(grid: Grid, count: int, rng: random.Random) -> int:
        """
        Opens up to `count` interior walls to create alternate routes (cycles).

        First pass: walls sitting between two Path cells on opposite sides
        (vertical or horizontal pair). If that does not reach `count`, a
        looser second pass accepts any wall with at least one Path neighbour.
        Returns the number of cells actually opened.
        """
        if count <= 0:
            return 0

        size = grid.size
        candidates: List[Tuple[int, int]] = []
        for r in range(1, size - 1):
            for c in range(1, size - 1):
                if not grid.is_wall(r, c):
                    continue
                if grid.is_path(r - 1, c) and grid.is_path(r + 1, c):
                    candidates.append((r, c))
                elif grid.is_path(r, c - 1) and grid.is_path(r, c + 1):
                    candidates.append((r, c))

        rng.shuffle(candidates)
        opened = 0
        for r, c in candidates:
            if opened >= count:
                break
            if MazePostProcessor._touches_endpoint(grid, r, c):
                continue
            grid.open_cell(r, c, random_terrain(rng))
            opened += 1

        if opened < count:
            secondary: List[Tuple[int, int]] = []
            for r in range(1, size - 1):
                for c in range(1, size - 1):
                    if grid.is_wall(r, c) and grid.count_path_neighbors(r, c) > 0:
                        secondary.append((r, c))

            rng.shuffle(secondary)
            for r, c in secondary:
                if opened >= count:
                    break
                if MazePostProcessor._touches_endpoint(grid, r, c):
                    continue
                grid.open_cell(r, c, random_terrain(rng))
                opened += 1
            logger.debug(f"Extra ways fallback pass used ({len(secondary)} candidates)")

        if opened < count:
            logger.info(f"Opened {opened} of {count} requested extra ways")
        return opened

    @staticmethod
    def open_random_walls(grid: Grid, fraction: float, rng: random.Random) -> int:
        """
        Opens floor(fraction * N) of the N strictly interior walls, chosen at random.
        fraction: 0.0 = keep the maze as is
                  1.0 = open every interior wall
        """
        size = grid.size
        candidates = [
            (r, c)
            for r in range(1, size - 1)
            for c in range(1, size - 1)
            if grid.is_wall(r, c)
        ]
        rng.shuffle(candidates)

        fraction = min(max(fraction, 0.0), 1.0)
        to_open = int(len(candidates) * fraction)
        for r, c in candidates[:to_open]:
            grid.open_cell(r, c, random_terrain(rng))
        return to_open

    @staticmethod
    def flood(grid: Grid, origin: Tuple[int, int], seen: set = None) -> set:
        """Open cells connected to `origin`, accumulated into `seen`."""
        if seen is None:
            seen = set()
        seen.add(origin)
        queue = deque([origin])
        while queue:
            r, c = queue.popleft()
            for nr, nc in grid.neighbors(r, c):
                if (nr, nc) not in seen and not grid.is_wall(nr, nc):
                    seen.add((nr, nc))
                    queue.append((nr, nc))
        return seen

    @staticmethod
    def reachable_from_start(grid: Grid) -> int:
        """Number of open cells reachable from Start (Start included)."""
        if grid.start is None:
            return 0
        return len(MazePostProcessor.flood(grid, grid.start))

    @staticmethod
    def count_components(grid: Grid) -> int:
        seen = set()
        components = 0
        for cell in grid.open_cells():
            if cell not in seen:
                MazePostProcessor.flood(grid, cell, seen)
                components += 1
        return components

    @staticmethod
    def calculate_stats(grid: Grid):
        open_cells = 0
        edges = 0
        dead_ends = 0
        corridors = 0
        junctions = 0

        for r, c in grid.open_cells():
            open_cells += 1
            degree = 0
            for nr, nc in grid.neighbors(r, c):
                if not grid.is_wall(nr, nc):
                    degree += 1
            # Count each edge once (down and right)
            if r + 1 < grid.size and not grid.is_wall(r + 1, c):
                edges += 1
            if c + 1 < grid.size and not grid.is_wall(r, c + 1):
                edges += 1

            if degree <= 1: dead_ends += 1
            elif degree == 2: corridors += 1
            else: junctions += 1

        components = MazePostProcessor.count_components(grid)
        return {
            "open_cells": open_cells,
            "reachable": MazePostProcessor.reachable_from_start(grid),
            "components": components,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            # Independent cycles of the open region (0 for a spanning tree)
            "loops": edges - open_cells + components,
        }
