import logging
import random
from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

from jungle_maze.core.grid import Grid
from jungle_maze.core.terrain import Terrain, random_terrain

logger = logging.getLogger(__name__)

class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None, rng: random.Random = None):
        self.grid = grid
        self.seed = seed
        # One shared source for carving, terrain, placement and augmentation
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass

    def assign_terrains(self):
        grid = self.grid
        for i, st in enumerate(grid.state):
            if st == Grid.WALL:
                grid.terrain[i] = Terrain.DEFAULT
            else:
                grid.terrain[i] = random_terrain(self.rng)

    def place_start_and_exit(self):
        """
        Opens two border cells next to interior Path cells and marks them Start/Exit.
        Falls back to the inner corners when the border offers fewer than two choices.
        """
        grid = self.grid
        size = grid.size
        edges: List[Tuple[int, int]] = []
        for c in range(1, size - 1, 2):
            if grid.is_path(1, c):
                edges.append((0, c))
            if grid.is_path(size - 2, c):
                edges.append((size - 1, c))
        for r in range(1, size - 1, 2):
            if grid.is_path(r, 1):
                edges.append((r, 0))
            if grid.is_path(r, size - 2):
                edges.append((r, size - 1))

        if len(edges) < 2:
            logger.warning(f"Only {len(edges)} border candidates, using inner corners")
            start, exit_ = (1, 1), (size - 2, size - 2)
        else:
            self.rng.shuffle(edges)
            start, exit_ = edges[0], edges[-1]

        grid.set_start(*start)
        grid.set_exit(*exit_)
        for r, c in (start, exit_):
            if grid.terrain_at(r, c) == Terrain.DEFAULT:
                grid.set_terrain(r, c, Terrain.GRASS)
        logger.debug(f"Start {start}, exit {exit_} ({len(edges)} candidates)")
