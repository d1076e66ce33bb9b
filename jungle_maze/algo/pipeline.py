import logging
import random

from jungle_maze.core.config import MazeConfig
from jungle_maze.core.grid import Grid
from jungle_maze.core.complexity import MazePostProcessor
from jungle_maze.algo.prim import PrimsAlgorithm
from jungle_maze.algo.kruskal import KruskalsAlgorithm

logger = logging.getLogger(__name__)

GENERATORS = {
    "prim": PrimsAlgorithm,
    "kruskal": KruskalsAlgorithm,
}

def generate(config: MazeConfig, rng: random.Random = None) -> Grid:
    """
    Builds a fresh maze: spanning tree, Start/Exit on the border,
    then extra ways and random wall opening. Every random draw comes from `rng`
    (or a Random seeded with config.seed).
    """
    cfg = config.normalized()
    if cfg.algo not in GENERATORS:
        raise ValueError(f"Unknown generation algorithm '{config.algo}' (expected one of {sorted(GENERATORS)})")
    if rng is None:
        rng = random.Random(cfg.seed)

    logger.info(f"Generating {cfg.size}x{cfg.size} maze with {cfg.algo.upper()}...")
    grid = Grid(cfg.size)
    generator = GENERATORS[cfg.algo](grid, seed=cfg.seed, rng=rng)
    generator.run_all()
    generator.place_start_and_exit()

    if cfg.extra_ways > 0:
        opened = MazePostProcessor.create_extra_ways(grid, cfg.extra_ways, rng)
        logger.info(f"Opened {opened} extra ways.")

    opened = MazePostProcessor.open_random_walls(grid, cfg.loop_fraction, rng)
    logger.info(f"Opened {opened} random walls (fraction={cfg.loop_fraction}).")
    logger.info(f"Start at {grid.start}. Exit at {grid.exit}.")
    return grid
