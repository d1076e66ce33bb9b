import logging
import random

from jungle_maze.core.config import MazeConfig
from jungle_maze.core.grid import Grid
from jungle_maze.algo.pipeline import generate
from jungle_maze.algo.solvers import Solver, SolverType

logger = logging.getLogger(__name__)

class SessionBusyError(RuntimeError):
    """Raised when an action would touch the grid while a search owns it."""

class MazeSession:
    """
    Caller-side glue between the maze and a viewer: owns the current grid,
    the active solver and the "solving in progress" flag that keeps
    generation and solving from overlapping.
    """

    def __init__(self, config: MazeConfig = None, rng: random.Random = None):
        self.config = (config or MazeConfig()).normalized()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.grid: Grid = None
        self.solver: Solver = None
        self.solving = False
        self.paused = False
        self.status = "Ready"

    def regenerate(self) -> Grid:
        if self.solving:
            raise SessionBusyError("Cannot generate while solving")
        self.grid = generate(self.config, rng=self.rng)
        self.solver = None
        self.status = (f"Maze generated ({self.grid.size}x{self.grid.size}). "
                       f"Start at {self.grid.start}. Exit at {self.grid.exit}")
        return self.grid

    def start_solve(self, strategy: SolverType = None) -> Solver:
        if self.solving:
            raise SessionBusyError("Already solving")
        if self.grid is None:
            self.regenerate()
        if strategy is None:
            strategy = SolverType.from_name(self.config.solver)

        self.grid.clear_marks()
        self.solver = Solver(self.grid, strategy)
        self.solving = True
        self.paused = False
        self.status = "Solving..."
        logger.info(f"Solving with {strategy.label}...")
        return self.solver

    def toggle_pause(self) -> bool:
        if self.solving:
            self.paused = not self.paused
            self.status = "Paused" if self.paused else "Solving..."
        return self.paused

    def tick(self) -> bool:
        """One step() of the active search. Returns True when the search has just ended or none is running."""
        if not self.solving or self.paused:
            return not self.solving
        if self.solver.step():
            self.solving = False
            self.status = self.result_message()
            logger.info(self.status)
            return True
        return False

    def reset_visuals(self):
        if self.solving:
            raise SessionBusyError("Cannot reset while solving")
        if self.grid is not None:
            self.grid.clear_marks()
        self.status = "Visuals reset"

    def result_message(self) -> str:
        s = self.solver
        if s is None or not s.terminated:
            return self.status
        if not s.found:
            return "No path"
        return (f"FOUND - Traversal: {s.steps} - Path steps: {s.shortest_path_steps}"
                f" - Weight: {s.total_weight}")
