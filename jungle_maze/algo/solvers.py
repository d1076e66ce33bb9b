import heapq
import logging
import math
from array import array
from collections import deque
from enum import Enum
from typing import Deque, List, Tuple

from jungle_maze.core.grid import Grid
from jungle_maze.core.terrain import heuristic, weight

logger = logging.getLogger(__name__)

# Tolerance for cost comparisons (stale entries, strict improvement)
EPSILON = 1e-9

class SolverType(Enum):
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @classmethod
    def from_name(cls, name: str) -> "SolverType":
        key = name.strip().lower()
        if key == "a*":
            key = "astar"
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown solver '{name}' (expected bfs, dfs, dijkstra or astar)")

    @property
    def weighted(self) -> bool:
        return self in (SolverType.DIJKSTRA, SolverType.ASTAR)

    @property
    def label(self) -> str:
        return {"bfs": "BFS", "dfs": "DFS", "dijkstra": "Dijkstra", "astar": "A*"}[self.value]

class SolverStatus(Enum):
    READY = "ready"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"

class Solver:
    """
    Resumable search over a Grid. Each step() does one unit of frontier work,
    so a caller can redraw, wait or pause between calls and still get the
    same result as an uninterrupted run.

    BFS/DFS share one deque (always appended on the right; BFS reads the left
    end, DFS the right end). Dijkstra/A* share one binary heap ordered by
    g or g + h, with stale entries dropped lazily when popped.
    """

    def __init__(self, grid: Grid, strategy: SolverType = SolverType.BFS):
        if grid.start is None or grid.exit is None:
            raise ValueError("Grid has no Start/Exit; place them before solving")
        self.grid = grid
        self.strategy = strategy
        self.status = SolverStatus.READY

        # Results
        self.found = False
        self.steps = 0
        self.shortest_path_steps = 0
        self.total_weight = 0
        self.path: List[Tuple[int, int]] = []

        n = grid.size * grid.size
        # Dense parent array: predecessor index, -1 = none
        self.parents = array('i', [-1] * n)

        start_r, start_c = grid.start
        start_idx = grid.get_index(start_r, start_c)

        if strategy.weighted:
            self.dist = array('d', [math.inf] * n)
            self.dist[start_idx] = 0.0
            # Priority Queue: (priority, seq, g, r, c); seq keeps ties first-in first-out
            self.heap: List[Tuple[float, int, float, int, int]] = []
            self._seq = 0
            self._push(start_r, start_c, 0.0)
        else:
            self.visited = array('B', [0] * n)
            self.visited[start_idx] = 1
            # (r, c, depth)
            self.frontier: Deque[Tuple[int, int, int]] = deque()
            self.frontier.append((start_r, start_c, 0))

    @property
    def terminated(self) -> bool:
        return self.status in (SolverStatus.FOUND, SolverStatus.EXHAUSTED)

    def step(self) -> bool:
        """Advances the search by one unit of work. Returns True once terminated."""
        if self.terminated:
            return True
        self.status = SolverStatus.RUNNING
        if self.strategy.weighted:
            self._step_weighted()
        else:
            self._step_unweighted()
        return self.terminated

    def run_all(self) -> bool:
        """Helper to run the search to completion. Returns whether the exit was reached."""
        while not self.step():
            pass
        return self.found

    def summary(self):
        return {
            "solver": self.strategy.label,
            "status": self.status.value,
            "found": self.found,
            "steps": self.steps,
            "shortest_path_steps": self.shortest_path_steps,
            "total_weight": self.total_weight,
        }

    # BFS / DFS

    def _step_unweighted(self):
        if not self.frontier:
            self._finish(found=False)
            return

        if self.strategy is SolverType.BFS:
            r, c, depth = self.frontier.popleft()
        else:
            r, c, depth = self.frontier.pop()

        grid = self.grid
        self.steps += 1
        self._mark_explored(r, c)

        if (r, c) == grid.exit:
            self._reconstruct_path(r, c)
            return

        cur_idx = r * grid.size + c
        for nr, nc in grid.neighbors(r, c):
            if grid.is_wall(nr, nc):
                continue
            idx = nr * grid.size + nc
            if self.visited[idx]:
                continue
            # Mark at push time so a cell is never queued twice
            self.visited[idx] = 1
            self.parents[idx] = cur_idx
            self.frontier.append((nr, nc, depth + 1))

    # Dijkstra / A*

    def _push(self, r: int, c: int, g: float):
        priority = g
        if self.strategy is SolverType.ASTAR:
            priority += heuristic((r, c), self.grid.exit)
        heapq.heappush(self.heap, (priority, self._seq, g, r, c))
        self._seq += 1

    def _step_weighted(self):
        grid = self.grid
        while self.heap:
            _, _, g, r, c = heapq.heappop(self.heap)
            cur_idx = r * grid.size + c
            if g > self.dist[cur_idx] + EPSILON:
                continue # Stale: a cheaper route was pushed later

            self.steps += 1
            self._mark_explored(r, c)

            if (r, c) == grid.exit:
                self._reconstruct_path(r, c)
                return

            for nr, nc in grid.neighbors(r, c):
                if grid.is_wall(nr, nc):
                    continue
                idx = nr * grid.size + nc
                tentative = self.dist[cur_idx] + weight(grid.terrain[idx])
                if tentative + EPSILON < self.dist[idx]:
                    self.dist[idx] = tentative
                    self.parents[idx] = cur_idx
                    self._push(nr, nc, tentative)
            return

        self._finish(found=False)

    # Shared

    def _mark_explored(self, r: int, c: int):
        st = self.grid.state_at(r, c)
        if st != Grid.START and st != Grid.EXIT:
            self.grid.set_state(r, c, Grid.EXPLORED)

    def _reconstruct_path(self, r: int, c: int):
        grid = self.grid
        idx = r * grid.size + c
        total = 0
        path = []
        while idx != -1:
            pr, pc = divmod(idx, grid.size)
            path.append((pr, pc))
            st = grid.state[idx]
            if st != Grid.START and st != Grid.EXIT:
                grid.state[idx] = Grid.SOLUTION
            total += weight(grid.terrain[idx])
            idx = self.parents[idx]

        path.reverse()
        self.path = path
        self.shortest_path_steps = max(0, len(path) - 1)
        self.total_weight = int(round(total))

        grid.set_state(*grid.start, Grid.START)
        grid.set_state(*grid.exit, Grid.EXIT)
        self._finish(found=True)

    def _finish(self, found: bool):
        self.found = found
        self.status = SolverStatus.FOUND if found else SolverStatus.EXHAUSTED
        if found:
            logger.debug(f"{self.strategy.label}: found exit after {self.steps} steps "
                         f"(path {self.shortest_path_steps}, weight {self.total_weight})")
        else:
            logger.debug(f"{self.strategy.label}: frontier exhausted after {self.steps} steps")
