from dataclasses import dataclass, replace
from typing import Optional

MIN_SIZE = 5
MIN_DELAY_MS = 5
MAX_DELAY_MS = 500

@dataclass
class MazeConfig:
    size: int = 21
    algo: str = "prim"            # prim | kruskal
    loop_fraction: float = 0.08   # share of interior walls knocked out
    extra_ways: int = 0           # walls opened between two corridors
    solver: str = "bfs"           # bfs | dfs | dijkstra | astar
    delay_ms: int = 40            # viewer cadence between step() calls
    seed: Optional[int] = None

    def normalized(self) -> "MazeConfig":
        """Returns a copy with out-of-range values coerced instead of rejected."""
        size = max(int(self.size), MIN_SIZE)
        if size % 2 == 0:
            size += 1
        return replace(
            self,
            size=size,
            algo=self.algo.strip().lower(),
            loop_fraction=min(max(float(self.loop_fraction), 0.0), 1.0),
            extra_ways=max(int(self.extra_ways), 0),
            solver=self.solver.strip().lower(),
            delay_ms=min(max(int(self.delay_ms), MIN_DELAY_MS), MAX_DELAY_MS),
        )
