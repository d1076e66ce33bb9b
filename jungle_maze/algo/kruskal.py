from typing import Iterator, List, Tuple
from jungle_maze.core.grid import Grid
from jungle_maze.core.union_find import UnionFind
from jungle_maze.algo.base import Generator

# (r1, c1, r2, c2, wall_r, wall_c)
WallEdge = Tuple[int, int, int, int, int, int]

class KruskalsAlgorithm(Generator):
    def run(self) -> Iterator[str]:
        grid = self.grid
        size = grid.size
        grid.reset()

        # Junction lattice: every (odd, odd) cell is a room
        for r in range(1, size, 2):
            for c in range(1, size, 2):
                grid.open_cell(r, c)

        walls: List[WallEdge] = []
        for r in range(1, size, 2):
            for c in range(1, size, 2):
                if c + 2 < size:
                    walls.append((r, c, r, c + 2, r, c + 1))
                if r + 2 < size:
                    walls.append((r, c, r + 2, c, r + 1, c))

        self.rng.shuffle(walls)
        uf = UnionFind(size * size)

        for r1, c1, r2, c2, wr, wc in walls:
            id1 = r1 * size + c1
            id2 = r2 * size + c2
            if not uf.same(id1, id2):
                uf.union(id1, id2)
                grid.open_cell(wr, wc)
                self.step_count += 1
                if self.step_count % 100 == 0:
                    yield f"Edges: {self.step_count}"

        self.assign_terrains()
        yield "Done"
