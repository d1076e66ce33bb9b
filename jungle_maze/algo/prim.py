from typing import Iterator, List, Set, Tuple
from jungle_maze.core.grid import Grid
from jungle_maze.algo.base import Generator

class PrimsAlgorithm(Generator):
    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng
        grid.reset()

        start_r, start_c = 1, 1
        grid.open_cell(start_r, start_c)

        # Frontier: wall cells touching the carved region.
        # List for O(1) random pick, set for duplicate checks.
        frontier_list: List[Tuple[int, int]] = []
        frontier_set: Set[Tuple[int, int]] = set()

        def add_walls(r, c):
            for wr, wc in grid.neighbors(r, c):
                # Border ring stays closed; only Start/Exit open it later
                if not grid.is_interior(wr, wc):
                    continue
                if grid.is_wall(wr, wc) and (wr, wc) not in frontier_set:
                    frontier_set.add((wr, wc))
                    frontier_list.append((wr, wc))

        add_walls(start_r, start_c)

        while frontier_list:
            idx = rng.randrange(len(frontier_list))
            # Swap remove for O(1)
            wr, wc = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.discard((wr, wc))

            path_count = 0
            pr = pc = -1
            for nr, nc in grid.neighbors(wr, wc):
                if grid.is_path(nr, nc):
                    path_count += 1
                    pr, pc = nr, nc

            # Zero or several carved neighbours: opening would isolate or loop
            if path_count != 1:
                continue

            grid.open_cell(wr, wc)
            # Step once more away from the carved neighbour
            br, bc = wr + (wr - pr), wc + (wc - pc)
            if grid.in_bounds(br, bc) and grid.is_wall(br, bc):
                grid.open_cell(br, bc)
                add_walls(br, bc)

            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Frontier: {len(frontier_list)}"

        self.assign_terrains()
        yield "Done"
