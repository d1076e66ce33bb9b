from array import array
from typing import Iterator, Optional, Tuple

from jungle_maze.core.terrain import Terrain

class Grid:
    # Cell states (mutually exclusive)
    PATH     = 0
    WALL     = 1
    EXPLORED = 2
    SOLUTION = 3
    START    = 4
    EXIT     = 5

    # Fixed exploration order: up, down, left, right
    DIRS4 = ((-1, 0), (1, 0), (0, -1), (0, 1))

    # ASCII glyphs for to_text()
    STATE_GLYPHS = {WALL: '#', EXPLORED: 'o', SOLUTION: '*', START: 'S', EXIT: 'E'}
    TERRAIN_GLYPHS = {
        Terrain.DEFAULT: '.',
        Terrain.GRASS: '"',
        Terrain.MUD: '%',
        Terrain.WATER: '~',
    }

    __slots__ = ('size', 'state', 'terrain', 'start', 'exit')

    def __init__(self, size: int):
        # Side is always odd so the junction lattice (odd, odd) reaches the border ring
        self.size = size if size % 2 == 1 else size + 1
        self.reset()

    def reset(self):
        n = self.size * self.size
        # 'B' (unsigned char) -> 1 byte per cell
        self.state = array('B', [self.WALL] * n)
        self.terrain = array('B', [Terrain.DEFAULT] * n)
        self.start: Optional[Tuple[int, int]] = None
        self.exit: Optional[Tuple[int, int]] = None

    def copy(self) -> "Grid":
        other = Grid(self.size)
        other.state = array('B', self.state)
        other.terrain = array('B', self.terrain)
        other.start = self.start
        other.exit = self.exit
        return other

    def get_index(self, r: int, c: int) -> int:
        if 0 <= r < self.size and 0 <= c < self.size:
            return r * self.size + c
        raise IndexError(f"Coordinate ({r}, {c}) out of bounds")

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def is_border(self, r: int, c: int) -> bool:
        return r == 0 or c == 0 or r == self.size - 1 or c == self.size - 1

    def is_interior(self, r: int, c: int) -> bool:
        return 0 < r < self.size - 1 and 0 < c < self.size - 1

    def state_at(self, r: int, c: int) -> int:
        return self.state[r * self.size + c]

    def terrain_at(self, r: int, c: int) -> int:
        return self.terrain[r * self.size + c]

    def set_state(self, r: int, c: int, value: int):
        self.state[self.get_index(r, c)] = value

    def set_terrain(self, r: int, c: int, value: int):
        self.terrain[self.get_index(r, c)] = value

    def is_wall(self, r: int, c: int) -> bool:
        return self.state[r * self.size + c] == self.WALL

    def is_path(self, r: int, c: int) -> bool:
        return self.state[r * self.size + c] == self.PATH

    def open_cell(self, r: int, c: int, terrain: int = Terrain.DEFAULT):
        idx = self.get_index(r, c)
        self.state[idx] = self.PATH
        self.terrain[idx] = terrain

    def set_start(self, r: int, c: int):
        self.start = (r, c)
        self.set_state(r, c, self.START)

    def set_exit(self, r: int, c: int):
        self.exit = (r, c)
        self.set_state(r, c, self.EXIT)

    def neighbors(self, r: int, c: int) -> Iterator[Tuple[int, int]]:
        """
        Yields in-bounds orthogonal neighbours in the fixed order up, down, left, right.
        Does NOT check walls.
        """
        for dr, dc in self.DIRS4:
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                yield nr, nc

    def count_path_neighbors(self, r: int, c: int) -> int:
        return sum(1 for nr, nc in self.neighbors(r, c) if self.is_path(nr, nc))

    def clear_marks(self):
        """Turns Explored/Solution cells back into Path, keeping the maze itself."""
        for i, st in enumerate(self.state):
            if st == self.EXPLORED or st == self.SOLUTION:
                self.state[i] = self.PATH
        if self.start is not None:
            self.set_state(*self.start, self.START)
        if self.exit is not None:
            self.set_state(*self.exit, self.EXIT)

    def open_cells(self) -> Iterator[Tuple[int, int]]:
        for r in range(self.size):
            for c in range(self.size):
                if not self.is_wall(r, c):
                    yield r, c

    def to_text(self) -> str:
        lines = []
        for r in range(self.size):
            row = []
            for c in range(self.size):
                idx = r * self.size + c
                st = self.state[idx]
                if st == self.PATH:
                    row.append(self.TERRAIN_GLYPHS[self.terrain[idx]])
                else:
                    row.append(self.STATE_GLYPHS[st])
            lines.append(''.join(row))
        return '\n'.join(lines)
