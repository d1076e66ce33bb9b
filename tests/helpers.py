import heapq
import os
import sys
from collections import deque

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from jungle_maze.core.grid import Grid
from jungle_maze.core.terrain import Terrain, weight

GLYPHS = {
    '.': (Grid.PATH, Terrain.DEFAULT),
    '"': (Grid.PATH, Terrain.GRASS),
    '%': (Grid.PATH, Terrain.MUD),
    '~': (Grid.PATH, Terrain.WATER),
}

def grid_from_text(text: str) -> Grid:
    """Builds a grid from rows of '#', '.', '"', '%', '~', 'S', 'E' (same glyphs as Grid.to_text)."""
    rows = [line.strip() for line in text.strip().splitlines()]
    grid = Grid(len(rows))
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == '#':
                continue
            if ch == 'S':
                grid.open_cell(r, c)
                grid.set_start(r, c)
            elif ch == 'E':
                grid.open_cell(r, c)
                grid.set_exit(r, c)
            else:
                state, terrain = GLYPHS[ch]
                grid.open_cell(r, c, terrain)
    return grid

def bfs_distance(grid: Grid):
    """Reference unweighted shortest path length Start -> Exit, or None."""
    dist = {grid.start: 0}
    queue = deque([grid.start])
    while queue:
        cell = queue.popleft()
        if cell == grid.exit:
            return dist[cell]
        for n in grid.neighbors(*cell):
            if n not in dist and not grid.is_wall(*n):
                dist[n] = dist[cell] + 1
                queue.append(n)
    return None

def dijkstra_weight(grid: Grid):
    """Reference minimal path weight Start -> Exit, both endpoints included, or None."""
    sr, sc = grid.start
    best = {grid.start: weight(grid.terrain_at(sr, sc))}
    heap = [(best[grid.start], grid.start)]
    while heap:
        d, cell = heapq.heappop(heap)
        if d > best[cell]:
            continue
        if cell == grid.exit:
            return d
        for n in grid.neighbors(*cell):
            if grid.is_wall(*n):
                continue
            nd = d + weight(grid.terrain_at(*n))
            if n not in best or nd < best[n]:
                best[n] = nd
                heapq.heappush(heap, (nd, n))
    return None
