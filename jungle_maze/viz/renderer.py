import logging

import numpy as np
import pygame

from jungle_maze.core.grid import Grid
from jungle_maze.core.terrain import Terrain
from jungle_maze.algo.solvers import SolverType
from jungle_maze.session import MazeSession, SessionBusyError
from jungle_maze.viz.recorder import VideoRecorder

logger = logging.getLogger(__name__)

# Indexed by terrain code
TERRAIN_COLORS = np.array([
    (238, 230, 212),  # default (cream stone)
    (90, 160, 70),    # grass
    (85, 75, 45),     # mud
    (55, 140, 200),   # water
], dtype=np.uint8)

COLOR_BG = (16, 48, 20)
COLOR_WALL = (79, 79, 79)
COLOR_EXPLORED = (246, 61, 61)
COLOR_SOLUTION = (255, 30, 30)
COLOR_START = (30, 140, 60)
COLOR_EXIT = (160, 95, 50)
COLOR_HUD = (255, 235, 90)

STRATEGY_KEYS = {
    pygame.K_1: SolverType.BFS,
    pygame.K_2: SolverType.DFS,
    pygame.K_3: SolverType.DIJKSTRA,
    pygame.K_4: SolverType.ASTAR,
}

def grid_to_rgb(grid: Grid) -> np.ndarray:
    """(size, size, 3) image of the grid, one pixel per cell."""
    n = grid.size
    state = np.frombuffer(grid.state, dtype=np.uint8).reshape(n, n)
    terrain = np.frombuffer(grid.terrain, dtype=np.uint8).reshape(n, n)

    rgb = TERRAIN_COLORS[terrain].copy()
    rgb[state == Grid.WALL] = COLOR_WALL
    # Explored tinted at roughly half opacity, like an overlay
    explored = state == Grid.EXPLORED
    rgb[explored] = (rgb[explored].astype(np.uint16) + COLOR_EXPLORED) // 2
    rgb[state == Grid.SOLUTION] = COLOR_SOLUTION
    return rgb

class Renderer:
    def __init__(self, session: MazeSession, block_size=22, padding=20, record=False):
        self.session = session
        self.block_size = block_size
        self.padding = padding
        self.strategy = SolverType.from_name(session.config.solver)
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.last_step_ms = 0

    def window_size(self):
        side = self.session.grid.size * self.block_size + self.padding * 2
        return side, side + 24 # HUD line

    def init_window(self):
        pygame.init()
        if self.session.grid is None:
            self.session.regenerate()
        pygame.display.set_caption("Jungle Maze - Generator & Solver")
        self.surface = pygame.display.set_mode(self.window_size())
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 14)

    def regenerate(self):
        self.session.regenerate()
        # Grid size may have changed
        self.surface = pygame.display.set_mode(self.window_size())

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                try:
                    self.handle_key(event.key)
                except SessionBusyError as e:
                    logger.warning(str(e))
                    self.session.status = str(e)

    def handle_key(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_g:
            self.regenerate()
        elif key == pygame.K_s:
            self.session.start_solve(self.strategy)
            self.last_step_ms = pygame.time.get_ticks()
        elif key == pygame.K_SPACE:
            self.session.toggle_pause()
        elif key == pygame.K_r:
            self.session.reset_visuals()
        elif key in STRATEGY_KEYS:
            self.strategy = STRATEGY_KEYS[key]
            if not self.session.solving:
                self.session.status = f"Solver: {self.strategy.label}"

    def advance(self):
        # Cadence: one step() per delay_ms, catching up if frames were slow
        if not self.session.solving:
            return
        if self.session.paused:
            # Time spent paused is not owed to the solver on resume
            self.last_step_ms = pygame.time.get_ticks()
            return
        now = pygame.time.get_ticks()
        delay = self.session.config.delay_ms
        while self.session.solving and now - self.last_step_ms >= delay:
            self.last_step_ms += delay
            self.session.tick()

    def draw_grid(self):
        grid = self.session.grid
        self.surface.fill(COLOR_BG)

        side = grid.size * self.block_size
        # surfarray expects (width, height, 3), i.e. columns first
        cells = pygame.surfarray.make_surface(grid_to_rgb(grid).swapaxes(0, 1))
        self.surface.blit(pygame.transform.scale(cells, (side, side)), (self.padding, self.padding))

        # Cell outlines
        for i in range(grid.size + 1):
            offset = self.padding + i * self.block_size
            pygame.draw.line(self.surface, (0, 0, 0), (self.padding, offset), (self.padding + side, offset))
            pygame.draw.line(self.surface, (0, 0, 0), (offset, self.padding), (offset, self.padding + side))

        s = self.block_size
        if grid.start is not None:
            r, c = grid.start
            center = (self.padding + c * s + s // 2, self.padding + r * s + s // 2)
            pygame.draw.circle(self.surface, COLOR_START, center, int(s * 0.28))
        if grid.exit is not None:
            r, c = grid.exit
            pad = max(2, s // 8)
            rect = (self.padding + c * s + pad, self.padding + r * s + pad, s - pad * 2, s - pad * 2)
            pygame.draw.rect(self.surface, COLOR_EXIT, rect, border_radius=3)

    def draw_hud(self):
        text = f"[{self.strategy.label}] {self.session.status}"
        lbl = self.font.render(text, True, COLOR_HUD)
        self.surface.blit(lbl, (self.padding, self.surface.get_height() - 24))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.advance()

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(60)

        self.recorder.stop()
        pygame.quit()
