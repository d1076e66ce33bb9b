import unittest
from unittest import mock
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from jungle_maze.core.config import MazeConfig
from jungle_maze.algo.solvers import SolverType
from jungle_maze.session import MazeSession
from jungle_maze.viz.renderer import Renderer

class TestRendererCadence(unittest.TestCase):
    def setUp(self):
        self.session = MazeSession(MazeConfig(size=21, algo="prim", delay_ms=40, seed=2))
        self.session.regenerate()
        self.renderer = Renderer(self.session)

    def advance_at(self, ms):
        with mock.patch("pygame.time.get_ticks", return_value=ms):
            self.renderer.advance()

    def test_one_step_per_delay(self):
        solver = self.session.start_solve(SolverType.BFS)
        self.renderer.last_step_ms = 0
        self.advance_at(20)
        self.assertEqual(solver.steps, 0)
        self.advance_at(40)
        self.assertEqual(solver.steps, 1)
        # A slow frame catches up on the missed ticks
        self.advance_at(160)
        self.assertEqual(solver.steps, 4)

    def test_resume_does_not_burst(self):
        solver = self.session.start_solve(SolverType.BFS)
        self.renderer.last_step_ms = 0
        self.advance_at(40)
        self.assertEqual(solver.steps, 1)

        self.session.toggle_pause()
        for ms in (1000, 2500, 4040):
            self.advance_at(ms)
        self.assertEqual(solver.steps, 1)

        self.session.toggle_pause()
        self.advance_at(4050)
        self.assertEqual(solver.steps, 1)
        self.advance_at(4080)
        self.assertEqual(solver.steps, 2)

if __name__ == '__main__':
    unittest.main()
