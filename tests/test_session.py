import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from jungle_maze.core.config import MazeConfig
from jungle_maze.core.grid import Grid
from jungle_maze.algo.solvers import SolverType
from jungle_maze.session import MazeSession, SessionBusyError

class TestSession(unittest.TestCase):
    def make_session(self, **kwargs):
        params = dict(size=15, algo="kruskal", seed=4)
        params.update(kwargs)
        session = MazeSession(MazeConfig(**params))
        session.regenerate()
        return session

    def run_to_end(self, session):
        ticks = 0
        while not session.tick():
            ticks += 1
        return ticks

    def test_solve_cycle(self):
        session = self.make_session(solver="astar")
        solver = session.start_solve()
        self.assertIs(solver.strategy, SolverType.ASTAR)
        self.assertTrue(session.solving)

        self.run_to_end(session)

        self.assertFalse(session.solving)
        self.assertTrue(solver.found)
        self.assertTrue(session.status.startswith("FOUND"))
        self.assertIn(f"Weight: {solver.total_weight}", session.status)

    def test_generate_blocked_while_solving(self):
        session = self.make_session()
        grid = session.grid
        session.start_solve(SolverType.BFS)
        with self.assertRaises(SessionBusyError):
            session.regenerate()
        with self.assertRaises(SessionBusyError):
            session.reset_visuals()
        with self.assertRaises(SessionBusyError):
            session.start_solve(SolverType.DFS)
        self.assertIs(session.grid, grid)

    def test_pause_withholds_steps(self):
        session = self.make_session()
        solver = session.start_solve(SolverType.DIJKSTRA)
        session.tick()
        steps = solver.steps
        self.assertTrue(session.toggle_pause())
        for _ in range(10):
            self.assertFalse(session.tick())
        self.assertEqual(solver.steps, steps)
        self.assertFalse(session.toggle_pause())
        session.tick()
        self.assertEqual(solver.steps, steps + 1)

    def test_new_solve_clears_previous_marks(self):
        session = self.make_session()
        session.start_solve(SolverType.BFS)
        self.run_to_end(session)
        self.assertIn(Grid.SOLUTION, session.grid.state)

        session.reset_visuals()
        self.assertNotIn(Grid.SOLUTION, session.grid.state)
        self.assertNotIn(Grid.EXPLORED, session.grid.state)

        solver = session.start_solve(SolverType.DFS)
        self.assertNotIn(Grid.EXPLORED, session.grid.state)
        self.assertEqual(solver.steps, 0)

    def test_regenerate_replaces_grid(self):
        session = self.make_session()
        first = session.grid
        session.regenerate()
        self.assertIsNot(session.grid, first)
        self.assertIsNone(session.solver)

    def test_tick_without_solver(self):
        session = self.make_session()
        self.assertTrue(session.tick())

    def test_no_path_message(self):
        session = self.make_session()
        grid = session.grid
        # Wall in the exit's only neighbour
        er, ec = grid.exit
        for nr, nc in grid.neighbors(er, ec):
            if not grid.is_wall(nr, nc):
                grid.set_state(nr, nc, Grid.WALL)
        session.start_solve(SolverType.BFS)
        self.run_to_end(session)
        self.assertEqual(session.status, "No path")

if __name__ == '__main__':
    unittest.main()
