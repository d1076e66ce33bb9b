import unittest
import sys
import os

# Add project root to path so we can import jungle_maze
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from jungle_maze.core.grid import Grid
from jungle_maze.core.terrain import Terrain

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        grid = Grid(11)
        self.assertEqual(grid.size, 11)
        self.assertEqual(len(grid.state), 11 * 11)
        self.assertTrue(all(st == Grid.WALL for st in grid.state))
        self.assertTrue(all(t == Terrain.DEFAULT for t in grid.terrain))
        self.assertIsNone(grid.start)
        self.assertIsNone(grid.exit)

    def test_even_size_forced_odd(self):
        self.assertEqual(Grid(10).size, 11)
        self.assertEqual(Grid(4).size, 5)
        self.assertEqual(len(Grid(4).state), 25)

    def test_coordinates(self):
        grid = Grid(5)
        self.assertEqual(grid.get_index(2, 3), 13) # 2 * 5 + 3

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)

    def test_border_and_interior(self):
        grid = Grid(5)
        self.assertTrue(grid.is_border(0, 2))
        self.assertTrue(grid.is_border(2, 4))
        self.assertFalse(grid.is_border(1, 1))
        self.assertTrue(grid.is_interior(3, 3))
        self.assertFalse(grid.is_interior(4, 3))

    def test_neighbor_order(self):
        grid = Grid(5)
        # up, down, left, right
        self.assertEqual(list(grid.neighbors(2, 2)), [(1, 2), (3, 2), (2, 1), (2, 3)])
        # Corner only has down and right
        self.assertEqual(list(grid.neighbors(0, 0)), [(1, 0), (0, 1)])

    def test_open_cell(self):
        grid = Grid(5)
        grid.open_cell(1, 1, Terrain.MUD)
        self.assertTrue(grid.is_path(1, 1))
        self.assertEqual(grid.terrain_at(1, 1), Terrain.MUD)
        self.assertEqual(grid.count_path_neighbors(1, 2), 1)

    def test_clear_marks(self):
        grid = Grid(5)
        for r in range(1, 4):
            grid.open_cell(r, 1)
        grid.open_cell(0, 1)
        grid.open_cell(4, 1)
        grid.set_start(0, 1)
        grid.set_exit(4, 1)
        grid.set_state(1, 1, Grid.EXPLORED)
        grid.set_state(2, 1, Grid.SOLUTION)
        # Clobbered endpoints get restored
        grid.set_state(4, 1, Grid.SOLUTION)

        grid.clear_marks()

        self.assertEqual(grid.state_at(1, 1), Grid.PATH)
        self.assertEqual(grid.state_at(2, 1), Grid.PATH)
        self.assertEqual(grid.state_at(0, 1), Grid.START)
        self.assertEqual(grid.state_at(4, 1), Grid.EXIT)
        self.assertEqual(grid.state_at(2, 2), Grid.WALL)

    def test_copy_is_independent(self):
        grid = Grid(5)
        grid.open_cell(1, 1)
        clone = grid.copy()
        clone.open_cell(1, 2)
        self.assertTrue(grid.is_wall(1, 2))
        self.assertEqual(clone.state_at(1, 1), Grid.PATH)

    def test_to_text(self):
        grid = Grid(3)
        grid.open_cell(1, 1, Terrain.WATER)
        grid.open_cell(0, 1)
        grid.set_start(0, 1)
        self.assertEqual(grid.to_text(), "#S#\n#~#\n###")

if __name__ == '__main__':
    unittest.main()
