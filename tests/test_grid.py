import unittest

from navalbattle.domain.errors import GridFrozenError, InvalidFleetError, OutOfBoundsError
from navalbattle.domain.grid import Grid
from navalbattle.domain.types import CellType


class GridTests(unittest.TestCase):
    def test_new_grid_is_empty(self):
        grid = Grid(10)
        self.assertEqual(grid.count(CellType.EMPTY), 100)
        self.assertEqual(grid.occupied_cells(), [])

    def test_out_of_bounds_access_fails_fast(self):
        grid = Grid(10)
        for x, y in [(-1, 0), (0, -1), (10, 0), (0, 10)]:
            with self.assertRaises(OutOfBoundsError):
                grid.get(x, y)
            with self.assertRaises(IndexError):
                grid.set(x, y, CellType.OCCUPIED)

    def test_zero_size_rejected(self):
        with self.assertRaises(InvalidFleetError):
            Grid(0)

    def test_frozen_grid_is_read_only(self):
        grid = Grid(3)
        grid.set(1, 1, CellType.OCCUPIED)
        grid.freeze()
        self.assertTrue(grid.frozen)
        self.assertEqual(grid.get(1, 1), CellType.OCCUPIED)
        with self.assertRaises(GridFrozenError):
            grid.set(0, 0, CellType.OCCUPIED)

    def test_text_uses_column_row_addressing(self):
        grid = Grid(3)
        grid.set(0, 0, CellType.OCCUPIED)
        grid.set(2, 1, CellType.BLOCKED)
        self.assertEqual(grid.to_text(), "X..\n..o\n...")

    def test_blocked_cells_survive_text_round_trip(self):
        grid = Grid.from_text("o.X\n...\nXo.")
        self.assertEqual(grid.get(0, 0), CellType.BLOCKED)
        self.assertEqual(grid.get(1, 2), CellType.BLOCKED)
        self.assertEqual(grid.get(2, 0), CellType.OCCUPIED)
        self.assertEqual(Grid.from_text(grid.to_text()), grid)

    def test_from_text_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            Grid.from_text("..\n.?")
        with self.assertRaises(ValueError):
            Grid.from_text("...\n..\n...")


if __name__ == "__main__":
    unittest.main()
