import random
import unittest

from navalbattle.domain.grid import Grid
from navalbattle.domain.types import CellType, Orientation
from navalbattle.generation.selector import coin_flip_selector, get_selector, uniform_selector


class FixedRandom(random.Random):
    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def _grid_with_blocked_middle_column() -> Grid:
    # Only vertical 3-cell placements remain: columns 0 and 2.
    grid = Grid(3)
    for y in range(3):
        grid.set(1, y, CellType.BLOCKED)
    return grid


class CoinFlipSelectorTests(unittest.TestCase):
    def test_empty_orientation_is_not_retried(self):
        grid = _grid_with_blocked_middle_column()
        selection = coin_flip_selector(grid, 3, FixedRandom(0.1))
        self.assertIsNone(selection.ship)
        self.assertEqual(selection.orientation, Orientation.HORIZONTAL)
        self.assertEqual(selection.candidates, 0)

    def test_other_orientation_finds_a_ship(self):
        grid = _grid_with_blocked_middle_column()
        selection = coin_flip_selector(grid, 3, FixedRandom(0.9))
        self.assertIsNotNone(selection.ship)
        self.assertEqual(selection.ship.shape.orientation, Orientation.VERTICAL)
        self.assertIn((selection.ship.x, selection.ship.y), [(0, 0), (2, 0)])
        self.assertEqual(selection.candidates, 2)

    def test_seeded_selection_is_reproducible(self):
        first = coin_flip_selector(Grid(10), 4, random.Random(42))
        second = coin_flip_selector(Grid(10), 4, random.Random(42))
        self.assertEqual(first, second)


class UniformSelectorTests(unittest.TestCase):
    def test_uses_either_orientation(self):
        grid = _grid_with_blocked_middle_column()
        for seed in range(5):
            selection = uniform_selector(grid, 3, random.Random(seed))
            self.assertIsNotNone(selection.ship)
            self.assertEqual(selection.ship.shape.orientation, Orientation.VERTICAL)
            self.assertEqual(selection.candidates, 2)

    def test_single_cells_counted_once(self):
        selection = uniform_selector(Grid(3), 1, random.Random(0))
        self.assertEqual(selection.candidates, 9)

    def test_no_placement_at_all(self):
        grid = Grid(2)
        grid.set(0, 0, CellType.OCCUPIED)
        selection = uniform_selector(grid, 1, random.Random(0))
        self.assertIsNone(selection.ship)
        self.assertIsNone(selection.orientation)


class SelectorRegistryTests(unittest.TestCase):
    def test_lookup(self):
        self.assertIs(get_selector("coin_flip"), coin_flip_selector)
        self.assertIs(get_selector(" Uniform "), uniform_selector)
        with self.assertRaises(ValueError):
            get_selector("greedy")


if __name__ == "__main__":
    unittest.main()
