import json
import os
import tempfile
import unittest

from navalbattle.domain.grid import Grid
from navalbattle.generation.generator import generate_boards, generate_with_retries, new_rng
from navalbattle.layouts.builtins import reference_fleet
from navalbattle.persistence.boards_store import append_board, deserialize_board, load_boards
from navalbattle.persistence.stats import GenerationStats


class BoardsStoreTests(unittest.TestCase):
    def test_boards_append_and_reload(self):
        fleet = reference_fleet()
        rng = new_rng(21)
        first = generate_with_retries(fleet, rng).grid
        second = generate_with_retries(fleet, rng).grid
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "boards.json")
            append_board(first, fleet, 21, "coin_flip", path)
            append_board(second, fleet, None, "uniform", path)

            boards = load_boards(path)
            self.assertEqual(len(boards), 2)
            self.assertEqual(boards[0].grid, first)
            self.assertEqual(boards[0].seed, 21)
            self.assertEqual(boards[1].grid, second)
            self.assertIsNone(boards[1].seed)
            self.assertEqual(boards[1].strategy, "uniform")
            self.assertEqual(boards[0].fleet_hash, fleet.fleet_hash)
            self.assertFalse(os.path.exists(f"{path}.tmp"))

    def test_each_saved_board_rebuilds_from_its_seed(self):
        fleet = reference_fleet()
        boards = generate_boards(fleet, 5, 2)
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "boards.json")
            for seed, outcome in boards:
                append_board(outcome.grid, fleet, seed, "coin_flip", path)

            saved = load_boards(path)
            self.assertEqual(len(saved), 2)
            self.assertNotEqual(saved[0].seed, saved[1].seed)
            for board in saved:
                rebuilt = generate_with_retries(fleet, new_rng(board.seed)).grid
                self.assertEqual(rebuilt, board.grid)

    def test_unreadable_payloads_load_as_empty(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "boards.json")
            self.assertEqual(load_boards(path), [])
            with open(path, "w") as handle:
                handle.write("{not json")
            self.assertEqual(load_boards(path), [])
            with open(path, "w") as handle:
                json.dump(["legacy", "list"], handle)
            self.assertEqual(load_boards(path), [])

    def test_deserialize_skips_bad_entries(self):
        self.assertIsNone(deserialize_board({"fleet_id": "reference", "rows": ["X?"]}))
        self.assertIsNone(deserialize_board({"rows": [".."]}))
        self.assertIsNone(deserialize_board({"fleet_id": "x", "rows": ["..", ".."], "board_size": 3}))
        board = deserialize_board({"fleet_id": "x", "rows": ["X.", ".."], "seed": 4})
        self.assertEqual(board.grid, Grid.from_text("X.\n.."))


class GenerationStatsTests(unittest.TestCase):
    def test_record_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "stats.json")
            stats = GenerationStats(path)
            self.assertEqual(stats.summary_text(), "Attempts: 0, Boards: 0, Success rate: N/A")
            stats.record("coin_flip", 3, True)
            stats.record("uniform", 1, True)
            stats.record("coin_flip", 5, False)
            stats.save()

            reloaded = GenerationStats(path)
            self.assertEqual(reloaded.attempts, 9)
            self.assertEqual(reloaded.successes, 2)
            self.assertEqual(reloaded.failures, 7)
            self.assertEqual(reloaded.per_strategy["coin_flip"], {"attempts": 8, "successes": 1})
            self.assertIn("Success rate: 22.2%", reloaded.summary_text())


if __name__ == "__main__":
    unittest.main()
