import unittest

from navalbattle.layouts.builtins import builtin_fleets, find_fleet, reference_fleet
from navalbattle.layouts.definition import FleetDefinition
from navalbattle.layouts.validation import validate_fleet


class FleetValidationTests(unittest.TestCase):
    def test_empty_fleet_reports_errors(self):
        fleet = FleetDefinition("test", "Test", 0, tuple())
        errors = validate_fleet(fleet)
        self.assertIn("board_size must be positive", errors)
        self.assertIn("fleet must define at least one ship", errors)

    def test_invalid_lengths_report_errors(self):
        fleet = FleetDefinition("test", "Test", 5, (0, -2, 6, "3"))
        errors = validate_fleet(fleet)
        self.assertEqual(sum("must have length > 0" in e for e in errors), 2)
        self.assertTrue(any("does not fit a 5x5 board" in e for e in errors))
        self.assertTrue(any("non-integer length" in e for e in errors))

    def test_builtins_are_valid(self):
        for fleet in builtin_fleets():
            self.assertEqual(validate_fleet(fleet), [], fleet.fleet_id)

    def test_reference_fleet(self):
        fleet = reference_fleet()
        self.assertEqual(fleet.board_size, 10)
        self.assertEqual(fleet.lengths, (4, 3, 3, 2, 2, 2, 1, 1, 1, 1))

    def test_hash_depends_on_order(self):
        a = FleetDefinition("f", "F", 10, (1, 2))
        b = FleetDefinition("f", "F", 10, (2, 1))
        self.assertEqual(a.fleet_hash, FleetDefinition("f", "F", 10, (1, 2)).fleet_hash)
        self.assertNotEqual(a.fleet_hash, b.fleet_hash)

    def test_find_fleet(self):
        self.assertEqual(find_fleet("Small").fleet_id, "small")
        with self.assertRaises(ValueError):
            find_fleet("armada")


if __name__ == "__main__":
    unittest.main()
