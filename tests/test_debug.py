import os
import tempfile
import unittest

from navalbattle.domain.errors import GenerationFailed
from navalbattle.generation.generator import generate_with_retries, new_rng
from navalbattle.layouts.definition import FleetDefinition
from navalbattle.utils import debug


class DebugLogTests(unittest.TestCase):
    def setUp(self):
        self._saved = (debug.DEBUG_ENABLED, debug.DEBUG_LOG_PATH)
        self._tmp = tempfile.TemporaryDirectory()
        debug.DEBUG_LOG_PATH = os.path.join(self._tmp.name, "debug.log")

    def tearDown(self):
        debug.DEBUG_ENABLED, debug.DEBUG_LOG_PATH = self._saved
        self._tmp.cleanup()

    def test_disabled_by_default_writes_nothing(self):
        debug.DEBUG_ENABLED = False
        debug.debug_log("quiet")
        self.assertFalse(os.path.exists(debug.DEBUG_LOG_PATH))

    def test_failed_attempts_are_logged(self):
        debug.DEBUG_ENABLED = True
        fleet = FleetDefinition("tiny", "Tiny", 2, (1, 1))
        with self.assertRaises(GenerationFailed):
            generate_with_retries(fleet, new_rng(0), max_attempts=3)
        with open(debug.DEBUG_LOG_PATH, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("tiny: attempt 3/3 failed", lines[-1])

    def test_env_flag(self):
        self.assertTrue(debug.env_debug_enabled({"NAVALBATTLE_DEBUG": "yes"}))
        self.assertFalse(debug.env_debug_enabled({"NAVALBATTLE_DEBUG": "0"}))
        self.assertFalse(debug.env_debug_enabled({}))


if __name__ == "__main__":
    unittest.main()
