"""
Unit tests for config loading, structured logging and the injectable random source.
"""
import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cosine_palettes.config import load_config, resolve_generation_config
from cosine_palettes.log_utils import log_structured
from cosine_palettes.random_utils import RandomSource, ensure_source


class TestConfig(unittest.TestCase):
    """YAML loading and generation settings."""

    def test_default_file(self):
        """The shipped YAML gives the built-in defaults."""
        config = load_config()
        gen = resolve_generation_config(config)
        self.assertEqual(gen["max_attempts"], 10000)
        self.assertEqual(gen["min_color_distance"], 5.0)
        self.assertEqual(gen["default_category"], "Random")
        self.assertEqual(config["logging"]["level"], "INFO")

    def test_missing_file_falls_back_to_defaults(self):
        """A missing file falls back to in-code defaults."""
        config = load_config(Path("/nonexistent/palettes.yaml"))
        self.assertEqual(resolve_generation_config(config)["max_attempts"], 10000)

    def test_partial_file_is_merged(self):
        """A partial file merges over the defaults."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "custom.yaml"
            path.write_text("generation:\n  max_attempts: 50\n", encoding="utf-8")
            config = load_config(path)
        gen = resolve_generation_config(config)
        self.assertEqual(gen["max_attempts"], 50)
        self.assertEqual(gen["min_color_distance"], 5.0)
        self.assertIn("logging", config)

    def test_invalid_values_fall_back(self):
        """Invalid values fall back to defaults."""
        gen = resolve_generation_config(
            {"generation": {"max_attempts": "lots", "min_color_distance": None, "batch_max_attempts": "x"}}
        )
        self.assertEqual(gen["max_attempts"], 10000)
        self.assertEqual(gen["min_color_distance"], 5.0)
        self.assertIsNone(gen["batch_max_attempts"])
        self.assertEqual(resolve_generation_config(None)["default_steps"], 7)


class TestLogStructured(unittest.TestCase):
    """JSON-line event logging."""

    def test_emits_json_line(self):
        """Events log as one JSON object."""
        with self.assertLogs("cosine_palettes.log_utils", level=logging.INFO) as logs:
            log_structured("info", event="generate_palettes", produced=2)
        record = json.loads(logs.records[0].getMessage())
        self.assertEqual(record["event"], "generate_palettes")
        self.assertEqual(record["produced"], 2)

    def test_warning_level(self):
        """The level name selects the log level."""
        with self.assertLogs("cosine_palettes.log_utils", level=logging.WARNING) as logs:
            log_structured("warning", event="x")
        self.assertEqual(logs.records[0].levelno, logging.WARNING)


class TestRandomSource(unittest.TestCase):
    """Seeded and system randomness."""

    def test_seeded_sequences_repeat(self):
        """Same seed, same sequence."""
        a, b = RandomSource(5), RandomSource(5)
        self.assertEqual([a.random() for _ in range(5)], [b.random() for _ in range(5)])

    def test_ranges(self):
        """Helpers stay inside their ranges."""
        rng = RandomSource(1)
        for _ in range(200):
            self.assertTrue(0.2 <= rng.uniform(0.2, 0.4) < 0.4)
            self.assertTrue(-0.05 <= rng.jitter(0.1) < 0.05)
            self.assertIn(rng.randint(3), (0, 1, 2))
        with self.assertRaises(IndexError):
            rng.choice([])

    def test_ensure_source(self):
        """ensure_source passes sources through and seeds ints."""
        rng = RandomSource(3)
        self.assertIs(ensure_source(rng), rng)
        self.assertEqual(ensure_source(3).random(), RandomSource(3).random())
        self.assertIsInstance(ensure_source(None), RandomSource)


if __name__ == "__main__":
    unittest.main()
