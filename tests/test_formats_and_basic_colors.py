"""
Unit tests for color string formats and basic-color classification.
"""
import sys
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cosine_palettes.color import basic_colors as basic_colors_module
from cosine_palettes.color.basic_colors import (
    BASIC_COLORS,
    MIN_CONFIDENCE,
    BasicColorResult,
    analyze_basic_colors,
    classify_color,
    match_confidence,
    summarize_basic_colors,
)
from cosine_palettes.color.formats import (
    color_to_all_formats,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl_string,
    rgb_to_lch,
    rgb_to_rgb_string,
)


class TestFormats(unittest.TestCase):
    """Color string formats."""

    def test_hex(self):
        """Colors format as lowercase hex, clamped."""
        self.assertEqual(rgb_to_hex((1, 0, 0, 1)), "#ff0000")
        self.assertEqual(rgb_to_hex((0, 0.5, 1)), "#0080ff")
        self.assertEqual(rgb_to_hex((1.2, -0.1, 0)), "#ff0000")

    def test_hex_to_rgb(self):
        """Hex parses in long and short form; junk gives black."""
        self.assertEqual(hex_to_rgb("#00ff00"), (0.0, 1.0, 0.0, 1.0))
        self.assertEqual(hex_to_rgb("0f0"), (0.0, 1.0, 0.0, 1.0))
        self.assertEqual(hex_to_rgb("not a color"), (0.0, 0.0, 0.0, 1.0))

    def test_css_strings(self):
        """rgb(), hsl() and lch() strings match CSS."""
        self.assertEqual(rgb_to_rgb_string((0.5, 0.5, 0.5)), "rgb(128, 128, 128)")
        self.assertEqual(rgb_to_hsl_string((1, 0, 0)), "hsl(0, 100%, 50%)")
        self.assertEqual(rgb_to_hsl_string((0, 0, 1)), "hsl(240, 100%, 50%)")
        lightness, chroma, _ = rgb_to_lch((1, 1, 1))
        self.assertEqual((lightness, chroma), (100, 0))

    def test_all_formats_keys(self):
        """All four formats are produced."""
        formats = color_to_all_formats((0.2, 0.4, 0.6, 1))
        self.assertEqual(set(formats), {"hex", "rgb", "hsl", "lch"})
        self.assertEqual(formats["hex"], "#336699")
        self.assertTrue(formats["lch"].startswith("lch("))


class TestClassifyColor(unittest.TestCase):
    """Per-color basic-color names."""

    def test_there_are_24_names(self):
        """The basic-color table has 24 names."""
        self.assertEqual(len(BASIC_COLORS), 24)

    def test_pure_red(self):
        """Pure red is Red with high confidence."""
        name, conf = classify_color((1, 0, 0, 1))
        self.assertEqual(name, "Red")
        self.assertGreaterEqual(conf, 0.8)

    def test_white(self):
        """Pure white is White."""
        name, conf = classify_color((1, 1, 1, 1))
        self.assertEqual(name, "White")
        self.assertGreaterEqual(conf, MIN_CONFIDENCE)

    def test_black_and_gray(self):
        """Black and mid gray are told apart."""
        self.assertEqual(classify_color((0, 0, 0))[0], "Black")
        self.assertEqual(classify_color((0.5, 0.5, 0.5))[0], "Gray")

    def test_special_cases(self):
        """Dark reds, dark purples and tinted grays get their overrides."""
        # Saturated dark red
        self.assertEqual(classify_color((0.4, 0.02, 0.02)), ("Maroon", 0.9))
        # Dark purple
        self.assertEqual(classify_color((0.2, 0.05, 0.3)), ("Purple", 0.85))
        # Dark, barely tinted red reads as gray
        self.assertEqual(classify_color((0.2, 0.16, 0.16)), ("Gray", 0.8))

    def test_confidence_zero_outside_range(self):
        """Colors outside a name's ranges score zero."""
        self.assertEqual(match_confidence((0.5, 1.0, 1.0), BASIC_COLORS["Red"]), 0.0)
        self.assertEqual(match_confidence((0.0, 0.2, 1.0), BASIC_COLORS["Red"]), 0.0)


class TestPaletteSummary(unittest.TestCase):
    """Palette-level basic-color aggregation."""

    def test_prevalence_sorted_and_best_example(self):
        """Results sort by prevalence with the best example kept."""
        colors = [(1, 0, 0, 1), (0.95, 0.02, 0.02, 1), (1, 1, 1, 1)]
        results = analyze_basic_colors(colors)
        self.assertEqual([r.name for r in results], ["Red", "White"])
        self.assertAlmostEqual(results[0].prevalence, 2 / 3)
        self.assertAlmostEqual(results[1].prevalence, 1 / 3)
        self.assertEqual(results[0].example_color, (1.0, 0.0, 0.0, 1.0))

    def test_summary_filters_low_confidence(self):
        """The summary keeps confident names only."""
        results = summarize_basic_colors([(1, 0, 0, 1), (1, 1, 1, 1)])
        self.assertTrue(results)
        self.assertTrue(all(r.confidence >= MIN_CONFIDENCE for r in results))

    def test_summary_keeps_confidence_at_threshold(self):
        """A name scoring exactly the minimum confidence is kept."""
        at_threshold = BasicColorResult("Teal", MIN_CONFIDENCE, 0.5, (0.0, 0.5, 0.5, 1.0))
        below = BasicColorResult("Olive", MIN_CONFIDENCE - 0.1, 0.5, (0.5, 0.5, 0.0, 1.0))
        with mock.patch.object(basic_colors_module, "analyze_basic_colors", return_value=[at_threshold, below]):
            results = basic_colors_module.summarize_basic_colors([(0.0, 0.5, 0.5, 1.0)])
        self.assertEqual(results, [at_threshold])

    def test_empty_palette(self):
        """An empty palette has no basic colors."""
        self.assertEqual(analyze_basic_colors([]), [])
        self.assertEqual(summarize_basic_colors([]), [])

    def test_to_dict(self):
        """to_dict gives plain lists."""
        result = analyze_basic_colors([(1, 0, 0, 1)])[0]
        data = result.to_dict()
        self.assertEqual(data["name"], "Red")
        self.assertEqual(data["example_color"], [1.0, 0.0, 0.0, 1.0])


if __name__ == "__main__":
    unittest.main()
