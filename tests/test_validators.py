"""
Unit tests for the general gate and the per-category palette validators.
"""
import math
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cosine_palettes.generation.candidates.common import build
from cosine_palettes.generation.validators import (
    CATEGORY_VALIDATORS,
    validate_all,
    validate_analogous,
    validate_bright,
    validate_complementary,
    validate_cool,
    validate_dark,
    validate_earthy,
    validate_general,
    validate_monochromatic,
    validate_neon,
    validate_neutral,
    validate_pastel,
    validate_random,
    validate_split_complementary,
    validate_tetradic,
    validate_warm,
)
from cosine_palettes.gradient import evaluate

# Same amplitude and phase on every channel: one hue, falling value
MONO = build(a=(0.6, 0.5, 0.4), b=(0.3, 0.3, 0.3), c=(0.5, 0.5, 0.5), d=(0.0, 0.0, 0.0))
# Phases at 0, 2pi/3, 4pi/3 with a large amplitude
SPREAD = build(
    a=(0.5, 0.5, 0.5),
    b=(0.5, 0.5, 0.5),
    c=(1.0, 1.0, 1.0),
    d=(0.0, 2 * math.pi / 3, 4 * math.pi / 3),
)
RAINBOW = build(a=(0.5, 0.5, 0.5), b=(0.5, 0.5, 0.5), c=(1.0, 1.0, 1.0), d=(0.0, 1 / 3, 2 / 3))

# Fully saturated hue stops: red 0, yellow-green 0.25, cyan 0.5, violet 0.75
RED = (1.0, 0.0, 0.0, 1.0)
CHARTREUSE = (0.5, 1.0, 0.0, 1.0)
CYAN = (0.0, 1.0, 1.0, 1.0)
VIOLET = (0.5, 0.0, 1.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)
YELLOW = (1.0, 1.0, 0.0, 1.0)
WARM = [(0.9, 0.3, 0.1, 1.0), (0.95, 0.6, 0.2, 1.0), (0.8, 0.2, 0.2, 1.0), (1.0, 0.8, 0.3, 1.0)]
COOL = [(0.1, 0.3, 0.9, 1.0), (0.2, 0.6, 0.8, 1.0), (0.1, 0.7, 0.5, 1.0), (0.3, 0.3, 0.9, 1.0)]


class TestGeneralGate(unittest.TestCase):
    """Distance, luma and saturation checks shared by every category."""

    def test_identical_colors_fail(self):
        """Identical colors fail the distance check."""
        colors = [(0.4, 0.5, 0.6, 1.0)] * 5
        self.assertFalse(validate_general(colors))
        self.assertFalse(validate_general(colors, explicit_modifiers=True))

    def test_accepts_balanced_palette(self):
        """Well-spread palettes pass the gate."""
        self.assertTrue(validate_general(evaluate(MONO, 5)))
        self.assertTrue(validate_general(evaluate(RAINBOW, 6)))

    def test_brightness_check_skipped_with_explicit_modifiers(self):
        """Explicit modifiers skip the luma and saturation band."""
        grays = [(1.0, 1.0, 1.0, 1.0), (0.9, 0.9, 0.9, 1.0), (0.8, 0.8, 0.8, 1.0)]
        self.assertFalse(validate_general(grays))
        self.assertTrue(validate_general(grays, explicit_modifiers=True))

    def test_min_distance_is_configurable(self):
        """The delta-E threshold can be lowered."""
        close = [(0.50, 0.50, 0.50, 1.0), (0.52, 0.52, 0.52, 1.0)]
        self.assertFalse(validate_general(close, min_color_distance=5.0, explicit_modifiers=True))
        self.assertTrue(validate_general(close, min_color_distance=0.5, explicit_modifiers=True))


class TestMonochromatic(unittest.TestCase):
    """Single-hue palettes."""

    def test_accepts_single_hue_ramp(self):
        """A single-hue value ramp passes."""
        for steps in (5, 6):
            self.assertTrue(validate_monochromatic(evaluate(MONO, steps)), steps)

    def test_rejects_full_wheel_spread(self):
        """Hues spread around the wheel fail."""
        self.assertFalse(validate_monochromatic(evaluate(SPREAD, 6)))
        self.assertFalse(validate_monochromatic(evaluate(RAINBOW, 6)))

    def test_rejects_flat_values(self):
        """Too little value range fails."""
        colors = [(0.6, 0.3, 0.3, 1.0), (0.6, 0.4, 0.4, 1.0), (0.6, 0.5, 0.5, 1.0)]
        self.assertFalse(validate_monochromatic(colors))

    def test_empty(self):
        """An empty palette fails."""
        self.assertFalse(validate_monochromatic([]))


class TestPastel(unittest.TestCase):
    """Light, soft palettes."""

    def test_strict_pass(self):
        """Light, soft colors pass the strict band."""
        colors = [(1.0, 0.8, 0.8, 1.0), (0.8, 0.9, 1.0, 1.0), (0.85, 1.0, 0.85, 1.0)]
        self.assertTrue(validate_pastel(colors))

    def test_relaxed_pass(self):
        """Slightly darker pastels pass the relaxed band."""
        # Value 0.75 misses the strict band but makes the relaxed one
        colors = [(0.75, 0.6, 0.6, 1.0), (0.6, 0.68, 0.75, 1.0), (0.65, 0.75, 0.65, 1.0)]
        self.assertTrue(validate_pastel(colors))

    def test_saturated_or_dark_fail(self):
        """Saturated or dark colors fail."""
        self.assertFalse(validate_pastel([(1.0, 0.0, 0.0, 1.0), (0.0, 0.0, 1.0, 1.0)]))
        self.assertFalse(validate_pastel([(0.3, 0.25, 0.25, 1.0), (0.2, 0.25, 0.3, 1.0)]))


class TestEarthy(unittest.TestCase):
    """Browns, tans and olives."""

    def test_browns_and_olives_pass(self):
        """Browns and olives pass."""
        colors = [
            (0.55, 0.4, 0.3, 1.0),
            (0.45, 0.33, 0.22, 1.0),
            (0.6, 0.5, 0.35, 1.0),
            (0.35, 0.45, 0.3, 1.0),
            (0.5, 0.42, 0.3, 1.0),
        ]
        self.assertTrue(validate_earthy(colors))

    def test_blues_fail(self):
        """Blues fail."""
        colors = [(0.2, 0.3, 0.8, 1.0), (0.1, 0.2, 0.6, 1.0), (0.3, 0.5, 0.9, 1.0)]
        self.assertFalse(validate_earthy(colors))


class TestHarmony(unittest.TestCase):
    """Hue-relationship categories, checked on hand-picked saturated palettes."""

    def test_complementary(self):
        """Red against cyan passes; a palette of reds does not."""
        self.assertTrue(validate_complementary([RED, (0.8, 0.0, 0.0, 1.0), CYAN, (0.0, 0.8, 0.8, 1.0)]))
        self.assertFalse(validate_complementary([RED, (1.0, 0.2, 0.0, 1.0), (0.8, 0.0, 0.0, 1.0)]))
        self.assertFalse(validate_complementary([RED, CYAN]))

    def test_split_complementary(self):
        """Blue with yellows beside its complement passes; a direct complement does not."""
        # Hues 0.14 and 0.22 sit one bin either side of yellow-orange at 1/6
        colors = [BLUE, (0.0, 0.0, 0.8, 1.0), (1.0, 0.84, 0.0, 1.0), (0.68, 1.0, 0.0, 1.0)]
        self.assertTrue(validate_split_complementary(colors))
        self.assertFalse(validate_split_complementary([RED, (0.8, 0.0, 0.0, 1.0), CYAN, (0.0, 0.8, 0.8, 1.0)]))

    def test_analogous(self):
        """Neighboring cyans pass; red, green and blue do not."""
        colors = [CYAN, (0.0, 0.8, 0.8, 1.0), (0.0, 1.0, 0.76, 1.0), (0.0, 0.64, 1.0, 1.0)]
        self.assertTrue(validate_analogous(colors))
        self.assertFalse(validate_analogous([RED, GREEN, BLUE]))

    def test_tetradic(self):
        """Four hues a quarter turn apart pass; uneven spacing does not."""
        self.assertTrue(validate_tetradic([RED, CHARTREUSE, CYAN, VIOLET]))
        self.assertFalse(validate_tetradic([RED, YELLOW, GREEN, CYAN]))
        self.assertFalse(validate_tetradic([RED, CHARTREUSE, CYAN]))


class TestOtherCategories(unittest.TestCase):
    """Temperature, intensity and composition checks."""

    def test_random_always_valid(self):
        """Random accepts anything."""
        self.assertTrue(validate_random([]))
        self.assertTrue(validate_random([(0, 0, 0, 1)]))

    def test_warm(self):
        """Reds and oranges pass; blues do not."""
        self.assertTrue(validate_warm(WARM))
        self.assertFalse(validate_warm(COOL))

    def test_cool(self):
        """Blues and teals pass; reds and oranges do not."""
        self.assertTrue(validate_cool(COOL))
        self.assertFalse(validate_cool(WARM))
        # Too few colors carry a temperature
        self.assertFalse(validate_cool([COOL[0], (0.5, 0.5, 0.5, 1.0), (0.6, 0.6, 0.6, 1.0)]))

    def test_neon(self):
        """Vivid electric hues pass; grays and muted tones do not."""
        self.assertTrue(validate_neon([(1.0, 0.0, 1.0, 1.0), CYAN, (0.2, 1.0, 0.0, 1.0), RED]))
        self.assertFalse(validate_neon([(0.3, 0.3, 0.3, 1.0), (0.5, 0.5, 0.5, 1.0), (0.7, 0.7, 0.7, 1.0)]))
        self.assertFalse(validate_neon([(0.5, 0.4, 0.3, 1.0), (0.4, 0.45, 0.5, 1.0), (0.6, 0.55, 0.5, 1.0)]))
        self.assertFalse(validate_neon([]))

    def test_neutral(self):
        """Grays pass; primaries do not."""
        grays = [(0.3, 0.3, 0.3, 1.0), (0.5, 0.48, 0.46, 1.0), (0.7, 0.7, 0.68, 1.0)]
        self.assertTrue(validate_neutral(grays))
        self.assertFalse(validate_neutral([(1.0, 0.0, 0.0, 1.0), (0.0, 0.0, 1.0, 1.0)]))

    def test_bright_and_dark_are_opposites(self):
        """Bright and dark palettes pass only their own check."""
        bright = [(1.0, 0.6, 0.3, 1.0), (0.4, 0.8, 1.0, 1.0), (0.9, 0.9, 0.3, 1.0), (0.6, 1.0, 0.6, 1.0)]
        dark = [(0.25, 0.05, 0.05, 1.0), (0.1, 0.1, 0.2, 1.0), (0.05, 0.2, 0.1, 1.0), (0.15, 0.1, 0.05, 1.0)]
        self.assertTrue(validate_bright(bright))
        self.assertFalse(validate_dark(bright))
        self.assertTrue(validate_dark(dark))
        self.assertFalse(validate_bright(dark))

    def test_every_category_has_a_validator(self):
        """One validator per category."""
        self.assertEqual(len(CATEGORY_VALIDATORS), 14)

    def test_validate_all_is_and(self):
        """Validators combine with AND."""
        colors = evaluate(MONO, 5)
        self.assertTrue(validate_all(colors, [validate_random, validate_monochromatic]))
        self.assertFalse(validate_all(colors, [validate_random, lambda c: False]))
        self.assertTrue(validate_all(colors, []))


if __name__ == "__main__":
    unittest.main()
