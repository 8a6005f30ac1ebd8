"""
Palette validators. Each takes the evaluated colors of one candidate and returns a bool.
The general gate runs for every category; category validators are AND-composed.
"""
from itertools import combinations
from typing import Callable, Iterable, Sequence

import numpy as np

from ..color.space import (
    has_distinct_pair,
    hue_distance,
    hue_histogram,
    is_cool,
    is_warm,
    palette_brightness,
    palette_hsv,
)
from ..gradient import Color

Validator = Callable[[Sequence[Color]], bool]


def _in_bands(hue: float, bands: Iterable[tuple[float, float]]) -> bool:
    return any(lo <= hue <= hi for lo, hi in bands)


def _share(mask: np.ndarray) -> float:
    return float(mask.sum()) / len(mask) if len(mask) else 0.0


# --- General gate ---


def validate_general(
    colors: Sequence[Color],
    min_color_distance: float = 5.0,
    explicit_modifiers: bool = False,
) -> bool:
    """
    Requires at least one color pair with delta-E above min_color_distance. Without
    caller-supplied modifiers, also requires luma within an adaptive band and enough
    mean saturation; both relax for palettes with high dynamic range.
    """
    if not has_distinct_pair(colors, min_color_distance):
        return False
    if explicit_modifiers:
        return True

    min_luma, max_luma = 0.15, 0.85
    min_saturation = 0.2

    luma = palette_brightness(colors)
    darkest = float(luma.min())
    brightest = float(luma.max())
    dynamic = brightest - darkest
    mean_sat = float(palette_hsv(colors)[:, 1].mean())

    if dynamic > 0.4:
        min_luma, max_luma = 0.1, 0.9
    if dynamic > 0.5 and mean_sat < min_saturation:
        min_saturation = 0.15
    if darkest < min_luma and mean_sat > 0.4:
        min_luma = 0.05

    if darkest < min_luma or brightest > max_luma:
        return False
    return mean_sat >= min_saturation


# --- Core categories ---


def validate_monochromatic(colors: Sequence[Color]) -> bool:
    """Single hue (within 0.05 of the most saturated color) with smooth value variation."""
    hsv = palette_hsv(colors)
    if len(hsv) == 0:
        return False
    values = hsv[:, 2]
    sats = hsv[:, 1]

    if values.max() - values.min() < 0.2:
        return False
    if (values < 0.15).sum() > 1 or (values > 0.9).sum() > 1:
        return False

    saturated = hsv[sats > 0.15]
    if len(saturated) < 2:
        return False
    reference_hue = hsv[int(np.argmax(sats)), 0]
    if max(hue_distance(h, reference_hue) for h in saturated[:, 0]) > 0.05:
        return False

    if sats.max() - sats.min() < 0.1:
        return False

    steps = np.diff(np.sort(values))
    return bool(np.all(steps <= 0.3))


PASTEL_STRICT = {"min_value": 0.8, "sat": (0.1, 0.5), "share": 0.7}
PASTEL_RELAXED = {"min_value": 0.7, "sat": (0.05, 0.6), "share": 0.6}


def validate_pastel(colors: Sequence[Color]) -> bool:
    """High value, low-to-medium saturation; strict pass first, then relaxed."""
    hsv = palette_hsv(colors)
    if len(hsv) == 0:
        return False
    for rule in (PASTEL_STRICT, PASTEL_RELAXED):
        lo, hi = rule["sat"]
        mask = (hsv[:, 2] > rule["min_value"]) & (hsv[:, 1] >= lo) & (hsv[:, 1] <= hi)
        if _share(mask) >= rule["share"]:
            return True
    return False


EARTHY_HUES = ((0.02, 0.12), (0.10, 0.15), (0.26, 0.40))
EARTHY_HUES_RELAXED = ((0.01, 0.15), (0.08, 0.17), (0.2, 0.45))


def validate_earthy(colors: Sequence[Color]) -> bool:
    """Browns, tans, olives: ≥80% in the strict bands, else ≥70% in the widened ones."""
    hsv = palette_hsv(colors)
    if len(hsv) == 0:
        return False
    n = len(hsv)

    strict = sum(
        1
        for h, s, v in hsv
        if 0.1 < v < 0.9 and 0.1 < s < 0.7 and _in_bands(h, EARTHY_HUES)
    )
    if strict / n >= 0.8:
        return True

    relaxed = sum(
        1
        for h, s, v in hsv
        if 0.08 <= v <= 0.95 and 0.08 <= s <= 0.85 and _in_bands(h, EARTHY_HUES_RELAXED)
    )
    return relaxed / n >= 0.7


def validate_random(colors: Sequence[Color]) -> bool:
    return True


# --- Harmony categories ---


def _complementary_hues(h1: float, h2: float, tolerance: float = 0.1) -> bool:
    return bool(abs(hue_distance(h1, h2) - 0.5) <= tolerance)


def validate_complementary(colors: Sequence[Color]) -> bool:
    """Two opposite hue regions each carrying real weight."""
    if len(colors) < 3:
        return False
    hsv = palette_hsv(colors)
    saturated = hsv[hsv[:, 1] > 0.2]
    if len(saturated) < 2:
        return False

    segments = hue_histogram(hsv, 12)
    for i in range(6):
        j = i + 6
        region1 = segments[i] + 0.5 * (segments[(i + 1) % 12] + segments[(i + 11) % 12])
        region2 = segments[j] + 0.5 * (segments[(j + 1) % 12] + segments[(j + 11) % 12])
        if region1 > 0.15 and region2 > 0.15 and region1 + region2 > 0.6:
            return True

    # Pairwise fallback: weight of colors near each of a complementary pair
    for a, b in combinations(saturated, 2):
        if not _complementary_hues(a[0], b[0]):
            continue
        weight1 = sum(s * v for h, s, v in saturated if hue_distance(h, a[0]) < 0.1)
        weight2 = sum(s * v for h, s, v in saturated if hue_distance(h, b[0]) < 0.1)
        if weight1 > 0.2 and weight2 > 0.2:
            return True
    return False


def validate_split_complementary(colors: Sequence[Color]) -> bool:
    """A dominant hue plus weight beside (not at) its complement."""
    if len(colors) < 3:
        return False
    hsv = palette_hsv(colors)
    if (hsv[:, 1] > 0.2).sum() < 3:
        return False

    segments = hue_histogram(hsv, 24)
    main = int(np.argmax(segments))
    main_weight = segments[main]
    if main_weight < 0.15:
        return False

    comp = (main + 12) % 24
    near = segments[(comp + 1) % 24] + segments[(comp - 1) % 24]
    far = segments[(comp + 2) % 24] + segments[(comp - 2) % 24]
    return bool((near > 0.1 or far > 0.1) and main_weight > 0.2)


def _analogous_spread(hues: Sequence[float]) -> float:
    ordered = sorted(hues)
    return min(ordered[-1] - ordered[0], 1 - ordered[-1] + ordered[0])


def validate_analogous(colors: Sequence[Color]) -> bool:
    """Neighboring hues clustered around a dominant one."""
    if len(colors) < 3:
        return False
    hsv = palette_hsv(colors)
    if (hsv[:, 1] > 0.2).sum() < 3:
        return False

    segments = hue_histogram(hsv, 24)
    main = int(np.argmax(segments))
    neighbors = [
        offset
        for offset in range(-4, 5)
        if offset != 0 and segments[(main + offset) % 24] > 0.05
    ]
    if len(neighbors) >= 2 and segments[main] > 0.2:
        return True

    vivid = [h for h, s, v in hsv if s > 0.3 and v > 0.3]
    return bool(len(vivid) >= 3 and _analogous_spread(vivid) <= 0.22)


def _tetradic_hues(hues: Sequence[float], tolerance: float = 0.08) -> bool:
    ordered = sorted(hues)
    gaps = sorted(
        (ordered[(i + 1) % len(ordered)] - ordered[i]) % 1.0 for i in range(len(ordered))
    )
    return bool(
        abs(gaps[0] - gaps[1]) <= tolerance
        and abs(gaps[2] - gaps[3]) <= tolerance
        and abs(sum(gaps) - 1.0) <= tolerance
    )


def validate_tetradic(colors: Sequence[Color]) -> bool:
    """Four hue peaks forming two complementary pairs."""
    if len(colors) < 4:
        return False
    hsv = palette_hsv(colors)
    if (hsv[:, 1] > 0.2).sum() < 4:
        return False

    segments = hue_histogram(hsv, 36)
    peaks = [i for i in np.argsort(-segments, kind="stable") if segments[i] > 0.08]
    if len(peaks) < 4:
        return False
    if _tetradic_hues([p / 36 for p in peaks[:4]]):
        return True
    if len(peaks) >= 6:
        hues = [p / 36 for p in peaks[:6]]
        return any(_tetradic_hues(combo) for combo in combinations(hues, 4))
    return False


# --- Temperature ---


def _temperature_counts(colors: Sequence[Color]) -> tuple[int, int]:
    warm = cool = 0
    for hsv in palette_hsv(colors):
        if hsv[2] < 0.1:
            continue
        if is_warm(hsv):
            warm += 1
        elif is_cool(hsv):
            cool += 1
    return warm, cool


def validate_warm(colors: Sequence[Color]) -> bool:
    """Warm hues dominate the colors that have a temperature."""
    warm, cool = _temperature_counts(colors)
    meaningful = warm + cool
    if meaningful == 0 or meaningful < len(colors) * 0.5:
        return False
    ratio = warm / meaningful
    return ratio >= 0.65 or (ratio >= 0.55 and cool >= 1)


def validate_cool(colors: Sequence[Color]) -> bool:
    """Cool hues dominate the colors that have a temperature."""
    warm, cool = _temperature_counts(colors)
    meaningful = warm + cool
    if meaningful == 0 or meaningful < len(colors) * 0.5:
        return False
    if warm > cool:
        return False
    ratio = cool / meaningful
    return ratio >= 0.65 or (ratio >= 0.55 and warm >= 1)


# --- Intensity ---

NEON_HUES = ((0.45, 0.65), (0.75, 0.95), (0.25, 0.43), (0.0, 0.05))


def validate_neon(colors: Sequence[Color]) -> bool:
    """Many vivid colors, or enough vivid colors with strong value contrast."""
    hsv = palette_hsv(colors)
    n = len(hsv)
    if n == 0:
        return False
    vibrant = neon = 0
    for h, s, v in hsv:
        if s > 0.5 and v > 0.6:
            vibrant += 1
            if _in_bands(h, NEON_HUES) or (s > 0.7 and v > 0.7):
                neon += 1
    if neon / n >= 0.3 and vibrant / n >= 0.5:
        return True
    contrast = hsv[:, 2].max() - hsv[:, 2].min()
    return bool(vibrant / n >= 0.4 and contrast > 0.4)


def validate_neutral(colors: Sequence[Color]) -> bool:
    """Mostly low saturation with little hue spread."""
    hsv = palette_hsv(colors)
    n = len(hsv)
    if n == 0:
        return False
    low_sat = neutral = 0
    hues = []
    for h, s, v in hsv:
        if s < 0.25:
            low_sat += 1
            if s < 0.15 or 0.2 < v < 0.85:
                neutral += 1
        if s > 0.1:
            hues.append(h)
    spread = max((hue_distance(a, b) for a, b in combinations(hues, 2)), default=0.0)
    return low_sat / n >= 0.7 and neutral / n >= 0.5 and (len(hues) < 3 or spread < 0.25)


def validate_bright(colors: Sequence[Color]) -> bool:
    """High value with color, not washed out to white."""
    hsv = palette_hsv(colors)
    n = len(hsv)
    if n == 0:
        return False
    high = hsv[:, 2] >= 0.55
    white = high & (hsv[:, 2] >= 0.9) & (hsv[:, 1] < 0.1)
    colorful = high & (hsv[:, 1] >= 0.1)
    return bool(high.sum() / n >= 0.7 and white.sum() / n <= 0.3 and colorful.sum() / n >= 0.5)


def validate_dark(colors: Sequence[Color]) -> bool:
    """Low value overall with at least one rich color."""
    hsv = palette_hsv(colors)
    n = len(hsv)
    if n == 0:
        return False
    values = hsv[:, 2]
    low_share = (values <= 0.4).sum() / n
    too_bright = (values > 0.7).sum() > n * 0.1
    rich = bool(np.any((hsv[:, 1] > 0.4) & (values > 0.15)))
    return bool(low_share >= 0.75 and values.mean() <= 0.35 and not too_bright and rich)


CATEGORY_VALIDATORS: dict[str, Validator] = {
    "Monochromatic": validate_monochromatic,
    "Pastel": validate_pastel,
    "Earthy": validate_earthy,
    "Random": validate_random,
    "Complementary": validate_complementary,
    "SplitComplementary": validate_split_complementary,
    "Analogous": validate_analogous,
    "Tetradic": validate_tetradic,
    "Warm": validate_warm,
    "Cool": validate_cool,
    "Neon": validate_neon,
    "Neutral": validate_neutral,
    "Bright": validate_bright,
    "Dark": validate_dark,
}


def validate_all(colors: Sequence[Color], validators: Iterable[Validator]) -> bool:
    """AND over every validator; short-circuits on the first rejection."""
    return all(v(colors) for v in validators)
