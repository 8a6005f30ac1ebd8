"""
Basic-color classification: label each color with one of 24 canonical names and
aggregate a palette into BasicColorResult entries (name, confidence, prevalence, example).
"""
from dataclasses import asdict, dataclass
from typing import Any, Optional, Sequence

from .space import hue_distance, rgb_to_hsv

MIN_CONFIDENCE = 0.6


@dataclass(frozen=True)
class BasicColor:
    """
    HSV definition of a named color. hue_range is (start, end) and wraps when start > end;
    None means achromatic. sat/value ranges are (min, max) with max None for open-ended.
    """

    name: str
    hue_range: Optional[tuple[float, float]]
    sat_range: tuple[float, Optional[float]]
    value_range: tuple[float, Optional[float]]


@dataclass(frozen=True)
class BasicColorResult:
    name: str
    confidence: float
    prevalence: float
    example_color: tuple[float, ...]

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["example_color"] = list(self.example_color)
        return out


# Detection order; earlier names win ties.
BASIC_COLORS: dict[str, BasicColor] = {
    c.name: c
    for c in (
        BasicColor("White", None, (0.0, 0.15), (0.85, None)),
        BasicColor("Black", None, (0.0, 0.4), (0.0, 0.2)),
        BasicColor("Gray", None, (0.0, 0.25), (0.2, 0.85)),
        BasicColor("Red", (0.95, 0.05), (0.5, None), (0.3, None)),
        BasicColor("Maroon", (0.93, 0.07), (0.4, None), (0.05, 0.45)),
        BasicColor("Pink", (0.9, 0.99), (0.2, 0.9), (0.65, None)),
        BasicColor("Brown", (0.01, 0.11), (0.3, 0.9), (0.15, 0.65)),
        BasicColor("Orange", (0.02, 0.12), (0.5, None), (0.5, None)),
        BasicColor("Peach", (0.03, 0.12), (0.15, 0.6), (0.65, None)),
        BasicColor("Beige", (0.06, 0.14), (0.05, 0.35), (0.65, None)),
        BasicColor("Yellow", (0.08, 0.2), (0.4, None), (0.7, None)),
        BasicColor("Gold", (0.08, 0.16), (0.6, None), (0.5, 0.95)),
        BasicColor("Olive", (0.1, 0.23), (0.2, 0.8), (0.15, 0.7)),
        BasicColor("Chartreuse", (0.16, 0.28), (0.4, None), (0.4, None)),
        BasicColor("Green", (0.23, 0.43), (0.3, None), (0.15, None)),
        BasicColor("Mint", (0.37, 0.5), (0.15, 0.6), (0.65, None)),
        BasicColor("Teal", (0.44, 0.55), (0.3, None), (0.15, 0.7)),
        BasicColor("Cyan", (0.47, 0.59), (0.3, None), (0.4, None)),
        BasicColor("Azure", (0.54, 0.64), (0.2, None), (0.5, None)),
        BasicColor("Blue", (0.57, 0.75), (0.3, None), (0.2, None)),
        BasicColor("Navy", (0.57, 0.7), (0.3, None), (0.05, 0.35)),
        BasicColor("Purple", (0.7, 0.83), (0.3, None), (0.15, None)),
        BasicColor("Lavender", (0.67, 0.83), (0.05, 0.45), (0.65, None)),
        BasicColor("Magenta", (0.79, 0.95), (0.4, None), (0.2, None)),
    )
}

# (name, h, s, v) anchors for colors no definition matches well
REFERENCE_COLORS: list[tuple[str, float, float, float]] = [
    ("Red", 0.0, 0.8, 0.7),
    ("Maroon", 0.0, 0.8, 0.4),
    ("Pink", 0.95, 0.5, 0.8),
    ("Orange", 0.07, 0.8, 0.8),
    ("Brown", 0.07, 0.6, 0.4),
    ("Yellow", 0.15, 0.8, 0.8),
    ("Olive", 0.15, 0.5, 0.4),
    ("Green", 0.33, 0.8, 0.6),
    ("Teal", 0.5, 0.8, 0.5),
    ("Cyan", 0.5, 0.8, 0.8),
    ("Blue", 0.67, 0.8, 0.6),
    ("Navy", 0.67, 0.8, 0.2),
    ("Purple", 0.75, 0.8, 0.5),
    ("Magenta", 0.85, 0.8, 0.6),
]


def in_hue_range(hue: float, hue_range: Optional[tuple[float, float]]) -> bool:
    if hue_range is None:
        return True
    start, end = hue_range
    if start > end:
        return hue >= start or hue <= end
    return start <= hue <= end


def _centered(x: float, lo: float, hi: float) -> float:
    half = (hi - lo) / 2
    if half <= 0:
        return 1.0
    return max(0.0, min(1.0, 1 - abs(x - (lo + hi) / 2) / half))


def _range_confidence(x: float, bounds: tuple[float, Optional[float]]) -> float:
    lo, hi = bounds
    if hi is not None:
        return _centered(x, lo, hi)
    # Open-ended: ramps from 0.7 at the minimum to 1 at min + 0.09
    return min(1.0, (x - lo) / 0.3 + 0.7)


def _hue_confidence(hue: float, hue_range: Optional[tuple[float, float]]) -> float:
    if hue_range is None:
        return 1.0
    start, end = hue_range
    if start > end:
        center = (start + end + 1) / 2
        if center > 1:
            center -= 1
        width = 1 - start + end
    else:
        center = (start + end) / 2
        width = end - start
    if width <= 0:
        return 1.0
    return max(0.0, min(1.0, 1 - hue_distance(hue, center) / (width / 2)))


def match_confidence(hsv: Sequence[float], basic: BasicColor) -> float:
    """
    How well an HSV color fits a basic color definition: 0 outside any range,
    1 at the center of every range.
    """
    h, s, v = hsv[0], hsv[1], hsv[2]
    if not in_hue_range(h, basic.hue_range):
        return 0.0
    s_lo, s_hi = basic.sat_range
    if s < s_lo or (s_hi is not None and s > s_hi):
        return 0.0
    v_lo, v_hi = basic.value_range
    if v < v_lo or (v_hi is not None and v > v_hi):
        return 0.0

    hue_conf = _hue_confidence(h, basic.hue_range)
    sat_conf = _range_confidence(s, basic.sat_range)
    val_conf = _range_confidence(v, basic.value_range)

    if basic.name == "Maroon":
        return min(hue_conf, sat_conf, val_conf)
    if basic.name == "Purple" and v < 0.3:
        return hue_conf * 0.7 + sat_conf * 0.2 + val_conf * 0.1
    if basic.hue_range is None:
        return sat_conf * 0.5 + val_conf * 0.5
    return hue_conf * 0.6 + sat_conf * 0.2 + val_conf * 0.2


def nearest_basic_color(hsv: Sequence[float]) -> tuple[str, float]:
    """Fallback for colors with no confident match. Confidence is at least 0.5."""
    h, s, v = hsv[0], hsv[1], hsv[2]
    if s < 0.1:
        if v > 0.9:
            return ("White", 0.9)
        if v < 0.15:
            return ("Black", 0.9)
        return ("Gray", 0.8)

    best_name = "Gray"
    best_dist = float("inf")
    for name, ref_h, ref_s, ref_v in REFERENCE_COLORS:
        dist = hue_distance(h, ref_h) * 5 + abs(s - ref_s) * 3 + abs(v - ref_v) * 2
        if dist < best_dist:
            best_dist = dist
            best_name = name
    return (best_name, max(0.5, 1 - best_dist / 5))


def classify_color(color: Sequence[float]) -> tuple[str, float]:
    """Name and confidence for one RGB(A) color."""
    hsv = rgb_to_hsv(color)
    h, s, v = hsv

    # Dark tinted grays read as gray, not maroon or purple
    if v < 0.25 and 0.05 < s < 0.3 and ((0.7 < h < 0.9) or h > 0.95 or h < 0.05):
        return ("Gray", 0.8)
    if (h > 0.95 or h < 0.05) and s > 0.6 and 0.15 <= v <= 0.5:
        return ("Maroon", 0.9)
    if 0.7 <= h <= 0.85 and s > 0.3 and v < 0.4:
        return ("Purple", 0.85)

    best_name = "Gray"
    best_conf = 0.0
    for name, definition in BASIC_COLORS.items():
        conf = match_confidence(hsv, definition)
        if conf > best_conf:
            best_conf = conf
            best_name = name

    if best_conf < MIN_CONFIDENCE:
        return nearest_basic_color(hsv)
    return (best_name, best_conf)


def analyze_basic_colors(colors: Sequence[Sequence[float]]) -> list[BasicColorResult]:
    """
    Classify every color and group by name. Each group reports its best confidence,
    prevalence (share of colors) and the best-matching color. Sorted by prevalence.
    """
    if not colors:
        return []
    groups: dict[str, list[tuple[float, tuple[float, ...]]]] = {}
    for color in colors:
        name, conf = classify_color(color)
        groups.setdefault(name, []).append((conf, tuple(float(c) for c in color)))

    results = []
    for name in BASIC_COLORS:
        matches = groups.get(name)
        if not matches:
            continue
        conf, example = max(matches, key=lambda m: m[0])
        results.append(
            BasicColorResult(
                name=name,
                confidence=conf,
                prevalence=len(matches) / len(colors),
                example_color=example,
            )
        )
    results.sort(key=lambda r: r.prevalence, reverse=True)
    return results


def summarize_basic_colors(colors: Sequence[Sequence[float]]) -> list[BasicColorResult]:
    """
    Palette-level basic colors: results at or above MIN_CONFIDENCE, or the single most
    confident one when none qualifies. Sorted by prevalence, descending.
    """
    results = analyze_basic_colors(colors)
    if not results:
        return []
    kept = [r for r in results if r.confidence >= MIN_CONFIDENCE]
    if not kept:
        kept = [max(results, key=lambda r: r.confidence)]
    return kept
