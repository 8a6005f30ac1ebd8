"""
Color space analysis: RGB <-> HSV, RGB -> Lab, delta-E, warm/cool classification.
Scalar functions take 0-1 RGB(A) tuples; palette_* helpers return numpy arrays for the
validators. All hues are normalized to [0, 1).
"""
import math
from typing import Sequence

import numpy as np

# sRGB (D65) -> XYZ
_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)
# D65 reference white
_WHITE = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

_LAB_DELTA = 6.0 / 29.0

# Saturation below this is neutral: neither warm nor cool
NEUTRAL_SATURATION = 0.15


def rgb_to_hsv(rgb: Sequence[float]) -> tuple[float, float, float]:
    """Hexagonal HSV. Achromatic colors get hue 0."""
    r, g, b = float(rgb[0]), float(rgb[1]), float(rgb[2])
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    s = 0.0 if cmax == 0 else delta / cmax
    v = cmax
    if delta == 0:
        return (0.0, s, v)
    if cmax == r:
        h = ((g - b) / delta) % 6
    elif cmax == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    h = (h * 60.0) % 360.0
    return (h / 360.0, s, v)


def hsv_to_rgb(hsv: Sequence[float]) -> tuple[float, float, float, float]:
    """Inverse of rgb_to_hsv; returns RGBA with alpha 1."""
    h, s, v = float(hsv[0]), float(hsv[1]), float(hsv[2])
    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    sector = int(i) % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q
    return (r, g, b, 1.0)


def _srgb_to_linear(c: np.ndarray) -> np.ndarray:
    return np.where(c > 0.04045, ((c + 0.055) / 1.055) ** 2.4, c / 12.92)


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(
        t > _LAB_DELTA ** 3,
        np.cbrt(t),
        t / (3 * _LAB_DELTA ** 2) + 4.0 / 29.0,
    )


def palette_lab(colors: Sequence[Sequence[float]]) -> np.ndarray:
    """(N, 3) array of L, a, b for N RGB(A) colors."""
    if len(colors) == 0:
        return np.zeros((0, 3), dtype=np.float64)
    rgb = np.array([c[:3] for c in colors], dtype=np.float64)
    linear = _srgb_to_linear(rgb)
    xyz = linear @ _RGB_TO_XYZ.T
    f = _lab_f(xyz / _WHITE)
    lightness = 116.0 * f[:, 1] - 16.0
    a = 500.0 * (f[:, 0] - f[:, 1])
    b = 200.0 * (f[:, 1] - f[:, 2])
    return np.stack([lightness, a, b], axis=-1)


def rgb_to_lab(rgb: Sequence[float]) -> tuple[float, float, float]:
    """sRGB (0-1) -> CIE Lab (D65)."""
    lab = palette_lab([rgb])[0]
    return (float(lab[0]), float(lab[1]), float(lab[2]))


def delta_e(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """Euclidean distance in Lab (CIE76, unweighted)."""
    return math.sqrt(
        (lab1[0] - lab2[0]) ** 2 + (lab1[1] - lab2[1]) ** 2 + (lab1[2] - lab2[2]) ** 2
    )


def color_distance(rgb1: Sequence[float], rgb2: Sequence[float]) -> float:
    """delta-E between two RGB colors."""
    return delta_e(rgb_to_lab(rgb1), rgb_to_lab(rgb2))


def pairwise_delta_e(colors: Sequence[Sequence[float]]) -> np.ndarray:
    """(N, N) symmetric matrix of delta-E between every color pair."""
    lab = palette_lab(colors)
    diff = lab[:, None, :] - lab[None, :, :]
    return np.sqrt((diff * diff).sum(axis=-1))


def has_distinct_pair(colors: Sequence[Sequence[float]], min_distance: float) -> bool:
    """True if at least one color pair is further apart than min_distance."""
    if len(colors) < 2:
        return False
    dist = pairwise_delta_e(colors)
    upper = dist[np.triu_indices(len(colors), k=1)]
    return bool(np.any(upper > min_distance))


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance between two hues in [0, 1); at most 0.5."""
    d = abs(h1 - h2) % 1.0
    return 1.0 - d if d > 0.5 else d


def brightness(color: Sequence[float]) -> float:
    """Perceived brightness (Rec. 601 luma)."""
    return 0.299 * color[0] + 0.587 * color[1] + 0.114 * color[2]


def saturation(color: Sequence[float]) -> float:
    return rgb_to_hsv(color)[1]


def value(color: Sequence[float]) -> float:
    return rgb_to_hsv(color)[2]


def palette_hsv(colors: Sequence[Sequence[float]]) -> np.ndarray:
    """(N, 3) array of h, s, v."""
    if len(colors) == 0:
        return np.zeros((0, 3), dtype=np.float64)
    return np.array([rgb_to_hsv(c) for c in colors], dtype=np.float64)


def palette_brightness(colors: Sequence[Sequence[float]]) -> np.ndarray:
    rgb = np.array([c[:3] for c in colors], dtype=np.float64).reshape(-1, 3)
    return 0.299 * rgb[:, 0] + 0.587 * rgb[:, 1] + 0.114 * rgb[:, 2]


def is_warm_hue(hue: float) -> bool:
    """Reds, oranges, yellows, yellow-greens and red-purples: [0.8, 1] ∪ [0, 0.2]."""
    return hue >= 0.95 or hue <= 0.2 or (0.8 <= hue < 0.95)


def is_cool_hue(hue: float) -> bool:
    """Greens, teals, blues, blue-purples: [0.3, 0.8]."""
    return 0.3 <= hue <= 0.8


def is_warm(hsv: Sequence[float]) -> bool:
    """Warm HSV color; low-saturation colors are neutral."""
    if hsv[1] < NEUTRAL_SATURATION:
        return False
    return is_warm_hue(hsv[0])


def is_cool(hsv: Sequence[float]) -> bool:
    """Cool HSV color; low-saturation colors are neutral."""
    if hsv[1] < NEUTRAL_SATURATION:
        return False
    return is_cool_hue(hsv[0])


def is_warm_color(color: Sequence[float]) -> bool:
    return is_warm(rgb_to_hsv(color))


def is_cool_color(color: Sequence[float]) -> bool:
    return is_cool(rgb_to_hsv(color))


def hue_histogram(hsv: np.ndarray, bins: int, min_saturation: float = 0.2) -> np.ndarray:
    """
    Hue histogram of saturated colors, each weighted by saturation * value and normalized
    to sum 1. All zeros when no color is saturated enough.
    """
    hist = np.zeros(bins, dtype=np.float64)
    if len(hsv) == 0:
        return hist
    mask = hsv[:, 1] > min_saturation
    sat = hsv[mask]
    if len(sat) == 0:
        return hist
    segments = np.floor(sat[:, 0] * bins).astype(int) % bins
    np.add.at(hist, segments, sat[:, 1] * sat[:, 2])
    total = hist.sum()
    if total > 0:
        hist /= total
    return hist


def min_pairwise_delta_e(colors: Sequence[Sequence[float]]) -> float:
    """Smallest delta-E between any two colors; 0 for fewer than two colors."""
    if len(colors) < 2:
        return 0.0
    dist = pairwise_delta_e(colors)
    return float(dist[np.triu_indices(len(colors), k=1)].min())
