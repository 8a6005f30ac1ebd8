"""
Warm- and cool-dominant candidates. The dominant channel (red for warm, blue for cool)
gets the highest offset and amplitude; an optional accent shifts the opposite channel's phase.
"""
import math

from ...gradient import CoefficientSet
from ...random_utils import RandomSource
from .common import build, hue_phase, scaled, shifted, triple

WARM_HUES = ((0.95, 1.0), (0.0, 0.05), (0.05, 0.11), (0.11, 0.17), (0.17, 0.2))
COOL_HUES = ((0.3, 0.4), (0.4, 0.55), (0.55, 0.7), (0.7, 0.85))

# name -> (hue range or None for a pick from the bucket list, offset, amplitude,
#          frequency, phase variation, accent: True / False / None for random)
_WARM = {
    "reds": ((0.98, 1.02), (0.4, 0.6), (0.25, 0.4), (0.4, 0.8), 0.1, False),
    "oranges": ((0.05, 0.09), (0.45, 0.65), (0.25, 0.45), (0.5, 0.9), 0.15, None),
    "yellows": ((0.12, 0.17), (0.5, 0.7), (0.2, 0.35), (0.4, 0.7), 0.2, None),
    "bucket": (None, (0.4, 0.65), (0.25, 0.45), (0.6, 1.0), 0.25, None),
    "sunset": ((0.03, 0.15), (0.35, 0.6), (0.3, 0.5), (0.7, 1.1), 0.3, True),
}
_COOL = {
    "blues": ((0.6, 0.68), (0.4, 0.6), (0.25, 0.4), (0.4, 0.8), 0.1, False),
    "teals": ((0.5, 0.58), (0.45, 0.65), (0.25, 0.45), (0.5, 0.9), 0.15, None),
    "purples": ((0.7, 0.85), (0.5, 0.7), (0.2, 0.35), (0.4, 0.7), 0.2, None),
    "bucket": (None, (0.4, 0.65), (0.25, 0.45), (0.6, 1.0), 0.25, None),
    "ocean": ((0.55, 0.7), (0.35, 0.6), (0.3, 0.5), (0.7, 1.1), 0.3, True),
}


def _pick(rng: RandomSource, table: dict, buckets: tuple):
    hue_range, offset, amplitude, frequency, variation, accent = table[rng.choice(list(table))]
    if hue_range is None:
        hue_range = rng.choice(buckets)
    if accent is None:
        accent = rng.random() > 0.3
    return rng.in_range(hue_range), offset, amplitude, frequency, variation, accent


def _accent(rng: RandomSource, enabled: bool) -> float:
    return math.pi / 2 + rng.uniform(0, math.pi / 2) if enabled else 0.0


def generate_warm(rng: RandomSource) -> CoefficientSet:
    hue, offset, amplitude, frequency, variation, accent = _pick(rng, _WARM, WARM_HUES)
    base_phase = hue_phase(hue)
    a = [rng.in_range(offset), rng.in_range(shifted(offset, -0.1)), rng.in_range(shifted(offset, -0.15))]
    b = [rng.in_range(amplitude) * 1.2, rng.in_range(amplitude), rng.in_range(scaled(amplitude, 0.7))]
    d = [
        base_phase,
        base_phase + rng.jitter(variation),
        base_phase + _accent(rng, accent) + rng.jitter(variation),
    ]
    return build(a, b, triple(rng, frequency), d)


def generate_cool(rng: RandomSource) -> CoefficientSet:
    hue, offset, amplitude, frequency, variation, accent = _pick(rng, _COOL, COOL_HUES)
    base_phase = hue_phase(hue)
    a = [rng.in_range(shifted(offset, -0.15)), rng.in_range(shifted(offset, -0.05)), rng.in_range(offset)]
    b = [rng.in_range(scaled(amplitude, 0.7)), rng.in_range(amplitude), rng.in_range(amplitude) * 1.2]
    d = [
        base_phase + _accent(rng, accent) + rng.jitter(variation),
        base_phase + rng.jitter(variation),
        base_phase,
    ]
    return build(a, b, triple(rng, frequency), d)
