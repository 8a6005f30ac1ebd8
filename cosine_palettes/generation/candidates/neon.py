"""Neon candidates: high amplitudes on bright offsets, with themed or distributed hues."""
from ...gradient import TAU, CoefficientSet
from ...random_utils import RandomSource
from .common import build, hue_phase, triple

_CYBERPUNK = (0.5, 0.65, 0.85)
_VAPORWAVE = (0.83, 0.5, 0.75)


def generate_neon(rng: RandomSource) -> CoefficientSet:
    strategy = rng.randint(4)
    if strategy == 0:
        hue = rng.random()
        offset, amplitude, frequency, variation, distribute = (0.5, 0.7), (0.4, 0.6), (0.15, 0.3), 0.03, False
    elif strategy == 1:
        hue = rng.choice(_CYBERPUNK)
        offset, amplitude, frequency, variation, distribute = (0.3, 0.5), (0.5, 0.7), (0.4, 0.7), 0.2, True
    elif strategy == 2:
        hue = rng.choice(_VAPORWAVE)
        offset, amplitude, frequency, variation, distribute = (0.6, 0.8), (0.3, 0.5), (0.6, 0.9), 0.15, True
    else:
        hue = 0.0
        offset, amplitude, frequency, variation, distribute = (0.4, 0.6), (0.4, 0.6), (0.2, 0.4), 0.1, True

    a = triple(rng, offset)
    b = triple(rng, amplitude)
    c = triple(rng, frequency)
    if distribute and strategy == 3:
        d = [0.0, TAU / 3, 2 * TAU / 3]
    elif distribute:
        d = [hue_phase(hue), hue_phase((hue + 0.33) % 1), hue_phase((hue + 0.67) % 1)]
    else:
        base = hue_phase(hue)
        d = [base, base + rng.jitter(variation), base + rng.jitter(variation)]
    return build(a, b, c, d)
