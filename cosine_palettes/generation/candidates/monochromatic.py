"""Monochromatic candidates: one hue, near-identical channel phases, low frequency."""
from ...gradient import CoefficientSet
from ...random_utils import RandomSource
from .common import build, hue_phase


def generate_monochromatic(rng: RandomSource) -> CoefficientSet:
    base_phase = hue_phase(rng.random())
    phase_variance = rng.uniform(0, 0.05)
    # Balanced amplitudes keep the hue stable across the ramp
    amplitude = rng.uniform(0.15, 0.45)

    if rng.chance(0.5):
        offset_base, offset_range = 0.5, 0.15
    else:
        offset_base, offset_range = 0.45, 0.1

    a = [offset_base + rng.uniform(0, offset_range) for _ in range(3)]
    b = [
        amplitude,
        amplitude * rng.uniform(0.95, 1.0),
        amplitude * rng.uniform(0.95, 1.0),
    ]
    c = [rng.uniform(0.1, 0.3) for _ in range(3)]
    d = [
        base_phase,
        base_phase + rng.jitter(phase_variance),
        base_phase + rng.jitter(phase_variance),
    ]
    return build(a, b, c, d)
