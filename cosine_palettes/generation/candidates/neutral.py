"""Neutral candidates: tiny amplitudes around gray with a faint warm or cool tint."""
from ...gradient import CoefficientSet
from ...random_utils import RandomSource
from .common import build, hue_phase, triple

# (hue range, offset, amplitude, frequency, phase variation)
_NEUTRAL = {
    "gray": ((0.0, 1.0), (0.3, 0.7), (0.01, 0.08), (0.2, 0.4), 0.01),
    "warm-gray": ((0.08, 0.16), (0.5, 0.75), (0.05, 0.15), (0.2, 0.5), 0.05),
    "cool-gray": ((0.55, 0.7), (0.4, 0.65), (0.05, 0.15), (0.2, 0.5), 0.05),
    "taupe": ((0.05, 0.12), (0.35, 0.6), (0.1, 0.2), (0.2, 0.4), 0.05),
    "tinted": ((0.0, 1.0), (0.4, 0.65), (0.1, 0.2), (0.3, 0.5), 0.1),
}


def generate_neutral(rng: RandomSource) -> CoefficientSet:
    hue_range, offset, amplitude, frequency, variation = _NEUTRAL[rng.choice(list(_NEUTRAL))]
    base_phase = hue_phase(rng.in_range(hue_range))

    amp = rng.in_range(amplitude)
    freq = rng.in_range(frequency)
    return build(
        triple(rng, offset),
        [amp, amp + rng.jitter(amp * 0.2), amp + rng.jitter(amp * 0.2)],
        [freq, freq + rng.jitter(freq * 0.1), freq + rng.jitter(freq * 0.1)],
        [base_phase, base_phase + rng.jitter(variation), base_phase + rng.jitter(variation)],
    )
