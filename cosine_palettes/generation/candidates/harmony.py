"""
Color-wheel harmony candidates: complementary, split-complementary, analogous, tetradic.
Each places the channel phases at the harmony's hues over a mid-gray offset.
"""
import math

from ...gradient import TAU, CoefficientSet
from ...random_utils import RandomSource
from .common import balanced_offset, build, hue_phase


def _amplitudes(rng: RandomSource, amplitude: float) -> list[float]:
    return [amplitude, amplitude * rng.uniform(0.9, 1.1), amplitude * rng.uniform(0.9, 1.1)]


def generate_complementary(rng: RandomSource) -> CoefficientSet:
    base_hue = rng.random()
    base_phase = hue_phase(base_hue)
    comp_phase = hue_phase((base_hue + 0.5) % 1)
    balance = rng.uniform(-0.3, 0.3)
    amplitude = rng.uniform(0.25, 0.4)
    frequency = rng.uniform(0.5, 1.0)
    phase_variance = rng.uniform(0, 0.1)
    freq_variance = rng.uniform(0, 0.2)

    return build(
        balanced_offset(balance),
        _amplitudes(rng, amplitude),
        [frequency, frequency * (1 + freq_variance), frequency * (1 - freq_variance)],
        [
            base_phase + balance * 0.2,
            comp_phase + rng.jitter(phase_variance),
            # Orthogonal third channel
            base_phase + rng.jitter(phase_variance) + math.pi / 2,
        ],
    )


def generate_split_complementary(rng: RandomSource) -> CoefficientSet:
    base_hue = rng.random()
    comp_hue = (base_hue + 0.5) % 1
    split = rng.uniform(0.08, 0.12)  # ~30 degrees either side of the complement
    balance = rng.uniform(-0.2, 0.2)
    amplitude = rng.uniform(0.25, 0.45)
    frequency = rng.uniform(0.6, 1.2)
    phase_variance = rng.uniform(0, 0.1)
    freq_variance = rng.uniform(0, 0.2)

    return build(
        balanced_offset(balance),
        _amplitudes(rng, amplitude),
        [frequency, frequency * (1 + freq_variance), frequency * (1 - freq_variance)],
        [
            hue_phase(base_hue),
            hue_phase((comp_hue + split) % 1) + rng.jitter(phase_variance),
            hue_phase((comp_hue - split + 1) % 1) + rng.jitter(phase_variance),
        ],
    )


def generate_analogous(rng: RandomSource) -> CoefficientSet:
    base_hue = rng.random()
    angle = rng.uniform(0.08, 0.16)
    base_phase = hue_phase(base_hue)
    adjacent1 = hue_phase((base_hue + angle) % 1)
    adjacent2 = hue_phase((base_hue - angle + 1) % 1)

    layout = rng.randint(3)
    if layout == 0:
        # dominant base hue
        phases = [base_phase, adjacent1, base_phase]
    elif layout == 1:
        # balanced
        phases = [base_phase, adjacent1, adjacent2]
    else:
        # shifted
        phases = [base_phase, (base_phase + adjacent1) / 2, adjacent1]

    balance = rng.uniform(-0.15, 0.15)
    amplitude = rng.uniform(0.2, 0.4)
    frequency = rng.uniform(0.4, 0.8)
    phase_variance = rng.uniform(0, 0.05)
    freq_variance = rng.uniform(0, 0.1)

    return build(
        balanced_offset(balance),
        _amplitudes(rng, amplitude),
        [frequency, frequency * (1 + freq_variance), frequency * (1 - freq_variance)],
        [p + rng.jitter(phase_variance) for p in phases],
    )


def generate_tetradic(rng: RandomSource) -> CoefficientSet:
    base_hue = rng.random()
    angle = rng.uniform(0.2, 0.35)
    hues = [
        base_hue,
        (base_hue + angle) % 1,
        (base_hue + 0.5) % 1,
        (base_hue + 0.5 + angle) % 1,
    ]
    phases = [h * TAU for h in hues]

    layout = rng.randint(3)
    if layout == 0:
        chosen = [phases[0], phases[1], phases[2]]
    elif layout == 1:
        chosen = [phases[0], phases[2], phases[3]]
    else:
        chosen = [phases[0], phases[1], phases[3]]

    amplitude = rng.uniform(0.25, 0.45)
    frequency = rng.uniform(0.5, 1.2)
    phase_variance = rng.uniform(0, 0.05)

    return build(
        [0.5, 0.5, 0.5],
        _amplitudes(rng, amplitude),
        [frequency, frequency * rng.uniform(0.9, 1.1), frequency * rng.uniform(0.9, 1.1)],
        [p + rng.jitter(phase_variance) for p in chosen],
    )
