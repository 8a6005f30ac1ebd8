"""Earthy candidates: browns, terra cotta, olive and sage, sand and wheat."""
from ...gradient import CoefficientSet
from ...random_utils import RandomSource
from .common import build, hue_phase, triple

# (hue range, offset, amplitude, frequency, phase variation)
EARTHY_STRATEGIES = {
    "browns": ((0.05, 0.1), (0.4, 0.6), (0.15, 0.3), (0.25, 0.45), 0.15),
    "forest": ((0.26, 0.36), (0.35, 0.55), (0.15, 0.35), (0.3, 0.5), 0.12),
    "sage": ((0.15, 0.3), (0.45, 0.65), (0.1, 0.25), (0.2, 0.4), 0.1),
    "terracotta": ((0.02, 0.06), (0.3, 0.5), (0.2, 0.4), (0.35, 0.55), 0.2),
    "sand": ((0.08, 0.15), (0.5, 0.7), (0.1, 0.2), (0.25, 0.4), 0.08),
}


def generate_earthy(rng: RandomSource) -> CoefficientSet:
    hue_range, offset, amplitude, frequency, variation = EARTHY_STRATEGIES[
        rng.choice(list(EARTHY_STRATEGIES))
    ]
    base_phase = hue_phase(rng.in_range(hue_range))
    return build(
        triple(rng, offset),
        triple(rng, amplitude),
        triple(rng, frequency),
        [base_phase, base_phase + rng.jitter(variation), base_phase + rng.jitter(variation)],
    )
