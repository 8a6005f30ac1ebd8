"""
Shared helpers for candidate strategies. Phases are hue * TAU, matching how saved seeds
encode hue in the d vector.
"""
from typing import Sequence

from ...gradient import TAU, CoefficientSet
from ...random_utils import RandomSource

Range = tuple[float, float]


def hue_phase(hue: float) -> float:
    return hue * TAU


def triple(rng: RandomSource, bounds: Range) -> tuple[float, float, float]:
    """Three independent draws in bounds (one per channel)."""
    return (rng.in_range(bounds), rng.in_range(bounds), rng.in_range(bounds))


def shifted(bounds: Range, delta: float) -> Range:
    return (bounds[0] + delta, bounds[1] + delta)


def scaled(bounds: Range, factor: float) -> Range:
    return (bounds[0] * factor, bounds[1] * factor)


def balanced_offset(balance: float) -> tuple[float, float, float]:
    """Mid-gray offset tilted toward red (balance > 0) or blue (balance < 0)."""
    return (0.5 + balance * 0.1, 0.5, 0.5 - balance * 0.1)


def build(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    d: Sequence[float],
) -> CoefficientSet:
    return CoefficientSet(
        a=tuple(float(v) for v in a),
        b=tuple(float(v) for v in b),
        c=tuple(float(v) for v in c),
        d=tuple(float(v) for v in d),
    )
