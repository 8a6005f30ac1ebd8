"""
Cosine gradient: color(t) = a + b * cos(2π * (c*t + d)), per RGB channel, t in [0, 1].
Pure functions over immutable coefficient sets. The 4th "padding" slot of each serialized
vector (always literal 1) exists only at the serialization boundary.
"""
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

TAU = 2.0 * math.pi

Color = tuple[float, float, float, float]
Vec3 = tuple[float, float, float]

# Absolute ranges for the four global modifiers: exposure, contrast, frequency, phase
MODIFIER_LIMITS: dict[str, tuple[float, float]] = {
    "exposure": (-1.0, 1.0),
    "contrast": (0.0, 2.0),
    "frequency": (0.0, 2.0),
    "phase": (-math.pi, math.pi),
}
MODIFIER_FIELDS = ("exposure", "contrast", "frequency", "phase")


def _vec3(values: Iterable[float]) -> Vec3:
    r, g, b = (float(v) for v in values)
    return (r, g, b)


@dataclass(frozen=True)
class CoefficientSet:
    """
    The (a, b, c, d) vectors of one cosine gradient.
    a: offset (base color), b: amplitude, c: frequency (cycles), d: phase (shift in cycles).
    """

    a: Vec3
    b: Vec3
    c: Vec3
    d: Vec3

    @classmethod
    def from_vectors(cls, vectors: Sequence[Sequence[float]]) -> "CoefficientSet":
        """
        Build from 4 vectors of 3 channels, or 4 vectors of 4 slots whose 4th slot is 1.
        Raises ValueError on any other shape.
        """
        vecs = list(vectors)
        if len(vecs) != 4:
            raise ValueError(f"Expected 4 coefficient vectors, got {len(vecs)}")
        out: list[Vec3] = []
        for i, vec in enumerate(vecs):
            vals = list(vec)
            if len(vals) == 4:
                if vals[3] != 1:
                    raise ValueError(f"Vector {i} padding slot must be 1, got {vals[3]!r}")
                vals = vals[:3]
            if len(vals) != 3:
                raise ValueError(f"Vector {i} must have 3 channels (+ optional padding), got {len(list(vec))}")
            out.append(_vec3(vals))
        return cls(*out)

    def to_vectors(self, padded: bool = True) -> list[list[float]]:
        """Nested lists [[aR,aG,aB,1], ...]; padded=False drops the literal-1 slot."""
        rows = [list(self.a), list(self.b), list(self.c), list(self.d)]
        if padded:
            return [row + [1.0] for row in rows]
        return rows

    def as_array(self) -> np.ndarray:
        """(4, 3) float array, rows a, b, c, d."""
        return np.array([self.a, self.b, self.c, self.d], dtype=np.float64)

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.as_array())))


@dataclass(frozen=True)
class GlobalModifiers:
    """Four scalar post-processing adjustments applied to a coefficient set before evaluation."""

    exposure: float = 0.0
    contrast: float = 1.0
    frequency: float = 1.0
    phase: float = 0.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.exposure, self.contrast, self.frequency, self.phase)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "GlobalModifiers":
        vals = list(values)
        if len(vals) != 4:
            raise ValueError(f"Expected 4 global modifiers, got {len(vals)}")
        return cls(*(float(v) for v in vals))

    def within_limits(self, phase_tolerance: float = 0.0) -> bool:
        """True when every field lies in its absolute range (phase may overshoot by phase_tolerance)."""
        for name in MODIFIER_FIELDS:
            lo, hi = MODIFIER_LIMITS[name]
            slack = phase_tolerance if name == "phase" else 0.0
            v = getattr(self, name)
            if not math.isfinite(v) or v < lo - slack or v > hi + slack:
                return False
        return True


IDENTITY_MODIFIERS = GlobalModifiers()


def apply_modifiers(coeffs: CoefficientSet, modifiers: GlobalModifiers) -> CoefficientSet:
    """
    a' = a + exposure, b' = b * contrast, c' = c * frequency, d' = d + phase.
    No clamping: callers clamp modifiers against category bounds beforehand.
    """
    return CoefficientSet(
        a=tuple(v + modifiers.exposure for v in coeffs.a),
        b=tuple(v * modifiers.contrast for v in coeffs.b),
        c=tuple(v * modifiers.frequency for v in coeffs.c),
        d=tuple(v + modifiers.phase for v in coeffs.d),
    )


def evaluate(coeffs: CoefficientSet, steps: int) -> list[Color]:
    """
    Sample the gradient at `steps` evenly spaced t in [0, 1] (inclusive both ends).
    steps == 1 samples t = 0 only. Channels are clamped to [0, 1]; alpha is always 1.
    """
    if steps < 0:
        raise ValueError(f"steps must be >= 0, got {steps}")
    if steps == 0:
        return []
    if steps == 1:
        t = np.zeros(1, dtype=np.float64)
    else:
        t = np.arange(steps, dtype=np.float64) / (steps - 1)
    arr = coeffs.as_array()
    a, b, c, d = arr[0], arr[1], arr[2], arr[3]
    # (steps, 3): broadcast t over channels
    rgb = a + b * np.cos(TAU * (np.outer(t, c) + d))
    rgb = np.clip(rgb, 0.0, 1.0)
    return [(float(r), float(g), float(bl), 1.0) for r, g, bl in rgb]


def render_palette(
    coeffs: CoefficientSet,
    modifiers: GlobalModifiers | None,
    steps: int,
) -> list[Color]:
    """Apply modifiers (identity if None) then evaluate."""
    if modifiers is not None:
        coeffs = apply_modifiers(coeffs, modifiers)
    return evaluate(coeffs, steps)
