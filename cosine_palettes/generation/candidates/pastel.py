"""
Pastel candidates: high offsets, small amplitudes. Seven hue layouts, each paired with a
brightness style and a saturation level.
"""
from ...gradient import CoefficientSet
from ...random_utils import RandomSource
from .common import build, hue_phase, triple

# style -> (offset base, offset spread)
_BRIGHTNESS = {
    "high": (0.75, 0.15),
    "varied": (0.65, 0.25),
    "gradient": (0.6, 0.3),
}
# level -> (amplitude base, amplitude spread)
_SATURATION = {
    "very-low": (0.03, 0.07),
    "low": (0.08, 0.12),
    "medium": (0.15, 0.15),
    "mixed": (0.1, 0.2),
}
_NATURE_HUES = (0.08, 0.3, 0.58, 0.85)  # peach, green, blue, pink


def _layout(rng: RandomSource) -> tuple[list[float], str, str]:
    strategy = rng.randint(7)
    base = rng.random()
    if strategy == 0:
        return [0.0, 0.33, 0.67], "high", "low"
    if strategy == 1:
        return [base, (base + 0.1) % 1, (base + 0.2) % 1], "varied", "low"
    if strategy == 2:
        return [base, (base + 0.5) % 1, (base + 0.2) % 1], "high", "medium"
    if strategy == 3:
        return [base, (base + 0.15) % 1, (base + 0.3) % 1], "gradient", "very-low"
    if strategy == 4:
        return [base, base, base], "gradient", "mixed"
    if strategy == 5:
        second = (base + rng.uniform(0.3, 0.5)) % 1
        return [base, second, (base + 0.1) % 1], "mixed", "medium"
    nature = rng.choice(_NATURE_HUES)
    return [nature, (nature + 0.05) % 1, (nature + 0.1) % 1], "varied", "mixed"


def _mixed(rng: RandomSource, hues: list[float]) -> CoefficientSet:
    """Per-channel offsets and frequencies for banded pastels rather than white tints."""
    a = triple(rng, (0.5, 0.8))
    b = triple(rng, (0.15, 0.35))
    base_freq = rng.uniform(0.5, 1.0)
    c = [base_freq * rng.uniform(0.8, 1.2) for _ in range(3)]
    spread = rng.uniform(0.2, 0.5)
    d = [
        hue_phase(hues[0]),
        hue_phase((hues[1] + spread) % 1),
        hue_phase((hues[2] + spread * 2) % 1),
    ]
    return build(a, b, c, d)


def generate_pastel(rng: RandomSource) -> CoefficientSet:
    hues, brightness, saturation = _layout(rng)
    if brightness == "mixed":
        return _mixed(rng, hues)

    offset_base, offset_spread = _BRIGHTNESS[brightness]
    amp_base, amp_spread = _SATURATION[saturation]

    a = [offset_base + rng.uniform(0, offset_spread) for _ in range(3)]
    b = [amp_base + rng.uniform(0, amp_spread) for _ in range(3)]
    frequency = rng.uniform(0.4, 1.2)
    c = [frequency * rng.uniform(0.8, 1.2) for _ in range(3)]
    d = [hue_phase(h) for h in hues]
    return build(a, b, c, d)
