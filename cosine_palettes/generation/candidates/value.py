"""Bright (high-value) and dark (low-value) candidates."""
from ...gradient import TAU, CoefficientSet
from ...random_utils import RandomSource
from .common import build, hue_phase, shifted, triple

BRIGHT_HUES = {
    "cream": 0.12,
    "mint": 0.4,
    "sky": 0.55,
    "lavender": 0.75,
    "rose": 0.95,
    "peach": 0.08,
}
_BRIGHT_THEMES = (("mint", "sky"), ("sky", "lavender"), ("peach", "rose"))


def generate_bright(rng: RandomSource) -> CoefficientSet:
    strategy = rng.randint(5)
    primary = rng.choice(list(BRIGHT_HUES.values()))
    offset = (0.35, 0.5)
    amplitude = (0.35, 0.45)
    blue_shift = -0.1

    if strategy == 0:
        # soft: one hue, small channel jitter
        offset, amplitude, frequency, blue_shift = (0.4, 0.55), (0.3, 0.4), (0.3, 0.5), -0.15
        base = hue_phase(primary)
        phases = [base, base + rng.jitter(0.1), base + rng.jitter(0.1)]
    elif strategy == 1:
        # dual: base hue and its complement
        frequency = (0.4, 0.6)
        base, second = hue_phase(primary), hue_phase((primary + 0.5) % 1)
        phases = [base, base if rng.chance(0.5) else second, base if rng.chance(0.5) else second]
    elif strategy == 2:
        frequency = (0.5, 0.7)
        base = hue_phase(primary)
        phases = [base, (base + TAU / 3) % TAU, (base + 2 * TAU / 3) % TAU]
    elif strategy == 3:
        frequency, blue_shift = (0.8, 1.0), -0.15
        phases = [0.0, TAU / 3, 2 * TAU / 3]
    else:
        amplitude, frequency = (0.3, 0.4), (0.3, 0.5)
        first, second = (BRIGHT_HUES[name] for name in rng.choice(_BRIGHT_THEMES))
        base, other = hue_phase(first), hue_phase(second)
        phases = [base, other, (base + other) / 2]

    a = [rng.in_range(offset), rng.in_range(offset), rng.in_range(shifted(offset, blue_shift))]
    return build(a, triple(rng, amplitude), triple(rng, frequency), phases)


# layout -> (offset, amplitude, frequency)
_DARK = {
    "mono": ((0.1, 0.3), (0.05, 0.25), (0.3, 0.7)),
    "complementary": ((0.15, 0.35), (0.1, 0.3), (0.5, 0.9)),
    "triad": ((0.15, 0.35), (0.1, 0.3), (0.6, 1.0)),
    "analogous": ((0.1, 0.3), (0.05, 0.25), (0.4, 0.8)),
}


def generate_dark(rng: RandomSource) -> CoefficientSet:
    layout = rng.choice(list(_DARK))
    offset, amplitude, frequency = _DARK[layout]
    base = hue_phase(rng.random())

    a = triple(rng, offset)
    b = triple(rng, amplitude)
    c = triple(rng, frequency)
    if layout == "mono":
        phases = [base, base + rng.jitter(0.05), base + rng.jitter(0.05)]
    elif layout == "complementary":
        opposite = (base + TAU / 2) % TAU
        phases = [base, base if rng.chance(0.5) else opposite, base if rng.chance(0.5) else opposite]
    elif layout == "triad":
        phases = [base, (base + TAU / 3) % TAU, (base + 2 * TAU / 3) % TAU]
    else:
        phases = [base, (base + TAU / 12) % TAU, (base - TAU / 12 + TAU) % TAU]
    return build(a, b, c, phases)
