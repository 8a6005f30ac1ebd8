# Candidate strategies: one (rng) -> CoefficientSet function per palette category

from .earthy import generate_earthy
from .harmony import (
    generate_analogous,
    generate_complementary,
    generate_split_complementary,
    generate_tetradic,
)
from .monochromatic import generate_monochromatic
from .neon import generate_neon
from .neutral import generate_neutral
from .pastel import generate_pastel
from .random_mix import generate_random
from .temperature import generate_cool, generate_warm
from .value import generate_bright, generate_dark

# Concrete strategies; Random picks among these
STRATEGIES = {
    "Monochromatic": generate_monochromatic,
    "Pastel": generate_pastel,
    "Earthy": generate_earthy,
    "Complementary": generate_complementary,
    "SplitComplementary": generate_split_complementary,
    "Analogous": generate_analogous,
    "Tetradic": generate_tetradic,
    "Warm": generate_warm,
    "Cool": generate_cool,
    "Neon": generate_neon,
    "Neutral": generate_neutral,
    "Bright": generate_bright,
    "Dark": generate_dark,
}

__all__ = [
    "STRATEGIES",
    "generate_analogous",
    "generate_bright",
    "generate_complementary",
    "generate_cool",
    "generate_dark",
    "generate_earthy",
    "generate_monochromatic",
    "generate_neon",
    "generate_neutral",
    "generate_pastel",
    "generate_random",
    "generate_split_complementary",
    "generate_tetradic",
    "generate_warm",
]
