"""
Procedural color palettes from cosine gradients: category-driven generation, color analysis
and a compact seed codec for sharing palettes.
"""
from .config import load_config
from .generation import (
    CATEGORIES,
    GenerationExhausted,
    GenerationOptions,
    PaletteGenerationResult,
    PaletteGenerator,
    create_generator,
    generate_palette,
    generate_palettes,
)
from .gradient import (
    CoefficientSet,
    GlobalModifiers,
    apply_modifiers,
    evaluate,
    render_palette,
)
from .random_utils import RandomSource
from .seed import SeedEncodeError, decode_seed, encode_seed

__version__ = "0.1.0"

__all__ = [
    "CATEGORIES",
    "CoefficientSet",
    "GenerationExhausted",
    "GenerationOptions",
    "GlobalModifiers",
    "PaletteGenerationResult",
    "PaletteGenerator",
    "RandomSource",
    "SeedEncodeError",
    "apply_modifiers",
    "create_generator",
    "decode_seed",
    "encode_seed",
    "evaluate",
    "generate_palette",
    "generate_palettes",
    "load_config",
    "render_palette",
]
