"""
Palette generation: category catalog, validators, candidate strategies and the
rejection-sampling loop.
"""
from .catalog import (
    CATEGORIES,
    compatible_subset,
    get_category,
    incompatible_categories,
    merge_modifier_bounds,
    recommended_stops,
    validate_category_set,
)
from .factory import create_generator, generate_palette, generate_palettes
from .generator import PaletteGenerator
from .schema import (
    GenerationExhausted,
    GenerationOptions,
    ModifierBounds,
    PaletteCategory,
    PaletteGenerationResult,
)

__all__ = [
    "CATEGORIES",
    "GenerationExhausted",
    "GenerationOptions",
    "ModifierBounds",
    "PaletteCategory",
    "PaletteGenerationResult",
    "PaletteGenerator",
    "compatible_subset",
    "create_generator",
    "generate_palette",
    "generate_palettes",
    "get_category",
    "incompatible_categories",
    "merge_modifier_bounds",
    "recommended_stops",
    "validate_category_set",
]
