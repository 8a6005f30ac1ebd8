# Cosine gradient model: coefficients + global modifiers -> ordered colors

from .cosine import (
    Color,
    CoefficientSet,
    GlobalModifiers,
    IDENTITY_MODIFIERS,
    TAU,
    apply_modifiers,
    evaluate,
    render_palette,
)

__all__ = [
    "Color",
    "CoefficientSet",
    "GlobalModifiers",
    "IDENTITY_MODIFIERS",
    "TAU",
    "apply_modifiers",
    "evaluate",
    "render_palette",
]
