"""
Rejection-sampling palette generator: draw candidate -> apply modifiers -> evaluate ->
validate, until a palette passes or the attempt budget runs out.
"""
import logging
from typing import Sequence

from ..color.basic_colors import summarize_basic_colors
from ..gradient import GlobalModifiers, render_palette
from ..gradient.cosine import MODIFIER_FIELDS, MODIFIER_LIMITS
from ..random_utils import RandomSource, ensure_source
from .catalog import get_category, merge_modifier_bounds, recommended_stops, strategy_for
from .schema import (
    GenerationExhausted,
    GenerationOptions,
    ModifierBounds,
    PaletteGenerationResult,
)
from .validators import validate_all, validate_general

logger = logging.getLogger(__name__)

_IDENTITY = GlobalModifiers().as_tuple()


def _clamp(x: float, bounds: tuple[float, float]) -> float:
    return max(bounds[0], min(bounds[1], x))


def draw_modifiers(
    bounds: ModifierBounds,
    fixed: dict[str, float],
    rng: RandomSource,
) -> GlobalModifiers:
    """
    One value per field: the caller's value clamped to the bounds, else a uniform draw in
    the bounds, else identity. Rounded to 3 places, then clamped to the absolute range.
    """
    values = []
    for name, identity in zip(MODIFIER_FIELDS, _IDENTITY):
        field_bounds = bounds.get(name)
        if name in fixed and fixed[name] is not None:
            value = float(fixed[name])
            if field_bounds is not None:
                value = _clamp(value, field_bounds)
        elif field_bounds is not None:
            value = rng.in_range(field_bounds)
        else:
            value = identity
        values.append(_clamp(round(value, 3), MODIFIER_LIMITS[name]))
    return GlobalModifiers(*values)


class PaletteGenerator:
    """
    Generator for one category (plus optional extra categories, AND-composed).
    Modifiers are drawn once here; each generate() call is an independent rejection loop.
    """

    def __init__(self, category: str, options: GenerationOptions | None = None):
        self.options = options or GenerationOptions()
        get_category(category)
        applied = [category]
        for extra in self.options.additional_categories:
            get_category(extra)
            if extra not in applied:
                applied.append(extra)
        self.category = category
        self.applied_categories = tuple(applied)
        self.categories = [get_category(k) for k in self.applied_categories]
        self.rng = ensure_source(self.options.rng)
        self.steps = self.options.steps or recommended_stops(self.applied_categories)
        self.bounds = merge_modifier_bounds(self.applied_categories)
        self.modifiers = draw_modifiers(self.bounds, self.options.modifiers, self.rng)
        self.strategy = get_category(strategy_for(self.applied_categories)).generate
        self._validators = [c.validate for c in self.categories]

    def is_valid(self, colors) -> bool:
        """General gate, then every applied category's validator."""
        if not validate_general(
            colors,
            min_color_distance=self.options.effective_min_color_distance,
            explicit_modifiers=self.options.has_explicit_modifiers,
        ):
            return False
        return validate_all(colors, self._validators)

    def generate(self) -> PaletteGenerationResult | GenerationExhausted:
        max_attempts = self.options.effective_max_attempts
        for attempt in range(1, max_attempts + 1):
            coeffs = self.strategy(self.rng)
            colors = render_palette(coeffs, self.modifiers, self.steps)
            if not self.is_valid(colors):
                continue
            logger.debug(
                "Accepted %s palette after %s attempt(s)",
                "+".join(self.applied_categories),
                attempt,
            )
            return PaletteGenerationResult(
                category=self.category,
                applied_categories=self.applied_categories,
                colors=tuple(colors),
                coeffs=coeffs,
                globals=self.modifiers,
                basic_colors=tuple(summarize_basic_colors(colors)),
                attempts_taken=attempt,
            )

        message = f"Failed to generate {'+'.join(self.applied_categories)} palette after {max_attempts} attempts."
        logger.warning("%s", message)
        return GenerationExhausted(
            category=self.category,
            applied_categories=self.applied_categories,
            attempts=max_attempts,
            message=message,
        )

    def __repr__(self) -> str:
        return (
            f"PaletteGenerator(categories={list(self.applied_categories)}, steps={self.steps}, "
            f"modifiers={self.modifiers.as_tuple()})"
        )


def build_generator(categories: Sequence[str], options: GenerationOptions) -> PaletteGenerator:
    """Generator whose primary category is the first key and the rest are extras."""
    primary, *extras = categories
    opts = GenerationOptions(
        steps=options.steps,
        modifiers=dict(options.modifiers),
        additional_categories=list(extras) + [
            k for k in options.additional_categories if k not in extras and k != primary
        ],
        max_attempts=options.max_attempts,
        min_color_distance=options.min_color_distance,
        rng=options.rng,
    )
    return PaletteGenerator(primary, opts)
