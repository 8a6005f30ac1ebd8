"""
Request handling: resolve a category request (defaults, incompatible sets, config) into a
PaletteGenerator, and single or batch generation on top of it.
"""
import logging
from dataclasses import replace
from typing import Any, Sequence

from ..config import resolve_generation_config
from ..log_utils import log_structured
from ..random_utils import ensure_source
from .catalog import compatible_subset, recommended_stops, validate_category_set
from .generator import PaletteGenerator, build_generator
from .schema import GenerationExhausted, GenerationOptions, PaletteGenerationResult

logger = logging.getLogger(__name__)


def _as_list(categories: Sequence[str] | str | None) -> list[str]:
    if categories is None:
        return []
    if isinstance(categories, str):
        return [categories]
    return list(categories)


def _apply_config(options: GenerationOptions | None, config: dict[str, Any] | None) -> GenerationOptions:
    """Fill max_attempts / min_color_distance from config when the caller left them unset."""
    opts = options or GenerationOptions()
    if config is None:
        return opts
    gen = resolve_generation_config(config)
    changes: dict[str, Any] = {}
    if opts.max_attempts is None:
        changes["max_attempts"] = gen["max_attempts"]
    if opts.min_color_distance is None:
        changes["min_color_distance"] = gen["min_color_distance"]
    return replace(opts, **changes) if changes else opts


def create_generator(
    categories: Sequence[str] | str | None,
    options: GenerationOptions | None = None,
    config: dict[str, Any] | None = None,
) -> PaletteGenerator:
    """
    Empty request -> the configured default category (Random). Incompatible sets are reduced
    to their greedy compatible subset. steps defaults to the recommended stop count.
    """
    keys = _as_list(categories)
    opts = _apply_config(options, config)
    if not keys:
        default = resolve_generation_config(config)["default_category"] if config else "Random"
        keys = [default]
    if not validate_category_set(keys):
        reduced = compatible_subset(keys) or ["Random"]
        logger.info("Incompatible categories %s reduced to %s", keys, reduced)
        keys = reduced
    if opts.steps is None:
        opts = replace(opts, steps=recommended_stops(keys))
    return build_generator(keys, opts)


def generate_palette(
    categories: Sequence[str] | str | None,
    options: GenerationOptions | None = None,
    config: dict[str, Any] | None = None,
) -> PaletteGenerationResult | GenerationExhausted | None:
    """One palette. None when the requested categories exclude each other."""
    keys = _as_list(categories)
    if not validate_category_set(keys):
        logger.warning("Rejected incompatible category set %s", keys)
        return None
    return create_generator(keys, options, config).generate()


def generate_palettes(
    count: int,
    categories: Sequence[str] | str | None = "Random",
    options: GenerationOptions | None = None,
    config: dict[str, Any] | None = None,
) -> list[PaletteGenerationResult]:
    """
    Up to count palettes, sequentially. Stops early once the total attempt budget
    (config batch_max_attempts, else max_attempts) is spent; may return fewer than count.
    """
    keys = _as_list(categories)
    if count <= 0 or not validate_category_set(keys):
        return []
    opts = _apply_config(options, config)
    # One shared source so seeded batches don't repeat the same palette
    opts = replace(opts, rng=ensure_source(opts.rng))
    budget = opts.effective_max_attempts
    if config is not None:
        budget = resolve_generation_config(config).get("batch_max_attempts") or budget

    results: list[PaletteGenerationResult] = []
    spent = 0
    while len(results) < count and spent < budget:
        # The last call only gets what is left of the budget
        remaining = min(opts.effective_max_attempts, budget - spent)
        outcome = create_generator(keys, replace(opts, max_attempts=remaining)).generate()
        if outcome.ok:
            spent += outcome.attempts_taken
            results.append(outcome)
        else:
            spent += outcome.attempts
    log_structured(
        "info",
        event="generate_palettes",
        categories=keys or ["Random"],
        requested=count,
        produced=len(results),
        attempts=spent,
    )
    return results
