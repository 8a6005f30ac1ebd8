"""
Category catalog: per-category data (recommended stops, modifier bounds, exclusivity) joined
with each category's candidate strategy and validator. Multi-category requests merge bounds
by intersection and validate by AND.
"""
from typing import Iterable, Sequence

from ..gradient.cosine import MODIFIER_FIELDS, MODIFIER_LIMITS
from . import validators as v
from .candidates import STRATEGIES, generate_random
from .schema import DEFAULT_STEPS, ModifierBounds, PaletteCategory

# key -> (description, recommended stops, bounds, exclusive with)
_TABLE: dict[str, tuple[str, int, ModifierBounds, tuple[str, ...]]] = {
    "Monochromatic": (
        "Single hue with variations in saturation and brightness.",
        5,
        ModifierBounds(exposure=(-0.5, 0.5), contrast=(0.8, 1.2)),
        ("Random",),
    ),
    "Pastel": (
        "High brightness, low saturation colors.",
        6,
        ModifierBounds(frequency=(0.75, 1.25)),
        ("Earthy", "Random", "Neon"),
    ),
    "Earthy": (
        "Natural colors like browns, tans, olive greens.",
        7,
        ModifierBounds(exposure=(-0.5, 0.5), contrast=(0.3, 1.7), frequency=(0.5, 1.5)),
        ("Pastel", "Random"),
    ),
    "Random": (
        "Randomly generated color palette.",
        7,
        ModifierBounds(exposure=(-0.6, 0.6), contrast=(0.5, 1.5), frequency=(0.5, 1.0)),
        ("Monochromatic", "Pastel", "Earthy"),
    ),
    "Complementary": (
        "Two opposite hues on the color wheel.",
        6,
        ModifierBounds(exposure=(-0.3, 0.3), contrast=(0.8, 1.2)),
        (),
    ),
    "SplitComplementary": (
        "A base hue plus the two hues beside its complement.",
        6,
        ModifierBounds(exposure=(-0.3, 0.3), contrast=(0.8, 1.2)),
        (),
    ),
    "Analogous": (
        "Neighboring hues on the color wheel.",
        5,
        ModifierBounds(exposure=(-0.3, 0.3), contrast=(0.8, 1.2)),
        (),
    ),
    "Tetradic": (
        "Two complementary pairs (four hues).",
        8,
        ModifierBounds(exposure=(-0.3, 0.3), contrast=(0.8, 1.2)),
        (),
    ),
    "Warm": (
        "Dominated by reds, oranges and yellows.",
        6,
        ModifierBounds(exposure=(-0.3, 0.3), contrast=(0.8, 1.2), frequency=(0.75, 1.25)),
        ("Cool",),
    ),
    "Cool": (
        "Dominated by greens, blues and purples.",
        6,
        ModifierBounds(exposure=(-0.3, 0.3), contrast=(0.8, 1.2), frequency=(0.75, 1.25)),
        ("Warm",),
    ),
    "Neon": (
        "Vivid, highly saturated bright colors.",
        6,
        ModifierBounds(exposure=(0.0, 0.3), contrast=(1.0, 1.5)),
        ("Neutral", "Pastel"),
    ),
    "Neutral": (
        "Grays, taupes and barely tinted colors.",
        5,
        ModifierBounds(exposure=(-0.3, 0.3), contrast=(0.5, 1.0)),
        ("Neon",),
    ),
    "Bright": (
        "High-value colors without washing out to white.",
        6,
        ModifierBounds(exposure=(0.0, 0.4), contrast=(0.8, 1.2)),
        ("Dark",),
    ),
    "Dark": (
        "Low-value colors with at least one rich tone.",
        6,
        ModifierBounds(exposure=(-0.2, 0.0), contrast=(0.8, 1.2)),
        ("Bright",),
    ),
}


def _build_catalog() -> dict[str, PaletteCategory]:
    catalog = {}
    for key, (description, stops, bounds, exclusive) in _TABLE.items():
        catalog[key] = PaletteCategory(
            key=key,
            description=description,
            recommended_stops=stops,
            bounds=bounds,
            exclusive_with=exclusive,
            generate=STRATEGIES.get(key, generate_random),
            validate=v.CATEGORY_VALIDATORS[key],
        )
    return catalog


CATEGORIES: dict[str, PaletteCategory] = _build_catalog()
CATEGORY_KEYS: tuple[str, ...] = tuple(CATEGORIES)

# (required categories, strategy to use) checked in order before the primary category
STRATEGY_OVERRIDES: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset({"Complementary", "Earthy"}), "Earthy"),
    (frozenset({"Monochromatic", "Earthy"}), "Monochromatic"),
    (frozenset({"Warm", "Monochromatic"}), "Monochromatic"),
)


def get_category(key: str) -> PaletteCategory:
    """Look up a category. Raises KeyError listing the valid keys."""
    try:
        return CATEGORIES[key]
    except KeyError:
        raise KeyError(f"Unknown palette category {key!r}; expected one of {list(CATEGORY_KEYS)}") from None


def merge_modifier_bounds(keys: Sequence[str]) -> ModifierBounds:
    """
    Intersect bounds across categories. A field is None if any category leaves it None or
    the intersection is empty. No categories -> full absolute ranges (phase stays None).
    """
    if not keys:
        return ModifierBounds(
            exposure=MODIFIER_LIMITS["exposure"],
            contrast=MODIFIER_LIMITS["contrast"],
            frequency=MODIFIER_LIMITS["frequency"],
        )
    merged = {}
    for name in MODIFIER_FIELDS:
        lo, hi = MODIFIER_LIMITS[name]
        usable = True
        for key in keys:
            bounds = get_category(key).bounds.get(name)
            if bounds is None:
                usable = False
                break
            lo, hi = max(lo, bounds[0]), min(hi, bounds[1])
            if lo > hi:
                usable = False
                break
        merged[name] = (lo, hi) if usable else None
    return ModifierBounds(**merged)


def recommended_stops(keys: Sequence[str]) -> int:
    """Largest recommended stop count among the categories; DEFAULT_STEPS when empty."""
    if not keys:
        return DEFAULT_STEPS
    return max(get_category(k).recommended_stops for k in keys)


def _conflict(a: str, b: str) -> bool:
    return b in get_category(a).exclusive_with or a in get_category(b).exclusive_with


def validate_category_set(keys: Sequence[str]) -> bool:
    """True when no two categories in the set exclude each other."""
    keys = list(keys)
    for i, a in enumerate(keys):
        for b in keys[i + 1:]:
            if a != b and _conflict(a, b):
                return False
    return True


def incompatible_categories(keys: Iterable[str]) -> list[str]:
    """Every category excluded by at least one of keys, in catalog order."""
    excluded = set()
    for key in keys:
        excluded.update(get_category(key).exclusive_with)
    return [k for k in CATEGORY_KEYS if k in excluded]


def compatible_subset(keys: Sequence[str]) -> list[str]:
    """Greedy in-order filter keeping each category compatible with those already kept."""
    kept: list[str] = []
    for key in keys:
        get_category(key)
        if key in kept:
            continue
        if all(not _conflict(key, other) for other in kept):
            kept.append(key)
    return kept


def strategy_for(keys: Sequence[str]) -> str:
    """Which category's candidate strategy serves a (possibly multi-category) request."""
    present = set(keys)
    if len(present) > 1:
        for required, strategy in STRATEGY_OVERRIDES:
            if required <= present:
                return strategy
    return keys[0]
