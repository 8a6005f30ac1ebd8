"""
Generation schema: categories, modifier bounds, request options and outcomes.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from ..color.basic_colors import BasicColorResult
from ..gradient import Color, CoefficientSet, GlobalModifiers
from ..random_utils import RandomSource

DEFAULT_MAX_ATTEMPTS = 10000
DEFAULT_MIN_COLOR_DISTANCE = 5.0
DEFAULT_STEPS = 7

Bounds = Optional[tuple[float, float]]


def _optional(value: Any, cast: Callable[[Any], Any]) -> Any:
    return None if value is None else cast(value)


@dataclass(frozen=True)
class ModifierBounds:
    """Per-field (min, max) draw range for the global modifiers. None leaves the field at identity."""
    exposure: Bounds = None
    contrast: Bounds = None
    frequency: Bounds = None
    phase: Bounds = None

    def get(self, name: str) -> Bounds:
        return getattr(self, name)


@dataclass(frozen=True)
class PaletteCategory:
    """
    One palette category: catalog data plus its candidate strategy and validator.
    generate draws a raw coefficient set; validate judges an evaluated palette.
    """
    key: str
    description: str
    recommended_stops: int
    bounds: ModifierBounds
    exclusive_with: tuple[str, ...]
    generate: Callable[[RandomSource], CoefficientSet]
    validate: Callable[[Sequence[Color]], bool]


@dataclass
class GenerationOptions:
    """
    Request options. modifiers holds caller-fixed global modifier values by field name;
    supplying any non-None value also skips the brightness/saturation part of the general gate.
    max_attempts and min_color_distance stay None unless the caller sets them, so config
    values can fill them in; effective_* resolve the built-in defaults.
    """
    steps: Optional[int] = None
    modifiers: dict[str, float] = field(default_factory=dict)
    additional_categories: list[str] = field(default_factory=list)
    max_attempts: Optional[int] = None
    min_color_distance: Optional[float] = None
    rng: Any = None  # RandomSource | int seed | None

    def __post_init__(self) -> None:
        if self.steps is not None and self.steps < 1:
            raise ValueError(f"steps must be >= 1, got {self.steps}")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        unknown = set(self.modifiers) - {"exposure", "contrast", "frequency", "phase"}
        if unknown:
            raise ValueError(f"Unknown modifier(s): {sorted(unknown)}")

    @property
    def has_explicit_modifiers(self) -> bool:
        return any(v is not None for v in self.modifiers.values())

    @property
    def effective_max_attempts(self) -> int:
        return DEFAULT_MAX_ATTEMPTS if self.max_attempts is None else self.max_attempts

    @property
    def effective_min_color_distance(self) -> float:
        if self.min_color_distance is None:
            return DEFAULT_MIN_COLOR_DISTANCE
        return self.min_color_distance

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationOptions":
        return cls(
            steps=data.get("steps"),
            modifiers=dict(data.get("modifiers") or {}),
            additional_categories=list(data.get("additional_categories") or []),
            max_attempts=_optional(data.get("max_attempts"), int),
            min_color_distance=_optional(data.get("min_color_distance"), float),
            rng=data.get("rng"),
        )


@dataclass(frozen=True)
class PaletteGenerationResult:
    """Accepted palette. coeffs are the raw candidate; globals were applied before evaluation."""
    category: str
    applied_categories: tuple[str, ...]
    colors: tuple[Color, ...]
    coeffs: CoefficientSet
    globals: GlobalModifiers
    basic_colors: tuple[BasicColorResult, ...]
    attempts_taken: int

    ok = True

    @property
    def seed(self) -> str:
        from ..seed import encode_seed

        return encode_seed(self.coeffs, self.globals)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "applied_categories": list(self.applied_categories),
            "colors": [list(c) for c in self.colors],
            "coeffs": self.coeffs.to_vectors(padded=True),
            "globals": list(self.globals.as_tuple()),
            "basic_colors": [b.to_dict() for b in self.basic_colors],
            "attempts_taken": self.attempts_taken,
            "seed": self.seed,
        }


@dataclass(frozen=True)
class GenerationExhausted:
    """No candidate passed validation within the attempt budget. Not an error."""
    category: str
    applied_categories: tuple[str, ...]
    attempts: int
    message: str

    ok = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "applied_categories": list(self.applied_categories),
            "attempts": self.attempts,
            "message": self.message,
        }


__all__ = [
    "BasicColorResult",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MIN_COLOR_DISTANCE",
    "DEFAULT_STEPS",
    "GenerationExhausted",
    "GenerationOptions",
    "ModifierBounds",
    "PaletteCategory",
    "PaletteGenerationResult",
]
