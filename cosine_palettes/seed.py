"""
Seed codec: a coefficient set plus global modifiers as one compact, URL-safe string.

Layout (fixed, versionless): 16 comma-separated numbers
    aR,aG,aB, bR,bG,bB, cR,cG,cB, dR,dG,dB, exposure,contrast,frequency,phase
each rounded to 4 decimals, then LZ-String compressToEncodedURIComponent.
Changing the order breaks every previously issued seed.
"""
import logging
import math
from typing import Any, Sequence

from lzstring import LZString

from .gradient import CoefficientSet, GlobalModifiers

logger = logging.getLogger(__name__)

SEED_PRECISION = 4
SEED_FIELDS = 16
# Rounding can push a phase of exactly ±π just past the limit
PHASE_TOLERANCE = 10 ** -SEED_PRECISION


class SeedEncodeError(ValueError):
    """Coefficients or modifiers cannot be encoded (bad shape, padding, range or value)."""


def _format_number(x: float) -> str:
    text = f"{round(x, SEED_PRECISION):.{SEED_PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _coerce_coeffs(coeffs: Any) -> CoefficientSet:
    if isinstance(coeffs, CoefficientSet):
        return coeffs
    try:
        return CoefficientSet.from_vectors(coeffs)
    except (TypeError, ValueError) as e:
        raise SeedEncodeError(f"Invalid coefficient shape: {e}") from e


def _coerce_globals(globals_: Any) -> GlobalModifiers:
    if isinstance(globals_, GlobalModifiers):
        return globals_
    try:
        return GlobalModifiers.from_sequence(globals_)
    except (TypeError, ValueError) as e:
        raise SeedEncodeError(f"Invalid global modifiers: {e}") from e


def seed_numbers(coeffs: CoefficientSet, globals_: GlobalModifiers) -> list[float]:
    """The 16 numbers a seed carries, in wire order, unrounded."""
    flat = [v for vec in coeffs.to_vectors(padded=False) for v in vec]
    return flat + list(globals_.as_tuple())


def encode_seed(
    coeffs: CoefficientSet | Sequence[Sequence[float]],
    globals_: GlobalModifiers | Sequence[float],
) -> str:
    """
    Encode coefficients (CoefficientSet, 4x3, or 4x4 with a literal-1 padding slot) and
    modifiers. Raises SeedEncodeError instead of encoding anything malformed.
    """
    coeffs = _coerce_coeffs(coeffs)
    globals_ = _coerce_globals(globals_)
    numbers = seed_numbers(coeffs, globals_)
    if not all(math.isfinite(x) for x in numbers):
        raise SeedEncodeError("Seed values must be finite")
    if not globals_.within_limits(phase_tolerance=PHASE_TOLERANCE):
        raise SeedEncodeError(f"Global modifiers out of range: {globals_.as_tuple()}")
    payload = ",".join(_format_number(x) for x in numbers)
    return LZString().compressToEncodedURIComponent(payload)


def decode_seed(seed: str) -> tuple[CoefficientSet, GlobalModifiers] | None:
    """
    Inverse of encode_seed. Returns None for any unusable seed (empty, corrupt, wrong field
    count, non-numeric or out-of-range values); never raises.
    """
    if not seed or not isinstance(seed, str):
        return None
    try:
        payload = LZString().decompressFromEncodedURIComponent(seed.strip())
        if not payload:
            logger.debug("Seed %r decompressed to nothing", seed)
            return None
        parts = payload.split(",")
        if len(parts) != SEED_FIELDS:
            logger.debug("Seed %r has %d fields, expected %d", seed, len(parts), SEED_FIELDS)
            return None
        numbers = [float(p) for p in parts]
        if not all(math.isfinite(x) for x in numbers):
            logger.debug("Seed %r contains non-finite values", seed)
            return None
        coeffs = CoefficientSet.from_vectors([numbers[i:i + 3] for i in range(0, 12, 3)])
        globals_ = GlobalModifiers.from_sequence(numbers[12:16])
        if not globals_.within_limits(phase_tolerance=PHASE_TOLERANCE):
            logger.debug("Seed %r has out-of-range modifiers %s", seed, globals_.as_tuple())
            return None
        return coeffs, globals_
    except Exception as e:
        logger.debug("Could not decode seed %r: %s", seed, e)
        return None
