"""
Injectable randomness for candidate generation.
Unseeded sources use secrets.SystemRandom (no shared global state); seeded sources use
random.Random so tests and reproductions can force deterministic sequences.
"""
import random
import secrets
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Thin wrapper over a random.Random-compatible generator."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng: random.Random = random.Random(seed) if seed is not None else secrets.SystemRandom()

    def random(self) -> float:
        """Float in [0, 1)."""
        return self._rng.random()

    def uniform(self, low: float, high: float) -> float:
        """Float in [low, high)."""
        return low + self._rng.random() * (high - low)

    def in_range(self, bounds: tuple[float, float]) -> float:
        return self.uniform(bounds[0], bounds[1])

    def jitter(self, spread: float) -> float:
        """Symmetric variation in [-spread/2, spread/2)."""
        return self._rng.random() * spread - spread / 2

    def randint(self, n: int) -> int:
        """Integer in [0, n)."""
        return int(self._rng.random() * n) % n

    def choice(self, sequence: Sequence[T]) -> T:
        if not sequence:
            raise IndexError("Cannot choose from an empty sequence")
        return sequence[self.randint(len(sequence))]

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self._rng.random() < probability

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"


def ensure_source(rng: RandomSource | int | None) -> RandomSource:
    """Accept a RandomSource, an int seed or None (unseeded)."""
    if isinstance(rng, RandomSource):
        return rng
    return RandomSource(rng)
