"""Random candidates: delegate to a uniformly chosen strategy of another category."""
from typing import Callable

from ...gradient import CoefficientSet
from ...random_utils import RandomSource


def generate_random(rng: RandomSource) -> CoefficientSet:
    from . import STRATEGIES

    names = sorted(STRATEGIES)
    strategy: Callable[[RandomSource], CoefficientSet] = STRATEGIES[rng.choice(names)]
    return strategy(rng)
