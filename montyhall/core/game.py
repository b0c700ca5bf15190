"""Game setup: random number generators and door arrangements."""
from typing import Sequence, Union
import numpy as np
from .doors import Arrangement, DoorContent


# One car, two goats; shuffled once per round
_PRIZES = (DoorContent.CAR, DoorContent.GOAT, DoorContent.GOAT)

SeedLike = Union[None, int, np.random.SeedSequence]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Create an independent random generator, reproducible when seeded."""
    return np.random.default_rng(seed)


def new_arrangement(rng: np.random.Generator) -> Arrangement:
    """Hide one car and two goats behind the doors uniformly at random."""
    order = rng.permutation(len(_PRIZES))
    return Arrangement(tuple(_PRIZES[i] for i in order))


def as_arrangement(value: Union[Arrangement, Sequence[DoorContent]]) -> Arrangement:
    """Accept an Arrangement or a plain sequence of door contents."""
    if isinstance(value, Arrangement):
        return value
    return Arrangement(tuple(value))
