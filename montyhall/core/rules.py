"""Rules of the Monty Hall game.

Every step of a round lives here as a stateless function. Randomness comes
only from the generator passed in, so a seeded generator replays a round
exactly.
"""
from typing import Sequence, Union
import numpy as np
from .doors import DOORS, Arrangement, DoorContent, check_door
from .game import as_arrangement
from .game_state import Outcome
from .errors import ContractViolationError


ArrangementLike = Union[Arrangement, Sequence[DoorContent]]


def select_initial_door(rng: np.random.Generator) -> int:
    """The contestant picks a door uniformly at random, knowing nothing."""
    return int(rng.integers(1, len(DOORS) + 1))


def remaining_door(*excluded: int) -> int:
    """Return the one door not in `excluded` (two distinct doors)."""
    excluded_set = {check_door(d) for d in excluded}
    if len(excluded_set) != len(DOORS) - 1:
        raise ContractViolationError(
            f"Need {len(DOORS) - 1} distinct doors to find the remaining one, got {excluded}"
        )
    return next(d for d in DOORS if d not in excluded_set)


def open_goat_door(
    arrangement: ArrangementLike,
    initial_pick: int,
    rng: np.random.Generator
) -> int:
    """Pick the door the host opens.

    The host never opens the contestant's door and never reveals the car.
    If the contestant picked the car, either goat door may be opened and one
    is chosen at random. Otherwise exactly one goat door is left and it is
    opened without drawing from `rng`.
    """
    arrangement = as_arrangement(arrangement)
    initial_pick = check_door(initial_pick)

    if arrangement[initial_pick] == DoorContent.CAR:
        goat_doors = arrangement.goat_doors
        return goat_doors[int(rng.integers(len(goat_doors)))]

    return remaining_door(initial_pick, arrangement.car_door)


def determine_outcome(arrangement: ArrangementLike, final_pick: int) -> Outcome:
    """WIN if the final pick hides the car, LOSE otherwise."""
    arrangement = as_arrangement(arrangement)
    if arrangement[final_pick] == DoorContent.CAR:
        return Outcome.WIN
    return Outcome.LOSE
