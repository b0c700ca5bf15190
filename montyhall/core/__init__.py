"""Core game model for the Monty Hall simulator."""
from .doors import DOORS, Arrangement, DoorContent
from .game import make_rng, new_arrangement
from .game_state import Outcome, RoundState, StrategyLabel, TrialRecord
from .rules import determine_outcome, open_goat_door, select_initial_door
from .errors import ContractViolationError, InvalidArgumentError, MontyHallError

__all__ = [
    "DOORS",
    "Arrangement",
    "DoorContent",
    "make_rng",
    "new_arrangement",
    "Outcome",
    "RoundState",
    "StrategyLabel",
    "TrialRecord",
    "determine_outcome",
    "open_goat_door",
    "select_initial_door",
    "ContractViolationError",
    "InvalidArgumentError",
    "MontyHallError",
]
