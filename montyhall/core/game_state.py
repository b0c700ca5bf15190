"""Round state and trial records for the Monty Hall game."""
from dataclasses import dataclass
from typing import Dict, Optional
from enum import Enum
from .doors import Arrangement, DoorContent, check_door
from .errors import ContractViolationError


class Outcome(Enum):
    """Result of a round for one strategy."""
    WIN = "WIN"
    LOSE = "LOSE"


class StrategyLabel(Enum):
    """The contestant's policy after the host opens a door."""
    STAY = "stay"
    SWITCH = "switch"


@dataclass(frozen=True)
class TrialRecord:
    """Outcome of one strategy in one round."""
    strategy: StrategyLabel
    outcome: Outcome
    round_index: int = 0

    @property
    def is_win(self) -> bool:
        return self.outcome == Outcome.WIN

    def to_dict(self) -> dict:
        """Convert to a flat row for export."""
        return {
            "round": self.round_index,
            "strategy": self.strategy.value,
            "outcome": self.outcome.value,
        }


@dataclass
class RoundState:
    """State of a single round, filled in step by step.

    The steps must happen in order: initial pick, host reveal, final pick,
    outcome. Once the reveal is recorded the opened door is never the
    contestant's pick and never hides the car.
    """
    arrangement: Arrangement
    strategy: Optional[StrategyLabel] = None
    initial_pick: Optional[int] = None
    opened_door: Optional[int] = None
    final_pick: Optional[int] = None
    outcome: Optional[Outcome] = None

    def record_initial_pick(self, door: int):
        if self.initial_pick is not None:
            raise ContractViolationError("Initial pick already recorded")
        self.initial_pick = check_door(door)

    def record_reveal(self, door: int):
        if self.initial_pick is None:
            raise ContractViolationError("Cannot open a door before the initial pick")
        if self.opened_door is not None:
            raise ContractViolationError("A door has already been opened")

        door = check_door(door)
        if door == self.initial_pick:
            raise ContractViolationError(f"Host cannot open the contestant's door ({door})")
        if self.arrangement[door] != DoorContent.GOAT:
            raise ContractViolationError(f"Host cannot reveal the car (door {door})")
        self.opened_door = door

    def record_final_pick(self, strategy: StrategyLabel, door: int):
        if self.opened_door is None:
            raise ContractViolationError("Cannot make a final pick before the reveal")
        if self.final_pick is not None:
            raise ContractViolationError("Final pick already recorded")

        door = check_door(door)
        if door == self.opened_door:
            raise ContractViolationError(f"Final pick cannot be the opened door ({door})")
        self.strategy = strategy
        self.final_pick = door

    def record_outcome(self, outcome: Outcome):
        if self.final_pick is None:
            raise ContractViolationError("Cannot record an outcome before the final pick")
        self.outcome = outcome

    def fork(self) -> "RoundState":
        """Copy the shared part of the round (arrangement, pick, reveal) for another strategy."""
        if self.opened_door is None:
            raise ContractViolationError("Only a round past the reveal can be forked")
        return RoundState(
            arrangement=self.arrangement,
            initial_pick=self.initial_pick,
            opened_door=self.opened_door,
        )

    @property
    def is_complete(self) -> bool:
        return self.outcome is not None

    @property
    def switched(self) -> bool:
        """Whether the final pick differs from the initial pick."""
        return self.final_pick is not None and self.final_pick != self.initial_pick

    def to_record(self, round_index: int = 0) -> TrialRecord:
        """Collapse a completed round into its trial record."""
        if not self.is_complete:
            raise ContractViolationError("Round is not complete")
        return TrialRecord(strategy=self.strategy, outcome=self.outcome, round_index=round_index)

    def to_dict(self) -> Dict[str, object]:
        return {
            "arrangement": [str(c) for c in self.arrangement],
            "strategy": self.strategy.value if self.strategy else None,
            "initial_pick": self.initial_pick,
            "opened_door": self.opened_door,
            "final_pick": self.final_pick,
            "outcome": self.outcome.value if self.outcome else None,
        }
