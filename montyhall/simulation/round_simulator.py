"""Play a single round of the Monty Hall game under both strategies."""
import logging
from dataclasses import dataclass
from typing import List, Dict, Tuple
import numpy as np
from ..core.doors import Arrangement
from ..core.game import new_arrangement, as_arrangement
from ..core.game_state import RoundState, StrategyLabel, TrialRecord
from ..core.rules import select_initial_door, open_goat_door, determine_outcome
from .strategy_registry import strategy_registry


logger = logging.getLogger(__name__)

# Order in which strategies are evaluated and reported
STRATEGY_ORDER: Tuple[StrategyLabel, ...] = (StrategyLabel.STAY, StrategyLabel.SWITCH)


@dataclass(frozen=True)
class RoundResult:
    """Both strategies played against the same arrangement, pick and reveal."""
    round_index: int
    stay_state: RoundState
    switch_state: RoundState

    @property
    def stay_record(self) -> TrialRecord:
        return self.stay_state.to_record(self.round_index)

    @property
    def switch_record(self) -> TrialRecord:
        return self.switch_state.to_record(self.round_index)

    @property
    def records(self) -> Tuple[TrialRecord, TrialRecord]:
        return self.stay_record, self.switch_record

    @property
    def arrangement(self) -> Arrangement:
        return self.stay_state.arrangement

    @property
    def initial_pick(self) -> int:
        return self.stay_state.initial_pick

    @property
    def opened_door(self) -> int:
        return self.stay_state.opened_door

    def as_rows(self) -> List[Dict[str, str]]:
        """Two-row strategy/outcome table for this round."""
        return [
            {"strategy": r.strategy.value, "outcome": r.outcome.value}
            for r in self.records
        ]


def _finish(state: RoundState, label: StrategyLabel) -> RoundState:
    """Apply a strategy's final pick and score it."""
    strategy = strategy_registry.get_strategy(label)
    final_pick = strategy.resolve_pick(state.initial_pick, state.opened_door)
    state.record_final_pick(label, final_pick)
    state.record_outcome(determine_outcome(state.arrangement, final_pick))
    return state


def play_scripted_round(
    arrangement: Arrangement,
    initial_pick: int,
    rng: np.random.Generator,
    round_index: int = 0
) -> RoundResult:
    """Play a round from a known arrangement and initial pick.

    Only the host's choice between two goat doors (when the contestant
    picked the car) draws from `rng`.
    """
    state = RoundState(arrangement=as_arrangement(arrangement))
    state.record_initial_pick(initial_pick)
    state.record_reveal(open_goat_door(state.arrangement, state.initial_pick, rng))

    # Fork after the reveal so both strategies see the identical round
    switch_state = _finish(state.fork(), StrategyLabel.SWITCH)
    stay_state = _finish(state, StrategyLabel.STAY)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Round {round_index}: [{state.arrangement}] pick={state.initial_pick} "
            f"opened={state.opened_door} stay={stay_state.outcome.value} "
            f"switch={switch_state.outcome.value}"
        )
    return RoundResult(round_index, stay_state, switch_state)


def play_round(rng: np.random.Generator, round_index: int = 0) -> RoundResult:
    """Play one full round: new arrangement, initial pick, reveal, both strategies."""
    arrangement = new_arrangement(rng)
    initial_pick = select_initial_door(rng)
    return play_scripted_round(arrangement, initial_pick, rng, round_index)
