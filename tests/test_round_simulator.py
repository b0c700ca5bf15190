"""
Tests for playing a single round under both strategies.
"""
import pytest
from montyhall.core.doors import Arrangement, DoorContent
from montyhall.core.game import make_rng
from montyhall.core.game_state import Outcome, RoundState, StrategyLabel, TrialRecord
from montyhall.core.errors import ContractViolationError
from montyhall.simulation import play_round, play_scripted_round


GOAT = DoorContent.GOAT
CAR = DoorContent.CAR


class TestPlayRound:

    def test_exactly_one_strategy_wins(self):
        rng = make_rng(42)
        for i in range(2_000):
            result = play_round(rng, round_index=i)
            wins = [r.outcome for r in result.records].count(Outcome.WIN)
            assert wins == 1

    def test_stay_wins_iff_first_pick_was_the_car(self):
        rng = make_rng(17)
        for _ in range(500):
            result = play_round(rng)
            picked_car = result.arrangement[result.initial_pick] == CAR
            assert (result.stay_record.outcome == Outcome.WIN) == picked_car
            assert (result.switch_record.outcome == Outcome.WIN) == (not picked_car)

    def test_both_strategies_share_the_round(self):
        rng = make_rng(3)
        for _ in range(200):
            result = play_round(rng)
            stay, switch = result.stay_state, result.switch_state
            assert stay.arrangement == switch.arrangement
            assert stay.initial_pick == switch.initial_pick
            assert stay.opened_door == switch.opened_door
            assert stay.final_pick == stay.initial_pick
            assert switch.final_pick not in (switch.initial_pick, switch.opened_door)
            assert result.arrangement[result.opened_door] == GOAT

    def test_records_carry_the_round_index(self):
        result = play_round(make_rng(0), round_index=12)
        assert result.stay_record == TrialRecord(StrategyLabel.STAY, result.stay_state.outcome, 12)
        assert result.switch_record.strategy == StrategyLabel.SWITCH
        assert result.switch_record.round_index == 12

    def test_seeded_rounds_repeat(self):
        rng_a, rng_b = make_rng(2024), make_rng(2024)
        for _ in range(100):
            a, b = play_round(rng_a), play_round(rng_b)
            assert a.stay_state == b.stay_state
            assert a.switch_state == b.switch_state


class TestScriptedRound:

    def test_wrong_first_pick(self):
        result = play_scripted_round(Arrangement((GOAT, GOAT, CAR)), 1, make_rng(0))
        assert result.opened_door == 2
        assert result.stay_state.final_pick == 1
        assert result.stay_state.outcome == Outcome.LOSE
        assert result.switch_state.final_pick == 3
        assert result.switch_state.outcome == Outcome.WIN

    def test_right_first_pick(self):
        result = play_scripted_round(Arrangement((CAR, GOAT, GOAT)), 1, make_rng(9))
        assert result.opened_door in (2, 3)
        assert result.stay_state.outcome == Outcome.WIN
        assert result.switch_state.outcome == Outcome.LOSE
        assert result.switch_state.switched

    def test_as_rows(self):
        result = play_scripted_round(Arrangement((GOAT, GOAT, CAR)), 1, make_rng(0))
        assert result.as_rows() == [
            {"strategy": "stay", "outcome": "LOSE"},
            {"strategy": "switch", "outcome": "WIN"},
        ]


class TestRoundState:

    def _state(self):
        return RoundState(arrangement=Arrangement((GOAT, GOAT, CAR)))

    def test_steps_must_run_in_order(self):
        state = self._state()
        with pytest.raises(ContractViolationError):
            state.record_reveal(2)
        state.record_initial_pick(1)
        with pytest.raises(ContractViolationError):
            state.record_final_pick(StrategyLabel.STAY, 1)
        with pytest.raises(ContractViolationError):
            state.record_outcome(Outcome.WIN)
        with pytest.raises(ContractViolationError):
            state.to_record()

    def test_reveal_cannot_be_the_pick_or_the_car(self):
        state = self._state()
        state.record_initial_pick(1)
        with pytest.raises(ContractViolationError):
            state.record_reveal(1)
        with pytest.raises(ContractViolationError):
            state.record_reveal(3)
        state.record_reveal(2)
        assert state.opened_door == 2

    def test_final_pick_cannot_be_the_opened_door(self):
        state = self._state()
        state.record_initial_pick(1)
        state.record_reveal(2)
        with pytest.raises(ContractViolationError):
            state.record_final_pick(StrategyLabel.SWITCH, 2)

    def test_fork_copies_only_the_shared_steps(self):
        state = self._state()
        state.record_initial_pick(1)
        state.record_reveal(2)
        state.record_final_pick(StrategyLabel.STAY, 1)

        other = state.fork()
        assert other.initial_pick == 1
        assert other.opened_door == 2
        assert other.final_pick is None
        assert other.outcome is None

    def test_to_dict(self):
        result = play_scripted_round(Arrangement((GOAT, GOAT, CAR)), 1, make_rng(0))
        assert result.switch_state.to_dict() == {
            "arrangement": ["goat", "goat", "car"],
            "strategy": "switch",
            "initial_pick": 1,
            "opened_door": 2,
            "final_pick": 3,
            "outcome": "WIN",
        }


class TestArrangementInput:

    def test_arrangement_is_used_as_is(self):
        arrangement = Arrangement((GOAT, CAR, GOAT))
        result = play_scripted_round(arrangement, 1, make_rng(0))
        assert result.arrangement is arrangement

    def test_plain_sequence_is_validated(self):
        with pytest.raises(ContractViolationError):
            play_scripted_round([CAR, CAR, GOAT], 1, make_rng(0))
