"""
Tests for the individual steps of a round.
"""
import pytest
from collections import Counter
from montyhall.core.doors import DOORS, Arrangement, DoorContent
from montyhall.core.game import make_rng
from montyhall.core.game_state import Outcome, StrategyLabel
from montyhall.core.rules import (
    select_initial_door, open_goat_door, determine_outcome, remaining_door
)
from montyhall.core.errors import ContractViolationError, InvalidArgumentError
from montyhall.simulation.strategy_registry import resolve_pick, strategy_registry
from montyhall.simulation.strategies import StayStrategy, SwitchStrategy


GOAT = DoorContent.GOAT
CAR = DoorContent.CAR


class TestInitialPick:

    def test_pick_is_a_valid_door(self):
        rng = make_rng(1)
        picks = Counter(select_initial_door(rng) for _ in range(9_000))
        assert set(picks) == set(DOORS)
        for door in DOORS:
            assert abs(picks[door] / 9_000 - 1 / 3) < 0.03

    def test_pick_is_a_plain_int(self):
        assert type(select_initial_door(make_rng(0))) is int


class TestHostReveal:

    def test_never_opens_the_pick_or_the_car(self):
        """Every (car door, pick) combination, with several host draws each."""
        for car_door in DOORS:
            arrangement = Arrangement.with_car_behind(car_door)
            for pick in DOORS:
                for seed in range(10):
                    opened = open_goat_door(arrangement, pick, make_rng(seed))
                    assert opened != pick
                    assert arrangement[opened] == GOAT

    def test_wrong_pick_leaves_one_door_and_uses_no_randomness(self):
        arrangement = Arrangement((GOAT, GOAT, CAR))
        rng = make_rng(5)
        state_before = rng.bit_generator.state

        assert open_goat_door(arrangement, 1, rng) == 2
        assert open_goat_door(arrangement, 2, rng) == 1
        assert rng.bit_generator.state == state_before

    def test_car_pick_chooses_either_goat_uniformly(self):
        arrangement = Arrangement((CAR, GOAT, GOAT))
        rng = make_rng(8)
        opened = Counter(open_goat_door(arrangement, 1, rng) for _ in range(10_000))

        assert set(opened) == {2, 3}
        assert abs(opened[2] / 10_000 - 0.5) < 0.03

    def test_accepts_plain_sequences(self):
        assert open_goat_door([GOAT, CAR, GOAT], 1, make_rng(0)) == 3

    @pytest.mark.parametrize("contents", [
        [CAR, CAR, GOAT],
        [GOAT, GOAT, GOAT],
    ])
    def test_bad_arrangement_breaks_the_contract(self, contents):
        with pytest.raises(ContractViolationError):
            open_goat_door(contents, 1, make_rng(0))

    def test_out_of_range_pick_breaks_the_contract(self):
        with pytest.raises(ContractViolationError):
            open_goat_door(Arrangement((CAR, GOAT, GOAT)), 4, make_rng(0))


class TestResolvePick:

    def _distinct_pairs(self):
        return [(p, o) for p in DOORS for o in DOORS if p != o]

    def test_stay_keeps_the_pick(self):
        for pick, opened in self._distinct_pairs():
            assert resolve_pick(StrategyLabel.STAY, pick, opened) == pick

    def test_switch_moves_to_the_other_closed_door(self):
        for pick, opened in self._distinct_pairs():
            final = resolve_pick(StrategyLabel.SWITCH, pick, opened)
            assert final != pick
            assert final != opened
            assert final in DOORS

    def test_strategy_can_be_named_or_an_instance(self):
        assert resolve_pick("switch", 1, 2) == 3
        assert resolve_pick("Stay", 1, 2) == 1
        assert resolve_pick(SwitchStrategy(), 3, 1) == 2
        assert resolve_pick(StayStrategy(), 3, 1) == 3

    def test_opened_door_equal_to_pick_breaks_the_contract(self):
        with pytest.raises(ContractViolationError):
            resolve_pick(StrategyLabel.SWITCH, 2, 2)

    def test_unknown_strategy_is_an_invalid_argument(self):
        with pytest.raises(InvalidArgumentError):
            resolve_pick("dither", 1, 2)

    def test_remaining_door(self):
        assert remaining_door(1, 2) == 3
        assert remaining_door(3, 1) == 2
        with pytest.raises(ContractViolationError):
            remaining_door(1, 1)


class TestStrategyRegistry:

    def test_built_in_strategies(self):
        assert strategy_registry.list_strategies() == ["stay", "switch"]
        assert strategy_registry.get_strategy(StrategyLabel.STAY).label == StrategyLabel.STAY
        assert strategy_registry.get_strategy("SWITCH").label == StrategyLabel.SWITCH

    def test_strategy_info(self):
        info = strategy_registry.get_strategy_info("switch")
        assert info.name == "Switch"
        assert set(strategy_registry.get_all_strategies_info()) == {"stay", "switch"}
        assert "Stay" in strategy_registry.get_strategy("stay").get_description()

    def test_strategies_take_no_overrides(self):
        assert strategy_registry.get_strategy("stay") is strategy_registry.get_strategy(StrategyLabel.STAY)
        with pytest.raises(TypeError):
            strategy_registry.get_strategy("stay", foo=1)
        assert not hasattr(strategy_registry.get_strategy_info("stay"), "parameters")

    def test_unknown_strategy(self):
        with pytest.raises(InvalidArgumentError):
            strategy_registry.get_strategy("random")
        with pytest.raises(InvalidArgumentError):
            strategy_registry.get_strategy(3)


class TestOutcome:

    def test_win_only_on_the_car(self):
        arrangement = Arrangement((GOAT, CAR, GOAT))
        assert determine_outcome(arrangement, 2) == Outcome.WIN
        assert determine_outcome(arrangement, 1) == Outcome.LOSE
        assert determine_outcome(arrangement, 3) == Outcome.LOSE

    def test_bad_input_breaks_the_contract(self):
        with pytest.raises(ContractViolationError):
            determine_outcome([CAR, CAR, GOAT], 1)
        with pytest.raises(ContractViolationError):
            determine_outcome(Arrangement((GOAT, CAR, GOAT)), 0)


class TestScenarios:

    def test_wrong_first_pick(self):
        """Car behind door 3, contestant picks 1: switching wins."""
        arrangement = Arrangement((GOAT, GOAT, CAR))
        opened = open_goat_door(arrangement, 1, make_rng(0))
        assert opened == 2

        stay = resolve_pick(StrategyLabel.STAY, 1, opened)
        switch = resolve_pick(StrategyLabel.SWITCH, 1, opened)
        assert stay == 1
        assert switch == 3
        assert determine_outcome(arrangement, stay) == Outcome.LOSE
        assert determine_outcome(arrangement, switch) == Outcome.WIN

    def test_right_first_pick(self):
        """Car behind door 1, contestant picks 1: staying wins."""
        arrangement = Arrangement((CAR, GOAT, GOAT))
        for seed in range(10):
            opened = open_goat_door(arrangement, 1, make_rng(seed))
            assert opened in (2, 3)

            stay = resolve_pick(StrategyLabel.STAY, 1, opened)
            switch = resolve_pick(StrategyLabel.SWITCH, 1, opened)
            assert stay == 1
            assert switch == ({2, 3} - {opened}).pop()
            assert determine_outcome(arrangement, stay) == Outcome.WIN
            assert determine_outcome(arrangement, switch) == Outcome.LOSE
