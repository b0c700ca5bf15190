"""
Switch strategy implementation.
"""
from ...core.rules import remaining_door
from ...core.game_state import StrategyLabel
from .base import Strategy, StrategyConfig


class SwitchStrategy(Strategy):
    """Move to the only door that is neither picked nor opened."""

    def choose_final_door(self, initial_pick: int, opened_door: int) -> int:
        return remaining_door(initial_pick, opened_door)

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="Switch",
            description="Always move to the other unopened door",
            label=StrategyLabel.SWITCH,
        )
