"""
Stay strategy implementation.
"""
from ...core.game_state import StrategyLabel
from .base import Strategy, StrategyConfig


class StayStrategy(Strategy):
    """Keep the initially picked door."""

    def choose_final_door(self, initial_pick: int, opened_door: int) -> int:
        return initial_pick

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="Stay",
            description="Keep the initial pick whatever the host reveals",
            label=StrategyLabel.STAY,
        )
