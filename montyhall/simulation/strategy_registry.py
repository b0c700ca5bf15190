"""
Registry for managing and accessing the contestant's strategies.
"""
from typing import Dict, Type, List, Union
from ..core.game_state import StrategyLabel
from ..core.errors import InvalidArgumentError
from .strategies import Strategy, StrategyConfig, StayStrategy, SwitchStrategy


StrategyLike = Union[Strategy, StrategyLabel, str]


class StrategyRegistry:
    """Registry for managing available strategies."""

    def __init__(self):
        self._strategies: Dict[str, Type[Strategy]] = {}
        self._instances: Dict[str, Strategy] = {}
        self._register_default_strategies()

    def _register_default_strategies(self):
        """Register all built-in strategies."""
        self.register(StayStrategy)
        self.register(SwitchStrategy)

    def register(self, strategy_class: Type[Strategy]):
        """Register a new strategy class."""
        config = strategy_class.get_default_config()
        self._strategies[config.name.lower()] = strategy_class
        self._instances.pop(config.name.lower(), None)

    def get_strategy(self, name: Union[str, StrategyLabel]) -> Strategy:
        """Get the shared strategy instance for a name or label."""
        key = self._key(name)
        strategy_class = self._strategies.get(key)
        if not strategy_class:
            raise InvalidArgumentError(f"Unknown strategy: {name}")

        # Strategies are stateless, so one instance per class is shared
        if key not in self._instances:
            self._instances[key] = strategy_class()
        return self._instances[key]

    def resolve(self, strategy: StrategyLike) -> Strategy:
        """Turn a label, name or instance into a strategy instance."""
        if isinstance(strategy, Strategy):
            return strategy
        return self.get_strategy(strategy)

    def list_strategies(self) -> List[str]:
        """List all available strategy names."""
        return list(self._strategies.keys())

    def get_strategy_info(self, name: Union[str, StrategyLabel]) -> StrategyConfig:
        """Get information about a strategy."""
        strategy_class = self._strategies.get(self._key(name))
        if not strategy_class:
            raise InvalidArgumentError(f"Unknown strategy: {name}")
        return strategy_class.get_default_config()

    def get_all_strategies_info(self) -> Dict[str, StrategyConfig]:
        """Get information about all registered strategies."""
        return {
            name: strategy_class.get_default_config()
            for name, strategy_class in self._strategies.items()
        }

    @staticmethod
    def _key(name: Union[str, StrategyLabel]) -> str:
        if isinstance(name, StrategyLabel):
            return name.value
        if not isinstance(name, str):
            raise InvalidArgumentError(f"Strategy must be a name or StrategyLabel, got {name!r}")
        return name.strip().lower()


# Global registry instance
strategy_registry = StrategyRegistry()


def resolve_pick(strategy: StrategyLike, initial_pick: int, opened_door: int) -> int:
    """Final door under `strategy` given the initial pick and the opened door.

    STAY returns `initial_pick`; SWITCH returns the one door that is neither
    picked nor opened. No randomness is involved.
    """
    return strategy_registry.resolve(strategy).resolve_pick(initial_pick, opened_door)
