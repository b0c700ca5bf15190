"""
Base classes for strategy implementations.
"""
from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass
from ...core.doors import check_door
from ...core.game_state import StrategyLabel
from ...core.errors import ContractViolationError


@dataclass
class StrategyConfig:
    """Configuration for a strategy."""
    name: str
    description: str
    label: StrategyLabel


class Strategy(ABC):
    """Abstract base class for the contestant's final-door policy."""

    def __init__(self, config: Optional[StrategyConfig] = None):
        self.config = config or self.get_default_config()

    @property
    def label(self) -> StrategyLabel:
        return self.config.label

    def resolve_pick(self, initial_pick: int, opened_door: int) -> int:
        """Return the contestant's final door after the host's reveal."""
        initial_pick = check_door(initial_pick)
        opened_door = check_door(opened_door)
        if initial_pick == opened_door:
            raise ContractViolationError(
                f"Opened door {opened_door} cannot be the contestant's pick"
            )
        return self.choose_final_door(initial_pick, opened_door)

    @abstractmethod
    def choose_final_door(self, initial_pick: int, opened_door: int) -> int:
        """Choose the final door; arguments are already validated."""
        pass

    @classmethod
    @abstractmethod
    def get_default_config(cls) -> StrategyConfig:
        """Get default configuration for this strategy."""
        pass

    def get_description(self) -> str:
        """Get human-readable description of the strategy."""
        return f"{self.config.name}: {self.config.description}"
