"""
Strategy implementations for the contestant's final choice.
"""
from .base import Strategy, StrategyConfig
from .stay import StayStrategy
from .switch import SwitchStrategy

__all__ = [
    "Strategy",
    "StrategyConfig",
    "StayStrategy",
    "SwitchStrategy",
]
