"""Simulation module for the Monty Hall game."""
from .round_simulator import RoundResult, play_round, play_scripted_round
from .trial_aggregator import AggregateResult, TrialAggregator, run_trials
from .config import SimulationConfig
from .strategies import Strategy
from .strategy_registry import strategy_registry, resolve_pick

__all__ = [
    "RoundResult",
    "play_round",
    "play_scripted_round",
    "AggregateResult",
    "TrialAggregator",
    "run_trials",
    "SimulationConfig",
    "Strategy",
    "strategy_registry",
    "resolve_pick",
]
