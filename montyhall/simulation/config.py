"""Configuration for a trial run."""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional
from .trial_aggregator import (
    TrialAggregator, validate_decimals, validate_seed, validate_trial_count, validate_worker_count
)


@dataclass
class SimulationConfig:
    """Settings for a trial run."""
    num_trials: int = 100
    seed: Optional[int] = None
    num_workers: int = 1
    decimals: int = 2

    def validate(self) -> "SimulationConfig":
        """Raise InvalidArgumentError if any setting is out of range."""
        validate_trial_count(self.num_trials)
        validate_seed(self.seed)
        validate_worker_count(self.num_workers)
        validate_decimals(self.decimals)
        return self

    def build_aggregator(self) -> TrialAggregator:
        self.validate()
        return TrialAggregator(seed=self.seed, num_workers=self.num_workers, decimals=self.decimals)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Create from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known}).validate()
