"""Monte Carlo trial runs comparing the stay and switch strategies."""
import logging
import multiprocessing
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN
from numbers import Integral
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple
import numpy as np
from ..core.game import make_rng
from ..core.game_state import Outcome, StrategyLabel, TrialRecord
from ..core.errors import InvalidArgumentError
from .round_simulator import STRATEGY_ORDER, play_round


logger = logging.getLogger(__name__)

OUTCOME_ORDER: Tuple[Outcome, ...] = (Outcome.WIN, Outcome.LOSE)

Counts = Dict[Tuple[StrategyLabel, Outcome], int]
Proportions = Dict[StrategyLabel, Dict[Outcome, float]]
ProgressCallback = Callable[[int], None]


@dataclass(frozen=True)
class AggregateResult:
    """Strategy x outcome table from a trial run.

    `counts` holds every (strategy, outcome) cell, zeros included.
    `proportions` is normalized per strategy row and rounded half-to-even
    to `decimals` places. Records are a tuple and both tables are read-only
    mapping views.
    """
    num_rounds: int
    records: Tuple[TrialRecord, ...]
    counts: Mapping[Tuple[StrategyLabel, Outcome], int]
    proportions: Mapping[StrategyLabel, Mapping[Outcome, float]]
    decimals: int = 2

    def count(self, strategy: StrategyLabel, outcome: Outcome) -> int:
        return self.counts[(strategy, outcome)]

    def row_total(self, strategy: StrategyLabel) -> int:
        return sum(self.counts[(strategy, outcome)] for outcome in OUTCOME_ORDER)

    def win_rate(self, strategy: StrategyLabel) -> float:
        """Rounded share of rounds won by `strategy`."""
        return self.proportions[strategy][Outcome.WIN]

    def counts_array(self) -> np.ndarray:
        """Counts as a 2x2 array: rows STAY, SWITCH; columns WIN, LOSE."""
        return np.array([
            [self.counts[(strategy, outcome)] for outcome in OUTCOME_ORDER]
            for strategy in STRATEGY_ORDER
        ], dtype=np.int64)

    def proportion_table(self) -> List[Dict[str, object]]:
        """Rows of the proportion table, one per strategy."""
        return [
            {
                "strategy": strategy.value,
                **{outcome.value: self.proportions[strategy][outcome] for outcome in OUTCOME_ORDER},
            }
            for strategy in STRATEGY_ORDER
        ]

    def to_rows(self) -> List[Dict[str, object]]:
        """Raw records as flat rows for export."""
        return [record.to_dict() for record in self.records]

    def __str__(self) -> str:
        width = self.decimals + 2
        lines = [f"Trial Results ({self.num_rounds} rounds):"]
        lines.append(f"  {'strategy':<8} {'WIN':>{width}} {'LOSE':>{width}}")
        for strategy in STRATEGY_ORDER:
            win = self.proportions[strategy][Outcome.WIN]
            lose = self.proportions[strategy][Outcome.LOSE]
            lines.append(
                f"  {strategy.value:<8} {win:>{width}.{self.decimals}f} {lose:>{width}.{self.decimals}f}"
            )
        return "\n".join(lines)


def validate_trial_count(n) -> int:
    """Return `n` as an int, or raise InvalidArgumentError if it is not a positive integer."""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidArgumentError(f"Number of trials must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidArgumentError(f"Number of trials must be positive, got {n}")
    return int(n)


def validate_seed(seed) -> Optional[int]:
    """Return `seed` as an int (or None), or raise if it is not a non-negative integer."""
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, Integral) or seed < 0:
        raise InvalidArgumentError(f"Seed must be a non-negative integer, got {seed!r}")
    return int(seed)


def validate_worker_count(num_workers) -> int:
    if isinstance(num_workers, bool) or not isinstance(num_workers, Integral) or num_workers < 1:
        raise InvalidArgumentError(f"Number of workers must be a positive integer, got {num_workers!r}")
    return int(num_workers)


def validate_decimals(decimals) -> int:
    if isinstance(decimals, bool) or not isinstance(decimals, Integral) or decimals < 0:
        raise InvalidArgumentError(f"Decimals must be a non-negative integer, got {decimals!r}")
    return int(decimals)


def round_proportion(numerator: int, denominator: int, decimals: int = 2) -> float:
    """Round numerator/denominator half-to-even on the exact ratio.

    Working in Decimal avoids binary float artefacts, so 1/200 (0.005)
    rounds to 0.0 and 3/200 (0.015) rounds to 0.02.
    """
    if denominator == 0:
        return 0.0
    ratio = Decimal(numerator) / Decimal(denominator)
    quantum = Decimal(1).scaleb(-decimals)
    return float(ratio.quantize(quantum, rounding=ROUND_HALF_EVEN))


def tabulate(records: Iterable[TrialRecord]) -> Counts:
    """Count records per (strategy, outcome) cell."""
    counts: Counts = {
        (strategy, outcome): 0
        for strategy in STRATEGY_ORDER
        for outcome in OUTCOME_ORDER
    }
    for record in records:
        counts[(record.strategy, record.outcome)] += 1
    return counts


def row_proportions(counts: Counts, decimals: int = 2) -> Proportions:
    """Normalize each strategy row of `counts` and round to `decimals` places."""
    proportions: Proportions = {}
    for strategy in STRATEGY_ORDER:
        total = sum(counts[(strategy, outcome)] for outcome in OUTCOME_ORDER)
        proportions[strategy] = {
            outcome: round_proportion(counts[(strategy, outcome)], total, decimals)
            for outcome in OUTCOME_ORDER
        }
    return proportions


class TrialAggregator:
    """Runs many rounds and summarizes how each strategy fares."""

    def __init__(
        self,
        seed: Optional[int] = None,
        num_workers: Optional[int] = 1,
        decimals: int = 2
    ):
        if num_workers is None:
            num_workers = multiprocessing.cpu_count()

        self.seed = validate_seed(seed)
        self.num_workers = validate_worker_count(num_workers)
        self.decimals = validate_decimals(decimals)

    def run_trials(self, n: int, progress: Optional[ProgressCallback] = None) -> AggregateResult:
        """Play `n` rounds and build the strategy x outcome table.

        Args:
            n: Number of rounds; each round yields one record per strategy
            progress: Called with the number of rounds completed so far
        """
        n = validate_trial_count(n)
        logger.info(f"Running {n} rounds (seed={self.seed}, workers={self.num_workers})")

        if self.num_workers == 1:
            records = self._run_rounds(n, make_rng(self.seed), 0, progress)
        else:
            records = self._run_parallel(n, progress)

        result = self._aggregate_results(n, records, self.decimals)
        logger.info(
            f"Finished {n} rounds: stay wins {result.win_rate(StrategyLabel.STAY):.2f}, "
            f"switch wins {result.win_rate(StrategyLabel.SWITCH):.2f}"
        )
        return result

    def _run_parallel(self, n: int, progress: Optional[ProgressCallback]) -> List[TrialRecord]:
        """Split rounds across worker processes, each with its own generator."""
        seeds = np.random.SeedSequence(self.seed).spawn(self.num_workers)
        rounds_per_worker = n // self.num_workers
        remaining = n % self.num_workers

        records: List[Optional[TrialRecord]] = [None] * (2 * n)
        futures = {}
        start = 0
        with ProcessPoolExecutor(max_workers=self.num_workers) as executor:
            for i in range(self.num_workers):
                n_rounds = rounds_per_worker + (1 if i < remaining else 0)
                if n_rounds > 0:
                    future = executor.submit(
                        TrialAggregator._run_rounds,
                        n_rounds,
                        seeds[i],
                        start
                    )
                    futures[future] = (start, n_rounds)
                    start += n_rounds

            # Slots are fixed by round index, so completion order does not matter
            completed = 0
            for future in as_completed(futures):
                first_round, n_rounds = futures[future]
                records[2 * first_round:2 * (first_round + n_rounds)] = future.result()
                completed += n_rounds
                if progress:
                    progress(completed)

        return records

    @staticmethod
    def _run_rounds(
        num_rounds: int,
        rng,
        first_round: int = 0,
        progress: Optional[ProgressCallback] = None
    ) -> List[TrialRecord]:
        """Play consecutive rounds with one generator, two records per round."""
        if not isinstance(rng, np.random.Generator):
            rng = make_rng(rng)

        records: List[Optional[TrialRecord]] = [None] * (2 * num_rounds)
        for i in range(num_rounds):
            result = play_round(rng, round_index=first_round + i)
            records[2 * i] = result.stay_record
            records[2 * i + 1] = result.switch_record
            if progress:
                progress(i + 1)

        return records

    @staticmethod
    def _aggregate_results(num_rounds: int, records: List[TrialRecord], decimals: int) -> AggregateResult:
        """Aggregate the records of a run into the summary table."""
        counts = tabulate(records)
        proportions = row_proportions(counts, decimals)
        return AggregateResult(
            num_rounds=num_rounds,
            records=tuple(records),
            counts=MappingProxyType(counts),
            proportions=MappingProxyType({
                strategy: MappingProxyType(row) for strategy, row in proportions.items()
            }),
            decimals=decimals,
        )


def run_trials(
    n: int = 100,
    seed: Optional[int] = None,
    num_workers: Optional[int] = 1,
    decimals: int = 2,
    progress: Optional[ProgressCallback] = None
) -> AggregateResult:
    """Play `n` rounds and return the strategy comparison."""
    aggregator = TrialAggregator(seed=seed, num_workers=num_workers, decimals=decimals)
    return aggregator.run_trials(n, progress=progress)
