import logging
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress
from rich.logging import RichHandler
from typing import Optional
from ..core.game_state import Outcome
from ..simulation import AggregateResult, RoundResult, SimulationConfig
from ..simulation.round_simulator import STRATEGY_ORDER
from ..simulation.trial_aggregator import OUTCOME_ORDER


console = Console()


def configure_logging(verbose: bool = False):
    """Send log records through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )


class SimulationCLI:
    """Command-line front end that runs simulations and renders results."""

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def run_simulation(self, config: SimulationConfig, show_progress: bool = True) -> AggregateResult:
        """Run a trial set described by `config`, with a progress bar."""
        aggregator = config.build_aggregator()
        if not show_progress:
            return aggregator.run_trials(config.num_trials)

        # Redrawing on every round is wasteful for large runs
        step = max(1, config.num_trials // 100)
        with Progress(console=self.console, transient=True) as bar:
            task = bar.add_task("Simulating rounds", total=config.num_trials)

            def update(done: int):
                if done % step == 0 or done == config.num_trials:
                    bar.update(task, completed=done)

            return aggregator.run_trials(config.num_trials, progress=update)

    def show_results(self, result: AggregateResult):
        """Display the strategy x outcome proportion table."""
        table = Table(title=f"Win/Lose Proportions ({result.num_rounds} rounds)")
        table.add_column("Strategy", style="cyan")
        for outcome in OUTCOME_ORDER:
            table.add_column(outcome.value, style="green" if outcome == Outcome.WIN else "red", justify="right")
        table.add_column("Rounds", style="yellow", justify="right")

        for strategy in STRATEGY_ORDER:
            row = [strategy.value]
            for outcome in OUTCOME_ORDER:
                row.append(f"{result.proportions[strategy][outcome]:.{result.decimals}f}")
            row.append(str(result.row_total(strategy)))
            table.add_row(*row)

        self.console.print(table)

    def show_records(self, result: AggregateResult, limit: Optional[int] = 20):
        """Display the raw per-round records, two per round."""
        rows = result.to_rows()
        shown = rows if limit is None else rows[:limit]

        table = Table(title="Trial Records")
        table.add_column("Round", style="cyan", justify="right")
        table.add_column("Strategy", style="magenta")
        table.add_column("Outcome", style="green")
        for row in shown:
            table.add_row(str(row["round"]), row["strategy"], row["outcome"])

        self.console.print(table)
        if len(shown) < len(rows):
            self.console.print(f"[dim](Showing {len(shown)} of {len(rows)} records)[/dim]")

    def show_round(self, result: RoundResult):
        """Narrate one round and show how each strategy ended."""
        self.console.print(Panel.fit(
            f"[bold]Doors:[/bold] {result.arrangement}\n"
            f"[bold]Contestant picks:[/bold] door {result.initial_pick}\n"
            f"[bold]Host opens:[/bold] door {result.opened_door} (goat)",
            title="Monty Hall",
            border_style="blue"
        ))

        table = Table(title="Round Result")
        table.add_column("Strategy", style="cyan")
        table.add_column("Final Pick", style="magenta", justify="right")
        table.add_column("Outcome")
        for state in (result.stay_state, result.switch_state):
            color = "green" if state.outcome == Outcome.WIN else "red"
            table.add_row(
                state.strategy.value,
                str(state.final_pick),
                f"[{color}]{state.outcome.value}[/{color}]"
            )

        self.console.print(table)
