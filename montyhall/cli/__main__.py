import click
from ..core.doors import Arrangement
from ..core.errors import InvalidArgumentError
from ..core.game import make_rng, new_arrangement
from ..core.rules import select_initial_door
from ..simulation import SimulationConfig, play_scripted_round
from .interface import SimulationCLI, configure_logging


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def main(verbose):
    """Monty Hall - compare staying and switching by simulation."""
    configure_logging(verbose)


@main.command()
@click.option('--trials', '-n', type=click.IntRange(min=1), default=100, show_default=True,
              envvar='MONTYHALL_TRIALS', help='Number of rounds to play')
@click.option('--seed', '-s', type=click.IntRange(min=0), default=None,
              envvar='MONTYHALL_SEED', help='Random seed for a reproducible run')
@click.option('--workers', '-w', type=click.IntRange(min=1), default=1, show_default=True,
              envvar='MONTYHALL_WORKERS', help='Worker processes to split rounds across')
@click.option('--decimals', type=click.IntRange(0, 10), default=2, show_default=True,
              help='Decimal places for the proportions')
@click.option('--records/--no-records', default=False, help='Also print the raw trial records')
@click.option('--limit', type=click.IntRange(min=1), default=20, show_default=True,
              help='Maximum number of records to print')
def simulate(trials, seed, workers, decimals, records, limit):
    """Play many rounds and print the win/lose proportions per strategy."""
    config = SimulationConfig(num_trials=trials, seed=seed, num_workers=workers, decimals=decimals)
    cli = SimulationCLI()

    try:
        result = cli.run_simulation(config)
    except InvalidArgumentError as e:
        raise click.UsageError(str(e))

    cli.show_results(result)
    if records:
        cli.show_records(result, limit=limit)


@main.command()
@click.option('--seed', '-s', type=click.IntRange(min=0), default=None,
              envvar='MONTYHALL_SEED', help='Random seed for a reproducible round')
@click.option('--arrangement', '-a', default=None,
              help='Door contents, e.g. "goat,goat,car" (random if omitted)')
@click.option('--pick', '-p', type=click.IntRange(1, 3), default=None,
              help='Contestant\'s initial door (random if omitted)')
def play(seed, arrangement, pick):
    """Play a single round and show both strategies' outcomes."""
    rng = make_rng(seed)

    if arrangement:
        try:
            doors = Arrangement.from_labels(arrangement.split(','))
        except InvalidArgumentError as e:
            raise click.BadParameter(str(e), param_hint="'--arrangement'")
    else:
        doors = new_arrangement(rng)

    if pick is None:
        pick = select_initial_door(rng)

    SimulationCLI().show_round(play_scripted_round(doors, pick, rng))


if __name__ == "__main__":
    main()
