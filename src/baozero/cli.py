"""
Command-line interface for baozero.

Commands:
- new: Show the opening position of a variant
- replay: Apply a sequence of pits and print every step event
- play: Play against the AI in the terminal
- arena: Match the MCTS player against a random player
- simulate: Play random games, checking engine invariants
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="bao",
    help="Bao move engine - play, replay and simulate",
    no_args_is_help=True,
)

console = Console()


def _load_config(config_path: Optional[Path]):
    from .utils import Config, get_default_config

    if config_path and config_path.exists():
        return Config.load(str(config_path))
    return get_default_config()


def _events_table(events) -> Table:
    from .game import event_to_dict

    table = Table(show_header=True, box=None)
    table.add_column("#", style="dim")
    table.add_column("Action", style="cyan")
    table.add_column("Detail", style="white")
    for i, event in enumerate(events):
        data = event_to_dict(event)
        action = data.pop("action")
        table.add_row(str(i), action, " ".join(f"{k}={v}" for k, v in data.items()))
    return table


@app.command()
def new(
    variant: str = typer.Option("pre-filled", "--variant", "-v", help="pre-filled or house-seeded"),
    as_json: bool = typer.Option(False, "--json", help="Print the stored state blob"),
) -> None:
    """Show the opening position of a variant."""
    from .game import create_game, render, dumps_state
    from .utils import print_board

    try:
        state = create_game(variant)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(dumps_state(state))
    else:
        print_board(render(state), title=f"Bao ({variant})")
        console.print(state.message)


@app.command()
def replay(
    pits: List[int] = typer.Argument(..., help="Pits to sow from, in order"),
    variant: str = typer.Option("pre-filled", "--variant", "-v", help="pre-filled or house-seeded"),
    show_events: bool = typer.Option(True, "--events/--no-events", help="Print step events"),
) -> None:
    """Apply a sequence of moves and print what happened."""
    from .game import create_game, apply_move, render
    from .utils import print_board

    try:
        state = create_game(variant)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(code=1)

    for n, pit in enumerate(pits, start=1):
        result = apply_move(state, pit)
        if not result.accepted:
            console.print(f"[red]Move {n} (pit {pit}) rejected: {result.message}[/]")
            raise typer.Exit(code=1)

        console.print(f"\n[bold]Move {n}: player {state.current_player} sows pit {pit}[/]")
        if show_events:
            console.print(_events_table(result.events))
        state = result.state
        print_board(render(state, last_move=pit), title=state.message)


@app.command()
def play(
    difficulty: str = typer.Option("medium", "--difficulty", "-d", help="easy, medium or hard"),
    variant: str = typer.Option("pre-filled", "--variant", "-v", help="pre-filled or house-seeded"),
    human_first: bool = typer.Option(True, "--first/--second", help="Human plays first"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the AI"),
) -> None:
    """Play against the AI in the terminal."""
    from .game import create_game, apply_move, is_terminal, legal_moves, render
    from .play import get_difficulty_config
    from .utils import set_seed, print_board

    try:
        level = get_difficulty_config(difficulty)
        state = create_game(variant)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(code=1)

    rng = set_seed(seed) if seed is not None else None
    ai = level.make_agent(rng)
    human = 1 if human_first else 2

    console.print("\n[bold]Bao[/]")
    console.print(f"You are player {human}; AI difficulty: {level.name}")
    console.print("Enter the pit number to sow from\n")

    last = None
    while True:
        print_board(render(state, last_move=last), title=state.message)

        done, _ = is_terminal(state)
        if done:
            if state.game_over:
                if state.winner == human:
                    console.print("[green]You win![/]")
                else:
                    console.print("[red]AI wins![/]")
            else:
                console.print(f"[yellow]Player {state.current_player} has no legal move. Draw.[/]")
            break

        if state.current_player == human:
            legal = legal_moves(state)
            while True:
                pit = typer.prompt(f"Your move {legal}", type=int)
                result = apply_move(state, pit)
                if result.accepted:
                    break
                console.print(f"[red]{result.message}[/]")
            console.print(f"You sowed pit {pit} ({len(result.events)} steps)\n")
        else:
            console.print("[cyan]AI thinking...[/]")
            pit = ai(state)
            result = apply_move(state, pit)
            console.print(f"AI sowed pit {pit} ({len(result.events)} steps)\n")

        state = result.state
        last = pit


@app.command()
def arena(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    games: Optional[int] = typer.Option(None, "--games", "-n", help="Number of games"),
    simulations: Optional[int] = typer.Option(None, "--sims", "-s", help="MCTS simulations"),
) -> None:
    """Match the MCTS player against a random player."""
    from .eval import Arena
    from .mcts import create_rollout_evaluator
    from .selfplay import mcts_agent, random_agent
    from .utils import set_seed, create_progress, print_config

    config = _load_config(config_path)
    if games is not None:
        config.arena.num_games = games
    if simulations is not None:
        config.mcts.num_simulations = simulations
    print_config(config)

    rng = set_seed(config.seed)
    candidate = mcts_agent(
        create_rollout_evaluator(config.mcts.rollout_depth, rng=rng),
        num_simulations=config.mcts.num_simulations,
        c_puct=config.mcts.c_puct,
    )
    opponent = random_agent(rng)
    match = Arena(variant=config.game.variant, max_moves=config.game.max_moves)

    with create_progress() as progress:
        task = progress.add_task("Arena [W:0 L:0 D:0]", total=config.arena.num_games)
        tally = {"W": 0, "L": 0, "D": 0}

        def callback(n, result_str):
            tally[result_str] += 1
            progress.update(
                task,
                advance=1,
                description=f"Arena [W:{tally['W']} L:{tally['L']} D:{tally['D']}]",
            )

        result = match.evaluate(candidate, opponent, config.arena.num_games, callback)

    console.print("\n[bold]Results (MCTS perspective):[/]")
    console.print(f"  Wins:   {result.wins}")
    console.print(f"  Losses: {result.losses}")
    console.print(f"  Draws:  {result.draws}")
    console.print(f"  Score:  {result.score*100:.1f}%")

    seats = Table(title="By seat", show_header=True, box=None)
    seats.add_column("MCTS as", style="cyan")
    for outcome in ("W", "L", "D"):
        seats.add_column(outcome, justify="right")
    for seat, tally in result.by_seat.items():
        seats.add_row(f"player {seat}", *(str(tally[o]) for o in ("W", "L", "D")))
    console.print(seats)


@app.command()
def simulate(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    games: int = typer.Option(10, "--games", "-n", help="Games to play"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the final tally"),
) -> None:
    """Play random games with invariant checks and log a summary of each."""
    from .game import BaoError
    from .selfplay import play_game, random_agent
    from .utils import Logger, set_seed, create_progress

    config = _load_config(config_path)
    config.ensure_dirs()
    rng = set_seed(config.seed)
    agent = random_agent(rng)
    logger = Logger(log_dir=config.log_dir, verbose=not quiet)

    with create_progress() as progress:
        task = progress.add_task("Simulating", total=games)
        for i in range(games):
            try:
                record = play_game(
                    agent,
                    agent,
                    variant=config.game.variant,
                    max_moves=config.game.max_moves,
                    check_invariants=config.game.check_invariants,
                )
            except BaoError as e:
                console.print(f"[red]Game {i + 1}: {e}[/]")
                raise typer.Exit(code=1)

            logger.log_game(record.summary(i + 1))
            progress.update(task, advance=1)

    console.print(logger.totals_table())
    logger.log_info(f"Log written to {logger.log_file}")


if __name__ == "__main__":
    app()
