"""
Console output and game logs, using rich.

Every finished game becomes one GameSummary; Logger appends it as a JSON
line to games_<timestamp>.jsonl under the log directory and, when verbose,
prints it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from datetime import datetime
from functools import partialmethod
from pathlib import Path
from typing import Optional, Any

from rich.console import Console
from rich.table import Table
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TimeElapsedColumn,
    MofNCompleteColumn,
)
from rich.panel import Panel


console = Console()


@dataclass
class GameSummary:
    """What one game looked like from the engine's side."""

    game_index: int
    variant: str
    num_moves: int
    finished: bool
    winner: Optional[int]
    total_events: int
    longest_move: int  # Most step events emitted by a single move
    relays: int
    captures: int
    frozen_pits: int
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat(timespec="seconds")

    def describe(self) -> str:
        outcome = f"[green]player {self.winner} wins[/]" if self.finished else "[yellow]unfinished[/]"
        return (
            f"Game {self.game_index} ({self.variant}): {outcome} after {self.num_moves} moves, "
            f"{self.total_events} events (longest {self.longest_move}), "
            f"{self.relays} relays, {self.captures} captures, {self.frozen_pits} frozen"
        )


class Logger:
    """
    Writes game summaries to disk and, when verbose, to the console.

    Args:
        log_dir: Directory for the JSONL file (created if missing)
        verbose: Print summaries and messages
    """

    def __init__(self, log_dir: str = "runs", verbose: bool = True):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.verbose = verbose
        self.log_file = self.log_dir / f"games_{datetime.now():%Y%m%d_%H%M%S}.jsonl"
        self.history: list[GameSummary] = []

    def log_game(self, summary: GameSummary) -> None:
        self.history.append(summary)
        with self.log_file.open("a") as f:
            f.write(json.dumps(asdict(summary)) + "\n")
        self.log_message(summary.describe())

    def log_message(self, message: str, style: str = "white") -> None:
        if self.verbose:
            console.print(f"[{style}]{message}[/]")

    log_info = partialmethod(log_message, style="blue")

    def totals_table(self) -> Table:
        """Aggregate of every game logged so far."""
        games = self.history
        table = Table(title=f"{len(games)} games", show_header=False, box=None)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        for player in (1, 2):
            table.add_row(f"Player {player} wins", str(sum(g.winner == player for g in games)))
        table.add_row("Unfinished", str(sum(not g.finished for g in games)))
        if games:
            table.add_row("Mean moves", f"{sum(g.num_moves for g in games) / len(games):.1f}")
            table.add_row("Longest move", str(max(g.longest_move for g in games)))
            table.add_row("Captures", str(sum(g.captures for g in games)))
        return table


def create_progress() -> Progress:
    """Progress bar with a running count and elapsed time."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def print_config(config: Any) -> None:
    """Print a Config as one row per field, grouped by section."""
    table = Table(title="Configuration")
    table.add_column("Section", style="magenta")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value")

    for f in fields(config):
        value = getattr(config, f.name)
        if hasattr(value, "__dataclass_fields__"):
            for key, item in asdict(value).items():
                table.add_row(f.name, key, str(item))
        else:
            table.add_row("", f.name, str(value))
    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    console.print(Panel(board_str, title=title, border_style="blue", expand=False))
