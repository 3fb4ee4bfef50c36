"""
Head-to-head matches between two agents.

Seats alternate every game so neither side always opens. Games that hit
the move limit or a dead end count as draws. Bao has a noticeable
first-move edge, so results are also kept per seat.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..game import Variant
from ..selfplay import Agent, play_game


@dataclass
class ArenaResult:
    """Tally from the candidate's point of view."""

    wins: int
    losses: int
    draws: int
    total_games: int
    win_rate: float
    # seat (1 or 2) -> Counter of "W"/"L"/"D" for the candidate in that seat
    by_seat: dict[int, Counter] = field(default_factory=dict)

    @property
    def score(self) -> float:
        """Win rate counting draws as half."""
        if not self.total_games:
            return 0.0
        return (self.wins + 0.5 * self.draws) / self.total_games


def _outcome(winner: Optional[int], seat: int) -> str:
    if winner is None:
        return "D"
    return "W" if winner == seat else "L"


class Arena:
    """
    Plays agents against each other.

    Args:
        variant: Starting configuration for every game
        max_moves: Move limit per game
    """

    def __init__(
        self,
        variant: Variant | str = Variant.PREFILLED,
        max_moves: int = 300,
    ):
        self.variant = Variant.parse(variant)
        self.max_moves = max_moves

    def play_one(self, candidate: Agent, opponent: Agent, seat: int) -> str:
        """Play a single game with the candidate in seat; return "W", "L" or "D"."""
        seats = (candidate, opponent) if seat == 1 else (opponent, candidate)
        record = play_game(*seats, variant=self.variant, max_moves=self.max_moves)
        return _outcome(record.winner, seat)

    def evaluate(
        self,
        candidate: Agent,
        opponent: Agent,
        num_games: int = 20,
        progress_callback: Optional[Callable[[int, str], None]] = None,
    ) -> ArenaResult:
        """
        Play num_games games, candidate opening the even-numbered ones.

        progress_callback, if given, is called as (games_completed, outcome)
        after every game.
        """
        by_seat = {1: Counter(), 2: Counter()}

        for i in range(num_games):
            seat = 1 if i % 2 == 0 else 2
            outcome = self.play_one(candidate, opponent, seat)
            by_seat[seat][outcome] += 1
            if progress_callback:
                progress_callback(i + 1, outcome)

        totals = by_seat[1] + by_seat[2]
        wins, losses, draws = totals["W"], totals["L"], totals["D"]
        return ArenaResult(
            wins=wins,
            losses=losses,
            draws=draws,
            total_games=num_games,
            win_rate=wins / num_games if num_games else 0.0,
            by_seat=by_seat,
        )
