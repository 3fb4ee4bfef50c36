"""
Game state for Bao.

States are immutable: the board is a read-only numpy array and every move
produces a new GameState. Two states compare equal when every field matches.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional
import numpy as np

from .board import (
    NUM_PITS,
    PLAYERS,
    HOUSE_PIT,
    Phase,
    Variant,
)

OPENING_MESSAGE = "Game starts. Player 1 to move."

# Variant B starting layout
HOUSE_SEEDS = 6
HOUSE_NEIGHBOUR_SEEDS = 2
HOUSE_SEEDED_HAND = 22


def freeze_board(board) -> np.ndarray:
    """Copy a board into a read-only int16 array."""
    arr = np.array(board, dtype=np.int16)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class PlayerState:
    """Per-player resources."""
    seeds_in_hand: int = 0

    def __post_init__(self):
        if self.seeds_in_hand < 0:
            raise ValueError("seeds_in_hand must be non-negative")


@dataclass(frozen=True)
class Move:
    """A request to sow from one pit."""
    pit_index: int


@dataclass(frozen=True, eq=False)
class GameState:
    """Full game state; see board.py for the pit layout."""
    board: np.ndarray  # shape (32,), dtype int16, read-only
    player1: PlayerState = field(default_factory=PlayerState)
    player2: PlayerState = field(default_factory=PlayerState)
    current_player: int = 1
    phase: Phase = Phase.PLAY
    game_over: bool = False
    winner: Optional[int] = None
    message: str = ""

    def __post_init__(self):
        board = freeze_board(self.board)
        if board.shape != (NUM_PITS,):
            raise ValueError(f"Board must have {NUM_PITS} pits, got shape {board.shape}")
        if np.any(board < 0):
            raise ValueError("Pit counts must be non-negative")
        if self.current_player not in PLAYERS:
            raise ValueError(f"current_player must be 1 or 2, got {self.current_player}")
        if self.winner is not None and self.winner not in PLAYERS:
            raise ValueError(f"winner must be 1, 2 or None, got {self.winner}")
        object.__setattr__(self, "board", board)
        object.__setattr__(self, "phase", Phase(self.phase))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.player1 == other.player1
            and self.player2 == other.player2
            and self.current_player == other.current_player
            and self.phase == other.phase
            and self.game_over == other.game_over
            and self.winner == other.winner
            and self.message == other.message
        )

    __hash__ = None

    @property
    def seeds_in_hand(self) -> int:
        return self.player1.seeds_in_hand + self.player2.seeds_in_hand

    @property
    def total_seeds(self) -> int:
        """Seeds on the board plus both hands; constant for a game."""
        return int(self.board.sum()) + self.seeds_in_hand

    def evolve(self, **changes) -> GameState:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


def create_game(variant: Variant | str = Variant.PREFILLED) -> GameState:
    """
    Create the opening state for a variant.

    Args:
        variant: Variant or its name ("pre-filled"/"kujifunza",
            "house-seeded"/"kiswahili")

    Returns:
        GameState with Player 1 to move
    """
    variant = Variant.parse(variant)
    board = np.zeros(NUM_PITS, dtype=np.int16)

    if variant is Variant.PREFILLED:
        board[:] = 2
        return GameState(
            board=board,
            phase=Phase.PLAY,
            message=OPENING_MESSAGE,
        )

    for house in HOUSE_PIT.values():
        board[house] = HOUSE_SEEDS
        board[house + 1] = HOUSE_NEIGHBOUR_SEEDS
        board[house + 2] = HOUSE_NEIGHBOUR_SEEDS

    return GameState(
        board=board,
        player1=PlayerState(seeds_in_hand=HOUSE_SEEDED_HAND),
        player2=PlayerState(seeds_in_hand=HOUSE_SEEDED_HAND),
        phase=Phase.SETUP,
        message=OPENING_MESSAGE,
    )
