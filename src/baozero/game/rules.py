"""
Move validation and win detection.
"""

from __future__ import annotations

from typing import Optional, Tuple
import numpy as np

from .board import (
    NUM_PITS,
    MIN_SOW,
    FREEZE_AT,
    SIDES,
    Phase,
    is_frozen,
    other_player,
    owns,
)
from .state import GameState, Move


def _is_pit_index(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return 0 <= value < NUM_PITS


def validate_move(state: GameState, move: Move) -> Optional[str]:
    """
    Check a move against the current state without changing anything.

    Returns:
        None if the move may be played, otherwise a message saying why not
    """
    if state.game_over:
        return "Invalid move: Game is already over."

    pit = move.pit_index
    if not _is_pit_index(pit):
        return f"Invalid move: Pit must be between 0 and {NUM_PITS - 1}."

    if not owns(state.current_player, pit):
        return "Invalid move: Not your pit."

    count = int(state.board[pit])
    if count == 0:
        return "Invalid move: Pit is empty."

    if state.phase is Phase.PLAY and count < MIN_SOW:
        return f"Invalid move: Pit must have at least {MIN_SOW} seeds."
    if is_frozen(count, pit):
        return (
            f"Invalid move: Pit with {FREEZE_AT} or more seeds "
            "cannot be moved or captured."
        )

    return None


def legal_moves(state: GameState) -> list[int]:
    """Return the pits the current player may sow from."""
    if state.game_over:
        return []
    pits = SIDES[state.current_player].pits
    return [p for p in pits if validate_move(state, Move(p)) is None]


def legal_moves_mask(state: GameState) -> np.ndarray:
    """Boolean mask of length 32 where True = legal pit."""
    mask = np.zeros(NUM_PITS, dtype=bool)
    mask[legal_moves(state)] = True
    return mask


def has_valid_moves(board: np.ndarray, player: int) -> bool:
    """
    True if the player has a seed anywhere in their inner row, or an
    outer-row pit that could be sown (2-9 seeds).
    """
    side = SIDES[player]
    inner = board[side.inner.start:side.inner.stop]
    outer = board[side.outer.start:side.outer.stop]
    if np.any(inner >= 1):
        return True
    return bool(np.any((outer >= MIN_SOW) & (outer < FREEZE_AT)))


def check_win(board: np.ndarray, next_player: int) -> Tuple[bool, Optional[int]]:
    """
    Decide whether the game ends before next_player moves.

    Returns:
        (game_over, winner) where winner is the player who just moved
        when next_player is left without a valid move
    """
    if has_valid_moves(board, next_player):
        return False, None
    return True, other_player(next_player)
