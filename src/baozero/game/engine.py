"""
Move processing for Bao.

apply_move is the single entry point: validate, sow, then check whether
the next player can still move. It is a pure function of its inputs; the
input state is never modified and every accepted move returns a fresh
state together with the step events that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union
import numpy as np

from .board import SIDES, NUM_PITS, is_frozen, other_player
from .errors import EngineInvariantError, SeedConservationError
from .events import Capture, Lift, Relay, Sow, StepEvent
from .rules import check_win, legal_moves, validate_move
from .sowing import sow
from .state import GameState, Move


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of apply_move.

    Rejected moves keep the input state as is, carry no events and explain
    themselves in message. Unpacks as (state, events).
    """
    state: GameState
    events: tuple[StepEvent, ...] = ()
    accepted: bool = True
    message: str = ""

    def __iter__(self) -> Iterator:
        yield self.state
        yield self.events


def _frozen_pits(board: np.ndarray) -> list[int]:
    return [p for p in range(NUM_PITS) if is_frozen(int(board[p]), p)]


def _check_invariants(before: GameState, after: GameState) -> None:
    if after.total_seeds != before.total_seeds:
        raise SeedConservationError(before.total_seeds, after.total_seeds)
    for pit in _frozen_pits(before.board):
        if after.board[pit] != before.board[pit]:
            raise EngineInvariantError(
                f"Frozen pit {pit} changed: {before.board[pit]} -> {after.board[pit]}"
            )


def apply_move(
    state: GameState,
    move: Union[Move, int],
    check_invariants: bool = True,
) -> MoveResult:
    """
    Apply a move and return the new state with its step events.

    Args:
        state: Current game state
        move: Move (or bare pit index) for the current player
        check_invariants: Verify seed conservation and frozen pits afterwards

    Returns:
        MoveResult; illegal moves come back with accepted=False

    Raises:
        EngineInvariantError: the engine broke one of its own invariants
    """
    if not isinstance(move, Move):
        move = Move(pit_index=move)

    error = validate_move(state, move)
    if error is not None:
        return MoveResult(state=state, accepted=False, message=error)

    player = state.current_player
    board, events = sow(state.board, move.pit_index, player)

    next_player = other_player(player)
    game_over, winner = check_win(board, next_player)

    new_state = state.evolve(
        board=board,
        current_player=player if game_over else next_player,
        game_over=game_over,
        winner=winner,
        message=f"Player {winner} wins!" if game_over else f"Player {next_player}'s turn.",
    )

    if check_invariants:
        _check_invariants(state, new_state)

    return MoveResult(state=new_state, events=events, message=new_state.message)


def replay_events(board: np.ndarray, events: Iterable[StepEvent]) -> np.ndarray:
    """
    Rebuild the board a move produced from the board before it and its events.

    This is what an animation of the move shows step by step.

    Raises:
        EngineInvariantError: if an event does not fit the board it is applied to
    """
    work = np.array(board, dtype=np.int16)
    for event in events:
        if isinstance(event, (Lift, Relay)):
            if work[event.from_pit] != event.count:
                raise EngineInvariantError(
                    f"{event.action} of {event.count} from pit {event.from_pit} "
                    f"holding {work[event.from_pit]}"
                )
            work[event.from_pit] = 0
        elif isinstance(event, Sow):
            work[event.to_pit] += 1
        elif isinstance(event, Capture):
            if work[event.from_pit] == 0:
                raise EngineInvariantError(f"capture from empty pit {event.from_pit}")
            work[event.from_pit] = 0
        else:
            raise TypeError(f"Not a step event: {event!r}")
    return work


def is_terminal(state: GameState) -> Tuple[bool, float]:
    """
    Check if the game is over.

    Returns:
        (done, value) where value is from the perspective of the player
        to move: +1 win, -1 loss, 0 for a position nobody can move out of.
        A finished game leaves the winner to move.
    """
    if state.game_over:
        return True, 1.0 if state.winner == state.current_player else -1.0
    if not legal_moves(state):
        return True, 0.0
    return False, 0.0


def render(state: GameState, last_move: Optional[int] = None) -> str:
    """
    Render the board as seen from Player 1's seat.

    Frozen pits are marked with '*', the last lifted pit with '^'.
    """
    def cell(pit: int) -> str:
        count = int(state.board[pit])
        mark = "*" if is_frozen(count, pit) else ("^" if pit == last_move else " ")
        return f"{count:>3}{mark}"

    def row(pits) -> str:
        return "".join(cell(p) for p in pits)

    p1, p2 = SIDES[1], SIDES[2]
    width = 4 * len(p1.outer)
    lines = [
        f"P2 hand: {state.player2.seeds_in_hand}",
        row(reversed(p2.outer)) + "   outer",
        row(p2.inner) + "   inner",
        "-" * width,
        row(reversed(p1.inner)) + "   inner",
        row(p1.outer) + "   outer",
        f"P1 hand: {state.player1.seeds_in_hand}",
    ]
    if state.game_over:
        lines.append(f"Game over - player {state.winner} wins")
    else:
        lines.append(f"Player {state.current_player} to move ({state.phase.value})")
    return "\n".join(lines)
