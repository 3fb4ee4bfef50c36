"""
Sowing, relay and capture.

A move lifts every seed from one pit and drops them one at a time along
the player's cycle. Where the last seed lands decides what happens next:

- landing pit now holds 2-9 seeds: relay, lift it and keep sowing
- 10 or more in an inner row: stop, the pit is frozen from now on
- 10 or more in an outer row: relay (outer pits never freeze)
- exactly 1 in the sower's inner row, facing an opponent pit with 1-9
  seeds: capture the facing pit (and the pit behind it when that holds
  1-9 seeds) and keep sowing the captured seeds from the landing pit
- anything else: stop

Frozen pits are stepped over while sowing, so their count never changes.

A move never emits more than two events per seed on the board. A relay or
capture that would need more is not made, and the move stops where the
last seed fell. A relay that would lift the same board from the same pit
a second time also stops the move.
"""

from __future__ import annotations

from typing import Optional, Tuple
import numpy as np

from .board import (
    MIN_SOW,
    FREEZE_AT,
    SIDES,
    OPPONENT_PIT,
    BEHIND_PIT,
    is_frozen,
    is_inner,
    next_pit,
)
from .events import Capture, Lift, Relay, Sow, StepEvent

EVENTS_PER_SEED = 2


def _advance(board: np.ndarray, pit: int, player: int) -> int:
    """Next pit that can receive a seed. Outer pits never freeze, so this ends."""
    pit = next_pit(pit, player)
    while is_frozen(int(board[pit]), pit):
        pit = next_pit(pit, player)
    return pit


def _capturable(count: int) -> bool:
    return 1 <= count < FREEZE_AT


def _capture(
    board: np.ndarray,
    landing: int,
    events: list[StepEvent],
    room: Optional[int] = None,
) -> int:
    """
    Empty the facing pit (and the one behind it) into the flow; return the total.

    Nothing is taken when the capture events plus the sowing of the
    captured seeds would not fit in room.
    """
    facing = OPPONENT_PIT[landing]
    facing_count = int(board[facing])
    if not _capturable(facing_count):
        return 0

    behind = BEHIND_PIT[facing]
    behind_count = int(board[behind])
    if not _capturable(behind_count):
        behind_count = 0

    total = facing_count + behind_count
    if room is not None and (2 if behind_count else 1) + total > room:
        return 0

    board[facing] = 0
    events.append(Capture(from_pit=facing, to_pit=landing, count=total))
    if behind_count:
        board[behind] = 0
        events.append(Capture(from_pit=behind, to_pit=landing, count=total))
    return total


def _land(
    board: np.ndarray,
    pit: int,
    player: int,
    events: list[StepEvent],
    relayed: set[tuple[bytes, int]],
    room: Optional[int] = None,
) -> int:
    """
    Resolve the pit where the last seed fell; return the seeds to keep sowing.

    room is how many more events the move may emit. A relay or capture
    that would need more ends the move on the landing pit.
    """
    count = int(board[pit])

    if MIN_SOW <= count < FREEZE_AT or (count >= FREEZE_AT and not is_inner(pit)):
        if room is not None and 1 + count > room:
            return 0
        # Re-lifting an identical board from the same pit would loop forever
        key = (board.tobytes(), pit)
        if key in relayed:
            return 0
        relayed.add(key)
        board[pit] = 0
        events.append(Relay(from_pit=pit, count=count))
        return count

    if count == 1 and pit in SIDES[player].inner:
        return _capture(board, pit, events, room)

    return 0


def event_budget(board: np.ndarray) -> int:
    """Most step events a single move on board may emit."""
    return EVENTS_PER_SEED * int(np.sum(board))


def sow(
    board: np.ndarray,
    pit_index: int,
    player: int,
) -> Tuple[np.ndarray, tuple[StepEvent, ...]]:
    """
    Play out a move from pit_index on a copy of board.

    The caller is responsible for validating the move first. The move
    emits at most event_budget(board) events: a relay or capture that
    would go past it is not made and the move ends where the last seed
    fell.

    Args:
        board: Board before the move (not modified)
        pit_index: Pit to lift
        player: Player making the move

    Returns:
        (new_board, events) with events in the order they happened
    """
    work = np.array(board, dtype=np.int16)
    budget = event_budget(work)
    events: list[StepEvent] = []
    relayed: set[tuple[bytes, int]] = set()

    seeds = int(work[pit_index])
    work[pit_index] = 0
    events.append(Lift(from_pit=pit_index, count=seeds))

    pit = pit_index
    while seeds > 0:
        pit = _advance(work, pit, player)
        work[pit] += 1
        seeds -= 1
        events.append(Sow(to_pit=pit, seeds_remaining=seeds))

        if seeds == 0:
            seeds = _land(work, pit, player, events, relayed, budget - len(events))

    return work, tuple(events)
