"""
In-memory table of running games.

The move engine is pure, so the only shared state is the latest published
GameState of each game. GameTable serializes moves per game: reading the
current state, running the engine and publishing the result happen under
one per-game lock, and each published state bumps a version number that
callers can pass back to detect they acted on an old read.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from typing import Optional, Union

from .game import (
    GameState,
    Move,
    MoveResult,
    StaleStateError,
    UnknownGameError,
    Variant,
    apply_move,
    create_game,
)


@dataclass
class _Entry:
    state: GameState
    version: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameTable:
    """
    Thread-safe store of games keyed by id.

    Args:
        check_invariants: Passed through to apply_move
    """

    def __init__(self, check_invariants: bool = True):
        self.check_invariants = check_invariants
        self._games: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id: str) -> bool:
        with self._lock:
            return game_id in self._games

    def _entry(self, game_id: str) -> _Entry:
        with self._lock:
            try:
                return self._games[game_id]
            except KeyError:
                raise UnknownGameError(game_id) from None

    def create(
        self,
        variant: Union[Variant, str] = Variant.PREFILLED,
        game_id: Optional[str] = None,
    ) -> str:
        """Start a new game and return its id."""
        game_id = game_id or uuid.uuid4().hex
        entry = _Entry(state=create_game(variant))
        with self._lock:
            if game_id in self._games:
                raise ValueError(f"Game {game_id} already exists")
            self._games[game_id] = entry
        return game_id

    def get(self, game_id: str) -> tuple[int, GameState]:
        """Return (version, state) of the latest published state."""
        entry = self._entry(game_id)
        with entry.lock:
            return entry.version, entry.state

    def remove(self, game_id: str) -> None:
        with self._lock:
            if self._games.pop(game_id, None) is None:
                raise UnknownGameError(game_id)

    def submit(
        self,
        game_id: str,
        player: int,
        move: Union[Move, int],
        expected_version: Optional[int] = None,
    ) -> MoveResult:
        """
        Apply a move from player to the latest state of a game.

        Args:
            game_id: Game to move in
            player: Seat (1 or 2) of the submitting player
            move: Move or pit index
            expected_version: Version the player last saw, if known

        Returns:
            MoveResult; rejected moves leave the game untouched

        Raises:
            UnknownGameError: no such game
            StaleStateError: expected_version is not the current version
        """
        entry = self._entry(game_id)
        with entry.lock:
            if expected_version is not None and expected_version != entry.version:
                raise StaleStateError(game_id, expected_version, entry.version)

            state = entry.state
            if not state.game_over and player != state.current_player:
                return MoveResult(state=state, accepted=False, message="It's not your turn.")

            result = apply_move(state, move, check_invariants=self.check_invariants)
            if result.accepted:
                entry.state = result.state
                entry.version += 1
            return result
