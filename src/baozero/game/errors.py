"""Exceptions raised by baozero."""

from __future__ import annotations


class BaoError(Exception):
    """Base class for baozero errors."""


class EngineInvariantError(BaoError):
    """The engine reached an impossible state; the move computation is void."""


class SeedConservationError(EngineInvariantError):
    """Seeds were created or destroyed during a move."""

    def __init__(self, before: int, after: int):
        self.before = before
        self.after = after
        super().__init__(f"Seed count changed during move: {before} -> {after}")


class UnknownGameError(BaoError, KeyError):
    """No game with the given id."""


class StaleStateError(BaoError):
    """A move was submitted against an outdated version of a game."""

    def __init__(self, game_id: str, expected: int, actual: int):
        self.game_id = game_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Game {game_id} is at version {actual}, move was based on {expected}"
        )
