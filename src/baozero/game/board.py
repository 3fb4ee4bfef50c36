"""
Bao board layout.

The board is a flat array of 32 pits. Player 1 owns pits 0-15, Player 2
owns pits 16-31. Seen from Player 1's seat:

    31 30 29 28 27 26 25 24   <- outer row (P2)
    16 17 18 19 20 21 22 23   <- inner row (P2)
    -----------------------
    15 14 13 12 11 10  9  8   <- inner row (P1)
     0  1  2  3  4  5  6  7   <- outer row (P1)

Each player sows around a single fixed cycle over their own 16 pits:
Player 1 walks 0 -> 15 and wraps to 0, Player 2 walks 16 -> 31 and wraps
to 16. Inner rows face each other; only they can capture or freeze.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NUM_PITS = 32
PLAYERS = (1, 2)

# Relay needs at least this many seeds in the landing pit
MIN_SOW = 2
# Inner-row pits at or above this count are frozen
FREEZE_AT = 10

TOTAL_SEEDS = 64


class Phase(str, Enum):
    SETUP = "setup-phase"
    PLAY = "play-phase"


class Variant(str, Enum):
    """Starting configurations."""
    PREFILLED = "pre-filled"
    HOUSE_SEEDED = "house-seeded"

    @classmethod
    def parse(cls, name: str | Variant) -> Variant:
        """Accept the canonical value or its Swahili name."""
        if isinstance(name, Variant):
            return name
        available = ", ".join(v.value for v in cls)
        if not isinstance(name, str):
            raise ValueError(f"Unknown variant {name!r}. Available: {available}")
        key = name.strip().lower()
        if key in _VARIANT_ALIASES:
            return _VARIANT_ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown variant '{name}'. Available: {available}") from None


_VARIANT_ALIASES = {
    "kujifunza": Variant.PREFILLED,
    "kiswahili": Variant.HOUSE_SEEDED,
}


@dataclass(frozen=True)
class Side:
    """The two rows owned by one player."""
    outer: range
    inner: range

    @property
    def pits(self) -> range:
        return range(min(self.outer.start, self.inner.start),
                     max(self.outer.stop, self.inner.stop))


SIDES: dict[int, Side] = {
    1: Side(outer=range(0, 8), inner=range(8, 16)),
    2: Side(outer=range(24, 32), inner=range(16, 24)),
}

# The nyumba: house pit of each player's inner row
HOUSE_PIT: dict[int, int] = {1: 11, 2: 19}

# Inner-row pit -> the opponent inner-row pit facing it
OPPONENT_PIT: dict[int, int] = {
    8: 23, 9: 22, 10: 21, 11: 20, 12: 19, 13: 18, 14: 17, 15: 16,
    16: 15, 17: 14, 18: 13, 19: 12, 20: 11, 21: 10, 22: 9, 23: 8,
}

# Inner-row pit -> the outer-row pit of the same player directly behind it
BEHIND_PIT: dict[int, int] = {
    8: 7, 9: 6, 10: 5, 11: 4, 12: 3, 13: 2, 14: 1, 15: 0,
    16: 31, 17: 30, 18: 29, 19: 28, 20: 27, 21: 26, 22: 25, 23: 24,
}


def other_player(player: int) -> int:
    return 2 if player == 1 else 1


def owner(pit: int) -> int:
    """Return the player (1 or 2) owning a pit."""
    return 1 if pit < 16 else 2


def owns(player: int, pit: int) -> bool:
    return pit in SIDES[player].pits


def is_inner(pit: int) -> bool:
    """True for pits in either player's inner row."""
    return pit in SIDES[1].inner or pit in SIDES[2].inner


def is_frozen(count: int, pit: int) -> bool:
    """Inner-row pits holding FREEZE_AT or more seeds never move again."""
    return count >= FREEZE_AT and is_inner(pit)


def next_pit(pit: int, player: int) -> int:
    """
    Next pit on the player's sowing cycle.

    Args:
        pit: A pit owned by player
        player: 1 or 2

    Returns:
        The following pit, wrapping from the last pit back to the first
    """
    pits = SIDES[player].pits
    if pit not in pits:
        raise ValueError(f"Pit {pit} is not on player {player}'s cycle")
    if pit == pits.stop - 1:
        return pits.start
    return pit + 1
