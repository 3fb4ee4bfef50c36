"""
Step events emitted while a move is processed.

A move produces an ordered tuple of these; replaying them in order
reproduces exactly how the seeds travelled. They carry no state beyond
their order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class Lift:
    """All seeds taken from the chosen pit."""
    action: ClassVar[str] = "lift"
    from_pit: int
    count: int


@dataclass(frozen=True)
class Sow:
    """One seed dropped; seeds_remaining is what is left in hand."""
    action: ClassVar[str] = "sow"
    to_pit: int
    seeds_remaining: int


@dataclass(frozen=True)
class Relay:
    """Landing pit re-lifted to keep sowing."""
    action: ClassVar[str] = "relay"
    from_pit: int
    count: int


@dataclass(frozen=True)
class Capture:
    """
    Seeds taken from an opponent pit into the capturing pit.

    count is the total captured by the whole capture, repeated on each
    event when two pits are emptied.
    """
    action: ClassVar[str] = "capture"
    from_pit: int
    to_pit: int
    count: int


StepEvent = Union[Lift, Sow, Relay, Capture]
