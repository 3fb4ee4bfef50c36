"""
baozero - Bao move engine with search-based AI players.

The core is a pure move engine for a two-row-per-side mancala game:
sowing with relay, captures from the facing pits, frozen pits and win
detection, with every move described by an ordered log of step events.

Usage:
    from baozero import create_game, apply_move

    state = create_game("pre-filled")
    result = apply_move(state, 0)
    for event in result.events:
        print(event)
    state = result.state
"""

__version__ = "0.1.0"

from .game import (
    GameState,
    Move,
    MoveResult,
    Variant,
    apply_move,
    create_game,
)
from . import game
from . import mcts
from . import play

__all__ = [
    "GameState",
    "Move",
    "MoveResult",
    "Variant",
    "apply_move",
    "create_game",
    "game",
    "mcts",
    "play",
    "__version__",
]
