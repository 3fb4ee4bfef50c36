"""Game module - Bao rules, move engine and state codec."""

from .board import (
    NUM_PITS,
    TOTAL_SEEDS,
    FREEZE_AT,
    SIDES,
    OPPONENT_PIT,
    BEHIND_PIT,
    HOUSE_PIT,
    Phase,
    Side,
    Variant,
    next_pit,
    is_inner,
    is_frozen,
    other_player,
)
from .state import GameState, PlayerState, Move, create_game
from .events import StepEvent, Lift, Sow, Relay, Capture
from .errors import (
    BaoError,
    EngineInvariantError,
    SeedConservationError,
    StaleStateError,
    UnknownGameError,
)
from .rules import validate_move, legal_moves, legal_moves_mask, check_win
from .sowing import sow, event_budget
from .engine import MoveResult, apply_move, replay_events, is_terminal, render
from .codec import (
    state_to_dict,
    state_from_dict,
    event_to_dict,
    event_from_dict,
    events_to_dicts,
    dumps_state,
    loads_state,
)

__all__ = [
    "NUM_PITS",
    "TOTAL_SEEDS",
    "FREEZE_AT",
    "SIDES",
    "OPPONENT_PIT",
    "BEHIND_PIT",
    "HOUSE_PIT",
    "Phase",
    "Side",
    "Variant",
    "next_pit",
    "is_inner",
    "is_frozen",
    "other_player",
    "GameState",
    "PlayerState",
    "Move",
    "create_game",
    "StepEvent",
    "Lift",
    "Sow",
    "Relay",
    "Capture",
    "BaoError",
    "EngineInvariantError",
    "SeedConservationError",
    "StaleStateError",
    "UnknownGameError",
    "validate_move",
    "legal_moves",
    "legal_moves_mask",
    "check_win",
    "sow",
    "event_budget",
    "MoveResult",
    "apply_move",
    "replay_events",
    "is_terminal",
    "render",
    "state_to_dict",
    "state_from_dict",
    "event_to_dict",
    "event_from_dict",
    "events_to_dicts",
    "dumps_state",
    "loads_state",
]
