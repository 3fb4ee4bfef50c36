"""
Plain-dict and JSON form of states and step events.

The key names match what the browser client reads (camelCase), so a
stored blob can be sent to it unchanged.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from .board import Phase
from .events import Capture, Lift, Relay, Sow, StepEvent
from .state import GameState, PlayerState


def state_to_dict(state: GameState) -> dict[str, Any]:
    return {
        "board": [int(x) for x in state.board],
        "player1": {"seedsInHand": state.player1.seeds_in_hand},
        "player2": {"seedsInHand": state.player2.seeds_in_hand},
        "currentPlayer": state.current_player,
        "phase": state.phase.value,
        "gameOver": state.game_over,
        "winner": state.winner,
        "message": state.message,
    }


def state_from_dict(data: dict[str, Any]) -> GameState:
    """
    Rebuild a GameState from state_to_dict output.

    Raises:
        ValueError: if a field is missing or malformed
    """
    try:
        return GameState(
            board=data["board"],
            player1=PlayerState(seeds_in_hand=int(data["player1"]["seedsInHand"])),
            player2=PlayerState(seeds_in_hand=int(data["player2"]["seedsInHand"])),
            current_player=int(data["currentPlayer"]),
            phase=Phase(data["phase"]),
            game_over=bool(data.get("gameOver", False)),
            winner=data.get("winner"),
            message=data.get("message", ""),
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed game state: {e}") from e


def event_to_dict(event: StepEvent) -> dict[str, Any]:
    if isinstance(event, Lift):
        return {"action": event.action, "fromPit": event.from_pit, "count": event.count}
    if isinstance(event, Sow):
        return {"action": event.action, "toPit": event.to_pit, "seedsRemaining": event.seeds_remaining}
    if isinstance(event, Relay):
        return {"action": event.action, "fromPit": event.from_pit, "count": event.count}
    if isinstance(event, Capture):
        return {
            "action": event.action,
            "fromPit": event.from_pit,
            "toPit": event.to_pit,
            "count": event.count,
        }
    raise TypeError(f"Not a step event: {event!r}")


def event_from_dict(data: dict[str, Any]) -> StepEvent:
    action = data.get("action")
    if action == Lift.action:
        return Lift(from_pit=data["fromPit"], count=data["count"])
    if action == Sow.action:
        return Sow(to_pit=data["toPit"], seeds_remaining=data["seedsRemaining"])
    if action == Relay.action:
        return Relay(from_pit=data["fromPit"], count=data["count"])
    if action == Capture.action:
        return Capture(from_pit=data["fromPit"], to_pit=data["toPit"], count=data["count"])
    raise ValueError(f"Unknown step action: {action!r}")


def events_to_dicts(events: Iterable[StepEvent]) -> list[dict[str, Any]]:
    return [event_to_dict(e) for e in events]


def dumps_state(state: GameState) -> str:
    return json.dumps(state_to_dict(state))


def loads_state(blob: str) -> GameState:
    return state_from_dict(json.loads(blob))
