"""Tests for the dict/JSON form of states and events."""

import json

import pytest

from baozero.game import (
    Capture,
    Lift,
    Relay,
    Sow,
    apply_move,
    create_game,
    dumps_state,
    event_from_dict,
    event_to_dict,
    events_to_dicts,
    loads_state,
    state_from_dict,
    state_to_dict,
)


class TestStateCodec:
    def test_opening_layout(self):
        data = state_to_dict(create_game("house-seeded"))
        assert data["board"][11] == 6
        assert data["player1"] == {"seedsInHand": 22}
        assert data["player2"] == {"seedsInHand": 22}
        assert data["currentPlayer"] == 1
        assert data["phase"] == "setup-phase"
        assert data["gameOver"] is False
        assert data["winner"] is None
        assert data["message"] == "Game starts. Player 1 to move."

    def test_plain_json_types(self):
        state = apply_move(create_game(), 0).state
        blob = dumps_state(state)
        assert json.loads(blob)["board"][3] == 4

    def test_state_survives_storage(self):
        state = apply_move(create_game(), 5).state
        assert loads_state(dumps_state(state)) == state

    def test_missing_field(self):
        data = state_to_dict(create_game())
        del data["currentPlayer"]
        with pytest.raises(ValueError, match="Malformed"):
            state_from_dict(data)

    def test_unknown_phase(self):
        data = state_to_dict(create_game())
        data["phase"] = "endgame"
        with pytest.raises(ValueError):
            state_from_dict(data)

    def test_short_board(self):
        data = state_to_dict(create_game())
        data["board"] = data["board"][:20]
        with pytest.raises(ValueError):
            state_from_dict(data)


class TestEventCodec:
    @pytest.mark.parametrize(
        "event, expected",
        [
            (Lift(from_pit=3, count=4), {"action": "lift", "fromPit": 3, "count": 4}),
            (Sow(to_pit=7, seeds_remaining=2), {"action": "sow", "toPit": 7, "seedsRemaining": 2}),
            (Relay(from_pit=9, count=3), {"action": "relay", "fromPit": 9, "count": 3}),
            (
                Capture(from_pit=16, to_pit=15, count=7),
                {"action": "capture", "fromPit": 16, "toPit": 15, "count": 7},
            ),
        ],
    )
    def test_wire_form(self, event, expected):
        assert event_to_dict(event) == expected
        assert event_from_dict(expected) == event

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            event_from_dict({"action": "steal", "fromPit": 1})

    def test_not_an_event(self):
        with pytest.raises(TypeError):
            event_to_dict("lift")

    def test_move_log(self):
        _, events = apply_move(create_game(), 0)
        dicts = events_to_dicts(events)
        assert len(dicts) == 28
        assert dicts[0] == {"action": "lift", "fromPit": 0, "count": 2}
        assert dicts[3] == {"action": "relay", "fromPit": 2, "count": 3}
