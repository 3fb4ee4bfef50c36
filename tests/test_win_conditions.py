"""Tests for end-of-game detection."""

import numpy as np
import pytest

from baozero.game import (
    GameState,
    apply_move,
    check_win,
    create_game,
    is_terminal,
)
from baozero.game.rules import has_valid_moves


def make_board(pits):
    board = np.zeros(32, dtype=np.int16)
    for pit, count in pits.items():
        board[pit] = count
    return board


class TestHasValidMoves:
    def test_single_inner_seed_counts(self):
        assert has_valid_moves(make_board({20: 1}), 2)

    def test_single_outer_seed_does_not(self):
        assert not has_valid_moves(make_board({28: 1}), 2)

    @pytest.mark.parametrize("count", [2, 5, 9])
    def test_sowable_outer_pit(self, count):
        assert has_valid_moves(make_board({3: count}), 1)

    def test_big_outer_pit_does_not_count(self):
        assert not has_valid_moves(make_board({3: 12}), 1)

    def test_opponent_seeds_do_not_count(self):
        assert not has_valid_moves(make_board({20: 5, 28: 3}), 1)


class TestCheckWin:
    def test_game_continues(self):
        assert check_win(make_board({20: 2}), 2) == (False, None)

    def test_mover_wins_when_opponent_stuck(self):
        assert check_win(make_board({3: 4}), 2) == (True, 1)
        assert check_win(make_board({27: 4}), 1) == (True, 2)


class TestWinningMove:
    def _winning_state(self):
        board = make_board({13: 2, 16: 4, 31: 3})
        return GameState(board=board)

    def test_capture_ends_game(self):
        result = apply_move(self._winning_state(), 13)
        state = result.state
        assert result.accepted
        assert state.game_over
        assert state.winner == 1
        assert state.current_player == 1
        assert state.message == "Player 1 wins!"
        assert result.message == "Player 1 wins!"

    def test_no_moves_after_game_over(self):
        state = apply_move(self._winning_state(), 13).state
        result = apply_move(state, 0)
        assert not result.accepted
        assert result.message == "Invalid move: Game is already over."

    def test_is_terminal_after_win(self):
        state = apply_move(self._winning_state(), 13).state
        assert is_terminal(state) == (True, 1.0)

    def test_player2_win(self):
        board = make_board({30: 2, 15: 3, 0: 2})
        state = GameState(board=board, current_player=2)
        new_state = apply_move(state, 30).state
        assert new_state.game_over
        assert new_state.winner == 2
        assert new_state.current_player == 2
        assert new_state.message == "Player 2 wins!"

    def test_game_continues_with_one_inner_seed(self):
        board = make_board({13: 2, 16: 4, 31: 3, 20: 1})
        state = apply_move(GameState(board=board), 13).state
        assert not state.game_over
        assert state.winner is None
        assert state.current_player == 2
        assert state.message == "Player 2's turn."


class TestIsTerminal:
    def test_opening_is_not_terminal(self):
        assert is_terminal(create_game()) == (False, 0.0)

    def test_loser_to_move_scores_minus_one(self):
        state = GameState(board=make_board({3: 4}), current_player=2,
                          game_over=True, winner=1)
        assert is_terminal(state) == (True, -1.0)

    def test_dead_end_is_a_draw(self):
        # Player 2 still has a seed in the inner row, but only one
        state = GameState(board=make_board({20: 1, 3: 4}), current_player=2)
        assert is_terminal(state) == (True, 0.0)
