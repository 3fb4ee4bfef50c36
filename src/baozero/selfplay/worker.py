"""
Game playing loop for AI and random players.

A player (agent) is any callable taking a GameState and returning the pit
to sow from. play_game drives two of them through the engine and keeps a
record of every move and its step events.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional
import numpy as np

from ..game import (
    GameState,
    NUM_PITS,
    Variant,
    Capture,
    Relay,
    StepEvent,
    apply_move,
    create_game,
    is_frozen,
    legal_moves,
)
from ..mcts import MCTS, Evaluator
from ..utils.logging import GameSummary

Agent = Callable[[GameState], int]


@dataclass
class GameRecord:
    """Record of a complete game."""

    variant: str
    moves: List[int] = field(default_factory=list)
    events: List[tuple[StepEvent, ...]] = field(default_factory=list)
    final_state: Optional[GameState] = None

    @property
    def num_moves(self) -> int:
        return len(self.moves)

    @property
    def finished(self) -> bool:
        return self.final_state is not None and self.final_state.game_over

    @property
    def winner(self) -> Optional[int]:
        return self.final_state.winner if self.finished else None

    def count(self, kind: type) -> int:
        return sum(isinstance(e, kind) for move in self.events for e in move)

    def summary(self, game_index: int) -> GameSummary:
        board = self.final_state.board
        return GameSummary(
            game_index=game_index,
            variant=self.variant,
            num_moves=self.num_moves,
            finished=self.finished,
            winner=self.winner,
            total_events=sum(len(m) for m in self.events),
            longest_move=max((len(m) for m in self.events), default=0),
            relays=self.count(Relay),
            captures=self.count(Capture),
            frozen_pits=sum(is_frozen(int(board[p]), p) for p in range(NUM_PITS)),
        )


def random_agent(rng: Optional[np.random.Generator] = None) -> Agent:
    """Player choosing uniformly among legal pits."""
    rng = rng if rng is not None else np.random.default_rng()

    def choose(state: GameState) -> int:
        return int(rng.choice(legal_moves(state)))

    return choose


def mcts_agent(
    evaluate_fn: Evaluator,
    num_simulations: int = 100,
    temperature: float = 0.0,
    c_puct: float = 1.5,
    rng: Optional[np.random.Generator] = None,
) -> Agent:
    """Player searching with MCTS before every move (no root noise)."""
    mcts = MCTS(evaluate_fn=evaluate_fn, c_puct=c_puct, add_noise=False, rng=rng)

    def choose(state: GameState) -> int:
        root = mcts.search(state, num_simulations)
        return root.select_action(temperature, rng=rng)

    return choose


def play_game(
    player1: Agent,
    player2: Agent,
    variant: Variant | str = Variant.PREFILLED,
    max_moves: int = 300,
    check_invariants: bool = True,
    on_move: Optional[Callable[[int, GameState, tuple[StepEvent, ...]], None]] = None,
) -> GameRecord:
    """
    Play one game between two agents.

    The game ends when it is won, when the player to move has no legal
    pit, or after max_moves moves.

    Args:
        player1: Agent for player 1
        player2: Agent for player 2
        variant: Starting configuration
        max_moves: Move limit
        check_invariants: Passed through to apply_move
        on_move: Optional callback(pit, new_state, events) after each move

    Returns:
        GameRecord of the game

    Raises:
        ValueError: if an agent picks an illegal pit
    """
    state = create_game(variant)
    record = GameRecord(variant=Variant.parse(variant).value)
    agents = {1: player1, 2: player2}

    while len(record.moves) < max_moves:
        if state.game_over or not legal_moves(state):
            break

        pit = agents[state.current_player](state)
        result = apply_move(state, pit, check_invariants=check_invariants)
        if not result.accepted:
            raise ValueError(f"Player {state.current_player} chose pit {pit}: {result.message}")

        state = result.state
        record.moves.append(pit)
        record.events.append(result.events)
        if on_move:
            on_move(pit, state, result.events)

    record.final_state = state
    return record


def play_random_game(
    rng: Optional[np.random.Generator] = None,
    variant: Variant | str = Variant.PREFILLED,
    max_moves: int = 300,
) -> GameRecord:
    """Play a game with random moves on both sides (for testing)."""
    rng = rng if rng is not None else np.random.default_rng()
    agent = random_agent(rng)
    return play_game(agent, agent, variant=variant, max_moves=max_moves)
