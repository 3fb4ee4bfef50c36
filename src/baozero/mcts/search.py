"""
Monte Carlo tree search over the 32 pits.

Children are picked by PUCT:

    score(a) = Q(a) + c_puct * P(a) * sqrt(1 + sum_b N(b)) / (1 + N(a))

Each simulation walks down by score until it reaches a position nobody has
evaluated yet (or a finished one), asks the evaluator about it and credits
the result to every edge on the way back up.

Evaluators return (policy, value) with value from the point of view of
the player to move in the evaluated state.
"""

from __future__ import annotations

from typing import Callable, Tuple, Optional
import numpy as np

from .node import Node, for_player
from ..game import (
    GameState,
    NUM_PITS,
    SIDES,
    apply_move,
    is_terminal,
    legal_moves,
    legal_moves_mask,
)

Evaluator = Callable[[GameState], Tuple[np.ndarray, float]]


class MCTS:
    """
    PUCT tree search driven by an evaluator.

    Args:
        evaluate_fn: Function that takes a state and returns (policy, value)
        c_puct: Weight of the prior term against Q
        dirichlet_alpha: Concentration of the root noise
        dirichlet_epsilon: Share of the root priors replaced by noise
        add_noise: Whether to perturb root priors
        rng: numpy Generator for the noise (global numpy state if None)
    """

    def __init__(
        self,
        evaluate_fn: Evaluator,
        c_puct: float = 1.5,
        dirichlet_alpha: float = 0.3,
        dirichlet_epsilon: float = 0.25,
        add_noise: bool = True,
        rng: Optional[np.random.Generator] = None,
    ):
        self.evaluate_fn = evaluate_fn
        self.c_puct = c_puct
        self.dirichlet_alpha = dirichlet_alpha
        self.dirichlet_epsilon = dirichlet_epsilon
        self.add_noise = add_noise
        self.rng = rng if rng is not None else np.random

    def search(
        self,
        state: GameState,
        num_simulations: int,
        root: Optional[Node] = None,
    ) -> Node:
        """
        Run simulations from state.

        Args:
            state: Position to search; the player to move needs a legal pit
            num_simulations: Number of simulations to run
            root: Node from an earlier search of the same state, to keep its statistics

        Returns:
            The root node
        """
        root = root if root is not None else Node(state=state)
        if not root.is_expanded:
            priors, _ = self.evaluate_fn(state)
            root.expand(priors, legal_moves_mask(state))

        if self.add_noise:
            self._perturb_priors(root)

        for _ in range(num_simulations):
            self._simulate(root)
        return root

    def _perturb_priors(self, node: Node) -> None:
        legal = legal_moves_mask(node.state)
        noise = self.rng.dirichlet(np.full(NUM_PITS, self.dirichlet_alpha))
        noise = np.where(legal, noise, 0.0)
        if noise.sum() > 0:
            noise /= noise.sum()
        eps = self.dirichlet_epsilon
        node.P = ((1 - eps) * node.P + eps * noise).astype(np.float32)

    def _simulate(self, root: Node) -> None:
        node = root
        while node.is_expanded:
            done, value = is_terminal(node.state)
            if done:
                node.backup(for_player(value, node.player))
                return
            node = self._step(node, self._pick(node))

        done, value = is_terminal(node.state)
        if not done:
            priors, value = self.evaluate_fn(node.state)
            node.expand(priors, legal_moves_mask(node.state))
        node.backup(for_player(value, node.player))

    def _step(self, node: Node, pit: int) -> Node:
        child = node.children.get(pit)
        if child is None:
            # The tree only plays pits the validator already accepted
            result = apply_move(node.state, pit, check_invariants=False)
            child = node.add_child(pit, result.state)
        return child

    def _pick(self, node: Node) -> int:
        explore = self.c_puct * node.P * np.sqrt(node.total_visits + 1) / (1 + node.N)
        score = np.where(legal_moves_mask(node.state), node.Q + explore, -np.inf)
        return int(np.argmax(score))


def _uniform_policy(state: GameState) -> np.ndarray:
    policy = legal_moves_mask(state).astype(np.float32)
    if policy.sum() > 0:
        policy /= policy.sum()
    return policy


def create_random_evaluator() -> Evaluator:
    """Uniform priors over legal pits and a neutral value."""

    def evaluate(state: GameState) -> Tuple[np.ndarray, float]:
        return _uniform_policy(state), 0.0

    return evaluate


def seed_share(state: GameState, player: int) -> float:
    """Board seeds on player's side minus the opponent's, scaled to [-1, 1]."""
    total = int(state.board.sum())
    if total == 0:
        return 0.0
    side = SIDES[player].pits
    own = int(state.board[side.start:side.stop].sum())
    return (2 * own - total) / total


def create_rollout_evaluator(
    rollout_depth: int = 30,
    rng: Optional[np.random.Generator] = None,
) -> Evaluator:
    """
    Uniform priors, value from a random playout.

    Playouts that do not finish within rollout_depth moves are scored by
    seed share.
    """
    rng = rng if rng is not None else np.random.default_rng()

    def evaluate(state: GameState) -> Tuple[np.ndarray, float]:
        player = state.current_player
        current = state
        for _ in range(rollout_depth):
            moves = legal_moves(current)
            if not moves:
                break
            current = apply_move(current, int(rng.choice(moves)), check_invariants=False).state

        if current.game_over:
            value = 1.0 if current.winner == player else -1.0
        else:
            value = seed_share(current, player)
        return _uniform_policy(state), value

    return evaluate
