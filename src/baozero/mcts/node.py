"""
Search tree nodes.

A node keeps one slot per pit (0-31) for each statistic:

    N[a]  visits through pit a
    W[a]  summed value of those visits, for the player to move at this node
    P[a]  prior probability of pit a

A finished Bao game leaves the winner to move, so turns do not strictly
alternate down the tree. Values therefore travel up as "value for player
1" and are turned around for each node's own player.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..game import GameState, NUM_PITS


def for_player(value_p1: float, player: int) -> float:
    """Convert a player-1 value into the given player's point of view."""
    return value_p1 if player == 1 else -value_p1


def _pit_stats() -> np.ndarray:
    return np.zeros(NUM_PITS, dtype=np.float32)


@dataclass
class Node:
    """One searched position; children appear as pits get tried."""

    state: GameState
    parent: Optional[Node] = None
    parent_action: int = -1

    N: np.ndarray = field(default_factory=_pit_stats)
    W: np.ndarray = field(default_factory=_pit_stats)
    P: np.ndarray = field(default_factory=_pit_stats)

    children: Dict[int, Node] = field(default_factory=dict)
    is_expanded: bool = False

    @property
    def player(self) -> int:
        return self.state.current_player

    @property
    def Q(self) -> np.ndarray:
        """Mean value per pit; unvisited pits read 0."""
        return np.divide(self.W, self.N, out=np.zeros_like(self.W), where=self.N > 0)

    @property
    def total_visits(self) -> int:
        return int(self.N.sum())

    def add_child(self, action: int, child_state: GameState) -> Node:
        child = Node(state=child_state, parent=self, parent_action=action)
        self.children[action] = child
        return child

    def expand(self, priors: np.ndarray, legal_mask: np.ndarray) -> None:
        """
        Store priors restricted to the legal pits.

        If the evaluator put no weight on any legal pit the priors fall back
        to uniform over them.
        """
        legal = np.asarray(legal_mask, dtype=bool)
        p = np.where(legal, priors, 0.0)
        if p.sum() <= 0 and legal.any():
            p = legal.astype(np.float32)
        if p.sum() > 0:
            p = p / p.sum()

        self.P = p.astype(np.float32)
        self.is_expanded = True

    def backup(self, value_p1: float) -> None:
        """Credit a player-1 value to every edge on the path to the root."""
        child, parent = self, self.parent
        while parent is not None:
            a = child.parent_action
            parent.N[a] += 1
            parent.W[a] += for_player(value_p1, parent.player)
            child, parent = parent, parent.parent

    def get_policy(self, temperature: float = 1.0) -> np.ndarray:
        """
        Move distribution from visit counts.

        temperature 0 puts all weight on the most visited pit; 1 is
        proportional to visits. Before any visit the priors are returned.
        """
        if temperature == 0:
            policy = np.zeros(NUM_PITS, dtype=np.float32)
            policy[int(np.argmax(self.N))] = 1.0
            return policy

        weights = np.power(self.N, 1.0 / temperature)
        if weights.sum() == 0:
            return self.P.copy()
        return weights / weights.sum()

    def select_action(self, temperature: float = 1.0, rng=None) -> int:
        """Pick a pit; rng is a numpy Generator (global numpy state if None)."""
        if temperature == 0:
            return int(np.argmax(self.N))
        policy = self.get_policy(temperature).astype(np.float64)
        rng = rng if rng is not None else np.random
        return int(rng.choice(NUM_PITS, p=policy / policy.sum()))
