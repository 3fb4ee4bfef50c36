"""MCTS module."""

from .node import Node
from .search import (
    MCTS,
    Evaluator,
    create_random_evaluator,
    create_rollout_evaluator,
    seed_share,
)

__all__ = [
    "Node",
    "MCTS",
    "Evaluator",
    "create_random_evaluator",
    "create_rollout_evaluator",
    "seed_share",
]
