"""
Difficulty presets for the AI player.

A level is a search budget plus how loosely the AI picks among the moves
it found. Bao moves can relay and capture many times, so random playouts
are the costly part of a simulation; the lower levels keep them short.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultyConfig:
    """
    Attributes:
        simulations: MCTS simulations per move
        temperature: Move selection temperature (0 = always the most visited pit)
        rollout_depth: Moves per random playout
        name: Label shown to the player
    """
    simulations: int
    temperature: float
    rollout_depth: int
    name: str = ""

    def __post_init__(self):
        if self.simulations < 1:
            raise ValueError("Simulations must be at least 1")
        if self.temperature < 0:
            raise ValueError("Temperature must be non-negative")
        if self.rollout_depth < 0:
            raise ValueError("Rollout depth must be non-negative")

    def make_agent(self, rng: Optional[np.random.Generator] = None):
        """Build an MCTS agent playing at this level."""
        from ..mcts import create_rollout_evaluator
        from ..selfplay import mcts_agent

        return mcts_agent(
            create_rollout_evaluator(self.rollout_depth, rng=rng),
            num_simulations=self.simulations,
            temperature=self.temperature,
            rng=rng,
        )


DIFFICULTY_PRESETS: dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(16, 0.8, 8, name="Easy"),
    Difficulty.MEDIUM: DifficultyConfig(64, 0.3, 20, name="Medium"),
    Difficulty.HARD: DifficultyConfig(200, 0.0, 40, name="Hard"),
}


def get_difficulty_config(difficulty: Difficulty | str) -> DifficultyConfig:
    """Look up a preset by enum or (case-insensitive) name."""
    try:
        level = Difficulty(difficulty.lower() if isinstance(difficulty, str) else difficulty)
    except ValueError:
        available = ", ".join(d.value for d in Difficulty)
        raise ValueError(f"Unknown difficulty '{difficulty}'. Available: {available}") from None
    return DIFFICULTY_PRESETS[level]
