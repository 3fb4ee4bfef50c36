"""
Random seed management for reproducibility.
"""

from __future__ import annotations

import random
import numpy as np


def set_seed(seed: int) -> np.random.Generator:
    """
    Seed Python random and NumPy's global generator.

    The move engine itself uses no randomness; this only affects AI
    players and simulations.

    Args:
        seed: Random seed value

    Returns:
        A fresh numpy Generator seeded with the same value
    """
    random.seed(seed)
    np.random.seed(seed)
    return np.random.default_rng(seed)
