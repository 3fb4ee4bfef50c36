"""Self-play module."""

from .worker import (
    Agent,
    GameRecord,
    mcts_agent,
    play_game,
    play_random_game,
    random_agent,
)

__all__ = [
    "Agent",
    "GameRecord",
    "mcts_agent",
    "play_game",
    "play_random_game",
    "random_agent",
]
