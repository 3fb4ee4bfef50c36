"""Utilities module."""

from .config import (
    Config,
    GameConfig,
    MCTSConfig,
    ArenaConfig,
    get_default_config,
)
from .seed import set_seed
from .logging import (
    Logger,
    GameSummary,
    console,
    create_progress,
    print_config,
    print_board,
)

__all__ = [
    "Config",
    "GameConfig",
    "MCTSConfig",
    "ArenaConfig",
    "get_default_config",
    "set_seed",
    "Logger",
    "GameSummary",
    "console",
    "create_progress",
    "print_config",
    "print_board",
]
