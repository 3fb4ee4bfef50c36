"""
Configuration management for baozero.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
import yaml

from ..game import Variant


@dataclass
class GameConfig:
    """Rules and limits for simulated games."""

    variant: str = Variant.PREFILLED.value
    check_invariants: bool = True
    max_moves: int = 300  # Games still running after this are unfinished

    def __post_init__(self):
        self.variant = Variant.parse(self.variant).value
        if self.max_moves < 1:
            raise ValueError("max_moves must be at least 1")


@dataclass
class MCTSConfig:
    """MCTS configuration."""

    num_simulations: int = 100
    c_puct: float = 1.5
    dirichlet_alpha: float = 0.3
    dirichlet_epsilon: float = 0.25
    rollout_depth: int = 30


@dataclass
class ArenaConfig:
    """Arena match configuration."""

    num_games: int = 20


@dataclass
class Config:
    """Full configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    mcts: MCTSConfig = field(default_factory=MCTSConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)

    log_dir: str = "runs"
    seed: int = 42

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(
            game=GameConfig(**data.get("game", {})),
            mcts=MCTSConfig(**data.get("mcts", {})),
            arena=ArenaConfig(**data.get("arena", {})),
            log_dir=data.get("log_dir", "runs"),
            seed=data.get("seed", 42),
        )

    def ensure_dirs(self) -> None:
        Path(self.log_dir).mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    return Config()
