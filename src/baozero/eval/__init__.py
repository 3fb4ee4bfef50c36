"""Evaluation module."""

from .arena import Arena, ArenaResult

__all__ = [
    "Arena",
    "ArenaResult",
]
