"""
Snake game module for snake-core.
"""

from .snake_game import GameState, Direction, Position, BoardSizeError

__all__ = [
    'GameState',
    'Direction',
    'Position',
    'BoardSizeError',
]
