# snake-core Source Package
"""
snake-core - Deterministic rule engine for grid-based snake.

Modules:
- core: Interfaces consumed from the host (random source)
- game: Game state and tick transition
- utils: Configuration loading
"""

from .core import RandomSource, DefaultRandomSource
from .game import GameState, Direction, Position, BoardSizeError

__version__ = "1.0.0"

__all__ = [
    'RandomSource',
    'DefaultRandomSource',
    'GameState',
    'Direction',
    'Position',
    'BoardSizeError',
]
