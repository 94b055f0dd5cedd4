"""
Core abstractions for snake-core.

Provides the interfaces the engine consumes from its host.
"""

from .random_source import RandomSource, DefaultRandomSource

__all__ = [
    'RandomSource',
    'DefaultRandomSource',
]
