"""
Random source interface for snake-core.

The engine never touches a global random generator. Food placement goes
through a RandomSource so hosts and tests can substitute their own.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional


class RandomSource(ABC):
    """
    Abstract provider of uniform random integers.

    Implementations only need to support the range used for food
    placement: low is 0 and high_exclusive is at least 1.
    """

    @abstractmethod
    def random_range(self, low: int, high_exclusive: int) -> int:
        """
        Pick an integer uniformly from [low, high_exclusive).

        Args:
            low: Smallest value that may be returned
            high_exclusive: One past the largest value that may be returned

        Returns:
            The chosen integer
        """
        pass


class DefaultRandomSource(RandomSource):
    """RandomSource backed by a private random.Random instance."""

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the source.

        Args:
            seed: Optional seed; equal seeds give equal sequences
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def random_range(self, low: int, high_exclusive: int) -> int:
        return self._rng.randrange(low, high_exclusive)
