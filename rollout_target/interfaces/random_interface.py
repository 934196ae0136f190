"""
Interface for Random Sources

Defines the contract for the randomness consumed by the behavior engine and
the response builder. ``random.Random`` satisfies it, so a seeded instance can
be used for reproducible runs while tests inject scripted sequences.
"""

import random
from abc import ABC, abstractmethod


class IRandomSource(ABC):
    """
    Interface for a source of uniform random draws.
    """

    @abstractmethod
    def random(self) -> float:
        """
        Draw a float uniformly from [0.0, 1.0).

        Returns:
            The drawn value
        """
        pass

    @abstractmethod
    def randrange(self, start: int, stop: int) -> int:
        """
        Draw an integer uniformly from [start, stop).

        Args:
            start: Inclusive lower bound
            stop: Exclusive upper bound

        Returns:
            The drawn value
        """
        pass


# random.Random provides both draws natively.
IRandomSource.register(random.Random)
