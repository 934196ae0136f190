"""Common test doubles for the behavior engine's collaborators.

This module provides a scripted random source and a recording sleeper so
tests can assert exact decisions instead of relying on convergence alone.
"""

from collections import deque
from typing import Iterable, List

from rollout_target.interfaces.random_interface import IRandomSource


class ScriptedRandom(IRandomSource):
    """Random source replaying a fixed sequence of draws.

    Floats are returned by ``random()`` and integers by ``randrange()``, in
    the order given. Running out of values or replaying a value of the wrong
    kind fails the test loudly.
    """

    def __init__(self, values: Iterable):
        self.values = deque(values)
        self.calls: List[str] = []

    def random(self) -> float:
        self.calls.append("random")
        value = self._next()
        assert isinstance(value, float), f"expected a float draw, got {value!r}"
        assert 0.0 <= value < 1.0
        return value

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append("randrange")
        value = self._next()
        assert isinstance(value, int), f"expected an int draw, got {value!r}"
        assert start <= value < stop, f"{value} outside [{start}, {stop})"
        return value

    def remaining(self) -> int:
        return len(self.values)

    def _next(self):
        assert self.values, "scripted random source exhausted"
        return self.values.popleft()


class RecordingSleep:
    """Async sleep replacement that records requested delays without waiting."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
