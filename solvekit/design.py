"""Container classes: a set with uniform random sampling and a k-th largest tracker."""

from __future__ import annotations

import heapq
import random
from typing import Iterable, Optional


class RandomizedSet:
    """A set of integers with O(1) insert, remove and uniform random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._positions: dict[int, int] = {}
        self._values: list[int] = []

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions

    def insert(self, val: int) -> bool:
        """Add ``val``; return whether it was absent."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return whether it was present."""
        position = self._positions.pop(val, None)
        if position is None:
            return False
        last = self._values.pop()
        if position < len(self._values):
            self._values[position] = last
            self._positions[last] = position
        return True

    def get_random(self) -> int:
        """A member chosen uniformly at random."""
        if not self._values:
            raise IndexError("get_random from an empty set")
        return self._values[self._rng.randrange(len(self._values))]


class KthLargest:
    """Tracks the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap: list[int] = []
        for value in nums:
            self._push(value)

    def _push(self, value: int) -> None:
        heapq.heappush(self._heap, value)
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)

    def add(self, val: int) -> int:
        """Add ``val`` and return the k-th largest value so far.

        With fewer than ``k`` values seen, the smallest of them is returned.
        """
        self._push(val)
        return self._heap[0]