"""A Fenwick (binary indexed) tree and a counting problem built on it."""

from __future__ import annotations

from typing import Iterable


class FenwickTree:
    """Prefix sums over ``size`` slots with point updates."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self.total = 0
        self._tree = [0] * (size + 1)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range [0, {self.size})")

    def build(self, initial: Iterable[int]) -> None:
        """Fill the tree from ``initial`` in linear time."""
        values = list(initial)
        if len(values) != self.size:
            raise ValueError(f"expected {self.size} values, got {len(values)}")
        tree = [0, *values]
        for i in range(1, self.size + 1):
            k = (i & -i) >> 1
            while k > 0:
                tree[i] += tree[i - k]
                k >>= 1
        self._tree = tree
        self.total = sum(values)

    def update(self, index: int, change: int) -> None:
        """Add ``change`` to the slot at ``index``."""
        self._check_index(index)
        self.total += change
        i = index + 1
        while i <= self.size:
            self._tree[i] += change
            i += i & -i

    def query(self, count: int) -> int:
        """Sum of the slots in ``[0, count)``."""
        if count > self.size:
            raise IndexError(f"count {count} exceeds size {self.size}")
        result = 0
        i = count
        while i > 0:
            result += self._tree[i]
            i -= i & -i
        return result

    def query_range(self, start: int, stop: int) -> int:
        """Sum of the slots in ``[start, stop)``."""
        return self.query(stop) - self.query(start)

    def query_suffix(self, start: int) -> int:
        """Sum of the slots in ``[start, size)``."""
        return self.total - self.query(start)

    def get(self, index: int) -> int:
        """Value of the single slot at ``index``."""
        self._check_index(index)
        above = index + 1
        result = self._tree[above]
        above -= above & -above
        below = index
        while below != above:
            result -= self._tree[below]
            below -= below & -below
        return result

    def set(self, index: int, value: int) -> bool:
        """Set a slot; return whether its value changed."""
        current = self.get(index)
        if current == value:
            return False
        self.update(index, value - current)
        return True

    def find_last_prefix(self, total: int) -> int:
        """Largest ``p`` in ``[0, size]`` with ``query(p) <= total``; -1 if ``total < 0``."""
        if total < 0:
            return -1
        prefix = 0
        for k in reversed(range(self.size.bit_length())):
            step = 1 << k
            if prefix + step <= self.size and self._tree[prefix + step] <= total:
                prefix += step
                total -= self._tree[prefix]
        return prefix


def count_teams(rating: Iterable[int]) -> int:
    """Count index triples whose ratings are strictly increasing or strictly decreasing."""
    values = list(rating)
    ranks = {value: rank for rank, value in enumerate(sorted(set(values)))}
    size = len(ranks)
    before = FenwickTree(size)
    after = FenwickTree(size)
    for value in values:
        after.update(ranks[value], 1)

    teams = 0
    for value in values:
        rank = ranks[value]
        after.update(rank, -1)
        teams += before.query(rank) * after.query_suffix(rank + 1)
        teams += after.query(rank) * before.query_suffix(rank + 1)
        before.update(rank, 1)
    return teams