"""Polynomial rolling hashes modulo the Mersenne prime 2**61 - 1."""

from __future__ import annotations

import random
from typing import Iterable, Sequence, Union

MOD = (1 << 61) - 1
_OFFSET = 997
_INT_MAX = 2**31 - 1
_BASE = random.randrange(MOD // 3, 2 * (MOD // 3))


def mod_mul(a: int, b: int) -> int:
    """Product of ``a`` and ``b`` modulo ``MOD``."""
    return (a * b) % MOD


class PolyHash:
    """Prefix hashes of a string or integer sequence for O(1) substring hashing."""

    def __init__(self, values: Union[str, Iterable[int]]) -> None:
        codes = [ord(ch) for ch in values] if isinstance(values, str) else list(values)
        self.length = len(codes)
        prefix = [0]
        for code in codes:
            prefix.append((mod_mul(prefix[-1], _BASE) + code + _OFFSET) % MOD)
        self._prefix = prefix

    def get_hash(self, left: int, right: int) -> int:
        """Hash of the inclusive slice ``[left, right]``."""
        if not 0 <= left <= right + 1 <= self.length:
            raise IndexError(f"slice [{left}, {right}] out of range for length {self.length}")
        power = pow(_BASE, right - left + 1, MOD)
        return (self._prefix[right + 1] - mod_mul(power, self._prefix[left])) % MOD


def count_distinct_subarrays(nums: Sequence[int], k: int, p: int) -> int:
    """Count distinct subarrays holding at most ``k`` elements divisible by ``p``."""
    hasher = PolyHash(nums)
    seen: set[int] = set()
    result = 0
    for i in range(len(nums)):
        divisible = 0
        for j in range(i, len(nums)):
            divisible += nums[j] % p == 0
            digest = hasher.get_hash(i, j)
            if digest in seen:
                continue
            seen.add(digest)
            if divisible > k:
                break
            result += 1
    return result


def minimum_cost_to_build(target: str, words: Sequence[str], costs: Sequence[int]) -> int:
    """Cheapest cost to build ``target`` by concatenating words; -1 if impossible."""
    size = len(target)
    by_length: dict[int, dict[int, int]] = {}
    for word, cost in zip(words, costs):
        if len(word) > size:
            continue
        digest = PolyHash(word).get_hash(0, len(word) - 1)
        bucket = by_length.setdefault(len(word), {})
        bucket[digest] = min(bucket.get(digest, cost), cost)

    lengths = sorted(by_length)
    target_hash = PolyHash(target)
    best = [10**15] * (size + 1)
    best[0] = 0
    for i in range(size):
        if best[i] >= _INT_MAX:
            continue
        for length in lengths:
            if i + length > size:
                break
            cost = by_length[length].get(target_hash.get_hash(i, i + length - 1))
            if cost is not None:
                best[i + length] = min(best[i + length], best[i] + cost)

    return -1 if best[size] >= _INT_MAX else best[size]