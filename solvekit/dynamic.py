"""Dynamic programming and search problems."""

from __future__ import annotations

import math
from collections import Counter
from functools import cache
from typing import Iterable, Sequence


def min_height_shelves(books: Sequence[Sequence[int]], shelf_width: int) -> int:
    """Least total height when placing books in order on shelves of ``shelf_width``."""
    books = list(books)
    if any(width > shelf_width for width, _ in books):
        raise ValueError("a book is wider than the shelf")
    best = [0] * (len(books) + 1)
    for start in reversed(range(len(books))):
        width = 0
        tallest = 0
        option = math.inf
        for end, (book_width, book_height) in enumerate(books[start:], start=start):
            width += book_width
            if width > shelf_width:
                break
            tallest = max(tallest, book_height)
            option = min(option, tallest + best[end + 1])
        best[start] = option
    return best[0]


def stone_game_ii(piles: Sequence[int]) -> int:
    """Most stones the first player can secure when both play optimally."""
    piles = list(piles)
    n = len(piles)

    @cache
    def play(first_to_move: bool, index: int, m: int) -> int:
        if index >= n:
            return 0
        best = 0 if first_to_move else math.inf
        taken = 0
        for j in range(min(2 * m, n - index)):
            taken += piles[index + j]
            rest = play(not first_to_move, index + j + 1, min(n, max(m, j + 1)))
            best = max(best, taken + rest) if first_to_move else min(best, rest)
        return best

    return play(True, 0, 1)


def minimum_cut_cost(
    m: int, n: int, horizontal_cut: Sequence[int], vertical_cut: Sequence[int]
) -> int:
    """Least cost to cut an ``m`` by ``n`` cake into unit pieces, by exhaustive search."""
    if len(horizontal_cut) < m - 1 or len(vertical_cut) < n - 1:
        raise ValueError("not enough cut costs for the cake size")
    horizontal = list(horizontal_cut)
    vertical = list(vertical_cut)

    @cache
    def cut(r1: int, c1: int, r2: int, c2: int) -> int:
        if r1 == r2 and c1 == c2:
            return 0
        best = math.inf
        for i in range(r1, r2):
            best = min(best, horizontal[i] + cut(r1, c1, i, c2) + cut(i + 1, c1, r2, c2))
        for i in range(c1, c2):
            best = min(best, vertical[i] + cut(r1, c1, r2, i) + cut(r1, i + 1, r2, c2))
        return best

    return cut(0, 0, m - 1, n - 1)


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Best score picking one cell per row, paying the column distance between rows."""
    if not points:
        raise ValueError("points must have at least one row")
    best = [0] * len(points[0])
    for row in points:
        running = 0
        from_left = []
        for value, previous in zip(row, best):
            running = max(running - 1, previous)
            from_left.append(value + running)
        running = 0
        combined = []
        for value, previous, left in zip(reversed(row), reversed(best), reversed(from_left)):
            running = max(running - 1, previous)
            combined.append(max(left, value + running))
        best = combined[::-1]
    return max(best)


def combination_sum_unique(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Distinct multisets of ``candidates`` (each used at most as often as given) summing to ``target``."""
    candidates = list(candidates)
    if any(value < 0 for value in candidates):
        raise ValueError("candidates must be non-negative")
    counts = Counter(value for value in candidates if value <= target)
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(value: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        if value > target:
            return
        search(value + 1, remaining)
        added = 0
        for _ in range(counts[value]):
            if remaining - (added + 1) * value < 0:
                break
            added += 1
            chosen.append(value)
            search(value + 1, remaining - added * value)
        del chosen[len(chosen) - added :]

    search(0, target)
    return found


def min_steps(n: int) -> int:
    """Fewest copy-all/paste operations to get ``n`` characters from one."""
    steps = 0
    factor = 2
    while n > 1:
        while n % factor == 0:
            steps += factor
            n //= factor
        factor += 1
    return steps