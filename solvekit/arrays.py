"""Array problems: greedy choices, sliding windows, sorting and counting."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

_MOD = 10**9 + 7
_DISTANCE_LIMIT = 1_000_000
_TOP_CELLS = 400
_NO_PLACEMENT = -(10**16)


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Starting station from which a full circuit can be driven; -1 if none exists."""
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    diff = [g - c for g, c in zip(gas, cost)]
    if sum(diff) < 0:
        return -1
    running = best = 0
    start = best_start = 0
    for i, delta in enumerate(diff + diff):
        if running + delta < 0:
            running = 0
            start = i + 1
        else:
            running += delta
        if running > best:
            best = running
            best_start = start
    return best_start


def candy(ratings: Iterable[int]) -> int:
    """Fewest candies so every child gets one and outranks lower-rated neighbours."""
    ratings = list(ratings)
    n = len(ratings)
    given = [1] * n
    for _, i in sorted((rating, i) for i, rating in enumerate(ratings)):
        if i and ratings[i] > ratings[i - 1]:
            given[i] = max(given[i], given[i - 1] + 1)
        if i + 1 < n and ratings[i] > ratings[i + 1]:
            given[i] = max(given[i], given[i + 1] + 1)
    return sum(given)


def range_sum(nums: Sequence[int], n: int, left: int, right: int) -> int:
    """Sum of the sorted subarray sums at 1-based positions ``left..right``, modulo 1e9+7."""
    values = list(nums[:n])
    sums: Counter[int] = Counter()
    for i in range(len(values)):
        running = 0
        for value in values[i:]:
            running += value
            sums[running] += 1

    total = 0
    position = 0
    for value in sorted(sums):
        if position >= right:
            break
        count = sums[value]
        overlap = min(right, position + count) - max(left, position + 1) + 1
        if overlap > 0:
            total += overlap * value
        position += count
    return total % _MOD


def min_swaps(nums: Sequence[int]) -> int:
    """Fewest swaps to gather all ones of a circular binary array together."""
    bits = [1 if value == 1 else 0 for value in nums]
    ones = sum(bits)
    if ones == 0:
        return 0
    n = len(bits)
    window = sum(bits[:ones])
    best = window
    for start in range(1, n):
        window += bits[(start + ones - 1) % n] - bits[start - 1]
        best = max(best, window)
    return ones - best


def sort_jumbled(mapping: Sequence[int], nums: Iterable[int]) -> list[int]:
    """Stable sort of ``nums`` by their values after remapping each decimal digit."""

    def mapped(value: int) -> int:
        return int("".join(str(mapping[int(digit)]) for digit in str(value)))

    return sorted(nums, key=mapped)


def minimum_card_pickup(cards: Iterable[int]) -> int:
    """Fewest consecutive cards holding a matching pair; -1 if there is none."""
    last_seen: dict[int, int] = {}
    best: int | None = None
    for i, card in enumerate(cards):
        if card in last_seen:
            span = i - last_seen[card] + 1
            best = span if best is None else min(best, span)
        last_seen[card] = i
    return -1 if best is None else best


def survived_robots_healths(
    positions: Sequence[int], healths: Sequence[int], directions: str
) -> list[int]:
    """Healths of the robots left after all collisions, in input order."""
    n = len(positions)
    if len(healths) != n or len(directions) != n:
        raise ValueError("positions, healths and directions must have the same length")

    remaining = [0] * n
    moving_right: list[tuple[int, int]] = []
    for i in sorted(range(n), key=lambda index: positions[index]):
        if directions[i] != "L":
            moving_right.append((healths[i], i))
            continue
        health = healths[i]
        while moving_right and health:
            other_health, other = moving_right.pop()
            if other_health > health:
                if other_health - 1:
                    moving_right.append((other_health - 1, other))
                health = 0
            elif other_health == health:
                health = 0
            else:
                health -= 1
        if health:
            remaining[i] = health

    for health, i in moving_right:
        remaining[i] = health
    return [health for health in remaining if health]


def minimum_cut_cost_greedy(
    m: int, n: int, horizontal_cut: Sequence[int], vertical_cut: Sequence[int]
) -> int:
    """Least cost to cut an ``m`` by ``n`` cake into unit pieces, taking dearest cuts first."""
    if len(horizontal_cut) < m - 1 or len(vertical_cut) < n - 1:
        raise ValueError("not enough cut costs for the cake size")
    cuts = [(price, 0) for price in horizontal_cut[: m - 1]]
    cuts += [(price, 1) for price in vertical_cut[: n - 1]]
    cuts.sort(reverse=True)

    horizontal_pieces = vertical_pieces = 1
    total = 0
    for price, kind in cuts:
        if kind == 0:
            total += price * vertical_pieces
            horizontal_pieces += 1
        else:
            total += price * horizontal_pieces
            vertical_pieces += 1
    return total


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Power of each window of size ``k``: its last value if consecutive ascending, else -1."""
    values = list(nums)
    if k < 1 or k > len(values) + 1:
        raise ValueError("k must be between 1 and len(nums) + 1")
    runs = []
    run = 0
    for i, value in enumerate(values):
        run = run + 1 if i and values[i - 1] + 1 == value else 1
        runs.append(run)
    return [values[j] if runs[j] >= k else -1 for j in range(k - 1, len(values))]


def maximum_value_sum(board: Sequence[Sequence[int]]) -> int:
    """Largest sum of three cells sharing no row or column, searched among the top cells."""
    cells = sorted(
        ((value, i, j) for i, row in enumerate(board) for j, value in enumerate(row)),
        reverse=True,
    )[:_TOP_CELLS]

    best = _NO_PLACEMENT
    for a, (va, ra, ca) in enumerate(cells):
        for b, (vb, rb, cb) in enumerate(cells[a + 1 :], start=a + 1):
            if ra == rb or ca == cb:
                continue
            for vc, rc, cc in cells[b + 1 :]:
                if rc in (ra, rb) or cc in (ca, cb):
                    continue
                best = max(best, va + vb + vc)
    return best


def smallest_distance_pair(nums: Iterable[int], k: int) -> int:
    """The ``k``-th smallest absolute difference among all pairs."""
    values = sorted(nums)

    def enough(limit: int) -> bool:
        count = 0
        left = 0
        for right, value in enumerate(values):
            while value - values[left] > limit:
                left += 1
            count += right - left
        return count >= k

    low, high = 0, _DISTANCE_LIMIT
    while high - low >= 2:
        mid = (low + high) // 2
        if enough(mid):
            high = mid
        else:
            low = mid + 1
    return low if enough(low) else high


def num_magic_squares_inside(grid: Sequence[Sequence[int]]) -> int:
    """Count 3x3 subgrids that are magic squares of the numbers 1 to 9."""
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    digits = set(range(1, 10))
    count = 0
    for i in range(rows - 2):
        for j in range(cols - 2):
            block = [list(grid[r][j : j + 3]) for r in range(i, i + 3)]
            if {value for row in block for value in row} != digits:
                continue
            if len({sum(row) for row in block}) != 1:
                continue
            if len({sum(column) for column in zip(*block)}) != 1:
                continue
            if block[0][0] + block[2][2] == block[2][0] + block[0][2]:
                count += 1
    return count


def lemonade_change(bills: Iterable[int]) -> bool:
    """Whether correct change can be given to every customer for a 5-unit lemonade."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif tens and fives:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def counting_sort(nums: Iterable[int]) -> list[int]:
    """Sorted copy of ``nums`` by counting occurrences."""
    values = list(nums)
    if not values:
        return []
    low = min(values)
    counts = [0] * (max(values) - low + 1)
    for value in values:
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]