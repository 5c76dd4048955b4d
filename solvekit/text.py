"""String problems: parsing, counting and rearranging text."""

from __future__ import annotations

import re
from collections import Counter
from itertools import product
from typing import Iterable

_FORMULA_PART = re.compile(r"([A-Z][a-y]*)(\d*)|(\()|\)(\d*)")


def reverse_parentheses(s: str) -> str:
    """Reverse the text inside each pair of parentheses, innermost first, dropping them."""
    stack: list[list[str]] = [[]]
    for ch in s:
        if ch == "(":
            stack.append([])
        elif ch == ")":
            if len(stack) == 1:
                raise ValueError("unbalanced ')'")
            inner = stack.pop()
            stack[-1].extend(reversed(inner))
        else:
            stack[-1].append(ch)
    if len(stack) != 1:
        raise ValueError("unbalanced '('")
    return "".join(stack[0])


def minimum_deletions(s: str) -> int:
    """Fewest deletions so that no 'b' comes before an 'a'."""
    a_after = s.count("a")
    best = min(a_after, len(s) - a_after)
    b_before = 0
    for ch in s:
        if ch == "b":
            b_before += 1
        else:
            a_after -= 1
        best = min(best, b_before + a_after)
    return best


def maximum_gain(s: str, x: int, y: int) -> int:
    """Most points from removing "ab" (worth ``x``) and "ba" (worth ``y``) substrings."""
    first, second, gain = ("a", "b", x) if x > y else ("b", "a", y)
    total = 0
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == first and ch == second:
            stack.pop()
            total += gain
        else:
            stack.append(ch)

    rest: list[str] = []
    for ch in reversed(stack):
        if rest and ch == "a" and rest[-1] == "b":
            rest.pop()
            total += x
        elif rest and ch == "b" and rest[-1] == "a":
            rest.pop()
            total += y
        else:
            rest.append(ch)
    return total


def remove_digit(number: str, digit: str) -> str:
    """Remove one occurrence of ``digit`` so the result is as large as possible."""
    for i, (ch, following) in enumerate(zip(number, number[1:])):
        if ch == digit and digit < following:
            return number[:i] + number[i + 1 :]
    pos = number.rfind(digit)
    if pos == -1:
        pos = len(number) - 1
    if pos < 0:
        return ""
    return number[:pos] + number[pos + 1 :]


def appeal_sum(s: str) -> int:
    """Sum over all substrings of the number of distinct letters in each."""
    if any(not "a" <= ch <= "z" for ch in s):
        raise ValueError("only lowercase ASCII letters are allowed")
    n = len(s)
    total = sum(i * (n - i + 1) for i in range(1, n + 1))
    running = [0] * 26
    previous = [0] * 26
    last = [-1] * 26
    gaps = [0] * 26
    for i, ch in enumerate(s):
        letter = ord(ch) - ord("a")
        total -= running[letter]
        gaps[letter] += i - last[letter]
        last[letter] = i
        previous[letter] = running[letter]
        running[letter] += gaps[letter]
        total -= sum(previous) - previous[letter]
    return total


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for i, ch in enumerate(s):
        left = max(left, last_seen.get(ch, -1) + 1)
        last_seen[ch] = i
        best = max(best, i - left + 1)
    return best


def minimum_pushes(word: str) -> int:
    """Fewest key presses to type ``word`` after mapping letters onto eight keys."""
    frequencies = sorted(Counter(word).values(), reverse=True)
    return sum(count * (rank // 8 + 1) for rank, count in enumerate(frequencies))


def encrypted_string(s: str, k: int) -> str:
    """Replace each character with the one ``k`` places later, cyclically."""
    if not s:
        return s
    shift = k % len(s)
    return s[shift:] + s[:shift]


def valid_strings(n: int) -> list[str]:
    """Binary strings of length ``n`` with no two adjacent zeros, in bitmask order."""
    result = []
    for bits in product("01", repeat=n):
        candidate = "".join(reversed(bits))
        if "00" not in candidate:
            result.append(candidate)
    return result


def smallest_string(s: str) -> str:
    """Swap the first adjacent pair of same-parity digits that is out of order."""
    for i, (a, b) in enumerate(zip(s, s[1:])):
        if a > b and (ord(a) - ord("0")) % 2 == (ord(b) - ord("0")) % 2:
            return s[:i] + b + a + s[i + 2 :]
    return s


def count_of_atoms(formula: str) -> str:
    """Atom counts of a chemical formula, in sorted order, counts of one omitted."""
    stack: list[Counter[str]] = [Counter()]
    pos = 0
    while pos < len(formula):
        match = _FORMULA_PART.match(formula, pos)
        if match is None:
            raise ValueError(f"unexpected character {formula[pos]!r} at {pos}")
        element, count, opening, multiplier = match.groups()
        if element is not None:
            stack[-1][element] += int(count or "1")
        elif opening is not None:
            stack.append(Counter())
        else:
            if len(stack) == 1:
                raise ValueError("unbalanced ')'")
            group = stack.pop()
            factor = int(multiplier or "1")
            for name, amount in group.items():
                stack[-1][name] += amount * factor
        pos = match.end()

    totals: Counter[str] = Counter()
    for level in stack:
        for name, amount in level.items():
            totals[name] += amount
    return "".join(name + (str(totals[name]) if totals[name] > 1 else "") for name in sorted(totals))


def count_seniors(details: Iterable[str]) -> int:
    """Count passengers older than sixty; the age sits at characters 11 and 12."""
    return sum(1 for detail in details if int(detail[11:13]) > 60)