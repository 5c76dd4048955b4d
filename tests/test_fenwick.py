import math

import pytest

from solvekit.fenwick import FenwickTree, count_teams

VALUES = [3, -1, 4, 1, 5, 9, -2, 6, 5, 3, 5]


def built():
    tree = FenwickTree(len(VALUES))
    tree.build(VALUES)
    return tree


def test_build_prefix_sums():
    tree = built()
    for count in range(len(VALUES) + 1):
        assert tree.query(count) == sum(VALUES[:count])


def test_build_matches_updates():
    by_update = FenwickTree(len(VALUES))
    for index, value in enumerate(VALUES):
        by_update.update(index, value)
    tree = built()
    assert [by_update.query(c) for c in range(len(VALUES) + 1)] == [
        tree.query(c) for c in range(len(VALUES) + 1)
    ]
    assert by_update.total == tree.total == sum(VALUES)


def test_ranges_and_suffixes():
    tree = built()
    n = len(VALUES)
    for start in range(n + 1):
        assert tree.query_suffix(start) == sum(VALUES[start:])
        for stop in range(start, n + 1):
            assert tree.query_range(start, stop) == sum(VALUES[start:stop])


def test_get_returns_elements():
    tree = built()
    assert [tree.get(i) for i in range(len(VALUES))] == VALUES


def test_set_reports_change():
    tree = built()
    assert tree.set(2, VALUES[2]) is False
    assert tree.set(2, 100) is True
    assert tree.get(2) == 100
    assert tree.total == sum(VALUES) - VALUES[2] + 100


def test_find_last_prefix_as_ordered_set():
    members = [2, 5, 7]
    tree = FenwickTree(10)
    for index in members:
        tree.set(index, 1)
    for k, member in enumerate(members):
        assert tree.find_last_prefix(k) == member
    assert tree.find_last_prefix(len(members)) == tree.size
    assert tree.find_last_prefix(-1) == -1


def test_errors():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.update(3, 1)
    with pytest.raises(IndexError):
        tree.get(-1)
    with pytest.raises(IndexError):
        tree.query(4)
    with pytest.raises(ValueError):
        tree.build([1, 2])
    with pytest.raises(ValueError):
        FenwickTree(-1)


def test_count_teams_examples():
    assert count_teams([2, 5, 3, 4, 1]) == 3
    assert count_teams([2, 1, 3]) == 0


@pytest.mark.parametrize("n", [3, 4, 7, 10])
def test_count_teams_monotonic(n):
    ascending = list(range(n))
    assert count_teams(ascending) == math.comb(n, 3)
    assert count_teams(ascending[::-1]) == math.comb(n, 3)


def test_count_teams_reversal_invariant():
    rating = [7, 1, 9, 4, 12, 3, 8]
    assert count_teams(rating) == count_teams(rating[::-1])
    assert count_teams([]) == count_teams([1, 2]) == 0