import random
from itertools import combinations

import pytest

from solvekit.arrays import (
    can_complete_circuit,
    candy,
    counting_sort,
    lemonade_change,
    maximum_value_sum,
    min_swaps,
    minimum_card_pickup,
    minimum_cut_cost_greedy,
    num_magic_squares_inside,
    range_sum,
    results_array,
    smallest_distance_pair,
    sort_jumbled,
    survived_robots_healths,
)
from solvekit.dynamic import minimum_cut_cost


def _completes(gas, cost, start):
    tank = 0
    n = len(gas)
    for step in range(n):
        station = (start + step) % n
        tank += gas[station] - cost[station]
        if tank < 0:
            return False
    return True


@pytest.mark.parametrize(
    "gas, cost",
    [
        ([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]),
        ([5, 1, 2, 3, 4], [4, 4, 1, 5, 1]),
        ([3, 1, 1], [1, 2, 2]),
        ([2], [2]),
    ],
)
def test_circuit_start_completes(gas, cost):
    start = can_complete_circuit(gas, cost)
    assert 0 <= start < len(gas)
    assert _completes(gas, cost, start)


def test_circuit_impossible():
    assert can_complete_circuit([2, 3, 4], [3, 4, 3]) == -1


def test_circuit_length_mismatch():
    with pytest.raises(ValueError):
        can_complete_circuit([1, 2], [1])


def test_candy_equal_ratings_one_each():
    ratings = [3, 3, 3, 3, 3]
    assert candy(ratings) == len(ratings)


def test_candy_worked_example():
    assert candy([1, 0, 2]) == 5


def test_candy_symmetric_and_bounded():
    rng = random.Random(7)
    for _ in range(20):
        ratings = [rng.randint(0, 5) for _ in range(rng.randint(1, 12))]
        result = candy(ratings)
        assert result >= len(ratings)
        assert result == candy(list(reversed(ratings)))


def test_range_sum_worked_example():
    assert range_sum([1, 2, 3, 4], 4, 1, 5) == 13


def test_range_sum_is_additive():
    nums = [1, 2, 3, 4]
    whole = range_sum(nums, 4, 1, 10)
    for middle in range(1, 10):
        assert range_sum(nums, 4, 1, middle) + range_sum(nums, 4, middle + 1, 10) == whole


def test_range_sum_single_element():
    assert range_sum([7], 1, 1, 1) == 7


def test_range_sum_reduced_modulo():
    result = range_sum([10**9] * 4, 4, 1, 10)
    assert 0 <= result < 10**9 + 7


def test_min_swaps_worked_example():
    assert min_swaps([0, 1, 0, 1, 1, 0, 0]) == 1


@pytest.mark.parametrize("nums", [[0, 1, 0, 1, 1, 0, 0], [1, 1, 0, 0, 1], [0, 1, 1, 1, 0, 0, 1, 1, 0]])
def test_min_swaps_rotation_invariant(nums):
    base = min_swaps(nums)
    for shift in range(len(nums)):
        assert min_swaps(nums[shift:] + nums[:shift]) == base


def test_min_swaps_grouped_and_empty_of_ones():
    assert min_swaps([0, 0, 1, 1, 1, 0]) == 0
    assert min_swaps([0, 0, 0]) == 0


def test_sort_jumbled_identity_mapping_sorts():
    nums = [42, 7, 100, 0, 7, 13]
    assert sort_jumbled(list(range(10)), nums) == sorted(nums)


def test_sort_jumbled_is_stable():
    nums = [5, 31, 2, 999]
    assert sort_jumbled([0] * 10, nums) == nums


def test_sort_jumbled_worked_example_and_no_mutation():
    nums = [991, 338, 38]
    assert sort_jumbled([8, 9, 4, 0, 2, 1, 3, 5, 7, 6], nums) == [338, 38, 991]
    assert nums == [991, 338, 38]


def test_card_pickup_without_pair():
    assert minimum_card_pickup([1, 0, 5, 3]) == -1


def test_card_pickup_adjacent_pair():
    cards = [9, 9]
    assert minimum_card_pickup(cards) == len(cards)


def test_card_pickup_worked_example():
    assert minimum_card_pickup([3, 4, 2, 3, 4, 7]) == 4


def test_robots_same_direction_all_survive():
    healths = [2, 17, 9, 15, 10]
    assert survived_robots_healths([5, 4, 3, 2, 1], healths, "RRRRR") == healths


def test_robots_worked_example():
    assert survived_robots_healths([3, 5, 2, 6], [10, 10, 15, 12], "RLRL") == [14]


def test_robots_equal_collision_destroys_both():
    assert survived_robots_healths([1, 2], [5, 5], "RL") == []


def test_robots_never_gain_health():
    rng = random.Random(3)
    for _ in range(20):
        n = rng.randint(1, 8)
        positions = rng.sample(range(1, 50), n)
        healths = [rng.randint(1, 10) for _ in range(n)]
        directions = "".join(rng.choice("LR") for _ in range(n))
        result = survived_robots_healths(positions, healths, directions)
        assert len(result) <= n
        assert sum(result) <= sum(healths)


def test_robots_length_mismatch():
    with pytest.raises(ValueError):
        survived_robots_healths([1, 2], [3], "RL")


@pytest.mark.parametrize(
    "m, n, horizontal, vertical",
    [
        (3, 2, [1, 3], [5]),
        (2, 2, [7], [4]),
        (1, 1, [], []),
        (4, 3, [2, 9, 4], [6, 1]),
        (3, 4, [5, 5], [5, 3, 5]),
    ],
)
def test_greedy_cut_matches_exhaustive(m, n, horizontal, vertical):
    assert minimum_cut_cost_greedy(m, n, horizontal, vertical) == minimum_cut_cost(
        m, n, horizontal, vertical
    )


def test_greedy_cut_needs_enough_costs():
    with pytest.raises(ValueError):
        minimum_cut_cost_greedy(3, 2, [1], [5])


def test_results_array_consecutive():
    nums = [1, 2, 3, 4, 5]
    assert results_array(nums, 2) == nums[1:]
    assert results_array(nums, 1) == nums


def test_results_array_worked_example():
    result = results_array([1, 2, 3, 4, 3, 2, 5], 3)
    assert result == [3, 4, -1, -1, -1]


def test_results_array_length():
    nums = [2, 2, 2, 2, 2]
    assert len(results_array(nums, 4)) == len(nums) - 4 + 1
    assert set(results_array(nums, 4)) == {-1}


def test_results_array_rejects_bad_k():
    with pytest.raises(ValueError):
        results_array([1, 2], 0)


def test_maximum_value_sum_worked_example():
    assert maximum_value_sum([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == 15


def test_maximum_value_sum_transpose_and_shift():
    rng = random.Random(11)
    for _ in range(10):
        board = [[rng.randint(-20, 20) for _ in range(4)] for _ in range(3)]
        result = maximum_value_sum(board)
        transposed = [list(column) for column in zip(*board)]
        assert maximum_value_sum(transposed) == result
        shifted = [[value + 5 for value in row] for row in board]
        assert maximum_value_sum(shifted) == result + 15


@pytest.mark.parametrize(
    "nums, k",
    [([1, 3, 1], 1), ([1, 1, 1], 2), ([1, 6, 1], 3), ([9, 10, 7, 10, 6, 1, 5, 4, 9, 8], 18)],
)
def test_smallest_distance_pair_is_kth(nums, k):
    result = smallest_distance_pair(nums, k)
    diffs = [abs(a - b) for a, b in combinations(nums, 2)]
    assert result in diffs
    assert sum(d <= result for d in diffs) >= k
    assert sum(d < result for d in diffs) < k


LO_SHU = [[4, 9, 2], [3, 5, 7], [8, 1, 6]]


def test_magic_square_found():
    assert num_magic_squares_inside(LO_SHU) == 1
    assert num_magic_squares_inside([[4, 3, 8, 4], [9, 5, 1, 9], [2, 7, 6, 2]]) == 1


def test_magic_square_transpose_invariant_and_broken():
    grid = [row + [row[0]] for row in LO_SHU]
    transposed = [list(column) for column in zip(*grid)]
    assert num_magic_squares_inside(transposed) == num_magic_squares_inside(grid)
    broken = [row[:] for row in LO_SHU]
    broken[1][1] = 4
    assert num_magic_squares_inside(broken) < num_magic_squares_inside(LO_SHU)


def test_lemonade_change():
    assert lemonade_change([5, 5, 5, 10, 20])
    assert not lemonade_change([5, 5, 10, 10, 20])
    assert not lemonade_change([10])


def test_counting_sort_matches_sorted():
    rng = random.Random(5)
    values = [rng.randint(-50, 50) for _ in range(100)]
    original = list(values)
    assert counting_sort(values) == sorted(values)
    assert values == original


def test_counting_sort_empty():
    assert counting_sort([]) == []