from math import gcd, prod

import pytest

from cpsolve.lvl800_more import (
    fill_sequence,
    has_small_gcd_pair,
    k_index,
    line_trip,
    one_two_split,
    split_united,
    subsegment_has,
    target_score,
    twin_permutation,
    unit_array_ops,
    walking_master,
)


def _empty_grid():
    return ["." * 10 for _ in range(10)]


def _grid_with(cells):
    rows = [list(row) for row in _empty_grid()]
    for r, c in cells:
        rows[r][c] = "X"
    return ["".join(row) for row in rows]


def test_k_index_without_twos_is_one():
    assert k_index([1, 1, 1]) == 1


def test_k_index_odd_twos_is_impossible():
    assert k_index([1, 2, 1]) == -1


@pytest.mark.parametrize("a", [[2, 1, 2, 1], [1, 2, 2, 1, 2, 2], [2, 2]])
def test_k_index_balances_twos(a):
    k = k_index(a)
    assert 0 < k < len(a)
    assert a[:k].count(2) == a[k:].count(2)
    assert all(a[:j].count(2) != a[j:].count(2) for j in range(k))


def test_line_trip_pinned():
    assert line_trip([1, 2, 5], 7) == 4


def test_line_trip_bounds():
    positions = [3, 4, 10]
    result = line_trip(positions, 12)
    assert result >= 2 * (12 - positions[-1])
    assert result >= positions[0]
    assert result >= positions[2] - positions[1]


def test_one_two_split_impossible():
    assert one_two_split([2, 2, 2]) == -1


def test_one_two_split_all_ones():
    assert one_two_split([1, 1, 1]) == 1


@pytest.mark.parametrize("nums", [[2, 2, 1, 2, 1, 2], [1, 2, 1, 2], [2, 1, 1, 1, 2]])
def test_one_two_split_equal_products(nums):
    k = one_two_split(nums)
    assert 1 <= k < len(nums)
    assert prod(nums[:k]) == prod(nums[k:])
    assert all(prod(nums[:j]) != prod(nums[j:]) for j in range(1, k))


def test_fill_sequence_sorted_unchanged():
    assert fill_sequence([1, 3, 3, 7]) == [1, 3, 3, 7]


def test_fill_sequence_inserts_one():
    assert fill_sequence([4, 2]) == [4, 1, 2]


def test_fill_sequence_keeps_original_order():
    values = [5, 3, 8, 2, 2]
    result = fill_sequence(values)
    assert [v for v in result if v != 1] == values
    assert len(result) == len(values) + 2


def test_has_small_gcd_pair():
    assert has_small_gcd_pair([6, 9, 15]) is False
    assert has_small_gcd_pair([6, 9, 10]) is True
    assert has_small_gcd_pair([1]) is False


def test_has_small_gcd_pair_agrees_with_witness():
    a = [12, 18, 35]
    assert has_small_gcd_pair(a) is (gcd(12, 35) <= 2)


def test_subsegment_has():
    assert subsegment_has([1, 2, 3], 2) is True
    assert subsegment_has([1, 2, 3], 5) is False


def test_subsegment_empty_raises():
    with pytest.raises(ValueError):
        subsegment_has([], 1)


def test_target_empty_grid():
    assert target_score(_empty_grid()) == 0


def test_target_corner_is_outer_ring():
    assert target_score(_grid_with([(0, 0)])) == 1


def test_target_center_beats_edge():
    assert target_score(_grid_with([(4, 4)])) > target_score(_grid_with([(0, 5)]))


def test_target_symmetry():
    assert target_score(_grid_with([(2, 7)])) == target_score(_grid_with([(7, 2)]))
    assert target_score(_grid_with([(1, 3)])) == target_score(_grid_with([(8, 6)]))


def test_target_wrong_size_raises():
    with pytest.raises(ValueError):
        target_score(["." * 10] * 9)
    with pytest.raises(ValueError):
        target_score(["." * 9] * 10)


def test_twin_permutation_round_trip():
    a = [3, 1, 4, 2]
    assert twin_permutation(twin_permutation(a)) == a


def test_twin_permutation_sums():
    a = [2, 5, 1, 3, 4]
    assert all(x + y == len(a) + 1 for x, y in zip(a, twin_permutation(a)))


def test_unit_array_all_ones():
    assert unit_array_ops([1, 1, 1]) == 0


@pytest.mark.parametrize("a", [[-1, -1, 1], [-1, -1, -1, -1], [-1, 1, 1], [-1] * 5])
def test_unit_array_result_is_valid(a):
    flips = unit_array_ops(a)
    negatives = a.count(-1)
    assert 0 <= flips <= negatives
    assert sum(a) + 2 * flips >= 0
    assert (negatives - flips) % 2 == 0


def test_split_united_all_equal():
    assert split_united([7, 7, 7]) is None


def test_split_united_parts():
    a = [3, 1, 2, 1, 5]
    first, second = split_united(a)
    assert sorted(first + second) == sorted(a)
    assert all(v == min(a) for v in first)
    assert min(a) not in second
    assert first and second


def test_split_united_empty_raises():
    with pytest.raises(ValueError):
        split_united([])


def test_walking_master_same_point():
    assert walking_master(0, 0, 0, 0) == 0


def test_walking_master_cannot_go_down():
    assert walking_master(0, 5, 0, 2) == -1


def test_walking_master_pinned():
    assert walking_master(-1, 0, -1, 2) == 4