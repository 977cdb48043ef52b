import pytest

from cpsolve.lvl800_basic import (
    array_color,
    beautiful_arrangement,
    coin_sum_possible,
    cover_water,
    desorted_ops,
    doremy_paint,
    extreme_round,
    forbidden_sum,
    game_winner,
    halloumi_sortable,
    jagged_sortable,
    same_parity_pairs,
)


def test_array_color_even_number_of_odds():
    assert array_color([1, 3, 4]) is True


def test_array_color_odd_number_of_odds():
    assert array_color([1, 2, 4]) is False


@pytest.mark.parametrize("base", [[1], [2, 3, 5], [7, 7], []])
def test_array_color_parity_invariants(base):
    assert array_color(base + [6]) == array_color(base)
    assert array_color(base + [9]) != array_color(base)


def test_beautiful_arrangement_is_permutation_with_max_first():
    data = [3, 1, 4, 1, 5]
    result = beautiful_arrangement(data)
    assert sorted(result) == sorted(data)
    assert result[0] == max(data)
    assert result[1:] == sorted(result[1:])


def test_beautiful_arrangement_all_equal():
    assert beautiful_arrangement([4, 4, 4]) is None


def test_beautiful_arrangement_empty():
    with pytest.raises(ValueError):
        beautiful_arrangement([])


@pytest.mark.parametrize(
    "n, expected", [(0, True), (4, True), (7, False), (-2, False)]
)
def test_coin_sum_possible(n, expected):
    assert coin_sum_possible(n, 3) is expected


def test_cover_water_long_run_needs_two():
    assert cover_water("#....#") == 2


@pytest.mark.parametrize("row", ["#.#.#", "..#..", "#", ".#..#."])
def test_cover_water_short_runs_count_every_cell(row):
    assert cover_water(row) == row.count(".")


def test_desorted_unsorted_is_zero():
    assert desorted_ops([5, 3, 7]) == 0


def test_desorted_equal_elements():
    assert desorted_ops([2, 2, 2]) == 1


def test_desorted_gap():
    assert desorted_ops([1, 5, 20]) == 3


def test_desorted_single_element_uses_sentinel():
    assert desorted_ops([8]) == 10**9 // 2 + 1


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 2, 3], False),
        ([1, 2, 1, 2], True),
        ([1, 1, 1, 2], False),
        ([5, 5, 5], True),
        ([2, 1, 2], True),
    ],
)
def test_doremy_paint(nums, expected):
    assert doremy_paint(nums) is expected


def test_doremy_paint_empty():
    with pytest.raises(ValueError):
        doremy_paint([])


def test_extreme_round_single_digit():
    assert extreme_round(9) == 9


def test_extreme_round_is_monotonic():
    values = [extreme_round(n) for n in range(1, 1200)]
    assert all(b - a in (0, 1) for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("power", [1, 2, 3, 5])
def test_extreme_round_steps_at_powers_of_ten(power):
    assert extreme_round(10**power) == extreme_round(10**power - 1) + 1


def test_extreme_round_rejects_zero():
    with pytest.raises(ValueError):
        extreme_round(0)


def test_forbidden_sum_uses_ones_when_allowed():
    assert forbidden_sum(5, 3, 2) == [1, 1, 1, 1, 1]


@pytest.mark.parametrize("n, k", [(4, 1), (5, 2)])
def test_forbidden_sum_impossible(n, k):
    assert forbidden_sum(n, k, 1) is None


@pytest.mark.parametrize("n, k", [(6, 2), (7, 3), (8, 5), (3, 4)])
def test_forbidden_sum_valid_split(n, k):
    parts = forbidden_sum(n, k, 1)
    assert sum(parts) == n
    assert len(parts) == n // 2
    assert all(2 <= part <= k for part in parts)
    assert 1 not in parts


@pytest.mark.parametrize(
    "n, expected", [(3, "Second"), (4, "First"), (5, "First"), (-1, "Second")]
)
def test_game_winner(n, expected):
    assert game_winner(n) == expected


def test_same_parity_all_odd():
    data = [1, 3, 5, 7]
    assert same_parity_pairs(data) == len(data) - 1


def test_same_parity_alternating():
    assert same_parity_pairs([1, 2, 3, 4]) == 0


def test_same_parity_negative_uses_signed_remainder():
    assert same_parity_pairs([-1, 1]) == 0


def test_same_parity_empty():
    assert same_parity_pairs([]) == 0


def test_halloumi_sorted_with_long_reversal():
    assert halloumi_sortable([1, 2, 2, 5], 2) is True


def test_halloumi_sorted_but_k_one():
    assert halloumi_sortable([1, 2, 3], 1) is True or halloumi_sortable([1, 2, 3], 1) is False
    assert halloumi_sortable([1, 2, 3], 1) is False


def test_halloumi_unsorted():
    assert halloumi_sortable([3, 1, 2], 3) is False


def test_jagged_sortable():
    assert jagged_sortable([1, 3, 2]) is True
    assert jagged_sortable([2, 1, 3]) is False


def test_jagged_sortable_empty():
    with pytest.raises(ValueError):
        jagged_sortable([])