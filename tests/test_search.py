import pytest

from algokit.search import (
    count_common,
    find_pair_binary,
    find_pair_two_pointer,
    min_coins,
)

FIRST = sorted([1, 2, 3, -4, 5, -6, 10, -10, -32, -200, -105, 23, 4, 5, 6, 43])
SECOND = sorted([4, 5, 32, 5, 6, 23, 12, 65, 205, 332, 422, 4455, 20, 4, 10, 5])


@pytest.mark.parametrize("func", [find_pair_two_pointer, find_pair_binary])
def test_pair_found_in_source_lists(func):
    result = func(FIRST, SECOND, 100)
    assert result is not None
    i, j = result
    assert FIRST[i] + SECOND[j] == 100


def test_pair_methods_agree_on_source_lists():
    assert find_pair_two_pointer(FIRST, SECOND, 100) == find_pair_binary(FIRST, SECOND, 100)


@pytest.mark.parametrize("func", [find_pair_two_pointer, find_pair_binary])
def test_pair_uses_first_element_of_second(func):
    assert func([1, 2, 3], [10, 20], 11) == (0, 0)


@pytest.mark.parametrize("func", [find_pair_two_pointer, find_pair_binary])
def test_no_pair(func):
    assert func([1, 2, 3], [10, 20], 100) is None


@pytest.mark.parametrize("func", [find_pair_two_pointer, find_pair_binary])
def test_empty_lists(func):
    assert func([], [1, 2], 3) is None
    assert func([1, 2], [], 3) is None


def test_binary_skips_values_above_total():
    assert find_pair_binary([150], [-50], 100) is None
    assert find_pair_two_pointer([150], [-50], 100) == (0, 0)


def test_pair_sums_over_many_totals():
    for total in range(-50, 120):
        result = find_pair_two_pointer(FIRST, SECOND, total)
        if result is not None:
            i, j = result
            assert FIRST[i] + SECOND[j] == total


def test_count_common_source_lists():
    first = [5, 2, 8, 9, 4] + [2 * i + 1 for i in range(10000)]
    second = [3, 2, 9, 5] + [2 * i for i in range(10000)]
    assert count_common(first, second) == 7


def test_count_common_self():
    values = list(range(0, 300, 7))
    assert count_common(values, values) == len(values)


def test_count_common_counts_repeats_in_second():
    assert count_common([1], [1, 1, 1]) == 3


def test_count_common_disjoint():
    assert count_common([1, 3, 5], [2, 4, 6]) == 0


def test_min_coins_source_example():
    assert min_coins([10, 5, 15, 100], 140) == [100, 15, 15, 10]


def test_min_coins_invariants():
    coins = [1, 5, 10, 25]
    for total in range(0, 200):
        paid = min_coins(coins, total)
        assert sum(paid) == total
        assert paid == sorted(paid, reverse=True)
        assert set(paid) <= set(coins)


def test_min_coins_leaves_unpayable_remainder():
    assert min_coins([5], 7) == [5]


def test_min_coins_zero_total():
    assert min_coins([1, 2], 0) == []


def test_min_coins_rejects_zero_coin():
    with pytest.raises(ValueError):
        min_coins([0, 5], 10)


def test_min_coins_rejects_negative_total():
    with pytest.raises(ValueError):
        min_coins([1, 5], -3)