"""Pair sums over sorted lists, common-element counting and greedy coin change."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, List, Optional, Sequence, Tuple


def find_pair_two_pointer(
    first: Sequence[int], second: Sequence[int], total: int
) -> Optional[Tuple[int, int]]:
    """Find indices (i, j) with first[i] + second[j] == total, both lists sorted ascending.

    Walks first upwards and second downwards in linear time; returns None if
    there is no such pair.
    """
    i, j = 0, len(second) - 1
    while i < len(first) and j >= 0:
        current = first[i] + second[j]
        if current < total:
            i += 1
        elif current > total:
            j -= 1
        else:
            return i, j
    return None


def find_pair_binary(
    first: Sequence[int], second: Sequence[int], total: int
) -> Optional[Tuple[int, int]]:
    """Find indices (i, j) with first[i] + second[j] == total by binary search in second.

    second must be sorted ascending. Values of first greater than total are
    skipped. The first matching i is returned with the lowest matching j.
    """
    for i, value in enumerate(first):
        if value > total:
            continue
        wanted = total - value
        j = bisect_left(second, wanted)
        if j < len(second) and second[j] == wanted:
            return i, j
    return None


def count_common(first: Iterable, second: Iterable) -> int:
    """Count the elements of second, with repeats, that also occur in first."""
    seen = set(first)
    return sum(1 for value in second if value in seen)


def min_coins(coins: Iterable[int], total: int) -> List[int]:
    """Pay total greedily, always taking as many of the largest fitting coin as possible.

    Coins come out largest first. If no coin fits what is left, the
    remainder stays unpaid.
    """
    denominations = sorted(coins, reverse=True)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    if total < 0:
        raise ValueError("total must not be negative")
    paid: List[int] = []
    remaining = total
    for coin in denominations:
        count, remaining = divmod(remaining, coin)
        paid.extend([coin] * count)
    return paid