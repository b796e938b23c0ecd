"""Subset enumeration, power sets and subset-sum search."""

from __future__ import annotations

from typing import Any, Callable, List, Sequence


def traverse_subsets_until(
    values: Sequence[Any],
    start: int,
    count: int,
    visitor: Callable[[List[Any]], bool],
) -> bool:
    """Visit every subset of values[start:start + count] until visitor returns true.

    Subsets are produced by deciding, element by element, to include it
    before excluding it. Returns True if the visitor stopped the traversal.
    """
    if start < 0 or count < 0:
        raise ValueError("start and count must not be negative")
    if start + count > len(values):
        raise IndexError("subset range runs past the end of the values")
    chosen: List[Any] = []

    def visit(index: int) -> bool:
        if index == count:
            return bool(visitor(list(chosen)))
        chosen.append(values[start + index])
        if visit(index + 1):
            return True
        chosen.pop()
        return visit(index + 1)

    return visit(0)


def subsets_recursive(values: Sequence[Any]) -> List[List[Any]]:
    """Return every subset, each element included before it is left out."""
    subsets: List[List[Any]] = []

    def collect(subset: List[Any]) -> bool:
        subsets.append(subset)
        return False

    traverse_subsets_until(values, 0, len(values), collect)
    return subsets


def subset_indices(values: Sequence[Any]) -> List[List[int]]:
    """Return the index lists of every subset, one per bitmask from 0 upwards."""
    size = len(values)
    return [
        [position for position in range(size) if mask >> position & 1]
        for mask in range(1 << size)
    ]


def subsets_bitmask(values: Sequence[Any]) -> List[List[Any]]:
    """Return every subset, one per bitmask from 0 upwards; bit j selects values[j]."""
    return [[values[position] for position in indices] for indices in subset_indices(values)]


def subset_sums(values: Sequence[Any], start: int, count: int) -> List[Any]:
    """Return the sum of every subset of values[start:start + count], in traversal order."""
    sums: List[Any] = []

    def record(subset: List[Any]) -> bool:
        sums.append(sum(subset))
        return False

    traverse_subsets_until(values, start, count, record)
    return sums


def subset_sum_exists(values: Sequence[int], target: int) -> bool:
    """Tell whether some subset of values adds up to target, by trying every subset."""
    return traverse_subsets_until(
        values, 0, len(values), lambda subset: sum(subset) == target
    )


def subset_sum_meet_in_middle(values: Sequence[int], target: int) -> bool:
    """Tell whether some subset adds up to target by combining sums of the two halves."""
    left_size = len(values) // 2
    right_size = len(values) - left_size
    left = sorted(subset_sums(values, 0, left_size), reverse=True)
    right = sorted(subset_sums(values, left_size, right_size))
    i = j = 0
    while i < len(left) and j < len(right):
        total = left[i] + right[j]
        if total < target:
            j += 1
        elif total > target:
            i += 1
        else:
            return True
    return False