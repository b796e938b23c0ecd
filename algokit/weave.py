"""Interleavings of two sequences that keep each one's internal order."""

from __future__ import annotations

from typing import Any, List, Sequence


def weaves(first: Sequence[Any], second: Sequence[Any]) -> List[List[Any]]:
    """Return every interleaving of first and second preserving their relative orders.

    Interleavings that take the next element of first come before those that
    take the next element of second. There are C(n + m, m) of them.
    """
    total = len(first) + len(second)
    results: List[List[Any]] = []
    buffer: List[Any] = []

    def step(i: int, j: int) -> None:
        if len(buffer) == total:
            results.append(list(buffer))
            return
        if i < len(first):
            buffer.append(first[i])
            step(i + 1, j)
            buffer.pop()
        if j < len(second):
            buffer.append(second[j])
            step(i, j + 1)
            buffer.pop()

    step(0, 0)
    return results