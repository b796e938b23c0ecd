"""Recursive arithmetic, staircase counting and the towers of Hanoi."""

from __future__ import annotations

from itertools import repeat
from typing import Any, List


def _check_factors(a: int, b: int) -> None:
    if a < 0:
        raise ValueError("multiplicand must not be negative")
    if b < 1:
        raise ValueError("multiplier must be at least 1")


def multiply_linear(a: int, b: int) -> int:
    """Multiply by adding a to itself b times; b must be at least 1."""
    _check_factors(a, b)
    return sum(repeat(a, b))


def multiply_halving(a: int, b: int) -> int:
    """Multiply by halving b, doubling the half product and adding a when b is odd."""
    _check_factors(a, b)

    def product(multiplier: int) -> int:
        if multiplier == 1:
            return a
        half = product(multiplier >> 1) << 1
        return half + (a if multiplier & 1 else 0)

    return product(b)


def triple_step(n: int) -> int:
    """Return the number of ways to climb n steps taking 1, 2 or 3 at a time."""
    if n < 0:
        raise ValueError("number of steps must not be negative")
    if n == 0:
        return 1
    return sum(triple_step(n - hop) for hop in (1, 2, 3) if hop <= n)


def triple_step_memo(n: int) -> int:
    """Return the same count as triple_step, reusing the counts for smaller staircases."""
    if n < 0:
        raise ValueError("number of steps must not be negative")
    ways = [1]
    for step in range(1, n + 1):
        ways.append(sum(ways[max(0, step - 3):step]))
    return ways[n]


def move_disks(count: int, source: List[Any], target: List[Any], spare: List[Any]) -> None:
    """Move the top count disks from source to target in place, using spare as the buffer.

    Each list is a stack whose top is its last element; the moved disks keep
    their order.
    """
    if count < 0:
        raise ValueError("disk count must not be negative")
    if count > len(source):
        raise ValueError("source holds fewer disks than asked to move")

    def move(n: int, src: List[Any], dst: List[Any], buf: List[Any]) -> None:
        if n == 0:
            return
        move(n - 1, src, buf, dst)
        dst.append(src.pop())
        move(n - 1, buf, dst, src)

    move(count, source, target, spare)