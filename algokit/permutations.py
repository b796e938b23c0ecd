"""Permutations of sequences and strings, and balanced parenthesis strings."""

from __future__ import annotations

from collections import Counter
from math import factorial
from typing import Any, Iterator, List, Sequence


def next_permutation(items: Sequence[Any]) -> List[Any]:
    """Return the lexicographically next arrangement of items as a new list.

    The last arrangement (non-increasing order) wraps around to the first
    (sorted order).
    """
    result = list(items)
    pivot = len(result) - 2
    while pivot >= 0 and not result[pivot] < result[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        result.reverse()
        return result
    swap = len(result) - 1
    while not result[pivot] < result[swap]:
        swap -= 1
    result[pivot], result[swap] = result[swap], result[pivot]
    result[pivot + 1:] = reversed(result[pivot + 1:])
    return result


def permutations_recursive(values: Sequence[Any]) -> List[List[Any]]:
    """Return every ordering of values by choosing unused positions in index order."""
    items = list(values)
    chosen = [False] * len(items)
    current: List[Any] = []
    results: List[List[Any]] = []

    def extend() -> None:
        if len(current) == len(items):
            results.append(list(current))
            return
        for position, value in enumerate(items):
            if chosen[position]:
                continue
            chosen[position] = True
            current.append(value)
            extend()
            current.pop()
            chosen[position] = False

    extend()
    return results


def permutations_lexicographic(values: Sequence[Any]) -> List[List[Any]]:
    """Return len(values)! arrangements, each the lexicographic successor of the one before.

    The first entry is the successor of values itself, so for sorted input
    the sorted arrangement comes last.
    """
    current = list(values)
    results: List[List[Any]] = []
    for _ in range(factorial(len(current))):
        current = next_permutation(current)
        results.append(current)
    return results


def string_permutations(text: str) -> List[str]:
    """Return every ordering of the characters of text, duplicates included."""
    return ["".join(chars) for chars in permutations_recursive(text)]


def string_permutations_next(text: str) -> List[str]:
    """Return len(text)! strings produced by repeatedly taking the next permutation."""
    return ["".join(chars) for chars in permutations_lexicographic(text)]


def unique_permutations(text: str) -> List[str]:
    """Return the distinct orderings of the characters of text, sorted."""
    return sorted(set(string_permutations(text)))


def _arrangements(text: str) -> Iterator[str]:
    counts = Counter(text)
    size = len(text)
    buffer: List[str] = []

    def extend() -> Iterator[str]:
        if len(buffer) == size:
            yield "".join(buffer)
            return
        for char, left in counts.items():
            if left > 0:
                counts[char] = left - 1
                buffer.append(char)
                yield from extend()
                buffer.pop()
                counts[char] = left

    yield from extend()


def unique_permutations_by_count(text: str) -> List[str]:
    """Return the distinct orderings of text, built from a table of character counts.

    Characters are tried in order of first appearance in text.
    """
    return list(_arrangements(text))


def is_valid_parens(text: str) -> bool:
    """Tell whether no prefix of text closes more parentheses than it opened.

    Characters other than parentheses are ignored; unclosed openings are
    not an error.
    """
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return False
            depth -= 1
    return True


def _check_pairs(n: int) -> None:
    if n < 0:
        raise ValueError("the number of pairs must not be negative")


def valid_parens_by_permutation(n: int) -> List[str]:
    """Return the balanced strings of n pairs by filtering arrangements of '()' * n."""
    _check_pairs(n)
    return [text for text in _arrangements("()" * n) if is_valid_parens(text)]


def valid_parens(n: int) -> List[str]:
    """Return the balanced strings of n pairs, placing '(' before ')' at each step."""
    _check_pairs(n)
    length = 2 * n
    buffer: List[str] = []
    results: List[str] = []

    def build(opened: int, closed: int) -> None:
        if opened + closed == length:
            results.append("".join(buffer))
            return
        if opened < n:
            buffer.append("(")
            build(opened + 1, closed)
            buffer.pop()
        if opened > closed:
            buffer.append(")")
            build(opened, closed + 1)
            buffer.pop()

    build(0, 0)
    return results