"""Insertion into a self-balancing red-black style binary search tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional


class Color(enum.Enum):
    """Node colour."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RBNode:
    """A coloured tree node; children passed to the constructor get their parent set."""

    value: Any
    color: Color = Color.RED
    left: Optional[RBNode] = None
    right: Optional[RBNode] = None
    parent: Optional[RBNode] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in (self.left, self.right):
            if child is not None:
                child.parent = self

    def __iter__(self) -> Iterator[Any]:
        """Yield the values of this subtree in in-order sequence."""
        stack: List[RBNode] = []
        current: Optional[RBNode] = self
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right


def _is_red(node: Optional[RBNode]) -> bool:
    return node is not None and node.color is Color.RED


def _replace_child(parent: Optional[RBNode], old: RBNode, new: RBNode) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def _rotate_left(node: RBNode) -> RBNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    if node.right is not None:
        node.right.parent = node
    pivot.parent = node.parent
    _replace_child(node.parent, node, pivot)
    pivot.left = node
    node.parent = pivot
    return pivot


def _rotate_right(node: RBNode) -> RBNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    if node.left is not None:
        node.left.parent = node
    pivot.parent = node.parent
    _replace_child(node.parent, node, pivot)
    pivot.right = node
    node.parent = pivot
    return pivot


def _goes_right(
    value: Any, current: Any, key: Optional[Callable[[Any], Any]]
) -> bool:
    if key is None:
        return value > current
    return key(value) > key(current)


def insert(
    node: Optional[RBNode], value: Any, key: Optional[Callable[[Any], Any]] = None
) -> RBNode:
    """Insert value below node and return the (possibly new) root of that subtree.

    Values whose key is greater than a node's go right; equal or smaller go
    left. A black node with two red children at the root has them recoloured
    black; a black node with a red child and red grandchild on one side is
    rotated so the middle value becomes the black subtree root.
    """
    if node is None:
        return RBNode(value, Color.BLACK)

    if _goes_right(value, node.value, key):
        if node.right is None:
            node.right = RBNode(value, Color.RED, parent=node)
            return node
        node.right = insert(node.right, value, key)
        node.right.parent = node
    else:
        if node.left is None:
            node.left = RBNode(value, Color.RED, parent=node)
            return node
        node.left = insert(node.left, value, key)
        node.left.parent = node

    if node.color is not Color.BLACK:
        return node

    if node.parent is None and _is_red(node.left) and _is_red(node.right):
        node.left.color = Color.BLACK
        node.right.color = Color.BLACK
        return node

    pivot: Optional[RBNode] = None
    if _is_red(node.right):
        if _is_red(node.right.right):
            pivot = _rotate_left(node)
        elif _is_red(node.right.left):
            _rotate_right(node.right)
            pivot = _rotate_left(node)
    elif _is_red(node.left):
        if _is_red(node.left.left):
            pivot = _rotate_right(node)
        elif _is_red(node.left.right):
            _rotate_left(node.left)
            pivot = _rotate_right(node)

    if pivot is None:
        return node
    pivot.color = Color.BLACK
    node.color = Color.RED
    return pivot