"""Checks that a binary tree satisfies the binary search tree property."""

from __future__ import annotations

from itertools import pairwise
from typing import Optional

from algokit.tree import Node, in_order


def height(node: Optional[Node]) -> int:
    """Return the number of edges on the longest root-to-leaf path; 0 for a leaf or empty tree."""
    if node is None:
        return 0
    has_children = node.left is not None or node.right is not None
    return max(height(node.left), height(node.right)) + (1 if has_children else 0)


def validate_by_subtrees(node: Optional[Node]) -> bool:
    """Check that every left descendant is smaller and every right one not smaller, at every node."""
    if node is None:
        return True
    left_ok = all(child.value < node.value for child in in_order(node.left))
    right_ok = all(child.value >= node.value for child in in_order(node.right))
    return (
        left_ok
        and right_ok
        and validate_by_subtrees(node.left)
        and validate_by_subtrees(node.right)
    )


def validate_by_in_order(node: Optional[Node]) -> bool:
    """Check that an in-order walk never steps down to a smaller value."""
    return all(not a.value > b.value for a, b in pairwise(in_order(node)))


def validate_by_bounds(node: Optional[Node]) -> bool:
    """Check each node against the inclusive lower and exclusive upper bound set by its ancestors."""
    stack = [(node, None, None)]
    while stack:
        current, low, high = stack.pop()
        if current is None:
            continue
        if (low is not None and current.value < low) or (
            high is not None and current.value >= high
        ):
            return False
        stack.append((current.left, low, current.value))
        stack.append((current.right, current.value, high))
    return True