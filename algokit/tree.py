"""Binary search trees built from sorted sequences, with traversal helpers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node; children passed to the constructor get their parent set."""

    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None
    parent: Optional[Node] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in (self.left, self.right):
            if child is not None:
                child.parent = self


def build_bst(values: Iterable[Any]) -> Optional[Node]:
    """Build a minimal-height tree from values, taking the middle element as each root.

    The result is a binary search tree when the values are sorted.
    """
    items = list(values)

    def build(start: int, end: int, parent: Optional[Node]) -> Optional[Node]:
        if start >= end:
            return None
        middle = (start + end) // 2
        node = Node(items[middle], parent=parent)
        node.left = build(start, middle, node)
        node.right = build(middle + 1, end, node)
        return node

    return build(0, len(items), None)


def in_order(node: Optional[Node]) -> Iterator[Node]:
    """Yield the nodes of the tree in in-order sequence."""
    stack: List[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def count_nodes(node: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in in_order(node))


def level_order(node: Optional[Node]) -> List[List[Any]]:
    """Return the tree's values grouped by level, from the root down."""
    levels: List[List[Any]] = []
    if node is None:
        return levels
    queue = deque([node])
    while queue:
        level = []
        for _ in range(len(queue)):
            current = queue.popleft()
            level.append(current.value)
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)
        levels.append(level)
    return levels


def format_tree(node: Optional[Node]) -> str:
    """Render the node count followed by one line per level."""
    body = "\n".join(
        f"[{index}]: " + ", ".join(str(value) for value in level)
        for index, level in enumerate(level_order(node))
    )
    return f"\nNode Count: {count_nodes(node)}\n{body}"


def leftmost(node: Optional[Node]) -> Optional[Node]:
    """Return the leftmost node under node, or None for an empty tree."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def rightmost(node: Optional[Node]) -> Optional[Node]:
    """Return the rightmost node under node, or None for an empty tree."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def successor(node: Node) -> Optional[Node]:
    """Return the in-order successor of node using parent links, or None if it is last."""
    if node.right is not None:
        return leftmost(node.right)
    while node.parent is not None and node.parent.left is not node:
        node = node.parent
    return node.parent