"""Downward paths in a binary tree whose values add up to a given total."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional

from algokit.tree import Node


def paths_from(node: Optional[Node], total: Any) -> Iterator[List[Any]]:
    """Yield every downward path starting at node whose values sum to total.

    A path is reported as soon as its running sum matches, and the search
    carries on below it, so one path may extend another.
    """
    if node is None:
        return
    stack: List[tuple] = [(node, [node.value], node.value)]
    while stack:
        current, path, running = stack.pop()
        if running == total:
            yield list(path)
        # Push right first so the left branch is explored first.
        for child in (current.right, current.left):
            if child is not None:
                stack.append((child, path + [child.value], running + child.value))


def find_paths(root: Optional[Node], total: Any) -> List[List[Any]]:
    """Return all downward paths anywhere in the tree whose values sum to total.

    Starting nodes are taken in pre-order; paths from one start come in
    depth-first order.
    """
    paths: List[List[Any]] = []
    stack: List[Optional[Node]] = [root]
    while stack:
        start = stack.pop()
        if start is None:
            continue
        paths.extend(paths_from(start, total))
        stack.append(start.right)
        stack.append(start.left)
    return paths