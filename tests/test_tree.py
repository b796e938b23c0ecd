import pytest

from algokit.tree import (
    Node,
    build_bst,
    count_nodes,
    format_tree,
    in_order,
    leftmost,
    level_order,
    rightmost,
    successor,
)

SOURCE_VALUES = [100, 2, 3, 4, 0, 45, 32, 56, 7, 8, 10, -1, 2, -4]


@pytest.fixture
def tree():
    return build_bst(sorted(SOURCE_VALUES))


def test_in_order_yields_sorted_values(tree):
    assert [node.value for node in in_order(tree)] == sorted(SOURCE_VALUES)


def test_count_nodes_matches_input(tree):
    assert count_nodes(tree) == len(SOURCE_VALUES)


def test_level_order_covers_every_value(tree):
    levels = level_order(tree)
    assert sorted(v for level in levels for v in level) == sorted(SOURCE_VALUES)
    assert len(levels[0]) == 1
    for upper, lower in zip(levels, levels[1:]):
        assert len(lower) <= 2 * len(upper)


def test_level_order_small_tree():
    assert level_order(build_bst([1, 2, 3])) == [[2], [1, 3]]


def test_format_tree_small_tree():
    assert format_tree(build_bst([1, 2, 3])) == "\nNode Count: 3\n[0]: 2\n[1]: 1, 3"


def test_format_tree_mentions_count(tree):
    text = format_tree(tree)
    assert text.startswith(f"\nNode Count: {len(SOURCE_VALUES)}\n[0]: ")
    assert text.count("\n") == len(level_order(tree)) + 1


def test_empty_tree():
    assert build_bst([]) is None
    assert count_nodes(None) == 0
    assert level_order(None) == []
    assert list(in_order(None)) == []
    assert leftmost(None) is None
    assert rightmost(None) is None


def test_leftmost_and_rightmost(tree):
    assert leftmost(tree).value == min(SOURCE_VALUES)
    assert rightmost(tree).value == max(SOURCE_VALUES)


def test_parent_links(tree):
    for node in in_order(tree):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
    assert tree.parent is None


def test_successor_walk_visits_sorted_values(tree):
    values = []
    node = leftmost(tree)
    while node is not None:
        values.append(node.value)
        node = successor(node)
    assert values == sorted(SOURCE_VALUES)


def test_successor_of_last_is_none(tree):
    assert successor(rightmost(tree)) is None


def test_constructor_sets_parent_of_children():
    child = Node(1)
    root = Node(5, left=child)
    assert child.parent is root
    assert successor(child) is root