import pytest

from algokit.tree import Node, build_bst, level_order, rightmost
from algokit.validate import (
    height,
    validate_by_bounds,
    validate_by_in_order,
    validate_by_subtrees,
)

SOURCE_VALUES = [100, 2, 3, 4, 0, 45, 32, 56, 7, 8, 10, -1, 2, -4]
VALIDATORS = [validate_by_subtrees, validate_by_in_order, validate_by_bounds]


@pytest.fixture
def tree():
    return build_bst(sorted(SOURCE_VALUES))


@pytest.mark.parametrize("validate", VALIDATORS)
def test_balanced_tree_from_sorted_values_is_valid(tree, validate):
    assert validate(tree) is True


@pytest.mark.parametrize("validate", VALIDATORS)
def test_chain_appended_to_rightmost_is_invalid(tree, validate):
    node = rightmost(tree)
    node.right = Node(2355)
    node.right.right = Node(5443)
    node.right.right.right = Node(-443)
    node.right.right.right.right = Node(-6490)
    assert validate(tree) is False


def test_empty_tree_is_valid():
    assert validate_by_subtrees(None) is True
    assert validate_by_in_order(None) is True
    assert validate_by_bounds(None) is True


@pytest.mark.parametrize("validate", VALIDATORS)
def test_deep_violation_is_found(validate):
    root = Node(10, left=Node(5, right=Node(12)))
    assert validate(root) is False


def test_equal_value_on_left_side():
    root = Node(2, left=Node(2))
    assert validate_by_subtrees(root) is False
    assert validate_by_bounds(root) is False
    assert validate_by_in_order(root) is True


def test_equal_value_on_right_side_is_valid():
    root = Node(2, right=Node(2))
    assert validate_by_subtrees(root) is True
    assert validate_by_in_order(root) is True
    assert validate_by_bounds(root) is True


def test_height_of_empty_and_leaf():
    assert height(None) == 0
    assert height(Node(1)) == 0


def test_height_matches_level_count(tree):
    assert height(tree) == len(level_order(tree)) - 1


def test_height_of_chain():
    root = Node(1, right=Node(2, right=Node(3)))
    assert height(root) == 2