# algokit

A small library of classic algorithm exercises. Each one is a plain Python
function or class. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.tree` holds `Node`, a binary tree node with `value`, `left`,
  `right` and `parent`. Children given to the constructor get their parent
  set. The module also has:
  - `build_bst(values)`, which builds a minimal-height tree by taking the
    middle element as each root. The result is a binary search tree when the
    values are sorted.
  - `in_order`, which yields nodes in in-order sequence.
  - `count_nodes`, `leftmost` and `rightmost`.
  - `level_order`, which returns the values grouped by level.
  - `format_tree`, which renders the node count and one line per level.
  - `successor`, which finds the in-order successor through parent links.
- `algokit.validate` holds `height` and three binary search tree checks:
  - `validate_by_subtrees`: every left descendant is smaller and every right
    descendant is not smaller.
  - `validate_by_in_order`: the in-order walk never decreases.
  - `validate_by_bounds`: each node lies within the bounds set by its
    ancestors.
- `algokit.tree_paths` holds `paths_from(node, total)` and
  `find_paths(root, total)`, which list the downward paths whose values add
  up to a total.
- `algokit.redblack` holds `Color`, `RBNode` and `insert(node, value,
  key=None)`. `insert` returns the subtree root, which may be a new one.
  Iterating an `RBNode` yields its subtree's values in order.
- `algokit.subsets` holds:
  - `traverse_subsets_until`, which visits subsets until the visitor returns
    true.
  - `subsets_recursive`, `subsets_bitmask` and `subset_indices`.
  - `subset_sums`.
  - `subset_sum_exists`, which tries every subset.
  - `subset_sum_meet_in_middle`, which combines the sorted sums of the two
    halves.
- `algokit.weave` holds `weaves(first, second)`. It returns every
  interleaving of two sequences that keeps the order within each.
- `algokit.permutations` holds:
  - `next_permutation`, which wraps from the last arrangement to the first.
  - `permutations_recursive` and `permutations_lexicographic`.
  - `string_permutations` and `string_permutations_next`.
  - `unique_permutations` and `unique_permutations_by_count`.
  - `is_valid_parens`, `valid_parens_by_permutation` and `valid_parens`.
- `algokit.containers` holds:
  - `MinStack`, whose `min()` runs in constant time.
  - `BoundedQueue`, where pushing onto a full queue drops the oldest value.
  - `BoundedStack`, which raises `StackFullError` (an `OverflowError`) when
    it is full.
  - Popping or peeking an empty container raises `IndexError`.
- `algokit.grids` holds:
  - `count_queen_placements(n)`.
  - `count_hamiltonian_paths(n)`, which counts paths that visit every cell
    of an n x n grid from corner to corner.
  - `count_monotone_paths(rows, columns)`, which counts right-or-down paths.
- `algokit.recursion` holds `multiply_linear`, `multiply_halving`,
  `triple_step`, `triple_step_memo` and `move_disks`. `move_disks` solves
  the towers of Hanoi in place on lists whose last element is the top.
- `algokit.search` holds:
  - `find_pair_two_pointer` and `find_pair_binary`, which find index pairs
    summing to a total in sorted lists.
  - `count_common`.
  - `min_coins`, which makes greedy coin change.

## Examples

```python
from algokit.tree import build_bst, in_order
from algokit.validate import validate_by_bounds
from algokit.grids import count_queen_placements
from algokit.containers import MinStack

root = build_bst(sorted([100, 2, 3, 4, 0, 45]))
print([node.value for node in in_order(root)])  # [0, 2, 3, 4, 45, 100]
print(validate_by_bounds(root))                 # True

print(count_queen_placements(8))                # 92

stack = MinStack()
for value in (4, 5, 1, 7):
    stack.push(value)
print(stack.min(), stack.top())                 # 1 7
```

## What it does not do

- The red-black tree in `algokit.redblack` supports insertion only. It has
  no removal and no lookup beyond iterating the values in order.
- The package provides no command-line program.