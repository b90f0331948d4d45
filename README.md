# avlkit

An AVL tree is a binary search tree that keeps itself balanced by height.
Each insertion and removal rebalances the tree with single or double
rotations, so lookups stay logarithmic. The tree holds unique keys, so
inserting a key that is already present does nothing. Keys can be any
mutually comparable values. The report command works with integers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the tree

```python
from avlkit.tree import AVLTree

tree = AVLTree([20, 9, 50, 7, 12, 25, 65])

len(tree)                      # 7
12 in tree                     # True
list(tree)                     # [7, 9, 12, 20, 25, 50, 65]
list(tree.level_order())       # breadth first, root first, left to right
list(tree.pre_order())
list(tree.post_order())

tree.minimum(), tree.maximum() # ValueError on an empty tree
tree.total()                   # sum of all keys
tree.leaf_count()
tree.height()                  # -1 for an empty tree, 0 for a single node
tree.in_range(10, 50)          # keys k with 10 <= k <= 50, ascending
tree.kth_smallest(2)           # counts from 1; IndexError when out of range
tree.level_of(9)               # depth of a key (root is 0), None if absent
tree.same_level(9, 25)         # True only if both keys are present at one depth
tree.is_balanced()             # checks every stored balance factor

tree.insert(1)                 # True if added, False if it was already there
tree.remove(20)                # True if removed, False if it was absent
print(tree.render())           # indented drawing of the structure
print(tree.nested())           # key[balance](children) notation
```

`in_order()`, `pre_order()`, `post_order()` and `level_order()` return
iterators. Iterating over the tree itself gives the keys in ascending order.

`find(key)` returns the `Node` that holds a key, or `None`. A `Node` has
`key`, `left`, `right` and `balance` attributes. `balance` is the height of
the right subtree minus the height of the left subtree.

`find_with_parent(key)` returns `(node, parent)`. If the key is absent, `node`
is `None` and `parent` is the last node visited. `clear()` empties the tree.

Rotations are logged at debug level through the `avlkit.tree` logger.

## Report command

The `avlkit-demo` command prints a report on a tree. The report covers the
sum, leaf and node counts, the first three smallest keys and the keys in
[10, 50]. It also gives the minimum and maximum, whether the pairs
(9, 25), (7, 65) and (20, 20) share a level, and the level order. It ends
with a drawing of the tree, the levels of 9 and 65, and a balance check.

```
avlkit-demo              # sample tree of 20 9 50 7 12 25 65
avlkit-demo 5 3 8 1 4    # tree of the given integer keys
```

From Python, the same report comes from `avlkit.cli.build_demo_tree()` and
`avlkit.cli.demo_report(tree)`. For an empty tree, `demo_report` returns
"The tree is empty.".

## Limits

The tree lives in memory only. It has no way to save itself to a file or
load itself from one.