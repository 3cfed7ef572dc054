# bintree

A small binary tree of integers. Each node knows its parent. The package gives
the usual traversals and measurements and a compact ASCII drawing of a tree.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)              # same as Node(98, None)
root.left = Node(12, root)
root.right = Node(402, root)

root.left.insert_right(54)   # becomes the right child of 12
root.insert_right(128)       # 402 moves down to be the right child of 128
```

`Node(value, parent)` only sets the node's parent link. To hang the node in
the tree, assign it to the parent's `left` or `right` yourself.

`insert_left(value)` and `insert_right(value)` create a node and put it in
place of the existing child on that side. The old child, if there was one,
becomes the same-side child of the new node. Both methods return the new node.

## Walking the tree

The traversal methods are generators of values:

```python
list(root.preorder())    # node, then left subtree, then right subtree
list(root.inorder())     # left subtree, node, right subtree
list(root.postorder())   # left subtree, right subtree, node
```

## Measurements and checks

Each of these applies to the subtree rooted at the node it is called on,
except `depth()`, which looks upward.

| Method             | Result                                               |
|--------------------|------------------------------------------------------|
| `height()`         | edges on the longest downward path (0 for a leaf)    |
| `depth()`          | edges up to the root (0 for a root)                  |
| `size()`           | number of nodes                                      |
| `leaves()`         | number of nodes with no children                     |
| `internal_nodes()` | number of nodes with at least one child              |
| `balance()`        | height of left subtree minus height of right subtree |
| `is_leaf()`        | `True` if the node has no children                   |
| `is_root()`        | `True` if the node has no parent                     |
| `is_full()`        | `True` if every node has zero or two children        |
| `is_perfect()`     | `True` if full and all leaves are at the same depth  |
| `sibling()`        | the other child of the parent, or `None`             |
| `uncle()`          | the sibling of the parent, or `None`                 |

In `balance()`, a missing child counts as height 0 and a present child counts
as its own height plus one.

`delete()` detaches the node from its parent and clears the `parent`, `left`
and `right` links of every node in its subtree.

## Drawing

```python
from bintree.render import render, print_tree

text = render(root)      # a string, one newline-terminated line per level
print_tree(root)         # writes the same text to standard output
```

`print_tree(tree, file)` writes to any text file object. `file` defaults to
standard output. `render(None)` returns an empty string.

Each value is shown as `(nnn)`, zero padded to three digits, with dashes and
dots joining parents to their children:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## What it does not do

`bintree` is a library only. It has no command-line program, and it does not
save or load trees.