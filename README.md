# arboles

Binary trees and binary search trees: preorder, inorder and postorder
traversals, height, node and leaf counts, a completeness check, search,
insertion, deletion and a sideways text drawing of the tree. Three small
console programs put these to use; their prompts and messages are in Spanish.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

`arbol-binario` builds a binary tree by asking, node by node, for its value
and whether it has a left and a right child (answer `1` for yes, `0` for no).
A menu then shows the tree, its preorder, inorder and postorder traversals,
its height, its node and leaf counts, and whether it is complete. Option `0`
exits; the program also stops when the input ends or is not an integer.

`arbol-abb` keeps a binary search tree of integers. Its menu inserts values
(with a duplicate check, or iteratively without one), searches for them,
shows the tree and its traversals, reports height, node and leaf counts,
maximum and minimum, deletes a value, removes the root, or clears the whole
tree. When both standard input and output are a terminal it clears the
screen before each step and waits for Enter after it.

`arbol-signos` inserts the twelve zodiac signs into a binary search tree of
strings and prints the tree, its inorder traversal, and its maximum and
minimum.

## Library use

`arboles.tree` works on plain `Node` objects (`value`, `left`, `right`):

```python
from arboles.tree import Node, preorder, inorder, postorder, height, is_complete, render

root = Node(1, Node(2), Node(3))
list(preorder(root))   # [1, 2, 3]
list(inorder(root))    # [2, 1, 3]
list(postorder(root))  # [2, 3, 1]
height(root)           # 2
is_complete(root)      # True
print(render(root, "   "))
```

`render` draws the tree sideways, right subtree on top, one node per line;
its `indent` is either a string repeated once per level or a function from
level to prefix. `count_nodes`, `leaves` and `count_leaves` are also
available.

`arboles.bst.BinarySearchTree` holds any ordered keys:

```python
from arboles.bst import BinarySearchTree, DuplicateKeyError

tree = BinarySearchTree([50, 30, 70, 20, 40])
40 in tree             # True
list(tree)             # [20, 30, 40, 50, 70]
len(tree)              # 5
tree.maximum()         # 70
tree.delete(30)
tree.remove_root()     # 50
try:
    tree.insert(20)
except DuplicateKeyError:
    pass
```

`insert` raises `DuplicateKeyError` for a key already present, while
`insert_iterative` adds it anyway, to the right. `delete` raises
`KeyNotFoundError` for a missing key; a node with two children takes its
in-order predecessor's key. `maximum` and `minimum` raise `EmptyTreeError`
on an empty tree. `preorder`, `postorder`, `height`, `leaves`, `clear` and
`render` complete the interface.

`arboles.signs` offers `build_sign_tree` and `report`, which returns the
text that `arbol-signos` prints.