"""A binary search tree over any ordered keys."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from . import tree
from .tree import Indent, Node


class DuplicateKeyError(ValueError):
    """The key is already in the tree."""


class KeyNotFoundError(KeyError):
    """The key is not in the tree."""


class EmptyTreeError(ValueError):
    """The operation needs a tree with at least one node."""


def _field_indent(level: int) -> str:
    # A single space padded to a field of five characters per level.
    return " " * max(level * 5, 1)


class BinarySearchTree:
    """Binary search tree; smaller keys go left, larger keys go right."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[Node] = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert ``key``; raise DuplicateKeyError if it is already present."""
        new = Node(key)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if key < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            elif key > node.value:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                raise DuplicateKeyError(key)

    def insert_iterative(self, key: Any) -> None:
        """Insert ``key`` without a duplicate check; equal keys go right."""
        new = Node(key)
        if self.root is None:
            self.root = new
            return
        parent = None
        node: Optional[Node] = self.root
        while node is not None:
            parent = node
            node = node.left if key < node.value else node.right
        if parent.value > key:
            parent.left = new
        else:
            parent.right = new

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key < node.value:
                node = node.left
            elif key > node.value:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        return tree.inorder(self.root)

    def __len__(self) -> int:
        return tree.count_nodes(self.root)

    def __bool__(self) -> bool:
        return self.root is not None

    def preorder(self) -> Iterator[Any]:
        """Yield keys root first."""
        return tree.preorder(self.root)

    def postorder(self) -> Iterator[Any]:
        """Yield keys root last."""
        return tree.postorder(self.root)

    def height(self) -> int:
        """Return the number of levels."""
        return tree.height(self.root)

    def leaves(self) -> Iterator[Any]:
        """Yield the keys of leaf nodes from left to right."""
        return tree.leaves(self.root)

    def _require_root(self) -> Node:
        if self.root is None:
            raise EmptyTreeError("the tree is empty")
        return self.root

    def maximum(self) -> Any:
        """Return the largest key."""
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.value

    def minimum(self) -> Any:
        """Return the smallest key."""
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.value

    def _relink(self, parent: Optional[Node], child: Node, replacement: Optional[Node]) -> None:
        if parent is None:
            self.root = replacement
        elif parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def delete(self, key: Any) -> None:
        """Remove ``key``; a node with two children takes its predecessor's key."""
        parent: Optional[Node] = None
        node = self.root
        while node is not None:
            if key < node.value:
                parent, node = node, node.left
            elif key > node.value:
                parent, node = node, node.right
            else:
                break
        if node is None:
            raise KeyNotFoundError(key)

        if node.right is None:
            self._relink(parent, node, node.left)
        elif node.left is None:
            self._relink(parent, node, node.right)
        else:
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.value = pred.value
            if pred_parent is node:
                node.left = pred.left
            else:
                pred_parent.right = pred.left

    def remove_root(self) -> Any:
        """Remove the root, replacing it by its in-order predecessor; return its key."""
        root = self._require_root()
        if root.left is None:
            self.root = root.right
            return root.value
        parent, replacement = root, root.left
        while replacement.right is not None:
            parent, replacement = replacement, replacement.right
        if parent is not root:
            parent.right = replacement.left
            replacement.left = root.left
        replacement.right = root.right
        self.root = replacement
        return root.value

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def render(self, indent: Indent = _field_indent) -> str:
        """Draw the tree sideways, right subtree on top."""
        return tree.render(self.root, indent)