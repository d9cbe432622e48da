"""Binary tree nodes and the traversals and measures that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

Indent = Union[str, Callable[[int], str]]


@dataclass
class Node:
    """A binary tree node holding a value and two optional children."""

    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


def _preorder_nodes(node: Optional[Node]) -> Iterator[Node]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def preorder(node: Optional[Node]) -> Iterator[Any]:
    """Yield values root first, then the left subtree, then the right."""
    for current in _preorder_nodes(node):
        yield current.value


def inorder(node: Optional[Node]) -> Iterator[Any]:
    """Yield values of the left subtree, then the root, then the right."""
    stack: list[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.value
        current = current.right


def postorder(node: Optional[Node]) -> Iterator[Any]:
    """Yield values of the left subtree, then the right, then the root."""
    reversed_order: list[Any] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        reversed_order.append(current.value)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    yield from reversed(reversed_order)


def height(node: Optional[Node]) -> int:
    """Return the number of levels in the tree; an empty tree has height 0."""
    levels = 0
    level = [node] if node is not None else []
    while level:
        levels += 1
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]
    return levels


def count_nodes(node: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _preorder_nodes(node))


def leaves(node: Optional[Node]) -> Iterator[Any]:
    """Yield the values of leaf nodes from left to right."""
    for current in _preorder_nodes(node):
        if current.is_leaf():
            yield current.value


def count_leaves(node: Optional[Node]) -> int:
    """Return the number of leaf nodes."""
    return sum(1 for _ in leaves(node))


def is_complete(node: Optional[Node]) -> bool:
    """Return True when every level of the tree is full."""
    return count_nodes(node) == 2 ** height(node) - 1


def render(node: Optional[Node], indent: Indent = "   ") -> str:
    """Draw the tree sideways: right subtree on top, one node per line.

    ``indent`` is either the text repeated once per level or a function
    that maps a level to its prefix.
    """
    if callable(indent):
        prefix = indent
    else:
        unit = indent

        def prefix(level: int) -> str:
            return unit * level

    lines: list[str] = []
    stack: list[tuple[Node, int]] = []
    current, level = node, 0
    while stack or current is not None:
        while current is not None:
            stack.append((current, level))
            current, level = current.right, level + 1
        current, level = stack.pop()
        lines.append(f"{prefix(level)}{current.value}\n")
        current, level = current.left, level + 1
    return "".join(lines)