"""A search tree of the zodiac signs, drawn and walked in order."""

from __future__ import annotations

import contextlib
import sys
from typing import Iterable, Optional

from .bst import BinarySearchTree, DuplicateKeyError

SIGNS = (
    "piscis",
    "acuario",
    "capricornio",
    "cancer",
    "sagitario",
    "virgo",
    "leo",
    "escorpión",
    "libra",
    "géminis",
    "aries",
    "tauro",
)

_LEVEL_INDENT = " " * 18


def build_sign_tree(signs: Iterable[str] = SIGNS) -> BinarySearchTree:
    """Insert the signs in order; repeated names are kept once."""
    result = BinarySearchTree()
    for sign in signs:
        with contextlib.suppress(DuplicateKeyError):
            result.insert(sign)
    return result


def report(tree: BinarySearchTree) -> str:
    """Return the drawing, the in-order walk and the extremes of the tree."""
    walk = "".join(f"{sign}-" for sign in tree)
    largest = tree.maximum() if tree else ""
    smallest = tree.minimum() if tree else ""
    return (
        "\nÁrbol (vista en consola):\n"
        + tree.render(_LEVEL_INDENT)
        + "\nRecorrido Inorden:\n\n"
        + walk
        + "\n"
        + f"\nMAXIMO: {largest}\n"
        + "\n"
        + f"\nMINIMO: {smallest}\n"
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Print the report for the twelve signs."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8")
    sys.stdout.write(report(build_sign_tree(SIGNS)))
    return 0