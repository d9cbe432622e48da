"""Binary trees and binary search trees with console menus."""

__version__ = "0.1.0"
__all__ = ["tree", "bst", "binary_menu", "bst_menu", "signs"]