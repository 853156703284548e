"""
In-memory ordered key-value container backed by an AVL tree.

This package provides a height-balanced binary search tree with:
- insert(key, value) - O(log N), overwrites an existing key's value
- search(key) - O(log N), raises KeyNotFoundError for an absent key
- delete(key) - O(log N), no-op for an absent key
- In-order iteration, sync and async

Key order comes from a three-way comparator supplied by the caller.
"""

from avltree.comparators import Comparator, by_key, natural_order, reverse_order
from avltree.models.exceptions import KeyNotFoundError, TreeInvariantError
from avltree.models.sortedcontainers import AVLTree

__all__ = [
    "AVLTree",
    "Comparator",
    "KeyNotFoundError",
    "TreeInvariantError",
    "by_key",
    "natural_order",
    "reverse_order",
]
