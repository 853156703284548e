"""
Sorted container implementations.
"""

from avltree.models.sortedcontainers.avl_tree import AVLTree

__all__ = ["AVLTree"]
