"""
Data models for the AVL tree.
"""

from avltree.models.exceptions import KeyNotFoundError, TreeInvariantError
from avltree.models.node import Node, balance_factor, node_height, update_height

__all__ = [
    "Node",
    "node_height",
    "balance_factor",
    "update_height",
    "KeyNotFoundError",
    "TreeInvariantError",
]
