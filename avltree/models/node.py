"""
Tree node and the height/balance helpers shared by the AVL algorithms.

Heights count edges: a leaf has height 0 and an empty subtree -1.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """Node in the AVL Tree. Owns its left and right subtrees."""

    key: Any
    value: Any
    height: int = 0
    left: "Node | None" = None
    right: "Node | None" = None


def node_height(node: Node | None) -> int:
    """Cached height of a subtree, -1 for an empty one."""
    return -1 if node is None else node.height


def balance_factor(node: Node | None) -> int:
    """Right subtree height minus left subtree height."""
    if node is None:
        return 0
    return node_height(node.right) - node_height(node.left)


def update_height(node: Node) -> None:
    """Recompute a node's cached height from its children."""
    node.height = 1 + max(node_height(node.left), node_height(node.right))
