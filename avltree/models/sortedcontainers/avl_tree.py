"""
AVL Tree implementation for ordered key-value storage.

Height-balanced binary search tree with O(log N) search, insert and delete.
Keys are ordered by a caller-supplied three-way comparator.
"""

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any

from avltree.comparators import Comparator
from avltree.interfaces.sorted_container import SortedContainer
from avltree.models.exceptions import KeyNotFoundError, TreeInvariantError
from avltree.models.node import Node, balance_factor, node_height, update_height

logger = logging.getLogger(__name__)


class AVLTree(SortedContainer):
    """
    AVL Tree implementation of SortedContainer.

    Properties maintained after every insert and delete:
    1. Every key in a node's left subtree sorts before the node's key,
       every key in its right subtree sorts after it
    2. Each node caches height = 1 + max(left height, right height),
       with an empty subtree at -1
    3. Left and right subtree heights differ by at most one at every node
    """

    def __init__(self, compare: Comparator) -> None:
        if not callable(compare):
            raise TypeError(f"compare must be callable, got {type(compare).__name__}")
        self._compare = compare
        self._root: Node | None = None
        self._size: int = 0

    @property
    def compare(self) -> Comparator:
        return self._compare

    def insert(self, key: Any, value: Any) -> None:
        """Insert or overwrite a key-value pair. O(log N)"""
        self._root = self._insert(self._root, key, value)

    def search(self, key: Any) -> Any:
        """Retrieve value by key, raising KeyNotFoundError if absent. O(log N)"""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def get(self, key: Any, default: Any = None) -> Any:
        """Retrieve value by key, or default if absent. O(log N)"""
        node = self._find_node(key)
        return node.value if node is not None else default

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair if present. O(log N)"""
        size_before = self._size
        self._root = self._delete(self._root, key)
        if self._size == size_before:
            logger.debug(f"Delete of absent key {key!r} ignored")
            return False
        return True

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return node_height(self._root)

    def keys(self) -> Iterator[Any]:
        return (key for key, _ in self)

    def values(self) -> Iterator[Any]:
        return (value for _, value in self)

    def validate(self) -> None:
        """
        Check every structural invariant by walking the whole tree.

        Raises:
            TreeInvariantError: On the first violation found.

        Time complexity: O(N)
        """
        count = self._validate_subtree(self._root, None, None)
        if count != self._size:
            key = self._root.key if self._root is not None else None
            raise TreeInvariantError(
                "size", key, f"cached size is {self._size} but {count} nodes are reachable"
            )

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return _InOrderIterator(self._root)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncInOrderIterator(self._root)

    def __str__(self) -> str:
        return f"AVL tree of size {self.size()} and height {self.height()}"

    def __repr__(self) -> str:
        return f"AVLTree(size={self.size()}, height={self.height()})"

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            cmp = self._compare(key, current.key)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return current
        return None

    def _insert(self, node: Node | None, key: Any, value: Any) -> Node:
        """Insert into the subtree rooted at node and return its new root."""
        if node is None:
            self._size += 1
            return Node(key=key, value=value)

        cmp = self._compare(key, node.key)
        if cmp < 0:
            node.left = self._insert(node.left, key, value)
        elif cmp > 0:
            node.right = self._insert(node.right, key, value)
        else:
            # Key exists, shape is unchanged
            node.value = value
            return node

        return self._rebalance(node)

    def _delete(self, node: Node | None, key: Any) -> Node | None:
        """Delete from the subtree rooted at node and return its new root."""
        if node is None:
            return None

        cmp = self._compare(key, node.key)
        if cmp < 0:
            node.left = self._delete(node.left, key)
        elif cmp > 0:
            node.right = self._delete(node.right, key)
        elif node.left is None or node.right is None:
            # Zero or one child: splice the child into this position
            self._size -= 1
            return node.left if node.left is not None else node.right
        else:
            # Two children: take over the in-order successor's entry
            successor = self._leftmost(node.right)
            node.key = successor.key
            node.value = successor.value
            node.right = self._delete(node.right, successor.key)

        return self._rebalance(node)

    @staticmethod
    def _leftmost(node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _rebalance(node: Node) -> Node:
        """
        Restore the balance property at node, whose subtrees are balanced.

        Returns the root of the rebalanced subtree for the parent to link.
        """
        update_height(node)
        balance = balance_factor(node)

        if balance > 1:
            if node_height(node.right.right) >= node_height(node.right.left):
                logger.debug(f"Right-right imbalance at key {node.key!r}")
            else:
                logger.debug(f"Right-left imbalance at key {node.key!r}")
                node.right = AVLTree._rotate_right(node.right)
            node = AVLTree._rotate_left(node)
        elif balance < -1:
            if node_height(node.left.left) >= node_height(node.left.right):
                logger.debug(f"Left-left imbalance at key {node.key!r}")
            else:
                logger.debug(f"Left-right imbalance at key {node.key!r}")
                node.left = AVLTree._rotate_left(node.left)
            node = AVLTree._rotate_right(node)

        return node

    @staticmethod
    def _rotate_left(node: Node) -> Node:
        """Left rotation. The right child takes node's place."""
        right_child = node.right
        node.right = right_child.left
        right_child.left = node

        # Demoted node first, its height feeds the new root's
        update_height(node)
        update_height(right_child)
        return right_child

    @staticmethod
    def _rotate_right(node: Node) -> Node:
        """Right rotation. The left child takes node's place."""
        left_child = node.left
        node.left = left_child.right
        left_child.right = node

        update_height(node)
        update_height(left_child)
        return left_child

    def _validate_subtree(self, node: Node | None, low: Node | None, high: Node | None) -> int:
        """Validate the subtree rooted at node and return its node count."""
        if node is None:
            return 0

        if low is not None and self._compare(node.key, low.key) <= 0:
            raise TreeInvariantError("order", node.key, f"not greater than ancestor key {low.key!r}")
        if high is not None and self._compare(node.key, high.key) >= 0:
            raise TreeInvariantError("order", node.key, f"not less than ancestor key {high.key!r}")

        count = 1
        count += self._validate_subtree(node.left, low, node)
        count += self._validate_subtree(node.right, node, high)

        expected = 1 + max(node_height(node.left), node_height(node.right))
        if node.height != expected:
            raise TreeInvariantError("height", node.key, f"cached height {node.height}, actual {expected}")

        balance = balance_factor(node)
        if abs(balance) > 1:
            raise TreeInvariantError("balance", node.key, f"balance factor {balance}")

        return count


class _InOrderIterator(Iterator[tuple[Any, Any]]):
    """Lazy in-order iterator over an AVL Tree."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()
        result = (node.key, node.value)

        # Push right subtree's left path
        self._push_left_path(node.right)

        return result

    def _push_left_path(self, node: Node | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left


class _AsyncInOrderIterator(AsyncIterator[tuple[Any, Any]]):
    """Async in-order iterator over an AVL Tree (in-memory, no I/O)."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __aiter__(self) -> "_AsyncInOrderIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopAsyncIteration

        node = self._stack.pop()
        result = (node.key, node.value)

        self._push_left_path(node.right)

        return result

    def _push_left_path(self, node: Node | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left
