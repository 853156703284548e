"""
SortedContainer abstract base class for ordered key-value data structures.
"""

from abc import abstractmethod
from typing import Any

from avltree.interfaces.ordered_iterable import OrderedIterable


class SortedContainer(OrderedIterable):
    """
    Abstract base class for ordered key-value containers.

    Keys are ordered by a caller-supplied three-way comparator rather than
    by the key type's own ordering. Provides O(log N) insert, search and
    delete. Inherits in-order iteration from OrderedIterable.

    Implementations:
    - AVLTree: height-balanced binary search tree
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """
        Insert a key-value pair, overwriting the value of an existing key.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, key: Any) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value stored under the key.

        Raises:
            KeyNotFoundError: If no entry holds the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: Any, default: Any = None) -> Any:
        """
        Retrieve the value for a given key without raising.

        Args:
            key: The key to look up.
            default: Returned when the key is absent.

        Returns:
            The value if found, default otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair. Deleting an absent key is a no-op.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the container.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def height(self) -> int:
        """
        Return the height of the container's underlying tree.

        Returns:
            Edge count of the longest root-to-leaf path, -1 when empty.
        """
        pass
