"""
Custom exceptions for the AVL tree.
"""

from typing import Any


class KeyNotFoundError(KeyError):
    """
    Raised when a search finds no entry for the requested key.

    Recoverable: the tree is left unchanged.
    """

    def __init__(self, key: Any):
        """
        Initialize lookup error.

        Args:
            key: The key that was searched for.
        """
        self.key = key
        super().__init__(f"Key not found: {key!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class TreeInvariantError(Exception):
    """
    Raised by AVLTree.validate() when the tree structure is inconsistent.

    Indicates a defect in the balancing code or a tree corrupted from
    outside; never raised by ordinary operations.
    """

    def __init__(self, invariant: str, key: Any, detail: str):
        """
        Initialize invariant error.

        Args:
            invariant: Name of the broken invariant ("order", "height",
                "balance" or "size").
            key: Key of the node where the violation was found.
            detail: Human-readable description.
        """
        self.invariant = invariant
        self.key = key
        super().__init__(f"{invariant} invariant violated at key {key!r}: {detail}")
