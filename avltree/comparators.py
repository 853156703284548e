"""
Three-way comparators for ordering tree keys.

A comparator returns a negative int, zero or a positive int when its first
argument sorts before, equal to or after its second. Only the sign matters.
"""

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Order keys by their own < and > operators."""
    return (a > b) - (a < b)


def reverse_order(compare: Comparator) -> Comparator:
    """Return a comparator sorting in the opposite direction of compare."""

    def reversed_compare(a: Any, b: Any) -> int:
        return compare(b, a)

    return reversed_compare


def by_key(key_func: Callable[[Any], Any], compare: Comparator = natural_order) -> Comparator:
    """
    Return a comparator that orders keys by key_func(key).

    Keys mapping to the same value compare equal, so the tree treats them as
    the same entry.
    """

    def keyed_compare(a: Any, b: Any) -> int:
        return compare(key_func(a), key_func(b))

    return keyed_compare
